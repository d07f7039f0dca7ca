"""Planar geometry kernel.

Stands in for the construction services of a CAD modeling engine:
- BoundLine / CurveLoop / Plane: contour construction with length and closure checks
- PlanarFace: convex faces with face/curve intersection classification
- Solid / create_extrusion_geometry / get_face_by_normal: thin prisms and face selection
- GeometryKernel: injectable bundle of the above
- errors: GeometryError hierarchy
"""

from site_geometry.geometry.curves import BoundLine, CurveLoop, Plane
from site_geometry.geometry.errors import (
    DegenerateGeometryError,
    FaceNotFoundError,
    GeometryConstructionError,
    GeometryError,
    ShortCurveError,
)
from site_geometry.geometry.faces import IntersectionHit, PlanarFace, SetComparisonResult
from site_geometry.geometry.kernel import GeometryKernel
from site_geometry.geometry.solids import Solid, create_extrusion_geometry, get_face_by_normal

__all__ = [
    # Curves
    "BoundLine",
    "CurveLoop",
    "Plane",
    # Faces
    "PlanarFace",
    "IntersectionHit",
    "SetComparisonResult",
    # Solids
    "Solid",
    "create_extrusion_geometry",
    "get_face_by_normal",
    # Kernel
    "GeometryKernel",
    # Errors
    "GeometryError",
    "GeometryConstructionError",
    "ShortCurveError",
    "DegenerateGeometryError",
    "FaceNotFoundError",
]
