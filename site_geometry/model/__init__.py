"""Data model classes for site geometry processing.

- Point3D: Geometry atom (x, y, z)
- LineSegment: Ordered pair of points
- Triangle: One face of a terrain mesh
- GroundFace: Intersection target built from a triangle
- SkippedTriangle: Triangle rejected by the geometry kernel
- GroundFaceSet: Builder output (faces + skipped triangles)
- TerrainHit: Detailed first-intersection result
"""

from site_geometry.model.point import Point3D
from site_geometry.model.line_segment import LineSegment
from site_geometry.model.triangle import Triangle
from site_geometry.model.ground_face import (
    GroundFace,
    GroundFaceSet,
    SkippedTriangle,
    TerrainHit,
)

__all__ = [
    "Point3D",
    "LineSegment",
    "Triangle",
    "GroundFace",
    "GroundFaceSet",
    "SkippedTriangle",
    "TerrainHit",
]
