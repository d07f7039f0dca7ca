"""GeometryKernel - The construction services used by the Terrain Face Builder.

Bundles the kernel primitives behind one injectable object so the builder does
not depend on module-level functions. Tests and hosts may pass any object with
the same methods (for example a kernel backed by a CAD engine).
"""

from typing import Sequence

import numpy as np

from site_geometry.constants import KernelConfig
from site_geometry.geometry.curves import BoundLine, CurveLoop, Plane
from site_geometry.geometry.faces import PlanarFace
from site_geometry.geometry.solids import Solid, create_extrusion_geometry, get_face_by_normal
from site_geometry.model.point import Point3D


class GeometryKernel:
    """Default in-process geometry kernel.

    Example:
        kernel = GeometryKernel()
        loop = kernel.create_loop([(a, b), (b, c), (c, a)])
        solid = kernel.extrude(loop, kernel.plane_of(loop).normal, 0.0328084)
        top = kernel.face_by_normal(solid, kernel.plane_of(loop).normal)
    """

    def __init__(
        self,
        short_curve_tolerance: float = KernelConfig.SHORT_CURVE_TOLERANCE,
        vertex_tolerance: float = KernelConfig.VERTEX_TOLERANCE,
        angle_tolerance: float = KernelConfig.ANGLE_TOLERANCE,
    ):
        self.short_curve_tolerance = short_curve_tolerance
        self.vertex_tolerance = vertex_tolerance
        self.angle_tolerance = angle_tolerance

    def create_loop(self, edges: Sequence[tuple[Point3D, Point3D]]) -> CurveLoop:
        """Bound every edge and close them into a loop."""
        curves = [
            BoundLine.create_bound(start, end, short_curve_tolerance=self.short_curve_tolerance)
            for start, end in edges
        ]
        return CurveLoop.create(curves, vertex_tolerance=self.vertex_tolerance)

    def plane_of(self, loop: CurveLoop) -> Plane:
        return loop.get_plane()

    def extrude(self, loop: CurveLoop, direction: np.ndarray, distance: float) -> Solid:
        return create_extrusion_geometry(
            [loop],
            direction=direction,
            distance=distance,
            angle_tolerance=self.angle_tolerance,
        )

    def face_by_normal(self, solid: Solid, normal: np.ndarray) -> PlanarFace:
        return get_face_by_normal(solid, normal, angle_tolerance=self.angle_tolerance)
