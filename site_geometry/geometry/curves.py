"""Bounded lines, closed curve loops and planes.

These are the construction primitives a terrain triangle goes through before
it can be extruded: three bounded lines, closed into a loop, from which the
contour plane is derived.
"""

from dataclasses import dataclass
from typing import Sequence

import numpy as np

from site_geometry.constants import KernelConfig
from site_geometry.geometry.errors import (
    DegenerateGeometryError,
    GeometryConstructionError,
    ShortCurveError,
)
from site_geometry.model.point import Point3D


@dataclass(frozen=True)
class BoundLine:
    """A line bounded by two endpoints, guaranteed longer than the short curve tolerance.

    Create with BoundLine.create_bound() so the length check is applied.

    Attributes:
        start: First endpoint
        end: Second endpoint
    """

    start: Point3D
    end: Point3D

    @classmethod
    def create_bound(
        cls,
        start: Point3D,
        end: Point3D,
        short_curve_tolerance: float = KernelConfig.SHORT_CURVE_TOLERANCE,
    ) -> "BoundLine":
        """Create a bounded line between two points.

        Args:
            start: First endpoint
            end: Second endpoint
            short_curve_tolerance: Minimum allowed length

        Returns:
            The bounded line.

        Raises:
            ShortCurveError: If the points are closer than the tolerance.
        """
        length = start.distance_to(end)
        if length < short_curve_tolerance:
            raise ShortCurveError(length=length, tolerance=short_curve_tolerance)
        return cls(start=start, end=end)

    @property
    def length(self) -> float:
        return self.start.distance_to(self.end)

    @property
    def direction(self) -> np.ndarray:
        vector = self.end.as_array() - self.start.as_array()
        return vector / np.linalg.norm(vector)

    def evaluate(self, t: float) -> Point3D:
        """Point at normalized parameter t (0 = start, 1 = end)."""
        start = self.start.as_array()
        return Point3D.from_array(start + t * (self.end.as_array() - start))


@dataclass(frozen=True, eq=False)
class Plane:
    """An oriented plane.

    Attributes:
        origin: A point on the plane
        normal: Unit normal vector
    """

    origin: np.ndarray
    normal: np.ndarray


def newell_normal(vertices: np.ndarray) -> np.ndarray:
    """Unnormalized polygon normal using Newell's method.

    The length of the result is twice the polygon's area, so a zero vector
    means collinear or coincident vertices.
    """
    shifted = np.roll(vertices, -1, axis=0)
    return np.array(
        [
            np.sum((vertices[:, 1] - shifted[:, 1]) * (vertices[:, 2] + shifted[:, 2])),
            np.sum((vertices[:, 2] - shifted[:, 2]) * (vertices[:, 0] + shifted[:, 0])),
            np.sum((vertices[:, 0] - shifted[:, 0]) * (vertices[:, 1] + shifted[:, 1])),
        ]
    )


class CurveLoop:
    """A closed, contiguous sequence of bounded lines.

    Example:
        lines = [BoundLine.create_bound(a, b), BoundLine.create_bound(b, c), BoundLine.create_bound(c, a)]
        loop = CurveLoop.create(lines)
        normal = loop.get_plane().normal
    """

    def __init__(self, curves: list[BoundLine]):
        self._curves = curves

    @classmethod
    def create(
        cls,
        curves: Sequence[BoundLine],
        vertex_tolerance: float = KernelConfig.VERTEX_TOLERANCE,
    ) -> "CurveLoop":
        """Create a closed loop, checking every curve end meets the next curve start.

        Raises:
            GeometryConstructionError: If the loop is empty, open or discontinuous.
        """
        curves = list(curves)
        if len(curves) < 2:
            raise GeometryConstructionError(f"A curve loop needs at least 2 curves, got {len(curves)}")

        for i, curve in enumerate(curves):
            following = curves[(i + 1) % len(curves)]
            gap = curve.end.distance_to(following.start)
            if gap > vertex_tolerance:
                raise GeometryConstructionError(f"Curve loop is not contiguous at curve {i}: gap {gap:.6g}")

        return cls(curves)

    @property
    def curves(self) -> list[BoundLine]:
        return list(self._curves)

    def __len__(self) -> int:
        return len(self._curves)

    @property
    def vertices(self) -> np.ndarray:
        """Start points of all curves as an (N, 3) array, in loop order."""
        return np.array([curve.start.as_tuple() for curve in self._curves], dtype=float)

    def get_plane(self, planarity_tolerance: float = KernelConfig.PLANARITY_TOLERANCE) -> Plane:
        """Plane containing the loop, oriented counter-clockwise by the loop direction.

        Raises:
            DegenerateGeometryError: If the vertices are collinear or not coplanar.
        """
        vertices = self.vertices
        normal = newell_normal(vertices)
        norm = np.linalg.norm(normal)

        # Twice the enclosed area; scale-aware test against the loop's size
        extent = max(np.linalg.norm(vertices - vertices[0], axis=1).max(), 1.0)
        if norm <= KernelConfig.PARAMETER_EPSILON * extent * extent:
            raise DegenerateGeometryError("Curve loop is collinear and does not define a plane")

        normal = normal / norm
        origin = vertices.mean(axis=0)
        deviations = np.abs((vertices - origin) @ normal)
        if deviations.max() > planarity_tolerance:
            raise DegenerateGeometryError(f"Curve loop is not planar: max deviation {deviations.max():.6g}")

        return Plane(origin=origin, normal=normal)
