"""Planar faces and face/curve intersection.

A PlanarFace is a convex planar polygon with an outward normal. Its
intersect() method classifies a straight curve against the face the way a CAD
kernel does: disjoint, crossing the face (overlap) or lying in the face plane
(subset).
"""

from dataclasses import dataclass
from enum import Enum
from typing import Protocol

import numpy as np

from site_geometry.constants import KernelConfig
from site_geometry.geometry.curves import newell_normal
from site_geometry.geometry.errors import DegenerateGeometryError
from site_geometry.model.point import Point3D


class SetComparisonResult(Enum):
    """Classification of a face/curve intersection test."""

    DISJOINT = "disjoint"  # No shared point
    OVERLAP = "overlap"  # Curve crosses the face at isolated points
    SUBSET = "subset"  # Curve lies in the face plane and touches the face


class StraightCurve(Protocol):
    """Anything with start and end points (LineSegment, BoundLine)."""

    start: Point3D
    end: Point3D


@dataclass(frozen=True)
class IntersectionHit:
    """One intersection point between a face and a curve.

    Attributes:
        point: Location of the intersection
        parameter: Normalized position along the curve (0 = start, 1 = end)
    """

    point: Point3D
    parameter: float


class PlanarFace:
    """A convex planar polygon with an outward-facing normal.

    Vertices are stored counter-clockwise when viewed against the normal.
    """

    def __init__(self, vertices: np.ndarray):
        vertices = np.asarray(vertices, dtype=float)
        if vertices.ndim != 2 or vertices.shape[1] != 3 or len(vertices) < 3:
            raise DegenerateGeometryError(f"A planar face needs at least 3 vertices, got shape {vertices.shape}")
        normal = newell_normal(vertices)
        norm = np.linalg.norm(normal)
        if norm == 0.0:
            raise DegenerateGeometryError("Planar face vertices are collinear")
        self._vertices = vertices
        self._normal = normal / norm

    @property
    def vertices(self) -> np.ndarray:
        return self._vertices.copy()

    @property
    def normal(self) -> np.ndarray:
        """Unit outward normal."""
        return self._normal.copy()

    @property
    def origin(self) -> np.ndarray:
        return self._vertices[0].copy()

    def _edge_tolerance(self) -> float:
        extent = np.linalg.norm(self._vertices - self._vertices[0], axis=1).max()
        return KernelConfig.PARAMETER_EPSILON * max(extent, 1.0)

    def contains_point(self, point: np.ndarray) -> bool:
        """Check whether a point on the face plane lies inside the polygon (boundary included)."""
        tolerance = self._edge_tolerance()
        shifted = np.roll(self._vertices, -1, axis=0)
        for start, end in zip(self._vertices, shifted):
            edge = end - start
            inward = np.cross(self._normal, edge)
            edge_length = np.linalg.norm(edge)
            if np.dot(inward, point - start) < -tolerance * edge_length:
                return False
        return True

    def _clip_in_plane(self, p0: np.ndarray, d: np.ndarray) -> bool:
        """Check whether a coplanar segment p0 + t*d, t in [0, 1], touches the polygon."""
        t_enter, t_exit = 0.0, 1.0
        tolerance = self._edge_tolerance()
        shifted = np.roll(self._vertices, -1, axis=0)
        for start, end in zip(self._vertices, shifted):
            inward = np.cross(self._normal, end - start)
            numerator = float(np.dot(inward, p0 - start))
            denominator = float(np.dot(inward, d))
            if abs(denominator) <= tolerance:
                if numerator < -tolerance:
                    return False
                continue
            t = -numerator / denominator
            if denominator > 0:
                t_enter = max(t_enter, t)
            else:
                t_exit = min(t_exit, t)
            if t_enter > t_exit + KernelConfig.PARAMETER_EPSILON:
                return False
        return True

    def intersect(self, curve: StraightCurve) -> tuple[SetComparisonResult, list[IntersectionHit]]:
        """Intersect a straight curve with the face.

        Args:
            curve: Object with start/end Point3D attributes

        Returns:
            Tuple of (classification, hits). Hits are only returned for OVERLAP
            and are ordered by curve parameter.
        """
        p0 = curve.start.as_array()
        d = curve.end.as_array() - p0
        length = np.linalg.norm(d)
        if length == 0.0:
            return SetComparisonResult.DISJOINT, []

        denominator = float(np.dot(self._normal, d))
        distance = float(np.dot(self._normal, self._vertices[0] - p0))

        if abs(denominator) <= KernelConfig.PARAMETER_EPSILON * length:
            # Parallel to the face plane
            if abs(distance) > KernelConfig.VERTEX_TOLERANCE:
                return SetComparisonResult.DISJOINT, []
            if self._clip_in_plane(p0, d):
                return SetComparisonResult.SUBSET, []
            return SetComparisonResult.DISJOINT, []

        t = distance / denominator
        slack = KernelConfig.PARAMETER_EPSILON
        if t < -slack or t > 1.0 + slack:
            return SetComparisonResult.DISJOINT, []

        t = min(max(t, 0.0), 1.0)
        point = p0 + t * d
        if not self.contains_point(point):
            return SetComparisonResult.DISJOINT, []

        return SetComparisonResult.OVERLAP, [IntersectionHit(point=Point3D.from_array(point), parameter=t)]

    def __repr__(self) -> str:
        n = self._normal
        return f"PlanarFace({len(self._vertices)} vertices, normal=({n[0]:.3f}, {n[1]:.3f}, {n[2]:.3f}))"
