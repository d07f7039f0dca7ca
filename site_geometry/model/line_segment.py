"""LineSegment - An ordered pair of points.

Segments carry no identity beyond their endpoints. A segment whose endpoints
share the same X coordinate is legal (vertical in plan); consumers that divide
by dx must guard against it.
"""

from dataclasses import dataclass

import numpy as np

from site_geometry.model.point import Point3D


@dataclass(frozen=True)
class LineSegment:
    """A straight segment from start to end.

    Attributes:
        start: First endpoint
        end: Second endpoint
    """

    start: Point3D
    end: Point3D

    @classmethod
    def from_coords(
        cls,
        start: tuple[float, float, float],
        end: tuple[float, float, float],
    ) -> "LineSegment":
        """Create a segment from two coordinate triples."""
        return cls(start=Point3D(*start), end=Point3D(*end))

    @property
    def length(self) -> float:
        return self.start.distance_to(self.end)

    @property
    def vector(self) -> np.ndarray:
        """Unnormalized vector from start to end."""
        return self.end.as_array() - self.start.as_array()

    @property
    def direction(self) -> np.ndarray:
        """Unit vector from start to end.

        Raises:
            ValueError: If the segment has zero length.
        """
        length = self.length
        if length == 0.0:
            raise ValueError(f"Zero-length segment has no direction: {self}")
        return self.vector / length

    def point_at(self, t: float) -> Point3D:
        """Point at parameter t (0 = start, 1 = end)."""
        return Point3D.from_array(self.start.as_array() + t * self.vector)

    def __repr__(self) -> str:
        return f"LineSegment({self.start} -> {self.end})"
