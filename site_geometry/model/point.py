"""Point3D - The fundamental geometry atom for site geometry processing.

A Point3D is an immutable (x, y, z) coordinate in the host's internal length
unit. It is the single value type used for locations throughout the package:
line endpoints, triangle vertices and intersection results.
"""

from dataclasses import dataclass
from math import isnan, sqrt
from typing import Sequence

import numpy as np


@dataclass(frozen=True)
class Point3D:
    """An immutable point in 3D space.

    Attributes:
        x: X coordinate
        y: Y coordinate
        z: Z coordinate (elevation)

    Example:
        point = Point3D(x=10.0, y=0.001, z=0.0)
    """

    x: float
    y: float
    z: float

    def __post_init__(self) -> None:
        """Validate data after initialization."""
        if isnan(self.x) or isnan(self.y) or isnan(self.z):
            raise ValueError(f"Point3D cannot have NaN coordinates: ({self.x}, {self.y}, {self.z})")

    @classmethod
    def from_array(cls, values: Sequence[float] | np.ndarray) -> "Point3D":
        """Create a Point3D from any 3-element sequence or numpy array."""
        if len(values) != 3:
            raise ValueError(f"Point3D needs exactly 3 coordinates, got {len(values)}")
        return cls(x=float(values[0]), y=float(values[1]), z=float(values[2]))

    def as_array(self) -> np.ndarray:
        """Return coordinates as a float numpy array of shape (3,)."""
        return np.array([self.x, self.y, self.z], dtype=float)

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def distance_to(self, other: "Point3D") -> float:
        """Euclidean distance to another point."""
        dx = other.x - self.x
        dy = other.y - self.y
        dz = other.z - self.z
        return sqrt(dx * dx + dy * dy + dz * dz)

    def __repr__(self) -> str:
        return f"Point3D({self.x:.6f}, {self.y:.6f}, {self.z:.6f})"
