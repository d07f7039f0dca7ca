"""Triangle - One face of a triangulated terrain mesh.

Triangles come straight from the mesh and may be degenerate: coincident
vertices, collinear vertices or edges too short for the geometry kernel.
The geometry kernel refuses such triangles; they are not rejected at this level.
"""

from dataclasses import dataclass
from typing import Optional

import numpy as np

from site_geometry.model.point import Point3D


@dataclass(frozen=True)
class Triangle:
    """An ordered triple of vertices from a terrain mesh.

    The vertex order defines the winding, and therefore the direction of
    the geometric normal (right-hand rule).

    Attributes:
        v0: First vertex
        v1: Second vertex
        v2: Third vertex
    """

    v0: Point3D
    v1: Point3D
    v2: Point3D

    @property
    def vertices(self) -> tuple[Point3D, Point3D, Point3D]:
        return (self.v0, self.v1, self.v2)

    @property
    def edges(self) -> list[tuple[Point3D, Point3D]]:
        """Closed boundary edges: v0→v1, v1→v2, v2→v0."""
        return [(self.v0, self.v1), (self.v1, self.v2), (self.v2, self.v0)]

    def _cross(self) -> np.ndarray:
        a = self.v0.as_array()
        return np.cross(self.v1.as_array() - a, self.v2.as_array() - a)

    @property
    def normal(self) -> Optional[np.ndarray]:
        """Unit normal by the right-hand rule, or None if the triangle has no area."""
        cross = self._cross()
        norm = np.linalg.norm(cross)
        if norm == 0.0:
            return None
        return cross / norm

    def __repr__(self) -> str:
        return f"Triangle({self.v0}, {self.v1}, {self.v2})"
