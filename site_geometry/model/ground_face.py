"""GroundFace - The intersection target built from one terrain triangle.

A GroundFace is the face of a thin solid ("ground slab") extruded from a
triangle's boundary along the triangle's own normal. The Terrain Face Builder
produces one GroundFace per valid triangle and a SkippedTriangle record for
every triangle the geometry kernel refused.

Reference: Terrain Face Builder (site_geometry.core.ground_face_builder)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterator

import numpy as np

from site_geometry.model.point import Point3D
from site_geometry.model.triangle import Triangle

if TYPE_CHECKING:
    from site_geometry.geometry.faces import IntersectionHit, PlanarFace, SetComparisonResult, StraightCurve


@dataclass(frozen=True, eq=False)
class GroundFace:
    """Oriented planar face of a ground slab.

    Attributes:
        face: Kernel face whose outward normal matches the triangle normal
        triangle_index: Position of the source triangle in mesh iteration order
        triangle: Source triangle
        thickness: Extrusion height of the slab the face belongs to
    """

    face: PlanarFace
    triangle_index: int
    triangle: Triangle
    thickness: float

    @property
    def normal(self) -> np.ndarray:
        """Unit outward normal of the face."""
        return self.face.normal

    def intersect(self, curve: StraightCurve) -> tuple[SetComparisonResult, list[IntersectionHit]]:
        """Delegate the face/curve intersection test to the kernel face."""
        return self.face.intersect(curve)

    def __repr__(self) -> str:
        return f"GroundFace(triangle={self.triangle_index}, {self.face})"


@dataclass(frozen=True)
class SkippedTriangle:
    """A triangle the builder could not turn into a GroundFace.

    Attributes:
        index: Position of the triangle in mesh iteration order
        triangle: The offending triangle
        reason: Message of the geometry error that caused the skip
    """

    index: int
    triangle: Triangle
    reason: str


@dataclass
class GroundFaceSet:
    """Ordered collection of GroundFaces plus the triangles that were skipped.

    Behaves as a read-only sequence of GroundFace in insertion order
    (mesh iteration order).

    Attributes:
        faces: Built faces in insertion order
        skipped: Skipped triangles in mesh order
    """

    faces: list[GroundFace] = field(default_factory=list)
    skipped: list[SkippedTriangle] = field(default_factory=list)

    @property
    def skipped_count(self) -> int:
        return len(self.skipped)

    def __len__(self) -> int:
        return len(self.faces)

    def __iter__(self) -> Iterator[GroundFace]:
        return iter(self.faces)

    def __getitem__(self, index: int) -> GroundFace:
        return self.faces[index]


@dataclass(frozen=True)
class TerrainHit:
    """First intersection of a curve with the ground faces.

    Attributes:
        point: Intersection location
        face_index: Position of the hit face in the searched face sequence
        triangle_index: Mesh index of the triangle behind the hit face
        parameter: Normalized position along the curve (0 = start, 1 = end)
    """

    point: Point3D
    face_index: int
    triangle_index: int
    parameter: float
