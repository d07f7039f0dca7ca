"""Mesh triangle sources for terrain surfaces.

The face builder only needs to iterate triangles of a surface in a stable
order. TerrainSurface is that narrow capability; TriangleMesh is a numpy-backed
indexed mesh implementing it, with a helper to triangulate a regular
elevation grid.
"""

import logging
from typing import Iterator, Protocol, Sequence

import numpy as np

from site_geometry.model.point import Point3D
from site_geometry.model.triangle import Triangle

logger = logging.getLogger(__name__)


class TerrainSurface(Protocol):
    """Anything that can yield its triangles in a stable, repeatable order."""

    def iter_triangles(self) -> Iterator[Triangle]: ...


class TriangleMesh:
    """Indexed triangle mesh.

    Attributes:
        vertices: (N, 3) float array of vertex coordinates
        faces: (M, 3) int array of vertex indices per triangle

    Example:
        mesh = TriangleMesh(
            vertices=[(0, 0, 0), (1, 0, 0), (0, 1, 0)],
            faces=[(0, 1, 2)],
        )
        triangles = list(mesh.iter_triangles())
    """

    def __init__(
        self,
        vertices: Sequence[Sequence[float]] | np.ndarray,
        faces: Sequence[Sequence[int]] | np.ndarray,
    ):
        vertices = np.asarray(vertices, dtype=float)
        faces = np.asarray(faces, dtype=int)

        if vertices.ndim != 2 or vertices.shape[1] != 3:
            raise ValueError(f"Mesh vertices must have shape (N, 3), got {vertices.shape}")
        if faces.size == 0:
            faces = faces.reshape(0, 3)
        if faces.ndim != 2 or faces.shape[1] != 3:
            raise ValueError(f"Mesh faces must have shape (M, 3), got {faces.shape}")
        if faces.size and (faces.min() < 0 or faces.max() >= len(vertices)):
            raise ValueError(f"Mesh face indices must be in [0, {len(vertices) - 1}]")
        if np.isnan(vertices).any():
            raise ValueError("Mesh vertices cannot contain NaN coordinates")

        self.vertices = vertices
        self.faces = faces

    @property
    def num_triangles(self) -> int:
        return len(self.faces)

    def __len__(self) -> int:
        return self.num_triangles

    def get_triangle(self, index: int) -> Triangle:
        """Triangle at the given face index."""
        i0, i1, i2 = self.faces[index]
        return Triangle(
            v0=Point3D.from_array(self.vertices[i0]),
            v1=Point3D.from_array(self.vertices[i1]),
            v2=Point3D.from_array(self.vertices[i2]),
        )

    def iter_triangles(self) -> Iterator[Triangle]:
        """Yield triangles in face index order."""
        for index in range(self.num_triangles):
            yield self.get_triangle(index)

    @classmethod
    def from_heightfield(
        cls,
        elevations: Sequence[Sequence[float]] | np.ndarray,
        spacing_x: float = 1.0,
        spacing_y: float = 1.0,
        origin: tuple[float, float] = (0.0, 0.0),
    ) -> "TriangleMesh":
        """Triangulate a regular elevation grid.

        Row i of the grid lies at y = origin_y + i * spacing_y and column j at
        x = origin_x + j * spacing_x. Each cell becomes two triangles wound
        counter-clockwise when seen from above, so normals point up.

        Args:
            elevations: (rows, cols) array of Z values, rows and cols >= 2
            spacing_x: Distance between columns
            spacing_y: Distance between rows
            origin: (x, y) of grid cell [0, 0]

        Returns:
            TriangleMesh with 2 * (rows - 1) * (cols - 1) triangles.
        """
        grid = np.asarray(elevations, dtype=float)
        if grid.ndim != 2 or grid.shape[0] < 2 or grid.shape[1] < 2:
            raise ValueError(f"Heightfield must be a 2D grid of at least 2x2, got shape {grid.shape}")
        if spacing_x <= 0 or spacing_y <= 0:
            raise ValueError(f"Grid spacing must be positive, got ({spacing_x}, {spacing_y})")

        rows, cols = grid.shape
        xs = origin[0] + np.arange(cols) * spacing_x
        ys = origin[1] + np.arange(rows) * spacing_y
        grid_x, grid_y = np.meshgrid(xs, ys)
        vertices = np.column_stack([grid_x.ravel(), grid_y.ravel(), grid.ravel()])

        faces = []
        for i in range(rows - 1):
            for j in range(cols - 1):
                lower_left = i * cols + j
                lower_right = lower_left + 1
                upper_left = lower_left + cols
                upper_right = upper_left + 1
                faces.append((lower_left, lower_right, upper_right))
                faces.append((lower_left, upper_right, upper_left))

        logger.debug(f"Triangulated {rows}x{cols} heightfield into {len(faces)} triangles")
        return cls(vertices=vertices, faces=faces)
