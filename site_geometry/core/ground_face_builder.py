"""Terrain Face Builder - Converts mesh triangles into ground faces.

For each triangle, in mesh iteration order:
1. Bound the three edges (v0→v1, v1→v2, v2→v0) and close them into a loop
2. Take the loop's plane normal
3. Extrude the loop along that normal by the ground slab thickness
4. Select the slab face whose outward normal matches the loop normal

Triangles the geometry kernel refuses (edges below the short curve tolerance,
collinear vertices) are skipped and recorded; they never abort the batch.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, Optional, Union

from site_geometry.constants import GroundConfig
from site_geometry.core.mesh_source import TerrainSurface
from site_geometry.geometry.errors import GeometryError
from site_geometry.geometry.kernel import GeometryKernel
from site_geometry.model.ground_face import GroundFace, GroundFaceSet, SkippedTriangle
from site_geometry.model.triangle import Triangle

logger = logging.getLogger(__name__)

_BuildResult = Union[GroundFace, SkippedTriangle]


class GroundFaceBuilder:
    """Builds one GroundFace per valid terrain triangle.

    Example:
        builder = GroundFaceBuilder()
        ground = builder.build_ground_faces(mesh.iter_triangles())
        print(f"{len(ground)} faces, {ground.skipped_count} skipped")
    """

    def __init__(
        self,
        kernel: Optional[GeometryKernel] = None,
        extrusion_height: float = GroundConfig.EXTRUSION_HEIGHT,
        max_workers: Optional[int] = None,
    ):
        """Initialize face builder.

        Args:
            kernel: Geometry kernel (creates default GeometryKernel if not provided)
            extrusion_height: Ground slab thickness, must be positive
            max_workers: Thread count for parallel building (None or 1 = sequential)
        """
        if not extrusion_height > 0:
            raise ValueError(f"Extrusion height must be positive, got {extrusion_height}")
        if max_workers is not None and max_workers < 1:
            raise ValueError(f"max_workers must be at least 1, got {max_workers}")
        self._kernel = kernel or GeometryKernel()
        self._extrusion_height = extrusion_height
        self._max_workers = max_workers

    @property
    def kernel(self) -> GeometryKernel:
        """Access the geometry kernel."""
        return self._kernel

    @property
    def extrusion_height(self) -> float:
        return self._extrusion_height

    def build_face(self, triangle: Triangle, index: int = 0) -> GroundFace:
        """Build the ground face of a single triangle.

        Raises:
            GeometryError: If the kernel cannot build the contour, slab or face.
        """
        loop = self._kernel.create_loop(triangle.edges)
        normal = self._kernel.plane_of(loop).normal
        solid = self._kernel.extrude(loop, normal, self._extrusion_height)
        face = self._kernel.face_by_normal(solid, normal)
        return GroundFace(
            face=face,
            triangle_index=index,
            triangle=triangle,
            thickness=self._extrusion_height,
        )

    def _try_build(self, index: int, triangle: Triangle) -> _BuildResult:
        try:
            return self.build_face(triangle, index=index)
        except GeometryError as exc:
            logger.warning(f"Skipping terrain triangle {index}: {exc}")
            return SkippedTriangle(index=index, triangle=triangle, reason=str(exc))

    def build_ground_faces(self, triangles: Iterable[Triangle]) -> GroundFaceSet:
        """Build ground faces for all triangles, skipping the invalid ones.

        Args:
            triangles: Triangles in mesh iteration order

        Returns:
            GroundFaceSet with faces in triangle order and the skipped triangles.

        Raises:
            ValueError: If no triangles are given.
        """
        triangles = list(triangles)
        if not triangles:
            raise ValueError("Cannot build ground faces from an empty triangle sequence")

        if self._max_workers is not None and self._max_workers > 1:
            # Executor.map yields results in submission order
            with ThreadPoolExecutor(max_workers=self._max_workers) as executor:
                results = list(executor.map(self._try_build, range(len(triangles)), triangles))
        else:
            results = [self._try_build(index, triangle) for index, triangle in enumerate(triangles)]

        ground = GroundFaceSet()
        for result in results:
            if isinstance(result, SkippedTriangle):
                ground.skipped.append(result)
            else:
                ground.faces.append(result)

        logger.info(
            f"Built {len(ground.faces)} ground faces from {len(triangles)} triangles "
            f"({ground.skipped_count} skipped)"
        )
        return ground

    def build_from_surface(self, surface: TerrainSurface) -> GroundFaceSet:
        """Build ground faces from every triangle of a terrain surface."""
        return self.build_ground_faces(surface.iter_triangles())


def build_ground_faces(
    triangles: Iterable[Triangle],
    extrusion_height: float = GroundConfig.EXTRUSION_HEIGHT,
) -> GroundFaceSet:
    """Build ground faces with the default kernel. See GroundFaceBuilder.build_ground_faces."""
    return GroundFaceBuilder(extrusion_height=extrusion_height).build_ground_faces(triangles)
