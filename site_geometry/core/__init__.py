"""Core algorithms for terrain and line processing.

- LineAxisSnapper: Snaps nearly-flat segments onto the X axis
- TriangleMesh / TerrainSurface: Mesh triangle sources
- GroundFaceBuilder: Triangles to thin oriented ground faces (skips degenerate ones)
- TerrainIntersector: First intersection of a curve with the ground faces
- TerrainLineProjector: Snap + drape segments on the terrain
"""

from site_geometry.core.ground_face_builder import GroundFaceBuilder, build_ground_faces
from site_geometry.core.line_projector import TerrainLineProjector
from site_geometry.core.line_snapper import LineAxisSnapper
from site_geometry.core.mesh_source import TerrainSurface, TriangleMesh
from site_geometry.core.terrain_intersector import TerrainIntersector

__all__ = [
    # Line snapping
    "LineAxisSnapper",
    # Mesh sources
    "TerrainSurface",
    "TriangleMesh",
    # Face building
    "GroundFaceBuilder",
    "build_ground_faces",
    # Intersection
    "TerrainIntersector",
    "TerrainLineProjector",
]
