"""TerrainLineProjector - Drapes plan segments onto the ground faces.

Composition used by host code: snap a segment onto the X axis when it is
nearly flat, then project both endpoints vertically onto the terrain.
"""

import logging
from typing import Optional, Sequence

from site_geometry.constants import GroundConfig
from site_geometry.core.line_snapper import LineAxisSnapper
from site_geometry.core.terrain_intersector import TerrainIntersector
from site_geometry.model.ground_face import GroundFace
from site_geometry.model.line_segment import LineSegment

logger = logging.getLogger(__name__)


class TerrainLineProjector:
    """Snaps and projects line segments onto a set of ground faces.

    Example:
        projector = TerrainLineProjector(faces=ground)
        draped = projector.project_segment(segment)
    """

    def __init__(
        self,
        faces: Sequence[GroundFace],
        snap: bool = True,
        search_height: float = GroundConfig.PROJECTION_SEARCH_HEIGHT,
    ):
        """Initialize projector.

        Args:
            faces: Ground faces in canonical order
            snap: Apply LineAxisSnapper before projecting
            search_height: Half-length of the vertical probe lines
        """
        self._faces = faces
        self._snap = snap
        self._search_height = search_height

    def project_segment(self, segment: LineSegment) -> Optional[LineSegment]:
        """Snap (optionally) and project a segment onto the terrain.

        Returns:
            Segment with both endpoints on the ground slab tops, or None if an
            endpoint lies outside every built triangle.
        """
        if self._snap:
            segment = LineAxisSnapper.adjust_segment(segment)

        start = TerrainIntersector.project_point(self._faces, segment.start, search_height=self._search_height)
        end = TerrainIntersector.project_point(self._faces, segment.end, search_height=self._search_height)
        if start is None or end is None:
            logger.debug(f"Segment {segment} has an endpoint outside the terrain")
            return None
        return LineSegment(start=start, end=end)

    def project_segments(self, segments: Sequence[LineSegment]) -> list[Optional[LineSegment]]:
        """Project several segments, keeping their order (None for misses)."""
        return [self.project_segment(segment) for segment in segments]
