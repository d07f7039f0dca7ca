"""Terrain Intersector - First intersection of a curve with the ground faces.

The search is a linear scan in face order with early exit: the result is the
hit on the first face (in input order) that the curve crosses, not the
geometrically nearest hit. No spatial index is used.
"""

import logging
from typing import Optional, Sequence

from site_geometry.constants import GroundConfig, KernelConfig
from site_geometry.geometry.faces import SetComparisonResult, StraightCurve
from site_geometry.model.ground_face import GroundFace, TerrainHit
from site_geometry.model.line_segment import LineSegment
from site_geometry.model.point import Point3D
from site_geometry.model.triangle import Triangle

logger = logging.getLogger(__name__)


class TerrainIntersector:
    """Static methods for intersecting curves with ground faces.

    Example:
        point = TerrainIntersector.first_intersection(ground, probe_line)
        if point is None:
            print("Line misses the terrain")
    """

    @staticmethod
    def _validate_curve(curve: Optional[StraightCurve]) -> None:
        if curve is None:
            raise ValueError("Curve is required for a terrain intersection")
        if curve.start.distance_to(curve.end) == 0.0:
            raise ValueError(f"Curve has zero length: {curve.start}")

    @staticmethod
    def first_hit(faces: Sequence[GroundFace], curve: StraightCurve) -> Optional[TerrainHit]:
        """Find the first face, in order, that the curve overlaps.

        Args:
            faces: Ground faces in canonical (mesh) order
            curve: Straight curve with start/end points

        Returns:
            TerrainHit for the first overlapping face, or None.

        Raises:
            ValueError: If the curve is missing or has zero length.
        """
        TerrainIntersector._validate_curve(curve)

        for face_index, ground_face in enumerate(faces):
            result, hits = ground_face.intersect(curve)
            if result == SetComparisonResult.OVERLAP:
                first = hits[0]
                return TerrainHit(
                    point=first.point,
                    face_index=face_index,
                    triangle_index=ground_face.triangle_index,
                    parameter=first.parameter,
                )
        return None

    @staticmethod
    def first_intersection(faces: Sequence[GroundFace], curve: StraightCurve) -> Optional[Point3D]:
        """First intersection point of the curve with the faces, or None."""
        hit = TerrainIntersector.first_hit(faces, curve)
        return hit.point if hit is not None else None

    @staticmethod
    def _footprint_contains(triangle: Triangle, x: float, y: float, tolerance: float = 1e-9) -> bool:
        """Check whether (x, y) lies inside the triangle's plan (XY) outline, boundary included."""
        (x0, y0), (x1, y1), (x2, y2) = ((v.x, v.y) for v in triangle.vertices)
        doubled_area = (x1 - x0) * (y2 - y0) - (x2 - x0) * (y1 - y0)
        if doubled_area == 0.0:
            return False
        # Barycentric weights of v0 and v1, signed by the winding
        w0 = ((x1 - x) * (y2 - y) - (x2 - x) * (y1 - y)) / doubled_area
        w1 = ((x2 - x) * (y0 - y) - (x0 - x) * (y2 - y)) / doubled_area
        return min(w0, w1, 1.0 - w0 - w1) >= -tolerance

    @staticmethod
    def _project_onto_footprint(faces: Sequence[GroundFace], point: Point3D) -> Optional[Point3D]:
        """Project onto the slab top of the first face whose source triangle covers the point in plan.

        Neighbouring slab tops separate over convex creases (ridges) because each
        one is offset along its own triangle normal. A vertical probe through such
        a gap misses every face although the point lies inside the terrain.
        """
        for ground_face in faces:
            normal = ground_face.normal
            if abs(normal[2]) < KernelConfig.PARAMETER_EPSILON:
                continue
            if not TerrainIntersector._footprint_contains(ground_face.triangle, point.x, point.y):
                continue
            origin = ground_face.face.origin
            z = origin[2] - (normal[0] * (point.x - origin[0]) + normal[1] * (point.y - origin[1])) / normal[2]
            return Point3D(x=point.x, y=point.y, z=float(z))
        return None

    @staticmethod
    def project_point(
        faces: Sequence[GroundFace],
        point: Point3D,
        search_height: float = GroundConfig.PROJECTION_SEARCH_HEIGHT,
    ) -> Optional[Point3D]:
        """Project a point vertically onto the ground faces.

        Drops a probe line from point.z + search_height to point.z - search_height
        through the point's XY location and returns its first intersection. When
        the probe falls through the gap between two slab tops at a ridge, the
        point is projected onto the slab top of the first triangle that covers
        it in plan instead.

        Args:
            faces: Ground faces in canonical order
            point: Point to project (only X and Y matter for the result)
            search_height: Half-length of the vertical probe

        Returns:
            Point on the terrain, or None if no built triangle covers the point
            within the probe's reach.
        """
        if not search_height > 0:
            raise ValueError(f"Search height must be positive, got {search_height}")

        probe = LineSegment(
            start=Point3D(x=point.x, y=point.y, z=point.z + search_height),
            end=Point3D(x=point.x, y=point.y, z=point.z - search_height),
        )
        projected = TerrainIntersector.first_intersection(faces, probe)
        if projected is not None:
            return projected

        projected = TerrainIntersector._project_onto_footprint(faces, point)
        if projected is None or abs(projected.z - point.z) > search_height:
            logger.debug(f"Point ({point.x:.3f}, {point.y:.3f}) lies outside the terrain")
            return None
        logger.debug(f"Vertical probe at ({point.x:.3f}, {point.y:.3f}) fell between slab tops, used {projected}")
        return projected
