"""Axis snapping for nearly horizontal line segments.

CAD modeling engines reject lines that are almost, but not exactly, aligned
with an axis ("slightly off axis" warnings and downstream tolerance failures).
LineAxisSnapper forces such segments onto the X axis by copying the start
point's Y coordinate to the end point.

Slope is measured in plan (XY); Z is carried through unchanged and never
participates in the decision.
"""

import logging
from math import inf, nan, pi, tan

from site_geometry.constants import SnapConfig
from site_geometry.model.line_segment import LineSegment
from site_geometry.model.point import Point3D

logger = logging.getLogger(__name__)


class LineAxisSnapper:
    """Static helpers for snapping nearly-flat segments onto the X axis.

    Example:
        p1, p2 = LineAxisSnapper.adjust(Point3D(0, 0, 0), Point3D(10, 0.001, 0))
        # p2 == Point3D(10, 0, 0)
    """

    @staticmethod
    def slope_xy(p1: Point3D, p2: Point3D) -> float:
        """Plan slope dy/dx between two points.

        Returns:
            The slope. inf (or -inf) for a vertical line, nan when both
            points share the same X and Y.
        """
        dx = p2.x - p1.x
        dy = p2.y - p1.y
        if dx == 0.0:
            if dy == 0.0:
                return nan
            return inf if dy > 0 else -inf
        return dy / dx

    @staticmethod
    def snap_threshold(
        tol_max_deg: float = SnapConfig.TOL_MAX_DEG,
        compensation: float = SnapConfig.TOL_COMPENSATION,
    ) -> float:
        """Upper bound (exclusive) of the absolute slope that gets snapped."""
        return tan(tol_max_deg * pi / 180.0) + compensation

    @staticmethod
    def adjust(
        p1: Point3D,
        p2: Point3D,
        tol_min: float = SnapConfig.TOL_MIN,
        tol_max_deg: float = SnapConfig.TOL_MAX_DEG,
        compensation: float = SnapConfig.TOL_COMPENSATION,
    ) -> tuple[Point3D, Point3D]:
        """Snap a nearly-flat segment onto the X axis.

        A segment is snapped when tol_min < |slope| < tan(tol_max_deg) + compensation.
        Flat segments, steeper segments and vertical segments (non-finite slope)
        are returned unchanged.

        Args:
            p1: Start point
            p2: End point
            tol_min: Slopes at or below this are considered aligned already
            tol_max_deg: Angular tolerance in degrees
            compensation: Constant added to the tangent-based threshold

        Returns:
            Tuple (start, end). When snapped, end has the start's Y coordinate.
        """
        abs_slope = abs(LineAxisSnapper.slope_xy(p1, p2))
        threshold = LineAxisSnapper.snap_threshold(tol_max_deg=tol_max_deg, compensation=compensation)

        # NaN compares False, so degenerate input falls through unchanged
        if not (tol_min < abs_slope < threshold):
            return p1, p2

        if abs_slope < threshold:
            adjusted = Point3D(x=p2.x, y=p1.y, z=p2.z)
        else:
            # Never reached: the outer check uses the same threshold, so
            # near-vertical lines are not snapped to the Y axis.
            adjusted = Point3D(x=p1.x, y=p2.y, z=p2.z)

        logger.debug(f"Snapped segment {p1} -> {p2} (slope {abs_slope:.3g}) to X axis")
        return p1, adjusted

    @staticmethod
    def adjust_segment(
        segment: LineSegment,
        tol_min: float = SnapConfig.TOL_MIN,
        tol_max_deg: float = SnapConfig.TOL_MAX_DEG,
        compensation: float = SnapConfig.TOL_COMPENSATION,
    ) -> LineSegment:
        """Apply adjust() to a LineSegment and return the resulting segment."""
        start, end = LineAxisSnapper.adjust(
            segment.start,
            segment.end,
            tol_min=tol_min,
            tol_max_deg=tol_max_deg,
            compensation=compensation,
        )
        if start is segment.start and end is segment.end:
            return segment
        return LineSegment(start=start, end=end)

    @staticmethod
    def is_axis_aligned(p1: Point3D, p2: Point3D, tol_min: float = SnapConfig.TOL_MIN) -> bool:
        """Check whether a segment is already parallel to the X or Y axis in plan.

        Points sharing X and Y have no plan direction (NaN slope) and are
        reported as not aligned.
        """
        abs_slope = abs(LineAxisSnapper.slope_xy(p1, p2))
        return abs_slope <= tol_min or abs_slope == inf
