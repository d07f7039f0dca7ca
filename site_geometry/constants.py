"""Configuration constants for Site Geometry.

All tolerances and thicknesses are centralized here so the algorithms never
embed magic numbers. Values are expressed in the host's internal length unit
(decimal feet) and in degrees/radians as noted.

Classes:
    SnapConfig: Axis snapping tolerances for near-flat line segments
    GroundConfig: Ground slab thickness and terrain projection parameters
    KernelConfig: Geometry kernel tolerances (short curves, vertices, angles)
"""

from math import radians


class SnapConfig:
    """Axis snapping tolerances for the Line Axis Snapper."""

    # Slopes at or below this are treated as already aligned
    TOL_MIN = 1e-9

    # Maximum deviation from the X axis (degrees) that is still snapped
    TOL_MAX_DEG = 0.2

    # Added to tan(TOL_MAX_DEG) to catch lines just outside the angular window
    TOL_COMPENSATION = 1e-3


class GroundConfig:
    """Ground slab thickness and terrain projection parameters."""

    # Thickness of the solid extruded from each terrain triangle
    EXTRUSION_HEIGHT = 0.0328084  # 1 cm in feet

    # Half-length of the vertical probe line used to project points on terrain
    PROJECTION_SEARCH_HEIGHT = 10_000.0  # feet above and below the point


class KernelConfig:
    """Tolerances of the planar geometry kernel.

    Mirrors the limits of a CAD modeling engine: lines shorter than the short
    curve tolerance cannot be created, and vertices closer than the vertex
    tolerance are considered coincident.
    """

    SHORT_CURVE_TOLERANCE = 0.00256  # ~0.8 mm in feet
    VERTEX_TOLERANCE = 0.0005  # ~0.15 mm in feet
    PLANARITY_TOLERANCE = 0.0005
    ANGLE_TOLERANCE = radians(0.1)

    # Relative tolerance used when testing parameters and in-polygon checks
    PARAMETER_EPSILON = 1e-9


assert KernelConfig.VERTEX_TOLERANCE < KernelConfig.SHORT_CURVE_TOLERANCE, (
    "Vertex tolerance must be below the short curve tolerance"
)
assert GroundConfig.EXTRUSION_HEIGHT > KernelConfig.SHORT_CURVE_TOLERANCE, (
    "Ground slab must be thicker than the shortest buildable line"
)
