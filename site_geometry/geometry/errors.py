"""Error taxonomy of the planar geometry kernel.

All kernel failures derive from GeometryError so callers can contain them at
the item boundary (one triangle, one segment) without catching unrelated bugs.
Invalid top-level input is reported with ValueError instead.
"""


class GeometryError(Exception):
    """Base class for geometry kernel failures."""


class GeometryConstructionError(GeometryError):
    """A curve, loop or solid could not be built from the given input."""


class ShortCurveError(GeometryConstructionError):
    """A bounded line is shorter than the kernel's short curve tolerance."""

    def __init__(self, length: float, tolerance: float):
        self.length = length
        self.tolerance = tolerance
        super().__init__(f"Curve length {length:.6g} is below the short curve tolerance {tolerance:.6g}")


class DegenerateGeometryError(GeometryConstructionError):
    """Input is collinear, coincident or non-planar."""


class FaceNotFoundError(GeometryError):
    """No face of a solid matches the requested normal."""
