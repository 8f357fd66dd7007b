from ._interpolation_error import InterpolationError


class InvalidControlPointCountError(InterpolationError):
    """Raised when a B-spline approximation has too many or too few control points."""

    pass
