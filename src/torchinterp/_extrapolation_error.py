from ._interpolation_error import InterpolationError


class ExtrapolationError(InterpolationError):
    """Raised when query point is outside the sample domain with extrapolate='error'."""

    pass
