from ._interpolation_error import InterpolationError


class InvalidDegreeError(InterpolationError):
    """Raised when degree is invalid for the given sample count."""

    pass
