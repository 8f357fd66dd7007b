from ._interpolation_error import InterpolationError


class SingularSystemError(InterpolationError):
    """Raised when a coefficient system cannot be solved."""

    pass
