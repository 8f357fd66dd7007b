from ._interpolation_error import InterpolationError


class OrderTooHighError(InterpolationError):
    """Raised when derivative order exceeds the local polynomial degree."""

    pass
