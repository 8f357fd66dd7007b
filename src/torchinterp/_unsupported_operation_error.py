from ._interpolation_error import InterpolationError


class UnsupportedOperationError(InterpolationError):
    """Raised when a derivative is requested from a model that does not define one."""

    pass
