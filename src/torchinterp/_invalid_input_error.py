from ._interpolation_error import InterpolationError


class InvalidInputError(InterpolationError, ValueError):
    """Raised for malformed samples (mismatched lengths, duplicates, too few points)."""

    pass
