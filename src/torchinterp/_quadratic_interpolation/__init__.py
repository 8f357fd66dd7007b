from ._quadratic_interpolation import QuadraticInterpolation
from ._quadratic_interpolation_derivative import (
    quadratic_interpolation_derivative,
)
from ._quadratic_interpolation_evaluate import quadratic_interpolation_evaluate
from ._quadratic_interpolation_fit import quadratic_interpolation_fit

__all__ = [
    "QuadraticInterpolation",
    "quadratic_interpolation_derivative",
    "quadratic_interpolation_evaluate",
    "quadratic_interpolation_fit",
]
