from ._lagrange_interpolation import LagrangeInterpolation
from ._lagrange_interpolation_derivative import lagrange_interpolation_derivative
from ._lagrange_interpolation_evaluate import lagrange_interpolation_evaluate
from ._lagrange_interpolation_fit import lagrange_interpolation_fit

__all__ = [
    "LagrangeInterpolation",
    "lagrange_interpolation_derivative",
    "lagrange_interpolation_evaluate",
    "lagrange_interpolation_fit",
]
