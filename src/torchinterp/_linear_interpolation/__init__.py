from ._linear_interpolation import LinearInterpolation
from ._linear_interpolation_derivative import linear_interpolation_derivative
from ._linear_interpolation_evaluate import linear_interpolation_evaluate
from ._linear_interpolation_fit import linear_interpolation_fit
from ._linear_interpolation_integral import linear_interpolation_integral

__all__ = [
    "LinearInterpolation",
    "linear_interpolation_derivative",
    "linear_interpolation_evaluate",
    "linear_interpolation_fit",
    "linear_interpolation_integral",
]
