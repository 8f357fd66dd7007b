from ._constant_interpolation import ConstantInterpolation
from ._constant_interpolation_derivative import constant_interpolation_derivative
from ._constant_interpolation_evaluate import constant_interpolation_evaluate
from ._constant_interpolation_fit import constant_interpolation_fit
from ._constant_interpolation_integral import constant_interpolation_integral

__all__ = [
    "ConstantInterpolation",
    "constant_interpolation_derivative",
    "constant_interpolation_evaluate",
    "constant_interpolation_fit",
    "constant_interpolation_integral",
]
