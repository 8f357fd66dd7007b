from ._cubic_spline import CubicSpline
from ._cubic_spline_derivative import cubic_spline_derivative
from ._cubic_spline_evaluate import cubic_spline_evaluate
from ._cubic_spline_fit import cubic_spline_fit
from ._cubic_spline_integral import cubic_spline_integral

__all__ = [
    "CubicSpline",
    "cubic_spline_derivative",
    "cubic_spline_evaluate",
    "cubic_spline_fit",
    "cubic_spline_integral",
]
