from ._quadratic_spline import QuadraticSpline
from ._quadratic_spline_derivative import quadratic_spline_derivative
from ._quadratic_spline_evaluate import quadratic_spline_evaluate
from ._quadratic_spline_fit import quadratic_spline_fit
from ._quadratic_spline_integral import quadratic_spline_integral

__all__ = [
    "QuadraticSpline",
    "quadratic_spline_derivative",
    "quadratic_spline_evaluate",
    "quadratic_spline_fit",
    "quadratic_spline_integral",
]
