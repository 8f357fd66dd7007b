from ._b_spline_approximation import BSplineApproximation
from ._b_spline_approximation_fit import b_spline_approximation_fit
from ._b_spline_basis import b_spline_basis
from ._b_spline_derivative import b_spline_derivative
from ._b_spline_evaluate import b_spline_evaluate
from ._b_spline_interpolation import BSplineInterpolation
from ._b_spline_interpolation_fit import b_spline_interpolation_fit
from ._b_spline_knots import (
    b_spline_approximation_knots,
    b_spline_knots,
    b_spline_parameters,
)

__all__ = [
    "BSplineApproximation",
    "BSplineInterpolation",
    "b_spline_approximation_fit",
    "b_spline_approximation_knots",
    "b_spline_basis",
    "b_spline_derivative",
    "b_spline_evaluate",
    "b_spline_interpolation_fit",
    "b_spline_knots",
    "b_spline_parameters",
]
