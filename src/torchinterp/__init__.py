"""One-dimensional interpolation and smoothing for PyTorch tensors.

Every method is a pair of a ``*_fit`` function, which validates the samples
and precomputes coefficients, and a model (a tensorclass) exposing
``evaluate(t)`` and ``derivative(t, order)``.

Unified Interface
-----------------
build
    Fit a model selected by method name.

Local Interpolation
-------------------
linear_interpolation_fit
    Piecewise linear interpolation.
quadratic_interpolation_fit
    Three-point local quadratic interpolation.
constant_interpolation_fit
    Piecewise constant interpolation (left or right continuous).
lagrange_interpolation_fit
    Global polynomial interpolation in barycentric form.

Splines
-------
quadratic_spline_fit
    C1 quadratic spline.
cubic_spline_fit
    Natural cubic spline.
b_spline_interpolation_fit
    B-spline through every sample.
b_spline_approximation_fit
    Least-squares B-spline with fewer control points.
b_spline_basis
    Evaluate B-spline basis functions.

Smoothing and Fitting
---------------------
loess_fit
    Locally weighted polynomial regression.
curve_fit
    Nonlinear least-squares fit of a parametric function.

Utilities
---------
sample_set
    Validate and order raw samples.
locate_segment
    Find the interval enclosing each query point.
solve_tridiagonal
    Thomas algorithm for tridiagonal systems.

Exceptions
----------
InterpolationError
    Base exception for interpolation operations.
InvalidInputError
    Malformed, non-finite, duplicate or too few samples.
InvalidDegreeError
    Degree out of range for the sample count.
InvalidControlPointCountError
    Control point count out of range for a B-spline approximation.
SingularSystemError
    Linear system of a fit cannot be solved.
UnsupportedOperationError
    Derivative requested from a model that does not define one.
OrderTooHighError
    Derivative order above the local polynomial degree.
ExtrapolationError
    Query point outside the sample domain.
OutOfDomainWarning
    Query point outside the sample domain was extrapolated or clamped.
"""

from ._b_spline import (
    BSplineApproximation,
    BSplineInterpolation,
    b_spline_approximation_fit,
    b_spline_approximation_knots,
    b_spline_basis,
    b_spline_derivative,
    b_spline_evaluate,
    b_spline_interpolation_fit,
    b_spline_knots,
    b_spline_parameters,
)
from ._build import build
from ._constant_interpolation import (
    ConstantInterpolation,
    constant_interpolation_derivative,
    constant_interpolation_evaluate,
    constant_interpolation_fit,
    constant_interpolation_integral,
)
from ._cubic_spline import (
    CubicSpline,
    cubic_spline_derivative,
    cubic_spline_evaluate,
    cubic_spline_fit,
    cubic_spline_integral,
)
from ._curve_fit import CurveFit, curve_fit
from ._extrapolation_error import ExtrapolationError
from ._interpolation_error import InterpolationError
from ._invalid_control_point_count_error import InvalidControlPointCountError
from ._invalid_degree_error import InvalidDegreeError
from ._invalid_input_error import InvalidInputError
from ._lagrange_interpolation import (
    LagrangeInterpolation,
    lagrange_interpolation_derivative,
    lagrange_interpolation_evaluate,
    lagrange_interpolation_fit,
)
from ._linear_interpolation import (
    LinearInterpolation,
    linear_interpolation_derivative,
    linear_interpolation_evaluate,
    linear_interpolation_fit,
    linear_interpolation_integral,
)
from ._locate_segment import locate_segment
from ._loess import Loess, loess_derivative, loess_evaluate, loess_fit
from ._order_too_high_error import OrderTooHighError
from ._out_of_domain_warning import OutOfDomainWarning
from ._quadratic_interpolation import (
    QuadraticInterpolation,
    quadratic_interpolation_derivative,
    quadratic_interpolation_evaluate,
    quadratic_interpolation_fit,
)
from ._quadratic_spline import (
    QuadraticSpline,
    quadratic_spline_derivative,
    quadratic_spline_evaluate,
    quadratic_spline_fit,
    quadratic_spline_integral,
)
from ._sample_set import SampleSet, sample_set
from ._singular_system_error import SingularSystemError
from ._solve_tridiagonal import solve_tridiagonal
from ._unsupported_operation_error import UnsupportedOperationError

__all__ = [
    "BSplineApproximation",
    "BSplineInterpolation",
    "ConstantInterpolation",
    "CubicSpline",
    "CurveFit",
    "ExtrapolationError",
    "InterpolationError",
    "InvalidControlPointCountError",
    "InvalidDegreeError",
    "InvalidInputError",
    "LagrangeInterpolation",
    "LinearInterpolation",
    "Loess",
    "OrderTooHighError",
    "OutOfDomainWarning",
    "QuadraticInterpolation",
    "QuadraticSpline",
    "SampleSet",
    "SingularSystemError",
    "UnsupportedOperationError",
    "b_spline_approximation_fit",
    "b_spline_approximation_knots",
    "b_spline_basis",
    "b_spline_derivative",
    "b_spline_evaluate",
    "b_spline_interpolation_fit",
    "b_spline_knots",
    "b_spline_parameters",
    "build",
    "constant_interpolation_derivative",
    "constant_interpolation_evaluate",
    "constant_interpolation_fit",
    "constant_interpolation_integral",
    "cubic_spline_derivative",
    "cubic_spline_evaluate",
    "cubic_spline_fit",
    "cubic_spline_integral",
    "curve_fit",
    "lagrange_interpolation_derivative",
    "lagrange_interpolation_evaluate",
    "lagrange_interpolation_fit",
    "linear_interpolation_derivative",
    "linear_interpolation_evaluate",
    "linear_interpolation_fit",
    "linear_interpolation_integral",
    "locate_segment",
    "loess_derivative",
    "loess_evaluate",
    "loess_fit",
    "quadratic_interpolation_derivative",
    "quadratic_interpolation_evaluate",
    "quadratic_interpolation_fit",
    "quadratic_spline_derivative",
    "quadratic_spline_evaluate",
    "quadratic_spline_fit",
    "quadratic_spline_integral",
    "sample_set",
    "solve_tridiagonal",
]
