from __future__ import annotations

from typing import TYPE_CHECKING, Union

from torch import Tensor

from .._piecewise_polynomial import piecewise_polynomial_integral

if TYPE_CHECKING:
    from ._cubic_spline import CubicSpline


def cubic_spline_integral(
    spline: CubicSpline,
    a: Union[float, Tensor],
    b: Union[float, Tensor],
) -> Tensor:
    """
    Compute the definite integral of a cubic spline from a to b.

    Parameters
    ----------
    spline : CubicSpline
        Input cubic spline
    a : float or Tensor
        Lower bound of integration
    b : float or Tensor
        Upper bound of integration

    Returns
    -------
    integral : Tensor
        Definite integral value(s)

    Notes
    -----
    For cubic polynomial on segment [x_i, x_{i+1}]:
        y = a + b*dx + c*dx^2 + d*dx^3

    The antiderivative is:
        F(dx) = a*dx + (b/2)*dx^2 + (c/3)*dx^3 + (d/4)*dx^4

    Bounds are clamped to the spline domain; if [a, b] spans several
    segments the segment integrals are summed.
    """
    return piecewise_polynomial_integral(
        spline.samples.t, spline.coefficients, a, b
    )
