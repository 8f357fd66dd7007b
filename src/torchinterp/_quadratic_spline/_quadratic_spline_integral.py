from __future__ import annotations

from typing import TYPE_CHECKING, Union

from torch import Tensor

from .._piecewise_polynomial import piecewise_polynomial_integral

if TYPE_CHECKING:
    from ._quadratic_spline import QuadraticSpline


def quadratic_spline_integral(
    spline: QuadraticSpline,
    a: Union[float, Tensor],
    b: Union[float, Tensor],
) -> Tensor:
    """Definite integral from a to b, bounds clamped to the domain."""
    return piecewise_polynomial_integral(
        spline.samples.t, spline.coefficients, a, b
    )
