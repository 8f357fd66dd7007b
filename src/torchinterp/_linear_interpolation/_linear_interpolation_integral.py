from __future__ import annotations

from typing import TYPE_CHECKING, Union

from torch import Tensor

from .._piecewise_polynomial import piecewise_polynomial_integral

if TYPE_CHECKING:
    from ._linear_interpolation import LinearInterpolation


def linear_interpolation_integral(
    interpolation: LinearInterpolation,
    a: Union[float, Tensor],
    b: Union[float, Tensor],
) -> Tensor:
    """Definite integral (trapezoids) from a to b, bounds clamped to the domain."""
    return piecewise_polynomial_integral(
        interpolation.samples.t, interpolation.coefficients, a, b
    )
