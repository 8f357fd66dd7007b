from __future__ import annotations

from typing import TYPE_CHECKING, Union

from torch import Tensor

from .._piecewise_polynomial import piecewise_polynomial_integral

if TYPE_CHECKING:
    from ._constant_interpolation import ConstantInterpolation


def constant_interpolation_integral(
    interpolation: ConstantInterpolation,
    a: Union[float, Tensor],
    b: Union[float, Tensor],
) -> Tensor:
    """Definite integral from a to b, bounds clamped to the domain."""
    values = interpolation.samples.u

    if interpolation.direction == "left":
        heights = values[:-1]
    else:
        heights = values[1:]

    return piecewise_polynomial_integral(
        interpolation.samples.t, heights.unsqueeze(-1), a, b
    )
