from __future__ import annotations

import math
from typing import TYPE_CHECKING, Union

import torch
from torch import Tensor

from .._check_order import check_order
from .._locate_segment import apply_extrapolation, as_query
from ._lagrange_interpolation_evaluate import lagrange_interpolation_evaluate

if TYPE_CHECKING:
    from ._lagrange_interpolation import LagrangeInterpolation


def lagrange_interpolation_derivative(
    interpolation: LagrangeInterpolation,
    t: Union[float, Tensor],
    order: int = 1,
) -> Tensor:
    """
    Derivative of the interpolating polynomial at query points.

    Raises
    ------
    OrderTooHighError
        If order exceeds the polynomial degree n-1.

    Notes
    -----
    Horner's scheme on the Newton form

        p(t) = c_0 + (t - t_0)(c_1 + (t - t_1)(c_2 + ...))

    carries the scaled derivatives d_k = p^(k)(t) / k! along with the value.
    Unlike the barycentric formula it is regular at the nodes.
    """
    knots = interpolation.samples.t
    coefficients = interpolation.divided_differences
    n = knots.shape[0]

    check_order(order, n - 1)

    if order == 0:
        return lagrange_interpolation_evaluate(interpolation, t)

    t = as_query(t, knots)
    t = apply_extrapolation(knots, t, interpolation.extrapolate)

    t_flat = t.reshape(-1)

    d = [torch.zeros_like(t_flat) for _ in range(order + 1)]
    d[0] = d[0] + coefficients[n - 1]

    for j in range(n - 2, -1, -1):
        dx = t_flat - knots[j]
        for k in range(order, 0, -1):
            d[k] = d[k] * dx + d[k - 1]
        d[0] = d[0] * dx + coefficients[j]

    return (math.factorial(order) * d[order]).reshape(t.shape)
