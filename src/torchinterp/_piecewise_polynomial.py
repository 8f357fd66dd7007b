"""Shared kernels for models stored as per-segment power-basis coefficients.

Segment ``i`` of a piecewise polynomial holds coefficients
``coefficients[i] = [c0, c1, ..., ck]`` in the local variable
``dx = t - knots[i]``::

    p_i(t) = c0 + c1*dx + c2*dx^2 + ... + ck*dx^k
"""

from typing import Union

import torch
from torch import Tensor

from ._locate_segment import as_query


def differentiate_coefficients(coefficients: Tensor, order: int) -> Tensor:
    """
    Differentiate per-segment power-basis coefficients.

    Parameters
    ----------
    coefficients : Tensor
        Shape (n_segments, k + 1).
    order : int
        Derivative order, non-negative.

    Returns
    -------
    Tensor
        Shape (n_segments, max(k + 1 - order, 1)). The j-th column of the
        result is ``c_{j+order} * (j+order)! / j!``.
    """
    if order == 0:
        return coefficients

    n_segments, n_coefficients = coefficients.shape
    if order >= n_coefficients:
        return torch.zeros(
            n_segments,
            1,
            dtype=coefficients.dtype,
            device=coefficients.device,
        )

    powers = torch.arange(
        order,
        n_coefficients,
        dtype=coefficients.dtype,
        device=coefficients.device,
    )

    # falling factorial j (j-1) ... (j-order+1)
    factor = torch.ones_like(powers)
    for r in range(order):
        factor = factor * (powers - r)

    return coefficients[:, order:] * factor


def _horner(coefficients: Tensor, dx: Tensor) -> Tensor:
    # coefficients: (*query_shape, m), dx: (*query_shape)
    y = coefficients[..., -1]
    for j in range(coefficients.shape[-1] - 2, -1, -1):
        y = coefficients[..., j] + dx * y
    return y


def piecewise_polynomial_evaluate(
    knots: Tensor,
    coefficients: Tensor,
    t: Tensor,
    index: Tensor,
    order: int = 0,
) -> Tensor:
    """
    Evaluate a piecewise polynomial (or one of its derivatives).

    Parameters
    ----------
    knots : Tensor
        Segment boundaries, shape (n_segments + 1,).
    coefficients : Tensor
        Shape (n_segments, k + 1).
    t : Tensor
        Query points, any shape.
    index : Tensor
        Segment index of every query point, shape of ``t``.
    order : int
        Derivative order.

    Returns
    -------
    Tensor
        Values, shape of ``t``.
    """
    coefficients = differentiate_coefficients(coefficients, order)

    dx = t - knots[index]

    return _horner(coefficients[index], dx)


def piecewise_polynomial_integral(
    knots: Tensor,
    coefficients: Tensor,
    a: Union[float, Tensor],
    b: Union[float, Tensor],
) -> Tensor:
    """
    Compute the definite integral of a piecewise polynomial from a to b.

    Bounds are clamped to ``[knots[0], knots[-1]]``. ``a > b`` gives the
    negated integral from b to a.

    Notes
    -----
    On segment i the antiderivative is

        F_i(dx) = c0*dx + (c1/2)*dx^2 + ... + (ck/(k+1))*dx^(k+1)

    The integral from ``knots[0]`` to x is the cumulative sum of complete
    segments below x plus ``F_i(x - knots[i])``.
    """
    a = as_query(a, knots)
    b = as_query(b, knots)

    n_segments, n_coefficients = coefficients.shape

    powers = torch.arange(
        1,
        n_coefficients + 1,
        dtype=coefficients.dtype,
        device=coefficients.device,
    )
    antiderivative = coefficients / powers

    def primitive(dx: Tensor, index: Tensor) -> Tensor:
        return dx * _horner(antiderivative[index], dx)

    widths = knots[1:] - knots[:-1]
    complete = primitive(
        widths, torch.arange(n_segments, device=knots.device)
    )
    cumulative = torch.cat(
        [
            torch.zeros(1, dtype=complete.dtype, device=complete.device),
            torch.cumsum(complete, dim=0),
        ]
    )

    def integral_from_start(x: Tensor) -> Tensor:
        x = torch.clamp(x, knots[0], knots[-1])
        index = torch.searchsorted(knots, x.reshape(-1), right=True) - 1
        index = torch.clamp(index, 0, n_segments - 1).reshape(x.shape)
        return cumulative[index] + primitive(x - knots[index], index)

    return integral_from_start(b) - integral_from_start(a)
