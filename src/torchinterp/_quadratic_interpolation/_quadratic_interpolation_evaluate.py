from __future__ import annotations

from typing import TYPE_CHECKING, Union

import torch
from torch import Tensor

from .._locate_segment import locate_segment

if TYPE_CHECKING:
    from ._quadratic_interpolation import QuadraticInterpolation


def _window(knots: Tensor, t: Tensor, index: Tensor) -> Tensor:
    """First sample index of the three-point window for every query."""
    n = knots.shape[0]

    left = torch.clamp(index - 1, 0, n - 1)
    right = torch.clamp(index + 2, 0, n - 1)

    # Keep the query as central as possible: take the nearer neighbor
    use_left = (t - knots[left]) <= (knots[right] - t)
    start = torch.where(use_left, index - 1, index)

    return torch.clamp(start, 0, n - 3)


def _lagrange_basis(
    t: Tensor, xa: Tensor, xb: Tensor, xc: Tensor, order: int
) -> Tensor:
    # Basis polynomial equal to 1 at xa and 0 at xb, xc
    denom = (xa - xb) * (xa - xc)
    if order == 0:
        return (t - xb) * (t - xc) / denom
    if order == 1:
        return ((t - xb) + (t - xc)) / denom
    return 2 / denom


def quadratic_interpolation_terms(
    interpolation: QuadraticInterpolation,
    t: Union[float, Tensor],
    order: int = 0,
) -> Tensor:
    """Window selection shared by evaluation and differentiation."""
    knots = interpolation.samples.t
    values = interpolation.samples.u

    # model method -> public function -> here -> locate_segment
    t, index = locate_segment(
        knots, t, interpolation.extrapolate, stacklevel=6
    )
    start = _window(knots, t, index)

    x0, x1, x2 = knots[start], knots[start + 1], knots[start + 2]
    y0, y1, y2 = values[start], values[start + 1], values[start + 2]

    y = (
        y0 * _lagrange_basis(t, x0, x1, x2, order)
        + y1 * _lagrange_basis(t, x1, x0, x2, order)
        + y2 * _lagrange_basis(t, x2, x0, x1, order)
    )

    return y


def quadratic_interpolation_evaluate(
    interpolation: QuadraticInterpolation,
    t: Union[float, Tensor],
) -> Tensor:
    """
    Evaluate a local quadratic interpolant at query points.

    For a query in interval i the window is samples {i, i+1} plus the
    neighbor (i-1 or i+2) nearer to the query. At the first and last
    intervals the window is pushed toward the interior.

    Parameters
    ----------
    interpolation : QuadraticInterpolation
        Fitted interpolant from quadratic_interpolation_fit
    t : float or Tensor
        Query points, any shape

    Returns
    -------
    Tensor
        Interpolated values, shape of ``t``
    """
    return quadratic_interpolation_terms(interpolation, t)
