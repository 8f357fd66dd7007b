from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import torch

from .._locate_segment import Extrapolate, check_extrapolate
from .._sample_set import ArrayLike, sample_set
from .._solve_tridiagonal import solve_tridiagonal

if TYPE_CHECKING:
    from ._cubic_spline import CubicSpline

logger = logging.getLogger(__name__)


def cubic_spline_fit(
    u: ArrayLike,
    t: ArrayLike,
    extrapolate: Extrapolate = "extrapolate",
) -> CubicSpline:
    """
    Fit a natural cubic spline to data points.

    Parameters
    ----------
    u : Tensor or sequence of float
        Values at knots, shape (n,).
    t : Tensor or sequence of float
        Knot positions, shape (n,).
    extrapolate : str
        Extrapolation mode: "extrapolate", "clamp", "error".

    Returns
    -------
    CubicSpline
        Fitted spline.

    Raises
    ------
    InvalidInputError
        If the samples are malformed or fewer than 2.
    SingularSystemError
        If the moment system cannot be solved.
    """
    check_extrapolate(extrapolate)

    samples = sample_set(u, t, minimum_points=2)
    x = samples.t
    y = samples.u
    n = x.shape[0]

    # Compute interval widths
    h = x[1:] - x[:-1]  # (n-1,)

    # delta[i] = (y[i+1] - y[i]) / h[i]
    delta = (y[1:] - y[:-1]) / h  # (n-1,)

    # Build the n x n tridiagonal system for the moments m.
    # Interior rows: h[i-1]*m[i-1] + 2*(h[i-1]+h[i])*m[i] + h[i]*m[i+1] = 6*(delta[i] - delta[i-1])
    # Natural boundary rows: m[0] = m[n-1] = 0
    one = torch.ones(1, dtype=x.dtype, device=x.device)
    zero = torch.zeros(1, dtype=x.dtype, device=x.device)

    diag = torch.cat([one, 2 * (h[:-1] + h[1:]), one])  # (n,)
    upper = torch.cat([zero, h[1:]])  # (n-1,)
    lower = torch.cat([h[:-1], zero])  # (n-1,)
    rhs = torch.cat([zero, 6 * (delta[1:] - delta[:-1]), zero])  # (n,)

    m = solve_tridiagonal(diag, upper, lower, rhs)

    # Compute polynomial coefficients for each segment
    # p_i(t) = a_i + b_i*(t-x_i) + c_i*(t-x_i)^2 + d_i*(t-x_i)^3
    # where:
    #   a_i = y_i
    #   b_i = delta_i - h_i * (2*m_i + m_{i+1}) / 6
    #   c_i = m_i / 2
    #   d_i = (m_{i+1} - m_i) / (6 * h_i)
    a = y[:-1]
    b = delta - h * (2 * m[:-1] + m[1:]) / 6
    c = m[:-1] / 2
    d = (m[1:] - m[:-1]) / (6 * h)

    coefficients = torch.stack([a, b, c, d], dim=1)  # (n-1, 4)

    logger.debug("Fitted natural cubic spline with %d segments", n - 1)

    # Lazy import to avoid circular dependency
    from ._cubic_spline import CubicSpline

    return CubicSpline(
        samples=samples,
        moments=m,
        coefficients=coefficients,
        extrapolate=extrapolate,
        batch_size=[],
    )
