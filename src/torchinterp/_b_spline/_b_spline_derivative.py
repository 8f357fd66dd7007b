from __future__ import annotations

from typing import TYPE_CHECKING, Tuple, Union

import torch
from torch import Tensor

from .._check_order import check_order
from ._b_spline_basis import b_spline_basis
from ._b_spline_evaluate import b_spline_evaluate
from ._b_spline_parameter_map import b_spline_parameter_map

if TYPE_CHECKING:
    from ._b_spline_approximation import BSplineApproximation
    from ._b_spline_interpolation import BSplineInterpolation


def _differentiate_control_points(
    knots: Tensor,
    control_points: Tensor,
    degree: int,
) -> Tuple[Tensor, Tensor, int]:
    """
    Compute the first derivative of a B-spline curve in parameter space.

    For a B-spline of degree k with control points c_0, ..., c_{n-1} and knot
    vector t_0, ..., t_{n+k}, the derivative is a B-spline of degree k-1 with
    control points:

        d_i = k * (c_{i+1} - c_i) / (t_{i+k+1} - t_{i+1})

    and knot vector t_1, ..., t_{n+k-1} (first and last knots removed).
    """
    n_control = control_points.shape[0]

    # t_{i+k+1} - t_{i+1} for i = 0, ..., n-2
    denom = knots[degree + 1 : degree + n_control] - knots[1:n_control]

    diff = control_points[1:] - control_points[:-1]

    # Coincident knots contribute nothing
    safe_denom = torch.where(denom == 0, torch.ones_like(denom), denom)
    new_control_points = torch.where(
        denom == 0,
        torch.zeros_like(diff),
        degree * diff / safe_denom,
    )

    return knots[1:-1], new_control_points, degree - 1


def b_spline_derivative(
    spline: Union[BSplineInterpolation, BSplineApproximation],
    t: Union[float, Tensor],
    order: int = 1,
) -> Tensor:
    """
    Compute a derivative of a B-spline with respect to the sample abscissa.

    Parameters
    ----------
    spline : BSplineInterpolation or BSplineApproximation
        Fitted B-spline.
    t : float or Tensor
        Query points, any shape.
    order : int
        Derivative order, at most ``spline.degree``. Default is 1.

    Returns
    -------
    Tensor
        Derivative values, shape of ``t``.

    Raises
    ------
    OrderTooHighError
        If order exceeds the spline degree.

    Notes
    -----
    The curve is a function of the parameter tau, and tau depends piecewise
    linearly on t, so within a data interval

        d^k u / dt^k = (d^k u / dtau^k) * (dtau/dt)^k.
    """
    check_order(order, spline.degree)

    if order == 0:
        return b_spline_evaluate(spline, t)

    tau, slope = b_spline_parameter_map(
        spline.samples.t, spline.curve_parameters, t, spline.extrapolate
    )

    knots = spline.knots
    control_points = spline.control_points
    degree = spline.degree

    for _ in range(order):
        knots, control_points, degree = _differentiate_control_points(
            knots, control_points, degree
        )

    basis = b_spline_basis(tau, knots, degree)

    return torch.einsum("...i,i->...", basis, control_points) * slope**order
