from __future__ import annotations

from typing import TYPE_CHECKING, Union

import torch
from torch import Tensor

from ._b_spline_basis import b_spline_basis
from ._b_spline_parameter_map import b_spline_parameter_map

if TYPE_CHECKING:
    from ._b_spline_approximation import BSplineApproximation
    from ._b_spline_interpolation import BSplineInterpolation


def b_spline_evaluate(
    spline: Union[BSplineInterpolation, BSplineApproximation],
    t: Union[float, Tensor],
) -> Tensor:
    """
    Evaluate a B-spline interpolant or approximant at query points.

    Parameters
    ----------
    spline : BSplineInterpolation or BSplineApproximation
        Fitted B-spline.
    t : float or Tensor
        Query points, any shape.

    Returns
    -------
    Tensor
        Values, shape of ``t``.

    Raises
    ------
    ExtrapolationError
        If any query point is outside the sample domain and
        spline.extrapolate == 'error'
    """
    tau, _ = b_spline_parameter_map(
        spline.samples.t, spline.curve_parameters, t, spline.extrapolate
    )

    basis = b_spline_basis(tau, spline.knots, spline.degree)

    # Sum over control points: result[...] = sum_i basis[..., i] * c[i]
    return torch.einsum("...i,i->...", basis, spline.control_points)
