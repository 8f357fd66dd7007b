"""Parametrization and clamped knot vectors for B-spline fits."""

from typing import Literal

import torch
from torch import Tensor

Parametrization = Literal["uniform", "arc_length"]
KnotPolicy = Literal["average", "uniform"]


def check_b_spline_options(parametrization: str, knot_policy: str) -> None:
    if parametrization not in ("uniform", "arc_length"):
        raise ValueError(
            f"Unknown parametrization {parametrization!r}. "
            f"Supported parametrizations: 'uniform', 'arc_length'."
        )
    if knot_policy not in ("average", "uniform"):
        raise ValueError(
            f"Unknown knot policy {knot_policy!r}. "
            f"Supported knot policies: 'average', 'uniform'."
        )


def b_spline_parameters(
    u: Tensor,
    t: Tensor,
    parametrization: Parametrization = "uniform",
) -> Tensor:
    """
    Assign a curve parameter in [0, 1] to every sample.

    Parameters
    ----------
    u : Tensor
        Sample values, shape (n,).
    t : Tensor
        Sample abscissae, shape (n,). Strictly increasing.
    parametrization : str
        ``"uniform"``: equally spaced parameters.
        ``"arc_length"``: normalized cumulative chord length of the polyline
        through the points ``(t_i, u_i)``.

    Returns
    -------
    Tensor
        Strictly increasing parameters, shape (n,), from 0 to 1.
    """
    n = t.shape[0]

    if parametrization == "uniform":
        return torch.linspace(0, 1, n, dtype=t.dtype, device=t.device)

    chords = torch.sqrt((t[1:] - t[:-1]) ** 2 + (u[1:] - u[:-1]) ** 2)
    cumulative = torch.cat(
        [
            torch.zeros(1, dtype=t.dtype, device=t.device),
            torch.cumsum(chords, dim=0),
        ]
    )

    return cumulative / cumulative[-1]


def _clamp(interior: Tensor, degree: int) -> Tensor:
    # Multiplicity degree + 1 at both ends of [0, 1]
    start = torch.zeros(degree + 1, dtype=interior.dtype, device=interior.device)
    end = torch.ones(degree + 1, dtype=interior.dtype, device=interior.device)
    return torch.cat([start, interior, end])


def b_spline_knots(
    parameters: Tensor,
    degree: int,
    knot_policy: KnotPolicy = "average",
) -> Tensor:
    """
    Clamped knot vector for interpolation (one control point per sample).

    Parameters
    ----------
    parameters : Tensor
        Sample parameters, shape (n,).
    degree : int
        Spline degree, 1 <= degree < n.
    knot_policy : str
        ``"average"``: interior knot j is the mean of the ``degree``
        parameters ``tau_j, ..., tau_{j+degree-1}`` (de Boor averaging).
        ``"uniform"``: interior knots equally spaced.

    Returns
    -------
    Tensor
        Knot vector, shape (n + degree + 1,).
    """
    n = parameters.shape[0]
    n_interior = n - degree - 1

    if n_interior == 0:
        # Bezier curve, no interior knots
        interior = parameters[:0]
    elif knot_policy == "average":
        # windows tau[j : j + degree] for j = 1, ..., n - degree - 1
        interior = parameters[1 : n - 1].unfold(0, degree, 1).mean(dim=-1)
    else:
        interior = torch.arange(
            1, n_interior + 1, dtype=parameters.dtype, device=parameters.device
        ) / (n_interior + 1)

    return _clamp(interior, degree)


def b_spline_approximation_knots(
    parameters: Tensor,
    degree: int,
    n_control: int,
    knot_policy: KnotPolicy = "average",
) -> Tensor:
    """
    Clamped knot vector for a least-squares fit with fewer control points.

    Parameters
    ----------
    parameters : Tensor
        Sample parameters, shape (n,).
    degree : int
        Spline degree.
    n_control : int
        Number of control points h, degree < h < n.
    knot_policy : str
        ``"average"`` spreads the samples evenly over the knot spans: with
        ``c = n / (h - degree)``, interior knot j interpolates between
        ``tau_{i-1}`` and ``tau_i`` where ``i = floor(j c)``, so that every
        span contains at least one sample parameter. ``"uniform"`` spaces the
        interior knots equally.

    Returns
    -------
    Tensor
        Knot vector, shape (n_control + degree + 1,).

    References
    ----------
    .. [1] Piegl, L. and Tiller, W. "The NURBS Book", Springer, 1997, eq. 9.69.
    """
    n = parameters.shape[0]
    n_spans = n_control - degree

    j = torch.arange(
        1, n_spans, dtype=parameters.dtype, device=parameters.device
    )

    if knot_policy == "average":
        position = j * (n / n_spans)
        i = torch.floor(position).long()
        alpha = position - i.to(parameters.dtype)
        interior = (1 - alpha) * parameters[i - 1] + alpha * parameters[i]
    else:
        interior = j / n_spans

    return _clamp(interior, degree)
