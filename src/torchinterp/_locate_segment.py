from __future__ import annotations

import warnings
from typing import Literal, Tuple, Union

import torch
from torch import Tensor

from ._extrapolation_error import ExtrapolationError
from ._out_of_domain_warning import OutOfDomainWarning

Extrapolate = Literal["extrapolate", "clamp", "error"]

EXTRAPOLATE_MODES = ("extrapolate", "clamp", "error")


def check_extrapolate(extrapolate: str) -> None:
    if extrapolate not in EXTRAPOLATE_MODES:
        raise ValueError(
            f"Unknown extrapolation mode {extrapolate!r}. Supported modes: "
            f"'extrapolate', 'clamp', 'error'."
        )


def as_query(t: Union[float, Tensor], knots: Tensor) -> Tensor:
    """Convert a query to a tensor matching the dtype and device of ``knots``."""
    return torch.as_tensor(t, dtype=knots.dtype, device=knots.device)


def apply_extrapolation(
    knots: Tensor,
    t: Tensor,
    extrapolate: str,
    stacklevel: int = 4,
) -> Tensor:
    """
    Resolve out-of-domain queries according to an extrapolation policy.

    Parameters
    ----------
    knots : Tensor
        Sample abscissae, shape (n,). Strictly increasing.
    t : Tensor
        Query points, any shape.
    extrapolate : str
        ``"extrapolate"`` leaves queries untouched, ``"clamp"`` clamps them to
        ``[knots[0], knots[-1]]``, ``"error"`` rejects them.
    stacklevel : int
        Passed to ``warnings.warn``. The default 4 points at the code that
        called a model method when the call path is
        ``model.evaluate -> *_evaluate -> apply_extrapolation``. Calling a
        ``*_evaluate`` function directly reports the frame above the caller.

    Returns
    -------
    Tensor
        Query points to evaluate.

    Raises
    ------
    ExtrapolationError
        If a query is out of domain and ``extrapolate == "error"``.
    """
    t_min = knots[0]
    t_max = knots[-1]

    outside = (t < t_min) | (t > t_max)
    if not torch.any(outside):
        return t

    if extrapolate == "error":
        raise ExtrapolationError(
            f"Query points outside sample domain [{t_min.item()}, {t_max.item()}]"
        )

    warnings.warn(
        f"{int(outside.sum().item())} query point(s) outside sample domain "
        f"[{t_min.item()}, {t_max.item()}], resolved with extrapolate={extrapolate!r}",
        OutOfDomainWarning,
        stacklevel=stacklevel,
    )

    if extrapolate == "clamp":
        return torch.clamp(t, t_min, t_max)

    return t


def locate_segment(
    knots: Tensor,
    t: Union[float, Tensor],
    extrapolate: str = "extrapolate",
    side: Literal["left", "right"] = "right",
    stacklevel: int = 5,
) -> Tuple[Tensor, Tensor]:
    """
    Find the interval enclosing each query point.

    Parameters
    ----------
    knots : Tensor
        Sample abscissae, shape (n,). Strictly increasing, n >= 2.
    t : float or Tensor
        Query points, any shape.
    extrapolate : str
        Extrapolation policy, see :func:`apply_extrapolation`.
    side : str
        ``"right"`` selects i with ``knots[i] <= t < knots[i+1]``,
        ``"left"`` selects i with ``knots[i] < t <= knots[i+1]``.
    stacklevel : int
        Warning stack level, one more than for :func:`apply_extrapolation`
        since this function adds a frame. The default targets
        ``model.evaluate -> *_evaluate -> locate_segment``.

    Returns
    -------
    t : Tensor
        Query points after the extrapolation policy, shape of ``t``.
    index : Tensor
        Segment indices in ``[0, n-2]``, shape of ``t``. Queries outside the
        domain map to the nearest boundary segment.
    """
    t = as_query(t, knots)
    t = apply_extrapolation(knots, t, extrapolate, stacklevel=stacklevel)

    n_segments = knots.shape[0] - 1

    # searchsorted returns the insertion index; the segment is one less
    index = torch.searchsorted(knots, t.reshape(-1), right=(side == "right")) - 1
    index = torch.clamp(index, 0, n_segments - 1)

    return t, index.reshape(t.shape)
