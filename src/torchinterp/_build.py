"""Unified fit interface for every interpolation method."""

from typing import Any

from ._b_spline import b_spline_approximation_fit, b_spline_interpolation_fit
from ._constant_interpolation import constant_interpolation_fit
from ._cubic_spline import cubic_spline_fit
from ._lagrange_interpolation import lagrange_interpolation_fit
from ._linear_interpolation import linear_interpolation_fit
from ._loess import loess_fit
from ._quadratic_interpolation import quadratic_interpolation_fit
from ._quadratic_spline import quadratic_spline_fit
from ._sample_set import ArrayLike

_FITS = {
    "linear": linear_interpolation_fit,
    "quadratic": quadratic_interpolation_fit,
    "lagrange": lagrange_interpolation_fit,
    "constant": constant_interpolation_fit,
    "quadratic_spline": quadratic_spline_fit,
    "cubic_spline": cubic_spline_fit,
    "b_spline_interpolation": b_spline_interpolation_fit,
    "b_spline_approximation": b_spline_approximation_fit,
    "loess": loess_fit,
}

METHODS = tuple(_FITS)


def build(method: str, u: ArrayLike, t: ArrayLike, **options: Any):
    r"""Fit an interpolation model selected by name.

    Parameters
    ----------
    method : str
        One of ``"linear"``, ``"quadratic"``, ``"lagrange"``, ``"constant"``,
        ``"quadratic_spline"``, ``"cubic_spline"``,
        ``"b_spline_interpolation"``, ``"b_spline_approximation"``,
        ``"loess"``. Hyphens are accepted in place of underscores.
    u : Tensor or sequence of float
        Sample values, shape (n,).
    t : Tensor or sequence of float
        Sample abscissae, shape (n,).
    **options
        Keyword arguments of the matching ``*_fit`` function, e.g.
        ``direction`` for ``"constant"``, ``n_control`` for
        ``"b_spline_approximation"`` or ``alpha`` for ``"loess"``.

    Returns
    -------
    Model
        Fitted model with ``evaluate(t)`` and ``derivative(t, order)``.

    Raises
    ------
    ValueError
        If ``method`` is not recognized.

    Examples
    --------
    >>> model = build("cubic_spline", [1.0, 0.0, 1.0], [0.0, 1.0, 2.0])
    >>> model.evaluate(1.0)
    tensor(0., dtype=torch.float64)
    """
    method_lower = method.lower().replace("-", "_")

    if method_lower not in _FITS:
        raise ValueError(
            f"Unknown method {method!r}. Supported methods: "
            + ", ".join(repr(m) for m in METHODS)
            + "."
        )

    return _FITS[method_lower](u, t, **options)
