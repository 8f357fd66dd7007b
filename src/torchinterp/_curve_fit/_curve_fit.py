"""Nonlinear curve fitting via optimization."""

import logging
from typing import Callable, Union

import torch
from torch import Tensor

from .._sample_set import ArrayLike, sample_set
from ._curve_fit_result import CurveFit

logger = logging.getLogger(__name__)


def curve_fit(
    function: Callable[[Tensor, Tensor], Tensor],
    u: ArrayLike,
    t: ArrayLike,
    p0: Union[Tensor, ArrayLike],
    maxiter: int = 100,
    tol: float = 1e-10,
) -> CurveFit:
    r"""Fit a parametric function to samples using nonlinear least squares.

    Finds parameters ``p`` that minimize:

    .. math::

        \min_p \sum_i \left(f(t_i, p) - u_i\right)^2

    Parameters
    ----------
    function : Callable[[Tensor, Tensor], Tensor]
        Model function ``function(t, parameters) -> u``, differentiable in
        both arguments and applied elementwise in ``t``.
    u : Tensor or sequence of float
        Sample values, shape (n,).
    t : Tensor or sequence of float
        Sample abscissae, shape (n,).
    p0 : Tensor or sequence of float
        Initial parameter guess of shape ``(p,)``.
    maxiter : int
        Maximum number of L-BFGS iterations.
    tol : float
        Tolerance on the largest gradient component. The objective change
        tolerance is ``tol**2``.

    Returns
    -------
    CurveFit
        Fitted model. Failure to converge is reported in ``converged``, not
        raised.

    Examples
    --------
    Fit a line ``u = a*t + b``:

    >>> def line(t, p):
    ...     return p[0] * t + p[1]
    >>> fit = curve_fit(line, [1.0, 3.0, 5.0, 7.0], [0.0, 1.0, 2.0, 3.0], [0.0, 0.0])
    >>> fit.parameters
    tensor([2.0000, 1.0000], dtype=torch.float64)
    """
    samples = sample_set(u, t, minimum_points=2)

    params = (
        torch.as_tensor(p0, dtype=samples.t.dtype, device=samples.t.device)
        .clone()
        .detach()
        .requires_grad_(True)
    )

    optimizer = torch.optim.LBFGS(
        [params],
        max_iter=maxiter,
        max_eval=2 * maxiter,
        tolerance_grad=tol,
        tolerance_change=tol**2,
        line_search_fn="strong_wolfe",
    )

    def closure() -> Tensor:
        optimizer.zero_grad()
        loss = ((function(samples.t, params) - samples.u) ** 2).sum()
        loss.backward()
        return loss

    optimizer.step(closure)

    state = optimizer.state[params]
    num_iterations = state.get("n_iter", 0)
    num_evaluations = state.get("func_evals", 0)

    with torch.no_grad():
        fun = ((function(samples.t, params) - samples.u) ** 2).sum()

    converged = torch.tensor(
        num_iterations < maxiter and num_evaluations < 2 * maxiter,
        device=params.device,
    )

    logger.debug(
        "Curve fit finished after %d iterations, residual %g",
        num_iterations,
        fun.item(),
    )

    return CurveFit(
        function=function,
        parameters=params.detach(),
        converged=converged,
        num_iterations=torch.tensor(
            num_iterations, dtype=torch.int64, device=params.device
        ),
        fun=fun,
    )
