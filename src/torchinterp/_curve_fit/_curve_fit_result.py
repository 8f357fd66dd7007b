from typing import Callable, NamedTuple, Union

import torch
from torch import Tensor


class CurveFit(NamedTuple):
    """Parametric model fitted by nonlinear least squares.

    Parameters
    ----------
    function : Callable[[Tensor, Tensor], Tensor]
        Model function ``function(t, parameters) -> u``.
    parameters : Tensor
        Fitted parameters, shape ``(p,)``.
    converged : Tensor
        Boolean scalar, whether the optimizer stopped on a tolerance rather
        than the iteration limit.
    num_iterations : Tensor
        Number of optimizer iterations. ``int64`` scalar.
    fun : Tensor
        Sum of squared residuals at ``parameters``.
    """

    function: Callable[[Tensor, Tensor], Tensor]
    parameters: Tensor
    converged: Tensor
    num_iterations: Tensor
    fun: Tensor

    def evaluate(self, t: Union[float, Tensor]) -> Tensor:
        t = torch.as_tensor(
            t, dtype=self.parameters.dtype, device=self.parameters.device
        )
        with torch.no_grad():
            return self.function(t, self.parameters)

    def derivative(self, t: Union[float, Tensor], order: int = 1) -> Tensor:
        """
        Derivative of the fitted model with respect to ``t`` by autograd.

        The model function is applied elementwise, so the derivative at every
        query is the gradient of the summed output.
        """
        if order < 0:
            raise ValueError(f"Derivative order must be non-negative, got {order}")

        t = torch.as_tensor(
            t, dtype=self.parameters.dtype, device=self.parameters.device
        )

        if order == 0:
            return self.evaluate(t)

        x = t.detach().requires_grad_(True)
        y = self.function(x, self.parameters.detach())

        for _ in range(order):
            if not y.requires_grad:
                # Lower-order derivative no longer depends on t
                return torch.zeros_like(t)
            (y,) = torch.autograd.grad(
                y.sum(), x, create_graph=True, allow_unused=True
            )
            if y is None:
                return torch.zeros_like(t)

        return y.detach()
