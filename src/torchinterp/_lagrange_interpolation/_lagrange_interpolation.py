"""Global polynomial interpolation in barycentric form."""

from typing import Union

from tensordict.tensorclass import tensorclass
from torch import Tensor

from .._sample_set import SampleSet
from ._lagrange_interpolation_derivative import lagrange_interpolation_derivative
from ._lagrange_interpolation_evaluate import lagrange_interpolation_evaluate


@tensorclass
class LagrangeInterpolation:
    """Polynomial of degree n-1 through all n samples.

    Attributes
    ----------
    samples : SampleSet
        Interpolation nodes.
    weights : Tensor
        Barycentric weights w_i = 1 / prod_{j != i} (t_i - t_j), shape (n,).
    divided_differences : Tensor
        Newton coefficients u[t_0], u[t_0, t_1], ..., shape (n,). Used for
        derivatives.
    extrapolate : str
        Extrapolation mode: "extrapolate", "clamp", "error".

    Notes
    -----
    High-degree interpolation on equally spaced nodes oscillates near the
    ends of the interval (Runge's phenomenon). Nothing here corrects it.
    """

    samples: SampleSet
    weights: Tensor
    divided_differences: Tensor
    extrapolate: str

    def evaluate(self, t: Union[float, Tensor]) -> Tensor:
        return lagrange_interpolation_evaluate(self, t)

    def derivative(self, t: Union[float, Tensor], order: int = 1) -> Tensor:
        return lagrange_interpolation_derivative(self, t, order)
