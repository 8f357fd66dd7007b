"""Natural cubic spline interpolation."""

from typing import Union

from tensordict.tensorclass import tensorclass
from torch import Tensor

from .._sample_set import SampleSet
from ._cubic_spline_derivative import cubic_spline_derivative
from ._cubic_spline_evaluate import cubic_spline_evaluate
from ._cubic_spline_integral import cubic_spline_integral


@tensorclass
class CubicSpline:
    """Piecewise cubic polynomial interpolant.

    Attributes
    ----------
    samples : SampleSet
        Samples the spline passes through.
    moments : Tensor
        Second derivative at every sample, shape (n,). Zero at both ends.
    coefficients : Tensor
        Polynomial coefficients, shape (n_segments, 4).
        For segment i, the polynomial is:
        a[i] + b[i]*(t-t_i) + c[i]*(t-t_i)^2 + d[i]*(t-t_i)^3
        where coefficients[i] = [a, b, c, d].
    extrapolate : str
        Extrapolation mode: "extrapolate", "clamp", "error".
    """

    samples: SampleSet
    moments: Tensor
    coefficients: Tensor
    extrapolate: str

    def evaluate(self, t: Union[float, Tensor]) -> Tensor:
        return cubic_spline_evaluate(self, t)

    def derivative(self, t: Union[float, Tensor], order: int = 1) -> Tensor:
        return cubic_spline_derivative(self, t, order)

    def integral(
        self, a: Union[float, Tensor], b: Union[float, Tensor]
    ) -> Tensor:
        return cubic_spline_integral(self, a, b)
