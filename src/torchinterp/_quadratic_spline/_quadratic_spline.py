"""Quadratic spline interpolation."""

from typing import Union

from tensordict.tensorclass import tensorclass
from torch import Tensor

from .._sample_set import SampleSet
from ._quadratic_spline_derivative import quadratic_spline_derivative
from ._quadratic_spline_evaluate import quadratic_spline_evaluate
from ._quadratic_spline_integral import quadratic_spline_integral


@tensorclass
class QuadraticSpline:
    """Piecewise quadratic interpolant with continuous first derivative.

    Attributes
    ----------
    samples : SampleSet
        Samples the spline passes through.
    slopes : Tensor
        First derivative at every sample, shape (n,).
    coefficients : Tensor
        Polynomial coefficients, shape (n_segments, 3).
        For segment i, the polynomial is:
        a[i] + b[i]*(t-t_i) + c[i]*(t-t_i)^2
        where coefficients[i] = [a, b, c].
    extrapolate : str
        Extrapolation mode: "extrapolate", "clamp", "error".
    """

    samples: SampleSet
    slopes: Tensor
    coefficients: Tensor
    extrapolate: str

    def evaluate(self, t: Union[float, Tensor]) -> Tensor:
        return quadratic_spline_evaluate(self, t)

    def derivative(self, t: Union[float, Tensor], order: int = 1) -> Tensor:
        return quadratic_spline_derivative(self, t, order)

    def integral(
        self, a: Union[float, Tensor], b: Union[float, Tensor]
    ) -> Tensor:
        return quadratic_spline_integral(self, a, b)
