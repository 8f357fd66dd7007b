from typing import Tuple, Union

from torch import Tensor

from .._locate_segment import locate_segment


def b_spline_parameter_map(
    t_samples: Tensor,
    parameters: Tensor,
    t: Union[float, Tensor],
    extrapolate: str,
) -> Tuple[Tensor, Tensor]:
    """
    Map abscissae to curve parameters.

    The map is piecewise linear through the points ``(t_i, tau_i)`` and is
    continued linearly by the boundary pieces outside ``[t_0, t_{n-1}]``.

    Returns
    -------
    tau : Tensor
        Curve parameters, shape of ``t``.
    slope : Tensor
        ``dtau/dt`` at every query, shape of ``t``.
    """
    # model.evaluate -> b_spline_evaluate -> here -> locate_segment
    t, index = locate_segment(t_samples, t, extrapolate, stacklevel=6)

    slope = (parameters[index + 1] - parameters[index]) / (
        t_samples[index + 1] - t_samples[index]
    )

    return parameters[index] + slope * (t - t_samples[index]), slope
