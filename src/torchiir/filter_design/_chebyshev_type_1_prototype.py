"""Chebyshev Type I analog lowpass filter prototype."""

import math
from typing import Optional, Tuple

import torch
from torch import Tensor

from ._exceptions import FilterOrderError, SpecificationError
from ._zpk_to_ba import zpk_to_ba


def chebyshev_type_1_prototype(
    order: int,
    passband_ripple_db: float,
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tuple[Tensor, Tensor]:
    """
    Design an analog Chebyshev Type I lowpass filter prototype.

    The filter has an equiripple passband up to 1 rad/s and a monotonic
    stopband.

    Parameters
    ----------
    order : int
        The order of the filter. Must be positive.
    passband_ripple_db : float
        Maximum ripple in the passband in decibels. Must be positive.
        Common values: 0.5 dB, 1 dB, 3 dB.
    dtype : torch.dtype, optional
        Output dtype. Defaults to torch.get_default_dtype().
    device : torch.device, optional
        Output device. Defaults to CPU.

    Returns
    -------
    numerator : Tensor
        Numerator coefficients in ascending powers of s, length order + 1.
    denominator : Tensor
        Monic denominator coefficients in ascending powers of s, length
        order + 1.

    Notes
    -----
    With :math:`\\epsilon = \\sqrt{10^{R_p/10} - 1}` and
    :math:`a = \\operatorname{arcsinh}(1/\\epsilon)/n`, the poles are

    .. math::
        p_k = -\\sinh(a) \\sin(\\theta_k) + j \\cosh(a) \\cos(\\theta_k),
        \\quad \\theta_k = \\frac{\\pi (2k + 1)}{2n}

    The DC gain is 1 for odd order and :math:`1/\\sqrt{1+\\epsilon^2}` for
    even order.
    """
    if order < 1:
        raise FilterOrderError(f"Filter order must be positive, got {order}")
    if passband_ripple_db <= 0:
        raise SpecificationError(
            f"Passband ripple must be positive, got {passband_ripple_db}"
        )

    eps = math.sqrt(10 ** (passband_ripple_db / 10) - 1)
    a = math.asinh(1.0 / eps) / order

    k = torch.arange(order, dtype=torch.float64)
    theta = math.pi * (2 * k + 1) / (2 * order)

    poles = torch.complex(
        -math.sinh(a) * torch.sin(theta), math.cosh(a) * torch.cos(theta)
    )

    # No zeros for Chebyshev Type I (all-pole filter)
    zeros = torch.zeros(0, dtype=torch.complex128)

    gain = torch.prod(-poles).real
    if order % 2 == 0:
        gain = gain / math.sqrt(1 + eps**2)

    return zpk_to_ba(zeros, poles, gain, dtype=dtype, device=device)
