"""Chebyshev Type II analog lowpass filter prototype."""

import math
from typing import Optional, Tuple

import torch
from torch import Tensor

from ._exceptions import FilterOrderError, SpecificationError
from ._zpk_to_ba import zpk_to_ba


def chebyshev_type_2_prototype(
    order: int,
    passband_ripple_db: float,
    stopband_attenuation_db: float,
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tuple[Tensor, Tensor]:
    """
    Design an analog Chebyshev Type II lowpass filter prototype.

    The filter has a monotonic passband and an equiripple stopband. Unlike
    the usual inverse Chebyshev normalization (stopband edge at 1 rad/s),
    the prototype is scaled so that the passband edge, where the
    attenuation reaches ``passband_ripple_db``, is at 1 rad/s. This lets it
    share frequency transforms with the other prototypes.

    Parameters
    ----------
    order : int
        The order of the filter. Must be positive.
    passband_ripple_db : float
        Attenuation at the passband edge (1 rad/s) in decibels. Must be
        positive.
    stopband_attenuation_db : float
        Minimum attenuation in the stopband in decibels. Must exceed
        passband_ripple_db.
    dtype : torch.dtype, optional
        Output dtype. Defaults to torch.get_default_dtype().
    device : torch.device, optional
        Output device. Defaults to CPU.

    Returns
    -------
    numerator : Tensor
        Numerator coefficients in ascending powers of s, length order + 1.
        For odd order the leading coefficient is zero.
    denominator : Tensor
        Monic denominator coefficients in ascending powers of s, length
        order + 1.

    Notes
    -----
    The stopband-normalized filter satisfies

    .. math::
        |H(j\\omega)|^2 = \\frac{1}{1 + 1 / (\\delta^2 T_n^2(1/\\omega))},
        \\quad \\delta = \\frac{1}{\\sqrt{10^{R_s/10} - 1}}

    Its passband edge is at
    :math:`\\omega_p = 1 / \\cosh(\\operatorname{arccosh}(1 / (\\delta\\epsilon)) / n)`
    with :math:`\\epsilon = \\sqrt{10^{R_p/10} - 1}`. Zeros and poles are
    divided by :math:`\\omega_p` to move that edge to 1 rad/s. The DC gain
    is 1.
    """
    if order < 1:
        raise FilterOrderError(f"Filter order must be positive, got {order}")
    if passband_ripple_db <= 0:
        raise SpecificationError(
            f"Passband ripple must be positive, got {passband_ripple_db}"
        )
    if stopband_attenuation_db <= passband_ripple_db:
        raise SpecificationError(
            f"Stopband attenuation ({stopband_attenuation_db} dB) must "
            f"exceed passband ripple ({passband_ripple_db} dB)"
        )

    delta = 1.0 / math.sqrt(10 ** (stopband_attenuation_db / 10) - 1)
    eps = math.sqrt(10 ** (passband_ripple_db / 10) - 1)
    a = math.asinh(1.0 / delta) / order

    k = torch.arange(order, dtype=torch.float64)
    theta = math.pi * (2 * k + 1) / (2 * order)

    # Reciprocals of the Type I poles
    p1 = torch.complex(
        -math.sinh(a) * torch.sin(theta), math.cosh(a) * torch.cos(theta)
    )
    poles = 1.0 / p1

    # Zeros at j / cos(theta_k); for odd order the middle one is at infinity
    cos_theta = torch.cos(theta)
    if order % 2 == 1:
        mid = order // 2
        cos_theta = torch.cat([cos_theta[:mid], cos_theta[mid + 1 :]])
    zeros_imag = 1.0 / cos_theta
    zeros = torch.complex(torch.zeros_like(zeros_imag), zeros_imag)

    passband_edge = 1.0 / math.cosh(math.acosh(1.0 / (delta * eps)) / order)
    zeros = zeros / passband_edge
    poles = poles / passband_edge

    num = torch.prod(-poles)
    if zeros.numel() > 0:
        gain = (num / torch.prod(-zeros)).real
    else:
        gain = num.real

    return zpk_to_ba(zeros, poles, gain, dtype=dtype, device=device)
