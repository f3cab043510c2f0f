"""Butterworth analog lowpass filter prototype."""

import math
from typing import Optional, Tuple

import torch
from torch import Tensor

from ._exceptions import FilterOrderError, SpecificationError
from ._zpk_to_ba import zpk_to_ba


def butterworth_prototype(
    order: int,
    passband_ripple_db: float,
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tuple[Tensor, Tensor]:
    """
    Butterworth analog lowpass filter prototype.

    Returns the transfer function of an nth-order analog lowpass
    Butterworth filter whose attenuation at 1 rad/s equals the passband
    ripple.

    Parameters
    ----------
    order : int
        Filter order. Must be positive.
    passband_ripple_db : float
        Attenuation at the passband edge (1 rad/s) in decibels. Must be
        positive. 3.0103 dB gives the classic half-power prototype.
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
    With :math:`\\epsilon = \\sqrt{10^{R_p/10} - 1}`, the magnitude response
    is

    .. math::
        |H(j\\omega)|^2 = \\frac{1}{1 + \\epsilon^2 \\omega^{2n}}

    The poles lie on a circle of radius :math:`\\epsilon^{-1/n}` in the left
    half-plane and the numerator is the constant :math:`1/\\epsilon`, which
    gives unit DC gain.

    Examples
    --------
    >>> b, a = butterworth_prototype(2, 3.0103, dtype=torch.float64)
    >>> a
    tensor([1.0000, 1.4142, 1.0000], dtype=torch.float64)
    """
    if order < 1:
        raise FilterOrderError(f"Filter order must be positive, got {order}")
    if passband_ripple_db <= 0:
        raise SpecificationError(
            f"Passband ripple must be positive, got {passband_ripple_db}"
        )

    eps = math.sqrt(10 ** (passband_ripple_db / 10) - 1)
    radius = eps ** (-1.0 / order)

    # Zeros: empty (all zeros at infinity)
    zeros = torch.empty(0, dtype=torch.complex128)

    # s_k = radius * exp(j * pi * (2k + n + 1) / (2n)) for k = 0, ..., n-1
    k = torch.arange(order, dtype=torch.float64)
    angles = math.pi * (2 * k + order + 1) / (2 * order)
    poles = radius * torch.complex(torch.cos(angles), torch.sin(angles))

    gain = torch.tensor(1.0 / eps, dtype=torch.float64)

    return zpk_to_ba(zeros, poles, gain, dtype=dtype, device=device)
