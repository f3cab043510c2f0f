"""Elliptic (Cauer) analog lowpass filter prototype."""

from typing import Optional, Tuple

import torch
from torch import Tensor

from ._elliptic_functions import elliptic_zpk
from ._exceptions import FilterOrderError, SpecificationError
from ._zpk_to_ba import zpk_to_ba


def elliptic_prototype(
    order: int,
    passband_ripple_db: float,
    stopband_attenuation_db: float,
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tuple[Tensor, Tensor]:
    """
    Design an analog elliptic (Cauer) lowpass filter prototype.

    Elliptic filters provide the steepest rolloff for a given filter order
    at the cost of ripple in both passband and stopband. The passband edge
    is at 1 rad/s.

    Parameters
    ----------
    order : int
        The order of the filter. Must be positive.
    passband_ripple_db : float
        Maximum ripple in the passband in decibels. Must be positive.
        Common values: 0.5 dB, 1 dB, 3 dB.
    stopband_attenuation_db : float
        Minimum attenuation in the stopband in decibels. Must exceed
        passband_ripple_db. Common values: 20 dB, 40 dB, 60 dB.
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
    The zeros are on the imaginary axis and the poles in the left
    half-plane. Even orders have n zeros, odd orders n - 1 zeros and one
    real pole. The DC gain is 1 for odd order and
    :math:`1/\\sqrt{1+\\epsilon^2}` for even order.

    Examples
    --------
    >>> b, a = elliptic_prototype(4, 1.0, 40.0, dtype=torch.float64)
    >>> b.shape, a.shape
    (torch.Size([5]), torch.Size([5]))
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

    zeros_np, poles_np, gain_val = elliptic_zpk(
        order, passband_ripple_db, stopband_attenuation_db
    )

    zeros = torch.as_tensor(zeros_np, dtype=torch.complex128)
    poles = torch.as_tensor(poles_np, dtype=torch.complex128)
    gain = torch.tensor(gain_val, dtype=torch.float64)

    return zpk_to_ba(zeros, poles, gain, dtype=dtype, device=device)
