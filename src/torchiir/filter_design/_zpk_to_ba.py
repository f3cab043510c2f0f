"""Conversion from zeros-poles-gain to ascending transfer function coefficients."""

from typing import Optional, Tuple

import torch
from torch import Tensor

from torchiir.polynomial import polynomial_from_roots


def zpk_to_ba(
    zeros: Tensor,
    poles: Tensor,
    gain: Tensor,
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tuple[Tensor, Tensor]:
    """Convert zeros, poles, gain to ascending transfer function coefficients.

    Parameters
    ----------
    zeros : Tensor
        Zeros of the transfer function, at most as many as poles.
    poles : Tensor
        Poles of the transfer function.
    gain : Tensor
        Gain of the transfer function.
    dtype : torch.dtype, optional
        Output dtype. Defaults to torch.get_default_dtype().
    device : torch.device, optional
        Output device. Defaults to CPU.

    Returns
    -------
    numerator : Tensor
        Numerator coefficients in ascending powers, zero-padded to
        ``len(poles) + 1``.
    denominator : Tensor
        Monic denominator coefficients in ascending powers, length
        ``len(poles) + 1``.

    Notes
    -----
    The transfer function is

    .. math::
        H(s) = k \\frac{(s - z_0)(s - z_1)...}{(s - p_0)(s - p_1)...}

    Zeros and poles are expected in conjugate pairs; the imaginary parts of
    the expanded coefficients are discarded.
    """
    if dtype is None:
        dtype = torch.get_default_dtype()
    if device is None:
        device = torch.device("cpu")

    zeros = zeros.to(torch.complex128)
    poles = poles.to(torch.complex128)

    numerator = polynomial_from_roots(zeros).coeffs * gain.to(torch.float64)
    denominator = polynomial_from_roots(poles).coeffs

    order = poles.numel()
    padded = torch.zeros(order + 1, dtype=torch.float64)
    padded[: numerator.numel()] = numerator.real

    return (
        padded.to(dtype=dtype, device=device),
        denominator.real.to(dtype=dtype, device=device),
    )
