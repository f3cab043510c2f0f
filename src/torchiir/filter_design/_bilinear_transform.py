"""Bilinear transform for analog to digital transfer functions."""

from typing import Optional, Tuple

import torch
from torch import Tensor

from ._coefficients import CoefficientsLike
from ._rational_compose import rational_compose


def bilinear_transform(
    numerator: CoefficientsLike,
    denominator: CoefficientsLike,
    *,
    out: Optional[Tuple[Tensor, Tensor]] = None,
) -> Tuple[Tensor, Tensor]:
    """
    Transform an analog transfer function to digital using bilinear transform.

    Substitutes

    .. math::
        s = \\frac{1 - z^{-1}}{1 + z^{-1}}

    into H(s) = B(s)/A(s), the bilinear transform with 2/T = 1. Analog
    frequency :math:`\\Omega` maps to digital frequency
    :math:`\\omega = 2 \\arctan \\Omega`, so a normalized digital cutoff
    ``w`` (fraction of Nyquist) corresponds to the prewarped analog
    frequency ``tan(w * pi / 2)``.

    Parameters
    ----------
    numerator : Tensor or array_like
        Analog numerator coefficients in ascending powers of s.
    denominator : Tensor or array_like
        Analog denominator coefficients in ascending powers of s, same
        length as the numerator.
    out : tuple of Tensor, optional
        Pre-allocated ``(numerator, denominator)`` of the input length.

    Returns
    -------
    numerator_digital : Tensor
        Digital numerator coefficients in ascending powers of z^-1.
    denominator_digital : Tensor
        Digital denominator coefficients in ascending powers of z^-1.

    Notes
    -----
    The output is not normalized, so ``denominator_digital[0]`` is in
    general not 1. Divide both by it to obtain the form returned by
    ``scipy.signal.bilinear(..., fs=0.5)``.

    Examples
    --------
    >>> # First-order lowpass: H(s) = 1 / (1 + s)
    >>> b_d, a_d = bilinear_transform([1.0, 0.0], [1.0, 1.0])
    >>> b_d, a_d
    (tensor([1., 1.], dtype=torch.float64), tensor([2., 0.], dtype=torch.float64))
    """
    dtype = torch.float64
    device = None
    if isinstance(numerator, Tensor):
        device = numerator.device
        if numerator.is_floating_point():
            dtype = numerator.dtype

    substitution_numerator = torch.tensor(
        [1.0, -1.0], dtype=dtype, device=device
    )
    substitution_denominator = torch.tensor(
        [1.0, 1.0], dtype=dtype, device=device
    )

    return rational_compose(
        numerator,
        denominator,
        substitution_numerator,
        substitution_denominator,
        out=out,
    )
