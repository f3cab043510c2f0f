"""Lowpass to bandpass frequency transform for analog transfer functions."""

from typing import Optional, Tuple, Union

import torch
from torch import Tensor

from ._coefficients import CoefficientsLike, as_coefficients, as_frequency
from ._exceptions import FilterOrderError, FrequencyError
from ._rational_compose import rational_compose


def lowpass_to_bandpass(
    numerator: CoefficientsLike,
    denominator: CoefficientsLike,
    reference_frequency: Union[float, Tensor] = 1.0,
    low_frequency: Union[float, Tensor] = 1.0,
    high_frequency: Union[float, Tensor] = 2.0,
    *,
    out: Optional[Tuple[Tensor, Tensor]] = None,
) -> Tuple[Tensor, Tensor]:
    """
    Transform an analog lowpass transfer function to a bandpass one.

    Performs the substitution

    .. math::
        s \\to \\frac{s^2 + \\omega_l \\omega_h / \\omega_0^2}
                     {s (\\omega_h - \\omega_l) / \\omega_0}

    which maps a lowpass prototype normalized to reference_frequency
    (:math:`\\omega_0`) onto a passband between low_frequency
    (:math:`\\omega_l`) and high_frequency (:math:`\\omega_h`).

    Parameters
    ----------
    numerator : Tensor or array_like
        Analog numerator coefficients in ascending powers of s, length n + 1.
    denominator : Tensor or array_like
        Analog denominator coefficients in ascending powers of s, length
        n + 1.
    reference_frequency : float or Tensor
        Frequency normalization of the lowpass prototype (rad/s).
    low_frequency : float or Tensor
        Lower passband edge (rad/s).
    high_frequency : float or Tensor
        Upper passband edge (rad/s). Must exceed low_frequency.
    out : tuple of Tensor, optional
        Pre-allocated ``(numerator, denominator)`` of length 2n + 1.

    Returns
    -------
    numerator_new : Tensor
        Numerator of the bandpass filter, ascending, length 2n + 1.
    denominator_new : Tensor
        Denominator of the bandpass filter, ascending, length 2n + 1.

    Raises
    ------
    PointerError
        If a coefficient argument is None.
    FilterOrderError
        If the filter order is less than 1.
    FrequencyError
        If a frequency is not positive or high_frequency <= low_frequency.

    Notes
    -----
    The transform doubles the filter order. The geometric center of the
    passband is :math:`\\sqrt{\\omega_l \\omega_h}` and its width is
    :math:`\\omega_h - \\omega_l`.
    """
    b = as_coefficients(numerator, "numerator")
    a = as_coefficients(denominator, "denominator")

    order = b.numel() - 1
    if order < 1:
        raise FilterOrderError(f"Filter order must be positive, got {order}")

    w0 = as_frequency(reference_frequency, "reference_frequency", b)
    wpl = as_frequency(low_frequency, "low_frequency", b)
    wph = as_frequency(high_frequency, "high_frequency", b)
    if wph.item() <= wpl.item():
        raise FrequencyError(
            f"high_frequency must exceed low_frequency, got "
            f"{wpl.item()} and {wph.item()}"
        )

    zero = torch.zeros((), dtype=w0.dtype, device=w0.device)
    one = torch.ones((), dtype=w0.dtype, device=w0.device)

    # x = (y^2 + wpl*wph/w0^2) / (y * (wph - wpl) / w0)
    substitution_numerator = torch.stack([wph * wpl / (w0 * w0), zero, one])
    substitution_denominator = torch.stack([zero, (wph - wpl) / w0, zero])

    return rational_compose(
        b, a, substitution_numerator, substitution_denominator, out=out
    )
