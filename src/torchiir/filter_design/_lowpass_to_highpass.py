"""Lowpass to highpass frequency transform for analog transfer functions."""

from typing import Optional, Tuple, Union

import torch
from torch import Tensor

from ._coefficients import CoefficientsLike, as_coefficients, as_frequency
from ._exceptions import FilterOrderError
from ._rational_compose import rational_compose


def lowpass_to_highpass(
    numerator: CoefficientsLike,
    denominator: CoefficientsLike,
    reference_frequency: Union[float, Tensor] = 1.0,
    cutoff_frequency: Union[float, Tensor] = 1.0,
    *,
    out: Optional[Tuple[Tensor, Tensor]] = None,
) -> Tuple[Tensor, Tensor]:
    """
    Transform an analog lowpass transfer function to a highpass one.

    Performs the substitution
    s -> (cutoff_frequency / reference_frequency) / s, which converts a
    lowpass filter with cutoff reference_frequency rad/s to a highpass filter
    with cutoff cutoff_frequency rad/s when reference_frequency is 1.

    Parameters
    ----------
    numerator : Tensor or array_like
        Analog numerator coefficients in ascending powers of s.
    denominator : Tensor or array_like
        Analog denominator coefficients in ascending powers of s, same
        length as the numerator.
    reference_frequency : float or Tensor
        Frequency normalization of the input filter (rad/s). Must be
        positive.
    cutoff_frequency : float or Tensor
        Cutoff of the highpass filter (rad/s). Must be positive.
    out : tuple of Tensor, optional
        Pre-allocated ``(numerator, denominator)`` of the input length.

    Returns
    -------
    numerator_new : Tensor
        Numerator of the highpass filter, ascending, same order.
    denominator_new : Tensor
        Denominator of the highpass filter, ascending, same order.

    Raises
    ------
    PointerError
        If a coefficient argument is None.
    FilterOrderError
        If the filter order is less than 1.
    FrequencyError
        If a frequency is not positive.

    Notes
    -----
    The substitution reverses the coefficient order up to scaling: the
    lowpass term b_i s^i becomes b_i w^i s^(n-i), where w is the frequency
    ratio, so zeros at infinity move to s = 0.
    """
    b = as_coefficients(numerator, "numerator")
    a = as_coefficients(denominator, "denominator")

    order = b.numel() - 1
    if order < 1:
        raise FilterOrderError(f"Filter order must be positive, got {order}")

    w0 = as_frequency(reference_frequency, "reference_frequency", b)
    w1 = as_frequency(cutoff_frequency, "cutoff_frequency", b)

    zero = torch.zeros((), dtype=w0.dtype, device=w0.device)
    one = torch.ones((), dtype=w0.dtype, device=w0.device)

    # x = (w1 / w0) / y
    substitution_numerator = torch.stack([w1 / w0, zero])
    substitution_denominator = torch.stack([zero, one])

    return rational_compose(
        b, a, substitution_numerator, substitution_denominator, out=out
    )
