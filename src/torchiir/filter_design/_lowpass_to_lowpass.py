"""Lowpass to lowpass frequency transform for analog transfer functions."""

from typing import Optional, Tuple, Union

import torch
from torch import Tensor

from ._coefficients import CoefficientsLike, as_coefficients, as_frequency
from ._exceptions import FilterOrderError
from ._rational_compose import rational_compose


def lowpass_to_lowpass(
    numerator: CoefficientsLike,
    denominator: CoefficientsLike,
    reference_frequency: Union[float, Tensor] = 1.0,
    cutoff_frequency: Union[float, Tensor] = 1.0,
    *,
    out: Optional[Tuple[Tensor, Tensor]] = None,
) -> Tuple[Tensor, Tensor]:
    """
    Move the cutoff of an analog lowpass transfer function.

    Performs the substitution s -> s * reference_frequency / cutoff_frequency,
    which moves a cutoff at reference_frequency rad/s to cutoff_frequency
    rad/s.

    Parameters
    ----------
    numerator : Tensor or array_like
        Analog numerator coefficients in ascending powers of s.
    denominator : Tensor or array_like
        Analog denominator coefficients in ascending powers of s, same
        length as the numerator.
    reference_frequency : float or Tensor
        Cutoff of the input filter (rad/s). Must be positive.
    cutoff_frequency : float or Tensor
        Cutoff of the output filter (rad/s). Must be positive.
    out : tuple of Tensor, optional
        Pre-allocated ``(numerator, denominator)`` of the input length.

    Returns
    -------
    numerator_new : Tensor
        Numerator of the transformed filter, ascending, same order.
    denominator_new : Tensor
        Denominator of the transformed filter, ascending, same order.

    Raises
    ------
    PointerError
        If a coefficient argument is None.
    FilterOrderError
        If the filter order is less than 1.
    FrequencyError
        If a frequency is not positive.

    Examples
    --------
    >>> b, a = lowpass_to_lowpass([1.0, 0.0], [1.0, 1.0], 1.0, 2.0)
    >>> a  # 1 + s/2 scaled by 2
    tensor([2., 1.], dtype=torch.float64)
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

    # x = y / (w1 / w0)
    substitution_numerator = torch.stack([zero, one])
    substitution_denominator = torch.stack([w1 / w0, zero])

    return rational_compose(
        b, a, substitution_numerator, substitution_denominator, out=out
    )
