"""Digital IIR filter design by prototype, frequency transform and bilinear transform."""

from __future__ import annotations

import math
import warnings
from typing import List, Optional, Tuple

import torch
from torch import Tensor

from ._analog_prototype import analog_prototype
from ._bilinear_transform import bilinear_transform
from ._constants import MAX_WELL_CONDITIONED_ORDER
from ._exceptions import (
    FilterConditioningWarning,
    FilterOrderBandpassError,
    FilterOrderError,
    FilterTypeError,
    FrequencyError,
    PointerError,
)
from ._filter_type import FilterShape, FilterType, FilterTypeLike, as_filter_type
from ._lowpass_to_bandpass import lowpass_to_bandpass
from ._lowpass_to_highpass import lowpass_to_highpass
from ._lowpass_to_lowpass import lowpass_to_lowpass

_FREQUENCY_TRANSFORMS = {
    FilterShape.LOWPASS: lowpass_to_lowpass,
    FilterShape.HIGHPASS: lowpass_to_highpass,
    FilterShape.BANDPASS: lowpass_to_bandpass,
}


def iir_design(
    passband_ripple_db: float,
    stopband_attenuation_db: float,
    order: int,
    cutoff: float,
    cutoff_high: Optional[float] = None,
    filter_type: FilterTypeLike = FilterType(),
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tuple[Tensor, Tensor]:
    """Design an Nth-order digital IIR filter.

    Parameters
    ----------
    passband_ripple_db : float
        Passband ripple in decibels. Must be positive. For Butterworth this
        is the attenuation at the cutoff.
    stopband_attenuation_db : float
        Stopband attenuation in decibels. Used by Chebyshev Type II and
        elliptic filters, where it must exceed passband_ripple_db.
    order : int
        Order of the digital filter. Must be even for band shapes.
    cutoff : float
        Cutoff frequency as a fraction of the Nyquist frequency, in (0, 1).
        The lower band edge for band shapes.
    cutoff_high : float, optional
        Upper band edge as a fraction of the Nyquist frequency. Required for
        bandpass, ignored for lowpass and highpass.
    filter_type : FilterType or pair of str, optional
        Shape and approximation family. Default is a Butterworth lowpass.
    dtype : torch.dtype, optional
        Output dtype. Defaults to torch.get_default_dtype().
    device : torch.device, optional
        Output device. Defaults to CPU.

    Returns
    -------
    numerator : Tensor
        Numerator coefficients in ascending powers of z^-1, length
        order + 1.
    denominator : Tensor
        Denominator coefficients in ascending powers of z^-1, length
        order + 1. Not normalized: ``denominator[0]`` is in general not 1.

    Raises
    ------
    FilterOrderError
        If order is less than 1.
    FilterOrderBandpassError
        If a band shape is requested with odd order.
    FilterTypeError
        If the shape has no frequency transform (bandstop).
    FrequencyError
        If a cutoff is outside (0, 1) or the band edges are not increasing.
    ApproximationError
        If the approximation family is unknown.
    SpecificationError
        If ripple or attenuation are not positive or contradictory.

    Warns
    -----
    FilterConditioningWarning
        If order exceeds the range where transfer-function coefficients are
        well conditioned.

    Notes
    -----
    The filter is designed by:
    1. Creating an analog lowpass prototype of the requested order, or
       half of it for band shapes
    2. Pre-warping the cutoffs to ``tan(cutoff * pi / 2)``
    3. Transforming the prototype to the requested shape
    4. Converting to digital using the bilinear transform

    Bandstop filters are not supported and raise FilterTypeError.

    Examples
    --------
    >>> b, a = iir_design(3.0103, 40.0, 4, 0.3, dtype=torch.float64)
    >>> b.shape
    torch.Size([5])
    >>> b, a = iir_design(
    ...     1.0, 40.0, 4, 0.2, 0.5,
    ...     FilterType(FilterShape.BANDPASS, Approximation.ELLIPTIC),
    ... )
    """
    filter_type = as_filter_type(filter_type)
    shape = filter_type.shape

    if order < 1:
        raise FilterOrderError(f"Filter order must be positive, got {order}")

    if shape.is_band:
        if order % 2:
            raise FilterOrderBandpassError(
                f"Filter order must be even for {shape.value} filters, "
                f"got {order}"
            )
        prototype_order = order // 2
    else:
        prototype_order = order

    transform = _FREQUENCY_TRANSFORMS.get(shape)
    if transform is None:
        raise FilterTypeError(
            f"No frequency transform for {shape.value} filters"
        )

    cutoffs = _check_cutoffs(shape, cutoff, cutoff_high)

    if order > MAX_WELL_CONDITIONED_ORDER:
        warnings.warn(
            f"Filter order {order} exceeds {MAX_WELL_CONDITIONED_ORDER}; "
            f"transfer function coefficients may be inaccurate.",
            FilterConditioningWarning,
            stacklevel=2,
        )

    if dtype is None:
        dtype = torch.get_default_dtype()
    if device is None:
        device = torch.device("cpu")

    b_prototype, a_prototype = analog_prototype(
        passband_ripple_db,
        stopband_attenuation_db,
        prototype_order,
        filter_type.approximation,
        dtype=torch.float64,
    )

    # Pre-warp the cutoff frequencies for bilinear transform
    warped = [math.tan(value * math.pi / 2.0) for value in cutoffs]

    b_analog, a_analog = transform(b_prototype, a_prototype, 1.0, *warped)

    b_digital, a_digital = bilinear_transform(b_analog, a_analog)

    return (
        b_digital.to(dtype=dtype, device=device),
        a_digital.to(dtype=dtype, device=device),
    )


def _check_cutoffs(
    shape: FilterShape,
    cutoff: Optional[float],
    cutoff_high: Optional[float],
) -> List[float]:
    if cutoff is None:
        raise PointerError("cutoff must not be None")

    cutoffs = [float(cutoff)]
    if shape.is_band:
        if cutoff_high is None:
            raise FrequencyError(
                f"{shape.value} filters need cutoff and cutoff_high"
            )
        cutoffs.append(float(cutoff_high))

    for value in cutoffs:
        if not (0 < value < 1):
            raise FrequencyError(
                f"Cutoff frequency must be between 0 and 1 (Nyquist), "
                f"got {value}"
            )
    if shape.is_band and cutoffs[1] <= cutoffs[0]:
        raise FrequencyError(
            f"Cutoff frequencies must satisfy 0 < low < high < 1, "
            f"got {cutoffs}"
        )

    return cutoffs
