"""Analog lowpass prototype dispatch by approximation family."""

from typing import Optional, Tuple, Union

import torch
from torch import Tensor

from ._butterworth_prototype import butterworth_prototype
from ._chebyshev_type_1_prototype import chebyshev_type_1_prototype
from ._chebyshev_type_2_prototype import chebyshev_type_2_prototype
from ._elliptic_prototype import elliptic_prototype
from ._filter_type import Approximation, FilterType, as_approximation


def analog_prototype(
    passband_ripple_db: float,
    stopband_attenuation_db: float,
    order: int,
    approximation: Union[Approximation, FilterType, str],
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tuple[Tensor, Tensor]:
    """Design the analog lowpass prototype of an approximation family.

    Parameters
    ----------
    passband_ripple_db : float
        Passband ripple (attenuation at 1 rad/s) in decibels.
    stopband_attenuation_db : float
        Stopband attenuation in decibels. Ignored by Butterworth and
        Chebyshev Type I.
    order : int
        Prototype order.
    approximation : Approximation, FilterType or str
        Approximation family. For a FilterType its approximation is used.
    dtype : torch.dtype, optional
        Output dtype. Defaults to torch.get_default_dtype().
    device : torch.device, optional
        Output device. Defaults to CPU.

    Returns
    -------
    numerator, denominator : tuple of Tensors
        Prototype coefficients in ascending powers of s, length order + 1.

    Raises
    ------
    ApproximationError
        If the approximation family is unknown.
    """
    approximation = as_approximation(approximation)

    if approximation is Approximation.BUTTERWORTH:
        return butterworth_prototype(
            order, passband_ripple_db, dtype=dtype, device=device
        )
    if approximation is Approximation.CHEBYSHEV_TYPE_1:
        return chebyshev_type_1_prototype(
            order, passband_ripple_db, dtype=dtype, device=device
        )
    if approximation is Approximation.CHEBYSHEV_TYPE_2:
        return chebyshev_type_2_prototype(
            order,
            passband_ripple_db,
            stopband_attenuation_db,
            dtype=dtype,
            device=device,
        )
    return elliptic_prototype(
        order,
        passband_ripple_db,
        stopband_attenuation_db,
        dtype=dtype,
        device=device,
    )
