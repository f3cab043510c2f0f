"""IIR filter design by rational composition of transfer functions."""

from ._analog_prototype import analog_prototype
from ._bilinear_transform import bilinear_transform
from ._butterworth_prototype import butterworth_prototype
from ._chebyshev_type_1_prototype import chebyshev_type_1_prototype
from ._chebyshev_type_2_prototype import chebyshev_type_2_prototype
from ._constants import MAX_WELL_CONDITIONED_ORDER
from ._elliptic_prototype import elliptic_prototype
from ._exceptions import (
    AllocationError,
    ApproximationError,
    FilterConditioningWarning,
    FilterDesignError,
    FilterOrderBandpassError,
    FilterOrderError,
    FilterTypeError,
    FrequencyError,
    PointerError,
    SizeError,
    SpecificationError,
)
from ._filter_type import Approximation, FilterShape, FilterType
from ._iir_design import iir_design
from ._lowpass_to_bandpass import lowpass_to_bandpass
from ._lowpass_to_highpass import lowpass_to_highpass
from ._lowpass_to_lowpass import lowpass_to_lowpass
from ._rational_compose import rational_compose
from ._zpk_to_ba import zpk_to_ba

__all__ = [
    # Design functions
    "analog_prototype",
    "butterworth_prototype",
    "chebyshev_type_1_prototype",
    "chebyshev_type_2_prototype",
    "elliptic_prototype",
    "iir_design",
    # Transforms
    "bilinear_transform",
    "lowpass_to_bandpass",
    "lowpass_to_highpass",
    "lowpass_to_lowpass",
    "rational_compose",
    # Conversions
    "zpk_to_ba",
    # Selectors
    "Approximation",
    "FilterShape",
    "FilterType",
    # Constants
    "MAX_WELL_CONDITIONED_ORDER",
    # Exceptions
    "AllocationError",
    "ApproximationError",
    "FilterConditioningWarning",
    "FilterDesignError",
    "FilterOrderBandpassError",
    "FilterOrderError",
    "FilterTypeError",
    "FrequencyError",
    "PointerError",
    "SizeError",
    "SpecificationError",
]
