"""Exceptions and warnings for filter design module."""


class FilterDesignError(Exception):
    """Base exception for filter design errors."""

    pass


class PointerError(FilterDesignError, TypeError):
    """Raised when a required coefficient argument is ``None``."""

    pass


class SizeError(FilterDesignError, ValueError):
    """Raised when a polynomial size is invalid.

    This occurs when:
    - Transfer function or substitution order is less than 1
    - Numerator and denominator lengths differ
    - A caller-supplied output tensor has the wrong length
    """

    pass


class FilterOrderError(FilterDesignError, ValueError):
    """Raised when filter order is invalid for the requested operation."""

    pass


class FilterOrderBandpassError(FilterOrderError):
    """Raised when a bandpass or bandstop filter is requested with odd order.

    Band shapes are built from a prototype of half the requested order, so
    the requested order must be even.
    """

    pass


class FrequencyError(FilterDesignError, ValueError):
    """Raised when cutoff frequencies are invalid.

    This occurs when:
    - A frequency is not positive
    - A normalized digital cutoff is outside (0, 1)
    - For bandpass, the high edge is not above the low edge
    """

    pass


class FilterTypeError(FilterDesignError, ValueError):
    """Raised when the filter shape is unknown or has no transform."""

    pass


class ApproximationError(FilterDesignError, ValueError):
    """Raised when the approximation family is unknown."""

    pass


class SpecificationError(FilterDesignError, ValueError):
    """Raised when filter specifications are contradictory or impossible to meet.

    This occurs when:
    - Passband ripple or stopband attenuation is not positive
    - Passband ripple is not below stopband attenuation
    """

    pass


class AllocationError(FilterDesignError, MemoryError):
    """Raised when scratch storage for a computation cannot be allocated."""

    pass


class FilterConditioningWarning(UserWarning):
    """Warning for transfer functions whose coefficients lose precision."""

    pass
