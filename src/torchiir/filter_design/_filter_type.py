"""Filter shape and approximation family selectors."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Sequence, Union

from ._exceptions import ApproximationError, FilterTypeError


class FilterShape(str, Enum):
    """Frequency response shape of a designed filter."""

    LOWPASS = "lowpass"
    HIGHPASS = "highpass"
    BANDPASS = "bandpass"
    BANDSTOP = "bandstop"

    @property
    def is_band(self) -> bool:
        """Whether the shape is defined by two band edges."""
        return self in (FilterShape.BANDPASS, FilterShape.BANDSTOP)


class Approximation(str, Enum):
    """Approximation family of the analog lowpass prototype."""

    BUTTERWORTH = "butterworth"
    CHEBYSHEV_TYPE_1 = "chebyshev_type_1"
    CHEBYSHEV_TYPE_2 = "chebyshev_type_2"
    ELLIPTIC = "elliptic"


@dataclass(frozen=True)
class FilterType:
    """Shape and approximation family of an IIR filter.

    Parameters
    ----------
    shape : FilterShape
        Frequency response shape. Default is lowpass.
    approximation : Approximation
        Analog prototype family. Default is Butterworth.

    Examples
    --------
    >>> FilterType(FilterShape.HIGHPASS, Approximation.ELLIPTIC)
    FilterType(shape=<FilterShape.HIGHPASS: 'highpass'>, approximation=<Approximation.ELLIPTIC: 'elliptic'>)
    >>> FilterType.from_strings("bandpass", "chebyshev_type_1").shape
    <FilterShape.BANDPASS: 'bandpass'>
    """

    shape: FilterShape = FilterShape.LOWPASS
    approximation: Approximation = Approximation.BUTTERWORTH

    def __post_init__(self) -> None:
        object.__setattr__(self, "shape", _as_shape(self.shape))
        object.__setattr__(
            self, "approximation", as_approximation(self.approximation)
        )

    @classmethod
    def from_strings(cls, shape: str, approximation: str) -> "FilterType":
        """Build a filter type from the enum string values."""
        return cls(_as_shape(shape), as_approximation(approximation))


FilterTypeLike = Union[FilterType, Sequence[str]]


def _as_shape(value: Union[FilterShape, str]) -> FilterShape:
    try:
        return FilterShape(value)
    except ValueError:
        raise FilterTypeError(f"Invalid filter shape: {value!r}") from None


def as_approximation(
    value: Union[Approximation, FilterType, str],
) -> Approximation:
    """Resolve an approximation selector, raising ApproximationError."""
    if isinstance(value, FilterType):
        return value.approximation
    try:
        return Approximation(value)
    except ValueError:
        raise ApproximationError(
            f"Invalid approximation: {value!r}"
        ) from None


def as_filter_type(value: FilterTypeLike) -> FilterType:
    """Resolve a FilterType or a (shape, approximation) sequence."""
    if isinstance(value, FilterType):
        return value
    if isinstance(value, (tuple, list)) and len(value) == 2:
        return FilterType(*value)
    raise FilterTypeError(
        f"Filter type must be a FilterType or a (shape, approximation) "
        f"pair, got {value!r}"
    )
