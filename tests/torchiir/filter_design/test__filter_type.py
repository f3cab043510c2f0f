import dataclasses

import pytest

from torchiir.filter_design import (
    Approximation,
    ApproximationError,
    FilterShape,
    FilterType,
    FilterTypeError,
)
from torchiir.filter_design._filter_type import as_filter_type


class TestFilterType:
    def test_defaults(self):
        filter_type = FilterType()
        assert filter_type.shape is FilterShape.LOWPASS
        assert filter_type.approximation is Approximation.BUTTERWORTH

    def test_coerces_strings(self):
        filter_type = FilterType("highpass", "elliptic")
        assert filter_type.shape is FilterShape.HIGHPASS
        assert filter_type.approximation is Approximation.ELLIPTIC

    def test_from_strings(self):
        filter_type = FilterType.from_strings("bandpass", "chebyshev_type_2")
        assert filter_type == FilterType(
            FilterShape.BANDPASS, Approximation.CHEBYSHEV_TYPE_2
        )

    def test_frozen(self):
        filter_type = FilterType()
        with pytest.raises(dataclasses.FrozenInstanceError):
            filter_type.shape = FilterShape.HIGHPASS

    def test_hashable(self):
        assert len({FilterType(), FilterType("lowpass", "butterworth")}) == 1

    @pytest.mark.parametrize(
        "shape, is_band",
        [
            (FilterShape.LOWPASS, False),
            (FilterShape.HIGHPASS, False),
            (FilterShape.BANDPASS, True),
            (FilterShape.BANDSTOP, True),
        ],
    )
    def test_is_band(self, shape, is_band):
        assert shape.is_band is is_band

    def test_invalid_shape(self):
        with pytest.raises(FilterTypeError):
            FilterType("notch", "butterworth")

    def test_invalid_approximation(self):
        with pytest.raises(ApproximationError):
            FilterType("lowpass", "bessel")


class TestAsFilterType:
    def test_passthrough(self):
        filter_type = FilterType("highpass", "elliptic")
        assert as_filter_type(filter_type) is filter_type

    def test_tuple(self):
        assert as_filter_type(("bandpass", "elliptic")) == FilterType(
            FilterShape.BANDPASS, Approximation.ELLIPTIC
        )

    def test_list(self):
        assert as_filter_type(["lowpass", "elliptic"]) == FilterType(
            FilterShape.LOWPASS, Approximation.ELLIPTIC
        )

    @pytest.mark.parametrize(
        "value", ["lowpass", "ab", ("lowpass",), ["lowpass"], None, 5]
    )
    def test_invalid(self, value):
        with pytest.raises(FilterTypeError, match="pair"):
            as_filter_type(value)
