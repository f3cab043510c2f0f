"""Tests for iir_design."""

import math
import warnings

import numpy as np
import pytest
import torch
from scipy import signal as scipy_signal

from torchiir.filter_design import (
    MAX_WELL_CONDITIONED_ORDER,
    Approximation,
    ApproximationError,
    FilterConditioningWarning,
    FilterOrderBandpassError,
    FilterOrderError,
    FilterShape,
    FilterType,
    FilterTypeError,
    FrequencyError,
    PointerError,
    SpecificationError,
    iir_design,
)

HALF_POWER_DB = 10 * math.log10(2)


def _normalized(b: torch.Tensor, a: torch.Tensor):
    return (b / a[0]).numpy(), (a / a[0]).numpy()


def _assert_matches(b, a, b_expected, a_expected, rtol=1e-8, atol=1e-10):
    b_n, a_n = _normalized(b, a)
    np.testing.assert_allclose(b_n, b_expected, rtol=rtol, atol=atol)
    np.testing.assert_allclose(a_n, a_expected, rtol=rtol, atol=atol)


class TestIIRDesignButterworth:
    """Butterworth designs against scipy.signal.butter."""

    @pytest.mark.parametrize("order", [1, 2, 3, 4, 6])
    @pytest.mark.parametrize("cutoff", [0.1, 0.3, 0.5, 0.8])
    def test_lowpass(self, order: int, cutoff: float) -> None:
        b, a = iir_design(
            HALF_POWER_DB, 40.0, order, cutoff, dtype=torch.float64
        )
        b_sp, a_sp = scipy_signal.butter(order, cutoff, btype="low")

        _assert_matches(b, a, b_sp, a_sp)

    @pytest.mark.parametrize("order", [1, 2, 3, 5])
    @pytest.mark.parametrize("cutoff", [0.2, 0.6])
    def test_highpass(self, order: int, cutoff: float) -> None:
        b, a = iir_design(
            HALF_POWER_DB,
            40.0,
            order,
            cutoff,
            filter_type=FilterType(FilterShape.HIGHPASS),
            dtype=torch.float64,
        )
        b_sp, a_sp = scipy_signal.butter(order, cutoff, btype="high")

        _assert_matches(b, a, b_sp, a_sp)

    @pytest.mark.parametrize("order", [2, 4, 6])
    @pytest.mark.parametrize("band", [(0.1, 0.4), (0.3, 0.35), (0.45, 0.9)])
    def test_bandpass(self, order: int, band) -> None:
        b, a = iir_design(
            HALF_POWER_DB,
            40.0,
            order,
            *band,
            filter_type=("bandpass", "butterworth"),
            dtype=torch.float64,
        )
        b_sp, a_sp = scipy_signal.butter(order // 2, band, btype="bandpass")

        assert b.shape == (order + 1,)
        _assert_matches(b, a, b_sp, a_sp)


class TestIIRDesignChebyshevType1:
    @pytest.mark.parametrize("order", [1, 2, 3, 4, 5])
    @pytest.mark.parametrize("passband_ripple_db", [0.5, 1.0])
    def test_lowpass(self, order: int, passband_ripple_db: float) -> None:
        b, a = iir_design(
            passband_ripple_db,
            40.0,
            order,
            0.3,
            filter_type=("lowpass", "chebyshev_type_1"),
            dtype=torch.float64,
        )
        b_sp, a_sp = scipy_signal.cheby1(order, passband_ripple_db, 0.3)

        _assert_matches(b, a, b_sp, a_sp)

    def test_highpass(self) -> None:
        b, a = iir_design(
            1.0,
            40.0,
            4,
            0.4,
            filter_type=("highpass", "chebyshev_type_1"),
            dtype=torch.float64,
        )
        b_sp, a_sp = scipy_signal.cheby1(4, 1.0, 0.4, btype="high")

        _assert_matches(b, a, b_sp, a_sp)

    def test_bandpass(self) -> None:
        b, a = iir_design(
            0.5,
            40.0,
            6,
            0.2,
            0.5,
            filter_type=("bandpass", "chebyshev_type_1"),
            dtype=torch.float64,
        )
        b_sp, a_sp = scipy_signal.cheby1(3, 0.5, [0.2, 0.5], btype="bandpass")

        _assert_matches(b, a, b_sp, a_sp)


class TestIIRDesignChebyshevType2:
    """Chebyshev Type II designs are specified at the passband edge."""

    @staticmethod
    def _stopband_edge(order, passband_ripple_db, stopband_attenuation_db, cutoff):
        delta = 1.0 / math.sqrt(10 ** (stopband_attenuation_db / 10) - 1)
        eps = math.sqrt(10 ** (passband_ripple_db / 10) - 1)
        passband_edge = 1.0 / math.cosh(math.acosh(1.0 / (delta * eps)) / order)
        warped = math.tan(cutoff * math.pi / 2) / passband_edge
        return 2.0 * math.atan(warped) / math.pi

    @pytest.mark.parametrize("order", [2, 3, 4, 5])
    def test_lowpass_matches_scipy_stopband_design(self, order: int) -> None:
        b, a = iir_design(
            1.0,
            40.0,
            order,
            0.25,
            filter_type=("lowpass", "chebyshev_type_2"),
            dtype=torch.float64,
        )
        stopband_edge = self._stopband_edge(order, 1.0, 40.0, 0.25)
        b_sp, a_sp = scipy_signal.cheby2(order, 40.0, stopband_edge)

        _assert_matches(b, a, b_sp, a_sp)

    @pytest.mark.parametrize(
        "shape, cutoffs, edges",
        [
            ("lowpass", (0.3,), (0.3,)),
            ("highpass", (0.3,), (0.3,)),
            ("bandpass", (0.2, 0.6), (0.2, 0.6)),
        ],
    )
    def test_attenuation_at_cutoff(self, shape, cutoffs, edges) -> None:
        b, a = iir_design(
            0.5,
            50.0,
            4,
            *cutoffs,
            filter_type=(shape, "chebyshev_type_2"),
            dtype=torch.float64,
        )
        _, h = scipy_signal.freqz(
            b.numpy(), a.numpy(), worN=[edge * math.pi for edge in edges]
        )

        np.testing.assert_allclose(
            -20.0 * np.log10(np.abs(h)), 0.5, rtol=1e-8
        )


class TestIIRDesignElliptic:
    @pytest.mark.parametrize("order", [1, 2, 3, 4, 5, 6])
    def test_lowpass(self, order: int) -> None:
        b, a = iir_design(
            0.5,
            50.0,
            order,
            0.35,
            filter_type=FilterType(FilterShape.LOWPASS, Approximation.ELLIPTIC),
            dtype=torch.float64,
        )
        b_sp, a_sp = scipy_signal.ellip(order, 0.5, 50.0, 0.35)

        _assert_matches(b, a, b_sp, a_sp, rtol=1e-7, atol=1e-9)

    def test_highpass(self) -> None:
        b, a = iir_design(
            1.0,
            60.0,
            5,
            0.6,
            filter_type=("highpass", "elliptic"),
            dtype=torch.float64,
        )
        b_sp, a_sp = scipy_signal.ellip(5, 1.0, 60.0, 0.6, btype="high")

        _assert_matches(b, a, b_sp, a_sp, rtol=1e-7, atol=1e-9)

    def test_bandpass(self) -> None:
        b, a = iir_design(
            1.0,
            40.0,
            8,
            0.2,
            0.5,
            filter_type=("bandpass", "elliptic"),
            dtype=torch.float64,
        )
        b_sp, a_sp = scipy_signal.ellip(4, 1.0, 40.0, [0.2, 0.5], btype="band")

        _assert_matches(b, a, b_sp, a_sp, rtol=1e-7, atol=1e-9)


class TestIIRDesignOutput:
    def test_not_normalized(self) -> None:
        _, a = iir_design(1.0, 40.0, 4, 0.3, dtype=torch.float64)
        assert abs(a[0].item() - 1.0) > 1e-6

    def test_default_dtype_and_device(self) -> None:
        b, a = iir_design(1.0, 40.0, 3, 0.3)
        assert b.dtype == torch.get_default_dtype()
        assert a.dtype == torch.get_default_dtype()
        assert b.device == torch.device("cpu")

    def test_float32(self) -> None:
        b32, a32 = iir_design(1.0, 40.0, 4, 0.3, dtype=torch.float32)
        b64, a64 = iir_design(1.0, 40.0, 4, 0.3, dtype=torch.float64)

        assert b32.dtype == torch.float32
        torch.testing.assert_close(b32, b64.to(torch.float32))
        torch.testing.assert_close(a32, a64.to(torch.float32))

    def test_cutoff_high_ignored_for_lowpass(self) -> None:
        b1, a1 = iir_design(1.0, 40.0, 3, 0.3, dtype=torch.float64)
        b2, a2 = iir_design(1.0, 40.0, 3, 0.3, 0.9, dtype=torch.float64)
        torch.testing.assert_close(b1, b2)
        torch.testing.assert_close(a1, a2)

    def test_high_order_warns(self) -> None:
        with pytest.warns(FilterConditioningWarning):
            b, _ = iir_design(
                1.0, 40.0, MAX_WELL_CONDITIONED_ORDER + 2, 0.5,
                dtype=torch.float64,
            )
        assert b.shape == (MAX_WELL_CONDITIONED_ORDER + 3,)

    def test_moderate_order_does_not_warn(self) -> None:
        with warnings.catch_warnings():
            warnings.simplefilter("error", FilterConditioningWarning)
            iir_design(1.0, 40.0, MAX_WELL_CONDITIONED_ORDER, 0.5)


class TestIIRDesignErrors:
    @pytest.mark.parametrize(
        "shape, cutoffs",
        [
            ("bandstop", (0.2, 0.5)),
            ("bandstop", (0.5, 0.2)),
            ("bandstop", (2.0, None)),
            ("bandstop", (None, None)),
        ],
    )
    def test_bandstop_is_not_implemented(self, shape, cutoffs) -> None:
        with pytest.raises(FilterTypeError):
            iir_design(1.0, 40.0, 4, *cutoffs, filter_type=(shape, "elliptic"))

    @pytest.mark.parametrize("shape", ["bandpass", "bandstop"])
    @pytest.mark.parametrize("order", [1, 3, 7])
    def test_band_shapes_need_even_order(self, shape, order) -> None:
        with pytest.raises(FilterOrderBandpassError):
            iir_design(
                1.0, 40.0, order, 0.2, 0.5, filter_type=(shape, "butterworth")
            )

    def test_order_bandpass_error_is_order_error(self) -> None:
        assert issubclass(FilterOrderBandpassError, FilterOrderError)

    @pytest.mark.parametrize("order", [0, -2])
    def test_order_must_be_positive(self, order: int) -> None:
        with pytest.raises(FilterOrderError):
            iir_design(1.0, 40.0, order, 0.3)

    @pytest.mark.parametrize("cutoff", [0.0, 1.0, -0.2, 1.5])
    def test_cutoff_outside_unit_interval(self, cutoff: float) -> None:
        with pytest.raises(FrequencyError):
            iir_design(1.0, 40.0, 2, cutoff)

    @pytest.mark.parametrize("band", [(0.5, 0.2), (0.3, 0.3), (0.2, 1.0)])
    def test_bad_band(self, band) -> None:
        with pytest.raises(FrequencyError):
            iir_design(1.0, 40.0, 4, *band, filter_type=("bandpass", "butterworth"))

    def test_bandpass_needs_cutoff_high(self) -> None:
        with pytest.raises(FrequencyError):
            iir_design(1.0, 40.0, 4, 0.2, filter_type=("bandpass", "butterworth"))

    def test_missing_cutoff(self) -> None:
        with pytest.raises(PointerError):
            iir_design(1.0, 40.0, 4, None)

    def test_unknown_approximation(self) -> None:
        with pytest.raises(ApproximationError):
            iir_design(1.0, 40.0, 4, 0.3, filter_type=("lowpass", "bessel"))

    def test_unknown_shape(self) -> None:
        with pytest.raises(FilterTypeError):
            iir_design(1.0, 40.0, 4, 0.3, filter_type=("notch", "butterworth"))

    @pytest.mark.parametrize("approximation", ["chebyshev_type_2", "elliptic"])
    def test_contradictory_specification(self, approximation) -> None:
        with pytest.raises(SpecificationError):
            iir_design(
                40.0, 1.0, 4, 0.3, filter_type=("lowpass", approximation)
            )

    def test_non_positive_ripple(self) -> None:
        with pytest.raises(SpecificationError):
            iir_design(0.0, 40.0, 4, 0.3)
