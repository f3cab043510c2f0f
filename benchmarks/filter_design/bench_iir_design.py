"""Benchmarks for IIR filter design functions.

This module benchmarks torchiir filter design (prototypes, frequency
transforms, bilinear transform) against scipy.signal.
"""

from __future__ import annotations

import math
import time
from typing import Any, Callable

import numpy as np
import torch
from scipy import signal as scipy_signal

from torchiir.filter_design import (
    bilinear_transform,
    butterworth_prototype,
    iir_design,
    lowpass_to_bandpass,
    rational_compose,
)


def benchmark(
    func: Callable,
    *args: Any,
    warmup: int = 3,
    iterations: int = 10,
    **kwargs: Any,
) -> dict[str, float]:
    """Run a simple benchmark on a function.

    Parameters
    ----------
    func : callable
        Function to benchmark.
    *args : Any
        Positional arguments to pass to func.
    warmup : int, optional
        Number of warmup iterations. Default is 3.
    iterations : int, optional
        Number of timed iterations. Default is 10.
    **kwargs : Any
        Keyword arguments to pass to func.

    Returns
    -------
    dict
        Dictionary with timing statistics ('mean', 'std', 'min', 'max') in
        seconds.
    """
    for _ in range(warmup):
        func(*args, **kwargs)

    times = []
    for _ in range(iterations):
        start = time.perf_counter()
        func(*args, **kwargs)
        times.append(time.perf_counter() - start)

    return {
        "mean": np.mean(times),
        "std": np.std(times),
        "min": np.min(times),
        "max": np.max(times),
    }


def format_time(seconds: float) -> str:
    """Format time in appropriate units."""
    if seconds < 1e-6:
        return f"{seconds * 1e9:.3f}ns"
    elif seconds < 1e-3:
        return f"{seconds * 1e6:.3f}us"
    elif seconds < 1:
        return f"{seconds * 1e3:.3f}ms"
    else:
        return f"{seconds:.3f}s"


def print_comparison(
    name: str,
    times: dict[str, dict[str, float]],
) -> None:
    """Print benchmark comparison results for multiple methods."""
    print(f"\n{name}")
    print("-" * len(name))

    fastest_name = min(times.keys(), key=lambda k: times[k]["mean"])
    fastest_time = times[fastest_name]["mean"]

    for method_name, ts_time in times.items():
        slowdown = ts_time["mean"] / fastest_time
        if slowdown > 1.01:
            suffix = f" ({slowdown:.2f}x slower)"
        else:
            suffix = " (fastest)"
        print(
            f"  {method_name}: {format_time(ts_time['mean'])} +/- {format_time(ts_time['std'])}{suffix}"
        )


class BenchIIRDesign:
    """Benchmarks for IIR filter design."""

    def __init__(self, warmup: int = 3, iterations: int = 10):
        self.warmup = warmup
        self.iterations = iterations

    def _bench(
        self, func: Callable, *args: Any, **kwargs: Any
    ) -> dict[str, float]:
        return benchmark(
            func,
            *args,
            warmup=self.warmup,
            iterations=self.iterations,
            **kwargs,
        )

    def bench_rational_compose(self, order: int = 8, degree: int = 2) -> None:
        """Benchmark rational composition of random polynomials.

        Parameters
        ----------
        order : int, optional
            Order of the transfer function. Default is 8.
        degree : int, optional
            Degree of the substituted rational function. Default is 2.
        """
        generator = torch.Generator().manual_seed(42)
        b = torch.randn(order + 1, dtype=torch.float64, generator=generator)
        a = torch.randn(order + 1, dtype=torch.float64, generator=generator)
        c = torch.randn(degree + 1, dtype=torch.float64, generator=generator)
        d = torch.randn(degree + 1, dtype=torch.float64, generator=generator)

        times = {"torchiir": self._bench(rational_compose, b, a, c, d)}

        print_comparison(
            f"rational_compose (order={order}, degree={degree})", times
        )

    def bench_bilinear(self, order: int = 8) -> None:
        """Compare bilinear_transform with scipy.signal.bilinear."""
        b, a = butterworth_prototype(order, 3.0, dtype=torch.float64)
        b_np, a_np = b.flip(0).numpy(), a.flip(0).numpy()

        times = {
            "torchiir": self._bench(bilinear_transform, b, a),
            "scipy": self._bench(scipy_signal.bilinear, b_np, a_np, fs=0.5),
        }

        print_comparison(f"Bilinear transform (order={order})", times)

    def bench_lowpass_to_bandpass(self, order: int = 4) -> None:
        """Compare lowpass_to_bandpass with scipy.signal.lp2bp."""
        b, a = butterworth_prototype(order, 3.0, dtype=torch.float64)
        b_np, a_np = b.flip(0).numpy(), a.flip(0).numpy()

        times = {
            "torchiir": self._bench(lowpass_to_bandpass, b, a, 1.0, 1.0, 2.0),
            "scipy": self._bench(
                scipy_signal.lp2bp, b_np, a_np, wo=math.sqrt(2.0), bw=1.0
            ),
        }

        print_comparison(f"Lowpass to bandpass (order={order})", times)

    def bench_iir_design(self, order: int = 6) -> None:
        """Compare elliptic lowpass design with scipy.signal.ellip."""
        times = {
            "torchiir": self._bench(
                iir_design,
                1.0,
                40.0,
                order,
                0.3,
                filter_type=("lowpass", "elliptic"),
                dtype=torch.float64,
            ),
            "scipy": self._bench(scipy_signal.ellip, order, 1.0, 40.0, 0.3),
        }

        print_comparison(f"Elliptic lowpass design (order={order})", times)

    def run_all(self) -> None:
        """Run all IIR design benchmarks."""
        print("=" * 60)
        print("IIR DESIGN BENCHMARKS")
        print("=" * 60)

        self.bench_rational_compose()
        self.bench_bilinear()
        self.bench_lowpass_to_bandpass()
        self.bench_iir_design()

    def run_scaling(self) -> None:
        """Run scaling benchmarks with varying filter order."""
        print("=" * 60)
        print("SCALING BENCHMARKS")
        print("=" * 60)

        print("\n--- Order Scaling (rational_compose) ---")
        for order in [2, 4, 8, 16]:
            self.bench_rational_compose(order=order)

        print("\n--- Order Scaling (iir_design) ---")
        for order in [2, 4, 8, 12]:
            self.bench_iir_design(order=order)


if __name__ == "__main__":
    bench = BenchIIRDesign(warmup=3, iterations=10)
    bench.run_all()
    print("\n")
    bench.run_scaling()
