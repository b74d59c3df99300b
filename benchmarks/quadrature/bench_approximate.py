"""Benchmarks for fixed-grid quadrature.

Times each rule of ``aprox.approximate`` over a range of point counts, with
tensor and per-point integrands.
"""

from __future__ import annotations

import math
import time
from typing import Any, Callable

import numpy as np
import torch

from aprox import approximate


def timeit(
    func: Callable, *args: Any, repeat: int = 10, **kwargs: Any
) -> tuple[float, float]:
    """Mean and standard deviation of ``repeat`` calls, in seconds."""
    func(*args, **kwargs)

    times = []
    for _ in range(repeat):
        start = time.perf_counter()
        func(*args, **kwargs)
        times.append(time.perf_counter() - start)

    return float(np.mean(times)), float(np.std(times))


def print_comparison(name: str, times: dict[str, tuple[float, float]]) -> None:
    """Print timings in milliseconds relative to the fastest entry."""
    print(f"\n{name}")
    print("-" * len(name))

    fastest = min(mean for mean, _ in times.values())

    for label, (mean, std) in times.items():
        print(
            f"  {label:<12} {mean * 1e3:9.3f}ms +/- {std * 1e3:.3f}ms"
            f"  ({mean / fastest:.2f}x)"
        )


class BenchApproximate:
    """Benchmarks for quadrature rules."""

    methods = {
        "midpoint": "m",
        "left": "l",
        "right": "r",
        "trapezoidal": "t",
        "simpson": "s",
    }

    def __init__(self, repeat: int = 10):
        self.repeat = repeat

    def _bench(
        self, func: Callable, *args: Any, **kwargs: Any
    ) -> tuple[float, float]:
        return timeit(func, *args, repeat=self.repeat, **kwargs)

    def bench_methods(self, n_points: int = 10000) -> None:
        """Compare the five rules on the same vectorised integrand."""
        times = {
            name: self._bench(
                approximate,
                lambda x: torch.exp(-(x**2)),
                n_points,
                [-3.0, 3.0],
                method=selector,
            )
            for name, selector in self.methods.items()
        }

        print_comparison(f"Rules (n_points={n_points})", times)

    def bench_vectorized(self, n_points: int = 10000) -> None:
        """Compare a tensor integrand against a per-point integrand."""
        times = {
            "vectorized": self._bench(
                approximate, torch.sin, n_points, [0.0, math.pi], method="t"
            ),
            "per-point": self._bench(
                approximate,
                math.sin,
                n_points,
                [0.0, math.pi],
                method="t",
                vectorized=False,
            ),
        }

        print_comparison(f"Integrand evaluation (n_points={n_points})", times)

    def run_all(self) -> None:
        print("=" * 60)
        print("QUADRATURE BENCHMARKS")
        print("=" * 60)

        self.bench_methods()
        self.bench_vectorized()

    def run_scaling(self) -> None:
        """Run scaling benchmarks with varying point counts."""
        print("=" * 60)
        print("SCALING BENCHMARKS")
        print("=" * 60)

        for n_points in [100, 1000, 10000, 100000]:
            self.bench_methods(n_points=n_points)


if __name__ == "__main__":
    bench = BenchApproximate(repeat=10)
    bench.run_all()
    print("\n")
    bench.run_scaling()
