#!/usr/bin/env python3
"""
Subsetting benchmark across index kinds.

Times ``vecsub.subset`` on a named real vector for integer, real, logical and
character indices, with bounds checking on and off.
"""

from __future__ import annotations

import argparse
import sys
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, List, Optional

import numpy as np

from vecsub import CharacterIndex, IntegerIndex, LogicalIndex, RealIndex, Vector, subset


@dataclass
class BenchmarkResult:
    kind: str
    bounds_check: bool
    min_s: float
    mean_s: float
    iterations: int
    elements_per_s: Optional[float]


def build_vector(size: int, seed: int) -> Vector:
    rng = np.random.default_rng(seed)
    names = [f"n{i}" for i in range(size)]
    return Vector(rng.normal(size=size), names=names)


def build_indices(size: int, picks: int, seed: int) -> Dict[str, Any]:
    rng = np.random.default_rng(seed + 1)
    positions = rng.integers(0, size, size=picks)
    mask = rng.random(size=size) > 0.5
    labels = [f"n{p}" for p in positions.tolist()]
    return {
        "integer": IntegerIndex(positions),
        "real": RealIndex(positions.astype(np.float64) + 0.25),
        "logical": LogicalIndex(mask),
        "character": CharacterIndex(labels),
    }


def bench(fn: Callable[[], Any], *, iterations: int, warmup: int) -> Iterable[float]:
    timings = []
    for step in range(iterations + warmup):
        start = time.perf_counter()
        fn()
        elapsed = time.perf_counter() - start
        if step >= warmup:
            timings.append(elapsed)
    return timings


def run_kind(
    vector: Vector,
    kind: str,
    index: Any,
    *,
    bounds_check: bool,
    iterations: int,
    warmup: int,
) -> BenchmarkResult:
    def invoke():
        return subset(vector, index, bounds_checked=bounds_check)

    timings = list(bench(invoke, iterations=iterations, warmup=warmup))
    min_s = min(timings)
    mean_s = sum(timings) / len(timings)
    selected = len(invoke())
    return BenchmarkResult(
        kind=kind,
        bounds_check=bounds_check,
        min_s=min_s,
        mean_s=mean_s,
        iterations=iterations,
        elements_per_s=selected / min_s if min_s > 0 else None,
    )


def format_results(results: Iterable[BenchmarkResult]) -> str:
    header = f"{'index':<10} {'checked':<8} {'min (ms)':>12} {'mean (ms)':>12} {'iters':>8} {'elems/s':>14}"
    rows = [header]
    for result in results:
        rate = result.elements_per_s or float("nan")
        rows.append(
            f"{result.kind:<10} {str(result.bounds_check):<8} {result.min_s * 1e3:12.3f} "
            f"{result.mean_s * 1e3:12.3f} {result.iterations:8d} {rate:14.0f}"
        )
    return "\n".join(rows)


def parse_args(argv: Optional[Iterable[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Benchmark vecsub subsetting by index kind.")
    parser.add_argument(
        "--kind",
        choices=("integer", "real", "logical", "character", "all"),
        default="all",
        help="Index kind(s) to benchmark (default: all).",
    )
    parser.add_argument(
        "--size", type=int, default=100_000, help="Source vector length (default: 100000)."
    )
    parser.add_argument(
        "--picks", type=int, default=50_000, help="Positions or labels per index (default: 50000)."
    )
    parser.add_argument(
        "--seed", type=int, default=2024, help="Random seed for inputs (default: 2024)."
    )
    parser.add_argument(
        "--iterations", type=int, default=20, help="Timed iterations per case (default: 20)."
    )
    parser.add_argument(
        "--warmup", type=int, default=3, help="Warmup iterations to discard (default: 3)."
    )
    return parser.parse_args(argv)


def main(argv: Optional[Iterable[str]] = None) -> int:
    args = parse_args(argv)
    vector = build_vector(args.size, args.seed)
    indices = build_indices(args.size, args.picks, args.seed)
    requested = tuple(indices) if args.kind == "all" else (args.kind,)

    results: List[BenchmarkResult] = []
    for kind in requested:
        for bounds_check in (True, False):
            results.append(
                run_kind(
                    vector,
                    kind,
                    indices[kind],
                    bounds_check=bounds_check,
                    iterations=args.iterations,
                    warmup=args.warmup,
                )
            )
    print(format_results(results))
    return 0


if __name__ == "__main__":
    sys.exit(main())
