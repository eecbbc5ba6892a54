#!/usr/bin/env python3
"""Benchmark procedural level generation on several grid sizes."""

from __future__ import annotations

import argparse
import json
import time
from pathlib import Path

from lonely_tribes.environment.generators import (
    LevelGenerationError,
    ProceduralGenerator,
)

GRID_SIZES: tuple[tuple[int, int], ...] = (
    (40, 40),
    (64, 64),
    (128, 128),
    (256, 256),
)


class GenerationBenchmark:
    """Benchmark runner for the full level pipeline."""

    def __init__(self, iterations: int) -> None:
        self.iterations = iterations
        self.results: dict[str, dict[str, float]] = {}

    def _run_case(self, width: int, height: int) -> tuple[float, int]:
        """Run one case; return average time in milliseconds and failures."""
        generator = ProceduralGenerator(width, height)
        elapsed_total = 0.0
        failures = 0

        for seed in range(self.iterations):
            start = time.perf_counter()
            try:
                generator.generate(seed)
            except LevelGenerationError:
                failures += 1
            elapsed_total += time.perf_counter() - start

        return (elapsed_total / self.iterations) * 1000.0, failures

    def run(self) -> None:
        """Run all configured grid-size benchmarks."""
        print("Level Generation Benchmark")
        print("=" * 42)
        print(f"Seeds per size: {self.iterations}")
        print()
        print(f"{'Size':>12} {'Avg (ms)':>14} {'Failures':>10}")
        print("-" * 42)

        for width, height in GRID_SIZES:
            avg_ms, failures = self._run_case(width, height)

            size_key = f"{width}x{height}"
            self.results[size_key] = {"avg_ms": avg_ms, "failures": failures}

            print(f"{size_key:>12} {avg_ms:14.2f} {failures:>10}")

    def save_results(self, filename: str) -> None:
        """Save benchmark output to a JSON file."""
        with Path(filename).open("w") as f:
            json.dump(self.results, f, indent=2)
        print(f"\nSaved benchmark results to {filename}")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Benchmark level generation")
    parser.add_argument(
        "--iterations",
        type=int,
        default=5,
        help="Number of seeds per grid size (default: 5)",
    )
    parser.add_argument("--save", type=str, help="Save current results to JSON")
    args = parser.parse_args(argv)

    benchmark = GenerationBenchmark(iterations=args.iterations)
    benchmark.run()

    if args.save:
        benchmark.save_results(args.save)


if __name__ == "__main__":
    main()
