#!/usr/bin/env python3
"""
Basic usage examples for the Euclidean Distance Summation library.

Shows how the accumulation strategy changes the last bits of a distance
and how to inspect the comparison results programmatically.
"""

import io

import numpy as np

import sys
sys.path.append('..')

from euclidsum import (
    DistanceComparator,
    HighPrecisionAccumulator,
    Point3D,
    Settings,
    bits_of,
    kahan_distance,
    naive_distance,
    pairwise_distance,
)
from euclidsum.scenarios import large_magnitude


def demonstrate_strategies():
    """Distance of the same vectors under each strategy."""
    print("=" * 60)
    print("DEMONSTRATION: Summation Strategies")
    print("=" * 60)

    np.random.seed(42)
    a = 10.0 ** np.random.uniform(-4, 4, 100000)
    b = np.zeros_like(a)

    reference = HighPrecisionAccumulator(256)(a, b)
    algorithms = [
        ("Naive", naive_distance),
        ("Kahan", kahan_distance),
        ("Pairwise", pairwise_distance),
    ]

    print(f"{'Algorithm':<12} {'Distance':<32} {'Bits':<18}")
    print("-" * 64)
    for name, algorithm in algorithms:
        result = algorithm(a, b)
        print(f"{name:<12} {result:<32.20f} {bits_of(result):016x}")
    print(f"{'256-bit':<12} {reference:<32.20f} {bits_of(reference):016x}")
    print()


def demonstrate_report():
    """Capture the comparison report and read the structured results."""
    print("=" * 60)
    print("DEMONSTRATION: Comparison Report")
    print("=" * 60)

    buffer = io.StringIO()
    comparator = DistanceComparator(Settings(vector_length=10000), out=buffer)

    point = comparator.compare_points(Point3D(0.1, 0.2, 0.3), Point3D(0.3, 0.2, 0.1))
    vectors = comparator.compare_vectors(large_magnitude(10000))

    print(buffer.getvalue())
    print(f"3D bit match: {point.bits_match}")
    for method, gap in vectors.gaps().items():
        print(f"naive vs {method:<10} {gap:.3e}")
    print()


def main():
    """Run all demonstrations."""
    demonstrate_strategies()
    demonstrate_report()


if __name__ == "__main__":
    main()
