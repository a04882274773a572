"""
Euclidean Distance Summation Comparison

Computes the Euclidean distance between two points or vectors with several
floating-point summation strategies and compares the results.

This library provides:
- Naive, Kahan compensated and pairwise accumulators
- An arbitrary-precision reference accumulator built on mpmath
- Bit-exact, symmetry and divergence diagnostics
"""

from .core import Point3D, KahanAccumulator, bits_equal, bits_of
from .algorithms import (
    naive_distance,
    kahan_distance,
    pairwise_distance,
    pairwise_sum,
    naive_distance_3d,
)
from .precision import HighPrecisionAccumulator
from .comparison import DistanceComparator
from .config import Settings
from .exceptions import EuclidSumError, LengthMismatchError, PrecisionError

__version__ = "1.0.0"
__author__ = "Euclid Summation Contributors"

__all__ = [
    "Point3D",
    "KahanAccumulator",
    "bits_equal",
    "bits_of",
    "naive_distance",
    "kahan_distance",
    "pairwise_distance",
    "pairwise_sum",
    "naive_distance_3d",
    "HighPrecisionAccumulator",
    "DistanceComparator",
    "Settings",
    "EuclidSumError",
    "LengthMismatchError",
    "PrecisionError",
]
