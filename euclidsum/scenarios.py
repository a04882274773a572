"""
Built-in input scenarios for the comparison driver.

Vector scenarios follow ``a_i = base + i*step`` and
``b_i = base + (i + 0.1)*step`` for ``i`` in ``[0, n)``.
"""

from dataclasses import dataclass
from typing import List

import numpy as np

from .core import Point3D

POINT_A = Point3D(1.123456789, 2.987654321, -3.141592653)
POINT_B = Point3D(-1.987654321, 0.123456789, 2.718281828)


@dataclass(frozen=True)
class VectorScenario:
    """A named pair of synthetic vectors."""

    name: str
    a: np.ndarray
    b: np.ndarray

    def __len__(self) -> int:
        return len(self.a)


def offset_vectors(n: int, base: float, step: float):
    """
    Generate the two offset vectors of a scenario.

    Args:
        n: Vector length
        base: Common starting value
        step: Spacing between consecutive elements

    Returns:
        Tuple of (a, b) float64 arrays
    """
    i = np.arange(n, dtype=np.float64)
    a = base + i * step
    b = base + (i + 0.1) * step
    return a, b


def large_magnitude(n: int) -> VectorScenario:
    """Vectors around 1e5 spaced by 1e-3."""
    a, b = offset_vectors(n, 1e5, 1e-3)
    return VectorScenario("large", a, b)


def small_magnitude(n: int) -> VectorScenario:
    """Vectors around 1e-5 spaced by 1e-7."""
    a, b = offset_vectors(n, 1e-5, 1e-7)
    return VectorScenario("small", a, b)


def vector_scenarios(n: int) -> List[VectorScenario]:
    return [large_magnitude(n), small_magnitude(n)]
