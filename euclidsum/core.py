"""
Core building blocks for distance comparison.

This module contains the bit-pattern comparator, input coercion shared by
all accumulators, and the Kahan compensated accumulator.
"""

import math
from typing import NamedTuple, Sequence, Tuple, Union

import numpy as np
import torch

from .exceptions import LengthMismatchError

VectorLike = Union[Sequence[float], np.ndarray, torch.Tensor]


class Point3D(NamedTuple):
    """A point in three-dimensional space."""

    x: float
    y: float
    z: float


def bits_of(value: float) -> int:
    """
    Reinterpret a double as its unsigned 64-bit IEEE-754 encoding.

    Args:
        value: Value to reinterpret

    Returns:
        The raw bit pattern as a Python int
    """
    return int(np.array([value], dtype=np.float64).view(np.uint64)[0])


def bits_equal(a: float, b: float) -> bool:
    """
    Check whether two doubles have identical bit patterns.

    Stricter than ``==``: ``0.0`` and ``-0.0`` differ, and a NaN equals
    another NaN only when the payloads match.
    """
    return bits_of(a) == bits_of(b)


def as_vector(values: VectorLike) -> np.ndarray:
    """
    Convert a sequence, array or tensor into a 1-D float64 array.

    Args:
        values: Coordinates to convert

    Returns:
        Contiguous float64 array
    """
    if isinstance(values, torch.Tensor):
        values = values.detach().cpu().numpy()

    return np.ascontiguousarray(values, dtype=np.float64).reshape(-1)


def as_vector_pair(a: VectorLike, b: VectorLike) -> Tuple[np.ndarray, np.ndarray]:
    """Coerce both operands and check that their lengths agree."""
    a = as_vector(a)
    b = as_vector(b)
    if len(a) != len(b):
        raise LengthMismatchError(len(a), len(b))
    return a, b


def squared_differences(a: VectorLike, b: VectorLike) -> list:
    """
    Compute ``(a_i - b_i)^2`` for every coordinate in double precision.

    Each term is formed as ``d * d`` so that it is independent of the
    operand order.
    """
    a, b = as_vector_pair(a, b)
    terms = []
    for x, y in zip(a.tolist(), b.tolist()):
        d = x - y
        terms.append(d * d)
    return terms


def kahan_add(a: float, b: float, c: float = 0.0) -> Tuple[float, float]:
    """
    Single-step Kahan addition.

    Args:
        a: Running sum
        b: Value to add
        c: Current compensation term

    Returns:
        Tuple of (new_sum, new_compensation)
    """
    y = b - c
    t = a + y
    new_c = (t - a) - y
    return t, new_c


class KahanAccumulator:
    """
    Kahan summation accumulator for double-precision values.

    Attributes:
        sum: The accumulated sum
        c: The compensation term tracking lost precision
    """

    def __init__(self):
        self.sum = 0.0
        self.c = 0.0  # Compensation

    def add(self, value: float):
        """Add value with Kahan compensation."""
        self.sum, self.c = kahan_add(self.sum, value, self.c)

    def get(self) -> float:
        """Get compensated sum."""
        return self.sum

    def reset(self):
        """Reset the accumulator to zero."""
        self.sum = 0.0
        self.c = 0.0


def finish(total: float) -> float:
    """Square root shared by every accumulator."""
    return math.sqrt(total)
