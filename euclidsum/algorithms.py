"""
Fixed-precision distance accumulators.

Every accumulator computes ``sqrt(sum((a_i - b_i)^2))`` in IEEE double
precision and differs only in how the squared differences are summed.
"""

from typing import Callable, Dict, List

from .core import (
    KahanAccumulator,
    Point3D,
    VectorLike,
    as_vector_pair,
    finish,
    squared_differences,
)

Accumulator = Callable[[VectorLike, VectorLike], float]


def naive_distance(a: VectorLike, b: VectorLike) -> float:
    """
    Euclidean distance with a single running sum.

    Args:
        a: First vector
        b: Second vector

    Returns:
        Distance accumulated in increasing index order
    """
    a, b = as_vector_pair(a, b)

    total = 0.0
    for x, y in zip(a.tolist(), b.tolist()):
        d = x - y
        total += d * d

    return finish(total)


def kahan_distance(a: VectorLike, b: VectorLike) -> float:
    """
    Euclidean distance using Kahan compensated summation.

    The compensation term is carried across the whole sequence.
    """
    a, b = as_vector_pair(a, b)

    acc = KahanAccumulator()
    for x, y in zip(a.tolist(), b.tolist()):
        d = x - y
        acc.add(d * d)

    return finish(acc.get())


def pairwise_sum(terms: List[float]) -> float:
    """
    Sum values by recursive midpoint splitting.

    A range of length 0 sums to 0.0, a range of length 1 to its element,
    and any longer range to (left half) + (right half). The recursion is
    driven by an explicit stack so depth is bounded by memory, not by the
    interpreter recursion limit.

    Args:
        terms: Values to sum

    Returns:
        Pairwise sum, identical to the recursive formulation
    """
    if not terms:
        return 0.0

    # Entries are (lo, hi, combine). combine marks a range whose halves
    # have already been pushed onto partials.
    stack = [(0, len(terms), False)]
    partials = []

    while stack:
        lo, hi, combine = stack.pop()
        n = hi - lo

        if combine:
            right = partials.pop()
            left = partials.pop()
            partials.append(left + right)
        elif n == 1:
            partials.append(terms[lo])
        else:
            mid = lo + n // 2
            stack.append((lo, hi, True))
            stack.append((mid, hi, False))
            stack.append((lo, mid, False))

    return partials[0]


def pairwise_distance(a: VectorLike, b: VectorLike) -> float:
    """Euclidean distance using pairwise summation of the squared terms."""
    return finish(pairwise_sum(squared_differences(a, b)))


def naive_distance_3d(p: Point3D, q: Point3D) -> float:
    """
    Three-term Euclidean distance between two points.

    Differences are taken as ``q - p`` and the squares are added left to
    right, matching the naive accumulator on three elements.
    """
    dx = q[0] - p[0]
    dy = q[1] - p[1]
    dz = q[2] - p[2]
    return finish(dx * dx + dy * dy + dz * dz)


ACCUMULATORS: Dict[str, Accumulator] = {
    "naive": naive_distance,
    "kahan": kahan_distance,
    "pairwise": pairwise_distance,
}


def get_accumulator(method: str) -> Accumulator:
    """Look up a fixed-precision accumulator by name."""
    try:
        return ACCUMULATORS[method]
    except KeyError:
        raise ValueError(f"Unknown method: {method}") from None
