"""
Arbitrary-precision reference accumulator.

The reference reproduces the sum-of-squares-then-root computation in a
high-precision mpmath context and narrows to double only at the end.
Each accumulator owns a private ``MPContext``, so its precision is an
explicit parameter and the global ``mpmath.mp`` settings are never touched.
"""

from mpmath import libmp
from mpmath.ctx_mp import MPContext

from .config import MIN_REFERENCE_BITS
from .core import VectorLike, as_vector_pair
from .exceptions import PrecisionError


class HighPrecisionAccumulator:
    """
    Euclidean distance evaluated with a wide binary mantissa.

    Differences are formed in double precision, as the fixed-precision
    accumulators form them, then lifted exactly into the context. Squares,
    the running sum and the square root are never narrowed.

    Attributes:
        bits: Mantissa width in bits
        ctx: Private mpmath context the intermediates live in
    """

    def __init__(self, bits: int):
        """
        Initialize the reference accumulator.

        Args:
            bits: Mantissa width, at least 128
        """
        if bits < MIN_REFERENCE_BITS:
            raise PrecisionError(
                f"Reference precision must be at least {MIN_REFERENCE_BITS} bits, got {bits}"
            )
        self.bits = bits
        self.ctx = MPContext()
        self.ctx.prec = bits

    def __repr__(self) -> str:
        return f"HighPrecisionAccumulator(bits={self.bits})"

    def __call__(self, a: VectorLike, b: VectorLike) -> float:
        return self.distance(a, b)

    def exact_distance(self, a: VectorLike, b: VectorLike):
        """
        Distance as an ``mpf`` at this accumulator's precision.

        Args:
            a: First vector
            b: Second vector

        Returns:
            Square root of the high-precision sum of squares
        """
        a, b = as_vector_pair(a, b)
        ctx = self.ctx

        with ctx.workprec(self.bits):
            if len(a) == 0:
                return ctx.zero

            total = ctx.zero
            for x, y in zip(a.tolist(), b.tolist()):
                d = ctx.mpf(x - y)
                total += d * d

            return ctx.sqrt(total)

    def distance(self, a: VectorLike, b: VectorLike) -> float:
        """Distance narrowed to the nearest double."""
        return narrow(self.exact_distance(a, b))


def narrow(value) -> float:
    """Round an ``mpf`` to the nearest IEEE double."""
    return libmp.to_float(value._mpf_, rnd=libmp.round_nearest)
