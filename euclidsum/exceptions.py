"""Exception types raised by the euclidsum package."""


class EuclidSumError(Exception):
    """Base class for euclidsum errors."""


class LengthMismatchError(EuclidSumError, ValueError):
    """Raised when the two operands of a distance have different lengths."""

    def __init__(self, len_a: int, len_b: int):
        super().__init__(f"Vectors must have same length: {len_a} vs {len_b}")
        self.len_a = len_a
        self.len_b = len_b


class PrecisionError(EuclidSumError, ValueError):
    """Raised when a reference accumulator is asked for too few bits."""
