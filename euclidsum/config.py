"""
Runtime settings for the comparison driver.

Only the scenario size and the report formatting can be overridden from the
environment. Reference precisions are fixed.
"""

import os
from dataclasses import dataclass

MIN_DISPLAY_DIGITS = 20
MIN_REFERENCE_BITS = 128


@dataclass(frozen=True)
class Settings:
    """
    Settings for a comparison run.

    Attributes:
        vector_length: Number of elements in each synthetic vector
        display_digits: Fractional digits printed for distances and gaps
        reference_bits: Mantissa width of the vector reference accumulator
        point_reference_bits: Mantissa width of the 3D reference accumulator
    """

    vector_length: int = 1_000_000
    display_digits: int = 25
    reference_bits: int = 256
    point_reference_bits: int = MIN_REFERENCE_BITS

    def __post_init__(self):
        if self.vector_length < 0:
            raise ValueError(f"vector_length must be non-negative, got {self.vector_length}")
        if self.display_digits < MIN_DISPLAY_DIGITS:
            object.__setattr__(self, "display_digits", MIN_DISPLAY_DIGITS)

    @classmethod
    def from_env(cls, environ=None) -> "Settings":
        """
        Build settings from environment variables.

        Reads EUCLIDSUM_VECTOR_LENGTH and EUCLIDSUM_DISPLAY_DIGITS; unset or
        empty variables keep the defaults.
        """
        environ = os.environ if environ is None else environ
        kwargs = {}

        length = environ.get("EUCLIDSUM_VECTOR_LENGTH", "").strip()
        if length:
            kwargs["vector_length"] = int(length)

        digits = environ.get("EUCLIDSUM_DISPLAY_DIGITS", "").strip()
        if digits:
            kwargs["display_digits"] = int(digits)

        return cls(**kwargs)

    def fmt(self, value: float) -> str:
        """Format a value in fixed notation at the configured precision."""
        return f"{value:.{self.display_digits}f}"
