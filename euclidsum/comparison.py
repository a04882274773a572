"""
Comparison and diagnostic driver.

Runs the accumulators on the same inputs, checks bit-exact agreement and
swap symmetry, and reports the absolute gap between the naive result and
every other strategy. No check is fatal: findings are printed where they
are detected and returned as result objects.
"""

import logging
import sys
import time
from dataclasses import dataclass, field
from typing import Dict, List, Optional, TextIO

from .algorithms import ACCUMULATORS, Accumulator, naive_distance_3d
from .config import Settings
from .core import Point3D, VectorLike, bits_equal
from .precision import HighPrecisionAccumulator
from .scenarios import VectorScenario

logger = logging.getLogger(__name__)

REFERENCE = "reference"


@dataclass(frozen=True)
class DistanceResult:
    """A distance tagged with the accumulator that produced it."""

    method: str
    value: float


@dataclass(frozen=True)
class SymmetryCheck:
    """Outcome of computing one accumulator with both operand orders."""

    method: str
    forward: float
    backward: float

    @property
    def passed(self) -> bool:
        return self.forward == self.backward

    @property
    def gap(self) -> float:
        return abs(self.forward - self.backward)


@dataclass(frozen=True)
class PointComparison:
    """Naive 3D distance against the high-precision reference."""

    naive: float
    reference: float
    swapped: float

    @property
    def bits_match(self) -> bool:
        return bits_equal(self.naive, self.reference)

    @property
    def symmetric(self) -> bool:
        return self.naive == self.swapped


@dataclass
class VectorComparison:
    """All accumulators on one vector scenario."""

    name: str
    results: Dict[str, DistanceResult] = field(default_factory=dict)
    symmetry: List[SymmetryCheck] = field(default_factory=list)

    def gaps(self) -> Dict[str, float]:
        """Absolute difference between naive and every other method."""
        naive = self.results["naive"].value
        return {
            method: abs(naive - result.value)
            for method, result in self.results.items()
            if method != "naive"
        }


class DistanceComparator:
    """
    Runs and reports the distance comparisons.

    Args:
        settings: Run settings (default: Settings())
        out: Stream the report is written to (default: sys.stdout)
    """

    def __init__(self, settings: Optional[Settings] = None, out: Optional[TextIO] = None):
        self.settings = settings or Settings()
        self.out = out
        self.point_reference = HighPrecisionAccumulator(self.settings.point_reference_bits)
        self.vector_reference = HighPrecisionAccumulator(self.settings.reference_bits)

    @property
    def accumulators(self) -> Dict[str, Accumulator]:
        """Vector accumulators in report order."""
        methods = dict(ACCUMULATORS)
        methods[REFERENCE] = self.vector_reference
        return methods

    def _print(self, *args):
        print(*args, file=self.out or sys.stdout)

    def _fmt(self, value: float) -> str:
        return self.settings.fmt(value)

    def compare_points(self, p: Point3D, q: Point3D) -> PointComparison:
        """
        Compare the naive 3D distance with the reference.

        Args:
            p: First point
            q: Second point

        Returns:
            PointComparison with both distances and the swapped naive one
        """
        comparison = PointComparison(
            naive=naive_distance_3d(p, q),
            reference=self.point_reference(p, q),
            swapped=naive_distance_3d(q, p),
        )

        if comparison.bits_match:
            self._print("Results match to the last significant bit")
        else:
            self._print("Mismatch in significant bits")
            self._print(f"Double: {self._fmt(comparison.naive)}")
            self._print(f"{self.settings.point_reference_bits}-bit: {self._fmt(comparison.reference)}")

        if comparison.symmetric:
            self._print("Symmetry check passed: d(A, B) == d(B, A)")
        else:
            self._print("Symmetry check failed: d(A, B) != d(B, A)")

        return comparison

    def _timed(self, method: str, accumulator: Accumulator, a: VectorLike, b: VectorLike) -> float:
        start = time.perf_counter()
        value = accumulator(a, b)
        logger.debug("%s over %d elements took %.3fs", method, len(a), time.perf_counter() - start)
        return value

    def check_symmetry(self, a: VectorLike, b: VectorLike,
                       forward: Optional[Dict[str, float]] = None) -> List[SymmetryCheck]:
        """
        Check that every accumulator is invariant under swapping operands.

        Args:
            a: First vector
            b: Second vector
            forward: Already computed d(a, b) per method, to avoid recomputing

        Returns:
            One SymmetryCheck per accumulator
        """
        forward = forward or {}
        checks = []

        for method, accumulator in self.accumulators.items():
            ab = forward[method] if method in forward else self._timed(method, accumulator, a, b)
            ba = self._timed(method, accumulator, b, a)
            check = SymmetryCheck(method, ab, ba)

            if check.passed:
                self._print(f"  {method:<10} symmetric")
            else:
                self._print(f"  {method:<10} NOT symmetric, gap {self._fmt(check.gap)}")
            checks.append(check)

        return checks

    def compare_vectors(self, scenario: VectorScenario) -> VectorComparison:
        """
        Run all accumulators on a vector scenario and report the results.

        Args:
            scenario: Named vector pair

        Returns:
            VectorComparison with results, naive gaps and symmetry checks
        """
        logger.debug("Scenario %s with %d elements", scenario.name, len(scenario))
        comparison = VectorComparison(scenario.name)

        self._print(f"Scenario '{scenario.name}' (N = {len(scenario)})")
        for method, accumulator in self.accumulators.items():
            value = self._timed(method, accumulator, scenario.a, scenario.b)
            comparison.results[method] = DistanceResult(method, value)
            self._print(f"  {method:<10} {self._fmt(value)}")

        self._print("Difference from naive:")
        for method, gap in comparison.gaps().items():
            self._print(f"  naive vs {method:<10} {self._fmt(gap)}")

        self._print("Symmetry:")
        forward = {method: result.value for method, result in comparison.results.items()}
        comparison.symmetry = self.check_symmetry(scenario.a, scenario.b, forward)

        return comparison

    def run(self, p: Point3D, q: Point3D, scenarios: List[VectorScenario]):
        """
        Run the point comparison followed by every vector scenario.

        Returns:
            Tuple of (PointComparison, list of VectorComparison)
        """
        self._print("=" * 60)
        self._print("3D points")
        self._print("=" * 60)
        point = self.compare_points(p, q)

        vectors = []
        for scenario in scenarios:
            self._print("=" * 60)
            vectors.append(self.compare_vectors(scenario))

        return point, vectors
