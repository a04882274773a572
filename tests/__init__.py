"""
Test suite for the Euclidean Distance Summation Comparison library.

Test Structure:
- test_core.py: Bit comparator, input coercion and Kahan accumulator
- test_algorithms.py: Fixed-precision distance accumulators
- test_precision.py: Arbitrary-precision reference accumulator
- test_comparison.py: Comparison driver, scenarios, settings and entry point
- conftest.py: Shared fixtures and configuration

Usage:
    # Run all tests
    pytest

    # Run tests with coverage
    pytest --cov=euclidsum

    # Skip the million-element scenarios
    pytest -m "not slow"
"""

__version__ = "1.0.0"
