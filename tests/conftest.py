#!/usr/bin/env python3
"""
Pytest configuration and fixtures for the distance comparison tests.
"""

import pytest
import numpy as np
import torch
import sys
import os

from mpmath.ctx_mp import MPContext

# Add parent directory to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from euclidsum.scenarios import large_magnitude, small_magnitude

FULL_LENGTH = 1_000_000


@pytest.fixture(scope="session")
def random_seed():
    """Set random seed for reproducible tests."""
    seed = 42
    np.random.seed(seed)
    torch.manual_seed(seed)
    return seed


@pytest.fixture
def simple_pair():
    """Small pair with an exact integer distance."""
    return [1.0, 2.0, 3.0, 4.0], [1.0, 2.0, 3.0, 0.0]


@pytest.fixture
def random_pair(random_seed):
    """Random vectors spanning several orders of magnitude."""
    rng = np.random.default_rng(random_seed)
    n = 2000
    exponents = rng.uniform(-6, 6, n)
    a = rng.choice([-1.0, 1.0], n) * 10.0 ** exponents
    b = rng.normal(0, 1, n)
    return a, b


@pytest.fixture
def mixed_magnitude_pair(random_seed):
    """Long pair where naive summation drifts visibly."""
    rng = np.random.default_rng(random_seed)
    n = 100_000
    a = 10.0 ** rng.uniform(-4, 4, n)
    b = np.zeros(n)
    return a, b


@pytest.fixture(scope="session")
def large_scenario():
    return large_magnitude(FULL_LENGTH)


@pytest.fixture(scope="session")
def small_scenario():
    return small_magnitude(FULL_LENGTH)


class ExactDistance:
    """True distance of double inputs, evaluated at a very wide precision."""

    def __init__(self, bits: int = 2048):
        self.ctx = MPContext()
        self.ctx.prec = bits

    def __call__(self, a, b):
        ctx = self.ctx
        total = ctx.zero
        for x, y in zip(np.asarray(a, dtype=np.float64).tolist(),
                        np.asarray(b, dtype=np.float64).tolist()):
            d = ctx.mpf(x) - ctx.mpf(y)
            total += d * d
        return ctx.sqrt(total)

    def error(self, computed: float, exact) -> float:
        return abs(self.ctx.mpf(computed) - exact)


@pytest.fixture(scope="session")
def exact_distance():
    """Fixture providing a near-exact distance oracle."""
    return ExactDistance()


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )


def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers automatically."""
    for item in items:
        # Million-element scenarios take several seconds each
        if "million" in item.name or "stress" in item.name:
            item.add_marker(pytest.mark.slow)

        if "integration" in item.name or "end_to_end" in item.name:
            item.add_marker(pytest.mark.integration)
