"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def line_data():
    """Points lying exactly on y = x + 4."""
    return [1.0, 2.0, 3.0], [5.0, 6.0, 7.0]


@pytest.fixture
def noisy_line_data(rng):
    """Noisy observations around y = 0.5 + 2x."""
    n = 200
    x = rng.uniform(-10, 10, size=n)
    y = 0.5 + 2.0 * x + rng.standard_normal(n) * 0.3
    return x, y, 2.0, 0.5
