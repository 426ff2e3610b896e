"""
Shared pytest fixtures for the linearalgebra test suite.

This module provides:
- Library instances bound to each registered summation strategy
- A settings factory that ignores the environment and any .env file
- A cancellation-heavy matrix pair for precision comparisons
"""

import pytest
from typing import Any

from linearalgebra import STRATEGIES, linear_algebra
from linearalgebra.core.config import Settings


@pytest.fixture
def naive_library():
    """Library instance using naive left-to-right summation."""
    return linear_algebra("naive")


@pytest.fixture
def precise_library():
    """Library instance using Neumaier compensated summation."""
    return linear_algebra("neumaier")


@pytest.fixture(params=sorted(STRATEGIES))
def any_library(request):
    """Library instance for every registered strategy."""
    return linear_algebra(request.param)


@pytest.fixture
def settings_factory():
    """Factory for Settings instances isolated from the environment."""
    def _factory(**overrides: Any) -> Settings:
        """Create Settings with explicit overrides and no .env lookup."""
        return Settings(_env_file=None, **overrides)
    return _factory


@pytest.fixture
def cancellation_rows():
    """
    A row whose products cancel catastrophically under naive summation.

    Naive (and classic Kahan) summation of [1e16, 1.0, -1e16] returns 0.0;
    the exact sum is 1.0.
    """
    return [[1e16, 1.0, -1e16], [1.0, 1e100, -1e100]]
