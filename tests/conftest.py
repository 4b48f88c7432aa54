"""Pytest configuration and fixtures."""

import pytest
import numpy as np

from models import EdgeDirection


@pytest.fixture
def seed():
    """Fixed seed for reproducibility."""
    return 42


@pytest.fixture
def rng(seed):
    """Seeded random number generator."""
    return np.random.default_rng(seed)


@pytest.fixture(params=[EdgeDirection.DIRECTED, EdgeDirection.UNDIRECTED], ids=str)
def direction(request):
    """Run a test once per edge direction."""
    return request.param
