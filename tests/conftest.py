import numpy as np
import pytest


@pytest.fixture
def unit_grid():
    """Evenly spaced samples over the closed unit interval, both ends included."""
    return np.linspace(0.0, 1.0, 21)


@pytest.fixture
def rng():
    return np.random.default_rng(20231018)
