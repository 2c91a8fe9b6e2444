import matplotlib
matplotlib.use("Agg")

import numpy as np
import pytest

from stock_montecarlo.config import SimulationParameters


def make_params(**overrides):
    """Valid parameter set with small dimensions for fast tests."""
    values = dict(
        initial_price=100.0,
        mu=0.08,
        sigma=0.20,
        horizon_years=1.0,
        steps=12,
        n_paths=50,
    )
    values.update(overrides)
    return SimulationParameters(**values)


@pytest.fixture
def params():
    return make_params()


@pytest.fixture
def rng():
    return np.random.default_rng(42)
