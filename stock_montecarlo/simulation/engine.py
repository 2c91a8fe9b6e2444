"""
Geometric Brownian Motion Monte Carlo engine.

Model: dS = mu * S * dt + sigma * S * dW
Exact: S(t+dt) = S(t) * exp((mu - 0.5*sigma^2)*dt + sigma*sqrt(dt)*Z)
"""

import logging
from dataclasses import dataclass

import numpy as np

from stock_montecarlo.config import SimulationParameters

logger = logging.getLogger(__name__)


@dataclass
class SimulationResult:
    paths: np.ndarray           # (n_paths, steps+1), includes S0, read-only
    time_points: np.ndarray     # (steps+1,), years
    params: SimulationParameters

    @property
    def n_paths(self) -> int:
        return self.paths.shape[0]

    @property
    def terminal_values(self) -> np.ndarray:
        return self.paths[:, -1]


def generate_path(params: SimulationParameters, rng: np.random.Generator) -> np.ndarray:
    """
    Generate one price trajectory of length steps+1.

    Draws exactly `steps` standard normals from `rng`, advancing its state.
    Parameters are assumed to be validated already.
    """
    dt = params.dt
    drift = (params.mu - 0.5 * params.sigma ** 2) * dt
    vol = params.sigma * np.sqrt(dt)

    Z = rng.standard_normal(params.steps)
    log_increments = drift + vol * Z

    # price[i] = price[i-1] * exp(increment_i), multiplied left to right
    factors = np.concatenate(([params.initial_price], np.exp(log_increments)))
    return np.cumprod(factors)


class MonteCarloGBM:
    """Forward Monte Carlo simulation using Geometric Brownian Motion."""

    def __init__(
        self,
        params: SimulationParameters,
        rng: np.random.Generator | None = None,
        seed: int | None = None,
    ):
        self.params = params.validate()
        # One generator for the whole run; None seed pulls OS entropy.
        self.rng = rng if rng is not None else np.random.default_rng(seed)

    def simulate(self) -> SimulationResult:
        p = self.params
        logger.info("Simulating %d paths x %d steps (T=%g years)",
                    p.n_paths, p.steps, p.horizon_years)

        paths = np.empty((p.n_paths, p.steps + 1), dtype=float)
        for i in range(p.n_paths):
            paths[i] = generate_path(p, self.rng)
        paths.flags.writeable = False

        n_bad = int(np.count_nonzero(~np.isfinite(paths[:, -1])))
        if n_bad:
            logger.warning("%d of %d paths ended non-finite (exp overflow)",
                           n_bad, p.n_paths)

        return SimulationResult(
            paths=paths,
            time_points=p.time_points(),
            params=p,
        )
