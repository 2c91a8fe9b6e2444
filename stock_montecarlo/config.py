"""Model parameters for a GBM Monte Carlo run."""

import math
from dataclasses import dataclass

import numpy as np


class InvalidParameterError(ValueError):
    """Raised when a simulation parameter is out of range or malformed."""


@dataclass(frozen=True)
class SimulationParameters:
    initial_price: float    # S0, must be > 0
    mu: float               # expected annual return, may be negative
    sigma: float            # annual volatility, >= 0
    horizon_years: float    # T, must be > 0
    steps: int              # time increments per path
    n_paths: int            # number of simulated paths

    def validate(self) -> "SimulationParameters":
        for name in ("initial_price", "mu", "sigma", "horizon_years"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise InvalidParameterError(f"{name} must be a number, got {value!r}")
            if not math.isfinite(value):
                raise InvalidParameterError(f"{name} must be finite, got {value}")
        for name in ("steps", "n_paths"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
                raise InvalidParameterError(f"{name} must be an integer, got {value!r}")

        if self.initial_price <= 0:
            raise InvalidParameterError(
                f"initial_price must be positive, got {self.initial_price}"
            )
        if self.sigma < 0:
            raise InvalidParameterError(f"sigma must be non-negative, got {self.sigma}")
        if self.horizon_years <= 0:
            raise InvalidParameterError(
                f"horizon_years must be positive, got {self.horizon_years}"
            )
        if self.steps < 1:
            raise InvalidParameterError(f"steps must be at least 1, got {self.steps}")
        if self.n_paths < 1:
            raise InvalidParameterError(f"n_paths must be at least 1, got {self.n_paths}")
        return self

    @property
    def dt(self) -> float:
        return self.horizon_years / self.steps

    def time_points(self) -> np.ndarray:
        """Time grid in years: t_i = i * dt for i in 0..steps."""
        return np.arange(self.steps + 1) * self.dt
