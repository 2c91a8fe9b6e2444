"""Summary statistics of the terminal-price distribution."""

import math
from dataclasses import asdict, dataclass

import numpy as np

from stock_montecarlo.simulation.engine import SimulationResult


@dataclass(frozen=True)
class SummaryStatistics:
    mean: float
    std_dev: float          # population (divisor n)
    minimum: float
    maximum: float
    percentile_5: float
    percentile_95: float
    n_paths: int

    def as_dict(self) -> dict:
        return asdict(self)


def nearest_rank_percentile(sorted_values: np.ndarray, p: float) -> float:
    """
    Value at sorted index floor(p * n), no interpolation.

    For small n the 5th percentile is the minimum; that is expected.
    """
    n = len(sorted_values)
    if n == 0:
        raise ValueError("cannot take a percentile of an empty sample")
    idx = min(int(math.floor(p * n)), n - 1)
    return float(sorted_values[idx])


def summarize(result: SimulationResult | np.ndarray) -> SummaryStatistics:
    """
    Compute mean, population std, extrema and nearest-rank 5th/95th
    percentiles of the terminal values.

    Accepts a SimulationResult or a raw (n_paths, steps+1) array.
    """
    if isinstance(result, SimulationResult):
        final_prices = result.terminal_values
    else:
        final_prices = np.asarray(result, dtype=float)[:, -1]

    n = len(final_prices)
    if n == 0:
        raise ValueError("ensemble has no paths")

    sorted_prices = np.sort(final_prices)
    minimum = float(np.min(final_prices))
    maximum = float(np.max(final_prices))

    if minimum == maximum and np.isfinite(minimum):
        # Identical finite terminals: avoid rounding noise in the mean
        mean = minimum
        std_dev = 0.0
    else:
        mean = float(np.mean(final_prices))
        std_dev = float(np.sqrt(np.mean((final_prices - mean) ** 2)))

    return SummaryStatistics(
        mean=mean,
        std_dev=std_dev,
        minimum=minimum,
        maximum=maximum,
        percentile_5=nearest_rank_percentile(sorted_prices, 0.05),
        percentile_95=nearest_rank_percentile(sorted_prices, 0.95),
        n_paths=n,
    )
