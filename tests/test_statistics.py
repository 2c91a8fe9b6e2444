"""Tests for terminal-value summary statistics."""
import math

import numpy as np
import pytest

from stock_montecarlo.simulation.engine import MonteCarloGBM
from stock_montecarlo.simulation.statistics import (
    SummaryStatistics,
    nearest_rank_percentile,
    summarize,
)
from tests.conftest import make_params


def _ensemble(terminals, steps=3):
    """Paths whose last column is `terminals`."""
    terminals = np.asarray(terminals, dtype=float)
    paths = np.full((len(terminals), steps + 1), 100.0)
    paths[:, -1] = terminals
    return paths


def test_known_values():
    stats = summarize(_ensemble([1.0, 2.0, 3.0, 4.0]))
    assert stats.mean == 2.5
    assert stats.std_dev == pytest.approx(math.sqrt(1.25))
    assert stats.minimum == 1.0
    assert stats.maximum == 4.0
    assert stats.n_paths == 4


def test_population_not_sample_std():
    values = [10.0, 12.0, 23.0, 23.0, 16.0, 23.0, 21.0, 16.0]
    stats = summarize(_ensemble(values))
    assert stats.std_dev == pytest.approx(np.std(values, ddof=0))
    assert stats.std_dev != pytest.approx(np.std(values, ddof=1))
    assert stats.std_dev == pytest.approx(4.898979485566356)


def test_percentiles_nearest_rank_100():
    rng = np.random.default_rng(3)
    values = rng.permutation(np.arange(100, dtype=float) * 1.5 + 10)
    stats = summarize(_ensemble(values))
    v = np.sort(values)
    assert stats.percentile_5 == v[5]
    assert stats.percentile_95 == v[95]


def test_percentile_no_interpolation_small_n():
    v = np.array([1.0, 5.0, 9.0])
    # floor(0.05*3) = 0, floor(0.95*3) = 2
    assert nearest_rank_percentile(v, 0.05) == 1.0
    assert nearest_rank_percentile(v, 0.95) == 9.0


def test_small_n_p5_is_minimum():
    stats = summarize(_ensemble([7.0, 3.0, 5.0, 11.0, 2.0]))
    assert stats.percentile_5 == stats.minimum == 2.0


def test_percentile_index_for_odd_sizes():
    v = np.arange(41, dtype=float)
    assert nearest_rank_percentile(v, 0.05) == 2.0    # floor(2.05)
    assert nearest_rank_percentile(v, 0.95) == 38.0   # floor(38.95)


def test_percentile_empty_raises():
    with pytest.raises(ValueError):
        nearest_rank_percentile(np.array([]), 0.5)


def test_single_path_all_equal():
    result = MonteCarloGBM(make_params(n_paths=1, sigma=0.9), seed=11).simulate()
    stats = summarize(result)
    terminal = result.paths[0, -1]
    assert stats.std_dev == 0.0
    for value in (stats.mean, stats.minimum, stats.maximum,
                  stats.percentile_5, stats.percentile_95):
        assert value == terminal


def test_identical_terminals_zero_std():
    stats = summarize(_ensemble([108.33] * 37))
    assert stats.std_dev == 0.0
    assert stats.mean == 108.33


def test_ordering_invariant():
    for seed in range(10):
        result = MonteCarloGBM(make_params(n_paths=seed * 7 + 1), seed=seed).simulate()
        s = summarize(result)
        assert s.minimum <= s.percentile_5 <= s.percentile_95 <= s.maximum
        assert s.std_dev >= 0.0


def test_std_positive_when_terminals_differ():
    stats = summarize(_ensemble([100.0, 100.0, 100.5]))
    assert stats.std_dev > 0.0


def test_accepts_result_or_array(params):
    result = MonteCarloGBM(params, seed=4).simulate()
    assert summarize(result) == summarize(np.asarray(result.paths))


def test_mean_close_to_theoretical():
    p = make_params(mu=0.08, sigma=0.2, steps=4, n_paths=20000)
    stats = summarize(MonteCarloGBM(p, seed=0).simulate())
    assert stats.mean == pytest.approx(100.0 * math.exp(0.08), rel=0.01)


def test_nan_propagates():
    stats = summarize(_ensemble([1.0, float("nan"), 3.0]))
    assert math.isnan(stats.mean)
    assert math.isnan(stats.std_dev)


def test_as_dict_keys():
    d = summarize(_ensemble([1.0, 2.0])).as_dict()
    assert set(d) == {"mean", "std_dev", "minimum", "maximum",
                      "percentile_5", "percentile_95", "n_paths"}
    assert isinstance(summarize(_ensemble([1.0])), SummaryStatistics)


def test_overflowed_ensemble_std_is_nan():
    p = make_params(mu=1e6, sigma=0.0, horizon_years=10.0, steps=1, n_paths=3)
    with np.errstate(over="ignore"):
        result = MonteCarloGBM(p, seed=0).simulate()
    with np.errstate(invalid="ignore"):
        stats = summarize(result)
    assert math.isinf(stats.mean)
    assert math.isnan(stats.std_dev)
    assert math.isinf(stats.maximum)
