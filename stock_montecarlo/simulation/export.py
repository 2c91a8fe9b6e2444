"""
Flat-file export of a simulation run.

stock_price_paths.csv: header `Path,t_0,...,t_N`, then one row per path
(`k,S_0,...,S_N`, k starting at 1).
time_points.csv: one t_i per line, N+1 lines, no header.
"""

import logging
import os

import numpy as np
import pandas as pd

from stock_montecarlo.simulation.engine import SimulationResult

logger = logging.getLogger(__name__)


def paths_frame(result: SimulationResult) -> pd.DataFrame:
    """One row per path, one column per time point (years)."""
    df = pd.DataFrame(
        result.paths,
        index=pd.RangeIndex(1, result.n_paths + 1, name="Path"),
        columns=result.time_points,
    )
    return df


def write_paths_csv(result: SimulationResult, path: str) -> str:
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    paths_frame(result).to_csv(path, index_label="Path")
    logger.info("Wrote %d paths to %s", result.n_paths, path)
    return path


def write_time_points_csv(result: SimulationResult, path: str) -> str:
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    pd.Series(result.time_points).to_csv(path, index=False, header=False)
    logger.info("Wrote %d time points to %s", len(result.time_points), path)
    return path


def read_paths_csv(path: str) -> pd.DataFrame:
    df = pd.read_csv(path, index_col="Path", float_precision="round_trip")
    df.columns = df.columns.astype(float)
    return df


def read_time_points_csv(path: str) -> np.ndarray:
    s = pd.read_csv(path, header=None, float_precision="round_trip")[0]
    return s.to_numpy(dtype=float)
