"""Monte Carlo stock price simulation (GBM)."""
from .config import RunConfig
from .engine import MonteCarloGBM, SimulationResult, generate_path
from .statistics import SummaryStatistics, summarize
