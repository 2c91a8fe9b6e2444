"""Monte Carlo simulation visualization — fan chart + terminal distribution."""

import logging
import os

import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import matplotlib.ticker as mticker

from stock_montecarlo.simulation.engine import SimulationResult
from stock_montecarlo.simulation.statistics import SummaryStatistics

logger = logging.getLogger(__name__)


def plot_simulation(result: SimulationResult, stats: SummaryStatistics, path: str,
                    max_paths_shown: int = 20) -> str:
    """
    Two-panel plot saved to `path`:
      1. Fan chart: sample paths, P5-P95 band and median over time
      2. Histogram: distribution of final prices
    """
    params = result.params
    time_points = result.time_points
    initial = params.initial_price

    fig, (ax_fan, ax_hist) = plt.subplots(
        2, 1, figsize=(14, 10), height_ratios=[2, 1],
    )

    title_parts = [
        "Monte Carlo Stock Price Simulation",
        f"{result.n_paths:,} paths x {params.steps} steps",
        f"mu={params.mu:.1%}  sigma={params.sigma:.1%}  T={params.horizon_years:g}y",
    ]
    fig.suptitle("  |  ".join(title_parts), fontsize=11, fontweight="bold")

    # ── Panel 1: Fan chart ──
    band_lo = np.percentile(result.paths, 5, axis=0)
    band_hi = np.percentile(result.paths, 95, axis=0)
    median = np.percentile(result.paths, 50, axis=0)

    ax_fan.fill_between(time_points, band_lo, band_hi, alpha=0.3,
                        color="#3498db", label="P5-P95")
    ax_fan.plot(time_points, median, color="#2c3e50", linewidth=2,
                label="Median (P50)")

    n_shown = min(result.n_paths, max_paths_shown)
    for idx in range(n_shown):
        ax_fan.plot(time_points, result.paths[idx],
                    color="gray", alpha=0.3, linewidth=0.6)

    ax_fan.axhline(y=initial, color="red", linestyle="--",
                   linewidth=0.8, alpha=0.7, label=f"Start ${initial:,.2f}")
    ax_fan.set_xlabel("Time (years)", fontsize=10)
    ax_fan.set_ylabel("Stock Price ($)", fontsize=10)
    ax_fan.legend(loc="upper left", fontsize=9, framealpha=0.9)
    ax_fan.grid(True, alpha=0.25, linestyle="--")
    ax_fan.yaxis.set_major_formatter(
        mticker.FuncFormatter(lambda x, _: f"${x:,.0f}")
    )
    ax_fan.margins(x=0.02)

    # ── Panel 2: Terminal price distribution ──
    final_prices = result.terminal_values
    finite = final_prices[np.isfinite(final_prices)]
    if len(finite):
        ax_hist.hist(finite, bins=min(80, max(10, len(finite) // 5)),
                     color="#3498db", alpha=0.7, edgecolor="white", linewidth=0.3)

    for label, val in (("P5", stats.percentile_5), ("P95", stats.percentile_95)):
        if np.isfinite(val):
            ax_hist.axvline(x=val, color="gray", linestyle="--", linewidth=0.8,
                            label=f"{label}: ${val:,.2f}")
    ax_hist.axvline(x=initial, color="red", linestyle="--",
                    linewidth=1, alpha=0.8, label=f"Start ${initial:,.2f}")

    ax_hist.annotate(
        f"Mean: \\${stats.mean:,.2f}\n"
        f"Std Dev: \\${stats.std_dev:,.2f}\n"
        f"Min: \\${stats.minimum:,.2f}  |  Max: \\${stats.maximum:,.2f}",
        xy=(0.98, 0.92), xycoords="axes fraction",
        ha="right", va="top", fontsize=9,
        bbox=dict(boxstyle="round,pad=0.4", facecolor="wheat", alpha=0.85),
    )

    ax_hist.set_xlabel("Final Stock Price ($)", fontsize=10)
    ax_hist.set_ylabel("Frequency", fontsize=10)
    ax_hist.legend(loc="upper left", fontsize=8, framealpha=0.9)
    ax_hist.grid(True, alpha=0.25, linestyle="--")
    ax_hist.xaxis.set_major_formatter(
        mticker.FuncFormatter(lambda x, _: f"${x:,.0f}")
    )
    ax_hist.margins(x=0.02)

    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    plt.tight_layout()
    fig.savefig(path, dpi=150, bbox_inches="tight", facecolor="white")
    plt.close(fig)
    logger.info("Saved chart to %s", path)
    return path
