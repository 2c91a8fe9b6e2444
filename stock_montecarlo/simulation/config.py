"""Run-level settings for a Monte Carlo simulation (output, seeding, charts)."""

from dataclasses import dataclass


@dataclass
class RunConfig:
    output_dir: str = "."
    seed: int | None = None          # None = seed from OS entropy

    # Output files
    paths_file: str = "stock_price_paths.csv"
    time_points_file: str = "time_points.csv"
    html_file: str = "stock_price_plot.html"
    png_file: str = "stock_price_paths.png"

    # Visualization
    max_paths_shown: int = 20
    no_plot: bool = False
