"""
CLI runner for the Monte Carlo stock price simulation.

Usage:
    # Interactive: prompts for every model parameter not given as a flag
    python -m stock_montecarlo.simulation.runner

    # Fully non-interactive
    python -m stock_montecarlo.simulation.runner --initial-price 100 \
        --mu 0.08 --sigma 0.20 --years 1 --steps 252 --n-paths 1000

    # Reproducible run into ./out, no PNG chart
    python -m stock_montecarlo.simulation.runner --initial-price 100 \
        --mu 0.08 --sigma 0.20 --years 1 --steps 252 --n-paths 1000 \
        --seed 42 --output-dir out --no-plot
"""

import argparse
import logging
import os
import time

from stock_montecarlo.config import InvalidParameterError, SimulationParameters
from stock_montecarlo.simulation.config import RunConfig

logger = logging.getLogger(__name__)


# (dest, prompt, type) in prompt order
PROMPTS = (
    ("initial_price", "Enter initial stock price ($): ", float),
    ("mu", "Enter expected annual return (as decimal, e.g., 0.08 for 8%): ", float),
    ("sigma", "Enter annual volatility (as decimal, e.g., 0.20 for 20%): ", float),
    ("horizon_years", "Enter time period (in years): ", float),
    ("steps", "Enter number of time steps: ", int),
    ("n_paths", "Enter number of simulation paths: ", int),
)


def _parse_answer(name, raw, cast):
    try:
        return cast(raw.strip())
    except ValueError:
        raise InvalidParameterError(
            f"{name}: expected {cast.__name__}, got {raw.strip()!r}"
        ) from None


def prompt_parameters(known: dict, input_fn=input) -> SimulationParameters:
    """Fill in any parameter missing from `known` by prompting, then validate."""
    values = dict(known)
    missing = [p for p in PROMPTS if values.get(p[0]) is None]
    if missing:
        print("Monte Carlo Stock Price Simulation")
        print("==================================\n")
    for name, prompt, cast in missing:
        try:
            raw = input_fn(prompt)
        except EOFError:
            raise InvalidParameterError(f"{name}: no input (end of file)") from None
        values[name] = _parse_answer(name, raw, cast)
    return SimulationParameters(**{name: values[name] for name, _, _ in PROMPTS}).validate()


def build_parser():
    parser = argparse.ArgumentParser(
        description="Monte Carlo stock price simulation (GBM)"
    )
    parser.add_argument("--initial-price", dest="initial_price", type=float, default=None,
                        help="Initial stock price S0")
    parser.add_argument("--mu", type=float, default=None,
                        help="Expected annual return, decimal (0.08 = 8%%)")
    parser.add_argument("--sigma", type=float, default=None,
                        help="Annual volatility, decimal (0.20 = 20%%)")
    parser.add_argument("--years", dest="horizon_years", type=float, default=None,
                        help="Time horizon in years")
    parser.add_argument("--steps", type=int, default=None,
                        help="Number of time steps")
    parser.add_argument("--n-paths", dest="n_paths", type=int, default=None,
                        help="Number of simulation paths")
    parser.add_argument("--seed", type=int, default=None,
                        help="Random seed (default: seed from OS entropy)")
    parser.add_argument("--output-dir", default=".",
                        help="Directory for CSV/HTML/PNG output (default: .)")
    parser.add_argument("--max-paths-shown", type=int, default=20,
                        help="Paths drawn in the charts (default: 20)")
    parser.add_argument("--no-plot", action="store_true",
                        help="Skip the PNG chart")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Debug logging")
    return parser


def run(args=None, input_fn=None):
    input_fn = input_fn or input
    parser = build_parser()
    parsed = parser.parse_args(args)

    params = prompt_parameters(
        {name: getattr(parsed, name) for name, _, _ in PROMPTS},
        input_fn=input_fn,
    )
    config = RunConfig(
        output_dir=parsed.output_dir,
        seed=parsed.seed,
        max_paths_shown=parsed.max_paths_shown,
        no_plot=parsed.no_plot,
    )

    # ── Run simulation ──
    from stock_montecarlo.simulation.engine import MonteCarloGBM
    from stock_montecarlo.simulation.statistics import summarize

    print("\nRunning Monte Carlo simulation...")
    start = time.perf_counter()
    mc = MonteCarloGBM(params, seed=config.seed)
    result = mc.simulate()
    elapsed = time.perf_counter() - start
    print(f"Simulation completed in {elapsed:.4f} seconds.")

    stats = summarize(result)

    # ── Print summary ──
    from stock_montecarlo.simulation.report import format_summary, write_html

    print("\n" + format_summary(stats))

    # ── Export ──
    from stock_montecarlo.simulation.export import write_paths_csv, write_time_points_csv

    write_paths_csv(result, os.path.join(config.output_dir, config.paths_file))
    write_time_points_csv(result, os.path.join(config.output_dir, config.time_points_file))
    print("Results saved to CSV files for plotting.")

    html_path = write_html(params, config)
    print(f"HTML plot file generated: {html_path}")
    print("Open this file in a web browser to view the simulation paths.")

    # ── Plot ──
    if not config.no_plot:
        from stock_montecarlo.simulation.plotting import plot_simulation
        png_path = plot_simulation(
            result, stats,
            os.path.join(config.output_dir, config.png_file),
            max_paths_shown=config.max_paths_shown,
        )
        print(f"Chart saved: {png_path}")

    return result, stats


def main(args=None):
    parser = build_parser()
    verbose = parser.parse_known_args(args)[0].verbose
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        run(args)
    except InvalidParameterError as e:
        logger.error("Invalid parameter: %s", e)
        parser.exit(2, f"{parser.prog}: error: {e}\n")


if __name__ == "__main__":
    main()
