"""
Human-readable output: the terminal-price summary printed to the console
and a standalone Chart.js page that plots the exported paths CSV.
"""

import logging
import os
from string import Template

from stock_montecarlo.config import SimulationParameters
from stock_montecarlo.simulation.config import RunConfig
from stock_montecarlo.simulation.statistics import SummaryStatistics

logger = logging.getLogger(__name__)


SUMMARY_LABELS = (
    ("Mean", "mean"),
    ("Standard Deviation", "std_dev"),
    ("Minimum", "minimum"),
    ("Maximum", "maximum"),
    ("5th Percentile", "percentile_5"),
    ("95th Percentile", "percentile_95"),
)


def format_summary(stats: SummaryStatistics) -> str:
    lines = [
        "Simulation Statistics (Final Stock Price):",
        "-" * 40,
    ]
    for label, attr in SUMMARY_LABELS:
        lines.append(f"{label}: ${getattr(stats, attr):.2f}")
    return "\n".join(lines)


# ── HTML chart ───────────────────────────────────────────────────────────

# `$$` escapes JS template literals from Template substitution.
HTML_TEMPLATE = Template("""<!DOCTYPE html>
<html>
<head>
    <title>Monte Carlo Stock Price Simulation</title>
    <script src="https://cdn.jsdelivr.net/npm/chart.js"></script>
    <style>
        body { font-family: Arial, sans-serif; margin: 20px; }
        .container { max-width: 1200px; margin: 0 auto; }
        .chart-container { width: 100%; height: 600px; margin-top: 20px; }
        h1, h2 { color: #333; }
        .params { background-color: #f5f5f5; padding: 15px; border-radius: 5px; margin-bottom: 20px; }
    </style>
</head>
<body>
    <div class="container">
        <h1>Monte Carlo Stock Price Simulation</h1>

        <div class="params">
            <h2>Simulation Parameters</h2>
            <p><strong>Initial Stock Price:</strong> $$${initial_price}</p>
            <p><strong>Expected Annual Return:</strong> ${mu_pct}%</p>
            <p><strong>Annual Volatility:</strong> ${sigma_pct}%</p>
            <p><strong>Time Period:</strong> ${horizon_years} years</p>
            <p><strong>Number of Paths:</strong> ${n_paths}</p>
        </div>

        <div class="chart-container">
            <canvas id="stockChart"></canvas>
        </div>
    </div>

    <script>
        async function loadCSV(url) {
            const response = await fetch(url);
            const data = await response.text();
            return data.trim().split('\\n').map(row => row.split(','));
        }

        function getRandomColor() {
            const letters = '0123456789ABCDEF';
            let color = '#';
            for (let i = 0; i < 6; i++) {
                color += letters[Math.floor(Math.random() * 16)];
            }
            return color;
        }

        async function createChart() {
            try {
                const pathsData = await loadCSV('${paths_file}');
                const timePoints = pathsData[0].slice(1).map(parseFloat);

                const datasets = [];
                const pathsToShow = Math.min(${n_paths}, ${max_paths_shown});

                for (let i = 1; i <= pathsToShow; i++) {
                    const pathValues = pathsData[i].slice(1).map(parseFloat);
                    datasets.push({
                        label: `Path $${i}`,
                        data: pathValues,
                        borderColor: getRandomColor(),
                        backgroundColor: 'transparent',
                        borderWidth: 1,
                        pointRadius: 0
                    });
                }

                const ctx = document.getElementById('stockChart').getContext('2d');
                new Chart(ctx, {
                    type: 'line',
                    data: { labels: timePoints, datasets: datasets },
                    options: {
                        responsive: true,
                        maintainAspectRatio: false,
                        plugins: {
                            title: { display: true, text: 'Stock Price Simulation Paths', font: { size: 16 } },
                            legend: { display: false },
                            tooltip: { mode: 'index', intersect: false }
                        },
                        scales: {
                            x: { title: { display: true, text: 'Time (years)' } },
                            y: { title: { display: true, text: 'Stock Price ($$)' } }
                        }
                    }
                });
            } catch (error) {
                console.error('Error loading data:', error);
                document.body.innerHTML += `<p style="color: red">Error loading data: $${error.message}</p>`;
            }
        }

        window.onload = createChart;
    </script>
</body>
</html>
""")


def render_html(params: SimulationParameters, run_config: RunConfig | None = None) -> str:
    run_config = run_config or RunConfig()
    return HTML_TEMPLATE.substitute(
        initial_price=f"{params.initial_price:g}",
        mu_pct=f"{params.mu * 100:g}",
        sigma_pct=f"{params.sigma * 100:g}",
        horizon_years=f"{params.horizon_years:g}",
        n_paths=params.n_paths,
        max_paths_shown=run_config.max_paths_shown,
        paths_file=run_config.paths_file,
    )


def write_html(params: SimulationParameters, run_config: RunConfig) -> str:
    path = os.path.join(run_config.output_dir, run_config.html_file)
    os.makedirs(run_config.output_dir, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(render_html(params, run_config))
    logger.info("HTML plot file generated: %s", path)
    return path
