"""
Frequency polygon and ogive demo.

Demonstrates:
- polygon() / ogive() series rendered through FigureGenerator
- Switching between absolute and relative frequencies
- The frequency table as a pandas DataFrame

Run:
    pip install -e ".[demo]"
    python examples/distribution_demo.py
"""

import numpy as np
from nicegui import ui

from freqdist import ChartState, ChartType, frequency_table
from freqdist.figure_generator import FigureGenerator
from freqdist.utils.logging import configure_logging, get_logger

configure_logging(level="INFO")
logger = get_logger(__name__)


def create_sample(n: int = 500, seed: int = 1912) -> np.ndarray:
    """Ages-like sample: skewed, clipped to [0, 80]."""
    rng = np.random.default_rng(seed)
    ages = rng.gamma(shape=5.0, scale=6.0, size=n)
    return np.clip(ages, 0.0, 80.0)


SAMPLE = create_sample()
BOUNDARIES = list(range(0, 90, 10))


@ui.page("/")
def index():
    generator = FigureGenerator()
    polygon_state = ChartState(boundaries=BOUNDARIES, xlab="Age", ylab="Passengers")
    ogive_state = ChartState(
        boundaries=BOUNDARIES,
        chart_type=ChartType.OGIVE,
        xlab="Age",
        ylab="Cumulative passengers",
    )

    ui.label("Frequency polygon and ogive").classes("text-3xl font-bold mb-6")

    with ui.row().classes("w-full gap-6"):
        polygon_plot = ui.plotly(generator.make_figure(SAMPLE, polygon_state)).classes("flex-1 h-96")
        ogive_plot = ui.plotly(generator.make_figure(SAMPLE, ogive_state)).classes("flex-1 h-96")

    def on_relative_change(e) -> None:
        labels = {
            ChartType.FREQUENCY_POLYGON: ("Passengers", "Proportion"),
            ChartType.OGIVE: ("Cumulative passengers", "Cumulative proportion"),
        }
        for state, plot in ((polygon_state, polygon_plot), (ogive_state, ogive_plot)):
            state.relative = bool(e.value)
            state.ylab = labels[state.chart_type][int(state.relative)]
            plot.update_figure(generator.make_figure(SAMPLE, state))
        logger.info(f"relative frequencies: {bool(e.value)}")

    ui.checkbox("Relative frequencies", value=False, on_change=on_relative_change)

    table = frequency_table(SAMPLE, BOUNDARIES).reset_index()
    ui.table(
        columns=[{"name": c, "label": c, "field": c} for c in table.columns],
        rows=table.round(3).to_dict("records"),
    ).classes("w-full")


if __name__ in {"__main__", "__mp_main__"}:
    ui.run()
