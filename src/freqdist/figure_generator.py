"""Plotly figure generation for frequency polygons and ogives.

This module provides the FigureGenerator class, the adapter between the
binning/aggregation core and the Plotly charting collaborator. It hands Plotly
the x-series, y-series, axis labels, title and style; Plotly does the drawing.
Figures are returned as dicts (never go.Figure) for ui.plotly / update_figure.
"""

from __future__ import annotations

from typing import Any

import plotly.graph_objects as go

from freqdist.algorithms.aggregate import (
    Series,
    ogive_from_table,
    polygon_from_table,
    sample_anchor,
)
from freqdist.algorithms.binning import FrequencyTable, classify
from freqdist.chart_state import STYLE_MODES, ChartState, ChartType
from freqdist.theme import get_grid_color, get_theme_colors, get_theme_template, resolve_theme
from freqdist.utils.logging import get_logger

logger = get_logger(__name__)

MARKER_SIZE = 7
LINE_WIDTH = 2


class FigureGenerator:
    """Generates Plotly figure dictionaries from a sample and a ChartState."""

    def compute(self, sample: Any, state: ChartState) -> tuple[Series, FrequencyTable]:
        """Classify the sample once and derive the series for state.chart_type."""
        table = classify(sample, state.boundaries)
        if state.chart_type == ChartType.OGIVE:
            anchor = sample_anchor(sample, table.boundaries)
            series = ogive_from_table(table, anchor, relative=state.relative)
        else:
            series = polygon_from_table(table, relative=state.relative)
        return series, table

    def make_series(self, sample: Any, state: ChartState) -> Series:
        """Series for state.chart_type without building a figure."""
        series, _ = self.compute(sample, state)
        return series

    def make_figure(self, sample: Any, state: ChartState) -> dict:
        """Generate Plotly figure dictionary for the sample.

        Args:
            sample: Non-empty numeric sample.
            state: ChartState with boundaries, chart type and labels.

        Returns:
            Plotly figure dictionary.

        Raises:
            MissingBoundariesError, InvalidBoundariesError, EmptyDatasetError:
                propagated from classify().
            ValueError: If state.style is not a known style tag.
        """
        if state.style not in STYLE_MODES:
            raise ValueError(
                f"Unknown chart style {state.style!r}; expected one of {sorted(STYLE_MODES)}"
            )
        series, table = self.compute(sample, state)
        logger.info(
            f"FigureGenerator.make_figure: chart_type={state.chart_type.value}, "
            f"relative={state.relative}, n_bins={table.n_bins}"
        )

        theme_mode = resolve_theme(state.theme)
        bg_color, fg_color = get_theme_colors(theme_mode)
        grid_color = get_grid_color(theme_mode)

        title = state.resolved_title()
        if state.show_unclassified and table.unclassified:
            title += (
                f"<br><sup>{table.unclassified} of {table.n_total} value(s) "
                "not classified</sup>"
            )

        fig = go.Figure()
        fig.add_trace(go.Scatter(
            x=series.x.tolist(),
            y=series.y.tolist(),
            mode=STYLE_MODES[state.style],
            name=state.resolved_title(),
            marker=dict(size=MARKER_SIZE, color=fg_color),
            line=dict(width=LINE_WIDTH, color=fg_color),
        ))
        fig.update_layout(
            template=get_theme_template(theme_mode),
            paper_bgcolor=bg_color,
            plot_bgcolor=bg_color,
            font=dict(color=fg_color),
            title=dict(text=title),
            xaxis=dict(title=state.xlab, color=fg_color, gridcolor=grid_color),
            yaxis=dict(title=state.ylab, color=fg_color, gridcolor=grid_color, rangemode="tozero"),
            margin=dict(l=40, r=20, t=60, b=40),
            showlegend=False,
            uirevision="keep",
        )

        logger.debug(f"Figure generated: {len(series)} points")
        return fig.to_dict()
