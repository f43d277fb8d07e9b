"""Tests for FigureGenerator Plotly figure dicts."""

from __future__ import annotations

import pytest

from freqdist.algorithms.aggregate import OgiveSeries, PolygonSeries
from freqdist.chart_state import ChartState, ChartType
from freqdist.errors import EmptyDatasetError, InvalidBoundariesError, MissingBoundariesError
from freqdist.figure_generator import FigureGenerator


@pytest.fixture
def generator() -> FigureGenerator:
    return FigureGenerator()


def _trace(fig: dict) -> dict:
    assert len(fig["data"]) == 1
    return fig["data"][0]


def _title(fig: dict) -> str:
    return fig["layout"]["title"]["text"]


def test_make_figure_polygon(generator, sample, boundaries) -> None:
    """Polygon figure: one lines+markers trace through the bin midpoints."""
    fig = generator.make_figure(sample, ChartState(boundaries=boundaries))
    assert isinstance(fig, dict)
    assert "data" in fig and "layout" in fig
    trace = _trace(fig)
    assert trace["type"] == "scatter"
    assert trace["mode"] == "lines+markers"
    assert list(trace["x"]) == [1.5, 4.5, 7.5]
    assert list(trace["y"]) == [3.0, 2.0, 1.0]
    assert _title(fig) == "Frequency Polygon"
    assert fig["layout"]["xaxis"]["title"]["text"] == "Values"
    assert fig["layout"]["yaxis"]["title"]["text"] == "Frequencies"


def test_make_figure_ogive(generator, sample, boundaries) -> None:
    state = ChartState(boundaries=boundaries, chart_type=ChartType.OGIVE)
    fig = generator.make_figure(sample, state)
    trace = _trace(fig)
    assert trace["mode"] == "lines+markers"
    assert list(trace["x"]) == [1.0, 3.0, 6.0, 9.0]
    assert list(trace["y"]) == [0.0, 3.0, 5.0, 6.0]
    assert _title(fig) == "Ogive"


def test_make_figure_relative(generator, sample, boundaries) -> None:
    state = ChartState(boundaries=boundaries, relative=True)
    trace = _trace(generator.make_figure(sample, state))
    assert list(trace["y"]) == pytest.approx([0.5, 1 / 3, 1 / 6])


def test_make_figure_labels_and_title(generator, sample, boundaries) -> None:
    state = ChartState(boundaries=boundaries, xlab="Age", ylab="Passengers", title="Titanic")
    fig = generator.make_figure(sample, state)
    assert _title(fig) == "Titanic"
    assert fig["layout"]["xaxis"]["title"]["text"] == "Age"
    assert fig["layout"]["yaxis"]["title"]["text"] == "Passengers"


def test_make_figure_notes_unclassified_values(generator, boundaries) -> None:
    fig = generator.make_figure([1, 2, -5, 50], ChartState(boundaries=boundaries))
    assert _title(fig).startswith("Frequency Polygon")
    assert "2 of 4 value(s) not classified" in _title(fig)


def test_make_figure_unclassified_note_can_be_hidden(generator, boundaries) -> None:
    state = ChartState(boundaries=boundaries, show_unclassified=False)
    fig = generator.make_figure([1, 2, -5, 50], state)
    assert _title(fig) == "Frequency Polygon"


@pytest.mark.parametrize("style, mode", [("lines", "lines"), ("points", "markers")])
def test_make_figure_styles(generator, sample, boundaries, style, mode) -> None:
    state = ChartState(boundaries=boundaries, style=style)
    assert _trace(generator.make_figure(sample, state))["mode"] == mode


def test_make_figure_unknown_style_raises(generator, sample, boundaries) -> None:
    state = ChartState(boundaries=boundaries, style="bars")
    with pytest.raises(ValueError):
        generator.make_figure(sample, state)


def test_make_figure_dark_and_light_theme(generator, sample, boundaries) -> None:
    light = generator.make_figure(sample, ChartState(boundaries=boundaries))
    dark = generator.make_figure(sample, ChartState(boundaries=boundaries, theme="dark"))
    assert light["layout"]["paper_bgcolor"] == "#ffffff"
    assert dark["layout"]["paper_bgcolor"] == "#000000"
    assert light["layout"]["xaxis"]["gridcolor"] == "#cccccc"
    assert dark["layout"]["yaxis"]["gridcolor"] == "rgba(255,255,255,0.2)"


def test_make_figure_propagates_core_errors(generator, boundaries) -> None:
    with pytest.raises(EmptyDatasetError):
        generator.make_figure([], ChartState(boundaries=boundaries))
    with pytest.raises(InvalidBoundariesError):
        generator.make_figure([1, 2], ChartState(boundaries=[5, 3, 1]))
    with pytest.raises(MissingBoundariesError):
        generator.make_figure([1, 2, 3], ChartState(boundaries=None, chart_type=ChartType.OGIVE))


def test_make_series_follows_chart_type(generator, sample, boundaries) -> None:
    poly = generator.make_series(sample, ChartState(boundaries=boundaries))
    og = generator.make_series(sample, ChartState(boundaries=boundaries, chart_type=ChartType.OGIVE))
    assert isinstance(poly, PolygonSeries)
    assert isinstance(og, OgiveSeries)
    assert len(og) == len(poly) + 1
