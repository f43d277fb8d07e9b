"""Unit tests for ChartState serialization and defaults."""

import json

import pytest

from freqdist.chart_state import STYLE_MODES, ChartState, ChartType
from freqdist.errors import MissingBoundariesError


def test_chart_state_defaults():
    state = ChartState(boundaries=[0, 1, 2])
    assert state.chart_type == ChartType.FREQUENCY_POLYGON
    assert state.relative is False
    assert state.xlab == "Values"
    assert state.ylab == "Frequencies"
    assert state.style == "points-and-lines"
    assert STYLE_MODES[state.style] == "lines+markers"


@pytest.mark.parametrize(
    "chart_type, expected",
    [(ChartType.FREQUENCY_POLYGON, "Frequency Polygon"), (ChartType.OGIVE, "Ogive")],
)
def test_resolved_title_defaults_per_chart_type(chart_type, expected):
    state = ChartState(boundaries=[0, 1], chart_type=chart_type)
    assert state.resolved_title() == expected


def test_resolved_title_prefers_explicit_title():
    state = ChartState(boundaries=[0, 1], chart_type=ChartType.OGIVE, title="Ages")
    assert state.resolved_title() == "Ages"


def test_chart_state_round_trip():
    """from_dict(to_dict(state)) restores every field."""
    state = ChartState(
        boundaries=[0, 10, 20],
        chart_type=ChartType.OGIVE,
        relative=True,
        xlab="Age",
        ylab="Share",
        title="Passengers",
        style="lines",
        theme="dark",
        show_unclassified=False,
    )
    d = state.to_dict()
    assert d["chart_type"] == "ogive"
    restored = ChartState.from_dict(d)
    assert restored == state


def test_chart_state_to_dict_is_json_compatible():
    d = ChartState(boundaries=[0, 1, 2]).to_dict()
    assert json.loads(json.dumps(d)) == d


def test_chart_state_from_dict_fills_defaults():
    state = ChartState.from_dict({"boundaries": [0, 1]})
    assert state.boundaries == [0.0, 1.0]
    assert state.chart_type == ChartType.FREQUENCY_POLYGON
    assert state.title is None
    assert state.show_unclassified is True


def test_chart_state_from_dict_requires_boundaries():
    with pytest.raises(MissingBoundariesError):
        ChartState.from_dict({"chart_type": "ogive"})


def test_chart_state_from_dict_rejects_unknown_chart_type():
    with pytest.raises(ValueError):
        ChartState.from_dict({"boundaries": [0, 1], "chart_type": "pie"})


def test_chart_state_from_dict_rejects_unknown_style():
    with pytest.raises(ValueError) as exc_info:
        ChartState.from_dict({"boundaries": [0, 1], "style": "bars"})
    assert "bars" in str(exc_info.value)
