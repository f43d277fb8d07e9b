"""Chart state for frequency polygon and ogive figures.

This module defines the ChartType enum and ChartState dataclass used to
serialize and manage chart configuration.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from freqdist.errors import MissingBoundariesError

# Style tag -> Plotly scatter mode.
STYLE_MODES = {
    "points-and-lines": "lines+markers",
    "lines": "lines",
    "points": "markers",
}

DEFAULT_STYLE = "points-and-lines"


class ChartType(Enum):
    """Enumeration of available chart types."""
    FREQUENCY_POLYGON = "frequency_polygon"
    OGIVE = "ogive"


DEFAULT_TITLES = {
    ChartType.FREQUENCY_POLYGON: "Frequency Polygon",
    ChartType.OGIVE: "Ogive",
}


@dataclass
class ChartState:
    """Configuration state for a single chart.

    Holds the bin boundaries, the chart kind, the frequency mode and the
    labels passed to the rendering collaborator.
    """
    boundaries: list[float]
    chart_type: ChartType = ChartType.FREQUENCY_POLYGON
    relative: bool = False             # proportions instead of counts
    xlab: str = "Values"
    ylab: str = "Frequencies"
    title: Optional[str] = None        # None -> DEFAULT_TITLES[chart_type]
    style: str = DEFAULT_STYLE         # key of STYLE_MODES
    theme: str = "light"               # "light" or "dark"
    show_unclassified: bool = True     # note excluded values under the title

    def resolved_title(self) -> str:
        """Title to display: the explicit title or the chart type default."""
        if self.title:
            return self.title
        return DEFAULT_TITLES[self.chart_type]

    def to_dict(self) -> dict[str, Any]:
        """Serialize ChartState to a JSON-compatible dictionary."""
        return {
            "boundaries": [float(b) for b in self.boundaries],
            "chart_type": self.chart_type.value,
            "relative": self.relative,
            "xlab": self.xlab,
            "ylab": self.ylab,
            "title": self.title,
            "style": self.style,
            "theme": self.theme,
            "show_unclassified": self.show_unclassified,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ChartState":
        """Deserialize ChartState from dictionary.

        Args:
            data: Dictionary containing ChartState fields.

        Returns:
            ChartState instance created from dictionary data.

        Raises:
            MissingBoundariesError: If data has no "boundaries".
            ValueError: If chart_type or style is not recognized.
        """
        boundaries = data.get("boundaries")
        if boundaries is None:
            raise MissingBoundariesError()
        chart_type = ChartType(data.get("chart_type", ChartType.FREQUENCY_POLYGON.value))
        style = str(data.get("style", DEFAULT_STYLE))
        if style not in STYLE_MODES:
            raise ValueError(
                f"Unknown chart style {style!r}; expected one of {sorted(STYLE_MODES)}"
            )
        return cls(
            boundaries=[float(b) for b in boundaries],
            chart_type=chart_type,
            relative=bool(data.get("relative", False)),
            xlab=str(data.get("xlab", "Values")),
            ylab=str(data.get("ylab", "Frequencies")),
            title=data.get("title"),  # Can be None
            style=style,
            theme=str(data.get("theme", "light")),
            show_unclassified=bool(data.get("show_unclassified", True)),
        )
