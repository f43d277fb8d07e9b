"""Binning and aggregation algorithms.

Pure numpy/pandas implementations; nothing here imports Plotly or a UI toolkit.
"""

from freqdist.algorithms.aggregate import (
    OgiveSeries,
    PolygonSeries,
    frequency_table,
    ogive,
    ogive_from_table,
    polygon,
    polygon_from_table,
)
from freqdist.algorithms.binning import (
    FrequencyTable,
    classify,
    equal_width_boundaries,
    sturges_bins,
)

__all__ = [
    "FrequencyTable",
    "OgiveSeries",
    "PolygonSeries",
    "classify",
    "equal_width_boundaries",
    "frequency_table",
    "ogive",
    "ogive_from_table",
    "polygon",
    "polygon_from_table",
    "sturges_bins",
]
