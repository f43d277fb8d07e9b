"""
freqdist: binned frequency distributions, frequency polygons and ogives.

This package provides:
- classify: count sample values per bin (half-open bins, inclusive final edge)
- polygon / ogive: the derived chart series, absolute or relative
- frequency_table: the distribution as a pandas DataFrame
- freqdist.figure_generator.FigureGenerator: Plotly figure dicts for the series
  (imported on its own so the core never loads Plotly)
- Logging utilities for library and application use

For logging configuration in standalone scripts/demos:
    ```python
    from freqdist.utils.logging import configure_logging
    configure_logging(level="DEBUG")
    ```
"""

import logging

from freqdist.utils.logging import configure_logging, get_logger

from freqdist.algorithms import (
    FrequencyTable,
    OgiveSeries,
    PolygonSeries,
    classify,
    equal_width_boundaries,
    frequency_table,
    ogive,
    polygon,
    sturges_bins,
)
from freqdist.chart_state import ChartState, ChartType
from freqdist.errors import (
    EmptyDatasetError,
    FreqDistError,
    InvalidBoundariesError,
    MissingBoundariesError,
)

# NullHandler so records don't reach root when no application configured logging.
_logger = logging.getLogger("freqdist")
if not _logger.handlers:
    _logger.addHandler(logging.NullHandler())

__all__ = [
    "ChartState",
    "ChartType",
    "EmptyDatasetError",
    "FreqDistError",
    "FrequencyTable",
    "InvalidBoundariesError",
    "MissingBoundariesError",
    "OgiveSeries",
    "PolygonSeries",
    "classify",
    "configure_logging",
    "equal_width_boundaries",
    "frequency_table",
    "get_logger",
    "ogive",
    "polygon",
    "sturges_bins",
]

__version__ = "0.1.0"
