"""
Distribution aggregation: frequency polygon and ogive series.

Both series are derived from a FrequencyTable (see binning.py):

  polygon: one point per bin, (midpoint[i], count[i]) or
           (midpoint[i], count[i] / n_total) in relative mode. Empty bins
           are kept with y = 0 so the polygon connects through them.
  ogive:   n_bins + 1 points. The first point is (min(sample), 0); point i >= 1
           is (boundaries[i], cumulative count of bins 0..i-1). In relative
           mode every cumulative value is divided by n_total, so the last
           point is classified / n_total and is below 1.0 when values were
           unclassified.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np
import pandas as pd

from freqdist.algorithms.binning import FrequencyTable, as_sample, classify, _readonly
from freqdist.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True, eq=False)
class Series:
    """Ordered (x, y) points for one chart trace."""

    x: np.ndarray
    y: np.ndarray
    relative: bool = False

    def __len__(self) -> int:
        return int(self.x.size)

    def to_pairs(self) -> list[tuple[float, float]]:
        """Points as a list of (x, y) float tuples."""
        return [(float(a), float(b)) for a, b in zip(self.x, self.y)]


@dataclass(frozen=True, eq=False)
class PolygonSeries(Series):
    """Frequency polygon points: bin midpoint vs. count or proportion."""


@dataclass(frozen=True, eq=False)
class OgiveSeries(Series):
    """Ogive points: min(sample) then each bin's upper boundary vs. cumulative frequency."""


def sample_anchor(sample: Any, boundaries: np.ndarray) -> float:
    """Smallest finite sample value, or the first boundary if there is none."""
    values = as_sample(sample)
    finite = values[np.isfinite(values)]
    if finite.size == 0:
        return float(boundaries[0])
    return float(finite.min())


def polygon_from_table(table: FrequencyTable, relative: bool = False) -> PolygonSeries:
    """Frequency polygon series for an existing FrequencyTable."""
    y = table.relative() if relative else table.counts.astype(float)
    return PolygonSeries(
        x=_readonly(np.array(table.midpoints, dtype=float)),
        y=_readonly(np.array(y, dtype=float)),
        relative=relative,
    )


def ogive_from_table(table: FrequencyTable, anchor: float, relative: bool = False) -> OgiveSeries:
    """
    Ogive series for an existing FrequencyTable.

    Args:
        table: Bin counts.
        anchor: x of the zero point, normally min(sample).
        relative: Divide cumulative counts by table.n_total.
    """
    cumulative = np.concatenate([[0], table.cumulative()]).astype(float)
    if relative:
        cumulative = cumulative / table.n_total
    x = np.concatenate([[anchor], table.boundaries[1:]]).astype(float)
    return OgiveSeries(x=_readonly(x), y=_readonly(cumulative), relative=relative)


def polygon(sample: Any, boundaries: Any, relative: bool = False) -> PolygonSeries:
    """
    Frequency polygon series for a sample.

    Args:
        sample: Non-empty numeric sample.
        boundaries: Strictly ascending bin edges, at least two.
        relative: If True, y is count / len(sample) instead of count.

    Returns:
        PolygonSeries with exactly one point per bin.
    """
    table = classify(sample, boundaries)
    series = polygon_from_table(table, relative=relative)
    logger.debug(f"polygon: {len(series)} points, relative={relative}")
    return series


def ogive(sample: Any, boundaries: Any, relative: bool = False) -> OgiveSeries:
    """
    Ogive (cumulative frequency) series for a sample.

    Args:
        sample: Non-empty numeric sample.
        boundaries: Strictly ascending bin edges, at least two.
        relative: If True, cumulative values are divided by len(sample).

    Returns:
        OgiveSeries with one more point than there are bins.
    """
    table = classify(sample, boundaries)
    anchor = sample_anchor(sample, table.boundaries)
    series = ogive_from_table(table, anchor, relative=relative)
    logger.debug(f"ogive: {len(series)} points, anchor={anchor}, relative={relative}")
    return series


def frequency_table(sample: Any, boundaries: Any) -> pd.DataFrame:
    """Frequency distribution table of a sample; see FrequencyTable.to_frame()."""
    return classify(sample, boundaries).to_frame()
