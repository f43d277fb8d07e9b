"""
Binning algorithm: classify a numeric sample into boundary-defined bins.

Bin i is the half-open interval [boundaries[i], boundaries[i+1]); the last bin
is closed on the right so a value equal to the final boundary is counted.
This is the same convention as np.histogram with explicit bin edges.

Assumptions (documented):
  1. Unclassified values: values below boundaries[0], above boundaries[-1],
     and non-finite values (NaN, +/-inf) are not counted in any bin. They
     still count toward n_total, which is the denominator for relative
     frequencies.
  2. Validation happens before any counting; nothing is partially computed.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Optional

import numpy as np
import pandas as pd

from freqdist.errors import EmptyDatasetError, InvalidBoundariesError, MissingBoundariesError
from freqdist.utils.logging import get_logger

logger = get_logger(__name__)

# Columns of FrequencyTable.to_frame(), in order.
TABLE_COLUMNS = [
    "lower",
    "upper",
    "midpoint",
    "count",
    "relative",
    "cumulative",
    "cumulative_relative",
]


def _readonly(arr: np.ndarray) -> np.ndarray:
    arr.setflags(write=False)
    return arr


def _fmt_edge(value: float) -> str:
    return f"{value:g}"


# -----------------------------------------------------------------------------
# Step 1: Validate inputs
# -----------------------------------------------------------------------------


def validate_boundaries(boundaries: Any) -> np.ndarray:
    """
    Check boundaries and return them as a new float array.

    Raises:
        MissingBoundariesError: boundaries is None.
        InvalidBoundariesError: not numeric, not one-dimensional, fewer than
            two values, non-finite values, or not strictly ascending.
    """
    if boundaries is None:
        raise MissingBoundariesError()
    try:
        edges = np.array(boundaries, dtype=float)
    except (TypeError, ValueError) as e:
        raise InvalidBoundariesError(f"Boundaries must be numeric: {e}") from e

    if edges.ndim != 1:
        raise InvalidBoundariesError(
            f"Boundaries must be one-dimensional, got shape {edges.shape}"
        )
    if edges.size < 2:
        raise InvalidBoundariesError(
            f"At least 2 boundaries are required to define a bin, got {edges.size}"
        )
    if not np.all(np.isfinite(edges)):
        raise InvalidBoundariesError("Boundaries must be finite numbers")
    if np.any(np.diff(edges) <= 0):
        raise InvalidBoundariesError(
            f"Boundaries must be strictly ascending, got {edges.tolist()}"
        )
    return edges


def as_sample(sample: Any) -> np.ndarray:
    """
    Return the sample as a flat float array.

    Raises:
        EmptyDatasetError: sample is None or has zero observations.
    """
    if sample is None:
        raise EmptyDatasetError()
    values = np.asarray(sample, dtype=float).ravel()
    if values.size == 0:
        raise EmptyDatasetError()
    return values


# -----------------------------------------------------------------------------
# Step 2: Count bin occupancy
# -----------------------------------------------------------------------------


@dataclass(frozen=True, eq=False)
class FrequencyTable:
    """Occupancy count per bin for one sample and one set of boundaries.

    Attributes:
        boundaries: Bin edges (length n_bins + 1), read-only.
        counts: Number of sample values in each bin (length n_bins), read-only.
        n_total: Number of observations in the sample, classified or not.
        unclassified: Observations outside the boundaries or non-finite.
    """

    boundaries: np.ndarray
    counts: np.ndarray
    n_total: int
    unclassified: int

    @property
    def n_bins(self) -> int:
        return int(self.counts.size)

    @property
    def classified(self) -> int:
        return int(self.counts.sum())

    @property
    def midpoints(self) -> np.ndarray:
        return 0.5 * (self.boundaries[:-1] + self.boundaries[1:])

    @property
    def labels(self) -> list[str]:
        """Interval labels, e.g. ['[0, 3)', '[3, 6)', '[6, 9]']."""
        out = []
        last = self.n_bins - 1
        for i, (lo, hi) in enumerate(zip(self.boundaries[:-1], self.boundaries[1:])):
            close = "]" if i == last else ")"
            out.append(f"[{_fmt_edge(lo)}, {_fmt_edge(hi)}{close}")
        return out

    def relative(self) -> np.ndarray:
        """Counts divided by n_total (the full sample size)."""
        return self.counts / self.n_total

    def cumulative(self) -> np.ndarray:
        """Inclusive running sum of counts."""
        return np.cumsum(self.counts)

    def to_frame(self) -> pd.DataFrame:
        """
        Tabulate the distribution, one row per bin indexed by interval label.

        Returns:
            DataFrame with columns TABLE_COLUMNS.
        """
        cumulative = self.cumulative()
        table = pd.DataFrame(
            {
                "lower": self.boundaries[:-1],
                "upper": self.boundaries[1:],
                "midpoint": self.midpoints,
                "count": self.counts,
                "relative": self.relative(),
                "cumulative": cumulative,
                "cumulative_relative": cumulative / self.n_total,
            },
            index=pd.Index(self.labels, name="interval"),
            columns=TABLE_COLUMNS,
        )
        return table


def classify(sample: Any, boundaries: Any) -> FrequencyTable:
    """
    Count how many sample values fall into each bin.

    Args:
        sample: Non-empty one-dimensional numeric sample.
        boundaries: Strictly ascending bin edges, at least two.

    Returns:
        FrequencyTable with one count per bin.

    Raises:
        MissingBoundariesError, InvalidBoundariesError, EmptyDatasetError.
    """
    edges = validate_boundaries(boundaries)
    values = as_sample(sample)

    finite = values[np.isfinite(values)]
    counts, _ = np.histogram(finite, bins=edges)
    counts = counts.astype(np.int64)

    n_total = int(values.size)
    unclassified = n_total - int(counts.sum())
    if unclassified:
        logger.warning(
            f"{unclassified} of {n_total} value(s) are outside "
            f"[{_fmt_edge(edges[0])}, {_fmt_edge(edges[-1])}] or non-finite; "
            "they are excluded from the bin counts"
        )
    logger.debug(f"classify: n_total={n_total}, n_bins={counts.size}, counts={counts.tolist()}")

    return FrequencyTable(
        boundaries=_readonly(edges),
        counts=_readonly(counts),
        n_total=n_total,
        unclassified=unclassified,
    )


# -----------------------------------------------------------------------------
# Boundary helpers
# -----------------------------------------------------------------------------


def sturges_bins(n: int) -> int:
    """Number of bins by Sturges' rule, ceil(log2(n) + 1)."""
    if n < 1:
        raise ValueError(f"Sturges' rule needs at least one observation, got n={n}")
    return int(math.ceil(math.log2(n) + 1))


def equal_width_boundaries(sample: Any, n_bins: Optional[int] = None) -> np.ndarray:
    """
    Evenly spaced boundaries spanning the finite range of the sample.

    Args:
        sample: Numeric sample.
        n_bins: Number of bins. Defaults to sturges_bins() of the finite count.

    Returns:
        Array of n_bins + 1 strictly ascending boundaries. A constant sample
        is widened by 0.5 on each side, or by enough float spacing to keep
        the edges distinct at large magnitudes.

    Raises:
        EmptyDatasetError: No finite values.
        InvalidBoundariesError: The range is too narrow to split into
            n_bins distinct floats.
    """
    values = as_sample(sample)
    finite = values[np.isfinite(values)]
    if finite.size == 0:
        raise EmptyDatasetError("Sample has no finite observations.")
    if n_bins is None:
        n_bins = sturges_bins(int(finite.size))
    if n_bins < 1:
        raise ValueError(f"n_bins must be >= 1, got {n_bins}")

    lo = float(finite.min())
    hi = float(finite.max())
    if lo == hi:
        # each step must span several ulps of lo
        pad = max(0.5, abs(lo) * np.finfo(float).eps * n_bins * 4)
        lo -= pad
        hi += pad
    edges = np.linspace(lo, hi, int(n_bins) + 1)
    if np.any(np.diff(edges) <= 0):
        raise InvalidBoundariesError(
            f"Range [{lo!r}, {hi!r}] is too narrow for {n_bins} distinct bins"
        )
    return edges
