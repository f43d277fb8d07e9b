"""Exceptions raised by freqdist.

All of them subclass ValueError so callers that already guard input
validation with ``except ValueError`` keep working.
"""

from __future__ import annotations


class FreqDistError(ValueError):
    """Base class for invalid inputs to the binning and aggregation functions."""


class MissingBoundariesError(FreqDistError):
    """Raised when no bin boundaries were supplied."""

    def __init__(self, message: str = "No boundaries to categorize the data.") -> None:
        super().__init__(message)


class InvalidBoundariesError(FreqDistError):
    """Raised when boundaries are too few, non-finite or not strictly ascending."""


class EmptyDatasetError(FreqDistError):
    """Raised when the sample has zero observations."""

    def __init__(self, message: str = "Sample has no observations.") -> None:
        super().__init__(message)
