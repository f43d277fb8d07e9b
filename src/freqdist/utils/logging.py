"""
Logging for freqdist.

Everything logs under the "freqdist" logger, which has a NullHandler attached in
freqdist/__init__.py, so nothing is printed unless the host application (or
configure_logging()) adds a handler.

What gets logged
----------------
- algorithms.binning.classify: WARNING with the count of values that fall
  outside the boundaries or are non-finite; DEBUG with the bin counts.
- algorithms.aggregate: DEBUG with the number of points in each series.
- figure_generator.FigureGenerator.make_figure: INFO with chart type, relative
  mode and bin count once the series is computed.

Only scripts such as examples/distribution_demo.py call configure_logging().
Its level falls back to the FREQDIST_LOG_LEVEL env var, then INFO. Output goes
to stderr; freqdist never writes log files.

    from freqdist.utils.logging import configure_logging, get_logger
    configure_logging(level="DEBUG")
    logger = get_logger(__name__)
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Optional, Union

LOGGER_NAME = "freqdist"

# Environment variable consulted when configure_logging() gets no level
LOG_LEVEL_ENV = "FREQDIST_LOG_LEVEL"

DEFAULT_FMT = "%(asctime)s [%(levelname)s] %(name)s:%(lineno)d:%(funcName)s: %(message)s"
DEFAULT_DATEFMT = "%Y-%m-%d %H:%M:%S"


def configure_logging(
    level: Optional[Union[str, int]] = None,
    *,
    fmt: Optional[str] = None,
    datefmt: Optional[str] = None,
    force: bool = False,
) -> None:
    """
    Configure logging for the freqdist logger only (never root).

    Parameters
    ----------
    level:
        Logging level (e.g. "DEBUG", "INFO"). Defaults to the FREQDIST_LOG_LEVEL
        env var, or "INFO" if unset.
    fmt:
        Log message format. Defaults to DEFAULT_FMT.
    datefmt:
        Date format. Defaults to "%Y-%m-%d %H:%M:%S".
    force:
        If True, remove existing handlers before adding a new one. If False,
        do nothing when a stderr StreamHandler is already attached.
    """
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV, "INFO")
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    formatter = logging.Formatter(fmt=fmt or DEFAULT_FMT, datefmt=datefmt or DEFAULT_DATEFMT)

    if force:
        for h in logger.handlers[:]:
            h.close()
            logger.removeHandler(h)
    else:
        for h in logger.handlers:
            if isinstance(h, logging.StreamHandler) and h.stream is sys.stderr:
                return

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(level)
    console.setFormatter(formatter)
    logger.addHandler(console)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger by name; the package logger 'freqdist' when name is None.

    Use like:
        logger = get_logger(__name__)
        logger.info("Hello")
    """
    if name is None:
        name = LOGGER_NAME
    return logging.getLogger(name)
