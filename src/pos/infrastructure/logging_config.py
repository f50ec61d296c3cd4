"""Configure application logging using the Python standard library.

One stderr handler on the ``pos`` logger, so bill output on stdout
stays clean.  The level comes from the caller, or from the
``POS_LOG_LEVEL`` environment variable when the caller has none.
"""

from __future__ import annotations

import logging
import os

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"
DEFAULT_LEVEL = "WARNING"


def configure_logging(level: int | str | None = None) -> None:
    """Install a single stream handler on the ``pos`` package logger.

    Calling this again replaces the handler rather than stacking a
    second one.
    """
    if level is None:
        level = os.environ.get("POS_LOG_LEVEL", DEFAULT_LEVEL).upper()

    logger = logging.getLogger("pos")
    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
