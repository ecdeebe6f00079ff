"""Logging setup for the command line tool."""

from __future__ import annotations

import logging
import sys

LEVELS = {
    0: logging.CRITICAL,
    1: logging.ERROR,
    2: logging.WARNING,
    3: logging.INFO,
    4: logging.DEBUG,
}

MAX_LEVEL = max(LEVELS.keys())
LOGGER = logging.getLogger("npm_semver")


def setup_report(verbosity: int) -> None:
    """Send this package's log records to stderr at the level for ``verbosity``."""
    _clean_handlers(LOGGER)
    level = LEVELS[max(0, min(verbosity, MAX_LEVEL))]
    msg_format = "%(levelname)s: %(message)s"
    if level <= logging.DEBUG:
        msg_format = "[%(asctime)s] %(levelname)s [%(module)s:%(lineno)d] %(message)s"

    stream_handler = logging.StreamHandler(stream=sys.stderr)
    stream_handler.setLevel(level)
    stream_handler.setFormatter(logging.Formatter(msg_format))
    LOGGER.setLevel(level)
    LOGGER.addHandler(stream_handler)
    LOGGER.debug("setup logging to %s", logging.getLevelName(level))


def _clean_handlers(log: logging.Logger) -> None:
    for log_handler in list(log.handlers):
        log.removeHandler(log_handler)
