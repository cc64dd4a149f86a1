"""Logging setup for chatvault.

Log records are written as pipe-separated fields with ISO 8601
timestamps, e.g.::

    2026-10-18T12:00:00 | DEBUG    | chatvault.segmenter | Segmenting with marker strategy
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"

# Marks the handler installed here so repeated setup calls reuse it.
_HANDLER_ATTR = "_chatvault_log_handler"


def setup_logging(level: str = "INFO", stream: TextIO | None = None) -> None:
    """Configure the root logger for the CLI.

    Safe to call repeatedly: the handler installed by the first call is
    reused and only its level changes.

    Args:
        level: Logging level name such as ``"DEBUG"`` or ``"WARNING"``.
        stream: Output stream for a newly installed handler.  Defaults to
            *stderr* at call time.

    Raises:
        ValueError: If *level* is not a recognised logging level string.
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"Invalid log level: {level!r}")

    root = logging.getLogger()
    root.setLevel(numeric_level)

    existing = [h for h in root.handlers if getattr(h, _HANDLER_ATTR, False)]
    if existing:
        existing[0].setLevel(numeric_level)
        return

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setLevel(numeric_level)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT, datefmt=_DATE_FORMAT))
    setattr(handler, _HANDLER_ATTR, True)
    root.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Return the logger named *name* (usually the caller's ``__name__``)."""
    return logging.getLogger(name)
