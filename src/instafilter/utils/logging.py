"""Logging helpers for Instafilter."""

from __future__ import annotations

import logging
from typing import Optional

_LOGGER: Optional[logging.Logger] = None

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(level: int | str | None = None) -> logging.Logger:
    """Return the package logger, installing a stream handler on first use.

    Module loggers created with ``logging.getLogger(__name__)`` propagate to
    this logger, so configuring it once controls the whole application.
    """

    global _LOGGER
    if _LOGGER is None:
        _LOGGER = logging.getLogger("instafilter")
        if not _LOGGER.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(logging.Formatter(LOG_FORMAT))
            _LOGGER.addHandler(handler)
        _LOGGER.setLevel(logging.INFO)
    if level is not None:
        _LOGGER.setLevel(_coerce_level(level))
    return _LOGGER


def _coerce_level(level: int | str) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).strip().upper())
    # ``getLevelName`` returns a "Level X" string for unknown names.
    return resolved if isinstance(resolved, int) else logging.INFO
