# core/logging_config.py

"""Logging configuration helpers for the roster tool."""

from __future__ import annotations

import logging
import os
from logging import Logger

from core.constants import DEFAULT_LOG_LEVEL, LOG_LEVEL_ENV_VAR


def resolve_log_level(level: str | int | None = None) -> int:
    """
    Resolves the effective log level.

    An explicit `level` wins over the `ROSTER_LOG_LEVEL` environment variable, which
    wins over `DEFAULT_LOG_LEVEL`. Unknown level names fall back to the default.
    """
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV_VAR)

    if level is None or level == "":
        return DEFAULT_LOG_LEVEL

    if isinstance(level, int):
        return level

    resolved = logging.getLevelName(level.strip().upper())
    return resolved if isinstance(resolved, int) else DEFAULT_LOG_LEVEL


def configure_logging(level: str | int | None = None) -> Logger:
    """Configure basic logging for the application and return the package logger."""
    logging.basicConfig(
        level=resolve_log_level(level),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    return logging.getLogger("roster")
