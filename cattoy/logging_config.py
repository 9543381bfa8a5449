"""Logging setup shared by the windowed and headless entry points."""

from __future__ import annotations

import logging
import os
from typing import Iterable

LOG_LEVEL_ENV = "CATTOY_LOG_LEVEL"
DEFAULT_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
DEFAULT_DATEFMT = "%H:%M:%S"


def resolve_level(level: str | None = None) -> str:
    """Pick the level name: explicit argument, then ``CATTOY_LOG_LEVEL``, then INFO."""
    raw_level = level if level is not None else os.getenv(LOG_LEVEL_ENV)
    return (raw_level or "INFO").upper()


def configure_logging(
    *,
    level: str | None = None,
    format: str = DEFAULT_FORMAT,
    datefmt: str = DEFAULT_DATEFMT,
    extra_loggers: Iterable[str] | None = None,
) -> logging.Logger:
    """Route simulation and host logs to the root handler.

    Args:
        level: Level name such as ``"DEBUG"``. ``None`` defers to
            ``CATTOY_LOG_LEVEL``.
        format: Record format for the root handler.
        datefmt: Timestamp format; frames are short-lived so the time of day is enough.
        extra_loggers: Host loggers (``screensaver``, ``rendering``) that should
            follow the same level as the ``cattoy`` core.

    Returns:
        The ``cattoy`` package logger.
    """
    resolved_level = resolve_level(level)
    logging.basicConfig(level=resolved_level, format=format, datefmt=datefmt)

    core_logger = logging.getLogger("cattoy")
    core_logger.setLevel(resolved_level)

    for logger_name in extra_loggers or ():
        logging.getLogger(logger_name).setLevel(resolved_level)

    core_logger.debug("Logging configured at %s", resolved_level)
    return core_logger
