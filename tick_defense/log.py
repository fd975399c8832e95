"""Loguru wiring. The package logger stays silent until configured."""
from __future__ import annotations

import sys
from typing import Any, TextIO

from loguru import logger

from tick_defense.types import ConfigError

LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")

_FORMAT = "<green>{time:HH:mm:ss.SSS}</green> | <level>{level: <7}</level> | {message}"

# Handler installed by the last configure_logging call.
_handler_id: int | None = None


def configure_logging(level: str = "INFO", sink: TextIO | Any = None) -> int:
    """Enable tick_defense logging to *sink* (stderr by default). Returns the handler id.

    Calling again replaces the handler added by the previous call; handlers
    installed by the host application are left alone.
    """
    global _handler_id
    level = level.upper()
    if level not in LOG_LEVELS:
        raise ConfigError(f"Unknown log level {level!r}")
    if _handler_id is not None:
        try:
            logger.remove(_handler_id)
        except ValueError:
            pass  # already removed by the host
    logger.enable("tick_defense")
    _handler_id = logger.add(
        sink if sink is not None else sys.stderr,
        level=level,
        format=_FORMAT,
        filter="tick_defense",
    )
    return _handler_id
