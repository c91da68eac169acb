"""Project-wide constants and configuration."""

from __future__ import annotations

import logging
import os

_DEFAULT_LOG_LEVEL = "INFO"


def resolve_log_level(value: str | None) -> str:
    """Normalise a log level name, falling back to the default.

    Args:
        value: Level name from the environment, or None when unset.

    Returns:
        The uppercased level name if logging knows it, else ``"INFO"``.
    """
    level = (value or _DEFAULT_LOG_LEVEL).strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        return _DEFAULT_LOG_LEVEL
    return level


LOG_LEVEL: str = resolve_log_level(os.environ.get("LOG_LEVEL"))
