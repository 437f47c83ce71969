"""Command-line settings and logging setup.

Usage::

    settings = parse_args(sys.argv[1:])
    configure_logging(settings.log_level)
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field

from loguru import logger


DEFAULT_SECONDS = 600  # ten minutes on the clock
TICK_INTERVAL_MS = 1000
DEFAULT_LOG_LEVEL = "WARNING"
LOG_LEVEL_ENV = "TALKTIMER_LOG_LEVEL"
SOUND_ENV = "TALKTIMER_SOUND"
USAGE = "USAGE: talktimer [N>0]"


class UsageError(ValueError):
    """Raised when the command line cannot be turned into a duration."""


def env_log_level() -> str:
    return os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper()


def env_sound_enabled() -> bool:
    """Sound is on unless the variable says 0, off, false or no."""
    value = os.environ.get(SOUND_ENV, "").strip().lower()
    return value not in ("0", "off", "false", "no")


@dataclass
class Settings:
    """Everything the app needs at launch."""

    seconds: int = DEFAULT_SECONDS
    sound_enabled: bool = field(default_factory=env_sound_enabled)
    log_level: str = field(default_factory=env_log_level)


def parse_args(argv: list[str]) -> Settings:
    """Build settings from the arguments after the program name.

    Accepts nothing (default duration) or a single positive integer.
    """
    if not argv:
        return Settings()
    if len(argv) > 1:
        raise UsageError(f"expected at most one argument, got {len(argv)}")
    try:
        seconds = int(argv[0])
    except ValueError:
        raise UsageError(f"not an integer: {argv[0]!r}") from None
    if seconds < 1:
        raise UsageError(f"invalid interval: {seconds}")
    return Settings(seconds=seconds)


def configure_logging(level: str = DEFAULT_LOG_LEVEL) -> str:
    """Send log records at *level* and above to stderr.

    Unknown level names fall back to the default.  Returns the level
    actually installed.
    """
    try:
        logger.level(level)
        chosen = level
    except ValueError:
        chosen = DEFAULT_LOG_LEVEL
    logger.remove()
    logger.add(
        sys.stderr,
        level=chosen,
        format="{time:HH:mm:ss} | {level: <7} | {name}:{function} - {message}",
    )
    if chosen != level:
        logger.warning("unknown log level {!r}, using {}", level, chosen)
    return chosen
