"""Timer package."""

from .engine import TimerEngine, TimerState, InvalidDurationError
from .readout import Readout, build_readout, color_for, format_remaining

__all__ = [
    "TimerEngine",
    "TimerState",
    "InvalidDurationError",
    "Readout",
    "build_readout",
    "color_for",
    "format_remaining",
]
