"""UI package."""

from .timer_window import TimerWindow
from .styles import apply_app_style

__all__ = [
    "TimerWindow",
    "apply_app_style",
]
