"""Audio package."""

from .beep import Beeper, generate_beep

__all__ = ["Beeper", "generate_beep"]
