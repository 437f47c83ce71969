"""What the clock label shows for a given moment of the countdown.

The readout is a pure function of ``(total, remaining)`` so the display
can be recomputed at any time without touching the engine.

Color ramp
----------
completion 0.0   →  (0x00, 0xCC, 0x00)   green
completion 1.0   →  (0xCC, 0x00, 0x00)   red

Green falls off with the cube root of the time left, so the label stays
mostly green until late in the talk and then turns quickly.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np


COLOR_CEILING = 0xCC
BEEP_DIVISOR = 10  # beep when a tenth of the total is left


@dataclass(frozen=True)
class Readout:
    remaining: int
    total: int
    completion: float
    color: tuple[int, int, int]
    text: str
    beep: bool = False

    @property
    def color_hex(self) -> str:
        r, g, b = self.color
        return f"#{r:02X}{g:02X}{b:02X}"


def completion(total: int, remaining: int) -> float:
    """0.0 → 1.0 fraction of *total* already elapsed."""
    return (total - remaining) / total


def color_for(fraction: float) -> tuple[int, int, int]:
    red = int(fraction * COLOR_CEILING)
    green = int(np.cbrt(1.0 - fraction) * COLOR_CEILING)
    return (red, green, 0)


def format_remaining(seconds: int) -> str:
    """``MM:SS``, or ``H:MM:SS`` once there is at least an hour left."""
    minutes, secs = divmod(seconds, 60)
    hours, minutes = divmod(minutes, 60)
    if hours > 0:
        return f"{hours}:{minutes:02d}:{secs:02d}"
    return f"{minutes:02d}:{secs:02d}"


def is_beep_point(total: int, remaining: int) -> bool:
    return remaining * BEEP_DIVISOR == total


def build_readout(total: int, remaining: int, *, ticked: bool = False) -> Readout:
    """Compute the label payload.

    The beep flag is only ever set for a readout produced by a tick, so
    pausing or resetting on the beep second does not sound it again.
    """
    frac = completion(total, remaining)
    return Readout(
        remaining=remaining,
        total=total,
        completion=frac,
        color=color_for(frac),
        text=format_remaining(remaining),
        beep=ticked and is_beep_point(total, remaining),
    )
