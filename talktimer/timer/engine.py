"""Countdown state machine for TalkTimer.

States
------
IDLE      Full duration on the clock, waiting for the speaker.
RUNNING   Counting down, one tick per second.
PAUSED    Frozen mid-countdown (pause or stop).
EXPIRED   Reached zero.  Start stays disabled until reset.

Transitions
-----------
IDLE → RUNNING              (start)
PAUSED → RUNNING            (start)
RUNNING → PAUSED            (pause / stop)
RUNNING → EXPIRED           (last tick)
PAUSED | EXPIRED → IDLE     (reset)
RUNNING → RUNNING           (reset, keeps counting from the top)
"""

from __future__ import annotations

from enum import Enum

from loguru import logger
from PyQt6.QtCore import QObject, QTimer, pyqtSignal

from ..settings import TICK_INTERVAL_MS
from .readout import Readout, build_readout


class InvalidDurationError(ValueError):
    """Raised when a timer is built with a non-positive duration."""


class TimerState(Enum):
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"
    EXPIRED = "expired"


class TimerEngine(QObject):
    """Qt-based countdown with start/pause/stop/reset controls.

    The engine owns its ``QTimer`` outright; nothing else starts or
    stops it.

    Signals
    -------
    tick(remaining_seconds: int)
        Emitted once per second while running.
    state_changed(new_state: TimerState)
        Emitted on every state transition.
    display_changed(readout: Readout)
        Emitted after every tick, transition, and reset.
    beep()
        Emitted once per countdown, on the tick that leaves a tenth of
        the total on the clock.
    """

    tick = pyqtSignal(int)
    state_changed = pyqtSignal(object)
    display_changed = pyqtSignal(object)
    beep = pyqtSignal()

    def __init__(self, seconds: int, parent: QObject | None = None) -> None:
        super().__init__(parent)
        if isinstance(seconds, bool) or not isinstance(seconds, int):
            raise InvalidDurationError(
                f"timer duration must be an integer, got {seconds!r}"
            )
        if seconds < 1:
            raise InvalidDurationError(
                f"timer must begin with a positive value, got {seconds}"
            )

        self._total: int = seconds
        self._remaining: int = seconds
        self._state: TimerState = TimerState.IDLE

        self._qt_timer = QTimer(self)
        self._qt_timer.setInterval(TICK_INTERVAL_MS)
        self._qt_timer.timeout.connect(self._on_tick)

    # ── properties ────────────────────────────────────────────────────────

    @property
    def total(self) -> int:
        return self._total

    @property
    def remaining(self) -> int:
        """Seconds left on the clock."""
        return self._remaining

    @property
    def state(self) -> TimerState:
        return self._state

    @property
    def is_running(self) -> bool:
        return self._state == TimerState.RUNNING

    @property
    def is_expired(self) -> bool:
        return self._state == TimerState.EXPIRED

    @property
    def completion(self) -> float:
        """0.0 → 1.0 progress through the countdown."""
        return (self._total - self._remaining) / self._total

    @property
    def can_start(self) -> bool:
        return not self.is_running and self._remaining > 0

    @property
    def can_stop(self) -> bool:
        return self.is_running

    @property
    def readout(self) -> Readout:
        return build_readout(self._total, self._remaining)

    # ── controls ──────────────────────────────────────────────────────────

    def start(self) -> None:
        """Begin or continue counting down.  No-op once expired."""
        if not self.can_start:
            return
        self._set_state(TimerState.RUNNING)
        self._qt_timer.start()

    def pause(self) -> None:
        """Freeze the countdown without touching ``remaining``."""
        if not self.is_running:
            return
        self._qt_timer.stop()
        self._set_state(TimerState.PAUSED)

    def stop(self) -> None:
        """Same as pause; does nothing unless the clock is running."""
        if not self.can_stop:
            return
        self.pause()

    def toggle(self) -> None:
        if self.is_running:
            self.pause()
        else:
            self.start()

    def reset(self) -> None:
        """Put the full duration back on the clock.

        A running countdown keeps running from the top; any other state
        returns to IDLE, which re-enables start after expiry.
        """
        self._remaining = self._total
        if self.is_running:
            logger.debug("reset while running, restarting from {}s", self._total)
            self.display_changed.emit(self.readout)
        else:
            self._set_state(TimerState.IDLE)

    # ── internal ──────────────────────────────────────────────────────────

    def _on_tick(self) -> None:
        self._remaining = max(0, self._remaining - 1)
        self.tick.emit(self._remaining)

        readout = build_readout(self._total, self._remaining, ticked=True)
        if readout.beep:
            logger.info("{} left, sounding warning", readout.text)
            self.beep.emit()

        if self._remaining == 0:
            self._qt_timer.stop()
            logger.info("countdown of {}s expired", self._total)
            self._set_state(TimerState.EXPIRED)
        else:
            self.display_changed.emit(readout)

    def _set_state(self, new_state: TimerState) -> None:
        logger.debug("{} → {}", self._state.value, new_state.value)
        self._state = new_state
        self.state_changed.emit(new_state)
        self.display_changed.emit(self.readout)
