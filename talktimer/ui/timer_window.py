"""The timer window: a large colored clock over a row of controls.

Layout (top → bottom):
    - "Time Remaining" frame holding the clock label
    - Button row: Start/Pause toggle, Stop, Reset
"""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QGroupBox,
    QLabel, QPushButton, QSizePolicy,
)

from ..audio.beep import Beeper
from ..timer.engine import TimerEngine, TimerState
from ..timer.readout import Readout
from .styles import CLOCK_FONT_FAMILY, CLOCK_FONT_POINT_SIZE, clock_label_qss


TOGGLE_LABELS: dict[TimerState, str] = {
    TimerState.IDLE:    "Start Timer",
    TimerState.RUNNING: "Pause",
    TimerState.PAUSED:  "Restart",
    TimerState.EXPIRED: "Start",
}


class TimerWindow(QWidget):
    """Top-level timer window.  Reads the engine, never mutates it
    except through its public controls."""

    def __init__(
        self,
        engine: TimerEngine,
        beeper: Beeper | None = None,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._engine = engine
        self._beeper = beeper if beeper is not None else Beeper(parent=self)
        self._build_ui()
        self._connect_signals()
        self._refresh_display(engine.readout)
        self._update_controls(engine.state)

    def __str__(self) -> str:
        return self._clock.text()

    # ── build ─────────────────────────────────────────────────────────────

    def _build_ui(self) -> None:
        self.setWindowTitle("Timer")

        root = QVBoxLayout(self)

        frame = QGroupBox("Time Remaining", self)
        frame.setObjectName("clockFrame")
        frame_layout = QVBoxLayout(frame)
        frame_layout.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self._clock = QLabel(frame)
        self._clock.setObjectName("clockLabel")
        self._clock.setAlignment(Qt.AlignmentFlag.AlignCenter)
        font = QFont(CLOCK_FONT_FAMILY, CLOCK_FONT_POINT_SIZE)
        font.setStyleHint(QFont.StyleHint.Monospace)
        font.setBold(True)
        self._clock.setFont(font)
        self._clock.setSizePolicy(
            QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding,
        )
        frame_layout.addWidget(self._clock)
        root.addWidget(frame, stretch=1)

        btn_row = QHBoxLayout()
        btn_row.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self._toggle_btn = QPushButton(TOGGLE_LABELS[TimerState.IDLE], self)
        self._toggle_btn.setCheckable(True)

        self._stop_btn = QPushButton("Stop", self)
        self._reset_btn = QPushButton("Reset", self)

        btn_row.addWidget(self._toggle_btn)
        btn_row.addWidget(self._stop_btn)
        btn_row.addWidget(self._reset_btn)
        root.addLayout(btn_row)

    # ── signals ───────────────────────────────────────────────────────────

    def _connect_signals(self) -> None:
        self._toggle_btn.clicked.connect(self._on_toggle)
        self._stop_btn.clicked.connect(self._engine.stop)
        self._reset_btn.clicked.connect(self._on_reset)

        self._engine.display_changed.connect(self._refresh_display)
        self._engine.state_changed.connect(self._update_controls)
        self._engine.beep.connect(self._beeper.play)

    # ── slots ─────────────────────────────────────────────────────────────

    def _on_toggle(self) -> None:
        self._engine.toggle()
        # keep the check mark in step even when the engine refused
        self._toggle_btn.setChecked(self._engine.is_running)

    def _on_reset(self) -> None:
        self._engine.reset()
        self._update_controls(self._engine.state)
        # space bar on the toggle cycles the timer
        self._toggle_btn.setFocus()

    def _update_controls(self, state: TimerState) -> None:
        self._toggle_btn.setText(TOGGLE_LABELS[state])
        self._toggle_btn.setChecked(state == TimerState.RUNNING)
        self._toggle_btn.setEnabled(state != TimerState.EXPIRED)
        self._stop_btn.setEnabled(self._engine.can_stop)

    def _refresh_display(self, readout: Readout) -> None:
        self._clock.setText(readout.text)
        self._clock.setStyleSheet(clock_label_qss(readout.color_hex))
