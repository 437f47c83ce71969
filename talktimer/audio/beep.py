"""The near-expiry warning tone, synthesized with numpy and played via
QSoundEffect.

The WAV is generated once and cached to disk; if the platform cannot
load it, playback falls back to the system beep.
"""

from __future__ import annotations

import io
import wave
from pathlib import Path

import numpy as np

from loguru import logger
from PyQt6.QtCore import QObject, QUrl
from PyQt6.QtMultimedia import QSoundEffect
from PyQt6.QtWidgets import QApplication


# ── paths ────────────────────────────────────────────────────────────────

SOUNDS_DIR = Path.home() / ".cache" / "talktimer" / "sounds"
BEEP_FILENAME = "warning_beep.wav"

SAMPLE_RATE = 44100
BEEP_FREQ = 880.0  # A5
BEEP_SECONDS = 0.25


# ═══════════════════════════════════════════════════════════════════════════
#  WAV SYNTHESIS
# ═══════════════════════════════════════════════════════════════════════════


def _envelope(length: int, attack: int = 220, release: int = 2200) -> np.ndarray:
    """Linear fade in/out (durations in samples) to avoid clicks."""
    env = np.ones(length, dtype=np.float64)
    a = min(attack, length)
    if a > 0:
        env[:a] = np.linspace(0.0, 1.0, a)
    r = min(release, length - a)
    if r > 0:
        env[length - r:] = np.linspace(1.0, 0.0, r)
    return env


def _sine(freq: float, duration_s: float) -> np.ndarray:
    t = np.linspace(0, duration_s, int(SAMPLE_RATE * duration_s), endpoint=False)
    return np.sin(2 * np.pi * freq * t)


def _to_wav_bytes(samples: np.ndarray) -> bytes:
    """Convert a float64 array (-1..1) to 16-bit mono PCM WAV bytes."""
    samples = np.clip(samples, -1.0, 1.0)
    int_samples = (samples * 32767).astype(np.int16)

    buf = io.BytesIO()
    with wave.open(buf, "wb") as wf:
        wf.setnchannels(1)
        wf.setsampwidth(2)
        wf.setframerate(SAMPLE_RATE)
        wf.writeframes(int_samples.tobytes())
    return buf.getvalue()


def generate_beep() -> bytes:
    """A single short A5 tone with a soft tail."""
    tone = _sine(BEEP_FREQ, BEEP_SECONDS) * 0.6
    tone = tone * _envelope(len(tone))
    tail = np.zeros(int(SAMPLE_RATE * 0.05))
    return _to_wav_bytes(np.concatenate([tone, tail]))


# ═══════════════════════════════════════════════════════════════════════════
#  PLAYBACK
# ═══════════════════════════════════════════════════════════════════════════


class Beeper(QObject):
    """Plays the warning tone.

    Usage::

        beeper = Beeper(parent=self)
        engine.beep.connect(beeper.play)
    """

    def __init__(
        self,
        parent: QObject | None = None,
        *,
        sounds_dir: Path | None = None,
        enabled: bool = True,
    ) -> None:
        super().__init__(parent)
        self._enabled = enabled
        self._sounds_dir = sounds_dir or SOUNDS_DIR
        self._effect: QSoundEffect | None = None
        self.play_count = 0

        self._load_effect(self._ensure_wav_file())

    @property
    def enabled(self) -> bool:
        return self._enabled

    def set_enabled(self, enabled: bool) -> None:
        self._enabled = enabled

    @property
    def wav_path(self) -> Path:
        return self._sounds_dir / BEEP_FILENAME

    def play(self) -> None:
        """Sound the warning.  No-op when disabled."""
        if not self._enabled:
            return
        self.play_count += 1
        if self._effect is not None and self._effect.status() != QSoundEffect.Status.Error:
            self._effect.play()
        else:
            logger.warning("warning tone unavailable, using system beep")
            QApplication.beep()

    # ── internal ──────────────────────────────────────────────────────

    def _ensure_wav_file(self) -> Path | None:
        path = self.wav_path
        if path.exists():
            return path
        try:
            self._sounds_dir.mkdir(parents=True, exist_ok=True)
            path.write_bytes(generate_beep())
        except OSError as exc:
            logger.warning("could not cache warning tone at {}: {}", path, exc)
            return None
        return path

    def _load_effect(self, path: Path | None) -> None:
        if path is None:
            return
        effect = QSoundEffect(self)
        effect.setSource(QUrl.fromLocalFile(str(path)))
        self._effect = effect
