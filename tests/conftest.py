"""Shared pytest fixtures for TalkTimer tests."""

import os
import sys

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtWidgets import QApplication

from talktimer.audio.beep import Beeper
from talktimer.timer.engine import TimerEngine


@pytest.fixture(scope="session")
def qapp():
    """A single QApplication instance shared across the entire test run."""
    app = QApplication.instance() or QApplication(sys.argv)
    yield app


@pytest.fixture
def engine(qapp):
    """Fresh TimerEngine with ten minutes on the clock."""
    return TimerEngine(600)


@pytest.fixture
def short_engine(qapp):
    """Fresh TimerEngine with a 20-second countdown."""
    return TimerEngine(20)


@pytest.fixture
def beeper(qapp, tmp_path):
    """Beeper caching its WAV under a throwaway directory."""
    return Beeper(sounds_dir=tmp_path / "sounds")
