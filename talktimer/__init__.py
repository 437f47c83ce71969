"""TalkTimer: a countdown clock for keeping presentations on time."""

__version__ = "0.1.0"
