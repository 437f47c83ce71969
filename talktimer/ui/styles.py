"""Application style and QSS for TalkTimer."""

from __future__ import annotations

from loguru import logger
from PyQt6.QtWidgets import QApplication, QStyleFactory


PREFERRED_STYLE = "Fusion"

CLOCK_FONT_FAMILY = "Monospace"
CLOCK_FONT_POINT_SIZE = 96

APP_QSS = """
QGroupBox#clockFrame {
    font-weight: bold;
    margin-top: 14px;
}
QGroupBox#clockFrame::title {
    subcontrol-origin: margin;
    left: 10px;
    padding: 0 4px;
}
QPushButton {
    min-width: 88px;
    padding: 6px 14px;
}
"""


def apply_app_style(app: QApplication) -> None:
    """Switch to the preferred widget style when the platform ships it."""
    if PREFERRED_STYLE in QStyleFactory.keys():
        app.setStyle(PREFERRED_STYLE)
    else:
        logger.debug("{} style not installed, keeping {}", PREFERRED_STYLE, app.style().name())
    app.setStyleSheet(APP_QSS)


def clock_label_qss(color_hex: str) -> str:
    return f"color: {color_hex};"
