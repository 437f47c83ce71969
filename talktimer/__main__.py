"""Allow running TalkTimer as a module: python -m talktimer [SECONDS]."""

from __future__ import annotations

import sys

from loguru import logger
from PyQt6.QtWidgets import QApplication

from .settings import USAGE, UsageError, configure_logging, parse_args


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    try:
        settings = parse_args(args)
    except UsageError:
        print(USAGE, file=sys.stderr)
        return 2

    configure_logging(settings.log_level)

    from .audio.beep import Beeper
    from .timer.engine import TimerEngine
    from .ui.styles import apply_app_style
    from .ui.timer_window import TimerWindow

    app = QApplication([sys.argv[0], *args])
    app.setApplicationName("TalkTimer")
    apply_app_style(app)

    engine = TimerEngine(settings.seconds)
    beeper = Beeper(enabled=settings.sound_enabled)
    window = TimerWindow(engine, beeper)
    window.show()
    logger.info(
        "timer ready with {}s on the clock, sound {}",
        settings.seconds, "on" if settings.sound_enabled else "off",
    )

    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
