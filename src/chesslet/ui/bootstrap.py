"""Qt application bootstrap helpers."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

from chesslet.ui.settings import AppSettings

if TYPE_CHECKING:
    from PyQt6.QtWidgets import QApplication

_LOGGER = logging.getLogger(__name__)


def configure_logging(settings: AppSettings) -> None:
    """Route log records to stderr at the configured level."""
    level = getattr(logging, settings.log_level.upper(), None)
    logging.basicConfig(
        level=level if isinstance(level, int) else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if not isinstance(level, int):
        _LOGGER.warning("Unknown log level %r, using WARNING", settings.log_level)


def _configure_application(app: QApplication) -> None:
    """Apply app-wide settings and theme."""
    from chesslet.ui.styles.theme import APP_STYLE

    app.setApplicationName("chesslet")
    app.setStyle("Fusion")
    app.setStyleSheet(APP_STYLE)


def run_application(
    argv: list[str] | None = None, settings: AppSettings | None = None
) -> int:
    """Create and run the main Qt application."""
    from PyQt6.QtWidgets import QApplication

    from chesslet.ui.main_window import MainWindow

    settings = settings if settings is not None else AppSettings()
    configure_logging(settings)

    app = QApplication(sys.argv if argv is None else argv)
    _configure_application(app)

    window = MainWindow(settings)
    window.show()

    return app.exec()
