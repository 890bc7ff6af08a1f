"""Start-up of the Ultima board viewer."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

from ultima import __version__
from ultima.ui.settings import AppSettings

if TYPE_CHECKING:
    from PyQt6.QtWidgets import QApplication

_LOGGER = logging.getLogger(__name__)

APP_NAME = "Ultima"


def _configure_application(app: QApplication) -> None:
    from ultima.ui.styles.theme import APP_STYLE

    app.setApplicationName(APP_NAME)
    app.setApplicationVersion(__version__)
    app.setStyle("Fusion")
    app.setStyleSheet(APP_STYLE)


def run_application(
    argv: list[str] | None = None, settings: AppSettings | None = None
) -> int:
    """Open the viewer on the starting position and block until it closes."""
    from PyQt6.QtWidgets import QApplication

    from ultima.ui.main_window import MainWindow

    app = QApplication.instance() or QApplication(sys.argv if argv is None else argv)
    _configure_application(app)

    settings = settings or AppSettings()
    window = MainWindow(settings)
    window.show()
    _LOGGER.info("%s %s viewer started, theme %s", APP_NAME, __version__, settings.board_theme)
    return app.exec()
