"""Visual theme constants and QSS styles for the Ultima viewer."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor


@dataclass(frozen=True)
class BoardTheme:
    """Colour scheme for the board and pieces."""

    light_square: QColor
    dark_square: QColor
    highlight_from: QColor  # selected piece origin
    highlight_to: QColor  # quiet destinations
    highlight_capture: QColor  # destinations that capture
    last_move: QColor  # last move origin / destination
    coord_light: QColor  # coordinate text on dark squares
    coord_dark: QColor  # coordinate text on light squares
    white_piece: QColor
    black_piece: QColor

    @classmethod
    def default(cls) -> BoardTheme:
        return cls(
            light_square=QColor(240, 217, 181),  # tan
            dark_square=QColor(181, 136, 99),  # brown
            highlight_from=QColor(255, 255, 0, 100),  # yellow transparent
            highlight_to=QColor(0, 0, 0, 40),  # dark overlay
            highlight_capture=QColor(255, 0, 0, 110),  # red transparent
            last_move=QColor(155, 199, 0, 105),  # green
            coord_light=QColor(181, 136, 99),
            coord_dark=QColor(240, 217, 181),
            white_piece=QColor(250, 250, 245),
            black_piece=QColor(40, 40, 40),
        )

    @classmethod
    def blue(cls) -> BoardTheme:
        return cls(
            light_square=QColor(222, 227, 230),
            dark_square=QColor(140, 162, 173),
            highlight_from=QColor(255, 255, 0, 100),
            highlight_to=QColor(0, 0, 0, 40),
            highlight_capture=QColor(255, 0, 0, 110),
            last_move=QColor(155, 199, 0, 105),
            coord_light=QColor(140, 162, 173),
            coord_dark=QColor(222, 227, 230),
            white_piece=QColor(250, 250, 245),
            black_piece=QColor(40, 40, 40),
        )


THEMES: dict[str, BoardTheme] = {
    "Classic": BoardTheme.default(),
    "Blue": BoardTheme.blue(),
}


# ── Application-wide QSS ────────────────────────────────────────────────────

APP_STYLE = """
QMainWindow {
    background: #2b2b2b;
}

QLabel {
    color: #e0e0e0;
    font-family: "Helvetica Neue", sans-serif;
}

QStatusBar {
    color: #e0e0e0;
}

QMenuBar {
    background: #2b2b2b;
    color: #e0e0e0;
}
QMenuBar::item:selected {
    background: #3c3c3c;
}
QMenu {
    background: #2b2b2b;
    color: #e0e0e0;
    border: 1px solid #3c3c3c;
}
QMenu::item:selected {
    background: #264f78;
}
"""
