"""BoardView: scales the Ultima board scene to its widget."""

from __future__ import annotations

from PyQt6.QtCore import QSize, Qt, pyqtSignal
from PyQt6.QtGui import QResizeEvent, QShowEvent
from PyQt6.QtWidgets import QGraphicsView, QSizePolicy, QWidget

from ultima.core.move import Move
from ultima.core.types import BOARD_SIZE
from ultima.ui.board.board_scene import BoardScene
from ultima.ui.settings import AppSettings
from ultima.ui.styles.theme import THEMES, BoardTheme

# Smallest on-screen tile before the view stops shrinking.
_MIN_TILE_PX = 40


class BoardView(QGraphicsView):
    """Shows a :class:`BoardScene` and keeps the whole board in view.

    Signals:
        move_made(Move): Re-emitted from the scene.
    """

    move_made = pyqtSignal(Move)

    def __init__(
        self, settings: AppSettings | None = None, parent: QWidget | None = None
    ) -> None:
        scene = BoardScene()
        super().__init__(scene, parent)
        self._scene = scene

        for policy in (self.setHorizontalScrollBarPolicy, self.setVerticalScrollBarPolicy):
            policy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        side = _MIN_TILE_PX * BOARD_SIZE
        self.setMinimumSize(side, side)

        scene.move_made.connect(self.move_made)
        if settings is not None:
            self.apply_settings(settings)

    @property
    def board_scene(self) -> BoardScene:
        return self._scene

    def apply_settings(self, settings: AppSettings) -> None:
        """Push theme and overlay toggles down to the scene."""
        self._scene.set_theme(THEMES.get(settings.board_theme, BoardTheme.default()))
        self._scene.set_show_coordinates(settings.show_coordinates)
        self._scene.set_show_legal_moves(settings.show_legal_moves)

    def sizeHint(self) -> QSize:
        side = BoardScene.TILE * BOARD_SIZE
        return QSize(side, side)

    def _fit_board(self) -> None:
        self.fitInView(self._scene.sceneRect(), Qt.AspectRatioMode.KeepAspectRatio)

    def resizeEvent(self, event: QResizeEvent | None) -> None:
        super().resizeEvent(event)
        self._fit_board()

    def showEvent(self, event: QShowEvent | None) -> None:
        super().showEvent(event)
        self._fit_board()
