"""PieceItem: an Ultima piece drawn as a lettered disc."""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QBrush, QCursor, QFont, QPen
from PyQt6.QtWidgets import QGraphicsEllipseItem, QGraphicsSimpleTextItem

from ultima.core.enums import Color
from ultima.core.piece import Piece
from ultima.core.types import Rankfile
from ultima.ui.styles.theme import BoardTheme


class PieceItem(QGraphicsEllipseItem):
    """A single piece on the board.

    Stores its logical *square*; the type letter is a child text item.
    """

    _MARGIN_RATIO = 0.1

    def __init__(
        self, piece: Piece, square: Rankfile, tile_size: int, theme: BoardTheme
    ) -> None:
        self._margin = float(tile_size) * self._MARGIN_RATIO
        diameter = float(tile_size) - 2.0 * self._margin
        super().__init__(0.0, 0.0, diameter, diameter)
        self.piece = piece
        self.square = square

        if piece.color == Color.WHITE:
            fill, ink = theme.white_piece, theme.black_piece
        else:
            fill, ink = theme.black_piece, theme.white_piece
        self.setBrush(QBrush(fill))
        self.setPen(QPen(ink, 2))

        self._label = QGraphicsSimpleTextItem(piece.letter, self)
        self._label.setFont(QFont("Helvetica Neue", max(10, int(diameter * 0.45))))
        self._label.setBrush(QBrush(ink))
        bounds = self._label.boundingRect()
        self._label.setPos(
            (diameter - bounds.width()) / 2, (diameter - bounds.height()) / 2
        )

        self.setCursor(QCursor(Qt.CursorShape.PointingHandCursor))
        self.setZValue(1)

    @property
    def margin(self) -> float:
        """Inner margin to keep the piece away from tile edges."""
        return self._margin

    @property
    def label(self) -> str:
        return self._label.text()
