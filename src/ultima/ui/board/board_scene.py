"""BoardScene: QGraphicsScene that draws the Ultima board and pieces."""

from __future__ import annotations

from PyQt6.QtCore import QObject, QPointF, Qt, pyqtSignal
from PyQt6.QtGui import QBrush, QColor, QFont, QPen
from PyQt6.QtWidgets import (
    QGraphicsRectItem,
    QGraphicsScene,
    QGraphicsSceneMouseEvent,
    QGraphicsSimpleTextItem,
)

from ultima.core.board import Board
from ultima.core.move import Move
from ultima.core.move_validation import get_all_legal_moves
from ultima.core.types import ALL_SQUARES, Rankfile
from ultima.ui.board.piece_item import PieceItem
from ultima.ui.styles.theme import BoardTheme


class BoardScene(QGraphicsScene):
    """Renders the board, coordinates, highlights, and piece items.

    The scene never mutates the board; a completed selection is reported
    through ``move_made`` and the owner applies it.

    Signals:
        move_made(Move): Emitted when a user clicks a legal destination.
    """

    move_made = pyqtSignal(Move)

    TILE = 80  # px per square

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._theme = BoardTheme.default()
        self._board: Board | None = None
        self._flipped = False

        # Interaction state
        self._selected_sq: Rankfile | None = None
        self._legal_moves: dict[Rankfile, Move] = {}
        self._show_coordinates = True
        self._show_legal_moves = True

        # Visual layers
        self._square_items: dict[Rankfile, QGraphicsRectItem] = {}
        self._highlight_items: list[QGraphicsRectItem] = []
        self._last_move_highlights: list[QGraphicsRectItem] = []
        self._legal_dot_items: list[QGraphicsRectItem] = []
        self._piece_items: dict[Rankfile, PieceItem] = {}
        self._coord_items: list[QGraphicsSimpleTextItem] = []

        self._draw_board()

    # ── Public API ───────────────────────────────────────────────────────

    def set_board(self, board: Board) -> None:
        """Update the displayed board (full redraw of pieces)."""
        self._board = board
        self._clear_selection()
        self._sync_pieces()

    def set_flipped(self, flipped: bool) -> None:
        """Flip the board orientation."""
        self._flipped = flipped
        self._clear_last_move_highlights()
        self._draw_board()
        if self._board:
            self._clear_selection()
            self._sync_pieces()

    def is_flipped(self) -> bool:
        """Return whether the board is currently flipped."""
        return self._flipped

    def set_theme(self, theme: BoardTheme) -> None:
        self._theme = theme
        self._draw_board()
        if self._board:
            self._sync_pieces()

    def set_show_coordinates(self, visible: bool) -> None:
        """Show or hide rank/file coordinate labels."""
        self._show_coordinates = visible
        for item in self._coord_items:
            item.setVisible(visible)

    def set_show_legal_moves(self, visible: bool) -> None:
        """Show or hide legal-destination highlights."""
        self._show_legal_moves = visible
        if not visible:
            self._clear_items(self._legal_dot_items)

    def highlight_last_move(self, move: Move | None) -> None:
        """Highlight origin/destination of the last played move."""
        self._clear_last_move_highlights()
        if move is None:
            return
        for sq in (move.start, move.end):
            rect = self._make_highlight(sq, self._theme.last_move)
            rect.setZValue(0.5)
            self._last_move_highlights.append(rect)

    @property
    def selected_square(self) -> Rankfile | None:
        return self._selected_sq

    # ── Board drawing ────────────────────────────────────────────────────

    def _draw_board(self) -> None:
        """Draw or redraw the 64 squares and coordinates."""
        for sq_item in self._square_items.values():
            self.removeItem(sq_item)
        self._square_items.clear()
        for coord_item in self._coord_items:
            self.removeItem(coord_item)
        self._coord_items.clear()

        t = self.TILE
        font = QFont("Helvetica Neue", max(9, t // 8))

        for sq in ALL_SQUARES:
            vf, vr = self._visual_coords(sq)
            is_dark = (sq.file + sq.rank) % 2 == 0
            color = self._theme.dark_square if is_dark else self._theme.light_square
            rect = QGraphicsRectItem(vf * t, vr * t, t, t)
            rect.setBrush(QBrush(color))
            rect.setPen(QPen(Qt.PenStyle.NoPen))
            rect.setZValue(0)
            self.addItem(rect)
            self._square_items[sq] = rect

            text_color = self._theme.coord_dark if is_dark else self._theme.coord_light

            # Rank numbers (left edge)
            if sq.file == 0:
                label = sq.to_strings()[0]
                pos = QPointF(vf * t + 2, vr * t + 1)
                self._add_coord_label(label, text_color, font, pos)

            # File letters (bottom edge)
            if sq.rank == 0:
                label = sq.to_strings()[1].lower()
                pos = QPointF(vf * t + t - 12, vr * t + t - 16)
                self._add_coord_label(label, text_color, font, pos)

        self.setSceneRect(0, 0, 8 * t, 8 * t)

    def _add_coord_label(
        self, label: str, color: QColor, font: QFont, pos: QPointF
    ) -> None:
        txt = QGraphicsSimpleTextItem(label)
        txt.setFont(font)
        txt.setBrush(QBrush(color))
        txt.setPos(pos)
        txt.setZValue(0.3)
        txt.setVisible(self._show_coordinates)
        self.addItem(txt)
        self._coord_items.append(txt)

    # ── Piece synchronisation ────────────────────────────────────────────

    def _sync_pieces(self) -> None:
        """Re-create all piece items from the current board."""
        for item in self._piece_items.values():
            self.removeItem(item)
        self._piece_items.clear()

        if self._board is None:
            return

        t = self.TILE
        for sq in ALL_SQUARES:
            piece = self._board[sq]
            if piece is not None:
                item = PieceItem(piece, sq, t, self._theme)
                vf, vr = self._visual_coords(sq)
                item.setPos(vf * t + item.margin, vr * t + item.margin)
                self.addItem(item)
                self._piece_items[sq] = item

    # ── Mouse interaction ────────────────────────────────────────────────

    def mousePressEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if self._board is None or event is None:
            return super().mousePressEvent(event)
        self.click_square(self._pos_to_square(event.scenePos()))
        super().mousePressEvent(event)

    def click_square(self, sq: Rankfile | None) -> None:
        """Select a piece, or complete a move when *sq* is a legal destination."""
        if sq is None or self._board is None:
            self._clear_selection()
            return

        if self._selected_sq is not None:
            move = self._legal_moves.get(sq)
            if move is not None:
                self._clear_selection()
                self.move_made.emit(move)
                return

        if self._board[sq] is not None and sq != self._selected_sq:
            self._select_square(sq)
        else:
            self._clear_selection()

    # ── Selection / highlights ───────────────────────────────────────────

    def _select_square(self, sq: Rankfile) -> None:
        self._clear_selection()
        if self._board is None:
            return
        piece = self._board[sq]
        if piece is None:
            return
        self._selected_sq = sq

        # Highlight origin
        rect = self._make_highlight(sq, self._theme.highlight_from)
        self._highlight_items.append(rect)

        self._legal_moves = {
            m.end: m for m in get_all_legal_moves(self._board, sq, piece)
        }
        if self._show_legal_moves:
            for end, m in self._legal_moves.items():
                color = (
                    self._theme.highlight_capture
                    if m.is_capture
                    else self._theme.highlight_to
                )
                self._legal_dot_items.append(self._make_highlight(end, color))

    def _clear_selection(self) -> None:
        self._selected_sq = None
        self._legal_moves = {}
        self._clear_items(self._highlight_items)
        self._clear_items(self._legal_dot_items)

    def _clear_last_move_highlights(self) -> None:
        self._clear_items(self._last_move_highlights)

    def _clear_items(self, items: list[QGraphicsRectItem]) -> None:
        for item in items:
            self.removeItem(item)
        items.clear()

    # ── Coordinate helpers ───────────────────────────────────────────────

    def _visual_coords(self, sq: Rankfile) -> tuple[int, int]:
        """Convert a board square to visual column/row."""
        if self._flipped:
            return 7 - sq.file, sq.rank
        return sq.file, 7 - sq.rank

    def _pos_to_square(self, pos: QPointF) -> Rankfile | None:
        """Scene position → board square."""
        t = self.TILE
        col = int(pos.x() // t)
        row = int(pos.y() // t)
        if self._flipped:
            return Rankfile.from_coords(row, 7 - col)
        return Rankfile.from_coords(7 - row, col)

    def _make_highlight(self, sq: Rankfile, color: QColor) -> QGraphicsRectItem:
        """Create a coloured overlay rectangle on a square."""
        t = self.TILE
        vf, vr = self._visual_coords(sq)
        rect = QGraphicsRectItem(vf * t, vr * t, t, t)
        rect.setBrush(QBrush(color))
        rect.setPen(QPen(Qt.PenStyle.NoPen))
        rect.setZValue(0.8)
        self.addItem(rect)
        return rect
