"""MainWindow: top-level window for exploring Ultima moves."""

from __future__ import annotations

import logging

from PyQt6.QtGui import QAction
from PyQt6.QtWidgets import QMainWindow, QStatusBar

from ultima.core.board import Board
from ultima.core.execution import captured_squares, execute_move
from ultima.core.move import Move
from ultima.ui.board.board_view import BoardView
from ultima.ui.settings import AppSettings

_LOGGER = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Main application window: a board plus a status line.

    There is no turn order; any piece can be selected and moved.
    """

    def __init__(self, settings: AppSettings | None = None) -> None:
        super().__init__()
        self.setWindowTitle("Ultima")
        self.setMinimumSize(480, 520)
        self.resize(720, 760)

        self._settings = settings if settings is not None else AppSettings()
        self._board = Board.new_in_start_position()

        self._setup_ui()
        self._setup_menu()

        self._board_view.move_made.connect(self._on_move_made)
        self._board_view.board_scene.set_board(self._board)

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        self._board_view = BoardView(self._settings)
        self.setCentralWidget(self._board_view)

        self._status_bar = QStatusBar()
        self.setStatusBar(self._status_bar)
        self._status_bar.showMessage("Select a piece to see its moves.")

    def _setup_menu(self) -> None:
        menu_bar = self.menuBar()
        if menu_bar is None:
            return
        game_menu = menu_bar.addMenu("&Game")
        if game_menu is None:
            return

        self._act_new = QAction("&New Game", self)
        self._act_new.setShortcut("Ctrl+N")
        self._act_new.triggered.connect(self.new_game)
        game_menu.addAction(self._act_new)

        self._act_empty = QAction("&Empty Board", self)
        self._act_empty.triggered.connect(self.clear_board)
        game_menu.addAction(self._act_empty)

        game_menu.addSeparator()

        self._act_flip = QAction("&Flip Board", self)
        self._act_flip.setShortcut("Ctrl+F")
        self._act_flip.triggered.connect(self._on_flip)
        game_menu.addAction(self._act_flip)

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def board(self) -> Board:
        return self._board

    @property
    def board_view(self) -> BoardView:
        return self._board_view

    # ── Actions ──────────────────────────────────────────────────────────

    def new_game(self) -> None:
        self._set_board(Board.new_in_start_position())
        self._status_bar.showMessage("New game.")

    def clear_board(self) -> None:
        self._set_board(Board.new_empty())
        self._status_bar.showMessage("Board cleared.")

    def _set_board(self, board: Board) -> None:
        self._board = board
        scene = self._board_view.board_scene
        scene.highlight_last_move(None)
        scene.set_board(board)

    def _on_flip(self) -> None:
        scene = self._board_view.board_scene
        scene.set_flipped(not scene.is_flipped())

    def _on_move_made(self, move: Move) -> None:
        taken = captured_squares(self._board, move)
        execute_move(self._board, move)

        scene = self._board_view.board_scene
        scene.set_board(self._board)
        scene.highlight_last_move(move)

        if taken:
            names = ", ".join(sorted(sq.name for sq in taken))
            self._status_bar.showMessage(f"{move.start}-{move.end}, captured {names}")
        else:
            self._status_bar.showMessage(f"{move.start}-{move.end}")
        _LOGGER.info("Played %s", move)
