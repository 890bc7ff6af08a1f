"""Tests for MainWindow move application and board actions."""

from __future__ import annotations

from ultima.core.board import Board
from ultima.core.enums import Color, PieceType
from ultima.core.piece import Piece
from ultima.core.types import B2, B4
from ultima.ui.main_window import MainWindow
from ultima.ui.settings import AppSettings


def test_clicks_play_a_move() -> None:
    window = MainWindow()
    scene = window.board_view.board_scene
    scene.click_square(B2)
    scene.click_square(B4)

    assert window.board[B2] is None
    assert window.board[B4] == Piece(Color.WHITE, PieceType.PAWN)
    assert len(scene._last_move_highlights) == 2


def test_new_game_and_clear_board() -> None:
    window = MainWindow()
    window.clear_board()
    assert window.board == Board.new_empty()

    window.new_game()
    assert window.board == Board.new_in_start_position()


def test_settings_are_applied() -> None:
    window = MainWindow(AppSettings(board_theme="Blue", show_coordinates=False))
    scene = window.board_view.board_scene
    assert all(not item.isVisible() for item in scene._coord_items)
