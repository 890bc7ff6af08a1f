"""Core domain layer: pure Ultima rules with zero external dependencies.

Quick start::

    from ultima.core import Board, execute_move, get_all_legal_moves
    from ultima.core.types import B2

    board = Board.new_in_start_position()
    piece = board[B2]
    moves = get_all_legal_moves(board, B2, piece)
    execute_move(board, next(iter(moves)))
"""

from ultima.core.board import Board
from ultima.core.enums import Color, PieceType
from ultima.core.execution import captured_squares, execute_move
from ultima.core.move import Move
from ultima.core.move_validation import (
    CaptureContext,
    get_all_legal_moves,
    get_all_legal_moves_for,
    is_immobilized,
)
from ultima.core.notation import board_from_text, board_to_text
from ultima.core.piece import Piece
from ultima.core.types import (
    ALL_DIRECTIONS,
    ORTHOGONAL_DIRECTIONS,
    Direction,
    Rankfile,
    parse_rankfile,
)

__all__ = [
    # Enums
    "Color",
    "PieceType",
    # Types / helpers
    "ALL_DIRECTIONS",
    "Direction",
    "ORTHOGONAL_DIRECTIONS",
    "Rankfile",
    "parse_rankfile",
    # Domain objects
    "Board",
    "CaptureContext",
    "Move",
    "Piece",
    # Rules
    "captured_squares",
    "execute_move",
    "get_all_legal_moves",
    "get_all_legal_moves_for",
    "is_immobilized",
    # Notation
    "board_from_text",
    "board_to_text",
]
