"""Applying moves to a board."""

from __future__ import annotations

import logging

from ultima.core.board import Board
from ultima.core.move import Move
from ultima.core.types import Rankfile

_LOGGER = logging.getLogger(__name__)


def execute_move(board: Board, move: Move) -> None:
    """Apply *move* to *board* in place.

    Capture squares are cleared, then the piece from ``move.start`` is put
    on ``move.end``.  Legality is not re-checked: *move* must come from
    :func:`~ultima.core.move_validation.get_all_legal_moves` for this board.
    Captures are destructive, so the move cannot be undone.
    """
    piece = board[move.start]
    for sq in move.captures:
        board[sq] = None
    board[move.end] = piece
    if move.start != move.end:
        board[move.start] = None
    _LOGGER.debug("Executed %s (%s)", move, piece)


def captured_squares(board: Board, move: Move) -> frozenset[Rankfile]:
    """Capture squares of *move* that currently hold a piece other than the mover."""
    return frozenset(
        sq for sq in move.captures if sq != move.start and board[sq] is not None
    )
