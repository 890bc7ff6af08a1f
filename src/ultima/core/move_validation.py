"""Legal move generation for every Ultima piece type.

Each piece type captures by its own rule, so a move is a destination plus
the set of squares it vacates.  Standard pieces (Pawn, Withdrawer,
Coordinator, Immobilizer) slide like a rook or queen onto empty squares and
differ only in their capture rule; the King, Longleaper and Chameleon have
dedicated movers.  :func:`get_all_legal_moves` is the public entry point.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from ultima.core.board import Board
from ultima.core.enums import Color, PieceType
from ultima.core.move import Move
from ultima.core.piece import Piece
from ultima.core.types import (
    ALL_DIRECTIONS,
    ORTHOGONAL_DIRECTIONS,
    Direction,
    Rankfile,
)

_LOGGER = logging.getLogger(__name__)

_NO_CAPTURES: frozenset[Rankfile] = frozenset()


@dataclass(frozen=True, slots=True)
class CaptureContext:
    """Everything a capture rule needs to judge one candidate destination."""

    start: Rankfile
    end: Rankfile
    piece: Piece
    board: Board


CaptureRule = Callable[[CaptureContext], frozenset[Rankfile]]


def _holds(board: Board, sq: Rankfile, color: Color, piece_type: PieceType) -> bool:
    return board[sq] == Piece(color, piece_type)


# -- Capture rules -----------------------------------------------------------


def pawn_captures(ctx: CaptureContext) -> frozenset[Rankfile]:
    """Custodial capture: an enemy sandwiched between *end* and a friend."""
    board = ctx.board
    color = ctx.piece.color
    captures: set[Rankfile] = set()
    for direction in ALL_DIRECTIONS:
        victim = ctx.end.step(direction)
        partner = ctx.end.step(direction, 2)
        if victim is None or partner is None:
            continue
        target = board[victim]
        ally = board[partner]
        if (
            target is not None
            and target.is_enemy_of(color)
            and ally is not None
            and not ally.is_enemy_of(color)
        ):
            captures.add(victim)
    return frozenset(captures)


def withdrawer_captures(ctx: CaptureContext) -> frozenset[Rankfile]:
    """Enemies adjacent to *start* that *end* is no longer adjacent to."""
    board = ctx.board
    color = ctx.piece.color
    left_behind = set(ctx.end.neighbors())
    captures: set[Rankfile] = set()
    for sq in ctx.start.neighbors():
        target = board[sq]
        if target is not None and target.is_enemy_of(color) and sq not in left_behind:
            captures.add(sq)
    return frozenset(captures)


def coordinator_captures(ctx: CaptureContext) -> frozenset[Rankfile]:
    """Rank/file intersections of *end* with every allied king.

    The squares are geometric: whatever stands there, friend or foe, is
    listed, and empty squares are listed too.  When *end* shares a rank or
    file with a king the intersections collapse onto *end* and the king
    itself, and neither is a capture.
    """
    kings = ctx.board.king_locations(ctx.piece.color)
    captures: set[Rankfile] = set()
    for king in kings:
        captures.add(Rankfile(ctx.end.rank, king.file))
        captures.add(Rankfile(king.rank, ctx.end.file))
    captures.discard(ctx.end)
    # Allied king squares are dropped too (see DESIGN.md, Coordinator capture set).
    captures.difference_update(kings)
    return frozenset(captures)


def immobilizer_captures(ctx: CaptureContext) -> frozenset[Rankfile]:
    return _NO_CAPTURES


# -- Movers ------------------------------------------------------------------


def standard_piece_moves(
    board: Board,
    start: Rankfile,
    piece: Piece,
    directions: Iterable[Direction],
    capture_rule: CaptureRule,
) -> set[Move]:
    """Slide along *directions* onto empty squares, scoring each with *capture_rule*."""
    moves: set[Move] = set()
    for direction in directions:
        for end in board.los(start, direction):
            ctx = CaptureContext(start, end, piece, board)
            moves.add(Move(start, end, capture_rule(ctx)))
    return moves


def pawn_moves(board: Board, start: Rankfile, piece: Piece) -> set[Move]:
    return standard_piece_moves(board, start, piece, ORTHOGONAL_DIRECTIONS, pawn_captures)


def withdrawer_moves(board: Board, start: Rankfile, piece: Piece) -> set[Move]:
    return standard_piece_moves(board, start, piece, ALL_DIRECTIONS, withdrawer_captures)


def coordinator_moves(board: Board, start: Rankfile, piece: Piece) -> set[Move]:
    return standard_piece_moves(board, start, piece, ALL_DIRECTIONS, coordinator_captures)


def immobilizer_moves(board: Board, start: Rankfile, piece: Piece) -> set[Move]:
    return standard_piece_moves(board, start, piece, ALL_DIRECTIONS, immobilizer_captures)


def king_moves(board: Board, start: Rankfile, piece: Piece) -> set[Move]:
    """One step in any direction; an enemy on the target square is captured."""
    moves: set[Move] = set()
    for end in start.neighbors():
        target = board[end]
        if target is None:
            moves.add(Move(start, end))
        elif target.is_enemy_of(piece.color):
            moves.add(Move(start, end, frozenset((end,))))
    return moves


def longleaper_moves(
    board: Board,
    start: Rankfile,
    piece: Piece,
    prey: PieceType | None = None,
) -> set[Move]:
    """Queen-like moves that leap over single enemies, capturing each one.

    Along a ray every empty square is a destination carrying all captures
    made so far.  A friendly piece, or two enemies in a row, ends the ray.
    When *prey* is given only enemies of that type can be leapt.
    """
    moves: set[Move] = set()
    for direction in ALL_DIRECTIONS:
        captures: list[Rankfile] = []
        pending: Rankfile | None = None
        for sq in start.ray(direction):
            target = board[sq]
            if target is None:
                if pending is not None:
                    captures.append(pending)
                    pending = None
                moves.add(Move(start, sq, frozenset(captures)))
                continue
            if not target.is_enemy_of(piece.color) or pending is not None:
                break
            if prey is not None and target.piece_type != prey:
                break
            pending = sq
    return moves


def _mimic_moves(
    board: Board, start: Rankfile, piece: Piece, prey: PieceType
) -> set[Move]:
    disguise = Piece(piece.color, prey)
    if prey == PieceType.PAWN:
        return pawn_moves(board, start, disguise)
    if prey == PieceType.KING:
        return king_moves(board, start, disguise)
    if prey == PieceType.LONGLEAPER:
        return longleaper_moves(board, start, disguise, prey=PieceType.LONGLEAPER)
    if prey == PieceType.WITHDRAWER:
        return withdrawer_moves(board, start, disguise)
    if prey == PieceType.COORDINATOR:
        return coordinator_moves(board, start, disguise)
    raise ValueError(f"Chameleon cannot mimic {prey.name}")


# Immobilizers and Chameleons are never captured by a Chameleon.
_CHAMELEON_PREY: tuple[PieceType, ...] = (
    PieceType.PAWN,
    PieceType.KING,
    PieceType.LONGLEAPER,
    PieceType.WITHDRAWER,
    PieceType.COORDINATOR,
)


def chameleon_moves(board: Board, start: Rankfile, piece: Piece) -> set[Move]:
    """Queen-like moves plus captures made by imitating the victim's own rule.

    A piece of type X is captured only if a piece of type X standing on
    *start* would capture it.  Several imitations may reach the same
    destination, so capture sets are merged per destination.
    """
    merged: dict[Rankfile, set[Rankfile]] = {}
    for direction in ALL_DIRECTIONS:
        for end in board.los(start, direction):
            merged.setdefault(end, set())

    for prey in _CHAMELEON_PREY:
        for move in _mimic_moves(board, start, piece, prey):
            captures = {
                sq for sq in move.captures if _holds(board, sq, piece.color.opposite, prey)
            }
            if captures:
                merged.setdefault(move.end, set()).update(captures)

    return {Move(start, end, frozenset(captures)) for end, captures in merged.items()}


# -- Immobilization ----------------------------------------------------------


def is_immobilized(
    board: Board, location: Rankfile, piece: Piece | None = None
) -> bool:
    """Whether a piece on *location* is frozen by an adjacent enemy.

    Any piece next to an enemy Immobilizer is frozen; an Immobilizer is also
    frozen by an adjacent enemy Chameleon.  *piece* defaults to whatever
    stands on *location*; pass it to judge a piece that is not (yet) there.
    """
    if piece is None:
        piece = board[location]
    if piece is None:
        return False
    for sq in location.neighbors():
        neighbor = board[sq]
        if neighbor is None or not neighbor.is_enemy_of(piece.color):
            continue
        if neighbor.piece_type == PieceType.IMMOBILIZER:
            return True
        if (
            piece.piece_type == PieceType.IMMOBILIZER
            and neighbor.piece_type == PieceType.CHAMELEON
        ):
            return True
    return False


# -- Public API --------------------------------------------------------------


def get_all_legal_moves(board: Board, start: Rankfile, piece: Piece) -> set[Move]:
    """Every legal move of *piece* standing on *start*.

    Returns an empty set for an immobilized piece.  The board is not touched.
    """
    if is_immobilized(board, start, piece):
        _LOGGER.debug("%s on %s is immobilized", piece, start)
        return set()

    pt = piece.piece_type
    if pt == PieceType.PAWN:
        moves = pawn_moves(board, start, piece)
    elif pt == PieceType.IMMOBILIZER:
        moves = immobilizer_moves(board, start, piece)
    elif pt == PieceType.COORDINATOR:
        moves = coordinator_moves(board, start, piece)
    elif pt == PieceType.LONGLEAPER:
        moves = longleaper_moves(board, start, piece)
    elif pt == PieceType.CHAMELEON:
        moves = chameleon_moves(board, start, piece)
    elif pt == PieceType.WITHDRAWER:
        moves = withdrawer_moves(board, start, piece)
    elif pt == PieceType.KING:
        moves = king_moves(board, start, piece)
    else:
        raise ValueError(f"Unknown piece type: {pt!r}")

    _LOGGER.debug("%s on %s has %d moves", piece, start, len(moves))
    return moves


def get_all_legal_moves_for(board: Board, color: Color) -> dict[Rankfile, set[Move]]:
    """Legal moves of every *color* piece, keyed by square; squares with none are omitted."""
    result: dict[Rankfile, set[Move]] = {}
    for sq in board.pieces(color):
        piece = board[sq]
        if piece is None:
            continue
        moves = get_all_legal_moves(board, sq, piece)
        if moves:
            result[sq] = moves
    return result
