"""Board - piece placement on an 8x8 Ultima board."""

from __future__ import annotations

from collections.abc import Iterator

from ultima.core.enums import Color, PieceType
from ultima.core.piece import Piece
from ultima.core.types import ALL_SQUARES, BOARD_SIZE, Direction, Rankfile

_COLOR_COUNT = 2

# a-file to h-file, rank 1 for White and rank 8 for Black.
_WHITE_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.IMMOBILIZER,
    PieceType.LONGLEAPER,
    PieceType.CHAMELEON,
    PieceType.KING,
    PieceType.WITHDRAWER,
    PieceType.CHAMELEON,
    PieceType.LONGLEAPER,
    PieceType.COORDINATOR,
)
_BLACK_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.COORDINATOR,
    PieceType.LONGLEAPER,
    PieceType.CHAMELEON,
    PieceType.WITHDRAWER,
    PieceType.KING,
    PieceType.CHAMELEON,
    PieceType.LONGLEAPER,
    PieceType.IMMOBILIZER,
)


class Board:
    """Mutable 8x8 grid of optional pieces with a per-side king index.

    The king index is updated on every square write, so
    :meth:`king_locations` always matches the grid contents.
    """

    __slots__ = ("_squares", "_king_locations")

    def __init__(self) -> None:
        self._squares: list[list[Piece | None]] = [
            [None] * BOARD_SIZE for _ in range(BOARD_SIZE)
        ]
        # [color] -> king squares in placement order.
        self._king_locations: list[list[Rankfile]] = [[] for _ in range(_COLOR_COUNT)]

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Rankfile) -> Piece | None:
        return self._squares[sq.rank][sq.file]

    def __setitem__(self, sq: Rankfile, piece: Piece | None) -> None:
        old_piece = self._squares[sq.rank][sq.file]
        if old_piece == piece:
            return

        if old_piece is not None and old_piece.piece_type == PieceType.KING:
            self._king_locations[int(old_piece.color)].remove(sq)

        self._squares[sq.rank][sq.file] = piece

        if piece is not None and piece.piece_type == PieceType.KING:
            self._king_locations[int(piece.color)].append(sq)

    def get_square(self, sq: Rankfile) -> Piece | None:
        return self[sq]

    def set_square(self, sq: Rankfile, piece: Piece | None) -> None:
        self[sq] = piece

    # -- Query helpers ------------------------------------------------------

    def king_locations(self, color: Color) -> tuple[Rankfile, ...]:
        """Squares of every *color* king (possibly none, possibly several)."""
        return tuple(self._king_locations[int(color)])

    def pieces(self, color: Color) -> list[Rankfile]:
        """All squares occupied by *color*, rank 1 first."""
        return [
            sq
            for sq in ALL_SQUARES
            if (piece := self[sq]) is not None and piece.color == color
        ]

    def los(self, start: Rankfile, direction: Direction) -> Iterator[Rankfile]:
        """Empty squares beyond *start* along *direction*.

        Stops at the board edge or before the first occupied square.
        """
        for sq in start.ray(direction):
            if self[sq] is not None:
                return
            yield sq

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._squares = [row.copy() for row in self._squares]
        b._king_locations = [locs.copy() for locs in self._king_locations]
        return b

    def clear(self) -> None:
        self._squares = [[None] * BOARD_SIZE for _ in range(BOARD_SIZE)]
        self._king_locations = [[] for _ in range(_COLOR_COUNT)]

    # -- Factory ------------------------------------------------------------

    @classmethod
    def new_empty(cls) -> Board:
        """Board with every square empty and no kings tracked."""
        return cls()

    @classmethod
    def new_in_start_position(cls) -> Board:
        """Standard Ultima starting position (White King d1, Black King e8)."""
        b = cls()
        for f in range(BOARD_SIZE):
            b[Rankfile(1, f)] = Piece(Color.WHITE, PieceType.PAWN)
            b[Rankfile(6, f)] = Piece(Color.BLACK, PieceType.PAWN)
        for f, pt in enumerate(_WHITE_BACK_RANK):
            b[Rankfile(0, f)] = Piece(Color.WHITE, pt)
        for f, pt in enumerate(_BLACK_BACK_RANK):
            b[Rankfile(7, f)] = Piece(Color.BLACK, pt)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __repr__(self) -> str:
        from ultima.core.notation import board_to_text

        return board_to_text(self)
