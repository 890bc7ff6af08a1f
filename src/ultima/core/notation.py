"""Text rendering and parsing of boards and squares.

Board text layout, rank 8 at the top::

    8 bO bL bC bW bK bC bL bI
    ...
    1 wI wL wC wK wW wC wL wO
      A  B  C  D  E  F  G  H

Each cell is a two-letter piece code (see :class:`~ultima.core.piece.Piece`)
or ``__`` for an empty square.
"""

from __future__ import annotations

from ultima.core.board import Board
from ultima.core.piece import Piece
from ultima.core.types import BOARD_SIZE, Rankfile

EMPTY_CELL = "__"
_LEGEND = "  " + "  ".join("ABCDEFGH")


def board_to_text(board: Board, *, legend: bool = True) -> str:
    """Render *board* as one row of 3-character cells per rank."""
    lines: list[str] = []
    for rank in range(BOARD_SIZE - 1, -1, -1):
        cells = []
        for file in range(BOARD_SIZE):
            piece = board[Rankfile(rank, file)]
            cells.append(piece.code if piece is not None else EMPTY_CELL)
        row = " ".join(cells)
        lines.append(f"{rank + 1} {row}" if legend else row)
    if legend:
        lines.append(_LEGEND)
    return "\n".join(lines)


def board_from_text(text: str) -> Board:
    """Parse a board drawn by :func:`board_to_text` (legend optional).

    Blank lines and the file legend are ignored; a leading rank number on a
    row is accepted but not required.
    """
    rows: list[list[str]] = []
    for line in text.splitlines():
        tokens = line.split()
        if not tokens or "".join(tokens).upper() == "ABCDEFGH":
            continue
        if len(tokens) == BOARD_SIZE + 1 and tokens[0].isdigit():
            tokens = tokens[1:]
        if len(tokens) != BOARD_SIZE:
            raise ValueError(f"Expected {BOARD_SIZE} cells per rank: {line!r}")
        rows.append(tokens)

    if len(rows) != BOARD_SIZE:
        raise ValueError(f"Expected {BOARD_SIZE} ranks, got {len(rows)}")

    board = Board()
    for row_idx, cells in enumerate(rows):
        rank = BOARD_SIZE - 1 - row_idx
        for file, cell in enumerate(cells):
            if cell == EMPTY_CELL:
                continue
            board[Rankfile(rank, file)] = Piece.from_code(cell)
    return board


def parse_rankfile_tokens(rank: str, file: str) -> Rankfile:
    """Parse a rank digit and file letter, raising on malformed input."""
    sq = Rankfile.from_strings(rank, file)
    if sq is None:
        raise ValueError(f"Invalid square: rank={rank!r}, file={file!r}")
    return sq
