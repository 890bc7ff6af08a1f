"""Console harness: pick a piece, list its moves, play one.

There is no turn order; any piece on the board may be moved.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import TextIO

from ultima.core.board import Board
from ultima.core.execution import captured_squares, execute_move
from ultima.core.move import Move
from ultima.core.move_validation import get_all_legal_moves, is_immobilized
from ultima.core.notation import board_from_text, board_to_text
from ultima.core.types import Rankfile

_LOGGER = logging.getLogger(__name__)

_QUIT_TOKENS = frozenset({"q", "quit", "exit"})


class _Quit(Exception):
    """Raised when the user ends the session (EOF or a quit token)."""


class ConsoleSession:
    """Line-based query/execute loop over a single board."""

    def __init__(self, board: Board, stdin: TextIO, stdout: TextIO) -> None:
        self._board = board
        self._in = stdin
        self._out = stdout

    @property
    def board(self) -> Board:
        return self._board

    def run(self) -> int:
        """Play moves until EOF or a quit token; returns an exit status."""
        try:
            while True:
                self._play_one()
        except _Quit:
            self._write("Goodbye.")
        return 0

    # ── One query/execute cycle ──────────────────────────────────────────

    def _play_one(self) -> None:
        self._write(board_to_text(self._board))
        start = self._read_square("piece")
        piece = self._board[start]
        if piece is None:
            self._write(f"No piece on {start}.")
            return

        moves = get_all_legal_moves(self._board, start, piece)
        if not moves:
            reason = "is immobilized" if is_immobilized(self._board, start) else "cannot move"
            self._write(f"{piece} on {start} {reason}.")
            return

        by_end = {move.end: move for move in moves}
        self._write(f"Moves for {piece} on {start}:")
        for move in sorted(moves, key=lambda m: m.end.to_coords()):
            self._write(f"  {self._describe(move)}")

        while True:
            end = self._read_square("destination")
            move = by_end.get(end)
            if move is not None:
                break
            self._write(f"{end} is not a legal destination for {piece}.")

        taken = captured_squares(self._board, move)
        execute_move(self._board, move)
        if taken:
            self._write("Captured: " + ", ".join(sorted(sq.name for sq in taken)))

    def _describe(self, move: Move) -> str:
        taken = captured_squares(self._board, move)
        if not taken:
            return move.end.name
        return f"{move.end.name} x " + ", ".join(sorted(sq.name for sq in taken))

    # ── Input helpers ────────────────────────────────────────────────────

    def _read_token(self, prompt: str) -> str:
        self._out.write(prompt)
        self._out.flush()
        line = self._in.readline()
        if not line:
            raise _Quit
        token = line.strip()
        if token.lower() in _QUIT_TOKENS:
            raise _Quit
        return token

    def _read_square(self, what: str) -> Rankfile:
        """Read a rank then a file until they form a valid square."""
        while True:
            rank = self._read_token(f"Rank of {what} (1-8): ")
            file = self._read_token(f"File of {what} (A-H): ")
            sq = Rankfile.from_strings(rank, file)
            if sq is not None:
                return sq
            _LOGGER.debug("Rejected square tokens %r %r", rank, file)
            self._write(f"Invalid square: rank {rank!r}, file {file!r}. Try again.")

    def _write(self, text: str) -> None:
        self._out.write(text + "\n")


def _load_board(args: argparse.Namespace) -> Board:
    if args.setup is not None:
        return board_from_text(Path(args.setup).read_text(encoding="utf-8"))
    if args.empty:
        return Board.new_empty()
    return Board.new_in_start_position()


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ultima",
        description="Explore Ultima moves on the console.",
    )
    group = parser.add_mutually_exclusive_group()
    group.add_argument("--empty", action="store_true", help="Start from an empty board")
    group.add_argument(
        "--setup", default=None,
        help="Load the starting board from a text file drawn in board notation",
    )
    parser.add_argument(
        "--log-level", default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: WARNING)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    args = _build_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s [%(name)s] %(message)s",
        stream=sys.stderr,
    )

    try:
        board = _load_board(args)
    except (OSError, ValueError) as exc:
        _LOGGER.error("Cannot load board: %s", exc)
        return 2

    return ConsoleSession(board, sys.stdin, sys.stdout).run()


if __name__ == "__main__":
    sys.exit(main())
