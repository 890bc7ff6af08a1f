"""Tests for board text notation."""

import pytest

from ultima.core.board import Board
from ultima.core.enums import Color
from ultima.core.notation import board_from_text, board_to_text, parse_rankfile_tokens
from ultima.core.piece import Piece
from ultima.core.types import D4, E4, H8


class TestBoardToText:
    def test_start_position_rows(self) -> None:
        lines = board_to_text(Board.new_in_start_position()).splitlines()
        assert lines[0] == "8 bO bL bC bW bK bC bL bI"
        assert lines[1] == "7 " + " ".join(["bP"] * 8)
        assert lines[3] == "5 " + " ".join(["__"] * 8)
        assert lines[7] == "1 wI wL wC wK wW wC wL wO"
        assert lines[8] == "  A  B  C  D  E  F  G  H"

    def test_without_legend(self) -> None:
        lines = board_to_text(Board(), legend=False).splitlines()
        assert len(lines) == 8
        assert all(line == " ".join(["__"] * 8) for line in lines)


class TestBoardFromText:
    def test_round_trip(self) -> None:
        board = Board.new_in_start_position()
        assert board_from_text(board_to_text(board)) == board

    def test_round_trip_without_legend(self) -> None:
        board = Board()
        board[E4] = Piece.from_code("bK")
        board[H8] = Piece.from_code("wL")
        assert board_from_text(board_to_text(board, legend=False)) == board

    def test_tracks_kings(self) -> None:
        board = board_from_text(board_to_text(Board.new_in_start_position()))
        assert len(board.king_locations(Color.WHITE)) == 1
        assert len(board.king_locations(Color.BLACK)) == 1

    def test_too_few_ranks(self) -> None:
        text = "\n".join(board_to_text(Board()).splitlines()[1:])
        with pytest.raises(ValueError):
            board_from_text(text)

    def test_bad_cell(self) -> None:
        rows = board_to_text(Board(), legend=False).splitlines()
        rows[0] = "xZ " + rows[0][3:]
        with pytest.raises(ValueError):
            board_from_text("\n".join(rows))

    def test_short_row(self) -> None:
        rows = board_to_text(Board(), legend=False).splitlines()
        rows[2] = "__ __"
        with pytest.raises(ValueError):
            board_from_text("\n".join(rows))


class TestParseTokens:
    def test_valid(self) -> None:
        assert parse_rankfile_tokens("4", "d") == D4

    def test_invalid(self) -> None:
        with pytest.raises(ValueError):
            parse_rankfile_tokens("0", "d")
