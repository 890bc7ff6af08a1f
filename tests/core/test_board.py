"""Tests for Board."""

from ultima.core.board import Board
from ultima.core.enums import Color, PieceType
from ultima.core.notation import board_to_text
from ultima.core.piece import Piece
from ultima.core.types import (
    A1, B1, C1, D1, E1, F1, G1, H1,
    A8, B8, C8, D8, E8, F8, G8, H8,
    ALL_SQUARES,
    B2, B3, B4, B5, B6,
    D4, D5, D6, D7, D8,
    E4, E5,
    Rankfile,
)

W_KING = Piece(Color.WHITE, PieceType.KING)
B_KING = Piece(Color.BLACK, PieceType.KING)
W_PAWN = Piece(Color.WHITE, PieceType.PAWN)


class TestBoardInitial:
    def test_king_positions(self) -> None:
        board = Board.new_in_start_position()
        assert board[D1] == W_KING
        assert board[E8] == B_KING

    def test_white_back_rank(self) -> None:
        board = Board.new_in_start_position()
        expected = [
            (A1, PieceType.IMMOBILIZER), (B1, PieceType.LONGLEAPER),
            (C1, PieceType.CHAMELEON), (D1, PieceType.KING),
            (E1, PieceType.WITHDRAWER), (F1, PieceType.CHAMELEON),
            (G1, PieceType.LONGLEAPER), (H1, PieceType.COORDINATOR),
        ]
        for sq, pt in expected:
            assert board[sq] == Piece(Color.WHITE, pt), f"Mismatch at square {sq}"

    def test_black_back_rank(self) -> None:
        board = Board.new_in_start_position()
        expected = [
            (A8, PieceType.COORDINATOR), (B8, PieceType.LONGLEAPER),
            (C8, PieceType.CHAMELEON), (D8, PieceType.WITHDRAWER),
            (E8, PieceType.KING), (F8, PieceType.CHAMELEON),
            (G8, PieceType.LONGLEAPER), (H8, PieceType.IMMOBILIZER),
        ]
        for sq, pt in expected:
            assert board[sq] == Piece(Color.BLACK, pt), f"Mismatch at square {sq}"

    def test_pawn_ranks(self) -> None:
        board = Board.new_in_start_position()
        for file in range(8):
            assert board[Rankfile(1, file)] == W_PAWN
            assert board[Rankfile(6, file)] == Piece(Color.BLACK, PieceType.PAWN)

    def test_empty_middle(self) -> None:
        board = Board.new_in_start_position()
        for rank in range(2, 6):
            for file in range(8):
                assert board[Rankfile(rank, file)] is None

    def test_king_locations(self) -> None:
        board = Board.new_in_start_position()
        assert board.king_locations(Color.WHITE) == (D1,)
        assert board.king_locations(Color.BLACK) == (E8,)

    def test_pieces_per_side(self) -> None:
        board = Board.new_in_start_position()
        assert len(board.pieces(Color.WHITE)) == 16
        assert len(board.pieces(Color.BLACK)) == 16


class TestBoardEmpty:
    def test_all_squares_empty(self) -> None:
        board = Board.new_empty()
        assert all(board.get_square(sq) is None for sq in ALL_SQUARES)

    def test_no_kings(self) -> None:
        board = Board.new_empty()
        assert board.king_locations(Color.WHITE) == ()
        assert board.king_locations(Color.BLACK) == ()


class TestLineOfSight:
    def test_open_file(self) -> None:
        board = Board.new_empty()
        assert list(board.los(D4, (1, 0))) == [D5, D6, D7, D8]

    def test_stops_before_blocker(self) -> None:
        board = Board.new_in_start_position()
        assert list(board.los(B2, (1, 0))) == [B3, B4, B5, B6]

    def test_blocked_immediately(self) -> None:
        board = Board.new_in_start_position()
        assert list(board.los(B2, (-1, 0))) == []
        assert list(board.los(B2, (0, 1))) == []

    def test_restartable(self) -> None:
        board = Board.new_in_start_position()
        assert list(board.los(B2, (1, 0))) == list(board.los(B2, (1, 0)))


class TestKingCache:
    def test_placing_and_removing_king(self) -> None:
        board = Board()
        board[E4] = W_KING
        assert board.king_locations(Color.WHITE) == (E4,)
        board[E4] = None
        assert board.king_locations(Color.WHITE) == ()

    def test_multiple_kings(self) -> None:
        board = Board()
        board[E4] = W_KING
        board[E5] = W_KING
        assert set(board.king_locations(Color.WHITE)) == {E4, E5}
        assert board.king_locations(Color.BLACK) == ()

    def test_overwriting_king(self) -> None:
        board = Board()
        board[E4] = W_KING
        board[E4] = B_KING
        assert board.king_locations(Color.WHITE) == ()
        assert board.king_locations(Color.BLACK) == (E4,)
        board[E4] = W_PAWN
        assert board.king_locations(Color.BLACK) == ()

    def test_rewriting_same_king_is_noop(self) -> None:
        board = Board()
        board.set_square(E4, W_KING)
        board.set_square(E4, W_KING)
        assert board.king_locations(Color.WHITE) == (E4,)

    def test_clear(self) -> None:
        board = Board.new_in_start_position()
        board.clear()
        assert board == Board.new_empty()
        assert board.king_locations(Color.WHITE) == ()


class TestBoardCopy:
    def test_copy_is_independent(self) -> None:
        board = Board.new_in_start_position()
        dup = board.copy()
        assert dup == board
        dup[D1] = None
        assert board[D1] == W_KING
        assert board.king_locations(Color.WHITE) == (D1,)
        assert dup.king_locations(Color.WHITE) == ()

    def test_repr_shows_codes(self) -> None:
        text = repr(Board.new_in_start_position())
        assert text.splitlines()[0].startswith("8 bO bL")
        assert text == board_to_text(Board.new_in_start_position())
