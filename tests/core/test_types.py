"""Tests for Rankfile coordinates and direction helpers."""

import pytest

from ultima.core.types import (
    A1,
    A2,
    A8,
    ALL_DIRECTIONS,
    ALL_SQUARES,
    B1,
    B2,
    D4,
    E4,
    H1,
    H8,
    ORTHOGONAL_DIRECTIONS,
    Rankfile,
    parse_rankfile,
)


class TestConstruction:
    def test_from_coords_round_trip(self) -> None:
        for rank in range(8):
            for file in range(8):
                sq = Rankfile.from_coords(rank, file)
                assert sq is not None
                assert sq.to_coords() == (rank, file)

    @pytest.mark.parametrize("rank, file", [(-1, 0), (8, 0), (0, -1), (0, 8), (9, 9)])
    def test_from_coords_off_board(self, rank: int, file: int) -> None:
        assert Rankfile.from_coords(rank, file) is None

    def test_direct_construction_rejects_off_board(self) -> None:
        with pytest.raises(ValueError):
            Rankfile(8, 0)

    def test_from_strings(self) -> None:
        assert Rankfile.from_strings("1", "A") == A1
        assert Rankfile.from_strings("8", "h") == H8
        assert Rankfile.from_strings(" 4 ", "e\n") == E4

    @pytest.mark.parametrize(
        "rank, file",
        [("0", "A"), ("9", "A"), ("1", "I"), ("", "A"), ("1", ""), ("12", "A"), ("a", "1")],
    )
    def test_from_strings_invalid(self, rank: str, file: str) -> None:
        assert Rankfile.from_strings(rank, file) is None

    def test_strings_round_trip(self) -> None:
        for sq in ALL_SQUARES:
            assert Rankfile.from_strings(*sq.to_strings()) == sq

    def test_names(self) -> None:
        assert A1.to_strings() == ("1", "A")
        assert E4.name == "e4"
        assert str(H8) == "h8"

    def test_parse_rankfile(self) -> None:
        assert parse_rankfile("e4") == E4
        assert parse_rankfile("A1") == A1
        with pytest.raises(ValueError):
            parse_rankfile("z9")
        with pytest.raises(ValueError):
            parse_rankfile("e10")


class TestDirections:
    def test_direction_sets(self) -> None:
        assert len(set(ALL_DIRECTIONS)) == 8
        assert len(set(ORTHOGONAL_DIRECTIONS)) == 4
        assert set(ORTHOGONAL_DIRECTIONS) <= set(ALL_DIRECTIONS)
        assert (0, 0) not in ALL_DIRECTIONS

    def test_step(self) -> None:
        assert A1.step((1, 1)) == B2
        assert A1.step((1, 0), 7) == A8
        assert A1.step((-1, 0)) is None

    def test_neighbors_in_corner(self) -> None:
        assert set(A1.neighbors()) == {A2, B1, B2}

    def test_neighbors_in_center(self) -> None:
        neighbors = list(D4.neighbors())
        assert len(neighbors) == 8
        assert D4 not in neighbors

    def test_ray_stops_at_edge(self) -> None:
        ray = list(A1.ray((1, 0)))
        assert len(ray) == 7
        assert ray[0] == A2
        assert ray[-1] == A8

    def test_ray_from_edge_is_empty(self) -> None:
        assert list(H8.ray((1, 1))) == []
        assert list(H1.ray((0, 1))) == []

    def test_ray_is_restartable(self) -> None:
        assert list(D4.ray((1, -1))) == list(D4.ray((1, -1)))
