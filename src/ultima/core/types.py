"""Square coordinates, direction vectors and coordinate helpers.

Board layout: rank index 0 is rank 1 (White's back rank), file index 0 is
the a-file.  A :class:`Rankfile` can only hold an on-board coordinate, so
every board read or write past construction is in bounds.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import TypeAlias

Direction: TypeAlias = tuple[int, int]  # (Δrank, Δfile)

ALL_DIRECTIONS: tuple[Direction, ...] = (
    (1, 0),
    (1, -1),
    (0, -1),
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, 1),
    (1, 1),
)
ORTHOGONAL_DIRECTIONS: tuple[Direction, ...] = ((1, 0), (0, -1), (-1, 0), (0, 1))

BOARD_SIZE = 8
_MAX_RAY_LENGTH = BOARD_SIZE - 1

_RANK_CHARS = "12345678"
_FILE_CHARS = "ABCDEFGH"


def _on_board(rank: int, file: int) -> bool:
    return 0 <= rank < BOARD_SIZE and 0 <= file < BOARD_SIZE


@dataclass(frozen=True, slots=True)
class Rankfile:
    """A validated board coordinate (zero-based rank and file indices)."""

    rank: int
    file: int

    def __post_init__(self) -> None:
        if not _on_board(self.rank, self.file):
            raise ValueError(f"Square off the board: rank={self.rank}, file={self.file}")

    # ── Construction ─────────────────────────────────────────────────────

    @classmethod
    def from_coords(cls, rank: int, file: int) -> Rankfile | None:
        """Square at (*rank*, *file*), or ``None`` when off the board."""
        if not _on_board(rank, file):
            return None
        return cls(rank, file)

    @classmethod
    def from_strings(cls, rank: str, file: str) -> Rankfile | None:
        """Square from a rank digit and a file letter, e.g. ``('4', 'e')``."""
        rank = rank.strip()
        file = file.strip().upper()
        if len(rank) != 1 or len(file) != 1:
            return None
        if rank not in _RANK_CHARS or file not in _FILE_CHARS:
            return None
        return cls(_RANK_CHARS.index(rank), _FILE_CHARS.index(file))

    # ── Conversion ───────────────────────────────────────────────────────

    def to_coords(self) -> tuple[int, int]:
        return self.rank, self.file

    def to_strings(self) -> tuple[str, str]:
        """Rank digit and upper-case file letter, e.g. ``('1', 'A')``."""
        return _RANK_CHARS[self.rank], _FILE_CHARS[self.file]

    @property
    def name(self) -> str:
        """Algebraic name, e.g. ``'e4'``."""
        return _FILE_CHARS[self.file].lower() + _RANK_CHARS[self.rank]

    def __str__(self) -> str:
        return self.name

    # ── Geometry ─────────────────────────────────────────────────────────

    def step(self, direction: Direction, distance: int = 1) -> Rankfile | None:
        """Square *distance* steps along *direction*, or ``None`` off the board."""
        dr, df = direction
        return Rankfile.from_coords(self.rank + dr * distance, self.file + df * distance)

    def neighbors(self) -> Iterator[Rankfile]:
        """The adjacent squares (up to eight) that lie on the board."""
        for direction in ALL_DIRECTIONS:
            sq = self.step(direction)
            if sq is not None:
                yield sq

    def ray(self, direction: Direction) -> Iterator[Rankfile]:
        """Squares outward along *direction*, excluding self, up to the edge."""
        for distance in range(1, _MAX_RAY_LENGTH + 1):
            sq = self.step(direction, distance)
            if sq is None:
                return
            yield sq


def parse_rankfile(name: str) -> Rankfile:
    """Parse an algebraic square name, e.g. ``'e4'``."""
    if len(name) != 2:
        raise ValueError(f"Invalid square name: {name!r}")
    sq = Rankfile.from_strings(name[1], name[0])
    if sq is None:
        raise ValueError(f"Invalid square name: {name!r}")
    return sq


# ── Named square constants ──────────────────────────────────────────────────

A1, B1, C1, D1, E1, F1, G1, H1 = (Rankfile(0, f) for f in range(8))
A2, B2, C2, D2, E2, F2, G2, H2 = (Rankfile(1, f) for f in range(8))
A3, B3, C3, D3, E3, F3, G3, H3 = (Rankfile(2, f) for f in range(8))
A4, B4, C4, D4, E4, F4, G4, H4 = (Rankfile(3, f) for f in range(8))
A5, B5, C5, D5, E5, F5, G5, H5 = (Rankfile(4, f) for f in range(8))
A6, B6, C6, D6, E6, F6, G6, H6 = (Rankfile(5, f) for f in range(8))
A7, B7, C7, D7, E7, F7, G7, H7 = (Rankfile(6, f) for f in range(8))
A8, B8, C8, D8, E8, F8, G8, H8 = (Rankfile(7, f) for f in range(8))

ALL_SQUARES: tuple[Rankfile, ...] = tuple(
    Rankfile(r, f) for r in range(BOARD_SIZE) for f in range(BOARD_SIZE)
)
