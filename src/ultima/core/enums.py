"""Core enumerations for the Ultima domain."""

from __future__ import annotations

from enum import IntEnum


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Ultima piece types.

    The set is closed: every place that decides movement handles all seven.
    """

    PAWN = 1
    IMMOBILIZER = 2
    COORDINATOR = 3
    LONGLEAPER = 4
    CHAMELEON = 5
    WITHDRAWER = 6
    KING = 7
