"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from ultima.core.enums import Color, PieceType

_COLOR_LETTERS: dict[Color, str] = {
    Color.WHITE: "w",
    Color.BLACK: "b",
}

# Coordinator uses "O" so it does not clash with the Chameleon.
_TYPE_LETTERS: dict[PieceType, str] = {
    PieceType.PAWN: "P",
    PieceType.IMMOBILIZER: "I",
    PieceType.COORDINATOR: "O",
    PieceType.LONGLEAPER: "L",
    PieceType.CHAMELEON: "C",
    PieceType.WITHDRAWER: "W",
    PieceType.KING: "K",
}

_LETTER_COLORS: dict[str, Color] = {v: k for k, v in _COLOR_LETTERS.items()}
_LETTER_TYPES: dict[str, PieceType] = {v: k for k, v in _TYPE_LETTERS.items()}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object representing an Ultima piece."""

    color: Color
    piece_type: PieceType

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """Two-letter code, e.g. ``wK`` for the white king."""
        return self.code

    @property
    def code(self) -> str:
        return _COLOR_LETTERS[self.color] + _TYPE_LETTERS[self.piece_type]

    @property
    def letter(self) -> str:
        """Single piece-type letter (``O`` for the Coordinator)."""
        return _TYPE_LETTERS[self.piece_type]

    @classmethod
    def from_code(cls, code: str) -> Piece:
        """Create a piece from its two-letter code, e.g. ``'bL'``."""
        if len(code) != 2:
            raise ValueError(f"Invalid piece code: {code!r}")
        try:
            color = _LETTER_COLORS[code[0].lower()]
            piece_type = _LETTER_TYPES[code[1]]
        except KeyError:
            raise ValueError(f"Invalid piece code: {code!r}") from None
        return cls(color, piece_type)

    def is_enemy_of(self, color: Color) -> bool:
        return self.color != color
