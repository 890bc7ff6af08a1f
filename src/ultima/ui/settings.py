"""User-configurable viewer settings."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class AppSettings:
    """All user-configurable settings."""

    board_theme: str = "Classic"
    show_coordinates: bool = True
    show_legal_moves: bool = True
