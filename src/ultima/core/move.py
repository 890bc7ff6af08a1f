"""Move value object."""

from __future__ import annotations

from dataclasses import dataclass, field

from ultima.core.types import Rankfile


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object: a destination plus the squares it vacates.

    Only King moves may list *end* among the captures; every other piece
    captures squares other than its own destination.
    """

    start: Rankfile
    end: Rankfile
    captures: frozenset[Rankfile] = field(default_factory=frozenset)

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        base = f"{self.start.name}-{self.end.name}"
        if self.captures:
            names = ",".join(sorted(sq.name for sq in self.captures))
            base += f" x({names})"
        return base

    @property
    def is_capture(self) -> bool:
        return bool(self.captures)
