"""Move value object."""

from __future__ import annotations

from dataclasses import dataclass

from schach.core.enums import MoveFlag
from schach.core.piece import Piece
from schach.core.types import Square


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object representing a single chess move.

    A move carries copies of the pieces involved, never references into a
    board, so it stays valid after the board changes.
    """

    from_sq: Square
    to_sq: Square
    piece: Piece
    captured: Piece | None = None
    flag: MoveFlag = MoveFlag.NORMAL

    @property
    def is_capture(self) -> bool:
        return self.captured is not None

    @property
    def is_double_pawn_push(self) -> bool:
        return self.flag == MoveFlag.DOUBLE_PAWN

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        return f"{self.from_sq.name}{self.to_sq.name}"

    @property
    def uci(self) -> str:
        """Long-algebraic coordinate notation."""
        return str(self)
