"""High-level chess rules: check, checkmate and stalemate classification."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from schach.core.attacks import is_in_check
from schach.core.enums import Color, StatusKind
from schach.core.legality import generate_legal_moves

if TYPE_CHECKING:
    from schach.core.position import Position


@dataclass(frozen=True, slots=True)
class GameStatus:
    """Status derived from a position.

    ``color`` is the side to move for ``CHECK`` and ``CHECKMATE`` (the side
    whose king is attacked) and ``None`` otherwise.
    """

    kind: StatusKind
    color: Color | None = None

    @classmethod
    def in_progress(cls) -> GameStatus:
        return cls(StatusKind.IN_PROGRESS)

    @classmethod
    def check(cls, color: Color) -> GameStatus:
        return cls(StatusKind.CHECK, color)

    @classmethod
    def checkmate(cls, color: Color) -> GameStatus:
        return cls(StatusKind.CHECKMATE, color)

    @classmethod
    def stalemate(cls) -> GameStatus:
        return cls(StatusKind.STALEMATE)

    @property
    def is_terminal(self) -> bool:
        return self.kind in (StatusKind.CHECKMATE, StatusKind.STALEMATE)

    @property
    def winner(self) -> Color | None:
        """The mating side after checkmate, else ``None``."""
        if self.kind == StatusKind.CHECKMATE and self.color is not None:
            return self.color.opposite
        return None

    def __str__(self) -> str:
        name = self.kind.name.replace("_", " ").lower()
        if self.color is None:
            return name
        return f"{name} ({self.color})"


class Rules:
    """Static rule-checker that operates on a :class:`Position`."""

    # Only checkmate and stalemate end a game; draws by material, repetition
    # or move count are not modelled.

    @staticmethod
    def is_in_check(position: Position) -> bool:
        return is_in_check(position, position.side_to_move)

    @staticmethod
    def game_status(position: Position) -> GameStatus:
        """Classify *position* for the side to move."""
        color = position.side_to_move
        in_check = Rules.is_in_check(position)
        has_moves = bool(generate_legal_moves(position))

        if in_check:
            return GameStatus.check(color) if has_moves else GameStatus.checkmate(color)
        if not has_moves:
            return GameStatus.stalemate()
        return GameStatus.in_progress()
