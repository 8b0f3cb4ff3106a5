"""Exception hierarchy for the rules engine.

Move errors are recoverable and caller-facing.  :class:`InvariantViolation`
signals corrupted engine state and subclasses ``AssertionError``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from schach.core.types import Square

if TYPE_CHECKING:
    from schach.core.move import Move
    from schach.core.rules import GameStatus


class ChessError(Exception):
    """Base class for schach errors."""


class MoveError(ChessError):
    """A move submitted to a game was rejected."""


class IllegalMoveError(MoveError):
    """The move is not legal in the current position for the side to move."""

    def __init__(self, move: Move, reason: str = "not a legal move") -> None:
        super().__init__(f"Illegal move {_describe(move)}: {reason}")
        self.move = move
        self.reason = reason


class GameOverError(MoveError):
    """A move was submitted after the game reached a terminal status."""

    def __init__(self, status: GameStatus) -> None:
        super().__init__(f"Game is over ({status})")
        self.status = status


class InvalidPositionError(ChessError, ValueError):
    """A reconstructed position violates the placement rules."""


class InvariantViolation(AssertionError):
    """Internal engine state is corrupt (e.g. a king vanished)."""


def _describe(move: object) -> str:
    from_sq = getattr(move, "from_sq", None)
    to_sq = getattr(move, "to_sq", None)
    if isinstance(from_sq, Square) and isinstance(to_sq, Square):
        return f"{from_sq.name}{to_sq.name}"
    return repr(move)
