"""Game state machine — owns the position and derives the status each turn."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from schach.core.enums import Color, StatusKind
from schach.core.attacks import is_in_check
from schach.core.errors import (
    GameOverError,
    IllegalMoveError,
    InvalidPositionError,
    InvariantViolation,
)
from schach.core.legality import (
    generate_legal_moves,
    legal_moves_from,
    match_legal_move,
)
from schach.core.move import Move
from schach.core.piece import Piece
from schach.core.position import Position
from schach.core.rules import GameStatus, Rules
from schach.core.types import Square

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class MoveRecord:
    """A single entry in the move history."""

    move: Move
    status_after: GameStatus

    @property
    def was_capture(self) -> bool:
        return self.move.is_capture

    @property
    def was_check(self) -> bool:
        return self.status_after.kind == StatusKind.CHECK

    @property
    def was_checkmate(self) -> bool:
        return self.status_after.kind == StatusKind.CHECKMATE


class GameState:
    """Applies legal moves one at a time and keeps the status current.

    ``apply_move`` is the only mutator.  The status is recomputed from the
    position after every move, so it is never stale.  Not thread-safe:
    callers must serialise access.
    """

    __slots__ = ("_position", "_status", "_history", "_first_side")

    def __init__(self, position: Position | None = None) -> None:
        if position is None:
            position = Position.initial()
        self._position = position.copy()
        self._history: list[MoveRecord] = []
        self._first_side = self._position.side_to_move
        self._check_kings(self._position)
        waiting = self._position.side_to_move.opposite
        if is_in_check(self._position, waiting):
            raise InvalidPositionError(f"{waiting} king can be captured")
        self._status = Rules.game_status(self._position)

    # ── External interface ───────────────────────────────────────────────

    def current_position(self) -> Position:
        """Snapshot of the current position, safe to keep or mutate."""
        return self._position.copy()

    def status(self) -> GameStatus:
        return self._status

    def legal_moves(self) -> list[Move]:
        """Legal moves in the current position (empty once the game ended)."""
        if self._status.is_terminal:
            return []
        return generate_legal_moves(self._position)

    def legal_moves_for_selected(self, square: Square) -> list[Move]:
        """Legal moves whose origin is *square*, for highlighting targets."""
        if self._status.is_terminal:
            return []
        return legal_moves_from(self._position, square)

    def find_legal_move(self, from_sq: Square, to_sq: Square) -> Move | None:
        """The legal move from *from_sq* to *to_sq*, if there is one."""
        for move in self.legal_moves_for_selected(from_sq):
            if move.to_sq == to_sq:
                return move
        return None

    def apply_move(self, move: Move) -> GameStatus:
        """Play *move* and return the new status.

        Raises:
            GameOverError: the game already ended in checkmate or stalemate.
            IllegalMoveError: *move* is not legal for the side to move.
        """
        if self._status.is_terminal:
            _LOGGER.info("Rejected %r: game is over (%s)", move, self._status)
            raise GameOverError(self._status)

        if not _is_well_formed(move):
            _LOGGER.info("Rejected malformed move %r", move)
            raise IllegalMoveError(move, "malformed move")
        if move.piece.color != self._position.side_to_move:
            _LOGGER.info("Rejected %s: not %s's turn", move, move.piece.color)
            raise IllegalMoveError(move, f"it is {self.side_to_move}'s turn")
        legal = match_legal_move(self._position, move)
        if legal is None:
            _LOGGER.info("Rejected %s: not legal", move)
            raise IllegalMoveError(move)
        move = legal

        after = self._position.after(move)
        self._check_kings(after)
        self._position = after
        self._status = Rules.game_status(self._position)
        self._history.append(MoveRecord(move, self._status))

        _LOGGER.debug("Applied %s, status %s", move, self._status)
        if self._status.is_terminal:
            _LOGGER.info("Game over: %s", self._status)
        return self._status

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def position(self) -> Position:
        """The live position; treat as read-only."""
        return self._position

    @property
    def side_to_move(self) -> Color:
        return self._position.side_to_move

    @property
    def is_game_over(self) -> bool:
        return self._status.is_terminal

    @property
    def move_history(self) -> list[MoveRecord]:
        return list(self._history)

    @property
    def last_move(self) -> Move | None:
        return self._position.last_move

    @property
    def ply_count(self) -> int:
        """Number of half-moves played."""
        return len(self._history)

    @property
    def fullmove_number(self) -> int:
        """Move number in the usual sense; black's replies share white's."""
        plies = self.ply_count + (1 if self._first_side == Color.BLACK else 0)
        return (plies // 2) + 1

    # ── Internal ─────────────────────────────────────────────────────────

    def _check_kings(self, position: Position) -> None:
        board = position.board
        for color in Color:
            count = board.king_count(color)
            if count != 1:
                raise InvariantViolation(
                    f"Position has {count} {color.name} kings after "
                    f"{self.ply_count} plies"
                )


def _is_well_formed(move: object) -> bool:
    return (
        isinstance(move, Move)
        and isinstance(move.from_sq, Square)
        and isinstance(move.to_sq, Square)
        and isinstance(move.piece, Piece)
    )
