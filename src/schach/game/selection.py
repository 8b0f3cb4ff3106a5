"""SelectionController — click-driven turn flow on top of :class:`GameState`.

A turn goes: select one of your pieces, see its legal targets highlighted,
click a target to play it.  Clicking another own piece switches the
selection; clicking anywhere else (or off the board) deselects.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import IntEnum, auto

from schach.core.errors import MoveError
from schach.core.move import Move
from schach.core.rules import GameStatus
from schach.core.types import Square
from schach.game.state import GameState

_LOGGER = logging.getLogger(__name__)


class SelectionPhase(IntEnum):
    """Where the user is within a turn."""

    SELECT_PIECE = auto()
    SELECT_TARGET = auto()
    GAME_OVER = auto()


# ── Event definitions ────────────────────────────────────────────────────────

SelectionCallback = Callable[[Square | None, frozenset[Square]], None]
MoveCallback = Callable[[Move, GameStatus], None]
GameOverCallback = Callable[[GameStatus], None]


@dataclass
class SelectionEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_selection_changed: list[SelectionCallback] = field(default_factory=list)
    on_move: list[MoveCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)


class SelectionController:
    """Translates square clicks into moves for a single game."""

    __slots__ = ("_state", "_selected", "_targets", "events")

    def __init__(self, state: GameState | None = None) -> None:
        self._state = state if state is not None else GameState()
        self._selected: Square | None = None
        self._targets: dict[Square, Move] = {}
        self.events = SelectionEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def selected(self) -> Square | None:
        return self._selected

    @property
    def highlights(self) -> frozenset[Square]:
        """Destination squares of the selected piece."""
        return frozenset(self._targets)

    @property
    def phase(self) -> SelectionPhase:
        if self._state.is_game_over:
            return SelectionPhase.GAME_OVER
        if self._selected is None:
            return SelectionPhase.SELECT_PIECE
        return SelectionPhase.SELECT_TARGET

    # ── Commands ─────────────────────────────────────────────────────────

    def reset(self, state: GameState | None = None) -> None:
        """Start over with *state* (a fresh game by default)."""
        self._state = state if state is not None else GameState()
        self._clear_selection()

    def click(self, square: Square | None) -> Move | None:
        """Handle a click on *square* (``None`` = off the board).

        Returns the move played, if the click completed one.
        """
        if self._state.is_game_over:
            return None

        if self._selected is not None and square in self._targets:
            return self._play(self._targets[square])

        if square is not None and self._is_own_piece(square):
            self._select(square)
        else:
            self._clear_selection()
        return None

    # ── Internal helpers ─────────────────────────────────────────────────

    def _is_own_piece(self, square: Square) -> bool:
        piece = self._state.position.occupant_at(square)
        return piece is not None and piece.color == self._state.side_to_move

    def _select(self, square: Square) -> None:
        self._selected = square
        self._targets = {
            move.to_sq: move for move in self._state.legal_moves_for_selected(square)
        }
        self._emit_selection()

    def _clear_selection(self) -> None:
        had_selection = self._selected is not None
        self._selected = None
        self._targets = {}
        if had_selection:
            self._emit_selection()

    def _play(self, move: Move) -> Move | None:
        try:
            status = self._state.apply_move(move)
        except MoveError as exc:
            # Highlights are built from the legal set, so this means the
            # state changed underneath us.
            _LOGGER.warning("Move from selection rejected: %s", exc)
            self._clear_selection()
            return None

        self._clear_selection()
        for cb in self.events.on_move:
            cb(move, status)
        if status.is_terminal:
            for cb in self.events.on_game_over:
                cb(status)
        return move

    def _emit_selection(self) -> None:
        highlights = self.highlights
        for cb in self.events.on_selection_changed:
            cb(self._selected, highlights)
