"""Legal move filtering.

Each pseudo-legal candidate is played on a scratch copy of the position and
kept only if the mover's king is not attacked afterwards.  The caller's
position is never mutated.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from schach.core.attacks import is_in_check
from schach.core.move_generator import (
    generate_pseudo_legal_moves,
    pseudo_legal_moves_from,
)
from schach.core.types import Square

if TYPE_CHECKING:
    from schach.core.move import Move
    from schach.core.position import Position


def leaves_king_safe(position: Position, move: Move) -> bool:
    """Would the mover's king be unattacked after *move*?"""
    return not is_in_check(position.after(move), move.piece.color)


def generate_legal_moves(position: Position) -> list[Move]:
    """All strictly legal moves for the side to move (order unspecified)."""
    return [
        move
        for move in generate_pseudo_legal_moves(position)
        if leaves_king_safe(position, move)
    ]


def legal_moves_from(position: Position, sq: Square) -> list[Move]:
    """Legal moves of the side to move whose origin is *sq*."""
    piece = position.board[sq]
    if piece is None or piece.color != position.side_to_move:
        return []
    return [
        move
        for move in pseudo_legal_moves_from(position, sq)
        if leaves_king_safe(position, move)
    ]


def match_legal_move(position: Position, move: Move) -> Move | None:
    """The generated legal move that *move* stands for, or ``None``.

    Matching uses origin, destination and moving piece.  The flag is
    derived, so a caller may leave it out; a ``captured`` piece, when given,
    must agree with what actually stands on the target square.
    """
    if move.piece.color != position.side_to_move:
        return None
    for candidate in legal_moves_from(position, move.from_sq):
        if candidate.to_sq != move.to_sq or candidate.piece != move.piece:
            continue
        if move.captured is not None and move.captured != candidate.captured:
            return None
        return candidate
    return None


def is_legal(position: Position, move: Move) -> bool:
    """Does *move* name one of the legal moves in *position*?"""
    return match_legal_move(position, move) is not None
