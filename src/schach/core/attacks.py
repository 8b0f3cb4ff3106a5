"""Attack detection.

Attacks are computed for an arbitrary color, independent of whose turn it
is.  A pawn attacks both forward diagonals even when they are empty.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from schach.core.enums import Color, PieceType
from schach.core.move_generator import (
    BISHOP_RAYS,
    KING_TARGETS,
    KNIGHT_TARGETS,
    PAWN_CAPTURE_TARGETS,
    ROOK_RAYS,
    SLIDER_RAYS,
)
from schach.core.types import Square

if TYPE_CHECKING:
    from schach.core.position import Position

_DIAGONAL_ATTACKERS = (PieceType.BISHOP, PieceType.QUEEN)
_STRAIGHT_ATTACKERS = (PieceType.ROOK, PieceType.QUEEN)


def is_square_attacked(position: Position, sq: Square, by_color: Color) -> bool:
    """Is *sq* attacked by any piece of *by_color*?"""
    board = position.board

    # A pawn of by_color attacks sq from the squares a pawn of the other
    # color would capture onto from sq.
    for from_sq in PAWN_CAPTURE_TARGETS[by_color.opposite][sq.index]:
        piece = board[from_sq]
        if (
            piece is not None
            and piece.color == by_color
            and piece.piece_type == PieceType.PAWN
        ):
            return True

    for targets, ptype in (
        (KNIGHT_TARGETS, PieceType.KNIGHT),
        (KING_TARGETS, PieceType.KING),
    ):
        for from_sq in targets[sq.index]:
            piece = board[from_sq]
            if (
                piece is not None
                and piece.color == by_color
                and piece.piece_type == ptype
            ):
                return True

    for rays, attackers in (
        (BISHOP_RAYS, _DIAGONAL_ATTACKERS),
        (ROOK_RAYS, _STRAIGHT_ATTACKERS),
    ):
        for ray in rays[sq.index]:
            for to_sq in ray:
                piece = board[to_sq]
                if piece is None:
                    continue
                if piece.color == by_color and piece.piece_type in attackers:
                    return True
                break

    return False


def attacked_squares(position: Position, by_color: Color) -> frozenset[Square]:
    """Every square *by_color* attacks, occupied or not."""
    board = position.board
    attacked: set[Square] = set()
    for sq, piece in board.pieces(by_color):
        ptype = piece.piece_type
        if ptype == PieceType.PAWN:
            attacked.update(PAWN_CAPTURE_TARGETS[by_color][sq.index])
        elif ptype == PieceType.KNIGHT:
            attacked.update(KNIGHT_TARGETS[sq.index])
        elif ptype == PieceType.KING:
            attacked.update(KING_TARGETS[sq.index])
        else:
            for ray in SLIDER_RAYS[ptype][sq.index]:
                for to_sq in ray:
                    attacked.add(to_sq)
                    if board[to_sq] is not None:
                        break
    return frozenset(attacked)


def is_in_check(position: Position, color: Color) -> bool:
    """Is *color*'s king attacked by the opponent?"""
    king_sq = position.board.king_square(color)
    return is_square_attacked(position, king_sq, color.opposite)
