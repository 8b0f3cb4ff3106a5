"""Core domain layer — pure chess rules with zero external dependencies.

Quick start::

    from schach.core import Position, Rules, generate_legal_moves

    pos = Position.initial()
    for move in generate_legal_moves(pos):
        print(move)
    print(Rules.game_status(pos))
"""

from schach.core.attacks import attacked_squares, is_in_check, is_square_attacked
from schach.core.board import Board
from schach.core.enums import Color, MoveFlag, PieceType, StatusKind
from schach.core.errors import (
    ChessError,
    GameOverError,
    IllegalMoveError,
    InvalidPositionError,
    InvariantViolation,
    MoveError,
)
from schach.core.legality import (
    generate_legal_moves,
    is_legal,
    legal_moves_from,
    match_legal_move,
)
from schach.core.move import Move
from schach.core.move_generator import (
    generate_pseudo_legal_moves,
    pseudo_legal_moves_from,
)
from schach.core.piece import Piece
from schach.core.position import Position
from schach.core.rules import GameStatus, Rules
from schach.core.types import ALL_SQUARES, Square, make_square, parse_square

__all__ = [
    # Enums
    "Color",
    "MoveFlag",
    "PieceType",
    "StatusKind",
    # Types / helpers
    "ALL_SQUARES",
    "Square",
    "make_square",
    "parse_square",
    # Domain objects
    "Board",
    "GameStatus",
    "Move",
    "Piece",
    "Position",
    "Rules",
    # Move generation / attacks
    "attacked_squares",
    "generate_legal_moves",
    "generate_pseudo_legal_moves",
    "is_in_check",
    "is_legal",
    "is_square_attacked",
    "legal_moves_from",
    "match_legal_move",
    "pseudo_legal_moves_from",
    # Errors
    "ChessError",
    "GameOverError",
    "IllegalMoveError",
    "InvalidPositionError",
    "InvariantViolation",
    "MoveError",
]
