"""Game management layer — state machine and click-driven turn flow.

Quick start::

    from schach.core import parse_square
    from schach.game import GameState

    game = GameState()
    move = game.find_legal_move(parse_square("e2"), parse_square("e4"))
    game.apply_move(move)
    print(game.status())
"""

from schach.game.selection import SelectionController, SelectionEvents, SelectionPhase
from schach.game.state import GameState, MoveRecord

__all__ = [
    "GameState",
    "MoveRecord",
    "SelectionController",
    "SelectionEvents",
    "SelectionPhase",
]
