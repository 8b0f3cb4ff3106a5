"""Position — board, side to move and the last-move record."""

from __future__ import annotations

from collections.abc import Mapping

from schach.core.attacks import is_in_check
from schach.core.board import Board
from schach.core.enums import Color, PieceType
from schach.core.errors import InvalidPositionError
from schach.core.move import Move
from schach.core.piece import Piece
from schach.core.types import Square

# A pawn can never stand on its own side's back rank.
_HOME_RANK: dict[Color, int] = {Color.WHITE: 0, Color.BLACK: 7}


class Position:
    """Full rules-engine position: board + side to move + last move.

    The last move is kept so a just-played two-square pawn advance can be
    recognised.  Moves are applied in place with :meth:`apply`; what-if
    questions use :meth:`after`, which works on a private copy.
    """

    __slots__ = ("board", "side_to_move", "last_move")

    def __init__(
        self,
        board: Board | None = None,
        side_to_move: Color = Color.WHITE,
        last_move: Move | None = None,
    ) -> None:
        self.board = board if board is not None else Board.initial()
        self.side_to_move = side_to_move
        self.last_move = last_move

    # ── Construction ─────────────────────────────────────────────────────

    @classmethod
    def initial(cls) -> Position:
        """Standard starting position, white to move."""
        return cls(Board.initial(), Color.WHITE)

    @classmethod
    def from_pieces(
        cls,
        placement: Mapping[Square, Piece],
        side_to_move: Color = Color.WHITE,
    ) -> Position:
        """Rebuild a position from a square → piece mapping.

        Raises :class:`InvalidPositionError` unless each side has exactly one
        king, no pawn stands behind its starting rank and the side that just
        moved is not left in check.
        """
        board = Board()
        for sq, piece in placement.items():
            is_pawn = piece.piece_type == PieceType.PAWN
            if is_pawn and sq.rank == _HOME_RANK[piece.color]:
                raise InvalidPositionError(f"Pawn on its home rank: {sq.name}")
            board.place(sq, piece)
        for color in Color:
            count = board.king_count(color)
            if count != 1:
                raise InvalidPositionError(
                    f"Expected one {color.name} king, found {count}"
                )
        position = cls(board, side_to_move)
        if is_in_check(position, side_to_move.opposite):
            raise InvalidPositionError(
                f"{side_to_move.opposite} king is in check with {side_to_move} to move"
            )
        return position

    # ── Queries ──────────────────────────────────────────────────────────

    def occupant_at(self, sq: Square) -> Piece | None:
        return self.board.occupant_at(sq)

    @property
    def last_move_was_double_pawn_push(self) -> bool:
        return self.last_move is not None and self.last_move.is_double_pawn_push

    # ── Move application ─────────────────────────────────────────────────

    def apply(self, move: Move) -> None:
        """Apply *move* in place and pass the turn.

        No legality check is done here; callers validate first.
        """
        self.board.clear_square(move.from_sq)
        self.board.place(move.to_sq, move.piece)
        self.side_to_move = self.side_to_move.opposite
        self.last_move = move

    def after(self, move: Move) -> Position:
        """A new position with *move* applied; ``self`` is left untouched."""
        scratch = self.copy()
        scratch.apply(move)
        return scratch

    # ── Utilities ────────────────────────────────────────────────────────

    def copy(self) -> Position:
        """Deep copy; the board is never shared."""
        return Position(self.board.copy(), self.side_to_move, self.last_move)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return (
            self.board == other.board
            and self.side_to_move == other.side_to_move
            and self.last_move == other.last_move
        )

    def __repr__(self) -> str:
        return f"{self.board!r}\n{self.side_to_move} to move"
