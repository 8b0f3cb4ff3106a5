"""Board - piece placement on an 8x8 board."""

from __future__ import annotations

from collections.abc import Iterator

from schach.core.enums import Color, PieceType
from schach.core.errors import InvariantViolation
from schach.core.piece import Piece
from schach.core.types import ALL_SQUARES, Square, make_square

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """Mutable 64-square board with a king-square cache."""

    __slots__ = ("_squares", "_king_squares")

    def __init__(self) -> None:
        self._squares: list[Piece | None] = [None] * 64
        # [color] -> king square cache (None if king missing).
        self._king_squares: list[Square | None] = [None, None]

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._squares[sq.index]

    def occupant_at(self, sq: Square) -> Piece | None:
        """Piece on *sq*, or ``None`` for an empty square."""
        return self._squares[sq.index]

    def is_empty(self, sq: Square) -> bool:
        return self._squares[sq.index] is None

    def place(self, sq: Square, piece: Piece) -> None:
        """Put *piece* on *sq*, replacing any occupant."""
        self.clear_square(sq)
        self._squares[sq.index] = piece
        if piece.piece_type == PieceType.KING:
            self._king_squares[int(piece.color)] = sq

    def clear_square(self, sq: Square) -> None:
        old_piece = self._squares[sq.index]
        if old_piece is None:
            return
        self._squares[sq.index] = None
        color_idx = int(old_piece.color)
        if (
            old_piece.piece_type == PieceType.KING
            and self._king_squares[color_idx] == sq
        ):
            self._king_squares[color_idx] = None

    # -- Query helpers ------------------------------------------------------

    def pieces(self, color: Color) -> Iterator[tuple[Square, Piece]]:
        """``(square, piece)`` pairs for every piece of *color*."""
        for index, piece in enumerate(self._squares):
            if piece is not None and piece.color == color:
                yield ALL_SQUARES[index], piece

    def king_square(self, color: Color) -> Square:
        """Return the single king square for *color*."""
        sq = self._king_squares[int(color)]
        if sq is None:
            raise InvariantViolation(f"No {color.name} king on board")
        return sq

    def king_count(self, color: Color) -> int:
        king = Piece(color, PieceType.KING)
        return sum(1 for piece in self._squares if piece == king)

    # -- Copying ------------------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._squares = self._squares.copy()
        b._king_squares = self._king_squares.copy()
        return b

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        for f in range(8):
            b.place(make_square(f, 1), Piece(Color.WHITE, PieceType.PAWN))
            b.place(make_square(f, 6), Piece(Color.BLACK, PieceType.PAWN))

        for f, pt in enumerate(_BACK_RANK):
            b.place(make_square(f, 0), Piece(Color.WHITE, pt))
            b.place(make_square(f, 7), Piece(Color.BLACK, pt))
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank in range(7, -1, -1):
            row = []
            for file in range(8):
                p = self[make_square(file, rank)]
                row.append(str(p) if p else ".")
            rows.append(f"{rank + 1} {' '.join(row)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
