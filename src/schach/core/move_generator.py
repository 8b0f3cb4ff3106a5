"""Pseudo-legal move generation.

Moves produced here respect piece geometry, blocking and capture rules but
ignore king safety; :mod:`schach.core.legality` narrows them further.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING

from schach.core.enums import Color, MoveFlag, PieceType
from schach.core.move import Move
from schach.core.piece import Piece
from schach.core.types import ALL_SQUARES, Square

if TYPE_CHECKING:
    from schach.core.board import Board
    from schach.core.position import Position


KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = BISHOP_DIRS + ROOK_DIRS

# Rank delta of a pawn step and the rank a pawn starts on, per color.
PAWN_FORWARD: dict[Color, int] = {Color.WHITE: 1, Color.BLACK: -1}
PAWN_START_RANK: dict[Color, int] = {Color.WHITE: 1, Color.BLACK: 6}


# -- Precomputed lookup tables ---------------------------------------------


def _build_targets(
    offsets: tuple[tuple[int, int], ...],
) -> tuple[tuple[Square, ...], ...]:
    targets: list[tuple[Square, ...]] = []
    for sq in ALL_SQUARES:
        moves = [sq.offset(df, dr) for df, dr in offsets]
        targets.append(tuple(to_sq for to_sq in moves if to_sq is not None))
    return tuple(targets)


def _build_rays(
    directions: tuple[tuple[int, int], ...],
) -> tuple[tuple[tuple[Square, ...], ...], ...]:
    rays_per_square: list[tuple[tuple[Square, ...], ...]] = []
    for sq in ALL_SQUARES:
        square_rays: list[tuple[Square, ...]] = []
        for df, dr in directions:
            ray: list[Square] = []
            to_sq = sq.offset(df, dr)
            while to_sq is not None:
                ray.append(to_sq)
                to_sq = to_sq.offset(df, dr)
            square_rays.append(tuple(ray))
        rays_per_square.append(tuple(square_rays))
    return tuple(rays_per_square)


def _build_pawn_captures() -> dict[Color, tuple[tuple[Square, ...], ...]]:
    tables: dict[Color, tuple[tuple[Square, ...], ...]] = {}
    for color, dr in PAWN_FORWARD.items():
        tables[color] = _build_targets(((-1, dr), (1, dr)))
    return tables


KNIGHT_TARGETS = _build_targets(KNIGHT_OFFSETS)
KING_TARGETS = _build_targets(KING_OFFSETS)
PAWN_CAPTURE_TARGETS = _build_pawn_captures()

BISHOP_RAYS = _build_rays(BISHOP_DIRS)
ROOK_RAYS = _build_rays(ROOK_DIRS)
QUEEN_RAYS = _build_rays(QUEEN_DIRS)

SLIDER_RAYS: dict[PieceType, tuple[tuple[tuple[Square, ...], ...], ...]] = {
    PieceType.BISHOP: BISHOP_RAYS,
    PieceType.ROOK: ROOK_RAYS,
    PieceType.QUEEN: QUEEN_RAYS,
}


# -- Public API -------------------------------------------------------------


def generate_pseudo_legal_moves(
    position: Position, color: Color | None = None
) -> Iterator[Move]:
    """Lazily yield pseudo-legal moves for *color* (default: side to move)."""
    if color is None:
        color = position.side_to_move
    board = position.board
    for sq, piece in list(board.pieces(color)):
        yield from piece_moves(board, sq, piece)


def pseudo_legal_moves_from(position: Position, sq: Square) -> Iterator[Move]:
    """Pseudo-legal moves of the piece standing on *sq* (empty if none)."""
    piece = position.board[sq]
    if piece is None:
        return iter(())
    return piece_moves(position.board, sq, piece)


def piece_moves(board: Board, sq: Square, piece: Piece) -> Iterator[Move]:
    """Dispatch to the generator for *piece*'s kind."""
    ptype = piece.piece_type
    if ptype == PieceType.PAWN:
        return _pawn_moves(board, sq, piece)
    if ptype == PieceType.KNIGHT:
        return _step_moves(board, sq, piece, KNIGHT_TARGETS[sq.index])
    if ptype == PieceType.KING:
        return _step_moves(board, sq, piece, KING_TARGETS[sq.index])
    if ptype in SLIDER_RAYS:
        return _sliding_moves(board, sq, piece, SLIDER_RAYS[ptype][sq.index])
    raise ValueError(f"Unknown piece type: {ptype!r}")


# -- Piece-specific generators (private) -----------------------------------


def _pawn_moves(board: Board, sq: Square, piece: Piece) -> Iterator[Move]:
    color = piece.color
    forward = PAWN_FORWARD[color]

    one_step = sq.offset(0, forward)
    if one_step is not None and board.is_empty(one_step):
        yield Move(sq, one_step, piece)
        if sq.rank == PAWN_START_RANK[color]:
            two_step = one_step.offset(0, forward)
            if two_step is not None and board.is_empty(two_step):
                yield Move(sq, two_step, piece, flag=MoveFlag.DOUBLE_PAWN)

    for cap_sq in PAWN_CAPTURE_TARGETS[color][sq.index]:
        target = board[cap_sq]
        if target is not None and target.color != color:
            yield Move(sq, cap_sq, piece, target)


def _step_moves(
    board: Board, sq: Square, piece: Piece, targets: tuple[Square, ...]
) -> Iterator[Move]:
    for to_sq in targets:
        target = board[to_sq]
        if target is None:
            yield Move(sq, to_sq, piece)
        elif target.color != piece.color:
            yield Move(sq, to_sq, piece, target)


def _sliding_moves(
    board: Board,
    sq: Square,
    piece: Piece,
    rays: tuple[tuple[Square, ...], ...],
) -> Iterator[Move]:
    for ray in rays:
        for to_sq in ray:
            target = board[to_sq]
            if target is None:
                yield Move(sq, to_sq, piece)
                continue
            if target.color != piece.color:
                yield Move(sq, to_sq, piece, target)
            break
