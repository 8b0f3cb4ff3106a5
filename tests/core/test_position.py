"""Tests for Position construction and move application."""

import pytest

from schach.core.enums import Color, MoveFlag, PieceType
from schach.core.errors import InvalidPositionError
from schach.core.move import Move
from schach.core.piece import Piece
from schach.core.position import Position
from schach.core.types import A1, A2, A8, E1, E2, E3, E4, E8, H8

WP = Piece(Color.WHITE, PieceType.PAWN)
WK = Piece(Color.WHITE, PieceType.KING)
BK = Piece(Color.BLACK, PieceType.KING)
BP = Piece(Color.BLACK, PieceType.PAWN)
WR = Piece(Color.WHITE, PieceType.ROOK)

E2E4 = Move(E2, E4, WP, flag=MoveFlag.DOUBLE_PAWN)


class TestInitial:
    def test_white_to_move(self) -> None:
        pos = Position.initial()
        assert pos.side_to_move == Color.WHITE
        assert pos.last_move is None
        assert not pos.last_move_was_double_pawn_push

    def test_occupant_at(self) -> None:
        pos = Position.initial()
        assert pos.occupant_at(E2) == WP
        assert pos.occupant_at(E4) is None


class TestApply:
    def test_double_push_recorded(self) -> None:
        pos = Position.initial()
        pos.apply(E2E4)
        assert pos.occupant_at(E2) is None
        assert pos.occupant_at(E4) == WP
        assert pos.side_to_move == Color.BLACK
        assert pos.last_move == E2E4
        assert pos.last_move_was_double_pawn_push

    def test_single_push_not_flagged(self) -> None:
        pos = Position.initial()
        pos.apply(Move(E2, E3, WP))
        assert not pos.last_move_was_double_pawn_push

    def test_after_leaves_original_untouched(self) -> None:
        pos = Position.initial()
        snapshot = pos.copy()
        nxt = pos.after(E2E4)
        assert pos == snapshot
        assert nxt != pos
        assert nxt.occupant_at(E4) == WP

    def test_copy_does_not_share_board(self) -> None:
        pos = Position.initial()
        dup = pos.copy()
        dup.apply(E2E4)
        assert pos.occupant_at(E2) == WP

    def test_repr_mentions_side(self) -> None:
        assert repr(Position.initial()).endswith("White to move")


class TestFromPieces:
    def test_builds_position(self) -> None:
        pos = Position.from_pieces({E1: WK, E8: BK, E4: WP}, Color.BLACK)
        assert pos.side_to_move == Color.BLACK
        assert pos.occupant_at(E4) == WP
        assert pos.board.king_square(Color.BLACK) == E8
        assert pos.last_move is None

    def test_missing_king(self) -> None:
        with pytest.raises(InvalidPositionError, match="BLACK"):
            Position.from_pieces({E1: WK})

    def test_two_kings(self) -> None:
        with pytest.raises(InvalidPositionError, match="found 2"):
            Position.from_pieces({E1: WK, A1: WK, E8: BK})

    def test_white_pawn_on_first_rank(self) -> None:
        with pytest.raises(InvalidPositionError, match="a1"):
            Position.from_pieces({E1: WK, E8: BK, A1: WP})

    def test_black_pawn_on_eighth_rank(self) -> None:
        with pytest.raises(InvalidPositionError, match="a8"):
            Position.from_pieces({E1: WK, E8: BK, A8: BP})

    def test_pawn_on_far_rank_allowed(self) -> None:
        pos = Position.from_pieces({E1: WK, E8: BK, H8: WP})
        assert pos.occupant_at(H8) == WP

    def test_side_that_just_moved_in_check(self) -> None:
        with pytest.raises(InvalidPositionError, match="Black king is in check"):
            Position.from_pieces({E1: WK, E8: BK, E2: WR}, Color.WHITE)

    def test_adjacent_kings(self) -> None:
        with pytest.raises(InvalidPositionError):
            Position.from_pieces({E1: WK, E2: BK}, Color.BLACK)

    def test_side_to_move_may_be_in_check(self) -> None:
        pos = Position.from_pieces({E1: WK, E8: BK, E2: WR}, Color.BLACK)
        assert pos.side_to_move == Color.BLACK

    def test_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            Position.from_pieces({A2: WP})
