"""Tests for legal move filtering."""

from schach.core.enums import Color, MoveFlag, PieceType
from schach.core.legality import (
    generate_legal_moves,
    is_legal,
    leaves_king_safe,
    legal_moves_from,
    match_legal_move,
)
from schach.core.move import Move
from schach.core.piece import Piece
from schach.core.position import Position
from schach.core.types import D1, D2, D3, D5, E1, E2, E3, E4, E5, E6, E7, E8, F1, F2

WP = Piece(Color.WHITE, PieceType.PAWN)
E2E4 = Move(E2, E4, WP, flag=MoveFlag.DOUBLE_PAWN)


class TestStartPosition:
    def test_twenty_legal_moves(self) -> None:
        assert len(generate_legal_moves(Position.initial())) == 20

    def test_twenty_black_replies_after_e4(self) -> None:
        pos = Position.initial().after(E2E4)
        moves = generate_legal_moves(pos)
        assert len(moves) == 20
        assert all(m.piece.color == Color.BLACK for m in moves)

    def test_generation_is_deterministic(self) -> None:
        pos = Position.initial().after(E2E4)
        assert set(generate_legal_moves(pos)) == set(generate_legal_moves(pos))

    def test_generation_does_not_mutate(self) -> None:
        pos = Position.initial()
        snapshot = pos.copy()
        generate_legal_moves(pos)
        legal_moves_from(pos, E2)
        assert pos == snapshot


class TestKingSafety:
    def test_pinned_bishop_cannot_move(self, make_position) -> None:
        pos = make_position("Ke1", "Be2", "re8", "ka8")
        assert legal_moves_from(pos, E2) == []

    def test_pinned_rook_moves_along_pin(self, make_position) -> None:
        pos = make_position("Ke1", "Re2", "re8", "ka8")
        targets = {m.to_sq for m in legal_moves_from(pos, E2)}
        assert targets == {E3, E4, E5, E6, E7, E8}

    def test_king_cannot_step_into_attack(self, make_position) -> None:
        pos = make_position("Ke1", "rd8", "ka8")
        targets = {m.to_sq for m in legal_moves_from(pos, E1)}
        assert targets == {E2, F1, F2}

    def test_only_escape_is_capturing_checker(self, make_position) -> None:
        pos = make_position("Ke1", "qe2", "ka8")
        moves = generate_legal_moves(pos)
        assert len(moves) == 1
        assert moves[0].to_sq == E2
        assert moves[0].captured == Piece(Color.BLACK, PieceType.QUEEN)

    def test_must_answer_check(self, make_position) -> None:
        pos = make_position("Ke1", "Pa2", "re8", "ka8")
        moves = generate_legal_moves(pos)
        assert moves
        assert all(m.piece.piece_type == PieceType.KING for m in moves)
        assert {m.to_sq for m in moves} == {D1, D2, F1, F2}

    def test_leaves_king_safe(self, make_position) -> None:
        pos = make_position("Ke1", "Be2", "re8", "ka8")
        bishop = Piece(Color.WHITE, PieceType.BISHOP)
        assert not leaves_king_safe(pos, Move(E2, D3, bishop))
        assert leaves_king_safe(pos, Move(E1, D1, Piece(Color.WHITE, PieceType.KING)))


class TestIsLegal:
    def test_generated_moves_are_legal(self) -> None:
        pos = Position.initial()
        assert all(is_legal(pos, m) for m in generate_legal_moves(pos))

    def test_wrong_color(self) -> None:
        pos = Position.initial()
        black_pawn = Piece(Color.BLACK, PieceType.PAWN)
        assert not is_legal(pos, Move(E7, E5, black_pawn, flag=MoveFlag.DOUBLE_PAWN))

    def test_malformed_geometry(self) -> None:
        assert not is_legal(Position.initial(), Move(E2, E5, WP))

    def test_flag_is_derived(self) -> None:
        pos = Position.initial()
        assert is_legal(pos, Move(E2, E4, WP))
        assert match_legal_move(pos, Move(E2, E4, WP)) == E2E4

    def test_captured_piece_may_be_omitted(self, make_position) -> None:
        pos = make_position("Ke1", "Pe4", "pd5", "ke8")
        black_pawn = Piece(Color.BLACK, PieceType.PAWN)
        legal = match_legal_move(pos, Move(E4, D5, WP))
        assert legal is not None
        assert legal.captured == black_pawn

    def test_contradicting_capture(self, make_position) -> None:
        pos = make_position("Ke1", "Pe4", "pd5", "ke8")
        knight = Piece(Color.BLACK, PieceType.KNIGHT)
        assert match_legal_move(pos, Move(E4, D5, WP, captured=knight)) is None
        assert not is_legal(pos, Move(E4, E5, WP, captured=knight))

    def test_mismatched_piece(self) -> None:
        knight = Piece(Color.WHITE, PieceType.KNIGHT)
        assert not is_legal(Position.initial(), Move(E2, E3, knight))

    def test_empty_or_enemy_origin(self) -> None:
        pos = Position.initial()
        assert legal_moves_from(pos, E4) == []
        assert legal_moves_from(pos, E7) == []
