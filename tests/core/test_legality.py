"""Tests for the legal move filter, including perft move-count checks."""

import pytest

from chers.core.enums import Color, PromotionType
from chers.core.execution import force_move_piece
from chers.core.legality import legal_moves, legal_targets, pseudo_legal_targets
from chers.core.move import Move
from chers.core.position import STARTING_POSITION, Position
from chers.core.rules import move_piece
from chers.core.types import (
    A5, A6, A7, A8, B5, B6, D1, E1, E2, E3, E4, E5, E6, E7, F1, G2, G3,
)

# Well-known perft reference position without castling.
ROOK_ENDGAME = "8/2p5/3p4/KP5r/1R3p1k/8/4P1P1/8"


def perft(position: Position, depth: int) -> int:
    if depth == 0:
        return 1
    return sum(
        perft(force_move_piece(position, move)[0], depth - 1)
        for move in legal_moves(position)
    )


class TestLegalTargets:
    def test_en_passant_is_legal(self, make_position) -> None:
        pos = make_position("4k3/p7/8/1P6/8/8/8/4K3", side_to_move=Color.BLACK)
        pos, _ = move_piece(pos, Move(A7, A5))
        assert pos.en_passant == A6
        assert set(legal_targets(pos, B5)) == {A6, B6}

        after, _ = move_piece(pos, Move(B5, A6))
        assert after.board[A5] is None

    def test_king_avoids_attacked_squares(self, make_position) -> None:
        pos = make_position("4k3/8/8/8/8/8/r7/4K3")
        assert set(legal_targets(pos, E1)) == {D1, F1}

    def test_pinned_piece_cannot_move(self, make_position) -> None:
        pos = make_position("4k3/4r3/8/8/8/8/4B3/4K3")
        assert pseudo_legal_targets(pos, E2) != []
        assert legal_targets(pos, E2) == []

    def test_pinned_piece_may_capture_pinner(self, make_position) -> None:
        pos = make_position("4k3/4r3/8/8/8/8/4R3/4K3")
        assert set(legal_targets(pos, E2)) == {E3, E4, E5, E6, E7}

    def test_only_block_escapes_check(self, make_position) -> None:
        pos = make_position("rnb1kbnr/pppp1ppp/8/4P3/7q/8/PPPPP1PP/RNBQKBNR")
        assert legal_targets(pos, E1) == []
        assert legal_targets(pos, G2) == [G3]

    def test_empty_and_opponent_squares_have_no_targets(self) -> None:
        assert legal_targets(STARTING_POSITION, E4) == []
        assert legal_targets(STARTING_POSITION, E7) == []

    def test_legal_is_subset_of_pseudo_legal(self, make_position) -> None:
        pos = make_position("r3k2r/p1ppqpb1/bn2pnp1/3PN3/1p2P3/2N2Q1p/PPPBBPPP/R3K2R")
        for sq, _ in pos.board.pieces(pos.side_to_move):
            assert set(legal_targets(pos, sq)) <= set(pseudo_legal_targets(pos, sq))


class TestLegalMoves:
    def test_starting_position_has_twenty(self) -> None:
        assert len(legal_moves(STARTING_POSITION)) == 20

    def test_promotion_expands_to_every_kind(self, make_position) -> None:
        pos = make_position("4k3/P7/8/8/8/8/8/4K3")
        moves = legal_moves(pos)
        assert len(moves) == 9
        assert {m.promotion for m in moves if m.to_sq == A8} == set(PromotionType)

    def test_no_moves_when_mated(self, make_position) -> None:
        pos = make_position("R2k4/8/3K4/8/8/8/8/8", side_to_move=Color.BLACK)
        assert legal_moves(pos) == []


class TestPerft:
    @pytest.mark.parametrize(("depth", "nodes"), [(1, 20), (2, 400)])
    def test_starting_position(self, depth: int, nodes: int) -> None:
        assert perft(STARTING_POSITION, depth) == nodes

    @pytest.mark.slow
    def test_starting_position_depth_three(self) -> None:
        assert perft(STARTING_POSITION, 3) == 8902

    @pytest.mark.parametrize(("depth", "nodes"), [(1, 14), (2, 191)])
    def test_rook_endgame(self, make_position, depth: int, nodes: int) -> None:
        assert perft(make_position(ROOK_ENDGAME), depth) == nodes

    @pytest.mark.slow
    def test_rook_endgame_depth_three(self, make_position) -> None:
        assert perft(make_position(ROOK_ENDGAME), 3) == 2812
