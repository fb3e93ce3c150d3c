"""Legal move filtering: pseudo-legal targets minus self-check."""

from __future__ import annotations

from chers.core.check import attacking_pieces
from chers.core.enums import PromotionType
from chers.core.execution import requires_promotion, simulate
from chers.core.move import Move
from chers.core.movement_patterns import patterns
from chers.core.position import Position
from chers.core.types import Square


def pseudo_legal_targets(position: Position, from_sq: Square) -> list[Square]:
    """Pattern targets of the side to move's piece on *from_sq*.

    Empty when the square is empty or holds an opposing piece.
    """
    piece = position.board[from_sq]
    if piece is None or piece.color != position.side_to_move:
        return []
    return patterns(position.board, from_sq, piece, position.en_passant)


def legal_targets(position: Position, from_sq: Square) -> list[Square]:
    """All squares the piece on *from_sq* may legally move to."""
    mover = position.side_to_move
    legal: list[Square] = []

    for to_sq in pseudo_legal_targets(position, from_sq):
        # A promotion is kept if any probed kind leaves the king safe.
        if any(
            not attacking_pieces(resulting, mover)
            for resulting in simulate(position, from_sq, to_sq)
        ):
            legal.append(to_sq)
    return legal


def legal_moves(position: Position) -> list[Move]:
    """Every legal move of the side to move, one per promotion kind."""
    board = position.board
    moves: list[Move] = []

    for from_sq, piece in board.pieces(position.side_to_move):
        for to_sq in legal_targets(position, from_sq):
            if requires_promotion(piece, to_sq):
                moves.extend(Move(from_sq, to_sq, kind) for kind in PromotionType)
            else:
                moves.append(Move(from_sq, to_sq))
    return moves
