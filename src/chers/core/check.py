"""Check and mate detection.

Both tests work from pseudo-legal patterns and forced execution only. Using
the legality filter here would recurse, since that filter asks this module
whether a simulated move leaves the mover in check.
"""

from __future__ import annotations

from chers.core.board import Board
from chers.core.enums import Color
from chers.core.execution import simulate
from chers.core.movement_patterns import patterns
from chers.core.piece import Piece
from chers.core.position import Position
from chers.core.types import Square


def find_king(board: Board, color: Color) -> Square:
    """Square of *color*'s king; raises :class:`MissingKingError` if absent."""
    return board.king_square(color)


def attacking_pieces(
    position: Position,
    color: Color | None = None,
) -> list[tuple[Square, Piece]]:
    """Opposing pieces that attack the king of *color* (default: side to move).

    An empty list means the king is not in check.
    """
    defender = position.side_to_move if color is None else color
    board = position.board
    king_sq = find_king(board, defender)

    return [
        (sq, piece)
        for sq, piece in board.pieces(defender.opposite)
        if king_sq in patterns(board, sq, piece, position.en_passant)
    ]


def is_in_check(position: Position) -> bool:
    return bool(attacking_pieces(position))


def is_mate(position: Position) -> bool:
    """True when no pseudo-legal move of the side to move escapes the attack.

    Only meaningful for a position already in check: without check the same
    search answers "has no legal move at all".
    """
    mover = position.side_to_move
    board = position.board

    for from_sq, piece in board.pieces(mover):
        for to_sq in patterns(board, from_sq, piece, position.en_passant):
            for resulting in simulate(position, from_sq, to_sq):
                if not attacking_pieces(resulting, mover):
                    return False
    return True
