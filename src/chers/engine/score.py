"""Material scoring based on Shannon's classic piece values.

See C. E. Shannon, "Programming a Computer for Playing Chess" (1950).
"""

from __future__ import annotations

from chers.core.enums import Color, PieceType
from chers.core.position import Position

SHANNON_VALUES: dict[PieceType, int] = {
    PieceType.KING: 200,
    PieceType.QUEEN: 9,
    PieceType.ROOK: 5,
    PieceType.BISHOP: 3,
    PieceType.KNIGHT: 3,
    PieceType.PAWN: 1,
}


def shannon_value(position: Position) -> tuple[int, int]:
    """Material of (white, black)."""
    totals = {Color.WHITE: 0, Color.BLACK: 0}
    for _, piece in position.board.pieces():
        totals[piece.color] += SHANNON_VALUES[piece.piece_type]
    return totals[Color.WHITE], totals[Color.BLACK]


def material_balance(position: Position) -> int:
    """White material minus black material."""
    white, black = shannon_value(position)
    return white - black
