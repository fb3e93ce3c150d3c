"""Exceptions raised by move execution and the rule layer."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chers.core.types import Square, format_squares, square_name

if TYPE_CHECKING:
    from chers.core.move import Move
    from chers.core.piece import Piece


class MoveError(ValueError):
    """A requested move was rejected; the position is left untouched."""


class NoPieceToMoveError(MoveError):
    def __init__(self, square: Square) -> None:
        super().__init__(f"No piece to move on {square_name(square)}")
        self.square = square


class ItBelongsToOtherPlayerError(MoveError):
    def __init__(self, square: Square, piece: Piece) -> None:
        super().__init__(
            f"Piece {piece} on {square_name(square)} belongs to {piece.color}"
        )
        self.square = square
        self.piece = piece


class IllegalMoveError(MoveError):
    """The target is not a legal destination; ``legal`` lists the ones that are."""

    def __init__(self, attempted: Move, legal: list[Square]) -> None:
        alternatives = format_squares(legal) or "none"
        super().__init__(f"Illegal move {attempted} (legal targets: {alternatives})")
        self.attempted = attempted
        self.legal = legal


class RequiresPromotionError(MoveError):
    def __init__(self, move: Move) -> None:
        super().__init__(f"Move {move} reaches the last rank and needs a promotion")
        self.move = move


class MissingKingError(ValueError):
    """The position has no king for the side being examined."""


class GameOverError(RuntimeError):
    """A move was submitted after the game already ended."""
