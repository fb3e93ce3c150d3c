"""Position — complete game state (board + metadata) as an immutable value."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from chers.core.board import Board
from chers.core.enums import CastlingRights, Color
from chers.core.piece import Piece
from chers.core.types import Square


@dataclass(frozen=True, slots=True)
class Position:
    """Full chess position: board + side to move + en passant + clocks.

    Positions are never mutated. Move execution derives a new position from
    an old one, which is what lets legality checks simulate a move and throw
    the result away.

    ``castling`` is reserved for castling support and always holds
    :attr:`CastlingRights.ALL`.
    """

    board: Board = field(default_factory=Board.initial)
    side_to_move: Color = Color.WHITE
    en_passant: Square | None = None
    halfmove_clock: int = 0
    fullmove_number: int = 1
    castling: CastlingRights = CastlingRights.ALL

    @classmethod
    def initial(cls) -> Position:
        """Standard starting position with White to move."""
        return cls()

    @property
    def opponent(self) -> Color:
        return self.side_to_move.opposite

    def piece_at(self, sq: Square) -> Piece | None:
        return self.board[sq]

    def evolve(self, **changes: object) -> Position:
        """Copy with the given fields replaced."""
        return replace(self, **changes)


STARTING_POSITION = Position.initial()
