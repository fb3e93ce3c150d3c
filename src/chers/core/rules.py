"""High-level chess rules: validated move execution, check, mate, stalemate."""

from __future__ import annotations

import logging

from chers.core.check import attacking_pieces, is_mate
from chers.core.enums import Color, GameResult
from chers.core.errors import IllegalMoveError
from chers.core.events import Check, Event, Mate
from chers.core.execution import force_move_piece, mover_of
from chers.core.legality import legal_moves, legal_targets
from chers.core.move import Move
from chers.core.position import Position

_LOGGER = logging.getLogger(__name__)


def move_piece(position: Position, move: Move) -> tuple[Position, list[Event]]:
    """Apply *move* if it is legal.

    Returns the new position and the ordered events (captures, promotion,
    then check and mate for the side now to move). Raises a
    :class:`~chers.core.errors.MoveError` subclass when the move is rejected.
    """
    mover_of(position, move.from_sq)

    legal = legal_targets(position, move.from_sq)
    if move.to_sq not in legal:
        _LOGGER.debug("Rejected illegal move %s", move)
        raise IllegalMoveError(move, legal)

    new_position, events = force_move_piece(position, move)

    checking = attacking_pieces(new_position)
    if checking:
        events.append(Check(by=tuple(checking)))
        if is_mate(new_position):
            _LOGGER.debug("%s is mated after %s", new_position.side_to_move, move)
            events.append(Mate())

    return new_position, events


class Rules:
    """Static rule-checker that operates on a :class:`Position`."""

    # Product policy: castling and the fifty-move / repetition draws are not
    # enforced; the only drawn outcome is stalemate.

    @staticmethod
    def is_in_check(position: Position) -> bool:
        return bool(attacking_pieces(position))

    @staticmethod
    def is_checkmate(position: Position) -> bool:
        return Rules.is_in_check(position) and is_mate(position)

    @staticmethod
    def is_stalemate(position: Position) -> bool:
        if Rules.is_in_check(position):
            return False
        return len(legal_moves(position)) == 0

    @staticmethod
    def game_result(position: Position) -> GameResult:
        """Determine the current game result."""
        if Rules.is_checkmate(position):
            return (
                GameResult.BLACK_WINS
                if position.side_to_move == Color.WHITE
                else GameResult.WHITE_WINS
            )
        if Rules.is_stalemate(position):
            return GameResult.DRAW
        return GameResult.IN_PROGRESS
