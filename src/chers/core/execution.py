"""Forced move execution: apply a move without asking whether it is legal.

This is the simulation primitive used by the legality filter and the mate
detector. The validated entry point for callers is
:func:`chers.core.rules.move_piece`, which wraps the same transition with a
legality check before and check/mate classification after.
"""

from __future__ import annotations

from chers.core.enums import Color, PieceType, PromotionType
from chers.core.errors import (
    ItBelongsToOtherPlayerError,
    NoPieceToMoveError,
    RequiresPromotionError,
)
from chers.core.events import Capture, Event, Promotion
from chers.core.move import Move
from chers.core.piece import Piece
from chers.core.position import Position
from chers.core.types import Square, backward, row_of

# Promotion kinds tried when a simulated pawn move needs one. Queen and
# knight together cover every attack pattern a promoted piece can have.
PROMOTION_PROBES: tuple[PromotionType, ...] = (
    PromotionType.QUEEN,
    PromotionType.KNIGHT,
)

_LAST_ROW: dict[Color, int] = {Color.WHITE: 0, Color.BLACK: 7}


def requires_promotion(piece: Piece, to_sq: Square) -> bool:
    """Whether *piece* moving onto *to_sq* reaches its promotion row."""
    return (
        piece.piece_type == PieceType.PAWN and row_of(to_sq) == _LAST_ROW[piece.color]
    )


def mover_of(position: Position, from_sq: Square) -> Piece:
    """Piece on *from_sq*, checked to belong to the side to move."""
    moved = position.board[from_sq]
    if moved is None:
        raise NoPieceToMoveError(from_sq)
    if moved.color != position.side_to_move:
        raise ItBelongsToOtherPlayerError(from_sq, moved)
    return moved


def force_move_piece(position: Position, move: Move) -> tuple[Position, list[Event]]:
    """Apply *move* unchecked; returns the new position and its events.

    Raises :class:`NoPieceToMoveError`, :class:`ItBelongsToOtherPlayerError`
    or :class:`RequiresPromotionError`; never rejects a move as illegal.
    """
    moved = mover_of(position, move.from_sq)
    board = position.board
    events: list[Event] = []
    changes: dict[Square, Piece | None] = {move.from_sq: None}

    captured = board[move.to_sq]
    if captured is not None:
        events.append(Capture(at=move.to_sq, captured=captured, by=moved))
    elif moved.piece_type == PieceType.PAWN and move.to_sq == position.en_passant:
        # The passing pawn stands one row behind the target square.
        passed_sq = backward(move.to_sq, moved.color, 1)
        captured = board[passed_sq] if passed_sq is not None else None
        if passed_sq is not None and captured is not None:
            changes[passed_sq] = None
            events.append(Capture(at=move.to_sq, captured=captured, by=moved))

    placed = moved
    if requires_promotion(moved, move.to_sq):
        if move.promotion is None:
            raise RequiresPromotionError(move)
        placed = Piece(moved.color, move.promotion.piece_type)
        events.append(Promotion(to=move.promotion))
    changes[move.to_sq] = placed

    new_position = _next_turn(position, moved, move, did_capture=captured is not None)
    return new_position.evolve(board=board.updated(changes)), events


def simulate(position: Position, from_sq: Square, to_sq: Square) -> list[Position]:
    """Positions resulting from forcing ``from_sq → to_sq``.

    A single position for ordinary moves; one per promotion probe when the
    move needs a promotion kind.
    """
    try:
        resulting, _ = force_move_piece(position, Move(from_sq, to_sq))
    except RequiresPromotionError:
        return [
            force_move_piece(position, Move(from_sq, to_sq, kind))[0]
            for kind in PROMOTION_PROBES
        ]
    return [resulting]


def _next_turn(
    position: Position,
    moved: Piece,
    move: Move,
    *,
    did_capture: bool,
) -> Position:
    is_pawn = moved.piece_type == PieceType.PAWN

    # En passant target for the opponent: the square the pawn passed over.
    en_passant: Square | None = None
    if is_pawn and abs(row_of(move.from_sq) - row_of(move.to_sq)) == 2:
        en_passant = backward(move.to_sq, moved.color, 1)

    return position.evolve(
        side_to_move=position.side_to_move.opposite,
        en_passant=en_passant,
        halfmove_clock=0 if is_pawn or did_capture else position.halfmove_clock + 1,
        fullmove_number=(
            position.fullmove_number + 1
            if position.side_to_move == Color.BLACK
            else position.fullmove_number
        ),
    )
