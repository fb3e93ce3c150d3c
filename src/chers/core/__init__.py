"""Core domain layer — pure chess rules with zero external dependencies.

Quick start::

    from chers.core import (
        STARTING_POSITION,
        Move,
        legal_targets,
        move_piece,
        parse_square,
        square_name,
    )

    pos, events = move_piece(
        STARTING_POSITION, Move(parse_square("e2"), parse_square("e4"))
    )
    for target in legal_targets(pos, parse_square("g8")):
        print(square_name(target))
"""

from chers.core.board import Board
from chers.core.check import attacking_pieces, find_king, is_in_check, is_mate
from chers.core.enums import CastlingRights, Color, GameResult, PieceType, PromotionType
from chers.core.errors import (
    GameOverError,
    IllegalMoveError,
    ItBelongsToOtherPlayerError,
    MissingKingError,
    MoveError,
    NoPieceToMoveError,
    RequiresPromotionError,
)
from chers.core.events import Capture, Check, Event, Mate, Promotion
from chers.core.execution import force_move_piece
from chers.core.legality import legal_moves, legal_targets, pseudo_legal_targets
from chers.core.move import Move
from chers.core.movement_patterns import patterns
from chers.core.piece import Piece
from chers.core.position import STARTING_POSITION, Position
from chers.core.rules import Rules, move_piece
from chers.core.types import (
    Square,
    SquareParseError,
    backward,
    diagonal,
    file_of,
    forward,
    horizontal,
    make_square,
    parse_square,
    rank_of,
    row_of,
    square_name,
    vertical,
)

__all__ = [
    # Enums / flags
    "CastlingRights",
    "Color",
    "GameResult",
    "PieceType",
    "PromotionType",
    # Types / geometry
    "Square",
    "SquareParseError",
    "backward",
    "diagonal",
    "file_of",
    "forward",
    "horizontal",
    "make_square",
    "parse_square",
    "rank_of",
    "row_of",
    "square_name",
    "vertical",
    # Domain objects
    "Board",
    "Move",
    "Piece",
    "Position",
    "Rules",
    "STARTING_POSITION",
    # Events
    "Capture",
    "Check",
    "Event",
    "Mate",
    "Promotion",
    # Errors
    "GameOverError",
    "IllegalMoveError",
    "ItBelongsToOtherPlayerError",
    "MissingKingError",
    "MoveError",
    "NoPieceToMoveError",
    "RequiresPromotionError",
    # Rules
    "attacking_pieces",
    "find_king",
    "force_move_piece",
    "is_in_check",
    "is_mate",
    "legal_moves",
    "legal_targets",
    "move_piece",
    "patterns",
    "pseudo_legal_targets",
]
