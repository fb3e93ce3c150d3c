"""Pseudo-legal movement patterns per piece type.

Every generator returns the on-board squares a piece standing on ``from_sq``
could move to by its movement rule: empty squares and squares holding an
opposing piece, never a square holding an own piece. Whether the move would
leave the own king attacked is not considered here; the legality filter and
the check detector build on top of these functions, never the other way
around.
"""

from __future__ import annotations

from collections.abc import Callable

from chers.core.board import Board
from chers.core.enums import Color, PieceType
from chers.core.piece import Piece
from chers.core.types import Square, diagonal, forward, horizontal, row_of

KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))

# Row a pawn of each color starts on (double step allowed from here).
PAWN_START_ROW: dict[Color, int] = {Color.WHITE: 6, Color.BLACK: 1}


# -- Precomputed lookup tables ---------------------------------------------


def _build_targets(
    offsets: tuple[tuple[int, int], ...],
) -> tuple[tuple[Square, ...], ...]:
    targets: list[tuple[Square, ...]] = []
    for sq in range(64):
        moves = (diagonal(sq, dx, dy) for dx, dy in offsets)
        targets.append(tuple(to_sq for to_sq in moves if to_sq is not None))
    return tuple(targets)


def _build_rays(
    directions: tuple[tuple[int, int], ...],
) -> tuple[tuple[tuple[Square, ...], ...], ...]:
    rays_per_square: list[tuple[tuple[Square, ...], ...]] = []
    for sq in range(64):
        square_rays: list[tuple[Square, ...]] = []
        for dx, dy in directions:
            ray: list[Square] = []
            step = diagonal(sq, dx, dy)
            while step is not None:
                ray.append(step)
                step = diagonal(step, dx, dy)
            square_rays.append(tuple(ray))
        rays_per_square.append(tuple(square_rays))
    return tuple(rays_per_square)


_KNIGHT_TARGETS = _build_targets(KNIGHT_OFFSETS)
_KING_TARGETS = _build_targets(KING_OFFSETS)
_BISHOP_RAYS = _build_rays(BISHOP_DIRS)
_ROOK_RAYS = _build_rays(ROOK_DIRS)


def _can_land_on(board: Board, sq: Square, color: Color) -> bool:
    target = board[sq]
    return target is None or target.color != color


def _expand(
    board: Board,
    color: Color,
    rays: tuple[tuple[Square, ...], ...],
) -> list[Square]:
    """Walk each ray until the first occupied square (kept if capturable)."""
    moves: list[Square] = []
    for ray in rays:
        for to_sq in ray:
            target = board[to_sq]
            if target is None:
                moves.append(to_sq)
                continue
            if target.color != color:
                moves.append(to_sq)
            break
    return moves


# -- Piece-specific generators ---------------------------------------------


def pawn_targets(
    board: Board,
    from_sq: Square,
    piece: Piece,
    en_passant: Square | None = None,
) -> list[Square]:
    color = piece.color
    moves: list[Square] = []

    one_step = forward(from_sq, color, 1)
    if one_step is None:
        # A pawn on its last row only exists on hand-built boards.
        return moves

    if board.is_empty(one_step):
        moves.append(one_step)
        if row_of(from_sq) == PAWN_START_ROW[color]:
            two_step = forward(from_sq, color, 2)
            if two_step is not None and board.is_empty(two_step):
                moves.append(two_step)

    for side in (-1, 1):
        cap_sq = horizontal(one_step, side)
        if cap_sq is None:
            continue
        target = board[cap_sq]
        if target is not None:
            if target.color != color:
                moves.append(cap_sq)
        elif cap_sq == en_passant:
            moves.append(cap_sq)

    return moves


def knight_targets(board: Board, from_sq: Square, piece: Piece) -> list[Square]:
    return [
        to_sq
        for to_sq in _KNIGHT_TARGETS[from_sq]
        if _can_land_on(board, to_sq, piece.color)
    ]


def bishop_targets(board: Board, from_sq: Square, piece: Piece) -> list[Square]:
    return _expand(board, piece.color, _BISHOP_RAYS[from_sq])


def rook_targets(board: Board, from_sq: Square, piece: Piece) -> list[Square]:
    return _expand(board, piece.color, _ROOK_RAYS[from_sq])


def queen_targets(board: Board, from_sq: Square, piece: Piece) -> list[Square]:
    """Union of the rook and bishop patterns, without duplicates."""
    moves = rook_targets(board, from_sq, piece)
    seen = set(moves)
    for to_sq in bishop_targets(board, from_sq, piece):
        if to_sq not in seen:
            seen.add(to_sq)
            moves.append(to_sq)
    return moves


def king_targets(board: Board, from_sq: Square, piece: Piece) -> list[Square]:
    # TODO: castling targets once CastlingRights are tracked by execution.
    return [
        to_sq
        for to_sq in _KING_TARGETS[from_sq]
        if _can_land_on(board, to_sq, piece.color)
    ]


_GENERATORS: dict[PieceType, Callable[[Board, Square, Piece], list[Square]]] = {
    PieceType.KNIGHT: knight_targets,
    PieceType.BISHOP: bishop_targets,
    PieceType.ROOK: rook_targets,
    PieceType.QUEEN: queen_targets,
    PieceType.KING: king_targets,
}


def patterns(
    board: Board,
    from_sq: Square,
    piece: Piece,
    en_passant: Square | None = None,
) -> list[Square]:
    """Pseudo-legal targets of *piece*, which must stand on *from_sq*."""
    if piece.piece_type == PieceType.PAWN:
        return pawn_targets(board, from_sq, piece, en_passant)
    return _GENERATORS[piece.piece_type](board, from_sq, piece)
