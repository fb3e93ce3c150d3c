"""Square type alias, coordinate helpers and directional stepping.

Board layout (row-major from Black's home rank):
    a8=0,  b8=1,  ..., h8=7
    a7=8,  b7=9,  ..., h7=15
    ...
    a1=56, b1=57, ..., h1=63

The row index therefore grows toward rank 1, so White moves "forward" by
decreasing the row and Black by increasing it.
"""

from __future__ import annotations

from typing import TypeAlias

from chers.core.enums import Color

Square: TypeAlias = int  # 0–63

BOARD_SIZE = 8

_FILES = "abcdefgh"
_RANKS = "12345678"


def file_of(sq: Square) -> int:
    """File index 0–7 (a–h)."""
    return sq & 7


def row_of(sq: Square) -> int:
    """Row index 0–7, where row 0 is rank 8."""
    return sq >> 3


def rank_of(sq: Square) -> int:
    """Display rank 1–8."""
    return BOARD_SIZE - row_of(sq)


def make_square(file: int, row: int) -> Square:
    """Create square from file (0–7) and row (0–7)."""
    return row * BOARD_SIZE + file


def is_valid_square(sq: int) -> bool:
    """Check whether integer is a valid square index."""
    return 0 <= sq < 64


# ── Directional stepping ────────────────────────────────────────────────────


def horizontal(sq: Square, amount: int) -> Square | None:
    """Shift *sq* by *amount* files, ``None`` when leaving the board."""
    file = file_of(sq) + amount
    if not 0 <= file < BOARD_SIZE:
        return None
    return make_square(file, row_of(sq))


def vertical(sq: Square, amount: int) -> Square | None:
    """Shift *sq* by *amount* rows, ``None`` when leaving the board."""
    row = row_of(sq) + amount
    if not 0 <= row < BOARD_SIZE:
        return None
    return make_square(file_of(sq), row)


def diagonal(sq: Square, dx: int, dy: int) -> Square | None:
    """Shift *sq* by *dx* files and *dy* rows."""
    shifted = horizontal(sq, dx)
    if shifted is None:
        return None
    return vertical(shifted, dy)


def forward(sq: Square, color: Color, amount: int) -> Square | None:
    """Step *amount* rows toward the opponent of *color*."""
    return vertical(sq, -amount if color == Color.WHITE else amount)


def backward(sq: Square, color: Color, amount: int) -> Square | None:
    """Step *amount* rows toward the home rank of *color*."""
    return forward(sq, color, -amount)


# ── Algebraic notation ──────────────────────────────────────────────────────


class SquareParseError(ValueError):
    """Base class for malformed algebraic square names."""


class EmptySquareNameError(SquareParseError):
    pass


class InvalidColumnError(SquareParseError):
    pass


class MissingRowError(SquareParseError):
    pass


class InvalidRowError(SquareParseError):
    pass


class TrailingInputError(SquareParseError):
    pass


def square_name(sq: Square) -> str:
    """Human-readable name, e.g. 0 → 'a8', 63 → 'h1'."""
    return _FILES[file_of(sq)] + str(rank_of(sq))


def parse_square(name: str) -> Square:
    """Parse an algebraic square name case-insensitively, e.g. 'E4' → 36."""
    text = name.strip().lower()
    if not text:
        raise EmptySquareNameError("Empty square name")

    column = _FILES.find(text[0])
    if column < 0:
        raise InvalidColumnError(f"Invalid column {text[0]!r} in {name!r}")

    if len(text) < 2:
        raise MissingRowError(f"Missing row in {name!r}")

    rank = _RANKS.find(text[1])
    if rank < 0:
        raise InvalidRowError(f"Invalid row {text[1]!r} in {name!r}")

    if len(text) > 2:
        raise TrailingInputError(f"Unexpected trailing input in {name!r}")

    return make_square(column, BOARD_SIZE - 1 - rank)


def format_squares(squares: list[Square]) -> str:
    """Comma separated square names, for messages and logs."""
    return ", ".join(square_name(sq) for sq in squares)


# ── Named square constants ──────────────────────────────────────────────────

A8, B8, C8, D8, E8, F8, G8, H8 = range(0, 8)
A7, B7, C7, D7, E7, F7, G7, H7 = range(8, 16)
A6, B6, C6, D6, E6, F6, G6, H6 = range(16, 24)
A5, B5, C5, D5, E5, F5, G5, H5 = range(24, 32)
A4, B4, C4, D4, E4, F4, G4, H4 = range(32, 40)
A3, B3, C3, D3, E3, F3, G3, H3 = range(40, 48)
A2, B2, C2, D2, E2, F2, G2, H2 = range(48, 56)
A1, B1, C1, D1, E1, F1, G1, H1 = range(56, 64)
