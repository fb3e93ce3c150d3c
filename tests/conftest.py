"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from chers.core.board import Board
from chers.core.enums import Color
from chers.core.piece import Piece
from chers.core.position import Position
from chers.core.types import Square, make_square

PositionFactory = Callable[..., Position]


def _board_from_layout(layout: str) -> Board:
    """Build a board from a slash separated placement, rank 8 first.

    Digits count empty squares, letters are pieces (uppercase = white),
    e.g. ``"4k3/8/8/8/8/8/8/4K3"``.
    """
    rows = layout.split("/")
    assert len(rows) == 8, f"layout needs 8 rows: {layout!r}"

    placement: dict[Square, Piece] = {}
    for row, text in enumerate(rows):
        file = 0
        for ch in text:
            if ch.isdigit():
                file += int(ch)
                continue
            placement[make_square(file, row)] = Piece.from_char(ch)
            file += 1
        assert file == 8, f"row {row} is not 8 squares wide: {layout!r}"
    return Board.from_pieces(placement)


@pytest.fixture
def make_position() -> PositionFactory:
    """Factory turning a layout string plus metadata into a :class:`Position`."""

    def factory(
        layout: str,
        side_to_move: Color = Color.WHITE,
        en_passant: Square | None = None,
        halfmove_clock: int = 0,
        fullmove_number: int = 1,
    ) -> Position:
        return Position(
            board=_board_from_layout(layout),
            side_to_move=side_to_move,
            en_passant=en_passant,
            halfmove_clock=halfmove_clock,
            fullmove_number=fullmove_number,
        )

    return factory
