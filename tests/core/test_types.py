"""Tests for square addressing and directional stepping."""

import pytest

from chers.core.enums import Color
from chers.core.types import (
    A1, A2, A8, B2, E2, E3, E4, E5, E6, E7, H1, H8,
    EmptySquareNameError,
    InvalidColumnError,
    InvalidRowError,
    MissingRowError,
    SquareParseError,
    TrailingInputError,
    backward,
    diagonal,
    file_of,
    forward,
    horizontal,
    is_valid_square,
    make_square,
    parse_square,
    rank_of,
    row_of,
    square_name,
    vertical,
)


class TestLayout:
    def test_corners(self) -> None:
        assert A8 == 0
        assert H8 == 7
        assert A1 == 56
        assert H1 == 63

    def test_row_and_rank(self) -> None:
        assert row_of(A8) == 0
        assert rank_of(A8) == 8
        assert row_of(A1) == 7
        assert rank_of(A1) == 1
        assert file_of(H1) == 7

    def test_make_square(self) -> None:
        assert make_square(4, 4) == E4

    def test_valid_square_range(self) -> None:
        assert is_valid_square(A8)
        assert is_valid_square(H1)
        assert not is_valid_square(-1)
        assert not is_valid_square(64)


class TestAlgebraic:
    def test_round_trip_every_square(self) -> None:
        for sq in range(64):
            assert parse_square(square_name(sq)) == sq

    def test_names(self) -> None:
        assert square_name(A8) == "a8"
        assert square_name(H1) == "h1"
        assert square_name(E4) == "e4"

    def test_case_insensitive(self) -> None:
        assert parse_square("E4") == E4
        assert parse_square("h1") == H1

    def test_surrounding_whitespace_ignored(self) -> None:
        assert parse_square("  a1 ") == A1

    @pytest.mark.parametrize(
        ("text", "error"),
        [
            ("", EmptySquareNameError),
            ("   ", EmptySquareNameError),
            ("i4", InvalidColumnError),
            ("44", InvalidColumnError),
            ("e", MissingRowError),
            ("e9", InvalidRowError),
            ("e0", InvalidRowError),
            ("ex", InvalidRowError),
            ("e44", TrailingInputError),
        ],
    )
    def test_parse_errors(self, text: str, error: type[SquareParseError]) -> None:
        with pytest.raises(error):
            parse_square(text)

    def test_parse_errors_are_value_errors(self) -> None:
        with pytest.raises(ValueError):
            parse_square("z9")


class TestStepping:
    def test_forward_white_goes_toward_rank_eight(self) -> None:
        assert forward(E2, Color.WHITE, 1) == E3
        assert forward(E2, Color.WHITE, 2) == E4

    def test_forward_black_goes_toward_rank_one(self) -> None:
        assert forward(E7, Color.BLACK, 1) == E6
        assert forward(E7, Color.BLACK, 2) == E5

    def test_backward(self) -> None:
        assert backward(E4, Color.WHITE, 1) == E3
        assert backward(E5, Color.BLACK, 1) == E6

    def test_off_board_is_none(self) -> None:
        assert forward(A8, Color.WHITE, 1) is None
        assert forward(A1, Color.BLACK, 1) is None
        assert horizontal(H1, 1) is None
        assert horizontal(A1, -1) is None
        assert vertical(A1, 1) is None
        assert diagonal(H8, 1, -1) is None

    def test_large_amounts_do_not_wrap(self) -> None:
        assert horizontal(E4, 100) is None
        assert horizontal(E4, -100) is None
        assert vertical(E4, 100) is None
        assert vertical(E4, -100) is None
        # Moving right off the h-file must not wrap onto the next row.
        assert horizontal(H8, 1) is None

    def test_diagonal(self) -> None:
        assert diagonal(A1, 1, -1) == B2
        assert diagonal(B2, -1, 1) == A1

    def test_vertical_moves_rows(self) -> None:
        assert vertical(A1, -1) == A2
