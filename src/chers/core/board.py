"""Board - immutable piece placement on an 8x8 board."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping

from chers.core.enums import Color, PieceType
from chers.core.errors import MissingKingError
from chers.core.piece import Piece
from chers.core.types import Square, make_square

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """Immutable 64-square board.

    A board is a plain value: boards with the same contents compare equal and
    hash alike. "Changing" a board means building a new one via
    :meth:`updated`.
    """

    __slots__ = ("_squares",)

    def __init__(self, squares: Iterable[Piece | None] = ()) -> None:
        cells = tuple(squares) or (None,) * 64
        if len(cells) != 64:
            raise ValueError(f"A board needs 64 squares, got {len(cells)}")
        self._squares: tuple[Piece | None, ...] = cells

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._squares[sq]

    def is_empty(self, sq: Square) -> bool:
        return self._squares[sq] is None

    def __iter__(self) -> Iterator[Piece | None]:
        return iter(self._squares)

    # -- Query helpers ------------------------------------------------------

    def pieces(self, color: Color | None = None) -> Iterator[tuple[Square, Piece]]:
        """Occupied squares in index order, optionally only *color*'s."""
        for sq, piece in enumerate(self._squares):
            if piece is None:
                continue
            if color is None or piece.color == color:
                yield sq, piece

    def king_square(self, color: Color) -> Square:
        """Linear scan for *color*'s king."""
        for sq, piece in self.pieces(color):
            if piece.piece_type == PieceType.KING:
                return sq
        raise MissingKingError(f"No {color.name} king on board")

    # -- Derivation ---------------------------------------------------------

    def updated(self, changes: Mapping[Square, Piece | None]) -> Board:
        """A new board with *changes* applied; this board is left as is."""
        cells = list(self._squares)
        for sq, piece in changes.items():
            cells[sq] = piece
        return Board(cells)

    # -- Factory ------------------------------------------------------------

    @classmethod
    def empty(cls) -> Board:
        return cls()

    @classmethod
    def from_pieces(cls, placement: Mapping[Square, Piece]) -> Board:
        return cls().updated(placement)

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        placement: dict[Square, Piece] = {}
        for f, pt in enumerate(_BACK_RANK):
            placement[make_square(f, 0)] = Piece(Color.BLACK, pt)
            placement[make_square(f, 1)] = Piece(Color.BLACK, PieceType.PAWN)
            placement[make_square(f, 6)] = Piece(Color.WHITE, PieceType.PAWN)
            placement[make_square(f, 7)] = Piece(Color.WHITE, pt)
        return cls.from_pieces(placement)

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __hash__(self) -> int:
        return hash(self._squares)

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(8):
            cells = []
            for file in range(8):
                p = self[make_square(file, row)]
                cells.append(str(p) if p else ".")
            rows.append(f"{8 - row} {' '.join(cells)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
