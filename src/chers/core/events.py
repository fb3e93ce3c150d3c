"""Typed events produced by a single move execution.

The set is closed: an :data:`Event` is exactly one of :class:`Capture`,
:class:`Promotion`, :class:`Check` or :class:`Mate`, so consumers can
``match`` over it exhaustively. Events only describe what happened; the
resulting position is returned separately.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from chers.core.enums import PromotionType
from chers.core.piece import Piece
from chers.core.types import Square


@dataclass(frozen=True, slots=True)
class Capture:
    at: Square
    captured: Piece
    by: Piece


@dataclass(frozen=True, slots=True)
class Promotion:
    to: PromotionType


@dataclass(frozen=True, slots=True)
class Check:
    """The side now to move is attacked by the listed pieces."""

    by: tuple[tuple[Square, Piece], ...]


@dataclass(frozen=True, slots=True)
class Mate:
    pass


Event: TypeAlias = Capture | Promotion | Check | Mate
