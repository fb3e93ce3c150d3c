"""Move value object (a request; carries no legality guarantee)."""

from __future__ import annotations

from dataclasses import dataclass

from chers.core.enums import PromotionType
from chers.core.types import Square, square_name

_PROMO_CHARS: dict[PromotionType, str] = {
    PromotionType.KNIGHT: "n",
    PromotionType.BISHOP: "b",
    PromotionType.ROOK: "r",
    PromotionType.QUEEN: "q",
}


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object representing a requested chess move."""

    from_sq: Square
    to_sq: Square
    promotion: PromotionType | None = None

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        base = f"{square_name(self.from_sq)}{square_name(self.to_sq)}"
        if self.promotion is not None:
            base += _PROMO_CHARS[self.promotion]
        return base

    @property
    def uci(self) -> str:
        """Long-algebraic text form."""
        return str(self)
