"""Game state machine — tracks phase transitions and move history."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import IntEnum, auto

from chers.core.enums import Color, GameResult
from chers.core.errors import GameOverError
from chers.core.events import Capture, Check, Event
from chers.core.legality import legal_moves, legal_targets
from chers.core.move import Move
from chers.core.position import STARTING_POSITION, Position
from chers.core.rules import Rules, move_piece
from chers.core.types import Square

_LOGGER = logging.getLogger(__name__)


class GamePhase(IntEnum):
    """Finite-state-machine states for a chess game."""

    NOT_STARTED = auto()
    AWAITING_MOVE = auto()
    GAME_OVER = auto()


@dataclass(frozen=True)
class MoveRecord:
    """A single entry in the move history."""

    move: Move
    events: tuple[Event, ...]
    position_before: Position
    position_after: Position

    @property
    def was_check(self) -> bool:
        return any(isinstance(event, Check) for event in self.events)

    @property
    def was_capture(self) -> bool:
        return any(isinstance(event, Capture) for event in self.events)


@dataclass
class GameState:
    """Manages game lifecycle: phase, result and move history.

    Positions are immutable, so undo simply restores the position stored in
    the last record. This is a pure data/logic class — no threading, no I/O.
    """

    position: Position = field(default=STARTING_POSITION, init=False)
    phase: GamePhase = field(default=GamePhase.NOT_STARTED, init=False)
    result: GameResult = field(default=GameResult.IN_PROGRESS, init=False)
    move_history: list[MoveRecord] = field(default_factory=list, init=False)
    start_position: Position = field(default=STARTING_POSITION, init=False)

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(self, position: Position | None = None) -> None:
        """Initialise (or reset) the game."""
        self.start_position = position if position is not None else STARTING_POSITION
        self.position = self.start_position
        self.phase = GamePhase.AWAITING_MOVE
        self.result = GameResult.IN_PROGRESS
        self.move_history.clear()
        self._check_game_over()

    # ── Move application ─────────────────────────────────────────────────

    def apply_move(self, move: Move) -> MoveRecord:
        """Validate and apply *move*, returning the history record.

        Raises :class:`~chers.core.errors.MoveError` for rejected moves and
        :class:`GameOverError` once the game has ended.
        """
        if self.phase == GamePhase.GAME_OVER:
            raise GameOverError(f"Game is over ({self.result.name})")

        position_after, events = move_piece(self.position, move)
        record = MoveRecord(
            move=move,
            events=tuple(events),
            position_before=self.position,
            position_after=position_after,
        )
        self.move_history.append(record)
        self.position = position_after
        self.phase = GamePhase.AWAITING_MOVE
        _LOGGER.info("%s played %s", record.position_before.side_to_move, move)

        self._check_game_over()
        return record

    def undo_last_move(self) -> Move | None:
        """Undo the last move. Returns the undone Move, or None if empty."""
        if not self.move_history:
            return None

        record = self.move_history.pop()
        self.position = record.position_before

        # Reset result if we un-did a game-ending move
        if self.result != GameResult.IN_PROGRESS:
            self.result = GameResult.IN_PROGRESS
        self.phase = GamePhase.AWAITING_MOVE

        return record.move

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def side_to_move(self) -> Color:
        return self.position.side_to_move

    @property
    def is_game_over(self) -> bool:
        return self.phase == GamePhase.GAME_OVER

    @property
    def ply_count(self) -> int:
        """Number of half-moves played."""
        return len(self.move_history)

    def legal_targets(self, from_sq: Square) -> list[Square]:
        return legal_targets(self.position, from_sq)

    def legal_moves(self) -> list[Move]:
        """Legal moves in the current position."""
        return legal_moves(self.position)

    # ── Internal ─────────────────────────────────────────────────────────

    def _check_game_over(self) -> None:
        result = Rules.game_result(self.position)
        if result != GameResult.IN_PROGRESS:
            self.result = result
            self.phase = GamePhase.GAME_OVER
            _LOGGER.info("Game over: %s", result.name)
