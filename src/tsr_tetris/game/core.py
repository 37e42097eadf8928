from __future__ import annotations

import random
from dataclasses import dataclass
from enum import IntEnum
from typing import Optional

import numpy as np

from .clock import GameClock
from .controller import PieceController
from .events import EventBus, Listener
from .grid import Board
from .pieces import Piece, PieceCatalog, default_catalog
from .rules import ScoringRules
from .state import GamePhase, GameState


class Action(IntEnum):
    LEFT = 0
    RIGHT = 1
    ROTATE = 2
    SOFT_DROP = 3
    HARD_DROP = 4
    NONE = 5


@dataclass
class GameConfig:
    width: int = 10
    height: int = 20
    random_seed: Optional[int] = None


@dataclass(frozen=True)
class PieceSnapshot:
    kind: int
    code: str
    shape: np.ndarray
    x: int
    y: int


class TetrisGame:
    """Board/piece simulation exposed through commands, queries and events.

    Hosts drive gravity with :meth:`tick` and player input with the command
    methods; they observe the game through the snapshot queries and by
    subscribing to the event stream.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        rules: Optional[ScoringRules] = None,
        catalog: Optional[PieceCatalog] = None,
    ) -> None:
        self.config = config or GameConfig()
        self.rules = rules or ScoringRules()
        self.catalog = catalog or default_catalog()
        self.rng = random.Random(self.config.random_seed)
        self.board = Board(self.config.width, self.config.height)
        self.state = GameState()
        self.state.reset(self.rules)
        self.events = EventBus()
        self.clock = GameClock()
        self.controller = PieceController(
            self.board, self.catalog, self.rules, self.state, self.events, self.rng
        )
        self.controller.generate_next()
        self.controller.spawn()

    # Commands

    def move_left(self) -> bool:
        return self.controller.move(-1, 0)

    def move_right(self) -> bool:
        return self.controller.move(1, 0)

    def soft_drop(self) -> bool:
        return self.controller.move(0, 1)

    def rotate(self) -> bool:
        return self.controller.rotate()

    def hard_drop(self) -> None:
        self.controller.hard_drop()

    def restart(self) -> None:
        self.clock.reset()
        self.controller.restart()

    def tick(self, elapsed_ms: float) -> bool:
        """Advance the gravity clock; True when a gravity step was attempted."""
        if not self.controller.is_falling:
            return False
        if not self.clock.advance(elapsed_ms, self.state.drop_interval):
            return False
        if not self.controller.move(0, 1):
            self.controller.lock_and_advance()
        return True

    def apply(self, action: Action) -> bool:
        action = Action(int(action))
        if action == Action.LEFT:
            return self.move_left()
        if action == Action.RIGHT:
            return self.move_right()
        if action == Action.ROTATE:
            return self.rotate()
        if action == Action.SOFT_DROP:
            return self.soft_drop()
        if action == Action.HARD_DROP:
            if not self.controller.is_falling:
                return False
            self.hard_drop()
            return True
        return False

    # Events

    def subscribe(self, listener: Listener) -> None:
        self.events.subscribe(listener)

    def unsubscribe(self, listener: Listener) -> None:
        self.events.unsubscribe(listener)

    # Queries

    @property
    def score(self) -> int:
        return self.state.score

    @property
    def level(self) -> int:
        return self.state.level

    @property
    def lines(self) -> int:
        return self.state.lines

    @property
    def drop_interval(self) -> int:
        return self.state.drop_interval

    @property
    def phase(self) -> GamePhase:
        return self.state.phase

    def is_game_over(self) -> bool:
        return self.state.game_over

    def is_running(self) -> bool:
        return self.state.running

    def snapshot_board(self) -> np.ndarray:
        return self.board.snapshot()

    def snapshot_current_piece(self) -> Optional[PieceSnapshot]:
        return self._snapshot(self.controller.current_piece)

    def snapshot_next_piece(self) -> Optional[PieceSnapshot]:
        return self._snapshot(self.controller.next_piece)

    def get_state(self) -> np.ndarray:
        # Overlay current piece on a copy of the grid for observation
        state = self.board.snapshot()
        piece = self.controller.current_piece
        if piece is not None and self.controller.is_falling:
            for x, y in piece.cells():
                if self.board.is_inside(x, y):
                    # Use negative to indicate falling piece overlay
                    state[y, x] = -piece.kind
        return state

    def get_game_stats(self) -> dict:
        return self.state.to_dict()

    def _snapshot(self, piece: Optional[Piece]) -> Optional[PieceSnapshot]:
        if piece is None:
            return None
        return PieceSnapshot(
            kind=piece.kind,
            code=self.catalog.code_for(piece.kind),
            shape=piece.shape.copy(),
            x=piece.x,
            y=piece.y,
        )
