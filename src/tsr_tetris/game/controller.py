from __future__ import annotations

import logging
import random
from typing import Optional, Tuple

from .events import EventBus, GameOver, LevelChanged, LinesCleared, PieceLocked, Restarted, ScoreChanged
from .grid import Board
from .pieces import Piece, PieceCatalog
from .rules import ScoringRules
from .state import GamePhase, GameState

logger = logging.getLogger(__name__)


class PieceController:
    """Owns the falling and preview pieces and every operation on them.

    All translation goes through :meth:`move`, which rejects any offset that
    collides with the board edges or locked cells. Rejected moves and
    rotations are no-ops returning False; game over is a state, not an error.
    """

    def __init__(
        self,
        board: Board,
        catalog: PieceCatalog,
        rules: ScoringRules,
        state: GameState,
        events: EventBus,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.board = board
        self.catalog = catalog
        self.rules = rules
        self.state = state
        self.events = events
        self.rng = rng or random.Random()
        self.current_piece: Optional[Piece] = None
        self.next_piece: Optional[Piece] = None

    @property
    def is_falling(self) -> bool:
        return self.state.phase is GamePhase.FALLING and self.current_piece is not None

    def generate_next(self) -> Piece:
        kind = self.rng.choice(self.catalog.kinds)
        self.next_piece = self.catalog.new_piece(kind)
        return self.next_piece

    def check_collision(self, piece: Piece, dx: int, dy: int) -> bool:
        for x, y in piece.cells_at(piece.x + dx, piece.y + dy):
            if self.board.is_occupied(x, y):
                return True
        return False

    def spawn(self) -> bool:
        if self.next_piece is None:
            self.generate_next()
        assert self.next_piece is not None
        self.state.phase = GamePhase.SPAWNING
        candidate = self.next_piece.copy()
        candidate.x = self.board.width // 2 - candidate.width // 2
        candidate.y = 0
        if self.check_collision(candidate, 0, 0):
            self._game_over()
            return False
        self.current_piece = candidate
        self.generate_next()
        self.state.phase = GamePhase.FALLING
        self.state.running = True
        logger.debug("Spawned piece %d at (%d, %d)", candidate.kind, candidate.x, candidate.y)
        return True

    def move(self, dx: int, dy: int) -> bool:
        if not self.is_falling:
            return False
        assert self.current_piece is not None
        if self.check_collision(self.current_piece, dx, dy):
            return False
        self.current_piece.x += dx
        self.current_piece.y += dy
        return True

    def rotate(self) -> bool:
        if not self.is_falling:
            return False
        assert self.current_piece is not None
        rotated = self.current_piece.rotated()
        if self.check_collision(rotated, 0, 0):
            return False
        self.current_piece.shape = rotated.shape
        return True

    def hard_drop(self) -> int:
        """Drop until collision, award per-row points, then lock.

        Returns the number of rows the piece descended.
        """
        if not self.is_falling:
            return 0
        with self.events.deferred():
            rows = 0
            while self.move(0, 1):
                rows += 1
            gained = self.rules.hard_drop_score(rows)
            if gained:
                self.state.score += gained
                self.events.emit(ScoreChanged(self.state.score))
            self.lock_and_advance()
        return rows

    def lock_and_advance(self) -> None:
        if not self.is_falling:
            return
        piece = self.current_piece
        assert piece is not None
        # Listeners hear about the lock only after the next piece is in play.
        with self.events.deferred():
            self.state.phase = GamePhase.LOCKING
            self.board.lock(piece)
            self.events.emit(PieceLocked(piece.kind))

            # Detection and removal both use the same post-lock grid.
            full_rows = self.board.detect_full_rows()
            if full_rows:
                cleared = self.board.clear_rows(full_rows)
                logger.debug("Cleared rows %s", full_rows)
                self._apply_line_clear(tuple(full_rows), cleared)

            self.spawn()

    def restart(self) -> None:
        with self.events.deferred():
            # Anything still queued belongs to the game being discarded.
            self.events.discard_pending()
            self.board.reset()
            self.state.reset(self.rules)
            self.current_piece = None
            self.next_piece = None
            self.generate_next()
            self.spawn()
            logger.debug("Game restarted")
            self.events.emit(Restarted())

    def _apply_line_clear(self, rows: Tuple[int, ...], cleared: int) -> None:
        state = self.state
        state.score += self.rules.score_for_lines(cleared, state.level)
        state.lines += cleared
        previous_level = state.level
        state.level = self.rules.level_for_lines(state.lines)
        state.drop_interval = self.rules.drop_interval_for_level(state.level)

        self.events.emit(LinesCleared(rows, cleared))
        self.events.emit(ScoreChanged(state.score))
        if state.level != previous_level:
            self.events.emit(LevelChanged(state.level, state.drop_interval))

    def _game_over(self) -> None:
        self.state.game_over = True
        self.state.running = False
        self.state.phase = GamePhase.GAME_OVER
        logger.debug("Game over with score %d", self.state.score)
        self.events.emit(GameOver(self.state.score))
