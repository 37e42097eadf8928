from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .rules import ScoringRules


class GamePhase(Enum):
    IDLE = "idle"
    SPAWNING = "spawning"
    FALLING = "falling"
    LOCKING = "locking"
    GAME_OVER = "game_over"


@dataclass
class GameState:
    score: int = 0
    level: int = 1
    lines: int = 0
    drop_interval: int = 1000
    running: bool = False
    game_over: bool = False
    phase: GamePhase = GamePhase.IDLE

    def reset(self, rules: ScoringRules) -> None:
        self.score = 0
        self.lines = 0
        self.level = rules.level_for_lines(0)
        self.drop_interval = rules.drop_interval_for_level(self.level)
        self.running = False
        self.game_over = False
        self.phase = GamePhase.IDLE

    def to_dict(self) -> dict:
        return {
            "score": self.score,
            "level": self.level,
            "lines": self.lines,
            "drop_interval": self.drop_interval,
            "running": self.running,
            "game_over": self.game_over,
            "phase": self.phase.value,
        }
