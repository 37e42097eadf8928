from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Set

from tsr_tetris.game import GameEvent, PieceCatalog, PieceLocked, TetrisGame


@dataclass(frozen=True)
class Achievement:
    key: str
    threshold: int


ACHIEVEMENTS = (
    Achievement("first_code", 1),
    Achievement("category_master", 10),
)


class LearningProgress:
    """Tracks which catalog codes the player has met during play.

    A code counts as learned once a piece of its type locks, or when a quiz
    collaborator calls :meth:`mark_learned`. Progress lives in memory only
    and is kept across game restarts.
    """

    def __init__(self, catalog: PieceCatalog) -> None:
        self.catalog = catalog
        self.learned_codes: Set[str] = set()
        self.achievements: Set[str] = set()
        self._game: Optional[TetrisGame] = None

    def attach(self, game: TetrisGame) -> None:
        self.detach()
        game.subscribe(self.on_event)
        self._game = game

    def detach(self) -> None:
        if self._game is not None:
            self._game.unsubscribe(self.on_event)
            self._game = None

    def on_event(self, event: GameEvent) -> None:
        if isinstance(event, PieceLocked):
            self.mark_learned(self.catalog.code_for(event.piece_type))

    def mark_learned(self, code: str) -> List[str]:
        """Record ``code``; returns the achievements this unlocked."""
        if code in self.learned_codes:
            return []
        self.learned_codes.add(code)
        unlocked = []
        for achievement in ACHIEVEMENTS:
            if achievement.key not in self.achievements and self.learned_count >= achievement.threshold:
                self.achievements.add(achievement.key)
                unlocked.append(achievement.key)
        return unlocked

    @property
    def learned_count(self) -> int:
        return len(self.learned_codes)

    @property
    def total(self) -> int:
        return len({entry.code for entry in self.catalog.values()})

    @property
    def fraction(self) -> float:
        return self.learned_count / max(1, self.total)

    def summary(self) -> Dict[str, object]:
        return {
            "learned": sorted(self.learned_codes),
            "learned_count": self.learned_count,
            "total": self.total,
            "fraction": self.fraction,
            "achievements": sorted(self.achievements),
        }
