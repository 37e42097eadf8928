from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from tsr_tetris.game import (
    Action,
    GameConfig,
    GameEvent,
    LinesCleared,
    PieceCatalog,
    ScoringRules,
    TetrisGame,
)


class TsrTetrisEnv(gym.Env):
    """Falling-block environment over :class:`TetrisGame`.

    Every step applies one :class:`Action` and then advances the game clock by
    ``step_ms`` milliseconds, so gravity keeps pulling the piece down even when
    the agent idles.
    """

    metadata = {"render_modes": ["rgb_array"], "render_fps": 10}

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        rules: Optional[ScoringRules] = None,
        catalog: Optional[PieceCatalog] = None,
        render_mode: Optional[str] = None,
        step_ms: float = 100.0,
        reward_weights: Optional[Dict[str, float]] = None,
        terminal_penalty: float = -10.0,
    ) -> None:
        super().__init__()
        self.game = TetrisGame(config, rules, catalog)
        self.render_mode = render_mode
        self.step_ms = float(step_ms)
        self.terminal_penalty = float(terminal_penalty)
        self.reward_weights: Dict[str, float] = {
            "score": 0.01,   # reward per engine point
            "lines": 1.0,    # reward per line cleared
        }
        if reward_weights:
            self.reward_weights.update({k: float(v) for k, v in reward_weights.items()})

        self._events: List[GameEvent] = []
        self.game.subscribe(self._events.append)

        h, w = self.game.board.height, self.game.board.width
        max_kind = max(self.game.catalog.kinds)
        self.observation_space = spaces.Dict(
            {
                # Locked cells are positive ids, the falling piece is negative
                "grid": spaces.Box(low=-max_kind, high=max_kind, shape=(h, w), dtype=np.int8),
                "next_piece": spaces.Discrete(max_kind + 1),
            }
        )
        self.action_space = spaces.Discrete(len(Action))

    def _get_obs(self) -> Dict[str, Any]:
        nxt = self.game.snapshot_next_piece()
        return {
            "grid": self.game.get_state().astype(np.int8),
            "next_piece": int(nxt.kind) if nxt is not None else 0,
        }

    def _get_info(self) -> Dict[str, Any]:
        return {
            "score": self.game.score,
            "lines": self.game.lines,
            "level": self.game.level,
            "events": list(self._events),
        }

    def reset(self, *, seed: Optional[int] = None, options: Optional[dict] = None) -> Tuple[Dict[str, Any], Dict[str, Any]]:
        super().reset(seed=seed)
        if seed is not None:
            self.game.rng.seed(seed)
        self.game.restart()
        self._events.clear()
        return self._get_obs(), self._get_info()

    def step(self, action: int):
        self._events.clear()
        score_before = self.game.score

        self.game.apply(Action(int(action)))
        self.game.tick(self.step_ms)

        lines = sum(e.count for e in self._events if isinstance(e, LinesCleared))
        reward_components: Dict[str, float] = {
            "score": self.reward_weights["score"] * float(self.game.score - score_before),
            "lines": self.reward_weights["lines"] * float(lines),
        }
        terminated = self.game.is_game_over()
        if terminated:
            reward_components["terminal"] = self.terminal_penalty
        reward = float(sum(reward_components.values()))

        info = self._get_info()
        info["reward_components"] = reward_components
        return self._get_obs(), reward, terminated, False, info

    def render(self) -> Optional[np.ndarray]:
        if self.render_mode == "rgb_array":
            grid = self.game.get_state()
            cell = 12
            h, w = grid.shape
            img = np.zeros((h * cell, w * cell, 3), dtype=np.uint8)
            for y in range(h):
                for x in range(w):
                    v = int(grid[y, x])
                    if v > 0:
                        color = (70, 200, 120)
                    elif v < 0:
                        color = (230, 200, 60)
                    else:
                        color = (30, 30, 36)
                    img[y * cell : (y + 1) * cell, x * cell : (x + 1) * cell, :] = color
            return img
        return None

    def close(self) -> None:
        self.game.unsubscribe(self._events.append)
