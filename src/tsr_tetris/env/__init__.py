"""Gymnasium environments for TSR Tetris."""

from __future__ import annotations

from gymnasium.envs.registration import register

# Register default 10x20 falling-block environment
register(
    id="TsrTetris-10x20-v0",
    entry_point="tsr_tetris.env.tetris_env:TsrTetrisEnv",
)

__all__ = ["TsrTetris-10x20-v0"]
