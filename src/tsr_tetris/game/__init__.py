"""Game module for TSR Tetris.

Exports the simulation core and supporting classes:
- Board: Locked-cell grid and line clearing
- Piece, PieceCatalog: Piece instances, shapes and the type/code catalog
- ScoringRules: Scoring and leveling formulas
- PieceController: Spawn, move, rotate, hard drop and lock
- TetrisGame: Command/query/event facade driven by tick()
"""

from .grid import Board, EMPTY
from .pieces import (
    BASE_SHAPES,
    CatalogEntry,
    Piece,
    PieceCatalog,
    TetrominoType,
    default_catalog,
    rotate_clockwise,
)
from .rules import ScoringRules
from .state import GamePhase, GameState
from .events import (
    EventBus,
    GameEvent,
    GameOver,
    LevelChanged,
    LinesCleared,
    PieceLocked,
    Restarted,
    ScoreChanged,
)
from .clock import GameClock
from .controller import PieceController
from .core import Action, GameConfig, PieceSnapshot, TetrisGame

__all__ = [
    "Board",
    "EMPTY",
    "BASE_SHAPES",
    "CatalogEntry",
    "Piece",
    "PieceCatalog",
    "TetrominoType",
    "default_catalog",
    "rotate_clockwise",
    "ScoringRules",
    "GamePhase",
    "GameState",
    "EventBus",
    "GameEvent",
    "GameOver",
    "LevelChanged",
    "LinesCleared",
    "PieceLocked",
    "Restarted",
    "ScoreChanged",
    "GameClock",
    "PieceController",
    "Action",
    "GameConfig",
    "PieceSnapshot",
    "TetrisGame",
]
