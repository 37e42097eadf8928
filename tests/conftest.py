"""
Shared fixtures for the engine tests.
"""
import random

import pytest

from tsr_tetris.game import (
    BASE_SHAPES,
    Board,
    EventBus,
    GameState,
    PieceCatalog,
    PieceController,
    ScoringRules,
    TetrominoType,
)


def single_catalog(kind: TetrominoType, code: str = None) -> PieceCatalog:
    """Catalog with one piece type, so every spawn is predictable."""
    return PieceCatalog({kind: (kind.name, BASE_SHAPES[kind], code or f"TSR-{kind.name}")})


def make_controller(catalog: PieceCatalog, width: int = 10, height: int = 20, seed: int = 0):
    rules = ScoringRules()
    state = GameState()
    state.reset(rules)
    events = EventBus()
    recorded = []
    events.subscribe(recorded.append)
    controller = PieceController(Board(width, height), catalog, rules, state, events, random.Random(seed))
    controller.generate_next()
    controller.spawn()
    return controller, recorded


@pytest.fixture
def o_catalog():
    return single_catalog(TetrominoType.O)


@pytest.fixture
def o_controller(o_catalog):
    return make_controller(o_catalog)


@pytest.fixture
def catalog_of():
    return single_catalog


@pytest.fixture
def controller_for():
    return make_controller
