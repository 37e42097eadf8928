from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from typing import Callable, Iterator, List, Tuple, Union


@dataclass(frozen=True)
class PieceLocked:
    piece_type: int


@dataclass(frozen=True)
class LinesCleared:
    rows: Tuple[int, ...]
    count: int


@dataclass(frozen=True)
class ScoreChanged:
    score: int


@dataclass(frozen=True)
class LevelChanged:
    level: int
    drop_interval: int


@dataclass(frozen=True)
class GameOver:
    final_score: int


@dataclass(frozen=True)
class Restarted:
    pass


GameEvent = Union[PieceLocked, LinesCleared, ScoreChanged, LevelChanged, GameOver, Restarted]
Listener = Callable[[GameEvent], None]


class EventBus:
    """Synchronous fan-out of engine events to subscribed listeners.

    Inside a :meth:`deferred` block events are queued and only delivered once
    the outermost block exits, so listeners always observe fully applied
    state. A listener may restart the game while handling an event; the
    restart drops whatever the old game still had queued.
    """

    def __init__(self) -> None:
        self._listeners: List[Listener] = []
        self._pending: List[GameEvent] = []
        self._depth = 0

    def subscribe(self, listener: Listener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def emit(self, event: GameEvent) -> None:
        if self._depth:
            self._pending.append(event)
            return
        self._deliver(event)

    def discard_pending(self) -> None:
        self._pending.clear()

    @contextmanager
    def deferred(self) -> Iterator[None]:
        self._depth += 1
        try:
            yield
        finally:
            self._depth -= 1
        if self._depth == 0:
            while self._pending:
                self._deliver(self._pending.pop(0))

    def _deliver(self, event: GameEvent) -> None:
        # Copy so a listener may unsubscribe itself while handling.
        for listener in list(self._listeners):
            listener(event)
