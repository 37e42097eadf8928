from __future__ import annotations


class GameClock:
    """Logical gravity cadence driven by host-supplied elapsed time."""

    def __init__(self) -> None:
        self.accumulated_ms = 0.0

    def reset(self) -> None:
        self.accumulated_ms = 0.0

    def advance(self, elapsed_ms: float, interval_ms: float) -> bool:
        """Return True when a gravity step is due.

        At most one step per call; leftover time is discarded when a step
        fires.
        """
        self.accumulated_ms += max(0.0, float(elapsed_ms))
        if self.accumulated_ms > interval_ms:
            self.accumulated_ms = 0.0
            return True
        return False
