from __future__ import annotations

import logging
from typing import Iterable, List

import numpy as np

from .pieces import Piece

logger = logging.getLogger(__name__)

EMPTY = 0


class Board:
    """Fixed-size grid of locked cells.

    The grid uses 0 for empty cells and positive integers for locked cells;
    the value is the piece-type identifier the cell was locked as. Row 0 is
    the top of the board.
    """

    def __init__(self, width: int = 10, height: int = 20) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"Board dimensions must be positive, got {width}x{height}")
        self.width = int(width)
        self.height = int(height)
        self.grid = np.zeros((self.height, self.width), dtype=np.int8)

    def reset(self) -> None:
        self.grid.fill(EMPTY)

    def is_inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def is_occupied(self, x: int, y: int) -> bool:
        if x < 0 or x >= self.width or y >= self.height:
            return True
        # Above the top edge is open so pieces may protrude before locking.
        if y < 0:
            return False
        return bool(self.grid[y, x] != EMPTY)

    def lock(self, piece: Piece) -> None:
        for x, y in piece.cells():
            if y < 0:
                logger.debug("Dropping cell (%d, %d) of piece %d above the board", x, y, piece.kind)
                continue
            self.grid[y, x] = piece.kind

    def detect_full_rows(self) -> List[int]:
        """Indices of completely filled rows, scanned bottom to top."""
        full = np.all(self.grid != EMPTY, axis=1)
        return [y for y in range(self.height - 1, -1, -1) if full[y]]

    def clear_rows(self, rows: Iterable[int]) -> int:
        """Remove ``rows`` and add as many empty rows at the top."""
        indices = sorted({int(r) for r in rows if 0 <= int(r) < self.height})
        if not indices:
            return 0
        num = len(indices)
        kept = np.delete(self.grid, indices, axis=0)
        new_rows = np.zeros((num, self.width), dtype=np.int8)
        self.grid = np.vstack((new_rows, kept))
        return num

    def snapshot(self) -> np.ndarray:
        return self.grid.copy()

    def __repr__(self) -> str:
        return f"Board(width={self.width}, height={self.height})"
