from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, Iterator, List, Mapping, Optional, Tuple

import numpy as np


class TetrominoType(IntEnum):
    I = 1
    O = 2
    T = 3
    S = 4
    Z = 5
    J = 6
    L = 7


Shape = np.ndarray


def rotate_clockwise(shape: Shape) -> Shape:
    """Return a new matrix turned 90 degrees clockwise.

    new[i][j] = old[rows - 1 - j][i]; the bounding box swaps for non-square
    shapes. The input is never modified.
    """
    return np.rot90(shape, 1, axes=(1, 0)).copy()


BASE_SHAPES = {
    TetrominoType.I: np.array([[1, 1, 1, 1]], dtype=np.int8),
    TetrominoType.O: np.array([[1, 1], [1, 1]], dtype=np.int8),
    TetrominoType.T: np.array([[0, 1, 0], [1, 1, 1]], dtype=np.int8),
    TetrominoType.S: np.array([[0, 1, 1], [1, 1, 0]], dtype=np.int8),
    TetrominoType.Z: np.array([[1, 1, 0], [0, 1, 1]], dtype=np.int8),
    TetrominoType.J: np.array([[1, 0, 0], [1, 1, 1]], dtype=np.int8),
    TetrominoType.L: np.array([[0, 0, 1], [1, 1, 1]], dtype=np.int8),
}


@dataclass
class Piece:
    kind: int
    shape: Shape
    x: int = 0
    y: int = 0

    @property
    def width(self) -> int:
        return int(self.shape.shape[1])

    @property
    def height(self) -> int:
        return int(self.shape.shape[0])

    def cells_at(self, origin_x: int, origin_y: int) -> List[Tuple[int, int]]:
        h, w = self.shape.shape
        cells: List[Tuple[int, int]] = []
        for dy in range(h):
            for dx in range(w):
                if self.shape[dy, dx]:
                    cells.append((origin_x + dx, origin_y + dy))
        return cells

    def cells(self) -> List[Tuple[int, int]]:
        """Board coordinates of the occupied cells at the current anchor."""
        return self.cells_at(self.x, self.y)

    def rotated(self) -> "Piece":
        return Piece(self.kind, rotate_clockwise(self.shape), self.x, self.y)

    def copy(self) -> "Piece":
        return Piece(self.kind, self.shape.copy(), self.x, self.y)


@dataclass(frozen=True)
class CatalogEntry:
    kind: int
    name: str
    shape: Shape
    code: str


def _validate_shape(kind: int, shape: Shape) -> Shape:
    arr = np.array(shape, dtype=np.int8)
    if arr.ndim != 2 or arr.shape[0] == 0 or arr.shape[1] == 0:
        raise ValueError(f"Shape for piece type {kind} must be a non-empty rectangular matrix")
    if not np.any(arr):
        raise ValueError(f"Shape for piece type {kind} has no occupied cells")
    arr = (arr != 0).astype(np.int8)
    arr.setflags(write=False)
    return arr


class PieceCatalog(Mapping[int, CatalogEntry]):
    """Read-only mapping from piece-type identifier to shape and code.

    Identifiers double as the value written into locked board cells, so they
    must be positive integers (0 is the empty sentinel).
    """

    def __init__(self, entries: Mapping[int, Tuple[str, Shape, str]]) -> None:
        if not entries:
            raise ValueError("Piece catalog must contain at least one piece type")
        self._entries: Dict[int, CatalogEntry] = {}
        for kind, (name, shape, code) in entries.items():
            kind = int(kind)
            if kind <= 0 or kind > np.iinfo(np.int8).max:
                raise ValueError(f"Piece type identifier must be in 1..127, got {kind}")
            self._entries[kind] = CatalogEntry(kind, name, _validate_shape(kind, shape), code)
        self._kinds = tuple(self._entries)

    def __getitem__(self, kind: int) -> CatalogEntry:
        return self._entries[int(kind)]

    def __iter__(self) -> Iterator[int]:
        return iter(self._kinds)

    def __len__(self) -> int:
        return len(self._kinds)

    @property
    def kinds(self) -> Tuple[int, ...]:
        return self._kinds

    def code_for(self, kind: int) -> str:
        return self[kind].code

    def kind_for_code(self, code: str) -> Optional[int]:
        for entry in self._entries.values():
            if entry.code == code:
                return entry.kind
        return None

    def new_piece(self, kind: int) -> Piece:
        """Fresh piece instance at the neutral (unplaced) anchor."""
        return Piece(kind=int(kind), shape=self[kind].shape.copy(), x=0, y=0)


def default_catalog(codes: Optional[Mapping[TetrominoType, str]] = None) -> PieceCatalog:
    """The seven tetrominoes; codes default to the tetromino letter."""
    codes = codes or {}
    return PieceCatalog(
        {kind: (kind.name, shape, codes.get(kind, kind.name)) for kind, shape in BASE_SHAPES.items()}
    )
