from __future__ import annotations

from typing import Optional, Sequence, Tuple

import numpy as np
import pygame

from tsr_tetris.game import PieceSnapshot


def _color_for_value(v: int) -> Tuple[int, int, int]:
    palette = {
        0: (20, 20, 26),
        1: (0, 240, 240),  # I
        2: (240, 240, 0),  # O
        3: (160, 0, 240),  # T
        4: (0, 240, 0),    # S
        5: (240, 0, 0),    # Z
        6: (0, 0, 240),    # J
        7: (240, 160, 0),  # L
    }
    return palette.get(abs(v), (200, 200, 200))


class Renderer:
    def __init__(self, cell_size: int = 30, margin: int = 20, panel_width: int = 180) -> None:
        self.cell_size = cell_size
        self.margin = margin
        self.panel_width = panel_width
        self._font: Optional[pygame.font.Font] = None

    def window_size(self, board_width: int, board_height: int) -> Tuple[int, int]:
        width = board_width * self.cell_size + self.margin * 3 + self.panel_width
        height = board_height * self.cell_size + self.margin * 2
        return width, height

    def _grid_surface(self, state: np.ndarray) -> pygame.Surface:
        h, w = state.shape
        surf = pygame.Surface((w * self.cell_size, h * self.cell_size))
        surf.fill((30, 30, 36))
        for y in range(h):
            for x in range(w):
                rect = pygame.Rect(
                    x * self.cell_size,
                    y * self.cell_size,
                    self.cell_size - 1,
                    self.cell_size - 1,
                )
                pygame.draw.rect(surf, _color_for_value(int(state[y, x])), rect)
        return surf

    def _draw_preview(self, screen: pygame.Surface, piece: PieceSnapshot, origin: Tuple[int, int]) -> None:
        size = self.cell_size // 2 + 4
        ox, oy = origin
        h, w = piece.shape.shape
        for y in range(h):
            for x in range(w):
                if piece.shape[y, x]:
                    rect = pygame.Rect(ox + x * size, oy + y * size, size - 1, size - 1)
                    pygame.draw.rect(screen, _color_for_value(piece.kind), rect)

    def draw(
        self,
        screen: pygame.Surface,
        state: np.ndarray,
        next_piece: Optional[PieceSnapshot] = None,
        lines: Sequence[str] = (),
    ) -> None:
        if self._font is None:
            self._font = pygame.font.SysFont(None, 24)
        grid_surf = self._grid_surface(state)
        screen.fill((10, 10, 14))
        screen.blit(grid_surf, (self.margin, self.margin))

        panel_x = self.margin * 2 + grid_surf.get_width()
        y = self.margin
        if next_piece is not None:
            screen.blit(self._font.render(f"Next: {next_piece.code}", True, (230, 230, 230)), (panel_x, y))
            self._draw_preview(screen, next_piece, (panel_x, y + 24))
            y += 24 + 5 * (self.cell_size // 2 + 4)
        for text in lines:
            screen.blit(self._font.render(text, True, (230, 230, 230)), (panel_x, y))
            y += 26
        pygame.display.flip()
