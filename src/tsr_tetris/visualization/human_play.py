from __future__ import annotations

import argparse
from typing import Dict, List, Optional

import pygame

from tsr_tetris.game import Action, GameConfig, TetrisGame
from tsr_tetris.learning import LearningProgress
from .renderer import Renderer


KEY_TO_ACTION: Dict[int, Action] = {
    pygame.K_LEFT: Action.LEFT,
    pygame.K_RIGHT: Action.RIGHT,
    pygame.K_UP: Action.ROTATE,
    pygame.K_DOWN: Action.SOFT_DROP,
    pygame.K_SPACE: Action.HARD_DROP,
}


def _status_lines(game: TetrisGame, progress: LearningProgress) -> List[str]:
    lines = [
        f"Score: {game.score}",
        f"Level: {game.level}",
        f"Lines: {game.lines}",
        f"Learned: {progress.learned_count}/{progress.total}",
    ]
    current = game.snapshot_current_piece()
    if current is not None and not game.is_game_over():
        lines.append(f"Falling: {current.code}")
    if game.is_game_over():
        lines += ["", "Game Over", "R to restart", "ESC to quit"]
    return lines


def run(seed: Optional[int] = None) -> None:
    pygame.init()
    try:
        clock = pygame.time.Clock()
        game = TetrisGame(GameConfig(random_seed=seed))
        progress = LearningProgress(game.catalog)
        progress.attach(game)
        renderer = Renderer(cell_size=28)

        screen = pygame.display.set_mode(renderer.window_size(game.board.width, game.board.height))
        pygame.display.set_caption("TSR Tetris")

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key == pygame.K_r:
                        game.restart()
                    else:
                        action = KEY_TO_ACTION.get(event.key)
                        if action is not None:
                            game.apply(action)

            # Gravity
            game.tick(clock.tick(60))

            renderer.draw(
                screen,
                game.get_state(),
                next_piece=game.snapshot_next_piece(),
                lines=_status_lines(game, progress),
            )
    finally:
        pygame.quit()


def main() -> None:
    p = argparse.ArgumentParser()
    p.add_argument("--seed", type=int, default=None)
    args = p.parse_args()
    run(args.seed)


if __name__ == "__main__":  # pragma: no cover
    main()
