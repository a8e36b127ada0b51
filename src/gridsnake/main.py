# main.py
import argparse
import logging
from typing import Optional, Sequence

import pygame  # type: ignore

from .config import WIDTH, HEIGHT, Config
from .game import GamePhase, SnakeGame
from .driver import TickDriver
from .render import draw_frame

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Snake on a 10x10 grid.")
    parser.add_argument("--seed", type=int, default=None,
                        help="seed for food placement (default: random)")
    parser.add_argument(
        "--uniform-food",
        action="store_true",
        help="respawn food on any cell, even one covered by the snake",
    )
    parser.add_argument("--log-level", type=str, default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser.parse_args(argv)


def handle_command_key(game: SnakeGame, key: int) -> bool:
    """Map control keys onto game commands. Returns True if the key was used."""
    phase = game.phase
    if key in (pygame.K_SPACE, pygame.K_RETURN):
        if phase is GamePhase.GAME_OVER:
            game.start_again()
        elif phase is GamePhase.START:
            game.start()
        else:
            return False
        return True
    if key == pygame.K_p:
        game.pause()
        return True
    if key == pygame.K_r:
        game.reset()
        return True
    return False


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    cfg = Config(seed=args.seed, food_placement="uniform" if args.uniform_food else "disjoint")

    pygame.init()
    font = pygame.font.SysFont(None, 24)
    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    pygame.display.set_caption("Snake Game")
    clock = pygame.time.Clock()

    game = SnakeGame(cfg)
    show_instructions = True
    running = True

    with TickDriver(game) as driver:
        while running:
            # 1) input + ticks
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                    break
                if driver.handle_event(event):
                    continue
                if event.type == pygame.KEYDOWN:
                    if event.key in (pygame.K_i, pygame.K_ESCAPE):
                        show_instructions = False
                    elif handle_command_key(game, event.key):
                        if game.phase is GamePhase.RUNNING:
                            show_instructions = False

            # 2) render
            draw_frame(screen, font, game.snapshot(), show_instructions)
            pygame.display.flip()
            clock.tick(60)  # movement is driven by the tick timer, not the frame rate

    logger.info("High score this session: %d", game.snapshot().high_score)
    pygame.quit()


if __name__ == "__main__":
    main()
