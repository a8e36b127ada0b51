# driver.py
from typing import Callable, Dict, Optional
import logging

import pygame  # type: ignore

from .config import Direction
from .game import GamePhase, SnakeGame, Snapshot

logger = logging.getLogger(__name__)

# Custom event posted by pygame's timer once per tick
TICK_EVENT = pygame.USEREVENT + 1

KEY_TO_DIRECTION: Dict[int, Direction] = {
    pygame.K_UP:    Direction.UP,
    pygame.K_w:     Direction.UP,
    pygame.K_DOWN:  Direction.DOWN,
    pygame.K_s:     Direction.DOWN,
    pygame.K_LEFT:  Direction.LEFT,
    pygame.K_a:     Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_d:     Direction.RIGHT,
}


class PygameTimer:
    """Periodic TICK_EVENT source backed by pygame.time.set_timer."""

    def __init__(self, event_type: int = TICK_EVENT):
        self.event_type = event_type

    def start(self, interval_ms: int) -> None:
        pygame.time.set_timer(self.event_type, interval_ms)

    def cancel(self) -> None:
        pygame.time.set_timer(self.event_type, 0)
        # drop ticks that fired before the cancel but were not handled yet
        pygame.event.clear(self.event_type)


class TickDriver:
    """
    Owns the tick timer and the input listener for one SnakeGame.

    Both resources are held exactly while the game is RUNNING: the driver
    acquires them when a snapshot reports RUNNING and releases them, in the
    same call, on any transition away from it (pause, reset, game over).
    """

    def __init__(
        self,
        game: SnakeGame,
        timer: Optional[PygameTimer] = None,
        tick_ms: Optional[int] = None,
    ):
        self.game = game
        self.timer = timer if timer is not None else PygameTimer()
        self.tick_ms = tick_ms if tick_ms is not None else game.config.tick_ms
        self.ticking = False
        self.input_attached = False
        self._unsubscribe: Optional[Callable[[], None]] = game.subscribe(self._on_snapshot)
        self._on_snapshot(game.snapshot())

    @property
    def active(self) -> bool:
        return self.ticking and self.input_attached

    def _on_snapshot(self, snap: Snapshot) -> None:
        # an earlier listener may already have moved the game on
        if self.game.phase is GamePhase.RUNNING:
            self.acquire()
        else:
            self.release()

    def acquire(self) -> None:
        if self.active:
            return
        self.timer.start(self.tick_ms)
        self.ticking = True
        self.input_attached = True
        logger.debug("Driver acquired (tick every %d ms)", self.tick_ms)

    def release(self) -> None:
        if not (self.ticking or self.input_attached):
            return
        self.timer.cancel()
        self.ticking = False
        self.input_attached = False
        logger.debug("Driver released")

    def handle_event(self, event) -> bool:
        """Route a pygame event into the game. Returns True if it was consumed."""
        if event.type == TICK_EVENT:
            if not self.ticking:
                return False
            self.game.step()
            return True
        if event.type == pygame.KEYDOWN:
            direction = KEY_TO_DIRECTION.get(event.key)
            if direction is None or not self.input_attached:
                return False
            self.game.set_direction(direction)
            return True
        return False

    def close(self) -> None:
        self.release()
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def __enter__(self) -> "TickDriver":
        return self

    def __exit__(self, *exc) -> None:
        self.close()
