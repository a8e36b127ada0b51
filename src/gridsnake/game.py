# game.py
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, NamedTuple, Optional, Tuple, Union
import logging
import threading

import numpy as np  # type: ignore

from .config import (
    Config, Direction, GRID_SIZE,
    INITIAL_SNAKE, INITIAL_FOOD, INITIAL_DIRECTION,
)

logger = logging.getLogger(__name__)


# ---------- Value types ----------
class Position(NamedTuple):
    x: int
    y: int

    def moved(self, direction: Direction) -> "Position":
        dx, dy = direction.value
        return Position(self.x + dx, self.y + dy)

    def in_bounds(self, size: int) -> bool:
        return 0 <= self.x < size and 0 <= self.y < size


class GamePhase(Enum):
    START = "start"
    PAUSE = "pause"
    RUNNING = "running"
    GAME_OVER = "game_over"


# pause() is a toggle between these two and ignored everywhere else
_PAUSE_TOGGLE = {
    GamePhase.RUNNING: GamePhase.PAUSE,
    GamePhase.PAUSE: GamePhase.RUNNING,
}

# Cell codes used by Snapshot.to_grid()
EMPTY, BODY, HEAD, FOOD = 0, 1, 2, 3


class PhaseError(RuntimeError):
    """Raised when the engine is asked to step outside the RUNNING phase."""


@dataclass(frozen=True)
class Snapshot:
    """Read-only view of the game handed to renderers and listeners."""
    phase: GamePhase
    snake: Tuple[Position, ...]    # head at index 0
    food: Position
    score: int
    high_score: int
    direction: Direction
    grid_size: int

    @property
    def head(self) -> Position:
        return self.snake[0]

    def to_grid(self) -> np.ndarray:
        """
        Board as an int8 array indexed [y, x]:
        EMPTY=0, BODY=1, HEAD=2, FOOD=3. The snake is drawn over the food.
        """
        grid = np.zeros((self.grid_size, self.grid_size), dtype=np.int8)
        fx, fy = self.food
        grid[fy, fx] = FOOD
        for x, y in self.snake[1:]:
            grid[y, x] = BODY
        hx, hy = self.head
        grid[hy, hx] = HEAD
        return grid


# ---------- State ----------
@dataclass
class GameState:
    snake: List[Position]          # head at index 0
    food: Position
    direction: Direction = INITIAL_DIRECTION
    score: int = 0
    high_score: int = 0

    def __post_init__(self):
        self.snake = [Position(*p) for p in self.snake]
        self.food = Position(*self.food)
        if not self.snake:
            raise ValueError("snake needs at least one segment")


def new_game_state(high_score: int = 0) -> GameState:
    return GameState(
        snake=list(INITIAL_SNAKE),
        food=INITIAL_FOOD,
        direction=INITIAL_DIRECTION,
        score=0,
        high_score=high_score,
    )


def parse_direction(value: Union[Direction, str]) -> Direction:
    if isinstance(value, Direction):
        return value
    try:
        return Direction[str(value).upper()]
    except KeyError:
        raise ValueError(f"Unknown direction: {value!r}") from None


Listener = Callable[[Snapshot], None]


# ---------- State machine + engine ----------
class SnakeGame:
    """
    Single-snake game on a fixed square grid.

    Owns the phase (START / PAUSE / RUNNING / GAME_OVER) and the world
    (snake, food, direction, score, high score). Commands are synchronous
    and every change is pushed to subscribers as a Snapshot. A single lock
    serialises commands, direction changes and step().
    """

    def __init__(
        self,
        config: Optional[Config] = None,
        state: Optional[GameState] = None,
        phase: GamePhase = GamePhase.START,
    ):
        self.config = (config if config is not None else Config()).validate()
        self.rng = np.random.default_rng(self.config.seed)
        self._lock = threading.RLock()
        self._listeners: List[Listener] = []
        self.phase = phase
        self.state = state if state is not None else self._fresh_state(0)

    # ---- read side ----
    @property
    def grid_size(self) -> int:
        return GRID_SIZE

    def snapshot(self) -> Snapshot:
        with self._lock:
            s = self.state
            return Snapshot(
                phase=self.phase,
                snake=tuple(s.snake),
                food=s.food,
                score=s.score,
                high_score=s.high_score,
                direction=s.direction,
                grid_size=self.grid_size,
            )

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener; returns a callable that removes it again."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        snap = self.snapshot()
        for listener in list(self._listeners):
            listener(snap)

    # ---- commands ----
    def start(self) -> None:
        """Begin a fresh game and enter RUNNING."""
        with self._lock:
            self._reinit()
            self._set_phase(GamePhase.RUNNING)
        self._notify()

    def pause(self) -> None:
        """Toggle RUNNING <-> PAUSE. Ignored in START and GAME_OVER."""
        with self._lock:
            target = _PAUSE_TOGGLE.get(self.phase)
            if target is None:
                logger.debug("pause() ignored in phase %s", self.phase.name)
                return
            self._set_phase(target)
        self._notify()

    def reset(self) -> None:
        """Reinitialise the board and go back to START."""
        with self._lock:
            self._reinit()
            self._set_phase(GamePhase.START)
        self._notify()

    def start_again(self) -> None:
        self.reset()
        self.start()

    def set_direction(self, requested: Union[Direction, str]) -> None:
        """Change heading unless it is a 180° reversal of the current one."""
        requested = parse_direction(requested)
        with self._lock:
            current = self.state.direction
            if requested is current.opposite:
                logger.debug("Reversal %s -> %s dropped", current.name, requested.name)
                return
            if requested is current:
                return
            self.state.direction = requested
        self._notify()

    # ---- engine ----
    def step(self) -> None:
        """
        Advance the world by exactly one cell.

        A wall or self collision moves the game to GAME_OVER and leaves the
        snake, food and score untouched. Eating the food grows the snake by
        one segment and scores a point.
        """
        with self._lock:
            if self.phase is not GamePhase.RUNNING:
                raise PhaseError(f"step() requires RUNNING, phase is {self.phase.name}")

            s = self.state
            new_head = s.snake[0].moved(s.direction)

            # Wall collision first, then self collision
            if not new_head.in_bounds(self.grid_size) or new_head in s.snake:
                self._update_high_score()
                self._set_phase(GamePhase.GAME_OVER)
                logger.info(
                    "Game over at %s (score=%d, high score=%d)",
                    tuple(new_head), s.score, s.high_score,
                )
            else:
                s.snake.insert(0, new_head)
                if new_head == s.food:
                    s.food = self.spawn_food(s.snake)
                    s.score += 1
                    self._update_high_score()
                else:
                    s.snake.pop()
        self._notify()

    def spawn_food(self, snake: List[Position]) -> Position:
        """Pick the next food cell according to config.food_placement."""
        size = self.grid_size
        if self.config.food_placement == "disjoint":
            occupied = set(snake)
            free = [Position(x, y) for y in range(size) for x in range(size)
                    if (x, y) not in occupied]
            if free:
                return free[int(self.rng.integers(len(free)))]
        x, y = self.rng.integers(size, size=2)
        return Position(int(x), int(y))

    # ---- internals ----
    def _fresh_state(self, high_score: int) -> GameState:
        state = new_game_state(high_score)
        if not state.food.in_bounds(self.grid_size):
            state.food = self.spawn_food(state.snake)
        return state

    def _reinit(self) -> None:
        self._update_high_score()
        self.state = self._fresh_state(self.state.high_score)

    def _update_high_score(self) -> None:
        s = self.state
        if s.score > s.high_score:
            s.high_score = s.score

    def _set_phase(self, phase: GamePhase) -> None:
        if phase is not self.phase:
            logger.debug("Phase %s -> %s", self.phase.name, phase.name)
        self.phase = phase
