from dataclasses import dataclass
from enum import Enum
from typing import Optional

# ----- Grid & timing -----
GRID_SIZE = 10
TICK_MS = 200

# ----- Window -----
CELL_SIZE = 32
CELL_GAP = 4
BOARD_PAD = 16
HEADER_H = 56
FOOTER_H = 64
BOARD_PX = GRID_SIZE * CELL_SIZE + (GRID_SIZE - 1) * CELL_GAP + 2 * BOARD_PAD
WIDTH = BOARD_PX + 2 * BOARD_PAD
HEIGHT = HEADER_H + BOARD_PX + FOOTER_H

# ----- Colors -----
BG         = (15, 15, 15)
PANEL      = (30, 30, 30)
CELL       = (30, 30, 30)
CELL_EDGE  = (55, 65, 81)
SNAKE      = (129, 233, 129)
FOOD       = (97, 233, 233)
TITLE      = (69, 190, 238)
TEXT       = (81, 240, 240)
LIGHT      = (229, 230, 233)
GAME_OVER  = (248, 113, 113)
HELP_PANEL = (135, 134, 190)
DARK       = (0, 0, 0)


# ----- Directions (dx, dy), y grows downward -----
class Direction(Enum):
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def opposite(self) -> "Direction":
        dx, dy = self.value
        return Direction((-dx, -dy))


# ----- Initial board -----
INITIAL_SNAKE = ((0, 0),)
INITIAL_FOOD = (5, 5)
INITIAL_DIRECTION = Direction.RIGHT

FOOD_PLACEMENTS = ("uniform", "disjoint")


# ----- Tunables -----
@dataclass
class Config:
    seed: Optional[int] = None
    tick_ms: int = TICK_MS
    food_placement: str = "disjoint"   # "uniform" may drop food onto the snake

    def validate(self) -> "Config":
        if self.food_placement not in FOOD_PLACEMENTS:
            raise ValueError(
                f"Unknown food placement {self.food_placement!r}; "
                f"expected one of {', '.join(FOOD_PLACEMENTS)}"
            )
        if self.tick_ms <= 0:
            raise ValueError(f"tick_ms must be positive, got {self.tick_ms}")
        return self
