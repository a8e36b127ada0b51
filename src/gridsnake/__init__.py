"""Snake on a fixed 10x10 grid: game state machine, tick engine and pygame front end."""

from gridsnake.config import Config, Direction, GRID_SIZE, TICK_MS
from gridsnake.game import GamePhase, GameState, PhaseError, Position, SnakeGame, Snapshot

__all__ = [
    "Config", "Direction", "GRID_SIZE", "TICK_MS",
    "GamePhase", "GameState", "PhaseError", "Position", "SnakeGame", "Snapshot",
]
