import os

# Headless SDL so pygame surfaces and fonts work without a display
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from gridsnake.config import Config, Direction
from gridsnake.game import GamePhase, GameState, SnakeGame


class FakeTimer:
    """Records start/cancel calls instead of talking to pygame."""

    def __init__(self):
        self.starts = []
        self.cancels = 0

    def start(self, interval_ms):
        self.starts.append(interval_ms)

    def cancel(self):
        self.cancels += 1

    @property
    def armed(self):
        return len(self.starts) > self.cancels


@pytest.fixture
def make_game():
    """Build a game positioned on an arbitrary board."""
    def _make(snake=((0, 0),), food=(5, 5), direction=Direction.RIGHT,
              phase=GamePhase.RUNNING, score=0, high_score=0, **cfg):
        cfg.setdefault("seed", 1234)
        state = GameState(
            snake=list(snake),
            food=food,
            direction=direction,
            score=score,
            high_score=high_score,
        )
        return SnakeGame(Config(**cfg), state=state, phase=phase)
    return _make


@pytest.fixture
def fake_timer():
    return FakeTimer()
