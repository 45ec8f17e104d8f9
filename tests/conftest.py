import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import numpy as np  # type: ignore
import pytest

from gridsnake.config import Config, Direction
from gridsnake.game import GameState
from gridsnake.geometry import Point, Velocity
from gridsnake.loop import TimerHandle


class ManualTimer:
    """Stands in for PygameTimer; ticks only when a test calls fire()."""

    def __init__(self):
        self.handles = []
        self.intervals = []
        self.callback = None

    def start(self, interval_ms, callback):
        self.intervals.append(interval_ms)
        self.callback = callback
        handle = TimerHandle(lambda: None)
        self.handles.append(handle)
        return handle

    @property
    def active(self) -> bool:
        return bool(self.handles) and self.handles[-1].active

    def fire(self) -> bool:
        if not self.active:
            return False
        self.callback()
        return True


class RecordingStore:
    def __init__(self, value: int = 0):
        self.value = value
        self.saved = []

    def load(self) -> int:
        return self.value

    def save(self, value: int) -> None:
        self.saved.append(value)
        self.value = value


@pytest.fixture
def cfg():
    return Config()


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def timer():
    return ManualTimer()


@pytest.fixture
def store():
    return RecordingStore()


def make_state(snake, direction, food=(400, 400), **kw) -> GameState:
    return GameState(
        snake=[Point(*p) for p in snake],
        velocity=Velocity.towards(direction),
        food=Point(*food),
        **kw,
    )


@pytest.fixture
def spawn_state():
    """The default leftward spawn with food out of the way."""
    return make_state(
        [(200, 200), (220, 200), (240, 200), (260, 200)],
        Direction.LEFT,
    )
