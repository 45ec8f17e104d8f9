"""
Tests for PygameTimer - ticks delivered through pygame's event queue.
"""

import pygame  # type: ignore
import pytest

from conftest import make_state
from gridsnake.config import Config, Direction
from gridsnake.geometry import Point
from gridsnake.loop import TICK_EVENT, GameLoop, Phase, PygameTimer

SLOW = 60_000  # long enough that pygame never fires on its own during a test


@pytest.fixture(autouse=True)
def pygame_session():
    pygame.init()
    yield
    pygame.quit()


@pytest.fixture
def set_timer_calls(monkeypatch):
    calls = []
    real = pygame.time.set_timer

    def recording(event, millis):
        calls.append((event, millis))
        real(event, millis)

    monkeypatch.setattr(pygame.time, "set_timer", recording)
    return calls


def tick_for(timer):
    return pygame.event.Event(TICK_EVENT, gen=timer.generation)


class TestPygameTimer:
    def test_start_arms_pygame_timer(self, set_timer_calls):
        timer = PygameTimer()
        handle = timer.start(SLOW, lambda: None)
        assert handle.active
        assert timer.generation == 1
        (event, millis), = set_timer_calls
        assert millis == SLOW
        assert event.type == TICK_EVENT
        assert event.gen == 1

    def test_dispatch_runs_callback(self):
        fired = []
        timer = PygameTimer()
        timer.start(SLOW, lambda: fired.append(1))
        assert timer.dispatch(tick_for(timer))
        assert fired == [1]

    def test_other_events_are_not_ticks(self):
        timer = PygameTimer()
        timer.start(SLOW, lambda: None)
        assert not timer.dispatch(pygame.event.Event(pygame.USEREVENT + 5, gen=timer.generation))
        assert not timer.dispatch(pygame.event.Event(TICK_EVENT))

    def test_cancel_stops_timer_and_clears_queue(self, set_timer_calls):
        fired = []
        timer = PygameTimer()
        handle = timer.start(SLOW, lambda: fired.append(1))
        pygame.event.post(tick_for(timer))
        handle.cancel()
        handle.cancel()
        assert set_timer_calls[-1] == (TICK_EVENT, 0)
        assert len(set_timer_calls) == 2
        assert pygame.event.get(TICK_EVENT) == []
        assert not timer.dispatch(tick_for(timer))
        assert fired == []

    def test_rearm_drops_ticks_from_previous_arm(self):
        fired = []
        timer = PygameTimer()
        first = timer.start(SLOW, lambda: fired.append("old"))
        stale = tick_for(timer)
        second = timer.start(SLOW, lambda: fired.append("new"))
        assert not first.active
        assert second.active
        assert timer.generation == 2
        assert not timer.dispatch(stale)
        assert timer.dispatch(tick_for(timer))
        assert fired == ["new"]


class TestLoopOnPygameTimer:
    def test_tick_fetched_before_restart_is_discarded(self, rng, store):
        cfg = Config(tick_ms=SLOW)
        timer = PygameTimer()
        loop = GameLoop(cfg, timer, store, rng=rng)
        loop.start()
        loop.state = make_state([(20, 200), (40, 200), (60, 200), (80, 200)], Direction.LEFT)

        # one pump batch: tick, restart key, tick from the same arm
        tick = tick_for(timer)
        assert timer.dispatch(tick)
        assert loop.phase is Phase.GAME_OVER

        loop.handle_key("r")
        assert loop.phase is Phase.RUNNING
        assert loop.state.head == Point(180, 200)
        assert timer.generation == 2

        assert not timer.dispatch(tick)
        assert loop.state.head == Point(180, 200)

        loop.state.food = Point(400, 400)
        assert timer.dispatch(tick_for(timer))
        assert loop.state.head == Point(160, 200)
        loop.close()
