import logging
from enum import Enum
from typing import Callable, Optional

import numpy as np  # type: ignore
import pygame  # type: ignore

from . import game
from .config import Config
from .errors import BoardFullError, GameStateError
from .game import GameState
from .keys import KeyAction, classify_key

logger = logging.getLogger(__name__)

TICK_EVENT = pygame.USEREVENT + 1

Listener = Callable[[GameState], None]


# ---------- Timers ----------
class TimerHandle:
    """A running periodic timer. cancel() may be called any number of times."""

    def __init__(self, on_cancel: Callable[[], None]):
        self._on_cancel = on_cancel
        self.active = True

    def cancel(self) -> None:
        if not self.active:
            return
        self.active = False
        self._on_cancel()


class PygameTimer:
    """
    Periodic ticks through pygame's event queue. The event pump hands
    TICK_EVENT back via dispatch(), so ticks and key presses are handled
    one at a time on the same thread.

    Every arm gets a new generation number carried on its tick events;
    ticks from an earlier arm are dropped even if the pump already
    pulled them off the queue.
    """

    def __init__(self, event_type: int = TICK_EVENT):
        self.event_type = event_type
        self.generation = 0
        self._callback: Optional[Callable[[], None]] = None
        self._handle: Optional[TimerHandle] = None

    def start(self, interval_ms: int, callback: Callable[[], None]) -> TimerHandle:
        if self._handle is not None:
            self._handle.cancel()
        self.generation += 1
        tick = pygame.event.Event(self.event_type, gen=self.generation)
        pygame.time.set_timer(tick, interval_ms)
        self._callback = callback
        self._handle = TimerHandle(self._stop)
        logger.debug("timer armed every %d ms (generation %d)", interval_ms, self.generation)
        return self._handle

    def _stop(self) -> None:
        pygame.time.set_timer(self.event_type, 0)
        # ticks still queued are dropped, not delivered late
        pygame.event.clear(self.event_type)
        self._callback = None
        logger.debug("timer cancelled (generation %d)", self.generation)

    def is_live(self, event) -> bool:
        return (
            event.type == self.event_type
            and self._callback is not None
            and getattr(event, "gen", None) == self.generation
        )

    def dispatch(self, event) -> bool:
        """Run the tick callback for `event`; False if it is not a live tick."""
        if not self.is_live(event):
            return False
        self._callback()
        return True


# ---------- Driver ----------
class Phase(Enum):
    IDLE = "idle"
    RUNNING = "running"
    GAME_OVER = "game_over"


class GameLoop:
    """
    Idle -> Running -> GameOver -> (restart) -> Running.

    Entering Running steps once right away, then arms the timer; every
    timer firing steps again until the game ends, which cancels the timer.
    Usable as a context manager so the timer is released on teardown.
    """

    def __init__(
        self,
        cfg: Config,
        timer,
        store,
        rng: Optional[np.random.Generator] = None,
        on_frame: Optional[Listener] = None,
        on_game_over: Optional[Listener] = None,
    ):
        self.cfg = cfg
        self.timer = timer
        self.store = store
        self.rng = rng if rng is not None else np.random.default_rng(cfg.seed)
        self.on_frame = on_frame
        self.on_game_over = on_game_over

        self.phase = Phase.IDLE
        self.state: Optional[GameState] = None
        self._handle: Optional[TimerHandle] = None
        self._persisted = 0

    def __enter__(self) -> "GameLoop":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    # ----- lifecycle -----
    def start(self) -> GameState:
        if self.phase is not Phase.IDLE:
            raise GameStateError(f"start() called in phase {self.phase.value}")
        self._persisted = self.store.load()
        self.state = game.new_game_state(self.cfg, self.rng, high_score=self._persisted)
        logger.info("new game (high score %d)", self._persisted)
        self._enter_running()
        return self.state

    def restart(self) -> GameState:
        if self.phase is not Phase.GAME_OVER:
            raise GameStateError(f"restart() called in phase {self.phase.value}")
        self.state = game.restart(self.state, self.cfg, self.rng)
        logger.info("restarting (high score %d)", self.state.high_score)
        self._enter_running()
        return self.state

    def close(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _enter_running(self) -> None:
        self.phase = Phase.RUNNING
        self._advance()
        if self.phase is Phase.RUNNING:
            self._handle = self.timer.start(self.cfg.tick_ms, self.tick)

    # ----- ticks -----
    def tick(self) -> None:
        if self.phase is not Phase.RUNNING:
            raise GameStateError(f"tick() called in phase {self.phase.value}")
        self._advance()

    def _advance(self) -> None:
        try:
            game.step(self.state, self.cfg, self.rng)
        except BoardFullError as e:
            logger.error("%s", e)
            game.end_session(self.state, game.BOARD_FULL)

        if self.on_frame is not None:
            self.on_frame(self.state)
        if self.state.game_over:
            self._finish()

    def _finish(self) -> None:
        self.close()
        self.phase = Phase.GAME_OVER
        if self.cfg.persist_high_score and self.state.score > self._persisted:
            self.store.save(self.state.score)
            self._persisted = self.state.score
        if self.on_game_over is not None:
            self.on_game_over(self.state)

    # ----- input -----
    def handle_key(self, key) -> KeyAction:
        """Route one raw key press. Returns the action it was classified as."""
        action = classify_key(key)
        direction = action.direction
        if direction is not None:
            if self.phase is Phase.RUNNING:
                game.turn(self.state, direction, self.cfg.cell_size)
        elif action is KeyAction.RESTART:
            if self.phase is Phase.GAME_OVER and self.cfg.allow_restart:
                self.restart()
        return action
