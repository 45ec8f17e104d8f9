# game.py
import logging
from dataclasses import dataclass
from typing import List, Optional

import numpy as np  # type: ignore

from .config import Config, Direction
from .errors import GameStateError
from .food import place_food
from .geometry import Point, Velocity, add

logger = logging.getLogger(__name__)

WALL, BITE, BOARD_FULL = "wall", "bite", "board-full"


# ---------- Helpers ----------
def spawn_snake(cfg: Config) -> List[Point]:
    """Head at cfg.spawn, body trailing away from the spawn heading."""
    dx, dy = cfg.spawn_direction.value
    sx, sy = cfg.spawn
    return [
        Point(sx - dx * cfg.cell_size * i, sy - dy * cfg.cell_size * i)
        for i in range(cfg.spawn_length)
    ]


def bite(snake: List[Point]) -> bool:
    head = snake[0]
    return head in snake[1:]


def out_of_bounds(p: Point, cfg: Config) -> bool:
    return not cfg.bounds.contains(p)


def collision(snake: List[Point], cfg: Config) -> Optional[str]:
    """Why the snake is dead, or None."""
    if out_of_bounds(snake[0], cfg):
        return WALL
    if cfg.detect_bite and bite(snake):
        return BITE
    return None


# ---------- State ----------
@dataclass
class GameState:
    snake: List[Point]             # head at index 0
    velocity: Velocity
    food: Point
    score: int = 0
    high_score: int = 0
    accepting_input: bool = True   # cleared by the first accepted turn of a tick
    game_over: bool = False
    reason: Optional[str] = None   # wall / bite / board-full once game_over

    @property
    def head(self) -> Point:
        return self.snake[0]

    @property
    def direction(self) -> Direction:
        return self.velocity.direction


def new_game_state(cfg: Config, rng: np.random.Generator, high_score: int = 0) -> GameState:
    snake = spawn_snake(cfg)
    food = place_food(snake, cfg.bounds, rng, cfg.max_food_attempts)
    return GameState(
        snake=snake,
        velocity=Velocity.towards(cfg.spawn_direction, cfg.cell_size),
        food=food,
        high_score=high_score,
    )


# ---------- Transitions ----------
def step(state: GameState, cfg: Config, rng: np.random.Generator) -> bool:
    """
    Advance the game by one tick.
    - Eating grows the snake by one and re-places the food.
    - The collision check runs on the moved snake.
    Returns True if alive, False if game over.
    Raises BoardFullError (state untouched) when food can't be re-placed.
    """
    if state.game_over:
        raise GameStateError("step() called on a finished game")

    new_head = add(state.head, state.velocity.delta)
    grown = [new_head] + state.snake

    if new_head == state.food:
        # may raise; nothing has been committed yet
        state.food = place_food(grown, cfg.bounds, rng, cfg.max_food_attempts)
        state.snake = grown
        state.score += 1
        logger.info("score %d", state.score)
    else:
        grown.pop()
        state.snake = grown

    reason = collision(state.snake, cfg)
    if reason is not None:
        end_session(state, reason)
        return False

    state.accepting_input = True
    return True


def end_session(state: GameState, reason: str) -> bool:
    """Move to the terminal phase. Returns True if the high score was beaten."""
    state.game_over = True
    state.accepting_input = False
    state.reason = reason
    logger.info("Game over! (%s) score=%d", reason, state.score)
    if state.score > state.high_score:
        state.high_score = state.score
        return True
    return False


def turn(state: GameState, direction: Direction, cell_size: int) -> bool:
    """Apply a heading change; only the first perpendicular turn of a tick counts."""
    if state.game_over:
        raise GameStateError("turn() called on a finished game")
    if not state.accepting_input:
        logger.debug("turn %s ignored: already turned this tick", direction.name)
        return False
    if not direction.is_perpendicular(state.direction):
        logger.debug("turn %s ignored while heading %s", direction.name, state.direction.name)
        return False

    state.velocity = Velocity.towards(direction, cell_size)
    state.accepting_input = False
    logger.debug("turn %s accepted", direction.name)
    return True


def restart(state: GameState, cfg: Config, rng: np.random.Generator) -> GameState:
    """Fresh session carrying over the high score."""
    if not state.game_over:
        raise GameStateError("restart() called while the game is running")
    if not cfg.allow_restart:
        raise GameStateError("restart is disabled in this profile")
    return new_game_state(cfg, rng, high_score=state.high_score)
