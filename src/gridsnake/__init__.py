"""Grid snake: a tick-driven snake engine with a pygame front end."""

from .config import Bounds, Config, Direction
from .errors import BoardFullError, GameStateError, GridSnakeError
from .food import place_food
from .game import GameState, new_game_state, restart, step, turn
from .geometry import Point, Velocity, add
from .keys import KeyAction, classify_key
from .loop import GameLoop, Phase

__all__ = [
    "Config", "Direction",
    "BoardFullError", "GameStateError", "GridSnakeError",
    "Bounds", "place_food",
    "GameState", "new_game_state", "restart", "step", "turn",
    "Point", "Velocity", "add",
    "KeyAction", "classify_key",
    "GameLoop", "Phase",
]
