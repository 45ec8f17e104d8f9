from enum import Enum
from typing import Dict, Optional

from .config import Direction


class KeyAction(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    RESTART = "restart"
    IGNORE = "ignore"

    @property
    def direction(self) -> Optional[Direction]:
        return _DIRECTIONS.get(self)


_DIRECTIONS = {
    KeyAction.UP: Direction.UP,
    KeyAction.DOWN: Direction.DOWN,
    KeyAction.LEFT: Direction.LEFT,
    KeyAction.RIGHT: Direction.RIGHT,
}

# Keys are matched after normalize_key(): browser-style "ArrowUp" and
# pygame-style "up" both end up as "up".
KEY_BINDINGS: Dict[str, KeyAction] = {
    "up": KeyAction.UP,
    "w": KeyAction.UP,
    "down": KeyAction.DOWN,
    "s": KeyAction.DOWN,
    "left": KeyAction.LEFT,
    "a": KeyAction.LEFT,
    "right": KeyAction.RIGHT,
    "d": KeyAction.RIGHT,
    "r": KeyAction.RESTART,
    " ": KeyAction.RESTART,
    "space": KeyAction.RESTART,
}


def normalize_key(key: str) -> str:
    if key == " ":
        return key
    key = key.strip().lower()
    if key.startswith("arrow"):
        key = key[len("arrow"):]
    return key


def classify_key(key) -> KeyAction:
    """Raw key identifier -> action. Anything unknown is IGNORE."""
    if not isinstance(key, str) or not key:
        return KeyAction.IGNORE
    return KEY_BINDINGS.get(normalize_key(key), KeyAction.IGNORE)
