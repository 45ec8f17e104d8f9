import json
import logging
import os

from .config import STORAGE_KEY

logger = logging.getLogger(__name__)


class HighScoreStore:
    """
    One integer under `key` in a small JSON file, the desktop stand-in
    for browser local storage. Other keys in the file are preserved.
    """

    def __init__(self, path: str, key: str = STORAGE_KEY):
        self.path = path
        self.key = key

    def _read_all(self) -> dict:
        with open(self.path, "r", encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"expected a JSON object, got {type(data).__name__}")
        return data

    def load(self) -> int:
        """Stored high score; 0 when absent or unreadable."""
        if not os.path.exists(self.path):
            return 0
        try:
            value = self._read_all().get(self.key, 0)
        except (OSError, ValueError) as e:
            logger.warning("ignoring unreadable high score file %s: %s", self.path, e)
            return 0
        # bool is an int subclass; reject it along with floats/strings
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            logger.warning("ignoring invalid high score %r in %s", value, self.path)
            return 0
        return value

    def save(self, value: int) -> None:
        try:
            data = self._read_all() if os.path.exists(self.path) else {}
        except (OSError, ValueError):
            data = {}
        data[self.key] = int(value)

        folder = os.path.dirname(self.path)
        if folder:
            os.makedirs(folder, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(data, f)
        logger.info("saved high score %d to %s", value, self.path)


class MemoryStore:
    """Non-persistent store, used when persistence is switched off."""

    def __init__(self, value: int = 0):
        self.value = value

    def load(self) -> int:
        return self.value

    def save(self, value: int) -> None:
        self.value = int(value)
