class GridSnakeError(Exception):
    """Base class for engine errors."""


class BoardFullError(GridSnakeError):
    """No free cell is left to place food on."""

    def __init__(self, attempts: int, occupied: int):
        super().__init__(f"no free cell for food after {attempts} attempts ({occupied} cells occupied)")
        self.attempts = attempts
        self.occupied = occupied


class GameStateError(GridSnakeError):
    """An operation was called in a phase where it makes no sense."""
