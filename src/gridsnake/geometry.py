from dataclasses import dataclass
from typing import NamedTuple

from .config import CELL_SIZE, Direction


class Point(NamedTuple):
    x: int
    y: int


def add(a: Point, b: Point) -> Point:
    """Component-wise sum."""
    return Point(a[0] + b[0], a[1] + b[1])


def delta_for(direction: Direction, cell_size: int = CELL_SIZE) -> Point:
    dx, dy = direction.value
    return Point(dx * cell_size, dy * cell_size)


@dataclass(frozen=True)
class Velocity:
    """Heading plus the per-tick displacement; built only through `towards`."""
    direction: Direction
    delta: Point

    @classmethod
    def towards(cls, direction: Direction, cell_size: int = CELL_SIZE) -> "Velocity":
        return cls(direction, delta_for(direction, cell_size))

    def __post_init__(self):
        dx, dy = self.direction.value
        ddx, ddy = self.delta
        if ddx * dy != ddy * dx or ddx * dx + ddy * dy <= 0:
            raise ValueError(f"delta {self.delta} does not point {self.direction.name}")
