from dataclasses import dataclass, replace
from enum import Enum
from typing import List, Optional, Tuple

# ----- Canvas & grid -----
WIDTH, HEIGHT = 500, 500
CELL_SIZE = 20
HEADER_H = 64          # strip above the canvas for the score lines

# ----- Colors -----
BG     = (239, 239, 239)   # #efefef
SNAKE  = (1, 1, 1)         # #010101
APPLE  = (255, 0, 0)
GRID   = (174, 174, 174)   # #aeaeae (drawn at half alpha)
TEXT   = (30, 30, 36)
HEADER = (220, 220, 230)

STORAGE_KEY = "high.score"
HIGH_SCORE_FILE = "high_score.json"


# ----- Directions (unit dx, dy) -----
class Direction(Enum):
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def opposite(self) -> "Direction":
        dx, dy = self.value
        return Direction((-dx, -dy))

    def is_perpendicular(self, other: "Direction") -> bool:
        return self is not other and self is not other.opposite


# ----- Play area -----
@dataclass(frozen=True)
class Bounds:
    """Square canvas of `size` units split into `cell`-sized cells.

    The play area is every cell inside [low, high] on both axes, which
    keeps `margin` cells between it and the lethal outer wall. Wall deaths
    and food placement both read it from here.
    """
    size: int
    cell: int
    margin: int

    @classmethod
    def from_config(cls, cfg: "Config") -> "Bounds":
        return cls(size=min(cfg.width, cfg.height), cell=cfg.cell_size, margin=cfg.margin)

    @property
    def low(self) -> int:
        return self.margin * self.cell

    @property
    def high(self) -> int:
        # last cell whose far edge still clears the margin
        return self.size - self.cell - self.margin * self.cell

    @property
    def cells_per_side(self) -> int:
        return self.size // self.cell

    def contains(self, p) -> bool:
        return self.low <= p[0] <= self.high and self.low <= p[1] <= self.high

    def play_cells(self) -> List[Tuple[int, int]]:
        coords = range(self.low, self.high + 1, self.cell)
        return [(x, y) for y in coords for x in coords]


# ----- Tunables -----
@dataclass
class Config:
    tick_ms: int = 200
    cell_size: int = CELL_SIZE
    width: int = WIDTH
    height: int = HEIGHT
    margin: int = 1                   # cells between the canvas edge and the play area
    draw_grid: bool = False
    spawn: Tuple[int, int] = (200, 200)
    spawn_length: int = 4
    spawn_direction: Direction = Direction.LEFT
    detect_bite: bool = True
    allow_restart: bool = True
    persist_high_score: bool = True
    seed: Optional[int] = None
    max_food_attempts: int = 10_000
    high_score_path: str = HIGH_SCORE_FILE
    storage_key: str = STORAGE_KEY

    @classmethod
    def classic(cls, **overrides) -> "Config":
        """Full feature set: bite detection, restart, high score, grid toggle."""
        return cls(**overrides)

    @classmethod
    def reduced(cls, **overrides) -> "Config":
        """The bare variant: wider margin, no bite check, single session."""
        base = cls(
            margin=2,
            draw_grid=False,
            detect_bite=False,
            allow_restart=False,
            persist_high_score=False,
        )
        return replace(base, **overrides)

    @property
    def bounds(self) -> Bounds:
        return Bounds.from_config(self)

    def validate(self) -> "Config":
        if self.tick_ms <= 0:
            raise ValueError(f"tick_ms must be positive, got {self.tick_ms}")
        if self.cell_size <= 0:
            raise ValueError(f"cell_size must be positive, got {self.cell_size}")
        if self.width % self.cell_size or self.height % self.cell_size:
            raise ValueError("canvas size must be a multiple of cell_size")
        if self.margin < 1:
            raise ValueError("margin must be at least one cell")
        bounds = self.bounds
        if bounds.low > bounds.high:
            raise ValueError("margin leaves no play area")
        if self.spawn_length < 4:
            raise ValueError(f"spawn_length must be >= 4, got {self.spawn_length}")
        if self.max_food_attempts < 1:
            raise ValueError("max_food_attempts must be >= 1")

        sx, sy = self.spawn
        if sx % self.cell_size or sy % self.cell_size:
            raise ValueError(f"spawn {self.spawn} is not aligned to the grid")
        dx, dy = self.spawn_direction.value
        tail_x = sx - dx * self.cell_size * (self.spawn_length - 1)
        tail_y = sy - dy * self.cell_size * (self.spawn_length - 1)
        for x, y in ((sx, sy), (tail_x, tail_y)):
            if not bounds.contains((x, y)):
                raise ValueError(f"spawn body leaves the play area at {(x, y)}")
        return self

