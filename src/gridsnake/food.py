import logging
from typing import Iterable, Optional

import numpy as np  # type: ignore

from .config import Bounds
from .errors import BoardFullError
from .geometry import Point

logger = logging.getLogger(__name__)


def random_cell(bounds: Bounds, rng: np.random.Generator) -> Point:
    """A uniformly drawn, grid-aligned cell anywhere on the canvas."""
    n = bounds.cells_per_side
    gx, gy = rng.integers(0, n, size=2)
    return Point(int(gx) * bounds.cell, int(gy) * bounds.cell)


def place_food(
    occupied: Iterable[Point],
    bounds: Bounds,
    rng: Optional[np.random.Generator] = None,
    max_attempts: int = 10_000,
) -> Point:
    """
    Pick a free cell for the next apple.
    - Candidates are drawn over the whole canvas and redrawn when they hit
      the snake or fall inside the wall margin.
    - After `max_attempts` misses the free cells are enumerated and one is
      chosen uniformly; if there are none, BoardFullError is raised.
    """
    if rng is None:
        rng = np.random.default_rng()
    taken = {Point(p[0], p[1]) for p in occupied}

    for _ in range(max_attempts):
        cand = random_cell(bounds, rng)
        if cand in taken:
            logger.debug("food candidate %s is on the snake", cand)
            continue
        if not bounds.contains(cand):
            logger.debug("food candidate %s is inside the wall margin", cand)
            continue
        return cand

    free = [Point(x, y) for x, y in bounds.play_cells() if (x, y) not in taken]
    if not free:
        raise BoardFullError(max_attempts, len(taken))
    logger.debug("rejection sampling exhausted, choosing among %d free cells", len(free))
    return free[int(rng.integers(len(free)))]
