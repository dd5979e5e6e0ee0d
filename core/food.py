# core/food.py
from __future__ import annotations
import logging
from typing import Optional
import numpy as np
from interfaces import Position
from .errors import SpawnExhaustedError
from .grid import Grid
from .snake import Snake

logger = logging.getLogger(__name__)

class FoodSpawner:
    """Places food uniformly at random on a cell the snake doesn't cover.

    Rejection sampling is cheap while the board is mostly empty. After
    `max_attempts` misses the free cells are read off the occupancy mask and
    one is picked directly, so the search is always bounded.
    """

    def __init__(self, rng: Optional[np.random.Generator] = None, max_attempts: int = 64):
        self.rng = rng if rng is not None else np.random.default_rng()
        self.max_attempts = max(0, int(max_attempts))

    def spawn(self, grid: Grid, snake: Snake) -> Position:
        for _ in range(self.max_attempts):
            pos = (int(self.rng.integers(grid.width)), int(self.rng.integers(grid.height)))
            if not snake.occupies(pos):
                return pos

        free = np.flatnonzero(~grid.occupancy(snake.segments))
        if free.size == 0:
            raise SpawnExhaustedError(f"no free cell left on {grid} (snake length {len(snake)})")
        idx = int(self.rng.choice(free))
        logger.debug("food placed from %d free cells after %d misses", free.size, self.max_attempts)
        y, x = divmod(idx, grid.width)
        return (x, y)
