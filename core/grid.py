# core/grid.py  (pure geometry, no state beyond the dimensions)
from __future__ import annotations
from typing import Iterable, Iterator
import numpy as np
from interfaces import Direction, Position

class Grid:
    def __init__(self, width: int, height: int, wrap: bool = True):
        if width < 1 or height < 1:
            raise ValueError(f"grid must be at least 1x1, got {width}x{height}")
        self.width = width
        self.height = height
        self.wrap = wrap

    @property
    def area(self) -> int:
        return self.width * self.height

    def is_inside(self, pos: Position) -> bool:
        x, y = pos
        return 0 <= x < self.width and 0 <= y < self.height

    def neighbor(self, pos: Position, direction: Direction) -> Position:
        """Adjacent cell in `direction`.

        With wrap-around the result is always inside the grid. A bounded grid
        returns the raw coordinates, which may be off-grid; callers decide what
        leaving the board means.
        """
        x, y = pos
        nx, ny = x + direction.dx, y + direction.dy
        if self.wrap:
            return (nx % self.width, ny % self.height)
        return (nx, ny)

    def adjacent(self, a: Position, b: Position) -> bool:
        return any(self.neighbor(a, d) == b for d in Direction)

    def cells(self) -> Iterator[Position]:
        for y in range(self.height):
            for x in range(self.width):
                yield (x, y)

    def occupancy(self, positions: Iterable[Position]) -> np.ndarray:
        """Boolean (height, width) mask, True where a position is taken."""
        mask = np.zeros((self.height, self.width), dtype=bool)
        for x, y in positions:
            mask[y, x] = True
        return mask

    def __repr__(self) -> str:
        return f"Grid({self.width}x{self.height}, wrap={self.wrap})"
