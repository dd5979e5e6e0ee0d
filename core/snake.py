# core/snake.py
from __future__ import annotations
from collections import deque
from typing import Iterable, Optional, Tuple
from interfaces import Direction, Position
from .errors import ConstructionError
from .grid import Grid

class Snake:
    """Body segments (head first), heading and deferred growth.

    `direction` is what the next tick will use; `_moved` is the heading of the
    last committed move. A turn opposite either one is refused, so neither a
    U-turn nor two turns between ticks can fold the head back onto the neck.
    """

    def __init__(self, segments: Iterable[Position], direction: Direction, grid: Grid):
        body = deque(tuple(p) for p in segments)
        if not body:
            raise ConstructionError("snake needs at least one segment")
        if len(set(body)) != len(body):
            raise ConstructionError("snake segments overlap")
        for a, b in zip(body, list(body)[1:]):
            if not grid.adjacent(a, b):
                raise ConstructionError(f"segments {a} and {b} are not adjacent")
        for p in body:
            if not grid.is_inside(p):
                raise ConstructionError(f"segment {p} lies outside {grid}")
        self.grid = grid
        self._body: deque[Position] = body
        self._cells = set(body)
        self.direction = direction
        self._moved = direction
        self.pending_growth = 0

    @classmethod
    def straight(cls, head: Position, length: int, direction: Direction, grid: Grid) -> "Snake":
        """A straight snake of `length` cells trailing behind `head`."""
        back = direction.opposite
        segments = [head]
        for _ in range(length - 1):
            segments.append(grid.neighbor(segments[-1], back))
        return cls(segments, direction, grid)

    # ---- read accessors ----
    @property
    def head(self) -> Position:
        return self._body[0]

    @property
    def tail(self) -> Position:
        return self._body[-1]

    @property
    def segments(self) -> Tuple[Position, ...]:
        return tuple(self._body)

    def __len__(self) -> int:
        return len(self._body)

    def occupies(self, pos: Position) -> bool:
        return tuple(pos) in self._cells

    @property
    def will_vacate_tail(self) -> bool:
        # a length-1 snake's tail is its head, which always moves on
        return self.pending_growth == 0 or len(self._body) == 1

    def blocks(self, pos: Position) -> bool:
        """True if moving the head onto `pos` would hit the body.

        The tail only counts when it is going to stay put this tick.
        """
        if not self.occupies(pos):
            return False
        return not (self.will_vacate_tail and tuple(pos) == self.tail)

    # ---- movement ----
    def set_direction(self, direction: Direction) -> bool:
        # neither a U-turn on the current heading nor two turns folding back
        if direction in (self.direction.opposite, self._moved.opposite):
            return False
        self.direction = direction
        return True

    def advance(self, direction: Optional[Direction] = None) -> Position:
        return self.grid.neighbor(self.head, direction or self.direction)

    def commit_move(self, new_head: Position, grow: bool) -> None:
        if grow:
            self.pending_growth += 1
        new_head = tuple(new_head)
        if self.pending_growth > 0:
            self.pending_growth -= 1
        else:
            self._cells.discard(self._body.pop())
        self._body.appendleft(new_head)
        self._cells.add(new_head)
        self._moved = self.direction

    # ---- state ----
    def get_state(self) -> dict:
        return {
            "segments": [list(p) for p in self._body],
            "direction": self.direction.name,
            "moved": self._moved.name,
            "pending_growth": self.pending_growth,
        }

    def set_state(self, state: dict) -> None:
        self._body = deque(tuple(p) for p in state["segments"])
        self._cells = set(self._body)
        self.direction = Direction[state["direction"]]
        self._moved = Direction[state["moved"]]
        self.pending_growth = int(state["pending_growth"])

    def __repr__(self) -> str:
        return f"Snake(head={self.head}, len={len(self)}, dir={self.direction.name})"
