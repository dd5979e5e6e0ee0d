# interfaces/__init__.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Tuple, Optional, Protocol

Position = Tuple[int, int]

class Direction(Enum):
    # (dx, dy) in screen coordinates, y grows downwards
    RIGHT = (1, 0)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    UP = (0, -1)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @property
    def opposite(self) -> "Direction":
        return Direction((-self.dx, -self.dy))

class Phase(Enum):
    PLAYING = "playing"
    GAME_OVER = "game_over"

class GameOverReason(Enum):
    SELF_COLLISION = "self"
    BOUNDARY_COLLISION = "wall"

@dataclass(frozen=True)
class Snapshot:
    snake: Tuple[Position, ...]   # head first
    food: Optional[Position]      # None only once the board is full
    direction: Direction
    score: int
    tick: int
    phase: Phase
    reason: GameOverReason | None
    grid_w: int
    grid_h: int
    wrap: bool = True

    @property
    def head(self) -> Position:
        return self.snake[0]

    @property
    def length(self) -> int:
        return len(self.snake)

    @property
    def game_over(self) -> bool:
        return self.phase is Phase.GAME_OVER

class Spawner(Protocol):
    """Chooses a free cell for the next piece of food."""
    def spawn(self, grid, snake) -> Position: ...

class Renderer(Protocol):
    def open(self, cfg) -> None: ...
    def draw(self, snap: Snapshot) -> None: ...
    def tick(self, fps: int) -> None: ...
    def close(self) -> None: ...
