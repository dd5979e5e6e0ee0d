# core/game.py  (pure rules, no pygame)
from __future__ import annotations
import logging
from typing import Optional, Dict, Any
import numpy as np
from config import AppConfig
from interfaces import Direction, GameOverReason, Phase, Snapshot, Spawner
from .errors import ConstructionError, SpawnExhaustedError
from .food import FoodSpawner
from .grid import Grid
from .snake import Snake

logger = logging.getLogger(__name__)

class Game:
    """Owns one game: grid, snake, food, score and phase.

    The driver calls `tick` once per interval and draws the returned
    snapshot. Ticks after game over are ignored and return the final
    snapshot unchanged.
    """

    def __init__(
        self,
        cfg: AppConfig,
        *,
        rng: Optional[np.random.Generator] = None,
        spawner: Optional[Spawner] = None,
    ):
        if isinstance(cfg, type):
            raise TypeError("Pass an AppConfig instance (use AppConfig()), not the class.")
        self.cfg = cfg
        try:
            self.grid = Grid(cfg.grid_w, cfg.grid_h, wrap=cfg.wrap)
        except ValueError as e:
            raise ConstructionError(str(e)) from e
        self._check_start_len()

        self.rng = rng if rng is not None else np.random.default_rng(cfg.seed)
        self.spawner = spawner if spawner is not None else FoodSpawner(self.rng, cfg.spawn_attempts)
        self._reset_state()

    @classmethod
    def new(cls, width: int, height: int, initial_length: int, **kwargs) -> "Game":
        """Shorthand for a game on a `width` x `height` board.

        Extra keyword arguments that name AppConfig fields (wrap, seed, ...)
        go into the config; `rng` and `spawner` are passed through.
        """
        rng = kwargs.pop("rng", None)
        spawner = kwargs.pop("spawner", None)
        cfg = AppConfig(grid_w=width, grid_h=height, start_len=initial_length, **kwargs)
        return cls(cfg, rng=rng, spawner=spawner)

    def _check_start_len(self):
        n, w, h = self.cfg.start_len, self.cfg.grid_w, self.cfg.grid_h
        if w < 2 or h < 2:
            raise ConstructionError(f"grid must be at least 2x2 so every tick moves the head, got {w}x{h}")
        if n < 1:
            raise ConstructionError(f"initial length must be positive, got {n}")
        if n > w // 2 + 1:
            raise ConstructionError(
                f"a snake of length {n} centred on a {w}-wide grid would run off the left edge"
            )
        if n >= w * h:
            raise ConstructionError(f"a snake of length {n} leaves no room for food on {w}x{h}")

    def _reset_state(self):
        head = (self.grid.width // 2, self.grid.height // 2)
        self.snake = Snake.straight(head, self.cfg.start_len, Direction.RIGHT, self.grid)
        self.food = self.spawner.spawn(self.grid, self.snake)
        self.score = 0
        self.ticks = 0
        self.phase = Phase.PLAYING
        self.reason: GameOverReason | None = None

    def reset(self, seed: Optional[int] = None) -> Snapshot:
        if seed is not None:
            self.rng = np.random.default_rng(seed)
            if isinstance(self.spawner, FoodSpawner):
                self.spawner.rng = self.rng
        self._reset_state()
        return self.snapshot()

    # ---- simulation ----
    def tick(self, direction: Optional[Direction] = None) -> Snapshot:
        if self.phase is Phase.GAME_OVER:
            logger.debug("tick %d ignored: game is over (%s)", self.ticks, self.reason)
            return self.snapshot()

        if direction is not None:
            self.snake.set_direction(direction)

        # both checks below look at the snake as it is before moving
        new_head = self.snake.advance()
        if self.snake.blocks(new_head):
            return self._game_over(GameOverReason.SELF_COLLISION)
        if not self.grid.is_inside(new_head):
            return self._game_over(GameOverReason.BOUNDARY_COLLISION)

        grow = new_head == self.food
        if grow:
            self.score += 1
        self.snake.commit_move(new_head, grow)
        self.ticks += 1

        if grow:
            try:
                self.food = self.spawner.spawn(self.grid, self.snake)
            except SpawnExhaustedError as e:
                self.food = None
                logger.warning("board full after %d ticks, score %d", self.ticks, self.score)
                raise SpawnExhaustedError(str(e), self.snapshot()) from e
            logger.debug("tick %d: ate food, score %d, next food at %s", self.ticks, self.score, self.food)
        return self.snapshot()

    def _game_over(self, reason: GameOverReason) -> Snapshot:
        self.phase = Phase.GAME_OVER
        self.reason = reason
        self.ticks += 1
        logger.debug("game over at tick %d: %s (score %d)", self.ticks, reason.value, self.score)
        return self.snapshot()

    @property
    def game_over(self) -> bool:
        return self.phase is Phase.GAME_OVER

    def snapshot(self) -> Snapshot:
        return Snapshot(
            snake=self.snake.segments,
            food=self.food,
            direction=self.snake.direction,
            score=self.score,
            tick=self.ticks,
            phase=self.phase,
            reason=self.reason,
            grid_w=self.grid.width,
            grid_h=self.grid.height,
            wrap=self.grid.wrap,
        )

    # ---- checkpointing ----
    def get_state(self) -> Dict[str, Any]:
        """Pure-Python, JSON-serializable state (plus RNG)."""
        return {
            "snake": self.snake.get_state(),
            "food": list(self.food) if self.food is not None else None,
            "score": self.score,
            "ticks": self.ticks,
            "phase": self.phase.value,
            "reason": self.reason.value if self.reason else None,
            "rng_state": self.rng.bit_generator.state,
        }

    def set_state(self, state: Dict[str, Any]) -> None:
        """Restore exact internal state (including RNG)."""
        self.snake.set_state(state["snake"])
        self.food = tuple(state["food"]) if state["food"] is not None else None
        self.score = int(state["score"])
        self.ticks = int(state["ticks"])
        self.phase = Phase(state["phase"])
        self.reason = GameOverReason(state["reason"]) if state["reason"] else None
        self.rng.bit_generator.state = state["rng_state"]
