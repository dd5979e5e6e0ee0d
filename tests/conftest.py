# tests/conftest.py
import os
import sys

# Headless SDL so tests don't open a window
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

# Ensure project root is importable (so core.* imports work when running from repo root)
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

import numpy as np
import pygame as pg
import pytest

from config import AppConfig

@pytest.fixture(scope="session", autouse=True)
def _pygame_session():
    pg.init()
    yield
    pg.quit()

@pytest.fixture
def screen():
    return pg.Surface((480, 480), pg.SRCALPHA)

class ScriptedSpawner:
    """Hands out food positions from a list, then falls back to the first free cell."""
    def __init__(self, positions):
        self.positions = list(positions)
        self.calls = 0

    def spawn(self, grid, snake):
        self.calls += 1
        while self.positions:
            pos = self.positions.pop(0)
            if not snake.occupies(pos):
                return pos
        for pos in grid.cells():
            if not snake.occupies(pos):
                return pos
        from core.errors import SpawnExhaustedError
        raise SpawnExhaustedError("scripted spawner: board full")

@pytest.fixture
def scripted():
    return ScriptedSpawner

@pytest.fixture
def game_factory():
    from core.game import Game
    def make(w=10, h=10, start_len=3, food=None, seed=0, **kwargs):
        # food=[...] scripts the spawner; otherwise a seeded numpy rng is used
        cfg = AppConfig(grid_w=w, grid_h=h, start_len=start_len, seed=seed, **kwargs)
        spawner = ScriptedSpawner(food) if food is not None else None
        return Game(cfg, rng=np.random.default_rng(seed), spawner=spawner)
    return make
