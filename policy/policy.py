# policy/policy.py
from __future__ import annotations
from typing import Protocol, Optional
import numpy as np
from interfaces import Direction, Snapshot

class Policy(Protocol):
    def act(self, snap: Snapshot) -> Optional[Direction]: ...

def _step(snap: Snapshot, d: Direction):
    x, y = snap.head
    nx, ny = x + d.dx, y + d.dy
    if snap.wrap:
        return (nx % snap.grid_w, ny % snap.grid_h)
    return (nx, ny)

class RandomPolicy:
    """Picks a random heading that neither leaves the board nor bites the body.

    The tail cell counts as free since it moves away this tick. When every
    heading is fatal it keeps going straight.
    """
    def __init__(self, rng: Optional[np.random.Generator] = None):
        self.rng = rng if rng is not None else np.random.default_rng()

    def act(self, snap: Snapshot) -> Optional[Direction]:
        body = set(snap.snake[:-1])
        safe = []
        for d in Direction:
            if d is snap.direction.opposite:
                continue
            x, y = _step(snap, d)
            if not (0 <= x < snap.grid_w and 0 <= y < snap.grid_h):
                continue
            if (x, y) in body:
                continue
            safe.append(d)
        if not safe:
            return None
        return safe[int(self.rng.integers(len(safe)))]
