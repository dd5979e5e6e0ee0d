# runners/run_headless.py
from __future__ import annotations
from typing import Optional
import numpy as np
from config import AppConfig
from core.errors import SpawnExhaustedError
from core.game import Game
from interfaces import Snapshot, Renderer
from policy.policy import Policy, RandomPolicy
from viz.renderer_headless import HeadlessRenderer

def play_game(game: Game, policy: Policy, max_ticks: int,
              renderer: Optional[Renderer] = None) -> Snapshot:
    """Drive one game until it ends, the board fills or `max_ticks` pass."""
    snap = game.snapshot()
    while not snap.game_over and snap.tick < max_ticks:
        try:
            snap = game.tick(policy.act(snap))
        except SpawnExhaustedError as e:
            snap = e.snapshot
            break
        if renderer:
            renderer.draw(snap)
    return snap

def main(cfg: AppConfig, games: int = 1, max_ticks: int = 1000):
    rng = np.random.default_rng(cfg.seed)
    game = Game(cfg, rng=rng)
    policy = RandomPolicy(rng)
    rend = HeadlessRenderer()
    rend.open(cfg)

    results = []
    for g in range(games):
        if g > 0:
            game.reset()
        snap = play_game(game, policy, max_ticks, rend)
        reason = snap.reason.value if snap.reason else ("full" if snap.food is None else "timeout")
        print(f"[game {g}] score={snap.score} ticks={snap.tick} length={snap.length} reason={reason}")
        results.append(snap)
    rend.close()
    return results
