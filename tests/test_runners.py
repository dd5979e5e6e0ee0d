# tests/test_runners.py
import numpy as np
from config import AppConfig
from core.game import Game
from interfaces import Direction
from main import build_config, parse_args
from policy.policy import RandomPolicy
from runners.run_headless import main as headless, play_game
from viz.renderer_headless import HeadlessRenderer

def test_random_policy_avoids_walls_and_body(game_factory):
    game = game_factory(wrap=False, food=[(0, 0)])
    for _ in range(4):
        game.tick()
    snap = game.snapshot()              # head at the right wall
    policy = RandomPolicy(np.random.default_rng(0))
    for _ in range(20):
        assert policy.act(snap) in (Direction.UP, Direction.DOWN)

def test_play_game_stops_at_tick_limit(game_factory):
    game = game_factory(w=12, h=12, seed=2)
    rend = HeadlessRenderer()
    rend.open(game.cfg)
    snap = play_game(game, RandomPolicy(np.random.default_rng(2)), max_ticks=25, renderer=rend)
    assert snap.tick <= 25
    assert rend.frames == snap.tick
    assert rend.last == snap

def test_headless_main_prints_one_line_per_game(capsys):
    results = headless(AppConfig(seed=5), games=3, max_ticks=50)
    out = capsys.readouterr().out
    assert len(results) == 3
    assert out.count("[game ") == 3
    assert "score=" in out

def test_cli_builds_config():
    cfg = build_config(parse_args(["headless", "--bounded", "--seed", "3", "--grid-w", "14"]))
    assert cfg.wrap is False
    assert cfg.seed == 3
    assert cfg.grid_w == 14 and cfg.grid_h == AppConfig().grid_h
    assert Game(cfg).snapshot().grid_w == 14

def test_config_with_clones():
    base = AppConfig()
    small = base.with_(grid_w=6)
    assert small.grid_w == 6 and base.grid_w == 10
    assert small.fps == base.fps

def test_play_session_holds_win_screen_until_restart(game_factory):
    from core.input_buffer import InputBuffer
    from runners.run_snake import PlaySession
    game = game_factory(w=2, h=2, start_len=2, food=[(1, 0)])
    rend = HeadlessRenderer()
    rend.open(game.cfg)
    buf = InputBuffer()
    session = PlaySession(game, rend, buf)

    buf.push(Direction.UP)
    session.step(None)
    buf.push(Direction.LEFT)
    won = session.step(None)           # fills the board
    assert session.finished
    assert won.food is None and won.score == 2
    assert "win" in rend.overlay

    # the final frame stays up while the player looks at it
    assert session.step(None) == won
    assert rend.last == won

    fresh = session.step("restart")
    assert not session.finished
    assert fresh.score == 0 and fresh.tick == 0
    assert rend.overlay is None

def test_play_session_game_over_overlay(game_factory):
    from core.input_buffer import InputBuffer
    from runners.run_snake import PlaySession
    game = game_factory(start_len=5, food=[(9, 9)])
    rend = HeadlessRenderer()
    rend.open(game.cfg)
    buf = InputBuffer()
    session = PlaySession(game, rend, buf)
    for d in (Direction.DOWN, Direction.LEFT, Direction.UP):
        buf.push(d)
        snap = session.step(None)
    assert snap.game_over and session.finished
    assert rend.overlay.startswith("Game Over")
