# runners/run_snake.py
from core.errors import SpawnExhaustedError
from core.game import Game
from core.input_buffer import InputBuffer
from viz.renderer_pygame import PygameRenderer
from viz.keyboard import Keyboard
from config import AppConfig

class PlaySession:
    """One frame of the human driver per `step`; holds the end screen until restart."""
    def __init__(self, game: Game, renderer, buffer: InputBuffer):
        self.game = game
        self.rend = renderer
        self.buf = buffer
        self.snap = game.snapshot()
        self.finished = False
        self.games = 0

    def step(self, cmd):
        if self.finished:
            if cmd == "restart":
                self.games += 1
                self.buf.clear()
                self.snap = self.game.reset()
                self.finished = False
                self.rend.set_overlay(None)
        else:
            try:
                self.snap = self.game.tick(self.buf.pop())
            except SpawnExhaustedError as e:
                self.snap = e.snapshot
                self.finished = True
                print(f"[game {self.games}] board full! score={self.snap.score} ticks={self.snap.tick}")
                self.rend.set_overlay("Board full, you win! Press ENTER to play again")
            else:
                self.buf.sync(self.snap.direction)
                if self.snap.game_over:
                    self.finished = True
                    print(f"[game {self.games}] score={self.snap.score} ticks={self.snap.tick} "
                          f"reason={self.snap.reason.value}")
                    self.rend.set_overlay("Game Over! Press ENTER to play again")
        self.rend.draw(self.snap)
        return self.snap

def main(cfg: AppConfig):
    rend = PygameRenderer()
    rend.open(cfg)

    buf = InputBuffer()
    kbd = Keyboard(buf)
    session = PlaySession(Game(cfg), rend, buf)

    while True:
        cmd = kbd.poll()
        if cmd == "quit":
            break
        session.step(cmd)
        rend.tick(cfg.fps)

    rend.close()
