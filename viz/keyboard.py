# viz/keyboard.py
import pygame as pg
from core.input_buffer import InputBuffer
from interfaces import Direction

KEYMAP = {
    pg.K_RIGHT: Direction.RIGHT, pg.K_d: Direction.RIGHT,
    pg.K_DOWN: Direction.DOWN,   pg.K_s: Direction.DOWN,
    pg.K_LEFT: Direction.LEFT,   pg.K_a: Direction.LEFT,
    pg.K_UP: Direction.UP,       pg.K_w: Direction.UP,
}

class Keyboard:
    def __init__(self, buffer: InputBuffer):
        self.buffer = buffer

    def poll(self):
        """Drain pygame events; directions go into the buffer.

        Returns "quit", "restart" or None.
        """
        cmd = None
        for e in pg.event.get():
            if e.type == pg.QUIT:
                return "quit"
            if e.type == pg.KEYDOWN:
                if e.key == pg.K_ESCAPE: return "quit"
                if e.key in (pg.K_RETURN, pg.K_SPACE):
                    cmd = "restart"
                elif e.key in KEYMAP:
                    self.buffer.push(KEYMAP[e.key])
        return cmd
