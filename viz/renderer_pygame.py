# viz/renderer_pygame.py
from __future__ import annotations
import pygame as pg
from typing import Optional
from config import AppConfig
from interfaces import Snapshot
import viz.renderer_colors as theme

class PygameRenderer:
    def __init__(self):
        self.cell = 24
        self.cfg: Optional[AppConfig] = None
        self.surf: Optional[pg.Surface] = None
        self.clock: Optional[pg.time.Clock] = None
        self._auto_flip = True
        self._overlay_text: Optional[str] = None

    def set_overlay(self, text: Optional[str]) -> None:
        self._overlay_text = text or ""

    def open(self, cfg: AppConfig) -> None:
        # Guard: ensure instance, not class
        if isinstance(cfg, type):
            raise TypeError("Pass an AppConfig instance (use AppConfig()), not the class.")
        self.cfg = cfg
        self.cell = cfg.render_cell

        pg.init()
        pg.display.set_caption(cfg.render_title)
        self.surf = pg.display.set_mode((cfg.grid_w * self.cell, cfg.grid_h * self.cell))
        self.clock = pg.time.Clock()
        self._auto_flip = True

    def draw(self, s: Snapshot) -> None:
        assert self.surf is not None, "Renderer not opened"
        assert self.cfg is not None, "Renderer config not set (call open first)"
        surf = self.surf
        c = self.cell

        surf.fill(theme.BG)

        if s.food is not None:
            fx, fy = s.food
            pg.draw.rect(surf, theme.FOOD, pg.Rect(fx * c, fy * c, c, c))

        for i, (x, y) in enumerate(s.snake):
            col = theme.HEAD if i == 0 else theme.BODY
            pg.draw.rect(surf, col, pg.Rect(x * c, y * c, c, c))

        if self.cfg.render_show_hud:
            reason = s.reason.value if s.reason else ""
            font = pg.font.SysFont(None, 22)
            txt = font.render(
                f"Score: {s.score}   Ticks: {s.tick}   {reason}",
                True, theme.TEXT
            )
            surf.blit(txt, (6, 4))

        if self._overlay_text:
            font = pg.font.SysFont(None, 22)
            ovr = font.render(self._overlay_text, True, theme.TEXT)
            surf.blit(ovr, (6, 26))

        if self._auto_flip:
            pg.display.flip()

    def tick(self, fps: int) -> None:
        if self.clock:
            self.clock.tick(fps)

    def close(self) -> None:
        try:
            pg.quit()
        finally:
            self.surf = None
            self.clock = None

    def attach_surface(self, surface: pg.Surface, cfg: AppConfig) -> None:
        """Draw into an existing surface; the embedder flips and times frames."""
        if not pg.get_init():
            pg.init()
        self.cfg = cfg
        self.cell = cfg.render_cell
        self.surf = surface
        self.clock = None
        self._auto_flip = False
