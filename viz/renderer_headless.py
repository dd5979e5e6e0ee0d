# viz/renderer_headless.py
from __future__ import annotations
from interfaces import Snapshot, Renderer
from config import AppConfig

class HeadlessRenderer(Renderer):
    """Keeps the last frame instead of drawing it."""
    def open(self, cfg: AppConfig) -> None:
        self.cfg = cfg
        self.frames = 0
        self.last = None
        self.overlay = None
    def set_overlay(self, text) -> None:
        self.overlay = text or None
    def draw(self, snap: Snapshot) -> None:
        self.frames += 1
        self.last = snap
    def tick(self, fps: int) -> None:
        pass
    def close(self) -> None:
        pass
