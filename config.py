# config.py
from dataclasses import dataclass, replace
from typing import Optional

@dataclass(frozen=True, slots=True)
class AppConfig:
    # grid / engine
    grid_w: int = 10
    grid_h: int = 10
    start_len: int = 3
    wrap: bool = True                    # False = bounded grid, leaving it ends the game
    seed: Optional[int] = None
    spawn_attempts: int = 64             # rejection-sampling tries before scanning free cells

    # driver
    fps: int = 8                         # ticks per second

    # render
    render_cell: int = 48
    render_title: str = "Snake"
    render_show_hud: bool = True

    def with_(self, **kwargs) -> "AppConfig":
        """Convenience: clone with updated values"""
        return replace(self, **kwargs)
