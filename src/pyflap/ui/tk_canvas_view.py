from __future__ import annotations

import tkinter as tk
from dataclasses import dataclass

from pyflap.domain.game_state import ACTOR, OBSTACLE, PLAYFIELD
from pyflap.domain.geometry import BoundingBox

# Layout as fractions of the canvas, recomputed on every resize.
_ACTOR_LEFT_RATIO = 0.2
_ACTOR_SIZE_RATIO = 0.06
_OBSTACLE_WIDTH_RATIO = 0.15


@dataclass
class _Sprite:
    # Layout position and size
    x: float = 0.0
    y: float = 0.0
    w: float = 0.0
    h: float = 0.0
    # Offset applied on top of the layout position
    dx: float = 0.0
    dy: float = 0.0
    # Solid bands of a pipe pair
    top_band: float = 0.0
    bottom_band: float = 0.0


class TkCanvasView:
    """Renderer on a tk canvas: the playfield is the canvas, the obstacle is two bands."""

    def __init__(self, root: tk.Misc, *, width: int, height: int) -> None:
        self.canvas = tk.Canvas(root, width=width, height=height, highlightthickness=0, bg="#7ec0ee")
        self.canvas.pack(fill="both", expand=True)

        self._top_band_id = self.canvas.create_rectangle(0, 0, 0, 0, outline="", fill="#3c9a3c")
        self._bottom_band_id = self.canvas.create_rectangle(0, 0, 0, 0, outline="", fill="#3c9a3c")
        self._actor_id = self.canvas.create_rectangle(0, 0, 0, 0, outline="#8a6d00", fill="#f5c542")

        self._sprites = {ACTOR: _Sprite(), OBSTACLE: _Sprite()}
        self._w = 0
        self._h = 0
        self.relayout(width, height)

    def relayout(self, width: int, height: int) -> None:
        self._w = max(0, width)
        self._h = max(0, height)

        size = max(4.0, self._h * _ACTOR_SIZE_RATIO)
        actor = self._sprites[ACTOR]
        actor.x, actor.y, actor.w, actor.h = self._w * _ACTOR_LEFT_RATIO, 0.0, size, size

        # The pipe pair rests just past the right edge and scrolls in through its offset.
        obstacle = self._sprites[OBSTACLE]
        obstacle.x, obstacle.y = float(self._w), 0.0
        obstacle.w, obstacle.h = self._w * _OBSTACLE_WIDTH_RATIO, float(self._h)

        self._draw_actor()
        self._draw_obstacle()

    # ---------- Renderer ----------

    def get_bounding_box(self, handle: str) -> BoundingBox:
        if handle == PLAYFIELD:
            return BoundingBox.from_rect(0.0, 0.0, float(self._w), float(self._h))
        s = self._sprites[handle]
        return BoundingBox.from_rect(s.x + s.dx, s.y + s.dy, s.w, s.h)

    def set_transform(self, handle: str, dx: float, dy: float) -> None:
        s = self._sprites[handle]
        s.dx, s.dy = dx, dy
        self._draw(handle)

    def set_band_widths(self, handle: str, top_band: float, bottom_band: float) -> None:
        s = self._sprites[handle]
        s.top_band, s.bottom_band = top_band, bottom_band
        self._draw(handle)

    # ---------- Drawing ----------

    def _draw(self, handle: str) -> None:
        if handle == ACTOR:
            self._draw_actor()
        elif handle == OBSTACLE:
            self._draw_obstacle()

    def _draw_actor(self) -> None:
        s = self._sprites[ACTOR]
        x1, y1 = s.x + s.dx, s.y + s.dy
        self.canvas.coords(self._actor_id, x1, y1, x1 + s.w, y1 + s.h)

    def _draw_obstacle(self) -> None:
        s = self._sprites[OBSTACLE]
        x1, y1 = s.x + s.dx, s.y + s.dy
        x2, y2 = x1 + s.w, y1 + s.h
        self.canvas.coords(self._top_band_id, x1, y1, x2, y1 + s.top_band)
        self.canvas.coords(self._bottom_band_id, x1, y2 - s.bottom_band, x2, y2)
