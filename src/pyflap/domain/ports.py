from __future__ import annotations

from typing import Protocol

from pyflap.domain.geometry import BoundingBox


class RandomSource(Protocol):
    def random(self) -> float:  # returns in [0.0, 1.0)
        ...


class Renderer(Protocol):
    """Whatever draws the handles. Offsets are relative to each visual's layout position."""

    def get_bounding_box(self, handle: str) -> BoundingBox:
        ...

    def set_transform(self, handle: str, dx: float, dy: float) -> None:
        ...

    def set_band_widths(self, handle: str, top_band: float, bottom_band: float) -> None:
        ...


class ScoreDisplay(Protocol):
    def show_current_score(self, score: int) -> None:
        ...

    def show_final_scores(self, score: int, high_score: int) -> None:
        ...

    def set_end_panel_visible(self, visible: bool) -> None:
        ...


class HighScoreStore(Protocol):
    def get_high_score(self) -> int | None:  # None when nothing usable is stored
        ...

    def set_high_score(self, score: int) -> None:
        ...
