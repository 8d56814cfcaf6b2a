from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GameConfig:
    jump_duration: float = 0.5        # seconds from jump to return to origin height
    max_jump_ratio: float = 1 / 5     # apex height as a fraction of playfield height
    gap_ratio: float = 1 / 3          # gap height as a fraction of playfield height
    speed_ratio: float = 1 / 2        # obstacle speed in playfield widths per second
    actor_start_ratio: float = 0.45   # actor's initial top as a fraction of playfield height
