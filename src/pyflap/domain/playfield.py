from __future__ import annotations

from dataclasses import dataclass

from pyflap.domain.config import GameConfig
from pyflap.domain.geometry import TrackedEntity

MIN_JUMP_DURATION = 1e-3


@dataclass
class Playfield(TrackedEntity):
    pass


@dataclass(frozen=True)
class Dynamics:
    max_jump_height: float
    gravity: float
    jump_velocity: float
    obstacle_speed: float
    gap_height: float


def derive_dynamics(playfield: Playfield, config: GameConfig) -> Dynamics:
    # A collapsed or not-yet-mapped window reports 0 or negative sizes.
    height = max(0.0, playfield.height)
    width = max(0.0, playfield.width)
    duration = max(MIN_JUMP_DURATION, config.jump_duration)

    max_jump_height = height * config.max_jump_ratio
    return Dynamics(
        max_jump_height=max_jump_height,
        gravity=8 * max_jump_height / duration**2,
        jump_velocity=4 * max_jump_height / duration,
        obstacle_speed=width * config.speed_ratio,
        gap_height=height * config.gap_ratio,
    )
