from __future__ import annotations

from dataclasses import dataclass

from pyflap.domain.actor import ActorState
from pyflap.domain.geometry import TrackedEntity
from pyflap.domain.playfield import Playfield
from pyflap.domain.ports import RandomSource, Renderer


@dataclass
class ObstacleState(TrackedEntity):
    speed: float = 0.0
    gap_height: float = 0.0
    gap_top: float = 0.0
    gap_bottom: float = 0.0


def draw_gap(
    obstacle: ObstacleState,
    playfield: Playfield,
    rng: RandomSource,
    renderer: Renderer,
) -> None:
    # Half a gap of solid band is shared between the two pipes so neither vanishes.
    buffer = obstacle.gap_height / 2
    span = max(0.0, playfield.height - obstacle.gap_height - buffer)

    obstacle.gap_top = playfield.top + rng.random() * span + buffer / 2
    obstacle.gap_bottom = obstacle.gap_top + obstacle.gap_height

    _render_bands(obstacle, renderer)


def rescale_gap(
    obstacle: ObstacleState,
    old_top: float,
    old_height: float,
    playfield: Playfield,
    renderer: Renderer,
) -> None:
    """Keep the gap at the same relative height after the playfield changed size."""
    if old_height > 0:
        fraction = (obstacle.gap_top - old_top) / old_height
        obstacle.gap_top = playfield.top + fraction * playfield.height
    obstacle.gap_bottom = obstacle.gap_top + obstacle.gap_height
    _render_bands(obstacle, renderer)


def update_obstacle(
    obstacle: ObstacleState,
    actor: ActorState,
    playfield: Playfield,
    dt: float,
    rng: RandomSource,
    renderer: Renderer,
) -> bool:
    """Scroll the obstacle left; returns True when it wrapped back to the right edge."""
    displacement = obstacle.speed * dt
    recycled = obstacle.right - displacement <= playfield.left

    if recycled:
        obstacle.left = playfield.right
        obstacle.right = obstacle.left + obstacle.width
        actor.scored_current_obstacle = False
        draw_gap(obstacle, playfield, rng, renderer)
    else:
        obstacle.left -= displacement
        obstacle.right -= displacement

    renderer.set_transform(obstacle.handle, obstacle.left - playfield.right, 0.0)
    return recycled


def _render_bands(obstacle: ObstacleState, renderer: Renderer) -> None:
    renderer.set_band_widths(
        obstacle.handle,
        max(0.0, obstacle.gap_top - obstacle.top),
        max(0.0, obstacle.bottom - obstacle.gap_bottom),
    )

