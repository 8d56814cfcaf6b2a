from __future__ import annotations

from dataclasses import dataclass

from pyflap.domain.actor import ActorState
from pyflap.domain.config import GameConfig
from pyflap.domain.geometry import track_entity
from pyflap.domain.obstacle import ObstacleState
from pyflap.domain.playfield import Dynamics, Playfield, derive_dynamics
from pyflap.domain.ports import Renderer
from pyflap.domain.session import SessionState

# Renderer handles
PLAYFIELD = "playfield"
ACTOR = "actor"
OBSTACLE = "obstacle"


@dataclass
class GameContext:
    """Everything a frame reads or writes. Built once, reset in place between sessions."""
    config: GameConfig
    playfield: Playfield
    dynamics: Dynamics
    actor: ActorState
    obstacle: ObstacleState
    session: SessionState


def create_context(config: GameConfig, renderer: Renderer) -> GameContext:
    playfield = track_entity(PLAYFIELD, renderer, Playfield)
    ctx = GameContext(
        config=config,
        playfield=playfield,
        dynamics=derive_dynamics(playfield, config),
        actor=track_entity(ACTOR, renderer, ActorState),
        obstacle=track_entity(OBSTACLE, renderer, ObstacleState),
        session=SessionState(),
    )
    apply_dynamics(ctx)
    return ctx


def apply_dynamics(ctx: GameContext) -> None:
    ctx.actor.jump_velocity = ctx.dynamics.jump_velocity
    ctx.obstacle.speed = ctx.dynamics.obstacle_speed
    ctx.obstacle.gap_height = ctx.dynamics.gap_height
