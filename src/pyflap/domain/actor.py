from __future__ import annotations

from dataclasses import dataclass

from pyflap.domain.geometry import TrackedEntity
from pyflap.domain.playfield import Playfield
from pyflap.domain.ports import Renderer


@dataclass
class ActorState(TrackedEntity):
    jump_velocity: float = 0.0
    jump_origin: float = 0.0
    jump_time: float = 0.0              # seconds since the last jump started
    is_jumping: bool = True             # a jump starts on the next update
    scored_current_obstacle: bool = False


def trajectory_top(origin: float, velocity: float, gravity: float, t: float) -> float:
    # h + vt - gt^2/2, upside down since y grows downwards
    return origin - velocity * t + gravity * t**2 / 2


def request_jump(actor: ActorState) -> None:
    # Mid-air jumps are allowed and restart the arc from the current height.
    actor.is_jumping = True


def update_actor(
    actor: ActorState,
    dt: float,
    gravity: float,
    playfield: Playfield,
    renderer: Renderer,
) -> None:
    if actor.is_jumping:
        actor.jump_origin = actor.top
        actor.jump_time = 0.0
        actor.is_jumping = False
        return

    actor.jump_time += dt
    actor.top = trajectory_top(actor.jump_origin, actor.jump_velocity, gravity, actor.jump_time)
    actor.bottom = actor.top + actor.height
    renderer.set_transform(actor.handle, 0.0, actor.top - playfield.top)
