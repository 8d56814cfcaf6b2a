from __future__ import annotations

from pyflap.domain.actor import update_actor
from pyflap.domain.exceptions import ActorCollided
from pyflap.domain.game_state import GameContext, apply_dynamics
from pyflap.domain.geometry import refresh_bounding_box
from pyflap.domain.obstacle import draw_gap, rescale_gap, update_obstacle
from pyflap.domain.playfield import derive_dynamics
from pyflap.domain.ports import RandomSource, Renderer
from pyflap.domain.rules import collision, manage_score


class World:
    def __init__(self, renderer: Renderer, rng: RandomSource) -> None:
        self._renderer = renderer
        self._rng = rng

    def step(self, ctx: GameContext, dt: float) -> bool:
        """
        Advance one frame. Returns True when a point was scored.
        Raises ActorCollided before any scoring if the actor hit something.
        """
        # ----- Motion -----
        update_actor(ctx.actor, dt, ctx.dynamics.gravity, ctx.playfield, self._renderer)
        update_obstacle(ctx.obstacle, ctx.actor, ctx.playfield, dt, self._rng, self._renderer)

        # ----- Collision -----
        if collision(ctx.actor, ctx.obstacle, ctx.playfield):
            raise ActorCollided()

        # ----- Score -----
        return manage_score(ctx.actor, ctx.obstacle, ctx.session)

    def new_gap(self, ctx: GameContext) -> None:
        draw_gap(ctx.obstacle, ctx.playfield, self._rng, self._renderer)

    def reset(self, ctx: GameContext) -> None:
        """Put the actor back at its start height and the obstacle just off the right edge."""
        start_offset = ctx.playfield.height * ctx.config.actor_start_ratio
        self._renderer.set_transform(ctx.actor.handle, 0.0, start_offset)
        self._renderer.set_transform(ctx.obstacle.handle, 0.0, 0.0)

        ctx.actor.is_jumping = True
        ctx.actor.scored_current_obstacle = False
        ctx.actor.jump_time = 0.0
        ctx.session.current_score = 0

        refresh_bounding_box(ctx.actor, self._renderer)
        refresh_bounding_box(ctx.obstacle, self._renderer)

    def resize(self, ctx: GameContext) -> None:
        # The trajectory origin is left alone so an arc in flight carries on.
        old_top, old_height = ctx.playfield.top, ctx.playfield.height
        refresh_bounding_box(ctx.playfield, self._renderer)
        refresh_bounding_box(ctx.actor, self._renderer)
        refresh_bounding_box(ctx.obstacle, self._renderer)
        ctx.dynamics = derive_dynamics(ctx.playfield, ctx.config)
        apply_dynamics(ctx)
        rescale_gap(ctx.obstacle, old_top, old_height, ctx.playfield, self._renderer)
