from __future__ import annotations

from pyflap.domain.actor import ActorState
from pyflap.domain.obstacle import ObstacleState
from pyflap.domain.playfield import Playfield
from pyflap.domain.session import SessionState


def collision(actor: ActorState, obstacle: ObstacleState, playfield: Playfield) -> bool:
    # Ceiling or floor
    if actor.top < playfield.top or actor.bottom > playfield.bottom:
        return True

    # Clear of the obstacle on either side
    if actor.right < obstacle.left or actor.left > obstacle.right:
        return False

    return actor.top < obstacle.gap_top or actor.bottom > obstacle.gap_bottom


def manage_score(actor: ActorState, obstacle: ObstacleState, session: SessionState) -> bool:
    """Award the point for the current obstacle once the actor is fully past it."""
    if actor.scored_current_obstacle or actor.left < obstacle.right:
        return False

    session.current_score += 1
    actor.scored_current_obstacle = True
    return True
