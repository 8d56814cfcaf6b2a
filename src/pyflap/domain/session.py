from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class SessionPhase(Enum):
    IDLE = "idle"
    RUNNING = "running"
    ENDED = "ended"


@dataclass
class SessionState:
    current_score: int = 0
    high_score: int = 0
    phase: SessionPhase = SessionPhase.IDLE
    restart_armed: bool = False   # Ended only: the restart key is accepted again
    sessions_started: int = 0

    @property
    def running(self) -> bool:
        return self.phase is SessionPhase.RUNNING


def coerce_high_score(raw: object) -> int:
    # Whatever the store hands back, only a non-negative integer counts.
    if isinstance(raw, bool) or not isinstance(raw, int) or raw < 0:
        return 0
    return raw


def record_final_score(session: SessionState) -> bool:
    """Fold the finished score into the high score; True when it was beaten."""
    if session.current_score <= session.high_score:
        return False
    session.high_score = session.current_score
    return True
