from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class JumpPressed:
    pass


@dataclass(frozen=True)
class FrameElapsed:
    dt: float  # seconds since the previous frame


@dataclass(frozen=True)
class ViewportResized:
    pass


@dataclass(frozen=True)
class RestartDelayElapsed:
    pass


GameEvent = JumpPressed | FrameElapsed | ViewportResized | RestartDelayElapsed
