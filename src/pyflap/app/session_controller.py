from __future__ import annotations

import logging
import time
from collections.abc import Callable

from pyflap.app.frame_scheduler import FrameScheduler, TimerHost
from pyflap.app.one_shot_timer import OneShotTimer
from pyflap.domain.actor import request_jump
from pyflap.domain.events import (
    FrameElapsed,
    GameEvent,
    JumpPressed,
    RestartDelayElapsed,
    ViewportResized,
)
from pyflap.domain.exceptions import ActorCollided
from pyflap.domain.game_state import GameContext
from pyflap.domain.ports import HighScoreStore, ScoreDisplay
from pyflap.domain.session import SessionPhase, coerce_high_score, record_final_score
from pyflap.domain.world import World
from pyflap.infra.exceptions import HighScoreSaveError

logger = logging.getLogger(__name__)


class GameSession:
    """
    Idle -> Running -> Ended -> Running ...

    Every input, frame and timer callback arrives here as a typed event through
    dispatch(); nothing else mutates the context while the game is up.
    """

    def __init__(
        self,
        *,
        root: TimerHost,
        world: World,
        context: GameContext,
        store: HighScoreStore,
        display: ScoreDisplay,
        fps: int = 60,
        restart_delay_ms: int = 250,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.world = world
        self.ctx = context
        self._store = store
        self._display = display

        self.scheduler = FrameScheduler(
            root=root,
            on_frame=lambda dt: self.dispatch(FrameElapsed(dt)),
            fps=fps,
            clock=clock,
        )
        self.restart_timer = OneShotTimer(
            root=root,
            delay_ms=restart_delay_ms,
            action=lambda: self.dispatch(RestartDelayElapsed()),
        )

        self._handlers: dict[type, Callable] = {
            JumpPressed: self._on_jump,
            FrameElapsed: self._on_frame,
            ViewportResized: self._on_resize,
            RestartDelayElapsed: self._on_restart_delay,
        }

        self.ctx.session.high_score = coerce_high_score(self._store.get_high_score())
        self.world.reset(self.ctx)
        self._display.show_current_score(0)
        self._display.set_end_panel_visible(False)

    @property
    def phase(self) -> SessionPhase:
        return self.ctx.session.phase

    def dispatch(self, event: GameEvent) -> None:
        self._handlers[type(event)](event)

    def shutdown(self) -> None:
        self.scheduler.stop()
        self.restart_timer.cancel()

    # ---------- Handlers ----------

    def _on_jump(self, _evt: JumpPressed) -> None:
        session = self.ctx.session
        if session.running:
            request_jump(self.ctx.actor)
        elif session.phase is SessionPhase.IDLE or session.restart_armed:
            self._start_session()
        # Ended but still inside the restart delay: ignored.

    def _on_frame(self, evt: FrameElapsed) -> None:
        if not self.ctx.session.running:
            return
        try:
            scored = self.world.step(self.ctx, evt.dt)
        except ActorCollided:
            self._end_session()
            return
        if scored:
            self._display.show_current_score(self.ctx.session.current_score)

    def _on_resize(self, _evt: ViewportResized) -> None:
        self.world.resize(self.ctx)
        # Nothing has moved yet, so the start position follows the new height.
        if self.ctx.session.phase is SessionPhase.IDLE:
            self.world.reset(self.ctx)

    def _on_restart_delay(self, _evt: RestartDelayElapsed) -> None:
        session = self.ctx.session
        if session.phase is not SessionPhase.ENDED:
            return
        session.restart_armed = True
        self._display.set_end_panel_visible(True)

    # ---------- Transitions ----------

    def _start_session(self) -> None:
        session = self.ctx.session
        self.restart_timer.cancel()

        if session.sessions_started > 0:
            self.world.reset(self.ctx)
        self.world.new_gap(self.ctx)

        session.phase = SessionPhase.RUNNING
        session.restart_armed = False
        session.sessions_started += 1

        self._display.show_current_score(0)
        self._display.set_end_panel_visible(False)
        logger.info("Session %d started", session.sessions_started)

        self.scheduler.start()

    def _end_session(self) -> None:
        session = self.ctx.session
        self.scheduler.stop()
        session.phase = SessionPhase.ENDED
        session.restart_armed = False

        logger.info("Session %d ended with score %d", session.sessions_started, session.current_score)
        if record_final_score(session):
            logger.info("New high score: %d", session.high_score)
            try:
                self._store.set_high_score(session.high_score)
            except HighScoreSaveError as e:
                logger.warning("High score not saved: %s", e)

        self._display.show_final_scores(session.current_score, session.high_score)
        self.restart_timer.arm()
