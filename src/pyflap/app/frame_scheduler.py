from __future__ import annotations

import time
import tkinter as tk
from collections.abc import Callable
from typing import Protocol


class TimerHost(Protocol):
    """The slice of tk's event loop the scheduler needs (tk.Tk satisfies it)."""

    def after(self, ms: int, func: Callable[[], None]) -> str:
        ...

    def after_cancel(self, id: str) -> None:
        ...


class FrameScheduler:
    def __init__(
        self,
        *,
        root: TimerHost,
        on_frame: Callable[[float], None],
        fps: int = 60,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._root = root
        self._on_frame = on_frame
        self._clock = clock
        self._target_ms = max(1, int(1000 / max(1, fps)))

        self._running = False
        self._after_id: str | None = None
        self._prev_ms: float | None = None
        self._generation = 0

    @property
    def running(self) -> bool:
        return self._running

    def start(self) -> None:
        if self._running:
            return
        self._running = True
        self._generation += 1
        self._prev_ms = None  # first tick only records its timestamp
        self._schedule_next()

    def stop(self) -> None:
        self._running = False
        if self._after_id is not None:
            try:
                self._root.after_cancel(self._after_id)
            except tk.TclError:
                # Root may already be destroyed; ignore during shutdown.
                pass
            finally:
                self._after_id = None

    def _schedule_next(self) -> None:
        generation = self._generation
        self._after_id = self._root.after(self._target_ms, lambda: self._tick(generation))

    def _tick(self, generation: int) -> None:
        # Drop callbacks left over from a run that has since been stopped.
        if not self._running or generation != self._generation:
            return
        self._after_id = None

        now_ms = self._clock() * 1000.0
        prev_ms = self._prev_ms
        self._prev_ms = now_ms

        if prev_ms is not None:
            dt = max(0.0, (now_ms - prev_ms) / 1000.0)
            try:
                self._on_frame(dt)
            except Exception:
                self.stop()
                raise

        # on_frame may have stopped (or stopped and restarted) the loop.
        if self._running and generation == self._generation:
            self._schedule_next()
