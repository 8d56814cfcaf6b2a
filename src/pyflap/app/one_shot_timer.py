from __future__ import annotations

import tkinter as tk
from collections.abc import Callable

from pyflap.app.frame_scheduler import TimerHost


class OneShotTimer:
    """A deferred action that fires at most once per arm() and can be called off."""

    def __init__(self, *, root: TimerHost, delay_ms: int, action: Callable[[], None]) -> None:
        self._root = root
        self._delay_ms = max(0, int(delay_ms))
        self._action = action
        self._after_id: str | None = None

    @property
    def pending(self) -> bool:
        return self._after_id is not None

    def arm(self) -> None:
        if self._after_id is not None:
            return
        self._after_id = self._root.after(self._delay_ms, self._fire)

    def cancel(self) -> None:
        if self._after_id is not None:
            try:
                self._root.after_cancel(self._after_id)
            except tk.TclError:
                pass
            finally:
                self._after_id = None

    def _fire(self) -> None:
        if self._after_id is None:
            return
        self._after_id = None
        self._action()
