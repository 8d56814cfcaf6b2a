from __future__ import annotations

import logging
import random
import tkinter as tk

from pyflap.app.config import AppConfig
from pyflap.app.session_controller import GameSession
from pyflap.domain.events import JumpPressed, ViewportResized
from pyflap.domain.game_state import create_context
from pyflap.domain.world import World
from pyflap.infra.high_score_store import JsonHighScoreStore
from pyflap.ui.input_mapper import TkInputMapper
from pyflap.ui.score_panel import TkScorePanel
from pyflap.ui.tk_canvas_view import TkCanvasView

logger = logging.getLogger(__name__)


class GameApp:
    def __init__(self, config: AppConfig | None = None) -> None:
        self.config = config or AppConfig()

        self.root = tk.Tk()
        self.root.title("pyflap")
        self.root.minsize(160, 200)

        # --- Views ---
        self.view = TkCanvasView(self.root, width=self.config.width, height=self.config.height)
        self.scores = TkScorePanel(self.view.canvas)
        self.scores.relayout(self.config.width, self.config.height)
        self._size = (self.config.width, self.config.height)

        # --- Game ---
        self.store = JsonHighScoreStore(self.config.high_score_path)
        self.world = World(self.view, random.Random())
        self.context = create_context(self.config.game, self.view)
        self.session = GameSession(
            root=self.root,
            world=self.world,
            context=self.context,
            store=self.store,
            display=self.scores,
            fps=self.config.fps,
            restart_delay_ms=self.config.restart_delay_ms,
        )

        # --- Input ---
        self.input = TkInputMapper(self.root, on_jump=lambda: self.session.dispatch(JumpPressed()))
        self.view.canvas.bind("<Configure>", self._on_configure)
        self.root.protocol("WM_DELETE_WINDOW", self._on_close)

    def run(self) -> None:
        logger.info("High scores kept in %s", self.store.path)
        self.root.mainloop()

    def _on_configure(self, evt: tk.Event) -> None:
        size = (int(evt.width), int(evt.height))
        if size == self._size:
            return
        self._size = size
        self.view.relayout(*size)
        self.scores.relayout(*size)
        self.session.dispatch(ViewportResized())

    def _on_close(self) -> None:
        self.session.shutdown()
        self.root.destroy()
