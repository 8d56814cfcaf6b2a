from __future__ import annotations

import tkinter as tk


class TkScorePanel:
    """Live score at the top of the canvas plus the end-of-session panel."""

    def __init__(self, canvas: tk.Canvas) -> None:
        self._canvas = canvas

        self._score_id = canvas.create_text(0, 0, anchor="n", text="0", fill="white", font=("TkDefaultFont", 28, "bold"))

        self._panel_id = canvas.create_rectangle(0, 0, 0, 0, outline="#333", fill="#f4f0dc", tags=("end_panel",))
        self._end_score_id = canvas.create_text(0, 0, text="", font=("TkDefaultFont", 16), tags=("end_panel",))
        self._high_score_id = canvas.create_text(0, 0, text="", font=("TkDefaultFont", 16), tags=("end_panel",))
        self._hint_id = canvas.create_text(
            0, 0, text="Press Space to play again", font=("TkDefaultFont", 11), tags=("end_panel",)
        )
        canvas.itemconfigure("end_panel", state="hidden")

    def relayout(self, width: int, height: int) -> None:
        cx, cy = width / 2.0, height / 2.0
        self._canvas.coords(self._score_id, cx, 16)
        self._canvas.coords(self._panel_id, cx - 120, cy - 70, cx + 120, cy + 70)
        self._canvas.coords(self._end_score_id, cx, cy - 35)
        self._canvas.coords(self._high_score_id, cx, cy)
        self._canvas.coords(self._hint_id, cx, cy + 40)

    def show_current_score(self, score: int) -> None:
        self._canvas.itemconfigure(self._score_id, text=str(score))

    def show_final_scores(self, score: int, high_score: int) -> None:
        self._canvas.itemconfigure(self._end_score_id, text=f"Your Score: {score}")
        self._canvas.itemconfigure(self._high_score_id, text=f"High Score: {high_score}")

    def set_end_panel_visible(self, visible: bool) -> None:
        self._canvas.itemconfigure("end_panel", state="normal" if visible else "hidden")
        if visible:
            self._canvas.tag_raise("end_panel")
