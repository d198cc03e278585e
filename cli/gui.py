"""Tkinter desktop GUI for tic-tac-toe."""

from __future__ import annotations

import argparse
import logging
import tkinter as tk
from typing import List, Optional

from ai.difficulty import Difficulty
from cli.main import build_config
from cli.messages import narration, score_label, share_summary, status_line
from engine.marks import Mark
from engine.rules import Line
from game.config import GameConfig, Mode
from game.controller import EventKind, GameController, GameEvent

LOGGER = logging.getLogger(__name__)

WIN_BG = "#b6e3a8"
CELL_BG = "#f4f4f4"
MARK_FG = {Mark.X: "#c00000", Mark.O: "#003a8c"}


class TicTacToeGUI(tk.Tk):
    """Board, scores, mode/difficulty selectors and share button."""

    def __init__(self, config: Optional[GameConfig] = None) -> None:
        super().__init__()
        self.title("Tic Tac Toe")
        self.resizable(False, False)

        self.controller = GameController(config=config)
        self.controller.subscribe(self._on_event)
        self._pending_after: Optional[str] = None

        self.status_var = tk.StringVar(value="Welcome to Tic Tac Toe.")
        self.x_score_var = tk.StringVar(value="")
        self.o_score_var = tk.StringVar(value="")
        self.mode_var = tk.StringVar(value=self.controller.mode.value)
        self.difficulty_var = tk.StringVar(value=self.controller.difficulty.value)

        self._build_layout()
        self._new_game()

    def _build_layout(self) -> None:
        outer = tk.Frame(self, padx=10, pady=10)
        outer.pack()

        tk.Label(outer, text="Tic Tac Toe", font=("Segoe UI", 12, "bold")).grid(
            row=0, column=0, columnspan=3, sticky="w", pady=(0, 6)
        )
        tk.Label(outer, textvariable=self.x_score_var, anchor="w").grid(row=1, column=0, columnspan=3, sticky="w")
        tk.Label(outer, textvariable=self.o_score_var, anchor="w").grid(row=2, column=0, columnspan=3, sticky="w")
        tk.Label(outer, textvariable=self.status_var, anchor="w").grid(
            row=3, column=0, columnspan=3, sticky="w", pady=(0, 8)
        )

        self.buttons: List[tk.Button] = []
        board_frame = tk.Frame(outer, bd=1, relief=tk.SOLID)
        board_frame.grid(row=4, column=0, columnspan=3)
        for index in range(9):
            btn = tk.Button(
                board_frame,
                text="",
                width=5,
                height=2,
                font=("Segoe UI", 18, "bold"),
                command=lambda i=index: self._on_cell_click(i),
            )
            btn.grid(row=index // 3, column=index % 3, padx=1, pady=1)
            self.buttons.append(btn)

        controls = tk.Frame(outer)
        controls.grid(row=5, column=0, columnspan=3, pady=(8, 0), sticky="w")
        tk.Label(controls, text="Mode").grid(row=0, column=0, sticky="w")
        tk.OptionMenu(controls, self.mode_var, *[m.value for m in Mode], command=self._on_mode_change).grid(
            row=0, column=1, sticky="w"
        )
        tk.Label(controls, text="Difficulty").grid(row=0, column=2, sticky="w", padx=(8, 0))
        tk.OptionMenu(
            controls,
            self.difficulty_var,
            *[d.value for d in Difficulty],
            command=self._on_difficulty_change,
        ).grid(row=0, column=3, sticky="w")

        buttons = tk.Frame(outer)
        buttons.grid(row=6, column=0, columnspan=3, pady=(8, 0), sticky="w")
        tk.Button(buttons, text="New Game", command=self._new_game).grid(row=0, column=0, sticky="w")
        tk.Button(buttons, text="Reset Scores", command=self._reset_scores).grid(row=0, column=1, sticky="w")
        tk.Button(buttons, text="Share", command=self._share).grid(row=0, column=2, sticky="w")
        tk.Button(buttons, text="Quit", command=self.destroy).grid(row=0, column=3, sticky="w")

    def _on_event(self, event: GameEvent) -> None:
        self.status_var.set(status_line(self.controller, event))
        spoken = narration(self.controller, event)
        if spoken:
            LOGGER.info("Narration: %s", spoken)
        self._refresh_view(highlight=event.line if event.kind is EventKind.WIN else None)
        if self.controller.is_computer_turn:
            self._schedule_computer_turn()

    def _schedule_computer_turn(self) -> None:
        self._cancel_pending()
        self._pending_after = self.after(self.controller.config.computer_delay_ms, self._computer_turn)

    def _cancel_pending(self) -> None:
        if self._pending_after is not None:
            self.after_cancel(self._pending_after)
            self._pending_after = None

    def _computer_turn(self) -> None:
        self._pending_after = None
        self.controller.apply_computer_move()

    def _refresh_view(self, highlight: Optional[Line] = None) -> None:
        cells = self.controller.board
        for index, btn in enumerate(self.buttons):
            cell = cells[index]
            bg = WIN_BG if highlight and index in highlight else CELL_BG
            btn.configure(
                text="" if cell is None else cell.value,
                fg=MARK_FG.get(cell, "#202020"),
                bg=bg,
            )
        scores = self.controller.scores
        self.x_score_var.set(f"{score_label(self.controller, Mark.X)}: {scores[Mark.X]}")
        self.o_score_var.set(f"{score_label(self.controller, Mark.O)}: {scores[Mark.O]}")

    def _on_cell_click(self, index: int) -> None:
        if self.controller.is_computer_turn:
            return
        self.controller.apply_human_move(index)

    def _new_game(self) -> None:
        self._cancel_pending()
        self.controller.reset_game()

    def _reset_scores(self) -> None:
        self._cancel_pending()
        self.controller.reset_scores()

    def _on_mode_change(self, value: str) -> None:
        self._cancel_pending()
        self.controller.set_mode(value)

    def _on_difficulty_change(self, value: str) -> None:
        self.controller.set_difficulty(value)

    def _share(self) -> None:
        self.clipboard_clear()
        self.clipboard_append(share_summary(self.controller))
        self.status_var.set("✅ Game summary copied!")


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Tic-tac-toe desktop GUI")
    parser.add_argument("--config", type=str, default=None, help="Path to game config JSON")
    parser.add_argument("--mode", choices=[m.value for m in Mode], default=None, help="ai = vs computer, pvp = two humans")
    parser.add_argument("--difficulty", choices=[d.value for d in Difficulty], default=None, help="Computer strength")
    parser.add_argument("--seed", type=int, default=None, help="Deterministic seed for the computer")
    parser.add_argument("--delay-ms", type=int, default=None, help="Pause before the computer replies")
    parser.add_argument("--log-level", default="INFO", help="Python logging level")
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO))
    app = TicTacToeGUI(config=build_config(args))
    app.mainloop()


if __name__ == "__main__":
    main()
