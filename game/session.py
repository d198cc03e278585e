"""Mutable state of one play session."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict

from ai.difficulty import Difficulty
from engine.board import Board
from engine.marks import Mark
from engine.rules import IN_PROGRESS, GameResult
from game.config import Mode


@dataclass
class Session:
    """Board, turn and score counters owned by a GameController.

    The board and turn fields are replaced on every new game; the score
    counters survive until reset_scores().
    """

    mode: Mode = Mode.HUMAN_VS_COMPUTER
    difficulty: Difficulty = Difficulty.MEDIUM
    board: Board = field(default_factory=Board)
    current_player: Mark = Mark.X
    game_over: bool = False
    result: GameResult = IN_PROGRESS
    x_score: int = 0
    o_score: int = 0

    def reset_board(self) -> None:
        self.board = Board()
        self.current_player = Mark.X
        self.game_over = False
        self.result = IN_PROGRESS

    def reset_scores(self) -> None:
        self.x_score = 0
        self.o_score = 0

    def record_win(self, player: Mark) -> int:
        """Increment and return the winner's counter."""
        if player is Mark.X:
            self.x_score += 1
            return self.x_score
        self.o_score += 1
        return self.o_score

    @property
    def scores(self) -> Dict[Mark, int]:
        return {Mark.X: self.x_score, Mark.O: self.o_score}
