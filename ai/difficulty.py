"""Difficulty tiers mapping to random, blended, or optimal play."""

from __future__ import annotations

import logging
import random
from enum import Enum
from typing import Optional

from ai.base_ai import BaseAI
from ai.minimax_ai import MinimaxAI
from ai.random_ai import RandomAI
from engine.board import Board
from engine.marks import Mark

LOGGER = logging.getLogger(__name__)


class Difficulty(str, Enum):
    """Computer opponent strength."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


class DifficultyPolicy(BaseAI):
    """Choose the computer's move for a difficulty tier.

    The medium tier flips a fresh coin on every move: below
    ``random_move_probability`` it plays like easy, otherwise like hard.
    """

    def __init__(
        self,
        difficulty: Difficulty = Difficulty.MEDIUM,
        player: Mark = Mark.O,
        seed: Optional[int] = None,
        random_move_probability: float = 0.5,
    ) -> None:
        self.difficulty = Difficulty(difficulty)
        self.player = player
        self.random_move_probability = random_move_probability
        self._rng = random.Random(seed)
        self.random_ai = RandomAI(rng=self._rng)
        self.minimax_ai = MinimaxAI(player=player)

    def choose_move(self, board: Board) -> int:
        if self.difficulty is Difficulty.EASY:
            return self.random_ai.choose_move(board)
        if self.difficulty is Difficulty.MEDIUM:
            if self._rng.random() < self.random_move_probability:
                move = self.random_ai.choose_move(board)
                LOGGER.debug("Medium tier played random move %d", move)
                return move
            move = self.minimax_ai.best_move(board)
            LOGGER.debug("Medium tier played optimal move %d", move)
            return move
        return self.minimax_ai.best_move(board)
