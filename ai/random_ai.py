"""Uniform random mover."""

from __future__ import annotations

import random
from typing import Optional

from ai.base_ai import BaseAI
from engine.board import Board


class RandomAI(BaseAI):
    """Pick uniformly among the empty cells.

    Without a seed the generator is seeded from OS entropy, so every game
    draws fresh moves.
    """

    def __init__(self, seed: Optional[int] = None, rng: Optional[random.Random] = None) -> None:
        self._rng = rng if rng is not None else random.Random(seed)

    def choose_move(self, board: Board) -> int:
        legal_moves = board.legal_moves()
        if not legal_moves:
            raise RuntimeError("No legal moves available.")
        return self._rng.choice(legal_moves)
