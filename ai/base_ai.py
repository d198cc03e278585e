"""Base AI interface."""

from __future__ import annotations

from abc import ABC, abstractmethod

from engine.board import Board


class BaseAI(ABC):
    """Abstract move-selection strategy contract."""

    @abstractmethod
    def choose_move(self, board: Board) -> int:
        """Choose a legal cell index for the given board state."""
        raise NotImplementedError
