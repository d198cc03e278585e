"""Exhaustive minimax AI for tic-tac-toe."""

from __future__ import annotations

import logging
import math
from typing import Dict, List, Optional, Tuple

from ai.base_ai import BaseAI
from engine.board import Board
from engine.marks import Mark
from engine.rules import empty_cells, is_draw, winning_line

LOGGER = logging.getLogger(__name__)

WIN_SCORE = 10


class MinimaxAI(BaseAI):
    """Full game-tree search. The AI's own mark is the maximizing side.

    Scores are depth adjusted: a win found at depth d is worth ``10 - d`` and
    a loss ``d - 10``, so faster wins and slower losses are preferred.
    """

    def __init__(
        self,
        player: Mark = Mark.O,
        use_transposition: bool = True,
        debug_top_k: int = 3,
    ) -> None:
        self.player = player
        self.use_transposition = use_transposition
        self.debug_top_k = max(1, debug_top_k)
        self.nodes_evaluated = 0
        self._ttable: Dict[Tuple[bytes, int, bool], int] = {}

    def choose_move(self, board: Board) -> int:
        return self.best_move(board)

    def best_move(self, board: Board) -> int:
        """Return the lowest-index cell with the strictly greatest minimax score."""
        legal_moves = board.legal_moves()
        if not legal_moves:
            raise RuntimeError("No legal moves available.")

        self._ttable.clear()
        self.nodes_evaluated = 0
        best_score = -math.inf
        best_index: Optional[int] = None
        diagnostics: List[Tuple[int, int]] = []

        for index in legal_moves:
            board.place(index, self.player)
            score = self.minimax(board, 0, False)
            board.clear(index)
            diagnostics.append((index, score))
            if score > best_score:
                best_score = score
                best_index = index

        self._log_diagnostics(diagnostics, best_index)
        LOGGER.debug(
            "Minimax selected %s with score %s after %d nodes",
            best_index,
            best_score,
            self.nodes_evaluated,
        )
        return best_index

    def evaluate(self, board: Board, depth: int) -> Optional[int]:
        """Score a terminal board; None when the game is still open."""
        if winning_line(board.cells, self.player) is not None:
            return WIN_SCORE - depth
        if winning_line(board.cells, self.player.opponent()) is not None:
            return depth - WIN_SCORE
        if is_draw(board.cells):
            return 0
        return None

    def minimax(self, board: Board, depth: int, maximizing: bool) -> int:
        """Value of board with the given side to move, searched to the end."""
        self.nodes_evaluated += 1
        terminal_score = self.evaluate(board, depth)
        if terminal_score is not None:
            return terminal_score

        if self.use_transposition:
            key = self._transposition_key(board, depth, maximizing)
            if key in self._ttable:
                return self._ttable[key]

        mark = self.player if maximizing else self.player.opponent()
        best = -math.inf if maximizing else math.inf
        for index in empty_cells(board.cells):
            board.place(index, mark)
            score = self.minimax(board, depth + 1, not maximizing)
            board.clear(index)
            if maximizing:
                best = max(best, score)
            else:
                best = min(best, score)

        if self.use_transposition:
            self._ttable[key] = best
        return best

    def _log_diagnostics(self, diagnostics: List[Tuple[int, int]], chosen: Optional[int]) -> None:
        """Emit top-k candidate breakdown when DEBUG is enabled."""
        if not LOGGER.isEnabledFor(logging.DEBUG):
            return
        ranked = sorted(diagnostics, key=lambda item: (-item[1], item[0]))
        for rank, (index, score) in enumerate(ranked[: self.debug_top_k], start=1):
            LOGGER.debug("Candidate #%d cell=%d score=%d chosen=%s", rank, index, score, index == chosen)

    def _transposition_key(self, board: Board, depth: int, maximizing: bool) -> Tuple[bytes, int, bool]:
        """Hashable key for cached minimax values."""
        return (board.encode_state().tobytes(), depth, maximizing)
