"""AI-vs-AI games for comparing difficulty tiers."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from ai.base_ai import BaseAI
from engine.board import Board
from engine.marks import Mark
from engine.rules import Line

LOGGER = logging.getLogger(__name__)


@dataclass
class MatchRecord:
    """Summary of one finished game."""

    winner: Optional[Mark]
    line: Optional[Line]
    moves: List[int] = field(default_factory=list)

    @property
    def is_draw(self) -> bool:
        return self.winner is None


@dataclass
class MatchSummary:
    """Aggregate over many games."""

    games: int = 0
    x_wins: int = 0
    o_wins: int = 0
    draws: int = 0

    def add(self, record: MatchRecord) -> None:
        self.games += 1
        if record.winner is Mark.X:
            self.x_wins += 1
        elif record.winner is Mark.O:
            self.o_wins += 1
        else:
            self.draws += 1

    def rates(self) -> Dict[str, float]:
        total = max(1, self.games)
        return {
            "x_win_rate": self.x_wins / total,
            "o_win_rate": self.o_wins / total,
            "draw_rate": self.draws / total,
        }


def play_game(x_ai: BaseAI, o_ai: BaseAI, board: Optional[Board] = None) -> MatchRecord:
    """Play one game to the end. The starting board is not modified."""
    board = Board() if board is None else board.clone()
    moves: List[int] = []
    result = board.result()

    while not result.is_terminal:
        actor = x_ai if board.current_turn is Mark.X else o_ai
        move = actor.choose_move(board)
        result = board.apply_move(move).result
        moves.append(move)

    return MatchRecord(winner=result.winner, line=result.line, moves=moves)


def run_matches(x_ai: BaseAI, o_ai: BaseAI, games: int, log_every: int = 0) -> MatchSummary:
    """Play games between the same two AIs and count outcomes."""
    summary = MatchSummary()
    for game_idx in range(1, games + 1):
        summary.add(play_game(x_ai, o_ai))
        if log_every > 0 and game_idx % log_every == 0:
            LOGGER.info(
                "Games %d/%d | X:%d O:%d D:%d",
                game_idx,
                games,
                summary.x_wins,
                summary.o_wins,
                summary.draws,
            )
    return summary
