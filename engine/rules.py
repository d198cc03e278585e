"""Rules helpers for tic-tac-toe."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence, Tuple

from engine.marks import Cell, Mark

BOARD_SIDE = 3
BOARD_SIZE = BOARD_SIDE * BOARD_SIDE

Line = Tuple[int, int, int]

WIN_LINES: Tuple[Line, ...] = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),  # rows
    (0, 3, 6), (1, 4, 7), (2, 5, 8),  # columns
    (0, 4, 8), (2, 4, 6),              # diagonals
)

LINE_LABELS: Tuple[Tuple[Line, str], ...] = (
    ((0, 1, 2), "Horizontal (Top Row)"),
    ((3, 4, 5), "Horizontal (Middle Row)"),
    ((6, 7, 8), "Horizontal (Bottom Row)"),
    ((0, 3, 6), "Vertical (Left Column)"),
    ((1, 4, 7), "Vertical (Middle Column)"),
    ((2, 5, 8), "Vertical (Right Column)"),
    ((0, 4, 8), "Diagonal (↘)"),
    ((2, 4, 6), "Diagonal (↙)"),
)


class Status(str, Enum):
    """Progress of a single game."""

    IN_PROGRESS = "in_progress"
    WIN = "win"
    DRAW = "draw"


@dataclass(frozen=True)
class GameResult:
    """Outcome derived from a board."""

    status: Status
    winner: Optional[Mark] = None
    line: Optional[Line] = None

    @property
    def is_terminal(self) -> bool:
        return self.status is not Status.IN_PROGRESS

    @property
    def label(self) -> str:
        return describe(self.line) if self.line is not None else ""


IN_PROGRESS = GameResult(Status.IN_PROGRESS)
DRAW = GameResult(Status.DRAW)


def in_bounds(index: object) -> bool:
    """Return whether an index addresses one of the nine cells."""
    if isinstance(index, bool) or not isinstance(index, int):
        return False
    return 0 <= index < BOARD_SIZE


def winning_line(cells: Sequence[Cell], player: Mark) -> Optional[Line]:
    """Return the first line fully owned by player, in WIN_LINES order."""
    for line in WIN_LINES:
        a, b, c = line
        if cells[a] == player and cells[b] == player and cells[c] == player:
            return line
    return None


def describe(line: Sequence[int]) -> str:
    """Return the human label for a line, or an empty string."""
    members = set(line)
    for canonical, label in LINE_LABELS:
        if members.issubset(canonical):
            return label
    return ""


def is_draw(cells: Sequence[Cell]) -> bool:
    """Return whether every cell is filled. Check for a win first."""
    return all(cell is not None for cell in cells)


def is_legal_move(cells: Sequence[Cell], index: object, game_over: bool) -> bool:
    """Return whether index is a playable cell in a running game."""
    if game_over or not in_bounds(index):
        return False
    return cells[index] is None


def empty_cells(cells: Sequence[Cell]) -> List[int]:
    """Return indices of empty cells in ascending order."""
    return [i for i, cell in enumerate(cells) if cell is None]


def side_to_move(cells: Sequence[Cell]) -> Mark:
    """Infer side to move from mark counts (X plays first)."""
    x_cnt = sum(1 for cell in cells if cell == Mark.X)
    o_cnt = sum(1 for cell in cells if cell == Mark.O)
    return Mark.X if x_cnt == o_cnt else Mark.O


def is_reachable(cells: Sequence[Cell]) -> bool:
    """Return whether cells could arise from legal play."""
    x_cnt = sum(1 for cell in cells if cell == Mark.X)
    o_cnt = sum(1 for cell in cells if cell == Mark.O)
    if not (x_cnt == o_cnt or x_cnt == o_cnt + 1):
        return False

    x_line = winning_line(cells, Mark.X)
    o_line = winning_line(cells, Mark.O)
    if x_line is not None and o_line is not None:
        return False
    # The winner made the last move.
    if x_line is not None and x_cnt != o_cnt + 1:
        return False
    if o_line is not None and x_cnt != o_cnt:
        return False
    return True


def result_after_move(cells: Sequence[Cell], mover: Mark) -> GameResult:
    """Derive the result right after mover played."""
    line = winning_line(cells, mover)
    if line is not None:
        return GameResult(Status.WIN, winner=mover, line=line)
    if is_draw(cells):
        return DRAW
    return IN_PROGRESS


def evaluate_result(cells: Sequence[Cell]) -> GameResult:
    """Derive the result of an arbitrary board, X checked before O."""
    for player in (Mark.X, Mark.O):
        line = winning_line(cells, player)
        if line is not None:
            return GameResult(Status.WIN, winner=player, line=line)
    if is_draw(cells):
        return DRAW
    return IN_PROGRESS
