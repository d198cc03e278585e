"""Tic-tac-toe board state, legal move generation, and state encoding."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

import numpy as np

from engine.marks import MARK_SIGN, Cell, Mark, cell_symbol, parse_cell
from engine.rules import (
    BOARD_SIDE,
    BOARD_SIZE,
    GameResult,
    empty_cells,
    evaluate_result,
    is_legal_move,
    result_after_move,
    side_to_move,
)


@dataclass(frozen=True)
class MoveResult:
    """Result metadata for an applied move."""

    index: int
    mark: Mark
    result: GameResult


class Board:
    """Nine-cell tic-tac-toe board. Cells hold None, Mark.X or Mark.O."""

    side: int = BOARD_SIDE
    size: int = BOARD_SIZE

    def __init__(self, cells: Optional[Sequence[Cell]] = None) -> None:
        if cells is None:
            self.cells: List[Cell] = [None] * BOARD_SIZE
        else:
            if len(cells) != BOARD_SIZE:
                raise ValueError(f"Board needs {BOARD_SIZE} cells, got {len(cells)}")
            self.cells = [None if cell is None else Mark(cell) for cell in cells]

    @classmethod
    def from_string(cls, layout: str) -> "Board":
        """Build a board from a row-major string such as "XO.X....O"."""
        symbols = [ch for ch in layout if not ch.isspace() and ch != "|"]
        return cls([parse_cell(ch) for ch in symbols])

    def clone(self) -> "Board":
        """Copy board state."""
        return Board(self.cells)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.cells == other.cells

    def __repr__(self) -> str:
        return f"Board({self.to_string()!r})"

    def to_string(self) -> str:
        return "".join(cell_symbol(cell) for cell in self.cells)

    def snapshot(self) -> Tuple[Cell, ...]:
        """Immutable view of the cells."""
        return tuple(self.cells)

    def get_cell(self, index: int) -> Cell:
        """Return cell content at an index."""
        return self.cells[index]

    @property
    def current_turn(self) -> Mark:
        """Side to move implied by mark counts."""
        return side_to_move(self.cells)

    def legal_moves(self) -> List[int]:
        """Empty cell indices in ascending order."""
        if self.result().is_terminal:
            return []
        return empty_cells(self.cells)

    def place(self, index: int, mark: Mark) -> None:
        """Put a mark without validation. Pair with clear() to undo."""
        self.cells[index] = mark

    def clear(self, index: int) -> None:
        """Empty a cell without validation."""
        self.cells[index] = None

    def apply_move(self, index: int, mark: Optional[Mark] = None) -> MoveResult:
        """Apply a legal move and return the derived result."""
        game_over = self.result().is_terminal
        if not is_legal_move(self.cells, index, game_over):
            raise ValueError(f"Illegal move: {index}")

        mover = mark if mark is not None else self.current_turn
        self.cells[index] = mover
        return MoveResult(index=index, mark=mover, result=result_after_move(self.cells, mover))

    def result(self) -> GameResult:
        """Derive the current game result."""
        return evaluate_result(self.cells)

    def encode_state(self) -> np.ndarray:
        """Encode the board as a 3x3 int8 array: +1 X, -1 O, 0 empty."""
        encoded = np.zeros((self.side, self.side), dtype=np.int8)
        for index, cell in enumerate(self.cells):
            if cell is not None:
                row, col = self.index_to_pos(index)
                encoded[row, col] = MARK_SIGN[cell]
        return encoded

    @staticmethod
    def pos_to_index(pos: Tuple[int, int]) -> int:
        """Convert a (row, col) position to a flattened index."""
        return pos[0] * BOARD_SIDE + pos[1]

    @staticmethod
    def index_to_pos(index: int) -> Tuple[int, int]:
        """Convert a flattened index to a (row, col) position."""
        return (index // BOARD_SIDE, index % BOARD_SIDE)

    def render_ascii(self, show_indices: bool = True) -> str:
        """Return a simple human-readable board representation."""
        rows: List[str] = []
        for row in range(self.side):
            row_cells: List[str] = []
            for col in range(self.side):
                index = self.pos_to_index((row, col))
                cell = self.cells[index]
                if cell is None:
                    row_cells.append(str(index) if show_indices else " ")
                else:
                    row_cells.append(cell.value)
            rows.append(" " + " | ".join(row_cells))
        return "\n---+---+---\n".join(rows)
