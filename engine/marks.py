"""Player marks for tic-tac-toe."""

from __future__ import annotations

from enum import Enum
from typing import Dict, Optional


class Mark(str, Enum):
    """Mark placed by a player. X always moves first."""

    X = "X"
    O = "O"

    def opponent(self) -> "Mark":
        return Mark.O if self is Mark.X else Mark.X


Cell = Optional[Mark]

MARK_SIGN: Dict[Mark, int] = {
    Mark.X: 1,
    Mark.O: -1,
}

EMPTY_SYMBOL = "."


def cell_symbol(cell: Cell) -> str:
    """Return the one-character symbol for a cell."""
    return EMPTY_SYMBOL if cell is None else cell.value


def parse_cell(symbol: str) -> Cell:
    """Parse a one-character symbol into a cell value."""
    if symbol in (EMPTY_SYMBOL, " ", "_", "-"):
        return None
    return Mark(symbol.upper())
