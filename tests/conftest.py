from __future__ import annotations

from typing import Dict, Iterator, Tuple

import pytest

from engine.board import Board
from engine.marks import Cell, Mark
from engine.rules import empty_cells, evaluate_result


def iter_reachable_boards() -> Iterator[Tuple[Cell, ...]]:
    """Every position reachable from the empty board with X moving first."""
    seen: Dict[Tuple[Cell, ...], None] = {}
    stack = [tuple([None] * 9)]
    while stack:
        cells = stack.pop()
        if cells in seen:
            continue
        seen[cells] = None
        yield cells
        if evaluate_result(cells).is_terminal:
            continue
        mover = Mark.X if sum(1 for c in cells if c is not None) % 2 == 0 else Mark.O
        for index in empty_cells(cells):
            child = list(cells)
            child[index] = mover
            stack.append(tuple(child))


@pytest.fixture(scope="session")
def reachable_boards():
    return list(iter_reachable_boards())


@pytest.fixture
def empty_board() -> Board:
    return Board()
