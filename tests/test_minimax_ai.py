from __future__ import annotations

from typing import Dict

import pytest

from ai.minimax_ai import MinimaxAI
from engine.board import Board
from engine.marks import Mark
from engine.rules import empty_cells, evaluate_result
from game.match import play_game


def test_evaluate_scores_terminal_boards():
    ai = MinimaxAI(player=Mark.O)
    assert ai.evaluate(Board.from_string("OOOXX.X.."), 3) == 7
    assert ai.evaluate(Board.from_string("XXXOO...."), 2) == -8
    assert ai.evaluate(Board.from_string("XOXOXOOXO"), 5) == 0
    assert ai.evaluate(Board.from_string("XO......."), 0) is None


def test_takes_immediate_win():
    board = Board.from_string("OO.XX...X")
    assert MinimaxAI().best_move(board) == 2


def test_blocks_forced_loss():
    board = Board.from_string("XX..O....")
    hard_o = MinimaxAI(player=Mark.O)
    assert hard_o.best_move(board) == 2

    board.apply_move(2, Mark.O)
    record = play_game(MinimaxAI(player=Mark.X), hard_o, board)
    assert record.winner is not Mark.X


def test_tie_break_prefers_lowest_index():
    # O wins with either 2 (top row) or 7 (middle column).
    board = Board.from_string("OO.XOXX.X")
    assert MinimaxAI().best_move(board) == 2


def test_all_openings_draw_so_first_cell_wins_tie(empty_board):
    ai = MinimaxAI(player=Mark.O)
    assert ai.best_move(empty_board) == 0
    assert ai.nodes_evaluated > 0


def test_corner_opening_answered_in_center():
    assert MinimaxAI().best_move(Board.from_string("X........")) == 4


def test_prefers_faster_win():
    # 2 forks (wins two moves later), 8 wins now.
    board = Board.from_string("OX.XO....")
    ai = MinimaxAI()
    board.place(2, Mark.O)
    slow = ai.minimax(board, 0, False)
    board.clear(2)
    assert slow == 8
    assert ai.best_move(board) == 8


def test_search_leaves_board_untouched():
    board = Board.from_string("X...O...X")
    before = board.snapshot()
    ai = MinimaxAI()
    ai.minimax(board, 0, True)
    ai.best_move(board)
    assert board.snapshot() == before


def test_transposition_table_does_not_change_choice():
    for layout in ("X........", "X...O...X", ".X..O..X.", "XO..X...."):
        board = Board.from_string(layout)
        cached = MinimaxAI(use_transposition=True).best_move(board)
        plain = MinimaxAI(use_transposition=False).best_move(board)
        assert cached == plain


def test_no_moves_raises():
    with pytest.raises(RuntimeError):
        MinimaxAI().best_move(Board.from_string("XOXOXOOXO"))


def test_plays_as_x():
    board = Board.from_string("XX.OO....")
    assert MinimaxAI(player=Mark.X).best_move(board) == 2


def _o_never_loses(board: Board, to_move: Mark, ai: MinimaxAI, cache: Dict[str, None]) -> None:
    key = board.to_string() + to_move.value
    if key in cache:
        return
    cache[key] = None

    result = evaluate_result(board.cells)
    if result.is_terminal:
        assert result.winner is not Mark.X, board.to_string()
        return

    if to_move is Mark.O:
        move = ai.best_move(board)
        board.place(move, Mark.O)
        _o_never_loses(board, Mark.X, ai, cache)
        board.clear(move)
        return

    for index in empty_cells(board.cells):
        board.place(index, Mark.X)
        _o_never_loses(board, Mark.O, ai, cache)
        board.clear(index)


@pytest.mark.parametrize("first", [Mark.X, Mark.O])
def test_hard_o_never_loses_against_any_play(first):
    _o_never_loses(Board(), first, MinimaxAI(player=Mark.O), {})


def test_two_optimal_players_draw():
    record = play_game(MinimaxAI(player=Mark.X), MinimaxAI(player=Mark.O))
    assert record.is_draw
    assert len(record.moves) == 9
