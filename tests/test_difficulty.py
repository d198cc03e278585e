from __future__ import annotations

import numpy as np
import pytest

from ai.difficulty import Difficulty, DifficultyPolicy
from ai.minimax_ai import MinimaxAI
from ai.random_ai import RandomAI
from engine.board import Board
from engine.marks import Mark


def test_difficulty_parses_strings():
    assert Difficulty("hard") is Difficulty.HARD
    with pytest.raises(ValueError):
        Difficulty("impossible")


def test_easy_only_picks_empty_cells():
    board = Board.from_string("XO.X.O..X")
    policy = DifficultyPolicy(Difficulty.EASY, seed=3)
    for _ in range(200):
        assert board.get_cell(policy.choose_move(board)) is None


def test_easy_is_uniform_over_empty_cells():
    board = Board.from_string("XO..X.O..")
    empty = board.legal_moves()
    trials = 6000
    policy = DifficultyPolicy(Difficulty.EASY, seed=1234)
    picks = np.array([policy.choose_move(board) for _ in range(trials)])
    counts = np.array([np.count_nonzero(picks == index) for index in empty])

    expected = trials / len(empty)
    assert counts.sum() == trials
    assert np.all(np.abs(counts - expected) < 0.15 * expected)
    chi_square = float(((counts - expected) ** 2 / expected).sum())
    assert chi_square < 30.0


def test_unseeded_random_ai_varies():
    board = Board()
    ai = RandomAI()
    assert len({ai.choose_move(board) for _ in range(200)}) > 1


def test_hard_matches_minimax():
    for layout in ("XX..O....", "OO.XX...X", "X........", "X...O...X"):
        board = Board.from_string(layout)
        expected = MinimaxAI(player=Mark.O).best_move(board)
        assert DifficultyPolicy(Difficulty.HARD).choose_move(board) == expected


def test_medium_flips_a_coin_every_move():
    # Optimal reply is 2; a random reply hits 2 a quarter of the time.
    board = Board.from_string("OO.XX...X")
    policy = DifficultyPolicy(Difficulty.MEDIUM, seed=99)
    picks = [policy.choose_move(board) for _ in range(2000)]
    optimal_share = picks.count(2) / len(picks)
    assert 0.55 < optimal_share < 0.70
    assert set(picks) == {2, 5, 6, 7}


@pytest.mark.parametrize("probability, expected", [(0.0, 2), (1.0, None)])
def test_medium_respects_random_probability(probability, expected):
    board = Board.from_string("OO.XX...X")
    policy = DifficultyPolicy(Difficulty.MEDIUM, seed=5, random_move_probability=probability)
    picks = {policy.choose_move(board) for _ in range(200)}
    if expected is None:
        assert picks == {2, 5, 6, 7}
    else:
        assert picks == {expected}


def test_difficulty_can_change_between_moves():
    board = Board.from_string("XX..O....")
    policy = DifficultyPolicy(Difficulty.EASY, seed=11)
    policy.difficulty = Difficulty.HARD
    assert policy.choose_move(board) == 2
