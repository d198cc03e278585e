from __future__ import annotations

import argparse

from cli.main import build_config, handle_command, parse_cell
from cli.messages import narration, share_summary, status_line
from engine.marks import Mark
from game.config import GameConfig, Mode
from game.controller import EventKind, GameController, GameEvent


def make_args(**overrides) -> argparse.Namespace:
    values = {"config": None, "mode": None, "difficulty": None, "seed": None, "delay_ms": None}
    values.update(overrides)
    return argparse.Namespace(**values)


def test_parse_cell():
    assert parse_cell("4") == 4
    assert parse_cell("1 2") == 5
    assert parse_cell("1 2 3") is None
    assert parse_cell("0 4") is None
    assert parse_cell("1 5") is None
    assert parse_cell("-1 0") is None


def test_build_config_applies_overrides():
    config = build_config(make_args(mode="pvp", difficulty="easy", seed=3, delay_ms=0))
    assert config.mode is Mode.HUMAN_VS_HUMAN
    assert config.difficulty.value == "easy"
    assert config.seed == 3
    assert config.computer_delay_ms == 0


def test_handle_command_plays_and_quits():
    controller = GameController(config=GameConfig({"mode": "pvp"}))
    assert handle_command(controller, "4")
    assert controller.board[4] is Mark.X
    assert handle_command(controller, "difficulty hard")
    assert controller.difficulty.value == "hard"
    assert not handle_command(controller, "quit")


def test_status_and_narration_for_computer_win():
    controller = GameController(config=GameConfig({"mode": "ai"}))
    event = GameEvent(EventKind.WIN, player=Mark.O, line=(0, 4, 8), label="Diagonal (↘)")
    assert status_line(controller, event) == "🤖 Bridget wins! (Diagonal (↘))"
    assert narration(controller, event) == "I win! That was a Diagonal (↘). Better luck next time!"


def test_status_for_turns():
    controller = GameController(config=GameConfig({"mode": "ai"}))
    assert status_line(controller, GameEvent(EventKind.TURN_CHANGE, player=Mark.X)) == "Player X's turn"
    assert status_line(controller, GameEvent(EventKind.TURN_CHANGE, player=Mark.O)) == "Bridget 🤖 is thinking..."
    assert status_line(controller, GameEvent(EventKind.RESET, player=Mark.O)) == "🤖 Bridget starts..."
    assert status_line(controller, GameEvent(EventKind.DRAW)) == "😐 It's a draw!"
    assert narration(controller, GameEvent(EventKind.TURN_CHANGE, player=Mark.X)) is None


def test_share_summary():
    controller = GameController(config=GameConfig({"mode": "ai", "difficulty": "hard"}))
    controller.session.x_score = 2
    controller.session.o_score = 5
    text = share_summary(controller, url="https://example.test/ttt")
    assert "🧑 Player X: 2" in text
    assert "🤖 Bridget: 5" in text
    assert "Mode: Human vs Bridget 🤖" in text
    assert "Difficulty: HARD" in text
    assert text.endswith("Play it now! 🔗 https://example.test/ttt")


def test_handle_command_ignores_out_of_range_position():
    controller = GameController(config=GameConfig({"mode": "pvp"}))
    assert handle_command(controller, "0 4")
    assert controller.board == (None,) * 9
    assert handle_command(controller, "2 2")
    assert controller.board[8] is Mark.X


def test_reset_scores_command():
    controller = GameController(config=GameConfig({"mode": "pvp"}))
    controller.session.x_score = 3
    assert handle_command(controller, "reset-scores")
    assert controller.scores == {Mark.X: 0, Mark.O: 0}


def test_draw_narration_depends_on_last_mover():
    computer = GameController(config=GameConfig({"mode": "ai"}))
    assert narration(computer, GameEvent(EventKind.DRAW, player=Mark.O)) == "That was close. A draw!"
    assert narration(computer, GameEvent(EventKind.DRAW, player=Mark.X)) == "It's a draw. Let's call it even!"
    pvp = GameController(config=GameConfig({"mode": "pvp"}))
    assert narration(pvp, GameEvent(EventKind.DRAW, player=Mark.O)) == "It's a draw. Let's call it even!"
