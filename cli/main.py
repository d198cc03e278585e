"""CLI entrypoint for playing tic-tac-toe in the terminal."""

from __future__ import annotations

import argparse
import logging
import time
from typing import Optional

from ai.difficulty import Difficulty
from cli.messages import narration, share_summary, status_line
from engine.board import Board
from engine.marks import Mark
from engine.rules import BOARD_SIDE
from game.config import GameConfig, Mode
from game.controller import GameController, GameEvent

HELP_TEXT = "Commands: <cell 0-8> | reset | reset-scores | share | mode <ai|pvp> | difficulty <easy|medium|hard> | help | quit"


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play tic-tac-toe in terminal.")
    parser.add_argument("--config", type=str, default=None, help="Path to game config JSON")
    parser.add_argument("--mode", choices=[m.value for m in Mode], default=None, help="ai = vs computer, pvp = two humans")
    parser.add_argument(
        "--difficulty",
        choices=[d.value for d in Difficulty],
        default=None,
        help="Computer opponent strength",
    )
    parser.add_argument("--seed", type=int, default=None, help="Deterministic seed for the computer")
    parser.add_argument("--delay-ms", type=int, default=None, help="Pause before the computer replies")
    parser.add_argument("--log-level", type=str, default="WARNING", help="Python logging level")
    return parser.parse_args()


def build_config(args: argparse.Namespace) -> GameConfig:
    """Load the config file, then apply command-line overrides."""
    config = GameConfig.from_json(args.config) if args.config else GameConfig()
    payload = config.to_dict()
    if args.mode is not None:
        payload["mode"] = args.mode
    if args.difficulty is not None:
        payload["difficulty"] = args.difficulty
    if args.seed is not None:
        payload["seed"] = args.seed
    if args.delay_ms is not None:
        payload["computer_delay_ms"] = args.delay_ms
    return GameConfig(payload)


def parse_cell(command: str) -> Optional[int]:
    """Parse "4" or "1 1" (row col) into a cell index."""
    parts = command.strip().split()
    if len(parts) == 1:
        return int(parts[0])
    if len(parts) == 2:
        row, col = int(parts[0]), int(parts[1])
        if not (0 <= row < BOARD_SIDE and 0 <= col < BOARD_SIDE):
            return None
        return Board.pos_to_index((row, col))
    return None


def print_event(controller: GameController, event: GameEvent) -> None:
    print(status_line(controller, event))
    spoken = narration(controller, event)
    if spoken:
        print(f'  "{spoken}"')


def print_board(controller: GameController) -> None:
    print()
    print(Board(controller.board).render_ascii())
    scores = controller.scores
    print(f"Score  X: {scores[Mark.X]}  O: {scores[Mark.O]}")


def computer_turn(controller: GameController) -> None:
    delay = controller.config.computer_delay_ms / 1000.0
    if delay > 0:
        time.sleep(delay)
    outcome = controller.apply_computer_move()
    if outcome.accepted:
        print(f"{controller.config.computer_name} plays {outcome.computer_move}")


def handle_command(controller: GameController, command: str) -> bool:
    """Run one line of input. Returns False when the player quits."""
    lowered = command.lower()
    if lowered in {"quit", "exit"}:
        print("Exiting game.")
        return False
    if lowered == "help":
        print(HELP_TEXT)
    elif lowered == "reset":
        controller.reset_game()
    elif lowered == "reset-scores":
        controller.reset_scores()
    elif lowered == "share":
        print(share_summary(controller))
    elif lowered.startswith("mode "):
        controller.set_mode(lowered.split(maxsplit=1)[1])
    elif lowered.startswith("difficulty "):
        controller.set_difficulty(lowered.split(maxsplit=1)[1])
        print(f"Difficulty: {controller.difficulty.value}")
    else:
        index = parse_cell(command)
        if index is None:
            print("Invalid command format.")
        elif not controller.apply_human_move(index).accepted:
            print("Illegal move for current state.")
    return True


def run_cli() -> None:
    args = parse_args()
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO))
    logger = logging.getLogger("tictactoe.cli")

    controller = GameController(config=build_config(args))
    controller.subscribe(lambda event: print_event(controller, event))
    logger.info("Starting tic-tac-toe. Mode=%s Difficulty=%s", controller.mode.value, controller.difficulty.value)
    print(HELP_TEXT)
    controller.reset_game()

    while True:
        if controller.is_computer_turn:
            computer_turn(controller)
            continue

        print_board(controller)
        prompt = "New game? (reset/quit)> " if controller.is_game_over else f"{controller.current_player.value}> "
        user_input = input(prompt).strip()
        if not user_input:
            continue
        try:
            if not handle_command(controller, user_input):
                break
        except ValueError:
            print("Invalid input.")


if __name__ == "__main__":
    run_cli()
