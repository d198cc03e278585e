"""CLI command to pit two difficulty tiers against each other."""

from __future__ import annotations

import argparse
import logging

from ai.difficulty import Difficulty, DifficultyPolicy
from engine.marks import Mark
from game.match import run_matches

LOGGER = logging.getLogger(__name__)


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play computer-vs-computer tic-tac-toe games.")
    tiers = [d.value for d in Difficulty]
    parser.add_argument("--x", dest="x_tier", choices=tiers, default="easy", help="Tier playing X")
    parser.add_argument("--o", dest="o_tier", choices=tiers, default="hard", help="Tier playing O")
    parser.add_argument("--games", type=int, default=100, help="Number of games")
    parser.add_argument("--seed", type=int, default=None, help="Deterministic seed")
    parser.add_argument("--log-every", type=int, default=0, help="Progress log interval in games")
    parser.add_argument("--log-level", type=str, default="INFO", help="Python logging level")
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO))

    o_seed = None if args.seed is None else args.seed + 1
    x_ai = DifficultyPolicy(Difficulty(args.x_tier), player=Mark.X, seed=args.seed)
    o_ai = DifficultyPolicy(Difficulty(args.o_tier), player=Mark.O, seed=o_seed)

    summary = run_matches(x_ai, o_ai, games=args.games, log_every=args.log_every)
    rates = summary.rates()
    LOGGER.info(
        "X=%s vs O=%s | games=%d X:%d O:%d D:%d | x_win=%.3f o_win=%.3f draw=%.3f",
        args.x_tier,
        args.o_tier,
        summary.games,
        summary.x_wins,
        summary.o_wins,
        summary.draws,
        rates["x_win_rate"],
        rates["o_win_rate"],
        rates["draw_rate"],
    )


if __name__ == "__main__":
    main()
