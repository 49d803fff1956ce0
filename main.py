"""Entry point for the Glide arcade dodger."""

from __future__ import annotations

import argparse
import logging
from dataclasses import replace
from pathlib import Path

from glide import GameConfig, ScoreStore
from glide.game import GlideGame


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Dodge falling blocks and collect orbs.")
    parser.add_argument(
        "--seed",
        type=int,
        help="Optional random seed for a repeatable spawn pattern.",
    )
    parser.add_argument(
        "--mute",
        action="store_true",
        help="Start with sound off regardless of the saved preference.",
    )
    parser.add_argument(
        "--scores",
        type=Path,
        default=Path.home() / ".glide" / "scores.json",
        help="High score file (default: ~/.glide/scores.json).",
    )
    parser.add_argument(
        "--name",
        help="Player name recorded with each score (default: last used name).",
    )
    parser.add_argument(
        "--fps",
        type=int,
        help="Override the target frame rate (default: config value).",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity.",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = GameConfig()
    if args.fps is not None:
        config = replace(config, target_fps=args.fps)

    store = ScoreStore(args.scores)
    game = GlideGame(
        config=config,
        store=store,
        player_name=args.name,
        seed=args.seed,
        mute=args.mute,
    )
    game.run()


if __name__ == "__main__":
    main()
