"""Play headless Glide sessions with a random-walk controller and summarise them."""

from __future__ import annotations

import argparse
import random
from pathlib import Path
from typing import Optional

import numpy as np

import sys

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from glide import ControlState, GameConfig, Session


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Batch-simulate Glide runs without a window.")
    parser.add_argument("--runs", type=int, default=50, help="Number of sessions to play.")
    parser.add_argument("--seed", type=int, default=0, help="Base seed; run i uses seed + i.")
    parser.add_argument("--max-seconds", type=float, default=180.0, help="Stop a run after this long.")
    parser.add_argument("--hold", type=float, default=0.3, help="Seconds the bot keeps a direction.")
    args = parser.parse_args(argv)
    if args.runs < 1:
        parser.error("--runs must be at least 1")
    return args


def play(seed: int, max_seconds: float, hold: float, frame: float = 1 / 60) -> tuple[int, float]:
    rng = random.Random(seed)
    session = Session(GameConfig(), random.Random(seed))
    session.start()
    control = ControlState()
    hold_timer = 0.0
    while session.running and session.world.elapsed < max_seconds:
        hold_timer -= frame
        if hold_timer <= 0:
            choice = rng.choice(("left", "right", "idle"))
            control = ControlState(left=choice == "left", right=choice == "right")
            hold_timer = hold
        session.step(frame, control)
    return session.final_score, session.world.elapsed


def main() -> None:
    args = parse_args()
    results = [play(args.seed + i, args.max_seconds, args.hold) for i in range(args.runs)]
    scores = np.asarray([score for score, _ in results], dtype=np.float64)
    survival = np.asarray([elapsed for _, elapsed in results], dtype=np.float64)

    print(f"Runs: {args.runs}")
    print(f"  score    mean={scores.mean():8.1f}  median={np.median(scores):8.1f}  max={scores.max():8.0f}")
    print(f"  survival mean={survival.mean():8.2f}s median={np.median(survival):8.2f}s max={survival.max():8.2f}s")


if __name__ == "__main__":
    main()
