"""
Diagnostic script to sample generated levels and measure how hard they are.
Outputs solution length and search effort per level so the difficulty
curve can be tuned.

Usage:
    python tools/difficulty_report.py --levels 1 10 --samples 20
"""

import argparse
import random
import sys
from pathlib import Path

import numpy as np

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from sandsort.engine import SolveOutcome, find_hint, generate

MAX_STATES = 500_000
TIMEOUT_SEC = 30.0


def analyze_level(level: int, samples: int, rng: random.Random, strategy: str) -> dict:
    """Generate `samples` puzzles for a level and solve each from the start."""
    depths = []
    explored = []
    times_ms = []
    gave_up = 0
    colors = 0

    for _ in range(samples):
        puzzle = generate(level, rng=rng, strategy=strategy)
        colors = puzzle.color_count
        result = find_hint(puzzle, max_states=MAX_STATES, timeout_sec=TIMEOUT_SEC)
        explored.append(result.metrics.states_explored)
        times_ms.append(result.metrics.computation_time_ms)
        if result.outcome is SolveOutcome.FOUND:
            depths.append(result.depth)
        else:
            gave_up += 1

    depths_arr = np.array(depths) if depths else np.zeros(1)
    explored_arr = np.array(explored)
    return {
        "level": level,
        "colors": colors,
        "depth_mean": float(depths_arr.mean()),
        "depth_max": int(depths_arr.max()),
        "explored_p50": float(np.percentile(explored_arr, 50)),
        "explored_p90": float(np.percentile(explored_arr, 90)),
        "time_ms_p90": float(np.percentile(np.array(times_ms), 90)),
        "gave_up": gave_up,
    }


def main():
    parser = argparse.ArgumentParser(description="Sample levels and report solver effort")
    parser.add_argument("--levels", type=int, nargs=2, default=(1, 10), metavar=("FIRST", "LAST"))
    parser.add_argument("--samples", type=int, default=10)
    parser.add_argument("--seed", type=int, default=0)
    parser.add_argument("--strategy", choices=("scramble", "shuffle"), default="scramble")
    args = parser.parse_args()

    rng = random.Random(args.seed)
    first, last = args.levels

    print(f"{'level':>5} {'colors':>6} {'depth':>6} {'max':>4} "
          f"{'p50 states':>10} {'p90 states':>10} {'p90 ms':>8} {'gave up':>7}")
    print("-" * 64)
    for level in range(first, last + 1):
        row = analyze_level(level, args.samples, rng, args.strategy)
        print(f"{row['level']:>5} {row['colors']:>6} {row['depth_mean']:>6.1f} "
              f"{row['depth_max']:>4} {row['explored_p50']:>10.0f} "
              f"{row['explored_p90']:>10.0f} {row['time_ms_p90']:>8.1f} {row['gave_up']:>7}")


if __name__ == "__main__":
    main()
