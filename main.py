"""
Sand Sort - Headless Entry Point

Generates a level, prints it as text and optionally asks the solver for
hints or plays the level out hint by hint.

Example:
    python main.py --level 4 --hint
    python main.py --level 12 --seed 7 --autoplay
"""

import sys
import logging
import argparse
import random
from typing import Optional

from sandsort.engine import SolveOutcome, color_name
from sandsort.session import GameSession
from sandsort.settings import load_settings


logger = logging.getLogger(__name__)


def configure_logging(debug: bool, log_file: Optional[str] = None) -> None:
    """Console logging, plus a log file when requested."""
    handlers = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        handlers=handlers,
    )


class Application:
    """
    Command-line driver around a GameSession.
    """

    def __init__(self, level: int, seed: Optional[int] = None,
                 config_path: Optional[str] = None, debug_mode: bool = False):
        """
        Initialize the application.

        Args:
            level: Level to generate
            seed: Seed for repeatable generation
            config_path: Settings file (defaults to config.json)
            debug_mode: Enable debug mode via CLI (overrides saved setting)
        """
        self.settings = load_settings(config_path)
        self.debug_mode = debug_mode or self.settings.get("debug_enabled", False)
        rng = random.Random(seed) if seed is not None else None
        self.session = GameSession(level=level, settings=self.settings, rng=rng)

    def show(self) -> None:
        puzzle = self.session.puzzle
        print(f"Level {self.session.level}: {puzzle.color_count} colors, "
              f"{puzzle.container_count} containers, capacity {puzzle.capacity}")
        print(puzzle.describe())

    def hint(self) -> int:
        """Print one hint. Returns process exit code."""
        result = self.session.hint()
        metrics = result.metrics
        if result.outcome is SolveOutcome.FOUND:
            print(f"Hint: pour {result.hint} ({result.depth} pours to finish, "
                  f"{metrics.states_explored} states, {metrics.computation_time_ms:.0f}ms)")
            return 0
        if result.outcome is SolveOutcome.ALREADY_SOLVED:
            print("Already solved")
            return 0
        if result.certifies_unsolvable:
            print("No solution exists from this position")
        else:
            print(f"No hint available ({result.outcome.name.lower()} after "
                  f"{metrics.states_explored} states)")
        return 1

    def autoplay(self, max_moves: int) -> int:
        """Play hints until solved. Returns process exit code."""
        for _ in range(max_moves):
            if self.session.is_won:
                break
            move = self.session.apply_hint()
            if move is None:
                print("Solver gave up")
                return 1
            print(f"  pour {move.source} -> {move.target}: "
                  f"{move.count} x {color_name(move.color)}")

        if not self.session.is_won:
            print(f"Not solved after {max_moves} moves")
            return 1
        print(f"Solved in {self.session.moves_made} moves")
        self.show()
        return 0


def main() -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Sand Sort puzzle engine (headless)")
    parser.add_argument("--level", type=int, default=1, help="Level to generate (default: 1)")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for generation")
    parser.add_argument("--config", type=str, default=None, help="Settings file (default: config.json)")
    parser.add_argument("--hint", action="store_true", help="Print a hint for the generated level")
    parser.add_argument("--autoplay", action="store_true", help="Solve the level hint by hint")
    parser.add_argument("--max-moves", type=int, default=500, help="Move limit for --autoplay")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("--log-file", type=str, default=None, help="Also log to this file")
    args = parser.parse_args()

    configure_logging(args.debug, args.log_file)

    app = Application(level=args.level, seed=args.seed, config_path=args.config,
                      debug_mode=args.debug)
    if app.debug_mode:
        logging.getLogger().setLevel(logging.DEBUG)

    app.show()
    if args.autoplay:
        return app.autoplay(args.max_moves)
    if args.hint:
        return app.hint()
    return 0


if __name__ == "__main__":
    sys.exit(main())
