"""
Level Generator Module - Builds the starting puzzle for a level.

Two strategies are available:

    scramble: start from the solved layout and apply random reverse
              pours. Every step is undone by one legal pour, so the
              result is solvable by construction and its difficulty is
              bounded by the step count. This is the default.
    shuffle:  deal a shuffled pile of all units into the color
              containers, leaving the buffers empty.
"""

import logging
import random
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from .move import MoveRecord
from .puzzle import PALETTE, Puzzle
from .win import is_win

logger = logging.getLogger(__name__)

GENERATION_STRATEGIES = ("scramble", "shuffle")
DEFAULT_GENERATION_STRATEGY = "scramble"

# Extra scramble rounds / reshuffles before giving up on a non-solved start
MAX_GENERATION_RETRIES = 50


class GenerationError(RuntimeError):
    """Raised when generation parameters cannot yield an unsolved puzzle."""


@dataclass(frozen=True)
class DifficultyCurve:
    """
    Level -> puzzle size mapping.

    Attributes:
        base_colors: Colors at level 1
        levels_per_color: Levels between each added color
        capacity: Units per container
        buffers: Empty buffer containers below `tight_buffer_level`
        tight_buffer_level: First level that gets one buffer fewer
        base_scramble: Scramble steps at level 0
        scramble_per_level: Extra scramble steps per level
        max_scramble: Upper bound on scramble steps
    """
    base_colors: int = 3
    levels_per_color: int = 5
    capacity: int = 4
    buffers: int = 2
    tight_buffer_level: int = 30
    base_scramble: int = 12
    scramble_per_level: int = 4
    max_scramble: int = 240

    def color_count(self, level: int) -> int:
        count = self.base_colors + (level - 1) // self.levels_per_color
        return min(count, len(PALETTE))

    def buffer_count(self, level: int) -> int:
        if level >= self.tight_buffer_level:
            return max(1, self.buffers - 1)
        return self.buffers

    def scramble_steps(self, level: int) -> int:
        return min(self.base_scramble + self.scramble_per_level * level, self.max_scramble)


DEFAULT_CURVE = DifficultyCurve()


def normalize_level(level) -> int:
    """Clamp anything that is not a positive integer to level 1."""
    if isinstance(level, bool) or not isinstance(level, int) or level < 1:
        logger.warning(f"Invalid level {level!r}, using level 1")
        return 1
    return level


def solved_puzzle(color_count: int, buffers: int, capacity: int) -> Puzzle:
    """One full container per color followed by empty buffers."""
    containers = [[color] * capacity for color in range(color_count)]
    containers.extend([] for _ in range(buffers))
    return Puzzle(containers=containers, capacity=capacity, color_count=color_count)


def reverse_pours(puzzle: Puzzle) -> List[Tuple[int, int, int]]:
    """
    List transfers whose exact inverse is a legal pour.

    A transfer of `k` top units from `s` to `d` qualifies when pouring
    `d` back into `s` afterwards is legal and moves exactly `k` units:

      - `s` is left empty, or still shows the same color on top
      - if `d` already shows that color on top, `s` must start full,
        otherwise the pour back would carry the extra units too

    Returns:
        (source, target, count) tuples
    """
    candidates = []
    n = len(puzzle.containers)
    for s in range(n):
        src = puzzle.containers[s]
        if not src:
            continue
        color = src[-1]
        run = puzzle.top_run(s)
        src_full = puzzle.is_full(s)
        for d in range(n):
            if d == s or puzzle.is_full(d):
                continue
            if puzzle.top(d) == color and not src_full:
                continue
            for k in range(1, min(run, puzzle.space(d)) + 1):
                if k < run or k == len(src):
                    candidates.append((s, d, k))
    return candidates


def scramble(puzzle: Puzzle, steps: int, rng: random.Random) -> List[MoveRecord]:
    """
    Apply random reverse pours in place.

    Args:
        puzzle: Puzzle to scramble (mutated)
        steps: Number of transfers to apply
        rng: Random source

    Returns:
        Applied transfers in order; replaying their inverses from last to
        first through the pour engine solves the puzzle again
    """
    applied: List[MoveRecord] = []
    for _ in range(steps):
        candidates = reverse_pours(puzzle)
        if not candidates:
            break
        s, d, k = rng.choice(candidates)
        src = puzzle.containers[s]
        dst = puzzle.containers[d]
        color = src[-1]
        for _ in range(k):
            dst.append(src.pop())
        applied.append(MoveRecord(source=s, target=d, color=color, count=k))
    return applied


def _generate_scrambled(color_count: int, buffers: int, capacity: int,
                        steps: int, rng: random.Random) -> Puzzle:
    puzzle = solved_puzzle(color_count, buffers, capacity)
    scramble(puzzle, steps, rng)
    retries = 0
    while is_win(puzzle):
        if retries >= MAX_GENERATION_RETRIES:
            raise GenerationError(
                f"Scrambling {color_count} colors kept landing on a solved layout"
            )
        retries += 1
        scramble(puzzle, max(1, steps // 4), rng)
    return puzzle


def _generate_shuffled(color_count: int, buffers: int, capacity: int,
                       rng: random.Random) -> Puzzle:
    units = [color for color in range(color_count) for _ in range(capacity)]
    for _ in range(MAX_GENERATION_RETRIES):
        rng.shuffle(units)
        containers = [units[i * capacity:(i + 1) * capacity] for i in range(color_count)]
        containers.extend([] for _ in range(buffers))
        puzzle = Puzzle(containers=containers, capacity=capacity, color_count=color_count)
        if not is_win(puzzle):
            return puzzle
    raise GenerationError(f"Shuffling {color_count} colors kept producing a solved layout")


def generate(level: int, rng: Optional[random.Random] = None,
             settings: Optional[Dict[str, Any]] = None,
             strategy: Optional[str] = None,
             curve: DifficultyCurve = DEFAULT_CURVE) -> Puzzle:
    """
    Build the starting puzzle for a level.

    Args:
        level: Level number (invalid values are treated as level 1)
        rng: Random source; pass a seeded random.Random for repeatable output
        settings: Settings dict; its "generation_strategy" picks the strategy
        strategy: "scramble" or "shuffle", overriding settings
        curve: Difficulty curve mapping levels to puzzle size

    Returns:
        Unsolved Puzzle holding exactly `capacity` units of each color

    Raises:
        ValueError: If the strategy name is unknown
        GenerationError: If no unsolved layout could be produced
    """
    if strategy is None:
        strategy = (settings or {}).get("generation_strategy", DEFAULT_GENERATION_STRATEGY)
    if strategy not in GENERATION_STRATEGIES:
        available = ", ".join(GENERATION_STRATEGIES)
        raise ValueError(f"Unknown generation strategy: {strategy}. Available: {available}")

    level = normalize_level(level)
    rng = rng or random.Random()

    color_count = curve.color_count(level)
    buffers = curve.buffer_count(level)
    capacity = curve.capacity

    if color_count < 2 and strategy == "shuffle":
        raise GenerationError("Shuffling needs at least two colors")

    if strategy == "scramble":
        steps = curve.scramble_steps(level)
        puzzle = _generate_scrambled(color_count, buffers, capacity, steps, rng)
    else:
        puzzle = _generate_shuffled(color_count, buffers, capacity, rng)

    logger.debug(
        f"Generated level {level}: {color_count} colors, {buffers} buffers, "
        f"capacity {capacity}, strategy {strategy}"
    )
    return puzzle
