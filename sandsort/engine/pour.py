"""
Pour Engine Module - Validates and executes a single pour.

A pour moves the contiguous same-colored run on top of the source onto
the target, limited by the free space in the target. Illegal pours are
reported as None and never mutate the puzzle.
"""

import logging
from enum import Enum
from typing import Iterator, Optional, Tuple

from .move import MoveRecord
from .puzzle import Puzzle

logger = logging.getLogger(__name__)


class PourRejection(Enum):
    """Reason a pour was refused."""
    INVALID_INDEX = "invalid_index"
    SAME_CONTAINER = "same_container"
    EMPTY_SOURCE = "empty_source"
    FULL_TARGET = "full_target"
    COLOR_MISMATCH = "color_mismatch"


# Settings value -> per-pour unit cap (None = whole run)
POUR_MODES = {
    "run": None,
    "single": 1,
}


def units_for_mode(pour_mode: str) -> Optional[int]:
    """
    Resolve a pour mode name to a max_units cap.

    Raises:
        ValueError: If the mode is unknown
    """
    if pour_mode not in POUR_MODES:
        available = ", ".join(POUR_MODES)
        raise ValueError(f"Unknown pour mode: {pour_mode}. Available: {available}")
    return POUR_MODES[pour_mode]


def check_pour(source: int, target: int, puzzle: Puzzle) -> Optional[PourRejection]:
    """
    Check pour legality without touching the puzzle.

    Args:
        source: Container index to pour from
        target: Container index to pour into
        puzzle: Current puzzle

    Returns:
        None if legal, else the first rule that fails
    """
    n = len(puzzle.containers)
    if not (0 <= source < n and 0 <= target < n):
        return PourRejection.INVALID_INDEX
    if source == target:
        return PourRejection.SAME_CONTAINER

    src = puzzle.containers[source]
    dst = puzzle.containers[target]
    if not src:
        return PourRejection.EMPTY_SOURCE
    if len(dst) >= puzzle.capacity:
        return PourRejection.FULL_TARGET
    if dst and dst[-1] != src[-1]:
        return PourRejection.COLOR_MISMATCH
    return None


def pour(source: int, target: int, puzzle: Puzzle,
         max_units: Optional[int] = None) -> Optional[MoveRecord]:
    """
    Pour the top run of `source` into `target`, in place.

    Args:
        source: Container index to pour from
        target: Container index to pour into
        puzzle: Puzzle to mutate
        max_units: Optional cap on units moved (1 = single-unit variant)

    Returns:
        MoveRecord on success, None if the pour is illegal
    """
    rejection = check_pour(source, target, puzzle)
    if rejection is not None:
        logger.debug(f"Pour {source}->{target} rejected: {rejection.value}")
        return None

    count = min(puzzle.top_run(source), puzzle.space(target))
    if max_units is not None:
        count = min(count, max_units)
    if count <= 0:
        return None

    src = puzzle.containers[source]
    dst = puzzle.containers[target]
    color = src[-1]
    for _ in range(count):
        dst.append(src.pop())

    return MoveRecord(source=source, target=target, color=color, count=count)


def legal_moves(puzzle: Puzzle, skip_solved: bool = True) -> Iterator[Tuple[int, int]]:
    """
    Yield every legal (source, target) pair in index order.

    Args:
        puzzle: Puzzle to inspect
        skip_solved: Skip sources that are already full and single-colored

    Yields:
        (source, target) tuples
    """
    containers = puzzle.containers
    capacity = puzzle.capacity
    n = len(containers)

    for i in range(n):
        src = containers[i]
        if not src:
            continue
        if skip_solved and puzzle.is_sorted_full(i):
            continue
        color = src[-1]
        for j in range(n):
            if i == j:
                continue
            dst = containers[j]
            if len(dst) >= capacity:
                continue
            if dst and dst[-1] != color:
                continue
            yield i, j
