"""
Win Checker Module.
"""

from typing import Sequence

from .puzzle import Puzzle


def is_container_solved(container: Sequence[int], capacity: int) -> bool:
    """Empty, or exactly `capacity` units of one color."""
    if not container:
        return True
    if len(container) != capacity:
        return False
    first = container[0]
    return all(unit == first for unit in container)


def is_win(puzzle: Puzzle) -> bool:
    """True iff every container is empty or full with a single color."""
    return all(is_container_solved(c, puzzle.capacity) for c in puzzle.containers)
