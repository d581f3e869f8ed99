"""
Puzzle Module - Container/unit model for the Sand Sort puzzle.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

# Display names only; mapping to actual colors belongs to the renderer.
PALETTE = (
    "red", "sky", "pink", "yellow", "lime",
    "teal", "rose", "ice", "violet", "orange",
    "blue", "indigo", "navy", "crimson",
)

# Container separator in canonical keys; never a valid unit.
KEY_SEPARATOR = 0xFF


class PuzzleInvariantError(ValueError):
    """Raised when a Puzzle breaks the conservation or capacity rules."""


@dataclass
class Puzzle:
    """
    Mutable puzzle state.

    Each container is a list of color indices with the last element on
    top. All containers share the same capacity, and every color in
    range(color_count) appears exactly `capacity` times in total.

    Attributes:
        containers: Container contents, bottom to top
        capacity: Maximum units per container
        color_count: Number of distinct colors in play
    """
    containers: List[List[int]]
    capacity: int
    color_count: int

    @classmethod
    def from_lists(cls, containers: Sequence[Sequence[int]], capacity: int,
                   color_count: Optional[int] = None) -> 'Puzzle':
        """
        Create a validated Puzzle from nested sequences.

        Args:
            containers: Container contents, bottom to top
            capacity: Maximum units per container
            color_count: Distinct colors (inferred from contents if None)

        Returns:
            Puzzle instance

        Raises:
            PuzzleInvariantError: If the contents violate the invariants
        """
        lists = [list(c) for c in containers]
        if color_count is None:
            units = [u for c in lists for u in c]
            color_count = max(units) + 1 if units else 0
        puzzle = cls(containers=lists, capacity=capacity, color_count=color_count)
        puzzle.validate()
        return puzzle

    def clone(self) -> 'Puzzle':
        """Deep copy of the container lists."""
        return Puzzle(
            containers=[list(c) for c in self.containers],
            capacity=self.capacity,
            color_count=self.color_count,
        )

    def key(self) -> bytes:
        """
        Canonical, order-sensitive encoding of the configuration.

        Two puzzles share a key exactly when every container holds the
        same units in the same order.
        """
        out = bytearray()
        for container in self.containers:
            out.extend(container)
            out.append(KEY_SEPARATOR)
        return bytes(out)

    def top(self, index: int) -> Optional[int]:
        """Top unit of a container, or None if empty."""
        container = self.containers[index]
        return container[-1] if container else None

    def top_run(self, index: int) -> int:
        """Length of the same-colored run at the top of a container."""
        container = self.containers[index]
        if not container:
            return 0
        color = container[-1]
        run = 0
        for unit in reversed(container):
            if unit != color:
                break
            run += 1
        return run

    def space(self, index: int) -> int:
        """Free slots left in a container."""
        return self.capacity - len(self.containers[index])

    def is_full(self, index: int) -> bool:
        return len(self.containers[index]) >= self.capacity

    def is_sorted_full(self, index: int) -> bool:
        """Full and single-colored. Empty containers do not count here."""
        container = self.containers[index]
        return (len(container) == self.capacity
                and all(u == container[0] for u in container))

    def color_counts(self) -> Dict[int, int]:
        counts: Dict[int, int] = {}
        for container in self.containers:
            for unit in container:
                counts[unit] = counts.get(unit, 0) + 1
        return counts

    def validate(self) -> None:
        """
        Check capacity and conservation.

        Raises:
            PuzzleInvariantError: On the first violation found
        """
        if self.capacity < 1:
            raise PuzzleInvariantError(f"Capacity must be positive, got {self.capacity}")
        if not 0 <= self.color_count <= len(PALETTE):
            raise PuzzleInvariantError(
                f"color_count {self.color_count} outside palette of {len(PALETTE)}"
            )
        for i, container in enumerate(self.containers):
            if len(container) > self.capacity:
                raise PuzzleInvariantError(
                    f"Container {i} holds {len(container)} units, capacity is {self.capacity}"
                )

        counts = self.color_counts()
        for color, n in counts.items():
            if not 0 <= color < self.color_count:
                raise PuzzleInvariantError(f"Unknown color {color!r}")
            if n != self.capacity:
                raise PuzzleInvariantError(
                    f"Color {color} has {n} units, expected {self.capacity}"
                )
        missing = [c for c in range(self.color_count) if c not in counts]
        if missing:
            raise PuzzleInvariantError(f"Colors missing from puzzle: {missing}")

    @property
    def container_count(self) -> int:
        return len(self.containers)

    @property
    def unit_count(self) -> int:
        return sum(len(c) for c in self.containers)

    def to_lists(self) -> List[List[int]]:
        """Copy of the containers as plain lists."""
        return [list(c) for c in self.containers]

    def describe(self) -> str:
        """Compact text dump, one container per line, top on the right."""
        lines = []
        for i, container in enumerate(self.containers):
            names = " ".join(color_name(u) for u in container)
            lines.append(f"{i:>2} [{len(container)}/{self.capacity}] {names}")
        return "\n".join(lines)


def color_name(unit: int) -> str:
    """Palette name for a unit, falling back to its index."""
    if 0 <= unit < len(PALETTE):
        return PALETTE[unit]
    return str(unit)
