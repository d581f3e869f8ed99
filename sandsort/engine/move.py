"""
Move Module - Executed pours and solver hints.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class MoveRecord:
    """
    Record of a completed pour.

    Fully determines the inverse: moving `count` units from `target`
    back onto `source` restores both containers.

    Attributes:
        source: Index of the container poured from
        target: Index of the container poured into
        color: Color of the transferred units
        count: Number of units transferred (>= 1)
    """
    source: int
    target: int
    color: int
    count: int

    def inverse(self) -> 'MoveRecord':
        """Record describing the reverse transfer."""
        return MoveRecord(source=self.target, target=self.source,
                          color=self.color, count=self.count)

    @property
    def hint(self) -> 'Hint':
        return Hint(source=self.source, target=self.target)


@dataclass(frozen=True)
class Hint:
    """
    A recommended pour, as returned by the solver.

    Attributes:
        source: Container to pour from
        target: Container to pour into
    """
    source: int
    target: int

    def __str__(self) -> str:
        return f"{self.source} -> {self.target}"
