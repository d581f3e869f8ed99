"""
Solve Result Module - Outcome of a solver run.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional

from .move import Hint


class SolveOutcome(Enum):
    """
    Why a solver run stopped.

    States:
        FOUND: A winning state was reached; hint holds its first move
        ALREADY_SOLVED: The puzzle passed in was already a win
        EXHAUSTED: Every reachable state was visited without a win
        STATE_BUDGET: Stopped after max_states states
        TIME_BUDGET: Stopped at the deadline
    """
    FOUND = auto()
    ALREADY_SOLVED = auto()
    EXHAUSTED = auto()
    STATE_BUDGET = auto()
    TIME_BUDGET = auto()


@dataclass
class SolveMetrics:
    """
    Performance metrics for a solver run.

    Attributes:
        computation_time_ms: Time taken in milliseconds
        states_explored: States taken off the frontier
        states_discovered: Distinct states ever enqueued (root included)
        strategy_name: Name of strategy that ran
    """
    computation_time_ms: float = 0.0
    states_explored: int = 0
    states_discovered: int = 0
    strategy_name: str = ""


@dataclass
class SolveResult:
    """
    Result of a solver run.

    A missing hint means either "no solution" or "budget ran out". Only
    EXHAUSTED proves the puzzle unsolvable; the budget outcomes say
    nothing about solvability.

    Attributes:
        outcome: Why the run stopped
        hint: First pour of a shortest solution, if one was found
        depth: Pours in that solution (0 when already solved)
        metrics: Performance statistics
    """
    outcome: SolveOutcome
    hint: Optional[Hint] = None
    depth: Optional[int] = None
    metrics: SolveMetrics = field(default_factory=SolveMetrics)

    @property
    def has_hint(self) -> bool:
        return self.hint is not None

    @property
    def budget_exhausted(self) -> bool:
        return self.outcome in (SolveOutcome.STATE_BUDGET, SolveOutcome.TIME_BUDGET)

    @property
    def certifies_unsolvable(self) -> bool:
        return self.outcome is SolveOutcome.EXHAUSTED
