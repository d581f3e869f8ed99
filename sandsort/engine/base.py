"""
Base Strategy Module - Abstract base class for solving strategies.
"""

import time
from abc import ABC, abstractmethod
from typing import Iterator, Optional, Tuple

from .context import SearchContext
from .move import Hint
from .pour import legal_moves, pour
from .puzzle import Puzzle
from .solution import SolveMetrics, SolveOutcome, SolveResult


class SolverStrategy(ABC):
    """
    Abstract base class for all solving strategies.

    Subclasses must implement the solve() method and define
    name and description class attributes. Strategies treat
    context.puzzle as read-only and work on clones.

    Attributes:
        name: Short identifier for the strategy
        description: Human-readable description
    """
    name: str = "base"
    description: str = "Base strategy"

    @abstractmethod
    def solve(self, context: SearchContext) -> SolveResult:
        """
        Search for a move toward a solved state.

        Must honor both budgets in the context and report exhaustion
        through the result outcome rather than by raising.

        Args:
            context: Search context with puzzle and budgets

        Returns:
            SolveResult with outcome, hint and metrics
        """
        pass

    def expand(self, puzzle: Puzzle) -> Iterator[Tuple[Hint, Puzzle]]:
        """
        Yield (move, resulting puzzle) for every useful pour.

        Solved containers are never used as sources. Each child is an
        independent clone.

        Args:
            puzzle: State to expand (not modified)

        Yields:
            Tuples of the pour and the state it leads to
        """
        for source, target in legal_moves(puzzle, skip_solved=True):
            child = puzzle.clone()
            pour(source, target, child)
            yield Hint(source=source, target=target), child

    def _build_result(
        self,
        outcome: SolveOutcome,
        start_time: float,
        states_explored: int,
        states_discovered: int,
        hint: Optional[Hint] = None,
        depth: Optional[int] = None,
    ) -> SolveResult:
        """Build SolveResult object from computation results."""
        elapsed_ms = (time.perf_counter() - start_time) * 1000

        return SolveResult(
            outcome=outcome,
            hint=hint,
            depth=depth,
            metrics=SolveMetrics(
                computation_time_ms=elapsed_ms,
                states_explored=states_explored,
                states_discovered=states_discovered,
                strategy_name=self.name,
            ),
        )
