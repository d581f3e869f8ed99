"""
Search Context Module - Puzzle plus resource budget for a solver run.
"""

import time
from dataclasses import dataclass
from typing import Callable, Optional

from .puzzle import Puzzle


@dataclass
class SearchContext:
    """
    Input and budget for a single solver run.

    The search is bounded by two independent budgets: the number of
    states taken off the frontier, and a wall-clock deadline. The clock
    is only consulted every `check_interval` states so that polling stays
    cheap; tests can pass a fake clock to exhaust the deadline on demand.

    Attributes:
        puzzle: Puzzle to solve (never mutated by strategies)
        max_states: Maximum states dequeued before giving up
        timeout_sec: Deadline in seconds from start_time
        check_interval: States between clock checks
        clock: Monotonic time source in seconds
        start_time: Clock value when the run started
        progress_callback: Optional callback for progress updates
    """
    puzzle: Puzzle
    max_states: int = 200_000
    timeout_sec: float = 5.0
    check_interval: int = 256
    clock: Callable[[], float] = time.monotonic
    start_time: Optional[float] = None
    progress_callback: Optional[Callable[[int, str], None]] = None

    def __post_init__(self):
        if self.start_time is None:
            self.start_time = self.clock()
        self.check_interval = max(1, self.check_interval)

    def state_budget_exhausted(self, states_explored: int) -> bool:
        return states_explored >= self.max_states

    def should_check_clock(self, states_explored: int) -> bool:
        return states_explored % self.check_interval == 0

    def deadline_passed(self) -> bool:
        return self.elapsed_time() > self.timeout_sec

    def report_progress(self, states_explored: int, message: str = "") -> None:
        """
        Report progress to the caller.

        Args:
            states_explored: States dequeued so far
            message: Optional status message
        """
        if self.progress_callback:
            self.progress_callback(states_explored, message)

    def elapsed_time(self) -> float:
        return self.clock() - self.start_time

    def remaining_time(self) -> float:
        """Seconds left before the deadline (negative once exceeded)."""
        return self.timeout_sec - self.elapsed_time()
