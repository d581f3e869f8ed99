"""
Hint Module - Entry points for asking the solver for a move.
"""

import logging
import time
from typing import Any, Callable, Dict, Optional

from .context import SearchContext
from .factory import create_strategy
from .move import Hint
from .puzzle import Puzzle
from .solution import SolveOutcome, SolveResult
from ..settings import solver_options

logger = logging.getLogger(__name__)

DEFAULT_MAX_STATES = 200_000
DEFAULT_TIMEOUT_SEC = 5.0
DEFAULT_CHECK_INTERVAL = 256


def find_hint(
    puzzle: Puzzle,
    strategy_name: Optional[str] = None,
    max_states: int = DEFAULT_MAX_STATES,
    timeout_sec: float = DEFAULT_TIMEOUT_SEC,
    check_interval: int = DEFAULT_CHECK_INTERVAL,
    clock: Optional[Callable[[], float]] = None,
    progress_callback: Optional[Callable[[int, str], None]] = None,
) -> SolveResult:
    """
    Run a solver strategy on a puzzle.

    The caller's puzzle is never modified.

    Args:
        puzzle: Current puzzle
        strategy_name: Registered strategy (default strategy if None)
        max_states: State budget
        timeout_sec: Deadline in seconds
        check_interval: States between clock checks
        clock: Time source in seconds (defaults to time.monotonic)
        progress_callback: Optional progress callback

    Returns:
        Full SolveResult, distinguishing budget exhaustion from
        proven unsolvability
    """
    context = SearchContext(
        puzzle=puzzle,
        max_states=max_states,
        timeout_sec=timeout_sec,
        check_interval=check_interval,
        clock=clock or time.monotonic,
        progress_callback=progress_callback,
    )
    strategy = create_strategy(strategy_name)
    result = strategy.solve(context)

    logger.debug(
        f"Hint search ({strategy.name}): {result.outcome.name}, "
        f"{result.metrics.states_explored} states, "
        f"{result.metrics.computation_time_ms:.1f}ms"
    )
    return result


def solve(puzzle: Puzzle, settings: Optional[Dict[str, Any]] = None,
          clock: Optional[Callable[[], float]] = None,
          strategy_name: Optional[str] = None, **kwargs) -> Optional[Hint]:
    """
    Recommend the next pour.

    Returns None both when no solution exists and when the search ran
    out of budget; use find_hint() to tell them apart. An already solved
    puzzle also yields None, so check is_win() first.

    Args:
        puzzle: Current puzzle (not modified)
        settings: Settings dict supplying the strategy and budgets
        clock: Time source in seconds
        strategy_name: Strategy to use, overriding settings
        **kwargs: Budget options forwarded to find_hint(), overriding settings

    Returns:
        Hint with source/target, or None
    """
    options = solver_options(settings) if settings else {}
    options.update(kwargs)
    if strategy_name is not None:
        options["strategy_name"] = strategy_name
    result = find_hint(puzzle, clock=clock, **options)
    if result.outcome is SolveOutcome.FOUND:
        return result.hint
    return None
