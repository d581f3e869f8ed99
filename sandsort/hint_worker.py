"""
Hint Worker Module for Sand Sort

Runs a hint search on a background thread so the caller's event loop
keeps responding while the solver works. The worker only ever sees a
snapshot of the puzzle; it cannot be interrupted, the search stops on
its own state and time budgets.
"""

import logging
import threading
from typing import Any, Callable, Dict, Optional

from sandsort.engine import Puzzle, SolveResult, find_hint
from sandsort.settings import DEFAULT_SETTINGS, solver_options

# Configure module logger
logger = logging.getLogger(__name__)


class HintWorker(threading.Thread):
    """
    Background thread computing one hint.

    Callbacks run on the worker thread; a UI should marshal them back to
    its own thread.

    Example:
        worker = HintWorker(session.snapshot(), on_result=show_hint)
        worker.start()
        # ...
        result = worker.wait(timeout=10)
    """

    def __init__(self, puzzle: Puzzle,
                 on_result: Optional[Callable[[SolveResult], None]] = None,
                 on_error: Optional[Callable[[Exception], None]] = None,
                 settings: Optional[Dict[str, Any]] = None,
                 clock: Optional[Callable[[], float]] = None):
        """
        Initialize the hint worker.

        Args:
            puzzle: Puzzle to analyse (cloned again, the caller keeps ownership)
            on_result: Called with the SolveResult when the search ends
            on_error: Called if the search raises
            settings: Settings dict for budgets and strategy
            clock: Time source for the deadline
        """
        super().__init__(name="hint-worker", daemon=True)
        self._puzzle = puzzle.clone()
        self._on_result = on_result
        self._on_error = on_error
        self._settings = DEFAULT_SETTINGS.copy()
        if settings:
            self._settings.update(settings)
        self._clock = clock
        self._done = threading.Event()
        self.result: Optional[SolveResult] = None
        self.error: Optional[Exception] = None

    def run(self):
        """Thread body: run the search and deliver the outcome."""
        logger.debug("Hint worker started")
        try:
            self.result = find_hint(self._puzzle, clock=self._clock,
                                    **solver_options(self._settings))
        except Exception as e:
            logger.exception("Hint search failed")
            self.error = e
            if self._on_error:
                self._on_error(e)
        else:
            if self._on_result:
                self._on_result(self.result)
        finally:
            self._done.set()
            logger.debug("Hint worker finished")

    @property
    def is_done(self) -> bool:
        return self._done.is_set()

    def wait(self, timeout: Optional[float] = None) -> Optional[SolveResult]:
        """
        Block until the search finishes.

        Args:
            timeout: Seconds to wait (None = forever)

        Returns:
            The SolveResult, or None if still running or the search failed
        """
        self._done.wait(timeout)
        return self.result
