"""
Game Session Module - State of one live game.

A GameSession owns the current puzzle, its undo history and the level
number. It is the only place where the live puzzle is mutated; the
solver only ever sees clones.

Selection works on container indices: the first select() picks a
source, the second pours into the chosen target. Mapping screen
coordinates to indices is left to the presentation layer.
"""

import logging
import random
from enum import Enum, auto
from typing import Any, Callable, Dict, Optional

from sandsort.engine import (
    History,
    MoveRecord,
    Puzzle,
    SolveResult,
    find_hint,
    generate,
    is_win,
    pour,
    record_move,
    undo,
    units_for_mode,
)
from sandsort.engine.generator import normalize_level
from sandsort.settings import DEFAULT_SETTINGS, solver_options

logger = logging.getLogger(__name__)


__all__ = [
    "SessionState",
    "GameSession",
]


class SessionState(Enum):
    """
    Session states.

    States:
        PLAYING: Pours are accepted
        WON: Every container is sorted; only undo, reset and next_level apply
    """
    PLAYING = auto()
    WON = auto()


class GameSession:
    """
    One game in progress.

    State Flow:
        PLAYING --(winning pour)--> WON
           ^                         |
           |________ undo ___________|

        reset() / next_level() always return to PLAYING with a fresh
        puzzle and an empty history.
    """

    def __init__(self, level: int = 1, settings: Optional[Dict[str, Any]] = None,
                 rng: Optional[random.Random] = None,
                 clock: Optional[Callable[[], float]] = None):
        """
        Initialize a session and generate the first puzzle.

        Args:
            level: Starting level (invalid values start at level 1)
            settings: Settings dict (defaults merged in for missing keys)
            rng: Random source for generation
            clock: Time source for solver deadlines
        """
        self.settings: Dict[str, Any] = DEFAULT_SETTINGS.copy()
        if settings:
            self.settings.update(settings)

        self._rng = rng or random.Random()
        self._clock = clock
        self._max_units = units_for_mode(self.settings["pour_mode"])

        self.level = normalize_level(level)
        self.history = History()
        self.puzzle: Puzzle = self._new_puzzle()
        self.selected: Optional[int] = None
        self.moves_made = 0
        self._state = SessionState.PLAYING

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def is_won(self) -> bool:
        return self._state is SessionState.WON

    def _new_puzzle(self) -> Puzzle:
        return generate(self.level, rng=self._rng, settings=self.settings)

    def select(self, index: int) -> Optional[MoveRecord]:
        """
        Handle a tap on a container.

        First tap selects a non-empty source, tapping it again clears the
        selection, tapping another container attempts the pour. The
        selection is cleared after every pour attempt.

        Args:
            index: Container index

        Returns:
            MoveRecord if a pour happened, else None
        """
        if self.is_won:
            return None
        if not 0 <= index < self.puzzle.container_count:
            self.selected = None
            return None

        if self.selected is None:
            if self.puzzle.containers[index]:
                self.selected = index
            return None

        if self.selected == index:
            self.selected = None
            return None

        source, self.selected = self.selected, None
        return self.pour(source, index)

    def pour(self, source: int, target: int) -> Optional[MoveRecord]:
        """
        Pour and record the move.

        Returns:
            MoveRecord on success, None if illegal or the game is won
        """
        if self.is_won:
            return None

        move = pour(source, target, self.puzzle, max_units=self._max_units)
        if move is None:
            return None

        record_move(self.history, move)
        self.moves_made += 1

        if is_win(self.puzzle):
            self._state = SessionState.WON
            logger.info(f"Level {self.level} solved in {self.moves_made} moves")
        return move

    def undo(self) -> bool:
        """
        Undo the latest pour.

        Returns:
            False if the history is empty
        """
        if not undo(self.history, self.puzzle):
            return False
        self.selected = None
        self._state = SessionState.PLAYING
        return True

    def reset(self) -> None:
        """Start the current level over with a freshly generated puzzle."""
        self.puzzle = self._new_puzzle()
        self.history.clear()
        self.selected = None
        self.moves_made = 0
        self._state = SessionState.PLAYING
        logger.info(f"Level {self.level} started ({self.puzzle.color_count} colors)")

    def next_level(self) -> None:
        self.level += 1
        self.reset()

    def snapshot(self) -> Puzzle:
        """Independent copy of the live puzzle, safe to hand to another thread."""
        return self.puzzle.clone()

    def hint(self) -> SolveResult:
        """Ask the solver for the next pour using the session's budgets."""
        return find_hint(self.snapshot(), clock=self._clock, **solver_options(self.settings))

    def apply_hint(self) -> Optional[MoveRecord]:
        """
        Compute a hint and play it.

        Returns:
            MoveRecord of the pour made, or None if no hint was available
        """
        result = self.hint()
        if result.hint is None:
            return None
        return self.pour(result.hint.source, result.hint.target)
