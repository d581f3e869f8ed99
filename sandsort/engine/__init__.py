"""
Engine Package - Puzzle engine for the Sand Sort container puzzle.

Colored units sit in fixed-capacity containers; the player pours the top
run of one container onto an empty container or a matching color until
every container is empty or holds a single color.

Public API:
    - generate(): Build the starting puzzle for a level
    - pour(): Validate and execute one pour
    - undo(): Reverse the latest pour from a History
    - is_win(): Win predicate
    - solve(): Recommend the next pour (or None)
    - find_hint(): Same search, with outcome and metrics
    - Puzzle, MoveRecord, Hint, History: Data structures
    - SearchContext, SolverStrategy, SolveResult: Solver framework

Usage:
    from sandsort.engine import generate, pour, record_move, undo, is_win, solve, History

    puzzle = generate(level=1)
    history = History()

    move = pour(0, 3, puzzle)
    if move is not None:
        record_move(history, move)

    hint = solve(puzzle)
    if hint is not None:
        print(f"Try pouring {hint.source} into {hint.target}")
"""

# Core data structures
from .puzzle import PALETTE, Puzzle, PuzzleInvariantError, color_name
from .move import Hint, MoveRecord
from .history import History, record_move, undo

# Rules
from .pour import PourRejection, check_pour, legal_moves, pour, units_for_mode
from .win import is_container_solved, is_win
from .generator import (
    DifficultyCurve,
    GenerationError,
    generate,
    scramble,
)

# Solver framework
from .context import SearchContext
from .solution import SolveMetrics, SolveOutcome, SolveResult
from .base import SolverStrategy
from .factory import (
    create_strategy,
    get_default_strategy_name,
    get_strategy_info,
    get_strategy_names,
    register_strategy,
)
from .hint import find_hint, solve

# Import strategies to register them
from . import strategies

__all__ = [
    # Data structures
    "PALETTE",
    "Puzzle",
    "PuzzleInvariantError",
    "color_name",
    "Hint",
    "MoveRecord",
    "History",
    # Operations
    "generate",
    "scramble",
    "pour",
    "check_pour",
    "legal_moves",
    "units_for_mode",
    "PourRejection",
    "record_move",
    "undo",
    "is_win",
    "is_container_solved",
    "solve",
    "find_hint",
    "DifficultyCurve",
    "GenerationError",
    # Solver framework
    "SearchContext",
    "SolverStrategy",
    "SolveMetrics",
    "SolveOutcome",
    "SolveResult",
    "create_strategy",
    "get_default_strategy_name",
    "get_strategy_info",
    "get_strategy_names",
    "register_strategy",
]
