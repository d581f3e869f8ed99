"""
Breadth-First Strategy - Shortest-path hint search.

Explores the graph of puzzle configurations level by level, starting
from the current puzzle. Every frontier node remembers the first pour
taken from the root, so the first winning state taken off the frontier
yields the first pour of a solution with the fewest possible pours.

Visited configurations are deduplicated by their canonical key; a state
is only enqueued the first time its key is seen.
"""

import logging
import time
from collections import deque
from dataclasses import dataclass
from typing import Deque, Optional, Set

from ..base import SolverStrategy
from ..context import SearchContext
from ..factory import register_strategy
from ..move import Hint
from ..puzzle import Puzzle
from ..solution import SolveOutcome, SolveResult
from ..win import is_win

logger = logging.getLogger(__name__)


@dataclass
class SearchNode:
    """
    Frontier entry.

    Attributes:
        puzzle: Configuration (private clone)
        first_move: Pour taken from the root on the way here (None at root)
        depth: Pours from the root
    """
    puzzle: Puzzle
    first_move: Optional[Hint]
    depth: int


@register_strategy
class BreadthFirstStrategy(SolverStrategy):
    """
    Breadth-first search bounded by a state budget and a deadline.

    Stops with:
        FOUND / ALREADY_SOLVED when a winning state is dequeued
        STATE_BUDGET after context.max_states dequeues
        TIME_BUDGET when the deadline passes (polled periodically)
        EXHAUSTED when the frontier empties, which proves no solution
    """
    name = "bfs"
    description = "Breadth-first search - fewest pours to a win"

    def solve(self, context: SearchContext) -> SolveResult:
        """
        Search for the first pour of a shortest solution.

        Args:
            context: Search context with puzzle and budgets

        Returns:
            SolveResult with outcome, hint, depth and metrics
        """
        start_time = time.perf_counter()

        root = context.puzzle.clone()
        seen: Set[bytes] = {root.key()}
        frontier: Deque[SearchNode] = deque([SearchNode(root, None, 0)])
        explored = 0

        while frontier:
            if context.state_budget_exhausted(explored):
                logger.info(f"[BFS] State budget hit after {explored} states")
                return self._build_result(
                    SolveOutcome.STATE_BUDGET, start_time, explored, len(seen)
                )

            if context.should_check_clock(explored):
                if context.deadline_passed():
                    logger.info(
                        f"[BFS] Deadline hit after {explored} states "
                        f"({context.elapsed_time():.2f}s)"
                    )
                    return self._build_result(
                        SolveOutcome.TIME_BUDGET, start_time, explored, len(seen)
                    )
                if explored:
                    context.report_progress(explored, f"{len(frontier)} states queued")

            node = frontier.popleft()
            explored += 1

            if is_win(node.puzzle):
                if node.first_move is None:
                    return self._build_result(
                        SolveOutcome.ALREADY_SOLVED, start_time, explored, len(seen),
                        depth=0,
                    )
                logger.info(
                    f"[BFS] Solution found: first pour {node.first_move}, "
                    f"{node.depth} pours, {explored} states explored"
                )
                return self._build_result(
                    SolveOutcome.FOUND, start_time, explored, len(seen),
                    hint=node.first_move, depth=node.depth,
                )

            for move, child in self.expand(node.puzzle):
                key = child.key()
                if key in seen:
                    continue
                seen.add(key)
                frontier.append(SearchNode(
                    puzzle=child,
                    first_move=node.first_move or move,
                    depth=node.depth + 1,
                ))

        logger.info(f"[BFS] No solution: all {explored} reachable states explored")
        return self._build_result(
            SolveOutcome.EXHAUSTED, start_time, explored, len(seen)
        )
