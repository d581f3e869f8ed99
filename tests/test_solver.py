"""
Test script for solver validation

Covers:
1. Shortest-hint search on small hand-built puzzles
2. Read-only behavior with respect to the caller's puzzle
3. Budget handling with an injected clock
4. Strategy registry

Usage:
    python tests/test_solver.py
"""

import random
import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from sandsort.engine import (
    Hint,
    Puzzle,
    SearchContext,
    SolveOutcome,
    SolverStrategy,
    create_strategy,
    find_hint,
    generate,
    get_default_strategy_name,
    get_strategy_info,
    get_strategy_names,
    is_win,
    pour,
    register_strategy,
    solve,
)
from sandsort.settings import DEFAULT_SETTINGS

A, B = 0, 1


class FakeClock:
    """Clock that advances a fixed step on every read."""

    def __init__(self, step=0.0):
        self.now = 0.0
        self.step = step
        self.calls = 0

    def __call__(self):
        self.calls += 1
        value = self.now
        self.now += self.step
        return value


def banner(title):
    print("\n" + "=" * 60)
    print(f"TEST: {title}")
    print("=" * 60)


def crossed_pair():
    return Puzzle.from_lists([[A, B], [B, A], [], []], capacity=2)


def test_hint_leads_to_win():
    """Following hints on [[A,B],[B,A],[],[]] wins in at most 4 pours."""
    banner("Hint Playback")

    puzzle = crossed_pair()
    first = find_hint(puzzle)
    print(f"  First hint: {first.hint}, depth {first.depth}, "
          f"{first.metrics.states_explored} states")
    assert first.outcome is SolveOutcome.FOUND
    assert first.depth == 3

    pours = 0
    while not is_win(puzzle):
        hint = solve(puzzle)
        assert hint is not None
        move = pour(hint.source, hint.target, puzzle)
        assert move is not None, f"hint {hint} was not a legal pour"
        pours += 1
        assert pours <= 4
        print(f"    {pours}. {hint} -> {puzzle.to_lists()}")

    assert pours == 3
    print("  [PASS] Hint playback tests")


def test_depth_shrinks_along_solution():
    """Each followed hint brings the remaining solution one pour closer."""
    banner("Shortest Path Property")

    puzzle = generate(2, rng=random.Random(11))
    result = find_hint(puzzle, timeout_sec=60.0)
    assert result.outcome is SolveOutcome.FOUND
    depth = result.depth
    print(f"  Initial depth: {depth}")

    while depth > 0:
        pour(result.hint.source, result.hint.target, puzzle)
        result = find_hint(puzzle, timeout_sec=60.0)
        if depth == 1:
            assert is_win(puzzle)
            assert result.outcome is SolveOutcome.ALREADY_SOLVED
            break
        assert result.depth == depth - 1
        depth = result.depth

    print("  [PASS] Shortest path tests")


def test_solver_does_not_mutate_input():
    """The caller's puzzle is untouched by a search."""
    banner("Read-Only Search")

    puzzle = generate(3, rng=random.Random(5))
    before = puzzle.to_lists()
    find_hint(puzzle)
    solve(puzzle)
    assert puzzle.to_lists() == before
    print("  [PASS] Read-only tests")


def test_already_solved_puzzle():
    """A winning puzzle yields no hint and says why."""
    banner("Already Solved")

    puzzle = Puzzle.from_lists([[A, A, A, A], [B, B, B, B], [], []], capacity=4)
    result = find_hint(puzzle)
    assert result.outcome is SolveOutcome.ALREADY_SOLVED
    assert result.hint is None
    assert result.depth == 0
    assert solve(puzzle) is None
    print("  [PASS] Already solved tests")


def test_unsolvable_puzzle_is_exhausted():
    """No legal pours and no win: the search proves there is no solution."""
    banner("Provably Unsolvable")

    puzzle = Puzzle.from_lists([[A, B], [B, A]], capacity=2)
    result = find_hint(puzzle)
    print(f"  Outcome: {result.outcome.name}, states={result.metrics.states_explored}")
    assert result.outcome is SolveOutcome.EXHAUSTED
    assert result.certifies_unsolvable
    assert not result.budget_exhausted
    assert result.metrics.states_explored == 1
    assert solve(puzzle) is None
    print("  [PASS] Unsolvable tests")


def test_state_budget():
    """Stopping on the state budget is reported without a hint."""
    banner("State Budget")

    puzzle = crossed_pair()
    result = find_hint(puzzle, max_states=1)
    assert result.outcome is SolveOutcome.STATE_BUDGET
    assert result.hint is None
    assert result.metrics.states_explored == 1
    assert result.budget_exhausted
    assert not result.certifies_unsolvable
    assert solve(puzzle, max_states=1) is None
    print("  [PASS] State budget tests")


def test_time_budget_with_fake_clock():
    """A deadline in the past stops the search at the first clock check."""
    banner("Time Budget")

    clock = FakeClock(step=10.0)
    result = find_hint(crossed_pair(), timeout_sec=1.0, clock=clock)
    print(f"  Outcome: {result.outcome.name}, clock reads: {clock.calls}")
    assert result.outcome is SolveOutcome.TIME_BUDGET
    assert result.hint is None
    assert result.budget_exhausted
    assert not result.certifies_unsolvable
    assert result.metrics.states_explored == 0

    assert solve(crossed_pair(), timeout_sec=1.0, clock=FakeClock(step=10.0)) is None
    print("  [PASS] Time budget tests")


def test_clock_is_polled_periodically():
    """The clock is read at start and then only every check_interval states."""
    banner("Clock Polling")

    clock = FakeClock(step=0.0)
    result = find_hint(crossed_pair(), check_interval=1000, clock=clock)
    assert result.outcome is SolveOutcome.FOUND
    assert result.metrics.states_explored < 1000
    # Start time plus the check before the first dequeue
    assert clock.calls == 2

    context = SearchContext(puzzle=crossed_pair(), check_interval=0, clock=FakeClock())
    assert context.check_interval == 1
    print("  [PASS] Clock polling tests")


def test_progress_reports():
    """Progress callback fires on clock checks after the first state."""
    banner("Progress Reports")

    reports = []
    puzzle = generate(3, rng=random.Random(8))
    find_hint(puzzle, check_interval=2,
              progress_callback=lambda n, msg: reports.append((n, msg)))
    print(f"  Reports: {len(reports)}")
    assert all(n % 2 == 0 and n > 0 for n, _ in reports)
    print("  [PASS] Progress tests")


def test_solve_with_settings():
    """solve() takes its strategy and budgets from a settings dict."""
    banner("Solve With Settings")

    hint = solve(crossed_pair(), settings=DEFAULT_SETTINGS)
    print(f"  Hint: {hint}")
    assert hint is not None
    assert pour(hint.source, hint.target, crossed_pair()) is not None

    tight = dict(DEFAULT_SETTINGS, max_states=1)
    assert solve(crossed_pair(), settings=tight) is None
    # Explicit budget arguments win over the settings
    assert solve(crossed_pair(), settings=tight, max_states=1000) is not None

    late = dict(DEFAULT_SETTINGS, timeout_sec=1.0)
    assert solve(crossed_pair(), settings=late, clock=FakeClock(step=10.0)) is None

    with pytest.raises(ValueError):
        solve(crossed_pair(), settings=dict(DEFAULT_SETTINGS, strategy_name="missing"))
    assert solve(crossed_pair(), settings=dict(DEFAULT_SETTINGS, strategy_name="missing"),
                 strategy_name="bfs") is not None
    print("  [PASS] Solve with settings tests")


def test_strategy_registry():
    """The breadth-first strategy is registered and is the default."""
    banner("Strategy Registry")

    assert "bfs" in get_strategy_names()
    assert get_default_strategy_name() == "bfs"
    assert any(info["name"] == "bfs" for info in get_strategy_info())
    assert create_strategy().name == "bfs"
    assert create_strategy("bfs").name == "bfs"

    with pytest.raises(ValueError):
        create_strategy("astar-deluxe")
    with pytest.raises(ValueError):
        find_hint(crossed_pair(), strategy_name="astar-deluxe")

    # Re-registering the same class is harmless; a second "bfs" is not
    bfs_cls = type(create_strategy("bfs"))
    assert register_strategy(bfs_cls) is bfs_cls

    class Impostor(SolverStrategy):
        name = "bfs"
        description = "duplicate name"

        def solve(self, context):
            raise NotImplementedError

    with pytest.raises(ValueError):
        register_strategy(Impostor)
    assert type(create_strategy("bfs")) is bfs_cls
    print("  [PASS] Registry tests")


def test_hint_value():
    hint = Hint(source=2, target=0)
    assert str(hint) == "2 -> 0"
    assert hint == Hint(2, 0)


def main():
    """Run all tests."""
    print("\n" + "#" * 60)
    print("# SOLVER VALIDATION TESTS")
    print("#" * 60)

    tests = [
        ("Hint Playback", test_hint_leads_to_win),
        ("Shortest Path", test_depth_shrinks_along_solution),
        ("Read-Only", test_solver_does_not_mutate_input),
        ("Already Solved", test_already_solved_puzzle),
        ("Unsolvable", test_unsolvable_puzzle_is_exhausted),
        ("State Budget", test_state_budget),
        ("Time Budget", test_time_budget_with_fake_clock),
        ("Clock Polling", test_clock_is_polled_periodically),
        ("Progress Reports", test_progress_reports),
        ("Solve With Settings", test_solve_with_settings),
        ("Registry", test_strategy_registry),
        ("Hint Value", test_hint_value),
    ]

    print("\n" + "=" * 60)
    print("SUMMARY")
    print("=" * 60)

    failed = 0
    for name, fn in tests:
        try:
            fn()
            print(f"  {name}: [PASS]")
        except AssertionError as e:
            print(f"  {name}: [FAIL] {e}")
            failed += 1

    print()
    if not failed:
        print("All tests PASSED!")
        return 0
    print("Some tests FAILED!")
    return 1


if __name__ == "__main__":
    sys.exit(main())
