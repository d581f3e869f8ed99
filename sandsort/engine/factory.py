"""
Strategy Registry Module - Hint solvers by name.

The breadth-first search in strategies/bfs.py registers itself as "bfs"
when sandsort.engine is imported. The "strategy_name" setting and the
strategy_name argument of find_hint()/solve() are looked up here.
"""

from typing import Any, Dict, List, Optional, Type

from .base import SolverStrategy

DEFAULT_STRATEGY = "bfs"

_STRATEGIES: Dict[str, Type[SolverStrategy]] = {}


def register_strategy(cls: Type[SolverStrategy]) -> Type[SolverStrategy]:
    """
    Class decorator adding a hint solver to the registry under cls.name.

    Re-registering the same class is a no-op; a second class claiming a
    taken name is rejected.

    Usage:
        @register_strategy
        class BreadthFirstStrategy(SolverStrategy):
            name = "bfs"
            ...
    """
    if cls.name in _STRATEGIES and _STRATEGIES[cls.name] is not cls:
        raise ValueError(f"Strategy name already registered: {cls.name}")
    _STRATEGIES[cls.name] = cls
    return cls


def create_strategy(name: Optional[str] = None, **kwargs: Any) -> SolverStrategy:
    """
    Instantiate a registered hint solver.

    Args:
        name: Strategy name; None or "" selects "bfs"
        **kwargs: Passed to the strategy constructor

    Raises:
        ValueError: If no strategy has that name
    """
    name = name or get_default_strategy_name()
    try:
        cls = _STRATEGIES[name]
    except KeyError:
        available = ", ".join(_STRATEGIES) or "none"
        raise ValueError(f"Unknown strategy: {name}. Available: {available}") from None
    return cls(**kwargs)


def get_strategy_names() -> List[str]:
    return list(_STRATEGIES)


def get_strategy_info() -> List[Dict[str, str]]:
    """Name and description of every registered hint solver."""
    return [
        {"name": cls.name, "description": cls.description}
        for cls in _STRATEGIES.values()
    ]


def get_default_strategy_name() -> str:
    """
    Name used when settings or callers leave the strategy unset.

    Returns:
        "bfs" once strategies/bfs.py is imported, else the first
        registered name, else ""
    """
    if DEFAULT_STRATEGY in _STRATEGIES:
        return DEFAULT_STRATEGY
    return next(iter(_STRATEGIES), "")
