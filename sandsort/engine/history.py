"""
History Module - Undo stack of executed pours.
"""

import logging
from typing import Iterator, List, Optional

from .move import MoveRecord
from .puzzle import Puzzle

logger = logging.getLogger(__name__)


class History:
    """
    Stack of MoveRecords, oldest first.

    Append-only except for popping on undo.
    """

    def __init__(self) -> None:
        self._moves: List[MoveRecord] = []

    def push(self, move: MoveRecord) -> None:
        self._moves.append(move)

    def pop(self) -> Optional[MoveRecord]:
        """Remove and return the latest move, or None if empty."""
        if not self._moves:
            return None
        return self._moves.pop()

    def peek(self) -> Optional[MoveRecord]:
        return self._moves[-1] if self._moves else None

    def clear(self) -> None:
        self._moves.clear()

    def __len__(self) -> int:
        return len(self._moves)

    def __iter__(self) -> Iterator[MoveRecord]:
        return iter(self._moves)

    def __bool__(self) -> bool:
        return bool(self._moves)


def record_move(history: History, move: MoveRecord) -> None:
    """Append a successful pour to the history."""
    history.push(move)


def undo(history: History, puzzle: Puzzle) -> bool:
    """
    Reverse the most recent pour.

    Moves exactly `count` units from the record's target back onto its
    source. Legality is not rechecked: the transfer is the exact inverse
    of the pour that produced the record.

    Args:
        history: Move history (popped on success)
        puzzle: Puzzle to restore, in place

    Returns:
        False if there was nothing to undo
    """
    move = history.pop()
    if move is None:
        return False

    src = puzzle.containers[move.source]
    dst = puzzle.containers[move.target]
    for _ in range(move.count):
        src.append(dst.pop())

    logger.debug(f"Undid pour {move.source}->{move.target} ({move.count} units)")
    return True
