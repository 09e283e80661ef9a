"""Breadth-first frontier expansion.

Each round replaces the generation with the children of its boards: the
first empty cell of every board is filled with each legal value in turn.
Complete boards survive a round as a single copy and boards whose first
empty cell admits no value are dropped.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from .board import DIGITS, Board, first_empty, is_valid
from .stats import SearchStats

_LOGGER = logging.getLogger(__name__)


def expand_generation(boards: Iterable[Board], stats: Optional[SearchStats] = None) -> List[Board]:
    """Return the next generation for ``boards``."""

    children: List[Board] = []
    boards_in = dropped = passed_through = 0
    for board in boards:
        boards_in += 1
        index = first_empty(board)
        if index is None:
            children.append(list(board))
            passed_through += 1
            continue

        produced = 0
        for value in DIGITS:
            if is_valid(board, index, value):
                child = list(board)
                child[index] = value
                children.append(child)
                produced += 1
        if not produced:
            dropped += 1

    if stats is not None:
        stats.record_round(
            boards_in=boards_in,
            boards_out=len(children),
            dropped=dropped,
            passed_through=passed_through,
        )
    return children


def expand_frontier(
    board: Board,
    rounds: int,
    *,
    limit: int = 0,
    stats: Optional[SearchStats] = None,
) -> List[Board]:
    """Expand ``board`` for up to ``rounds`` generations.

    ``limit`` bounds memory: once a generation holds at least ``limit``
    boards no further rounds are run. ``0`` disables the bound. An empty
    generation is returned as soon as it occurs.
    """

    if rounds < 0:
        raise ValueError("rounds must be >= 0")
    if limit < 0:
        raise ValueError("limit must be >= 0")

    generation: List[Board] = [list(board)]
    for depth in range(rounds):
        if limit and len(generation) >= limit:
            _LOGGER.info(
                "frontier limit %d reached after %d of %d rounds (%d boards)",
                limit,
                depth,
                rounds,
                len(generation),
            )
            break
        generation = expand_generation(generation, stats)
        _LOGGER.debug("frontier round %d: %d boards", depth + 1, len(generation))
        if not generation:
            break
    return generation


__all__ = ["expand_frontier", "expand_generation"]
