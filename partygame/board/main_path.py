"""Main loop construction: a depth-first random walk with backtracking.

The walk grows a self-avoiding path from the start cell and succeeds as soon
as it sits next to the start again with at least ``min_main_path_length``
cells. Spacing keeps non-consecutive stretches of track a full cell apart:

    * a candidate may touch (8-neighbourhood) only the cell it is entered
      from and the cell before that, which allows corners;
    * a candidate that would close the loop may additionally touch the start
      cell and the second cell of the path.

Consequently any two loop cells three or more steps apart along the loop are
at Chebyshev distance >= 2.
"""

from __future__ import annotations

import random
from typing import Any, Dict, List, Optional

from .cells import EMPTY, MAIN_PATH, ORTHOGONAL, BoardGrid, Cell
from .config import BoardGenerationConfig


class GenerationFailure(Exception):
    """A single main-path attempt could not close a loop."""

    def __init__(self, reason: str, steps: int = 0):
        super().__init__(reason)
        self.reason = reason
        self.steps = steps


def can_close_loop(grid: BoardGrid, path: List[Cell], current: Cell, start: Cell) -> bool:
    """Closing must not leave the start cell touching unrelated occupied cells."""
    on_path = set(path)
    for n in grid.neighbors4(start):
        if n == current or n in on_path:
            continue
        if grid.get(n) != EMPTY:
            return False
    return True


def respects_spacing(grid: BoardGrid, candidate: Cell, path: List[Cell], closing: bool = False) -> bool:
    allowed = set(path[-2:])
    if closing:
        allowed.update(path[:2])
    for n in grid.neighbors8(candidate):
        if n in allowed:
            continue
        if grid.get(n) != EMPTY:
            return False
    return True


def possible_steps(grid: BoardGrid, path: List[Cell], config: BoardGenerationConfig, rng) -> List[Cell]:
    current = path[-1]
    start = path[0]
    closing_length = len(path) + 1 >= config.min_main_path_length
    directions = list(ORTHOGONAL)
    rng.shuffle(directions)
    steps = []
    for dx, dy in directions:
        n = current.offset(dx, dy)
        if not grid.in_bounds(n) or not grid.is_empty(n):
            continue
        closing = closing_length and n.is_adjacent(start)
        if not respects_spacing(grid, n, path, closing=closing):
            continue
        steps.append(n)
    return steps


def build_main_path(
    grid: BoardGrid,
    start: Cell,
    config: BoardGenerationConfig,
    rng=None,
    metrics: Optional[Dict[str, Any]] = None,
) -> List[Cell]:
    """Grow a closed loop from ``start``; raise GenerationFailure when stuck.

    ``grid`` is marked in place: on success it holds exactly the returned
    path as MAIN_PATH cells. Backtracked cells are cleared again.
    """
    if rng is None:
        rng = random
    if not grid.in_bounds(start):
        raise GenerationFailure("start cell outside placement bounds")
    path: List[Cell] = [start]
    grid.set(start, MAIN_PATH)
    backtracks = 0
    steps = 0
    try:
        while steps < config.max_backtrack_attempts:
            steps += 1
            current = path[-1]
            if len(path) >= config.min_main_path_length and current.is_adjacent(start):
                if can_close_loop(grid, path, current, start):
                    return path
            candidates = possible_steps(grid, path, config, rng)
            if candidates:
                nxt = rng.choice(candidates)
                path.append(nxt)
                grid.set(nxt, MAIN_PATH)
                continue
            if len(path) <= 1:
                raise GenerationFailure("walk exhausted every direction from the start cell", steps)
            backtracks += 1
            grid.set(path.pop(), EMPTY)
        raise GenerationFailure("backtrack budget exhausted", steps)
    finally:
        if metrics is not None:
            metrics["backtracks"] = metrics.get("backtracks", 0) + backtracks
            metrics["walk_steps"] = metrics.get("walk_steps", 0) + steps


__all__ = ["GenerationFailure", "build_main_path", "can_close_loop", "respects_spacing", "possible_steps"]
