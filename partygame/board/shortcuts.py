"""Shortcut branches grown off a closed main loop."""

from __future__ import annotations

import random
from typing import Any, Dict, List, NamedTuple, Optional, Set

from .cells import EMPTY, MAIN_PATH, ORTHOGONAL, SHORTCUT, BoardGrid, Cell
from .config import BoardGenerationConfig


class Shortcut(NamedTuple):
    root_index: int
    exit_index: int
    cells: List[Cell]


def circular_path_distance(index_a: int, index_b: int, path_length: int) -> int:
    forward = abs(index_b - index_a)
    return min(forward, path_length - forward)


def _state(grid: BoardGrid, cell: Cell, branch: Set[Cell]) -> str:
    return SHORTCUT if cell in branch else grid.get(cell)


def respects_shortcut_spacing(grid: BoardGrid, candidate: Cell, current: Cell, branch: Set[Cell]) -> bool:
    # Main-path neighbours are fine; other shortcut cells are not.
    for n in grid.neighbors4(candidate):
        if n == current:
            continue
        if _state(grid, n, branch) == SHORTCUT:
            return False
    return True


def grow_branch(
    grid: BoardGrid,
    main_path: List[Cell],
    path_index: Dict[Cell, int],
    root_index: int,
    config: BoardGenerationConfig,
    rng,
) -> Optional[Shortcut]:
    """Grow one branch from ``main_path[root_index]``; None when it fails.

    The grid is only read here. Cells of the branch under construction live
    in a local overlay so a failed branch leaves nothing behind.
    """
    cells: List[Cell] = []
    branch: Set[Cell] = set()
    current = main_path[root_index]
    n_path = len(main_path)
    for _ in range(config.max_shortcut_length):
        options = []
        for dx, dy in ORTHOGONAL:
            n = current.offset(dx, dy)
            if not grid.in_bounds(n):
                continue
            state = _state(grid, n, branch)
            if state == EMPTY:
                if respects_shortcut_spacing(grid, n, current, branch):
                    options.append(n)
            elif state == MAIN_PATH:
                exit_index = path_index[n]
                if circular_path_distance(root_index, exit_index, n_path) >= config.min_shortcut_distance:
                    options.append(n)
        if not options:
            return None
        nxt = rng.choice(options)
        if nxt in path_index:
            if not cells:
                return None
            return Shortcut(root_index, path_index[nxt], cells)
        cells.append(nxt)
        branch.add(nxt)
        current = nxt
    return None


def build_shortcuts(
    grid: BoardGrid,
    main_path: List[Cell],
    config: BoardGenerationConfig,
    rng=None,
    metrics: Optional[Dict[str, Any]] = None,
) -> List[Shortcut]:
    """Add up to ``min_shortcuts`` branches; fewer (even none) is acceptable.

    Accepted branches are marked SHORTCUT in ``grid`` so later branches can
    neither overlap nor run alongside them.
    """
    if rng is None:
        rng = random
    shortcuts: List[Shortcut] = []
    if not main_path:
        return shortcuts
    path_index = {cell: i for i, cell in enumerate(main_path)}
    target = min(config.min_shortcuts, config.max_shortcuts)
    attempts = 0
    while attempts < config.max_shortcut_attempts and len(shortcuts) < target:
        attempts += 1
        root_index = rng.randrange(len(main_path))
        shortcut = grow_branch(grid, main_path, path_index, root_index, config, rng)
        if shortcut is None:
            continue
        for cell in shortcut.cells:
            grid.set(cell, SHORTCUT)
        shortcuts.append(shortcut)
    if metrics is not None:
        metrics["shortcut_attempts"] = metrics.get("shortcut_attempts", 0) + attempts
    return shortcuts


__all__ = [
    "Shortcut",
    "circular_path_distance",
    "respects_shortcut_spacing",
    "grow_branch",
    "build_shortcuts",
]
