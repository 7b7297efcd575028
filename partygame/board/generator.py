"""Board generation orchestration.

One attempt = fresh grid, random start cell, main loop, shortcuts, assembly.
The first attempt that closes a loop wins; when every attempt fails the
fixed perimeter board is returned instead, so callers never see a failure.
"""

from __future__ import annotations

import hashlib
import random
import time
from typing import Any, Dict, Optional

from ..logging_utils import get_logger
from .assembler import assemble_board
from .cells import BoardGrid, Cell
from .config import BoardGenerationConfig, get_preset
from .fallback import generate_fallback_board
from .main_path import GenerationFailure, build_main_path
from .metrics import init_metrics
from .shortcuts import build_shortcuts
from .tiles import Board

_log = get_logger("board")

SEED_MAX = 2**63 - 1


def coerce_seed(seed) -> Optional[int]:
    """Map an int or string seed onto a bounded int; None stays None."""
    if seed is None:
        return None
    if isinstance(seed, int):
        return seed % SEED_MAX
    s = str(seed).strip()
    if not s:
        return None
    if s.isdigit():
        return int(s) % SEED_MAX
    h = hashlib.sha256(s.encode("utf-8")).digest()
    return int.from_bytes(h[:8], "big") % SEED_MAX


def default_board_id() -> str:
    return f"board-{int(time.time() * 1000)}"


class BoardGenerator:
    def __init__(self, config: BoardGenerationConfig | None = None, *, rng=None, seed=None, enable_metrics: bool = True):
        self.config = (config or get_preset(None)).validate()
        self.seed = coerce_seed(seed)
        if rng is None:
            rng = random.Random(self.seed) if self.seed is not None else random
        self._rng = rng
        self.enable_metrics = enable_metrics
        self.metrics: Dict[str, Any] = {}
        self.main_path = []
        self.shortcuts = []

    def _pick_start(self, grid: BoardGrid) -> Cell:
        return self._rng.choice(grid.placeable_cells())

    def _attempt(self, board_id: str, metrics: Dict[str, Any]) -> Board:
        cfg = self.config
        grid = BoardGrid(cfg.grid_width, cfg.grid_height, cfg.margin)
        if not grid.placeable_cells():
            raise GenerationFailure("grid has no cells inside the margin")
        start = self._pick_start(grid)
        path = build_main_path(grid, start, cfg, self._rng, metrics)
        shortcuts = build_shortcuts(grid, path, cfg, self._rng, metrics)
        self.main_path = path
        self.shortcuts = shortcuts
        metrics["main_path_length"] = len(path)
        metrics["shortcuts"] = len(shortcuts)
        metrics["shortcut_cells"] = sum(len(sc.cells) for sc in shortcuts)
        return assemble_board(board_id, path, shortcuts, self._rng)

    def generate(self, board_id: str | None = None) -> Board:
        board_id = board_id or default_board_id()
        started = time.perf_counter()
        metrics = init_metrics()
        board = None
        self.main_path = []
        self.shortcuts = []
        for attempt in range(1, self.config.max_global_attempts + 1):
            metrics["attempts"] = attempt
            try:
                board = self._attempt(board_id, metrics)
                break
            except GenerationFailure as exc:
                _log.debug(event="board_attempt_failed", board=board_id, attempt=attempt, reason=exc.reason, steps=exc.steps)
        if board is None:
            board = generate_fallback_board(board_id)
            metrics["fallback_used"] = True
            metrics["main_path_length"] = len(board.tiles)
            _log.warn(event="board_fallback", board=board_id, attempts=metrics["attempts"])
        metrics["tiles"] = len(board.tiles)
        metrics["kind_counts"] = board.kind_counts()
        metrics["runtime_ms"] = int((time.perf_counter() - started) * 1000)
        if self.enable_metrics:
            self.metrics = metrics
        _log.info(
            event="board_generated",
            board=board_id,
            attempts=metrics["attempts"],
            tiles=metrics["tiles"],
            shortcuts=metrics["shortcuts"],
            fallback=metrics["fallback_used"],
            runtime_ms=metrics["runtime_ms"],
        )
        return board


def generate_board(
    board_id: str | None = None,
    size: str | None = None,
    *,
    config: BoardGenerationConfig | None = None,
    rng=None,
    seed=None,
) -> Board:
    """Generate a board for ``size`` ("small", "default", "large").

    An explicit ``config`` overrides the size preset. Always returns a
    structurally valid Board.
    """
    return BoardGenerator(config or get_preset(size), rng=rng, seed=seed).generate(board_id)


__all__ = ["BoardGenerator", "generate_board", "coerce_seed", "default_board_id"]
