"""Deterministic board used when random generation runs out of budget."""

from __future__ import annotations

import random
from typing import List

from .assembler import assemble_board
from .cells import Cell
from .tiles import Board

FALLBACK_ORIGIN = (2, 2)
FALLBACK_WIDTH = 7
FALLBACK_HEIGHT = 5
# Fixed so every fallback board carries the same kinds, not just the same shape
FALLBACK_SEED = 0x5EED


def perimeter_loop(x0: int, y0: int, width: int, height: int) -> List[Cell]:
    """Walk the rectangle's edges clockwise starting at its top-left corner."""
    x1, y1 = x0 + width - 1, y0 + height - 1
    cells = [Cell(x, y0) for x in range(x0, x1 + 1)]
    cells += [Cell(x1, y) for y in range(y0 + 1, y1 + 1)]
    cells += [Cell(x, y1) for x in range(x1 - 1, x0 - 1, -1)]
    cells += [Cell(x0, y) for y in range(y1 - 1, y0, -1)]
    return cells


def generate_fallback_board(board_id: str) -> Board:
    path = perimeter_loop(FALLBACK_ORIGIN[0], FALLBACK_ORIGIN[1], FALLBACK_WIDTH, FALLBACK_HEIGHT)
    return assemble_board(board_id, path, (), rng=random.Random(FALLBACK_SEED))


__all__ = ["FALLBACK_ORIGIN", "FALLBACK_WIDTH", "FALLBACK_HEIGHT", "perimeter_loop", "generate_fallback_board"]
