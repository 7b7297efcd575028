"""Occupancy grid used while a board is being generated."""

from __future__ import annotations

from typing import Iterator, List, NamedTuple

# Cell states, one character each so a grid renders directly
EMPTY = "."
MAIN_PATH = "M"
SHORTCUT = "S"

ORTHOGONAL = ((0, -1), (0, 1), (-1, 0), (1, 0))
SURROUNDING = ORTHOGONAL + ((-1, -1), (1, -1), (-1, 1), (1, 1))


class Cell(NamedTuple):
    x: int
    y: int

    def offset(self, dx: int, dy: int) -> "Cell":
        return Cell(self.x + dx, self.y + dy)

    def is_adjacent(self, other: "Cell") -> bool:
        """True when the two cells share an edge (Manhattan distance 1)."""
        return abs(self.x - other.x) + abs(self.y - other.y) == 1

    def chebyshev(self, other: "Cell") -> int:
        return max(abs(self.x - other.x), abs(self.y - other.y))


class BoardGrid:
    """Column-major grid (``cells[x][y]``) of cell states.

    ``in_bounds`` applies the placement margin: cells closer than ``margin``
    to any edge are left free for board framing. ``in_grid`` is the raw
    array bound used for neighbourhood scans.
    """

    __slots__ = ("width", "height", "margin", "cells")

    def __init__(self, width: int, height: int, margin: int = 2):
        self.width = width
        self.height = height
        self.margin = margin
        self.cells: List[List[str]] = [[EMPTY for _ in range(height)] for _ in range(width)]

    def get(self, cell: Cell) -> str:
        return self.cells[cell.x][cell.y]

    def set(self, cell: Cell, state: str) -> None:
        self.cells[cell.x][cell.y] = state

    def is_empty(self, cell: Cell) -> bool:
        return self.cells[cell.x][cell.y] == EMPTY

    def in_grid(self, cell: Cell) -> bool:
        return 0 <= cell.x < self.width and 0 <= cell.y < self.height

    def in_bounds(self, cell: Cell) -> bool:
        m = self.margin
        return m <= cell.x < self.width - m and m <= cell.y < self.height - m

    def neighbors4(self, cell: Cell) -> Iterator[Cell]:
        for dx, dy in ORTHOGONAL:
            n = cell.offset(dx, dy)
            if self.in_grid(n):
                yield n

    def neighbors8(self, cell: Cell) -> Iterator[Cell]:
        for dx, dy in SURROUNDING:
            n = cell.offset(dx, dy)
            if self.in_grid(n):
                yield n

    def cells_in(self, state: str) -> List[Cell]:
        return [Cell(x, y) for x in range(self.width) for y in range(self.height) if self.cells[x][y] == state]

    def placeable_cells(self) -> List[Cell]:
        m = self.margin
        return [Cell(x, y) for x in range(m, self.width - m) for y in range(m, self.height - m)]

    def render(self) -> str:
        return "\n".join("".join(self.cells[x][y] for x in range(self.width)) for y in range(self.height))


Path = List[Cell]

__all__ = ["Cell", "BoardGrid", "Path", "EMPTY", "MAIN_PATH", "SHORTCUT", "ORTHOGONAL", "SURROUNDING"]
