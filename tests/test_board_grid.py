import pytest

from partygame.board.cells import EMPTY, MAIN_PATH, BoardGrid, Cell
from partygame.board.config import (
    DEFAULT_BOARD_CONFIG,
    LARGE_BOARD_CONFIG,
    SMALL_BOARD_CONFIG,
    BoardGenerationConfig,
    get_preset,
    resolve_size,
)


def test_grid_starts_empty_and_is_column_major():
    grid = BoardGrid(5, 3)
    assert len(grid.cells) == 5
    assert all(len(col) == 3 for col in grid.cells)
    assert all(grid.is_empty(Cell(x, y)) for x in range(5) for y in range(3))
    grid.set(Cell(4, 1), MAIN_PATH)
    assert grid.cells[4][1] == MAIN_PATH
    assert grid.get(Cell(4, 1)) == MAIN_PATH


def test_in_bounds_applies_margin():
    grid = BoardGrid(10, 8, margin=2)
    assert grid.in_bounds(Cell(2, 2))
    assert grid.in_bounds(Cell(7, 5))
    assert not grid.in_bounds(Cell(1, 4))
    assert not grid.in_bounds(Cell(8, 4))
    assert not grid.in_bounds(Cell(4, 6))
    # raw grid bound is wider than the placement bound
    assert grid.in_grid(Cell(0, 0)) and not grid.in_grid(Cell(10, 0))


def test_placeable_cells_match_in_bounds():
    grid = BoardGrid(7, 6, margin=2)
    cells = grid.placeable_cells()
    assert len(cells) == 3 * 2
    assert all(grid.in_bounds(c) for c in cells)
    assert BoardGrid(4, 4, margin=2).placeable_cells() == []


def test_neighbourhoods_stay_inside_grid():
    grid = BoardGrid(4, 4)
    assert sorted(grid.neighbors4(Cell(0, 0))) == [Cell(0, 1), Cell(1, 0)]
    assert len(list(grid.neighbors8(Cell(0, 0)))) == 3
    assert len(list(grid.neighbors8(Cell(1, 1)))) == 8


def test_cell_helpers():
    a = Cell(3, 3)
    assert a.offset(1, -1) == Cell(4, 2)
    assert a.is_adjacent(Cell(3, 4))
    assert not a.is_adjacent(Cell(4, 4))
    assert a.chebyshev(Cell(5, 4)) == 2


def test_render_and_cells_in():
    grid = BoardGrid(3, 2, margin=0)
    grid.set(Cell(1, 0), MAIN_PATH)
    assert grid.render() == ".M.\n..."
    assert grid.cells_in(MAIN_PATH) == [Cell(1, 0)]
    assert len(grid.cells_in(EMPTY)) == 5


def test_presets_and_unknown_size():
    assert get_preset("small") is SMALL_BOARD_CONFIG
    assert get_preset("LARGE") is LARGE_BOARD_CONFIG
    assert get_preset(None) is DEFAULT_BOARD_CONFIG
    assert get_preset("gigantic") is DEFAULT_BOARD_CONFIG
    assert (SMALL_BOARD_CONFIG.grid_width, SMALL_BOARD_CONFIG.min_main_path_length) == (15, 20)
    assert (LARGE_BOARD_CONFIG.grid_width, LARGE_BOARD_CONFIG.min_main_path_length) == (25, 35)
    assert (DEFAULT_BOARD_CONFIG.grid_width, DEFAULT_BOARD_CONFIG.grid_height) == (20, 15)


def test_resolve_size_normalizes_hints():
    assert resolve_size(" Small ") == "small"
    assert resolve_size("LARGE") == "large"
    assert resolve_size("enormous") == "default"
    assert resolve_size("") == "default"
    assert resolve_size(None) == "default"


@pytest.mark.parametrize(
    "overrides",
    [
        {"grid_width": 0},
        {"min_main_path_length": 3},
        {"min_shortcuts": 2, "max_shortcuts": 1},
        {"max_global_attempts": 0},
        {"margin": -1},
    ],
)
def test_validate_rejects_unusable_configs(overrides):
    with pytest.raises(ValueError):
        BoardGenerationConfig(**overrides).validate()


def test_validate_accepts_impossible_geometry():
    cfg = BoardGenerationConfig(grid_width=5, grid_height=5, min_main_path_length=50)
    assert cfg.validate() is cfg
