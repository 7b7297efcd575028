"""Public board package interface."""

from .cells import EMPTY, MAIN_PATH, SHORTCUT, BoardGrid, Cell
from .config import (
    DEFAULT_BOARD_CONFIG,
    LARGE_BOARD_CONFIG,
    PRESETS,
    SMALL_BOARD_CONFIG,
    BoardGenerationConfig,
    get_preset,
    resolve_size,
)
from .fallback import generate_fallback_board
from .generator import BoardGenerator, generate_board
from .main_path import GenerationFailure, build_main_path
from .shortcuts import Shortcut, build_shortcuts, circular_path_distance
from .tiles import Board, Tile  # noqa: F401

__all__ = [
    "Board",
    "Tile",
    "Cell",
    "BoardGrid",
    "EMPTY",
    "MAIN_PATH",
    "SHORTCUT",
    "BoardGenerationConfig",
    "DEFAULT_BOARD_CONFIG",
    "SMALL_BOARD_CONFIG",
    "LARGE_BOARD_CONFIG",
    "PRESETS",
    "get_preset",
    "resolve_size",
    "BoardGenerator",
    "generate_board",
    "generate_fallback_board",
    "GenerationFailure",
    "build_main_path",
    "Shortcut",
    "build_shortcuts",
    "circular_path_distance",
]
