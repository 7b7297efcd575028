from dataclasses import dataclass
from typing import Dict, Optional


@dataclass(frozen=True)
class BoardGenerationConfig:
    grid_width: int = 20
    grid_height: int = 15
    min_main_path_length: int = 15
    min_shortcuts: int = 0
    max_shortcuts: int = 0
    max_shortcut_length: int = 4
    # measured along the main loop, not on the grid
    min_shortcut_distance: int = 6
    max_global_attempts: int = 200
    max_shortcut_attempts: int = 30
    max_backtrack_attempts: int = 3000
    margin: int = 2

    def validate(self) -> "BoardGenerationConfig":
        """Raise ValueError for values no generator run could use.

        Geometrically impossible but well-formed configs pass: they end in
        the fallback board instead.
        """
        if self.grid_width <= 0 or self.grid_height <= 0:
            raise ValueError("grid dimensions must be positive")
        if self.margin < 0:
            raise ValueError("margin must not be negative")
        if self.min_main_path_length < 4:
            raise ValueError("min_main_path_length must be at least 4 to form a loop")
        if self.min_shortcuts < 0 or self.max_shortcuts < 0:
            raise ValueError("shortcut counts must not be negative")
        if self.min_shortcuts > self.max_shortcuts:
            raise ValueError("min_shortcuts exceeds max_shortcuts")
        if self.max_shortcut_length < 1 or self.min_shortcut_distance < 1:
            raise ValueError("shortcut length and distance must be positive")
        for name in ("max_global_attempts", "max_shortcut_attempts", "max_backtrack_attempts"):
            if getattr(self, name) < 1:
                raise ValueError(f"{name} must be at least 1")
        return self


DEFAULT_BOARD_CONFIG = BoardGenerationConfig()

SMALL_BOARD_CONFIG = BoardGenerationConfig(
    grid_width=15,
    grid_height=15,
    min_main_path_length=20,
    min_shortcuts=1,
    max_shortcuts=1,
    max_shortcut_length=6,
    min_shortcut_distance=4,
    max_global_attempts=30,
    max_shortcut_attempts=50,
    max_backtrack_attempts=500,
)

LARGE_BOARD_CONFIG = BoardGenerationConfig(
    grid_width=25,
    grid_height=25,
    min_main_path_length=35,
    min_shortcuts=3,
    max_shortcuts=3,
    max_shortcut_length=10,
    min_shortcut_distance=6,
    max_global_attempts=100,
    max_shortcut_attempts=150,
    max_backtrack_attempts=2000,
)

PRESETS: Dict[str, BoardGenerationConfig] = {
    "small": SMALL_BOARD_CONFIG,
    "default": DEFAULT_BOARD_CONFIG,
    "large": LARGE_BOARD_CONFIG,
}


def resolve_size(name: Optional[str]) -> str:
    """Normalize a size hint to a preset name; unknown or empty hints become ``default``."""
    key = (name or "default").strip().lower()
    return key if key in PRESETS else "default"


def get_preset(name: Optional[str]) -> BoardGenerationConfig:
    """Return the named preset; unknown or empty names resolve to ``default``."""
    return PRESETS[resolve_size(name)]


__all__ = [
    "BoardGenerationConfig",
    "DEFAULT_BOARD_CONFIG",
    "SMALL_BOARD_CONFIG",
    "LARGE_BOARD_CONFIG",
    "PRESETS",
    "get_preset",
    "resolve_size",
]
