"""Bomber minigame arena generation.

Phases:
    * Border plus a pillar on every cell whose coordinates are both odd.
    * Spawns from a preference list: corners, edge midpoints, raster sweep.
    * Clear a plus shape around each spawn (interior pillars included).
    * Scatter destructible blocks away from spawns; some hide a power-up.
    * Top up hidden power-ups to a size-dependent minimum.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

EMPTY = "empty"
INDESTRUCTIBLE = "indestructible"
DESTRUCTIBLE = "destructible"
SPAWN = "spawn"

EXTRA_BOMB = "extra_bomb"
BOMB_POWER = "bomb_power"
HIDDEN_POWER_UPS = (EXTRA_BOMB, BOMB_POWER)

MIN_PLAYERS = 2
MAX_PLAYERS = 8
DESTRUCTIBLE_CHANCE = 0.7
POWER_UP_CHANCE = 0.4

SPAWN_CLEAR_OFFSETS = ((0, 0), (1, 0), (-1, 0), (0, 1), (0, -1))


@dataclass
class BomberTile:
    x: int
    y: int
    kind: str = EMPTY
    hidden_power_up: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"x": self.x, "y": self.y, "kind": self.kind}
        if self.hidden_power_up:
            out["hiddenPowerUp"] = self.hidden_power_up
        return out


@dataclass(frozen=True)
class BomberSpawn:
    player_index: int
    x: int
    y: int

    def to_dict(self) -> Dict[str, Any]:
        return {"playerIndex": self.player_index, "x": self.x, "y": self.y}


@dataclass
class BomberMap:
    width: int
    height: int
    tiles: List[BomberTile]
    spawns: List[BomberSpawn]

    def tile_at(self, x: int, y: int) -> BomberTile:
        return self.tiles[y * self.width + x]

    def hidden_power_up_count(self) -> int:
        return sum(1 for t in self.tiles if t.hidden_power_up)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "width": self.width,
            "height": self.height,
            "tiles": [t.to_dict() for t in self.tiles],
            "spawns": [s.to_dict() for s in self.spawns],
        }


Grid = List[List[BomberTile]]


def clamp_players(player_count: int) -> int:
    return max(MIN_PLAYERS, min(player_count, MAX_PLAYERS))


def compute_size(player_count: int) -> int:
    if player_count <= 2:
        return 11
    if player_count <= 4:
        return 13
    if player_count <= 6:
        return 15
    return 17


def min_power_ups(width: int, height: int) -> int:
    return max(4, (width * height) // 40)


def _in_bounds(x: int, y: int, width: int, height: int) -> bool:
    return 0 <= x < width and 0 <= y < height


def _on_border(x: int, y: int, width: int, height: int) -> bool:
    return x == 0 or y == 0 or x == width - 1 or y == height - 1


def create_grid(width: int, height: int) -> Grid:
    # row-major: grid[y][x]
    return [[BomberTile(x, y) for x in range(width)] for y in range(height)]


def place_indestructible_walls(grid: Grid) -> None:
    height = len(grid)
    width = len(grid[0]) if grid else 0
    for y in range(height):
        for x in range(width):
            if _on_border(x, y, width, height) or (x % 2 == 1 and y % 2 == 1):
                grid[y][x].kind = INDESTRUCTIBLE


def choose_spawn_positions(width: int, height: int, player_count: int) -> List[Tuple[int, int]]:
    positions: List[Tuple[int, int]] = []

    def add(x: int, y: int):
        if len(positions) < player_count and (x, y) not in positions:
            positions.append((x, y))

    add(1, 1)
    add(width - 2, height - 2)
    add(width - 2, 1)
    add(1, height - 2)
    mid_x, mid_y = width // 2, height // 2
    add(mid_x, 1)
    add(mid_x, height - 2)
    add(1, mid_y)
    add(width - 2, mid_y)
    x, y = 2, 2
    while len(positions) < player_count and y < height - 2:
        add(x, y)
        x += 2
        if x >= width - 2:
            x = 2
            y += 2
    return positions[:player_count]


def clear_spawn_area(grid: Grid, x: int, y: int) -> None:
    height = len(grid)
    width = len(grid[0]) if grid else 0
    for dx, dy in SPAWN_CLEAR_OFFSETS:
        nx, ny = x + dx, y + dy
        if _in_bounds(nx, ny, width, height) and not _on_border(nx, ny, width, height):
            grid[ny][nx].kind = EMPTY
            grid[ny][nx].hidden_power_up = None


def _near_spawn(x: int, y: int, spawns: List[Tuple[int, int]]) -> bool:
    return any(abs(sx - x) <= 1 and abs(sy - y) <= 1 for sx, sy in spawns)


def place_blocks_and_power_ups(grid: Grid, spawns: List[Tuple[int, int]], rng) -> int:
    """Scatter destructible blocks; return the number of hidden power-ups."""
    height = len(grid)
    width = len(grid[0]) if grid else 0
    hidden = 0
    for row in grid:
        for tile in row:
            if tile.kind != EMPTY or _near_spawn(tile.x, tile.y, spawns):
                continue
            if rng.random() < DESTRUCTIBLE_CHANCE:
                tile.kind = DESTRUCTIBLE
                if rng.random() < POWER_UP_CHANCE:
                    tile.hidden_power_up = rng.choice(HIDDEN_POWER_UPS)
                    hidden += 1
    minimum = min_power_ups(width, height)
    if hidden < minimum:
        candidates = [
            tile
            for row in grid
            for tile in row
            if tile.kind == DESTRUCTIBLE and not tile.hidden_power_up and not _near_spawn(tile.x, tile.y, spawns)
        ]
        while hidden < minimum and candidates:
            tile = candidates.pop(rng.randrange(len(candidates)))
            tile.hidden_power_up = rng.choice(HIDDEN_POWER_UPS)
            hidden += 1
    return hidden


SYMBOLS = {EMPTY: ".", INDESTRUCTIBLE: "#", DESTRUCTIBLE: "+"}


def render_bomber_map(arena: BomberMap) -> str:
    """Character view: `#` wall, `+` block, `*` block hiding a power-up, digits for spawns."""
    spawn_at = {(s.x, s.y): str(s.player_index + 1) for s in arena.spawns}
    rows = []
    for y in range(arena.height):
        line = []
        for x in range(arena.width):
            tile = arena.tile_at(x, y)
            if (x, y) in spawn_at:
                line.append(spawn_at[(x, y)])
            elif tile.hidden_power_up:
                line.append("*")
            else:
                line.append(SYMBOLS.get(tile.kind, "?"))
        rows.append("".join(line))
    return "\n".join(rows)


def generate_bomber_map(player_count: int, rng=None) -> BomberMap:
    if rng is None:
        rng = random
    players = clamp_players(player_count)
    size = compute_size(players)
    width = height = size
    grid = create_grid(width, height)
    place_indestructible_walls(grid)
    positions = choose_spawn_positions(width, height, players)
    spawns = []
    for index, (x, y) in enumerate(positions):
        clear_spawn_area(grid, x, y)
        grid[y][x].kind = SPAWN
        spawns.append(BomberSpawn(index, x, y))
    place_blocks_and_power_ups(grid, positions, rng)
    tiles = [tile for row in grid for tile in row]
    return BomberMap(width, height, tiles, spawns)


__all__ = [
    "BomberTile",
    "BomberSpawn",
    "BomberMap",
    "clamp_players",
    "compute_size",
    "min_power_ups",
    "choose_spawn_positions",
    "clear_spawn_area",
    "generate_bomber_map",
    "render_bomber_map",
    "EMPTY",
    "INDESTRUCTIBLE",
    "DESTRUCTIBLE",
    "SPAWN",
    "HIDDEN_POWER_UPS",
]
