"""Turn generated geometry into the tile list clients consume."""

from __future__ import annotations

import random
from typing import List, Optional, Sequence

from .cells import Cell
from .shortcuts import Shortcut
from .tiles import (
    BONUS,
    COINS,
    COINS_RANGE,
    KEY_PRICE,
    KEY_SHOP,
    MALUS,
    MINIGAME,
    MINIGAME_CATEGORIES,
    START,
    Board,
    CoinsPayload,
    KeyShopPayload,
    MinigamePayload,
    Tile,
    TilePayload,
)

# Weighted draw for main-loop tiles (higher = more common)
KIND_WEIGHTS = (
    (COINS, 20),
    (MINIGAME, 45),
    (KEY_SHOP, 5),
    (BONUS, 15),
    (MALUS, 15),
)


def random_tile_kind(rng) -> str:
    total = sum(w for _, w in KIND_WEIGHTS)
    r = rng.randint(1, total)
    upto = 0
    for kind, w in KIND_WEIGHTS:
        upto += w
        if r <= upto:
            return kind
    return MINIGAME


def payload_for(kind: str, rng) -> Optional[TilePayload]:
    lo, hi = COINS_RANGE
    if kind == COINS:
        return CoinsPayload(rng.randint(lo, hi))
    if kind == MALUS:
        return CoinsPayload(-rng.randint(lo, hi))
    if kind == KEY_SHOP:
        return KeyShopPayload(KEY_PRICE)
    if kind == MINIGAME:
        return MinigamePayload(rng.choice(MINIGAME_CATEGORIES))
    return None


def _loop_tiles(main_path: Sequence[Cell], rng) -> List[Tile]:
    n = len(main_path)
    tiles = []
    for i, cell in enumerate(main_path):
        kind = random_tile_kind(rng)
        tiles.append(Tile(i, kind, cell.x, cell.y, ((i + 1) % n,), payload_for(kind, rng)))
    return tiles


def enforce_board_invariants(main_tiles: List[Tile]) -> List[Tile]:
    """Force tile 0 to start and guarantee a key shop on the loop."""
    if not main_tiles:
        return main_tiles
    main_tiles[0] = main_tiles[0].with_kind(START)
    if len(main_tiles) > 1 and not any(t.kind == KEY_SHOP for t in main_tiles):
        mid = len(main_tiles) // 2
        main_tiles[mid] = main_tiles[mid].with_kind(KEY_SHOP, KeyShopPayload(KEY_PRICE))
    return main_tiles


def assemble_board(board_id: str, main_path: Sequence[Cell], shortcuts: Sequence[Shortcut] = (), rng=None) -> Board:
    """Build a Board from a closed main path and its accepted shortcuts.

    Ids are dense: the loop takes ``0..N-1`` in traversal order, shortcut
    cells follow in discovery order. Each shortcut chain ends on the loop
    tile where it reconnects; the root tile keeps its single loop successor.
    """
    if rng is None:
        rng = random
    main_tiles = enforce_board_invariants(_loop_tiles(main_path, rng))
    tiles: List[Tile] = list(main_tiles)
    next_id = len(tiles)
    for sc in shortcuts:
        first = next_id
        last = first + len(sc.cells) - 1
        for offset, cell in enumerate(sc.cells):
            tile_id = first + offset
            successor = tile_id + 1 if tile_id < last else sc.exit_index
            tiles.append(Tile(tile_id, BONUS, cell.x, cell.y, (successor,)))
        next_id = last + 1
    return Board(board_id, tuple(tiles))


__all__ = ["KIND_WEIGHTS", "random_tile_kind", "payload_for", "enforce_board_invariants", "assemble_board"]
