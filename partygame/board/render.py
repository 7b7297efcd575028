"""Console rendering of boards (debug aid for the CLI and scripts)."""

from __future__ import annotations

from .tiles import BONUS, COINS, KEY_SHOP, MALUS, MINIGAME, START, TILE_KINDS, Board

SYMBOLS = {
    START: "S",
    COINS: "$",
    MINIGAME: "M",
    KEY_SHOP: "K",
    BONUS: "+",
    MALUS: "-",
}
EMPTY_SYMBOL = "·"

LEGEND = (
    ("S", "start"),
    ("$", "coins"),
    ("M", "minigame"),
    ("K", "key shop"),
    ("+", "bonus"),
    ("-", "malus"),
    (EMPTY_SYMBOL, "empty"),
)


def render_grid(board: Board) -> str:
    if not board.tiles:
        return ""
    min_x = min(t.x for t in board.tiles)
    max_x = max(t.x for t in board.tiles)
    min_y = min(t.y for t in board.tiles)
    max_y = max(t.y for t in board.tiles)
    rows = [[EMPTY_SYMBOL] * (max_x - min_x + 1) for _ in range(max_y - min_y + 1)]
    for t in board.tiles:
        rows[t.y - min_y][t.x - min_x] = SYMBOLS.get(t.kind, "?")
    return "\n".join(" ".join(r) for r in rows)


def render_board(board: Board, legend: bool = True) -> str:
    grid = render_grid(board)
    width = len(grid.split("\n", 1)[0]) if grid else 0
    rule = "=" * max(width + 2, 20)
    lines = [rule, f"Board: {board.id}", f"Tiles: {len(board.tiles)}", rule]
    if legend:
        lines.append("Legend: " + "  ".join(f"{sym}={label}" for sym, label in LEGEND))
        lines.append(rule)
    lines.append(grid)
    lines.append(rule)
    counts = board.kind_counts()
    lines.append("Stats: " + "  ".join(f"{k}={counts.get(k, 0)}" for k in TILE_KINDS))
    return "\n".join(lines)


__all__ = ["SYMBOLS", "render_grid", "render_board"]
