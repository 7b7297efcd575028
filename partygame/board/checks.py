"""Structural analysis of finished boards.

Used by the test-suite and ``scripts/diagnose_boards.py``. Every key of the
returned dict holds a list of human-readable issues; an empty list means the
invariant holds.
"""

from __future__ import annotations

from typing import Dict, List, Optional

from .shortcuts import circular_path_distance
from .tiles import KEY_SHOP, START, Board, payload_matches


def main_loop_length(board: Board) -> int:
    """Length of the cycle reached from tile 0 by following first successors."""
    if not board.tiles:
        return 0
    seen = set()
    current = 0
    while current not in seen:
        seen.add(current)
        nxt = board.tiles[current].next_ids
        if not nxt or not 0 <= nxt[0] < len(board.tiles):
            return 0
        current = nxt[0]
    return len(seen) if current == 0 else 0


def analyze(board: Board, main_path_length: Optional[int] = None) -> Dict[str, List[str]]:
    tiles = board.tiles
    n_total = len(tiles)
    n_main = main_path_length if main_path_length is not None else main_loop_length(board)
    res: Dict[str, List[str]] = {
        "id_gaps": [],
        "start_issues": [],
        "missing_key_shop": [],
        "duplicate_coords": [],
        "broken_links": [],
        "loop_issues": [],
        "payload_issues": [],
        "spacing_violations": [],
    }
    for i, t in enumerate(tiles):
        if t.id != i:
            res["id_gaps"].append(f"tile at index {i} has id {t.id}")
        if not payload_matches(t.kind, t.payload):
            res["payload_issues"].append(f"tile {t.id} kind {t.kind} payload {t.payload!r}")
        for nid in t.next_ids:
            if not 0 <= nid < n_total:
                res["broken_links"].append(f"tile {t.id} -> {nid}")
    starts = [t.id for t in tiles if t.kind == START]
    if starts != [0]:
        res["start_issues"].append(f"start tiles {starts}")
    if not any(t.kind == KEY_SHOP for t in tiles):
        res["missing_key_shop"].append("no key_shop tile")
    seen = {}
    for t in tiles:
        key = (t.x, t.y)
        if key in seen:
            res["duplicate_coords"].append(f"tiles {seen[key]} and {t.id} share {key}")
        else:
            seen[key] = t.id
    if n_main < 4:
        res["loop_issues"].append(f"main loop length {n_main}")
        return res
    for i in range(n_main):
        t = tiles[i]
        if t.next_ids[:1] != ((i + 1) % n_main,):
            res["loop_issues"].append(f"tile {i} does not lead to {(i + 1) % n_main}")
    a, b = tiles[0], tiles[n_main - 1]
    if abs(a.x - b.x) + abs(a.y - b.y) != 1:
        res["loop_issues"].append("loop ends are not grid-adjacent")
    for i in range(n_main):
        for j in range(i + 3, n_main):
            if circular_path_distance(i, j, n_main) < 3:
                continue
            ti, tj = tiles[i], tiles[j]
            if max(abs(ti.x - tj.x), abs(ti.y - tj.y)) < 2:
                res["spacing_violations"].append(f"tiles {i} and {j} touch")
    return res


def is_clean(report: Dict[str, List[str]]) -> bool:
    return all(not v for v in report.values())


__all__ = ["analyze", "is_clean", "main_loop_length"]
