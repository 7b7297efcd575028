#!/usr/bin/env python3
"""Board structural diagnostics for specific seeds.

Usage:
  python scripts/diagnose_boards.py 292372 730727
  python scripts/diagnose_boards.py --size large 17

If no seeds are provided as CLI args, a default list is used.
Exits with non-zero status if structural issues are detected.
"""

from __future__ import annotations

import argparse
import json
import os
import sys
from typing import List

# Ensure project root on path if executed directly
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from partygame.board import BoardGenerator, get_preset  # noqa: E402 import after path fix
from partygame.board.checks import analyze  # noqa: E402 import after path fix

DEFAULT_SEEDS = [292372, 730727, 1, 42]


def run_for_seed(seed: int, size: str | None = None) -> dict:
    gen = BoardGenerator(get_preset(size), seed=seed)
    board = gen.generate(f"diag-{seed}")
    res = analyze(board, main_path_length=gen.metrics.get("main_path_length"))
    issues = {k: len(v) for k, v in res.items()}
    return {
        "seed": seed,
        "tiles": len(board.tiles),
        "attempts": gen.metrics.get("attempts"),
        "fallback": gen.metrics.get("fallback_used"),
        "issues": issues,
        "ok": all(v == 0 for v in issues.values()),
    }


def main(argv: List[str]) -> int:
    parser = argparse.ArgumentParser(description="Check generated boards for structural issues")
    parser.add_argument("seeds", nargs="*", type=int)
    parser.add_argument("--size", default=None)
    args = parser.parse_args(argv)
    seeds = args.seeds or DEFAULT_SEEDS
    results = [run_for_seed(s, args.size) for s in seeds]
    print(json.dumps({"results": results}, indent=2))
    # Non-zero exit if any failure
    if not all(r["ok"] for r in results):
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
