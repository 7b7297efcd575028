"""
project: Party Board
module: board_api.py
License: MIT

Board generation HTTP endpoints.

GET /api/board            generate a fresh board (size, id, seed query args)
GET /api/board/metrics    metrics of the last board served plus runtime samples
"""

import threading

from flask import Blueprint, current_app, jsonify, request

from partygame.board import BoardGenerator, get_preset
from partygame.logging_utils import get_logger

bp_board = Blueprint("board", __name__)

_log = get_logger("board_api")

MAX_BOARD_ID_LEN = 64

_last_metrics = {}
_metrics_lock = threading.Lock()
# Rolling generation runtime (ms)
_runtime_samples = []  # list of ints (ms)


def record_board_runtime(ms):
    with _metrics_lock:
        _runtime_samples.append(int(ms))
        # cap samples to prevent unbounded growth
        if len(_runtime_samples) > 200:
            del _runtime_samples[:100]


def reset_board_metrics():
    with _metrics_lock:
        _last_metrics.clear()
        _runtime_samples.clear()


@bp_board.route("/api/board")
def board():
    """Return a freshly generated board as JSON.

    Query: size=small|default|large (unknown sizes use default), id=<str>, seed=<int|str>
    """
    size = request.args.get("size") or current_app.config.get("BOARD_DEFAULT_SIZE")
    board_id = (request.args.get("id") or "").strip() or None
    if board_id and len(board_id) > MAX_BOARD_ID_LEN:
        return jsonify({"error": f"id longer than {MAX_BOARD_ID_LEN} characters"}), 400
    seed = request.args.get("seed") or None
    gen = BoardGenerator(
        get_preset(size),
        seed=seed,
        enable_metrics=current_app.config.get("BOARD_ENABLE_GENERATION_METRICS", True),
    )
    result = gen.generate(board_id)
    if gen.metrics:
        with _metrics_lock:
            _last_metrics.clear()
            _last_metrics.update(gen.metrics)
        record_board_runtime(gen.metrics.get("runtime_ms", 0))
    _log.info(event="board_served", board=result.id, size=size, tiles=len(result.tiles))
    return jsonify(result.to_dict())


@bp_board.route("/api/board/metrics")
def board_metrics():
    with _metrics_lock:
        samples = list(_runtime_samples)
        metrics = dict(_last_metrics)
    avg_ms = round(sum(samples) / len(samples), 2) if samples else None
    return jsonify({"metrics": metrics, "runtime": {"samples": len(samples), "avg_ms": avg_ms}})
