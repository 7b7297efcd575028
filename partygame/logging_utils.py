"""Event logging for board generation, rooms and socket handlers.

Every record is one line on stdout (errors go to stderr) carrying ``level``,
``ts`` and ``logger`` followed by the caller's fields. Callers always pass an
``event`` field, so a server run can be filtered with e.g.
``grep event=board_fallback``. Events emitted across the package:

    board       board_attempt_failed (debug), board_fallback, board_generated
    board_api   board_served
    rooms       room_created, room_removed
    game        create_room, join_game, leave_game
    partygame   startup

Environment:
    PARTY_LOG_LEVEL   debug | info | warn | error (default info)
    PARTY_LOG_JSON    1 to emit one JSON object per line instead of key=value

Loggers are cached per name by ``get_logger``. In key=value mode spaces in
values become underscores and ``None`` fields are dropped.
"""

from __future__ import annotations

import json
import os
import sys
import time

LEVELS = {"debug": 10, "info": 20, "warn": 30, "error": 40}
CURRENT_LEVEL = LEVELS.get(os.getenv("PARTY_LOG_LEVEL", "info").lower(), 20)
JSON_MODE = os.getenv("PARTY_LOG_JSON", "0").lower() in ("1", "true", "yes", "on")


def _kv(key, value) -> str:
    if isinstance(value, (bool, int, float)):
        return f"{key}={value}"
    return f"{key}={str(value).replace(' ', '_')}"


def _format(level: str, **fields) -> str:
    fields = {k: v for k, v in fields.items() if v is not None}
    ts = int(time.time())
    if JSON_MODE:
        try:
            return json.dumps({**fields, "level": level, "ts": ts}, separators=(",", ":"), default=str)
        except (TypeError, ValueError):
            return json.dumps({"level": level, "ts": ts, "error": "json_encode_failed"})
    return " ".join([f"level={level}", f"ts={ts}"] + [_kv(k, v) for k, v in fields.items()])


class _Logger:
    def __init__(self, name: str):
        self.name = name

    def _log(self, lvl: str, **fields):
        if LEVELS[lvl] < CURRENT_LEVEL:
            return
        fields.setdefault("logger", self.name)
        stream = sys.stderr if lvl == "error" else sys.stdout
        print(_format(lvl, **fields), file=stream)

    def debug(self, **fields):
        self._log("debug", **fields)

    def info(self, **fields):
        self._log("info", **fields)

    def warn(self, **fields):
        self._log("warn", **fields)

    def error(self, **fields):
        self._log("error", **fields)


_LOGGER_CACHE: dict[str, _Logger] = {}


def get_logger(name: str = "partygame") -> _Logger:
    return _LOGGER_CACHE.setdefault(name, _Logger(name))


log = get_logger()
