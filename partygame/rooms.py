"""In-process game room registry.

A board is generated once, when its room is first created, and every later
lookup for that room returns the same Board value.
"""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass, field
from typing import Dict, Optional

from partygame.board import Board, generate_board, resolve_size
from partygame.logging_utils import get_logger

_log = get_logger("rooms")


@dataclass
class GameRoom:
    name: str
    board: Board
    size: str
    created: float = field(default_factory=time.time)


class RoomRegistry:
    def __init__(self):
        self._rooms: Dict[str, GameRoom] = {}
        self._lock = threading.Lock()

    def get(self, name: str) -> Optional[GameRoom]:
        with self._lock:
            return self._rooms.get(name)

    def get_or_create(self, name: str, size: str | None = None, seed=None) -> GameRoom:
        """Return the room, generating its board on first use only.

        Generation runs outside the lock so other rooms are never blocked. Two
        racing creators of one room may both generate; the first stored room
        wins and both callers get it.
        """
        with self._lock:
            room = self._rooms.get(name)
            if room is not None:
                return room
        size = resolve_size(size)
        board = generate_board(f"{name}-board", size, seed=seed)
        with self._lock:
            room = self._rooms.setdefault(name, GameRoom(name=name, board=board, size=size))
        if room.board is board:
            _log.info(event="room_created", room=name, board=board.id, size=size, tiles=len(board.tiles))
        return room

    def remove(self, name: str) -> bool:
        with self._lock:
            removed = self._rooms.pop(name, None) is not None
        if removed:
            _log.info(event="room_removed", room=name)
        return removed

    def clear(self) -> None:
        with self._lock:
            self._rooms.clear()


registry = RoomRegistry()

__all__ = ["GameRoom", "RoomRegistry", "registry"]
