"""Socket.IO game room handlers.

Events:
    - create_room: Create (or reuse) a room and its board; payload { room, size? }
    - join_game: Join a game room; payload { room }
    - leave_game: Leave a game room; payload { room }

Emits:
    - board: { room, board } to the caller
    - status: Room status updates (join/leave)
    - error: { message, field, code } for invalid payloads
"""

import time

from flask import current_app, request
from flask_socketio import emit, join_room, leave_room

from partygame import socketio
from partygame.logging_utils import get_logger
from partygame.rooms import registry

from .validation import CREATE_ROOM, JOIN_GAME, LEAVE_GAME, error_payload, validate

_log = get_logger("game")

# Track active game rooms with simple membership sets for diagnostics
# Structure: { room_name: { 'members': set([sid,...]), 'created': timestamp } }
active_games = {}


def _emit_board(room_name, game_room):
    emit("board", {"room": room_name, "board": game_room.board.to_dict()})


def _drop_room(room):
    # last member gone: forget membership and the room's board
    active_games.pop(room, None)
    registry.remove(room)


@socketio.on("create_room")
def handle_create_room(data):
    ok, result = validate(data or {}, CREATE_ROOM)
    if not ok:
        emit("error", error_payload("create_room", result))
        return
    room = result["room"]
    size = result.get("size") or current_app.config.get("BOARD_DEFAULT_SIZE")
    game_room = registry.get_or_create(room, size)
    _emit_board(room, game_room)
    _log.info(event="create_room", room=room, board=game_room.board.id, sid=request.sid)


@socketio.on("join_game")
def handle_join_game(data):
    ok, result = validate(data or {}, JOIN_GAME)
    if not ok:
        emit("error", error_payload("join_game", result))
        return
    room = result["room"]
    join_room(room)
    info = active_games.setdefault(room, {"members": set(), "created": time.time()})
    info["members"].add(request.sid)
    emit("status", {"msg": "A player has joined the game.", "room": room, "members": len(info["members"])}, room=room)
    game_room = registry.get(room)
    if game_room is not None:
        _emit_board(room, game_room)
    _log.info(event="join_game", room=room, members=len(info["members"]), has_board=game_room is not None)


@socketio.on("leave_game")
def handle_leave_game(data):
    ok, result = validate(data or {}, LEAVE_GAME)
    if not ok:
        emit("error", error_payload("leave_game", result))
        return
    room = result["room"]
    leave_room(room)
    info = active_games.get(room)
    remaining = 0
    if info:
        info["members"].discard(request.sid)
        remaining = len(info["members"])
    if not remaining:
        _drop_room(room)
    emit("status", {"msg": "A player has left the game.", "room": room, "members": remaining}, room=room)
    _log.info(event="leave_game", room=room, remaining=remaining)


@socketio.on("disconnect")
def handle_disconnect(*args):
    sid = request.sid
    for room in list(active_games):
        members = active_games[room]["members"]
        members.discard(sid)
        if not members:
            _drop_room(room)
