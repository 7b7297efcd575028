def _extract(event_name, received):
    return [p["args"][0] for p in received if p["name"] == event_name]


def test_create_room_emits_board(socket_client):
    socket_client.emit("create_room", {"room": "party", "size": "small"})
    boards = _extract("board", socket_client.get_received())
    assert len(boards) == 1
    assert boards[0]["room"] == "party"
    board = boards[0]["board"]
    assert board["id"] == "party-board"
    assert board["tiles"][0]["kind"] == "start"


def test_create_room_twice_returns_same_board(socket_client):
    socket_client.emit("create_room", {"room": "again"})
    first = _extract("board", socket_client.get_received())[0]["board"]
    socket_client.emit("create_room", {"room": "again", "size": "large"})
    second = _extract("board", socket_client.get_received())[0]["board"]
    assert first == second


def test_join_game_sends_status_and_existing_board(socket_client):
    socket_client.emit("create_room", {"room": "r1"})
    created = _extract("board", socket_client.get_received())[0]["board"]
    socket_client.emit("join_game", {"room": "r1"})
    rec = socket_client.get_received()
    assert any("joined the game" in s["msg"] for s in _extract("status", rec))
    assert _extract("board", rec)[0]["board"] == created


def test_join_game_without_board_only_sends_status(socket_client):
    socket_client.emit("join_game", {"room": "empty-room"})
    rec = socket_client.get_received()
    assert _extract("status", rec)
    assert not _extract("board", rec)


def test_join_and_leave_game_tracks_members(socket_client):
    from partygame.websockets import game as game_ws

    socket_client.emit("join_game", {"room": "room1"})
    socket_client.get_received()
    assert len(game_ws.active_games["room1"]["members"]) == 1
    socket_client.emit("leave_game", {"room": "room1"})
    socket_client.get_received()
    assert "room1" not in game_ws.active_games


def test_second_client_sees_join_status(test_app, socket_client):
    from partygame import socketio

    other = socketio.test_client(test_app, flask_test_client=test_app.test_client())
    try:
        socket_client.emit("join_game", {"room": "shared"})
        socket_client.get_received()
        other.emit("join_game", {"room": "shared"})
        other.get_received()
        statuses = _extract("status", socket_client.get_received())
        assert statuses and statuses[-1]["members"] == 2
    finally:
        other.disconnect()


def test_invalid_payloads_emit_error(socket_client):
    socket_client.emit("create_room", {})
    err = _extract("error", socket_client.get_received())[0]
    assert err["field"] == "room" and err["code"] == "required"
    assert err["message"].startswith("Invalid create_room")

    socket_client.emit("join_game", {"room": "x" * 65})
    err = _extract("error", socket_client.get_received())[0]
    assert err["code"] == "max_len"

    socket_client.emit("leave_game", {"room": 5})
    err = _extract("error", socket_client.get_received())[0]
    assert err["code"] == "type"

    socket_client.emit("create_room", {"room": "ok", "size": "   "})
    err = _extract("error", socket_client.get_received())[0]
    assert err["field"] == "size" and err["code"] == "empty"


def test_unknown_size_uses_default_board(socket_client):
    socket_client.emit("create_room", {"room": "odd", "size": "medium"})
    board = _extract("board", socket_client.get_received())[0]["board"]
    assert len(board["tiles"]) >= 4


def test_last_member_leaving_drops_room(socket_client):
    from partygame.rooms import registry

    socket_client.emit("create_room", {"room": "gone"})
    socket_client.emit("join_game", {"room": "gone"})
    socket_client.get_received()
    assert registry.get("gone") is not None
    socket_client.emit("leave_game", {"room": "gone"})
    socket_client.get_received()
    assert registry.get("gone") is None


def test_disconnect_of_last_member_drops_room(test_app):
    from partygame import socketio
    from partygame.rooms import registry
    from partygame.websockets import game as game_ws

    sc = socketio.test_client(test_app, flask_test_client=test_app.test_client())
    sc.emit("create_room", {"room": "bye"})
    sc.emit("join_game", {"room": "bye"})
    sc.get_received()
    assert registry.get("bye") is not None
    sc.disconnect()
    assert registry.get("bye") is None
    assert "bye" not in game_ws.active_games


def test_room_survives_while_members_remain(test_app, socket_client):
    from partygame import socketio
    from partygame.rooms import registry

    other = socketio.test_client(test_app, flask_test_client=test_app.test_client())
    try:
        socket_client.emit("create_room", {"room": "kept"})
        socket_client.emit("join_game", {"room": "kept"})
        other.emit("join_game", {"room": "kept"})
        other.emit("leave_game", {"room": "kept"})
        assert registry.get("kept") is not None
    finally:
        other.disconnect()


def test_create_room_without_size_uses_configured_default(test_app, socket_client, monkeypatch):
    from partygame.rooms import registry

    monkeypatch.setitem(test_app.config, "BOARD_DEFAULT_SIZE", "small")
    socket_client.emit("create_room", {"room": "cfg"})
    socket_client.get_received()
    assert registry.get("cfg").size == "small"

    socket_client.emit("create_room", {"room": "explicit", "size": "large"})
    socket_client.get_received()
    assert registry.get("explicit").size == "large"
