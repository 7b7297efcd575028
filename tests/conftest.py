import os
import random
import sys

import pytest

# Ensure repository root importable early
ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

from partygame import create_app, socketio  # noqa: E402
from partygame.rooms import registry  # noqa: E402


@pytest.fixture(scope="session")
def test_app():
    app = create_app()
    app.config.update({"TESTING": True})
    return app


@pytest.fixture()
def client(test_app):
    return test_app.test_client()


@pytest.fixture()
def socket_client(test_app):
    # Flask-SocketIO provides a test client we can use against the global socketio instance
    test_client = socketio.test_client(test_app, flask_test_client=test_app.test_client())
    yield test_client
    if test_client.is_connected():
        test_client.disconnect()


@pytest.fixture()
def rng():
    return random.Random(20240601)


# ---------------- Additional autouse cleanup ----------------
@pytest.fixture(autouse=True)
def _clear_room_state():
    """Rooms created by one test must not leak into the next."""
    from partygame.websockets import game as game_ws

    registry.clear()
    game_ws.active_games.clear()
    yield
    registry.clear()
    game_ws.active_games.clear()
