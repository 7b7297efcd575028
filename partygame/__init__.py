"""
project: Party Board
module: __init__.py
License: MIT

Flask application factory and core extensions setup.

This module wires together the Flask app and Flask-SocketIO. Configuration is
sourced from environment variables (optionally via a local .env) with
reasonable defaults for development. A local `instance/` directory holds the
rotating log file.
"""

import logging
import os
import uuid

from dotenv import load_dotenv
from flask import Flask, jsonify
from flask_socketio import SocketIO

__version__ = "0.1.0"

# Load .env if present so `SECRET_KEY`, `BOARD_DEFAULT_SIZE`, etc. can be
# supplied without exporting shell variables during development.
load_dotenv()

app = Flask(__name__, instance_relative_config=True)

try:
    os.makedirs(app.instance_path, exist_ok=True)
except OSError:
    # Read-only deployments log to the console only
    pass


def _env_flag(name: str, default: str = "0") -> bool:
    return os.getenv(name, default).lower() in ("1", "true", "yes", "on")


app.config.update(
    SECRET_KEY=os.getenv("SECRET_KEY", "dev-secret-change-me"),
    # Board generation defaults / metrics
    BOARD_DEFAULT_SIZE=os.getenv("BOARD_DEFAULT_SIZE", "default"),
    BOARD_ENABLE_GENERATION_METRICS=_env_flag("BOARD_ENABLE_GENERATION_METRICS", "1"),
)

# Let Flask-SocketIO select best async_mode based on installed deps (eventlet/gevent/threading)
socketio = SocketIO(
    app,
    async_mode=os.getenv("SOCKETIO_ASYNC_MODE") or None,
    cors_allowed_origins=os.getenv("CORS_ALLOWED_ORIGINS", "*"),
    engineio_logger=_env_flag("ENGINEIO_LOGGER", "0"),
    ping_interval=20,
    ping_timeout=10,
)

# Register HTTP blueprints (import after app/socketio exist)
from partygame.routes.board_api import bp_board  # noqa: E402
from partygame.routes.bomber_api import bp_bomber  # noqa: E402

app.register_blueprint(bp_board)
app.register_blueprint(bp_bomber)

# Import websocket handlers so their event decorators register with Socket.IO (side-effect)
from partygame.websockets import game as _ws_game  # noqa: F401,E402


def create_app():
    """Return the configured Flask app instance."""
    return app


@app.errorhandler(500)
def internal_error(e):
    error_id = uuid.uuid4().hex[:8]
    logging.exception("Unhandled exception (id=%s)", error_id)
    return jsonify({"error": "internal server error", "error_id": error_id}), 500
