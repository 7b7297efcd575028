"""Bomber minigame map endpoint."""

from flask import Blueprint, jsonify, request

from partygame.bomber import generate_bomber_map

bp_bomber = Blueprint("bomber", __name__)


def _parse_players(raw) -> int:
    try:
        players = int(raw)
    except (TypeError, ValueError):
        return 2
    return players if players > 0 else 2


@bp_bomber.route("/api/bomber/map")
def bomber_map():
    """Return a bomber arena for ?players=N (clamped to 2..8)."""
    arena = generate_bomber_map(_parse_players(request.args.get("players")))
    return jsonify(arena.to_dict())
