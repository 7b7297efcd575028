import pytest

from partygame.board.checks import analyze, is_clean
from partygame.board.tiles import Board, Tile
from partygame.routes import board_api


@pytest.fixture(autouse=True)
def _reset_metrics():
    board_api.reset_board_metrics()
    yield
    board_api.reset_board_metrics()


def _as_board(data) -> Board:
    tiles = tuple(Tile(t["id"], t["kind"], t["x"], t["y"], tuple(t["next"])) for t in data["tiles"])
    return Board(data["id"], tiles)


def test_board_endpoint_shape(client):
    resp = client.get("/api/board?id=party-1&seed=7")
    assert resp.status_code == 200
    data = resp.get_json()
    assert data["id"] == "party-1"
    assert data["tiles"][0]["kind"] == "start"
    for t in data["tiles"]:
        assert set(t) >= {"id", "kind", "x", "y", "next"}
        assert t["next"], "every tile has a successor"
    report = analyze(_as_board(data))
    assert not report["id_gaps"] and not report["broken_links"] and not report["duplicate_coords"]


def test_board_endpoint_seed_reproducible(client):
    a = client.get("/api/board?id=x&seed=abc&size=small").get_json()
    b = client.get("/api/board?id=x&seed=abc&size=small").get_json()
    assert a == b


def test_unknown_size_is_not_an_error(client):
    resp = client.get("/api/board?size=huge&seed=3")
    assert resp.status_code == 200
    assert resp.get_json()["id"].startswith("board-")


def test_overlong_id_rejected(client):
    resp = client.get("/api/board?id=" + "x" * 65)
    assert resp.status_code == 400
    assert "error" in resp.get_json()


def test_metrics_endpoint_reports_last_generation(client):
    empty = client.get("/api/board/metrics").get_json()
    assert empty == {"metrics": {}, "runtime": {"samples": 0, "avg_ms": None}}
    client.get("/api/board?id=m1&seed=1")
    client.get("/api/board?id=m2&seed=2")
    data = client.get("/api/board/metrics").get_json()
    assert data["runtime"]["samples"] == 2
    assert data["runtime"]["avg_ms"] is not None
    assert data["metrics"]["tiles"] >= 4
    assert "fallback_used" in data["metrics"]


def test_metrics_disabled_by_config(client, test_app, monkeypatch):
    monkeypatch.setitem(test_app.config, "BOARD_ENABLE_GENERATION_METRICS", False)
    client.get("/api/board?seed=4")
    assert client.get("/api/board/metrics").get_json()["runtime"]["samples"] == 0


def test_runtime_samples_are_capped():
    for i in range(250):
        board_api.record_board_runtime(i)
    assert len(board_api._runtime_samples) <= 200


def test_unhandled_error_returns_json_500(client, test_app, monkeypatch):
    def boom(*a, **k):
        raise RuntimeError("kaboom")

    monkeypatch.setattr(board_api.BoardGenerator, "generate", boom)
    monkeypatch.setitem(test_app.config, "PROPAGATE_EXCEPTIONS", False)
    resp = client.get("/api/board")
    assert resp.status_code == 500
    data = resp.get_json()
    assert data["error"] == "internal server error"
    assert len(data["error_id"]) == 8


def test_generated_board_is_clean_end_to_end(client):
    data = client.get("/api/board?size=small&seed=11").get_json()
    board = _as_board(data)
    # payloads are not rebuilt here, so only the geometric checks apply
    report = analyze(board)
    assert not report["loop_issues"]
    assert not report["spacing_violations"]
    assert is_clean({k: v for k, v in report.items() if k != "payload_issues"})
