import pytest


def test_bomber_map_default_players(client):
    resp = client.get("/api/bomber/map")
    assert resp.status_code == 200
    data = resp.get_json()
    assert data["width"] == 11 and data["height"] == 11
    assert len(data["spawns"]) == 2
    assert len(data["tiles"]) == 121


@pytest.mark.parametrize("raw,expected_spawns,size", [("4", 4, 13), ("abc", 2, 11), ("-3", 2, 11), ("0", 2, 11), ("20", 8, 17)])
def test_bomber_map_players_param(client, raw, expected_spawns, size):
    data = client.get(f"/api/bomber/map?players={raw}").get_json()
    assert len(data["spawns"]) == expected_spawns
    assert data["width"] == size
