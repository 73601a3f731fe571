# tests/test_app.py
import itertools
from types import SimpleNamespace

import pytest

import engine.notifier as notifier_module

from main import app

SMALL = {"rows": 5, "cols": 7, "startRow": 2, "startCol": 0, "finishRow": 2, "finishCol": 6}


@pytest.fixture
def client():
    app.config["TESTING"] = True
    with app.test_client() as client:
        yield client


def test_list_algorithms(client):
    res = client.get("/api/algorithms")
    assert res.status_code == 200
    data = res.get_json()
    assert [a["key"] for a in data["algorithms"]] == [
        "dijkstra", "astar", "bfs", "dfs", "bellman_ford", "bidirectional",
    ]
    assert "kruskal" in [m["key"] for m in data["mazes"]]


def test_run_on_open_board(client):
    res = client.post("/api/run", json={"config": SMALL, "algorithm": "bfs"})
    assert res.status_code == 200
    data = res.get_json()
    assert data["found"] is True
    assert data["stats"]["path_length"] == 6
    assert data["path"][0] == [2, 0]
    assert data["path"][-1] == [2, 6]
    assert data["grid"]["walls"] == []


def test_run_with_walls(client):
    walls = [[r, 3] for r in range(5)]
    res = client.post("/api/run", json={"config": SMALL, "walls": walls, "algorithm": "astar"})
    data = res.get_json()
    assert res.status_code == 200
    assert data["found"] is False
    assert data["path"] == []


def test_run_defaults_to_standard_board(client):
    res = client.post("/api/run", json={"algorithm": "dijkstra"})
    data = res.get_json()
    assert data["stats"]["path_length"] == 20
    assert data["stats"]["manhattan_distance"] == 20


def test_maze_endpoint(client):
    res = client.post("/api/maze", json={"config": SMALL, "maze": "kruskal", "seed": 3})
    assert res.status_code == 200
    data = res.get_json()
    assert data["config"]["rows"] == 5
    assert data["walls"]

    again = client.post("/api/maze", json={"config": SMALL, "maze": "kruskal", "seed": 3}).get_json()
    assert again["walls"] == data["walls"]


def test_compare_endpoint(client):
    res = client.post("/api/compare", json={
        "config": SMALL, "maze": "prims", "seed": 5, "left": "bfs", "right": "dfs",
    })
    assert res.status_code == 200
    data = res.get_json()
    assert data["left"]["found"] and data["right"]["found"]
    left_len = data["left"]["stats"]["path_length"]
    right_len = data["right"]["stats"]["path_length"]
    assert left_len <= right_len
    if left_len < right_len:
        assert data["winner"] == "left"


@pytest.mark.parametrize("url, body", [
    ("/api/run", {"algorithm": "teleport"}),
    ("/api/run", {}),
    ("/api/run", {"algorithm": "bfs", "config": {"rows": 3}}),
    ("/api/run", {"algorithm": "bfs", "config": dict(SMALL, finishRow=2, finishCol=0)}),
    ("/api/run", {"algorithm": "bfs", "walls": [[99, 99]]}),
    ("/api/run", {"algorithm": "bfs", "walls": [5]}),
    ("/api/run", {"algorithm": "bfs", "walls": [["a", 1]]}),
    ("/api/run", {"algorithm": "bfs", "walls": [[1.5, 2]]}),
    ("/api/run", {"algorithm": "bfs", "walls": [None]}),
    ("/api/run", {"algorithm": "bfs", "timeout": -1}),
    ("/api/maze", {"maze": "labyrinth"}),
    ("/api/maze", {}),
    ("/api/compare", {"left": "bfs"}),
])
def test_bad_requests(client, url, body):
    res = client.post(url, json=body)
    assert res.status_code == 400
    assert "error" in res.get_json()


def test_non_object_body(client):
    res = client.post("/api/run", json=[1, 2, 3])
    assert res.status_code == 400


def test_run_timeout_returns_408(client, monkeypatch):
    # every clock read advances one second, so the token expires at the first step
    ticks = itertools.count()
    monkeypatch.setattr(notifier_module, "time", SimpleNamespace(monotonic=lambda: float(next(ticks))))

    res = client.post("/api/run", json={"algorithm": "bfs", "timeout": 0.5})

    assert res.status_code == 408
    data = res.get_json()
    assert data["reason"] == "timeout"
    assert "error" in data
