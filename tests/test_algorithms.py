# tests/test_algorithms.py
import asyncio
import logging

import pytest

import importlib

bellman_ford_module = importlib.import_module("algorithms.bellman_ford")
from algorithms import REGISTRY, algorithms_by_tag, get_algorithm, manhattan, run
from engine import CancelToken, RunCancelled
from grid import INF, ValidationError, create_grid

from conftest import Recorder, assert_valid_path, make_grid, reference_distance, run_sync, scatter_walls

ALL_KEYS = list(REGISTRY)
SHORTEST_KEYS = [k for k, info in REGISTRY.items() if info.guarantees_shortest]


def coords(nodes):
    return [n.coord for n in nodes]


# ---- registry ----
def test_registry_contents():
    assert set(REGISTRY) == {"dijkstra", "astar", "bfs", "dfs", "bellman_ford", "bidirectional"}
    assert not get_algorithm("dfs").guarantees_shortest
    assert get_algorithm("astar").has_heuristic
    assert get_algorithm("missing") is None
    assert [a.key for a in algorithms_by_tag("heuristic")] == ["astar"]


def test_unknown_algorithm_key():
    with pytest.raises(ValidationError):
        run_sync(run("greedy", make_grid(3, 3)))


def test_run_rejects_non_grid():
    with pytest.raises(ValidationError):
        run_sync(run("bfs", [[0, 0]]))


# ---- small, hand-checked cases ----
@pytest.mark.parametrize("key", ["bfs", "dijkstra", "astar"])
def test_open_three_by_three(key):
    grid = make_grid(3, 3)
    result = run_sync(run(key, grid))

    assert len(result.path) == 5
    assert result.stats.path_length == 4
    assert result.stats.manhattan_distance == 4
    assert_valid_path(grid, result.path)


def test_bfs_visit_order_and_path():
    grid = make_grid(3, 3)
    result = run_sync(run("bfs", grid))

    assert coords(result.visited_nodes_in_order) == [
        [0, 0], [1, 0], [0, 1], [2, 0], [1, 1], [0, 2], [2, 1], [1, 2], [2, 2],
    ]
    assert coords(result.path) == [[0, 0], [1, 0], [2, 0], [2, 1], [2, 2]]


def test_dfs_follows_neighbor_priority():
    grid = make_grid(3, 3)
    result = run_sync(run("dfs", grid))

    assert coords(result.path) == [
        [0, 0], [1, 0], [2, 0], [2, 1], [1, 1], [0, 1], [0, 2], [1, 2], [2, 2],
    ]
    assert result.stats.path_length == 8
    assert_valid_path(grid, result.path)


def test_astar_manhattan_heuristic():
    grid = create_grid()
    assert manhattan(grid.node(3, 7), grid.finish) == 25


@pytest.mark.parametrize("key", ALL_KEYS)
def test_adjacent_start_and_finish(key):
    grid = make_grid(1, 2)
    result = run_sync(run(key, grid))
    assert coords(result.path) == [[0, 0], [0, 1]]
    assert result.stats.path_length == 1


@pytest.mark.parametrize("key", ALL_KEYS)
def test_enclosed_finish_has_no_path(key):
    grid = make_grid(4, 4, walls=[(2, 3), (3, 2)])
    result = run_sync(run(key, grid))

    assert result.visited_nodes_in_order
    assert result.path == []
    assert not result.found
    assert result.stats.path_length == 0
    assert not any(n.is_path for n in grid.nodes)


@pytest.mark.parametrize("key", ALL_KEYS)
def test_walled_in_start_visits_only_start(key):
    grid = make_grid(4, 4, walls=[(0, 1), (1, 0)])
    result = run_sync(run(key, grid))
    assert result.path == []
    assert grid.start in result.visited_nodes_in_order


# ---- properties on random boards ----
@pytest.mark.parametrize("seed", range(12))
def test_shortest_strategies_match_reference(seed):
    for key in SHORTEST_KEYS:
        grid = scatter_walls(make_grid(8, 10), seed)
        expected = reference_distance(grid)
        result = run_sync(run(key, grid))

        if expected is None:
            assert result.path == [], key
        else:
            assert_valid_path(grid, result.path)
            assert result.stats.path_length == expected, key


@pytest.mark.parametrize("seed", range(12))
def test_dfs_path_is_valid_but_not_shorter(seed):
    grid = scatter_walls(make_grid(8, 10), seed)
    expected = reference_distance(grid)
    result = run_sync(run("dfs", grid))

    if expected is None:
        assert result.path == []
    else:
        assert_valid_path(grid, result.path)
        assert result.stats.path_length >= expected


@pytest.mark.parametrize("seed", range(6))
def test_visit_order_has_no_walls_or_repeats(seed):
    for key in ALL_KEYS:
        grid = scatter_walls(make_grid(9, 9, start=(4, 0), finish=(4, 8)), seed, density=0.25)
        result = run_sync(run(key, grid))
        order = result.visited_nodes_in_order

        assert len({n.index for n in order}) == len(order), key
        assert not any(n.is_wall for n in order), key
        assert all(n.is_visited for n in order), key
        assert all(n.is_path for n in result.path), key
        assert result.stats.nodes_visited == len(order), key


def test_rerun_on_same_grid_starts_clean():
    grid = scatter_walls(make_grid(6, 6), 3, density=0.2)
    first = run_sync(run("dfs", grid))
    second = run_sync(run("bfs", grid))

    assert sum(n.is_path for n in grid.nodes) == len(second.path)
    assert sum(n.is_visited for n in grid.nodes) == len(second.visited_nodes_in_order)
    assert first.state is not second.state


def test_result_to_dict_uses_coordinates():
    result = run_sync(run("bfs", make_grid(1, 3)))
    data = result.to_dict()
    assert data["algorithm"] == "bfs"
    assert data["path"] == [[0, 0], [0, 1], [0, 2]]
    assert data["found"] is True
    assert data["stats"]["path_length"] == 2


# ---- notifier contract ----
@pytest.mark.parametrize("key", ALL_KEYS)
def test_notifier_sees_every_visit_in_order(key):
    grid = make_grid(5, 5)
    rec = Recorder()
    result = run_sync(run(key, grid, rec))
    assert rec.seen == result.visited_nodes_in_order


def test_async_notifier_is_awaited():
    grid = make_grid(4, 4)
    seen = []

    async def on_visit(node):
        await asyncio.sleep(0)
        seen.append(node.coord)

    result = run_sync(run("astar", grid, on_visit))
    assert seen == coords(result.visited_nodes_in_order)


@pytest.mark.parametrize("key", ALL_KEYS)
def test_notifier_exception_propagates(key):
    def on_visit(node):
        raise RuntimeError("renderer failed")

    with pytest.raises(RuntimeError, match="renderer failed"):
        run_sync(run(key, make_grid(3, 3), on_visit))


@pytest.mark.parametrize("key", ALL_KEYS)
def test_cancel_mid_run(key):
    token = CancelToken()
    seen = []

    def on_visit(node):
        seen.append(node)
        if len(seen) == 3:
            token.cancel()

    with pytest.raises(RunCancelled) as info:
        run_sync(run(key, make_grid(5, 5), on_visit, token=token))
    assert info.value.reason == "cancelled"
    assert len(seen) == 3


def test_expired_token_stops_before_first_visit():
    seen = []
    with pytest.raises(RunCancelled, match="timeout"):
        run_sync(run("dijkstra", make_grid(5, 5), seen.append, token=CancelToken(timeout=0)))
    assert seen == []


# ---- Bellman-Ford specifics ----
def test_bellman_ford_visits_start_first():
    grid = make_grid(3, 3)
    result = run_sync(run("bellman_ford", grid))
    assert result.visited_nodes_in_order[0] is grid.start
    assert len(result.visited_nodes_in_order) == 9
    assert not result.negative_cycle


def test_bellman_ford_negative_cycle(monkeypatch, caplog):
    monkeypatch.setattr(bellman_ford_module, "EDGE_WEIGHT", -1)
    grid = make_grid(1, 2)

    with caplog.at_level(logging.WARNING, logger="algorithms.bellman_ford"):
        result = run_sync(run("bellman_ford", grid))

    assert result.negative_cycle
    assert result.path == []
    assert result.visited_nodes_in_order
    assert "Negative weight cycle" in caplog.text


# ---- Bidirectional specifics ----
def test_bidirectional_meets_in_corridor():
    grid = make_grid(1, 7)
    result = run_sync(run("bidirectional", grid))
    assert coords(result.path) == [[0, c] for c in range(7)]
    # both ends get explored
    assert grid.finish in result.visited_nodes_in_order


def test_bidirectional_distances_are_forward_depths():
    grid = make_grid(1, 7)
    result = run_sync(run("bidirectional", grid))
    distance = result.state.distance

    assert distance[:4] == [0, 1, 2, 3]
    assert all(d == INF for d in distance[4:])


def test_bidirectional_on_open_grid_is_optimal():
    for rows, cols in [(2, 3), (3, 4), (5, 5), (4, 9)]:
        grid = make_grid(rows, cols)
        result = run_sync(run("bidirectional", grid))
        assert result.stats.path_length == rows + cols - 2
        assert_valid_path(grid, result.path)
