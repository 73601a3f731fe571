# tests/test_stats.py
from engine import RunStats, StatsTracker, manhattan_distance

from conftest import make_grid


def test_tracker_counts_unique_nodes_and_peak_frontier():
    grid = make_grid(3, 3)
    tracker = StatsTracker()
    tracker.track_visit(grid.node(0, 0), 2)
    tracker.track_visit(grid.node(0, 1), 5)
    tracker.track_visit(grid.node(0, 0), 1)      # duplicate

    stats = tracker.get_final_stats([grid.node(0, 0), grid.node(0, 1)], grid.start, grid.finish)

    assert stats.nodes_visited == 2
    assert stats.memory_used == 5
    assert stats.path_length == 1
    assert stats.manhattan_distance == 4
    assert isinstance(stats.execution_time, int)
    assert stats.execution_time >= 0


def test_empty_path_has_zero_length():
    grid = make_grid(2, 2)
    stats = StatsTracker().get_final_stats([], grid.start, grid.finish)
    assert stats.path_length == 0
    assert stats.nodes_visited == 0


def test_manhattan_distance_missing_node():
    grid = make_grid(2, 2)
    assert manhattan_distance(None, grid.finish) == 0
    assert manhattan_distance(grid.start, grid.finish) == 2


def test_run_stats_to_dict():
    stats = RunStats(nodes_visited=3, path_length=2, execution_time=1, memory_used=4, manhattan_distance=2)
    assert stats.to_dict() == {
        "nodes_visited": 3,
        "path_length": 2,
        "execution_time": 1,
        "memory_used": 4,
        "manhattan_distance": 2,
    }
