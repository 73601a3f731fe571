# tests/conftest.py
import asyncio
import random
from collections import deque
from typing import Iterable, List, Optional, Tuple

import pytest

from grid import Grid, GridConfig


def make_grid(rows, cols, start=(0, 0), finish=None, walls: Iterable[Tuple[int, int]] = ()) -> Grid:
    if finish is None:
        finish = (rows - 1, cols - 1)
    grid = Grid(GridConfig(rows, cols, start[0], start[1], finish[0], finish[1]))
    grid.set_walls(walls)
    return grid


def scatter_walls(grid: Grid, seed: int, density: float = 0.3) -> Grid:
    rng = random.Random(seed)
    for node in grid.nodes:
        if rng.random() < density:
            node.is_wall = True
    return grid


def reference_distance(grid: Grid) -> Optional[int]:
    """Plain BFS over coordinates, independent of the strategies under test."""
    start = (grid.start.row, grid.start.col)
    goal = (grid.finish.row, grid.finish.col)
    dist = {start: 0}
    queue = deque([start])
    while queue:
        r, c = queue.popleft()
        if (r, c) == goal:
            return dist[(r, c)]
        for nr, nc in ((r - 1, c), (r + 1, c), (r, c - 1), (r, c + 1)):
            if 0 <= nr < grid.rows and 0 <= nc < grid.cols and (nr, nc) not in dist:
                if not grid.nodes[nr * grid.cols + nc].is_wall:
                    dist[(nr, nc)] = dist[(r, c)] + 1
                    queue.append((nr, nc))
    return None


def assert_valid_path(grid: Grid, path: List) -> None:
    assert path[0] is grid.start
    assert path[-1] is grid.finish
    assert len({n.index for n in path}) == len(path)
    for a, b in zip(path, path[1:]):
        assert abs(a.row - b.row) + abs(a.col - b.col) == 1
    assert not any(n.is_wall for n in path)


def run_sync(coro):
    return asyncio.run(coro)


class Recorder:
    """Collects notifier payloads; can be sync or async."""

    def __init__(self):
        self.seen = []

    def __call__(self, payload):
        self.seen.append(payload)


@pytest.fixture
def open_grid():
    return make_grid(3, 3)
