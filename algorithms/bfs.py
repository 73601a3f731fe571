"""
bfs.py — Breadth-First Search
==============================
FIFO queue, one global visited set.  A node is marked seen when it is
enqueued (so it is enqueued at most once) and reported to the notifier
when it is dequeued.  On an unweighted grid the first time the finish is
dequeued its back-pointer chain is a shortest path by edge count.

Skips walls transparently.
"""

from collections import deque
from typing import Optional, List, Set

from grid import Grid, Node
from engine import CancelToken, StatsTracker
from engine.notifier import Notifier
from algorithms.base import RunResult, prepare, visit, reconstruct_path, finish_run

KEY = "bfs"


async def bfs(
    grid: Grid,
    on_visit: Optional[Notifier] = None,
    *,
    token: Optional[CancelToken] = None,
) -> RunResult:
    """
    Args:
        grid     : The grid to search.  Borrowed for this run only.
        on_visit : Awaited once per node, the instant it is visited.
        token    : Optional CancelToken checked at every suspension point.
    """

    state   = prepare(grid, KEY)
    tracker = StatsTracker()
    start, finish = grid.start, grid.finish

    visited_nodes_in_order: List[Node] = []
    queue = deque([start])
    seen: Set[int] = {start.index}
    state.distance[start.index] = 0

    while queue:
        node = queue.popleft()

        await visit(node, visited_nodes_in_order, on_visit, token)
        tracker.track_visit(node, len(queue))

        if node is finish:
            path = reconstruct_path(grid, state, reached=True)
            return finish_run(KEY, grid, state, visited_nodes_in_order, path, tracker)

        for nbr in grid.neighbors(node):
            if nbr.is_wall or nbr.index in seen:
                continue
            seen.add(nbr.index)
            state.previous[nbr.index] = node.index
            state.distance[nbr.index] = state.distance[node.index] + 1
            queue.append(nbr)

    return finish_run(KEY, grid, state, visited_nodes_in_order, [], tracker)
