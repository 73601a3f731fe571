"""
dijkstra.py — Dijkstra's Shortest-Path Algorithm
==================================================
Every node starts in the unvisited set at distance ∞ (the start at 0).
The loop repeatedly extracts the unvisited node with the smallest
distance; walls are dropped when extracted, and an extracted minimum of
∞ means nothing reachable is left: no path, stop immediately.

The min-heap (heapq) holds (distance, seq, index) entries with lazy
deletion: a relaxation pushes a fresh entry and stale ones are skipped
on pop.  Equal distances come out in push order; no other tie-break is
promised.

Edge weight is 1 throughout, and a neighbour is only updated when its
tentative distance strictly decreases.
"""

import heapq
from itertools import count
from typing import Optional, List, Set, Tuple

from grid import Grid, Node, INF
from engine import CancelToken, StatsTracker
from engine.notifier import Notifier
from algorithms.base import RunResult, prepare, visit, reconstruct_path, finish_run

KEY = "dijkstra"


async def dijkstra(
    grid: Grid,
    on_visit: Optional[Notifier] = None,
    *,
    token: Optional[CancelToken] = None,
) -> RunResult:

    state   = prepare(grid, KEY)
    tracker = StatsTracker()
    start, finish = grid.start, grid.finish
    dist    = state.distance
    seq     = count()

    visited_nodes_in_order: List[Node] = []
    dist[start.index] = 0
    unvisited: Set[int] = {node.index for node in grid.nodes}
    heap: List[Tuple[float, int, int]] = [(dist[node.index], next(seq), node.index) for node in grid.nodes]
    heapq.heapify(heap)

    while heap:
        d, _, idx = heapq.heappop(heap)
        if idx not in unvisited or d > dist[idx]:
            continue
        unvisited.discard(idx)
        node = grid.nodes[idx]

        if node.is_wall:
            continue
        if d == INF:
            # closest remaining node is unreachable: no path
            break

        await visit(node, visited_nodes_in_order, on_visit, token)
        tracker.track_visit(node, len(unvisited))

        if node is finish:
            path = reconstruct_path(grid, state, reached=True)
            return finish_run(KEY, grid, state, visited_nodes_in_order, path, tracker)

        for nbr in grid.neighbors(node):
            if nbr.is_wall or nbr.index not in unvisited:
                continue
            new_dist = d + 1
            if new_dist < dist[nbr.index]:
                dist[nbr.index] = new_dist
                state.previous[nbr.index] = idx
                heapq.heappush(heap, (new_dist, next(seq), nbr.index))

    return finish_run(KEY, grid, state, visited_nodes_in_order, [], tracker)
