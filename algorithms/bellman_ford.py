"""
bellman_ford.py — Bellman–Ford Algorithm
=========================================
Structure:
  • Up to |V|-1 passes relaxing every edge out of every open node, in
    row-major node order and up/down/left/right neighbour order.
  • Early exit as soon as a full pass changes nothing.  With unit weights
    this converges in far fewer than |V|-1 passes.
  • One extra detector pass for negative-weight cycles.

The detector can never fire while EDGE_WEIGHT is 1.  It is kept so the
contract matches the general algorithm: if it fires, a warning is logged
and the run returns what it has accumulated (visit order, stats) with
`negative_cycle=True` and an empty path.

A node counts as visited, and is reported to the notifier, the first time
its distance becomes finite.  The start is visited at initialisation.
"""

import logging
from typing import Optional, List

from grid import Grid, Node, INF
from engine import CancelToken, StatsTracker
from engine.notifier import Notifier
from algorithms.base import RunResult, prepare, visit, reconstruct_path, finish_run

logger = logging.getLogger(__name__)

KEY = "bellman_ford"

EDGE_WEIGHT = 1


async def bellman_ford(
    grid: Grid,
    on_visit: Optional[Notifier] = None,
    *,
    token: Optional[CancelToken] = None,
) -> RunResult:

    state   = prepare(grid, KEY)
    tracker = StatsTracker()
    start, finish = grid.start, grid.finish
    dist    = state.distance
    weight  = EDGE_WEIGHT
    nodes   = grid.nodes

    visited_nodes_in_order: List[Node] = []
    reached = 1

    dist[start.index] = 0
    await visit(start, visited_nodes_in_order, on_visit, token)
    tracker.track_visit(start, reached)

    # ==============================================================
    # MAIN PASSES
    # ==============================================================
    for _ in range(len(nodes) - 1):
        changed = False

        for node in nodes:
            if node.is_wall or dist[node.index] == INF:
                continue
            for nbr in grid.neighbors(node):
                if nbr.is_wall:
                    continue
                new_dist = dist[node.index] + weight
                if new_dist < dist[nbr.index]:
                    dist[nbr.index] = new_dist
                    state.previous[nbr.index] = node.index
                    changed = True

                    if not nbr.is_visited:
                        reached += 1
                        await visit(nbr, visited_nodes_in_order, on_visit, token)
                        tracker.track_visit(nbr, reached)

        if not changed:
            break

    # ==============================================================
    # NEGATIVE-CYCLE DETECTOR
    # ==============================================================
    for node in nodes:
        if node.is_wall or dist[node.index] == INF:
            continue
        for nbr in grid.neighbors(node):
            if nbr.is_wall:
                continue
            if dist[node.index] + weight < dist[nbr.index]:
                logger.warning(
                    "Negative weight cycle detected via (%d,%d)->(%d,%d)",
                    node.row, node.col, nbr.row, nbr.col,
                )
                return finish_run(
                    KEY, grid, state, visited_nodes_in_order, [], tracker,
                    negative_cycle=True,
                )

    # ==============================================================
    # PATH RECONSTRUCTION
    # ==============================================================
    path = reconstruct_path(grid, state, reached=dist[finish.index] != INF)
    return finish_run(KEY, grid, state, visited_nodes_in_order, path, tracker)
