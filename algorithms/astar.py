"""
astar.py — A* Search
=====================
Frontier ordered by f = g + h with h = Manhattan distance to the finish.
On a 4-connected unit-cost grid Manhattan is admissible and consistent,
so the first time the finish is popped its path is optimal.

Tie-breaking: the open list is re-sorted by f before every pop with
Python's stable sort, so among equal f the node sitting earlier in the
list wins.  New nodes are appended; an update keeps a node's position.

A neighbour not yet in the open list is always added; one already there
is updated only when the new g is strictly smaller.
"""

from typing import Optional, List, Set

from grid import Grid, Node
from engine import CancelToken, StatsTracker, manhattan_distance
from engine.notifier import Notifier
from algorithms.base import RunResult, prepare, visit, reconstruct_path, finish_run

KEY = "astar"


# ---------------------------------------------------------------------------
# Heuristic
# ---------------------------------------------------------------------------
def manhattan(a: Node, b: Node) -> int:
    """|Δrow| + |Δcol|, admissible on a 4-connected grid."""
    return manhattan_distance(a, b)


# ---------------------------------------------------------------------------
# Search
# ---------------------------------------------------------------------------
async def astar(
    grid: Grid,
    on_visit: Optional[Notifier] = None,
    *,
    token: Optional[CancelToken] = None,
) -> RunResult:

    state   = prepare(grid, KEY)
    tracker = StatsTracker()
    start, finish = grid.start, grid.finish
    g, h, f = state.g, state.h, state.f

    visited_nodes_in_order: List[Node] = []
    g[start.index] = 0
    h[start.index] = manhattan(start, finish)
    f[start.index] = g[start.index] + h[start.index]

    open_set: List[int] = [start.index]
    in_open:  Set[int]  = {start.index}
    closed:   Set[int]  = set()

    while open_set:
        open_set.sort(key=lambda i: f[i])
        idx = open_set.pop(0)
        in_open.discard(idx)
        node = grid.nodes[idx]

        tracker.track_visit(node, len(open_set) + len(closed))

        await visit(node, visited_nodes_in_order, on_visit, token)

        if node is finish:
            path = reconstruct_path(grid, state, reached=True)
            return finish_run(KEY, grid, state, visited_nodes_in_order, path, tracker)

        closed.add(idx)

        for nbr in grid.neighbors(node):
            n_idx = nbr.index
            if n_idx in closed or nbr.is_wall:
                continue

            tentative_g = g[idx] + 1

            if n_idx not in in_open:
                open_set.append(n_idx)
                in_open.add(n_idx)
            elif tentative_g >= g[n_idx]:
                continue

            state.previous[n_idx] = idx
            g[n_idx] = tentative_g
            h[n_idx] = manhattan(nbr, finish)
            f[n_idx] = g[n_idx] + h[n_idx]

    return finish_run(KEY, grid, state, visited_nodes_in_order, [], tracker)
