"""
dfs.py — Depth-First Search
=============================
Explicit LIFO stack (no Python recursion limit issues), "mark on pop".

Neighbours are pushed in reverse up/down/left/right order so they pop in
up/down/left/right priority.  Each push overwrites the neighbour's
back-pointer, so a node's predecessor is whichever node pushed it last,
the push that actually gets popped.

Does NOT guarantee a shortest path.  That is the point of DFS.
"""

from typing import Optional, List, Set

from grid import Grid, Node
from engine import CancelToken, StatsTracker
from engine.notifier import Notifier
from algorithms.base import RunResult, prepare, visit, reconstruct_path, finish_run

KEY = "dfs"


async def dfs(
    grid: Grid,
    on_visit: Optional[Notifier] = None,
    *,
    token: Optional[CancelToken] = None,
) -> RunResult:

    state   = prepare(grid, KEY)
    tracker = StatsTracker()
    start, finish = grid.start, grid.finish

    visited_nodes_in_order: List[Node] = []
    stack:   List[Node] = [start]
    visited: Set[int]   = set()

    while stack:
        node = stack.pop()

        # already visited (can happen because we mark-on-pop)
        if node.index in visited:
            continue
        visited.add(node.index)

        await visit(node, visited_nodes_in_order, on_visit, token)
        tracker.track_visit(node, len(stack))

        if node is finish:
            path = reconstruct_path(grid, state, reached=True)
            return finish_run(KEY, grid, state, visited_nodes_in_order, path, tracker)

        for nbr in reversed(grid.neighbors(node)):
            if nbr.is_wall or nbr.index in visited:
                continue
            state.previous[nbr.index] = node.index
            stack.append(nbr)

    return finish_run(KEY, grid, state, visited_nodes_in_order, [], tracker)
