"""
bidirectional_bfs.py — Bidirectional BFS
==========================================
Two BFS frontiers, forward from the start and backward from the finish,
alternating one dequeue-and-expand step per side.  Each side keeps its
own discovered set; the search stops the instant a side dequeues a node
the other side has already discovered (the meeting node).

`state.distance` holds forward depths only (hops from the start); the
backward depths stay private to the search.

Both sides share one visit order: a node is reported to the notifier the
first time either side dequeues it.

Path stitching:
  forward parent chain (start → meeting) + backward parent chain
  (meeting → finish), then `previous` is re-linked along the whole chain
  so the path can be walked from the finish like every other strategy.
  When the meeting node is the finish itself the stitched list carries
  the finish twice; the re-link runs back-to-front, so the walk from the
  finish still comes out clean.

Stitch node:
  Alternating single dequeues can stop on a meeting node whose combined
  depth is one step longer than the best connection.  At stop time every
  node on some shortest path inside the overlap of the two discovered sets
  is already known, so the stitch goes through the overlap node with the
  smallest forward + backward depth (the meeting node wins ties).
"""

from collections import deque
from typing import Deque, Optional, List, Set

from grid import Grid, Node, INF
from engine import CancelToken, StatsTracker
from engine.notifier import Notifier
from algorithms.base import RunResult, prepare, visit, reconstruct_path, finish_run

KEY = "bidirectional"


class _Side:
    """One search direction: queue, discovered set, parents and depths."""

    __slots__ = ("queue", "discovered", "parent", "depth")

    def __init__(self, origin: Node, size: int, depth: Optional[List[float]] = None):
        self.queue:      Deque[Node] = deque([origin])
        self.discovered: Set[int]    = {origin.index}
        self.parent:     List[int]   = [-1] * size
        self.depth:      List[float] = depth if depth is not None else [INF] * size
        self.depth[origin.index] = 0


async def bidirectional_bfs(
    grid: Grid,
    on_visit: Optional[Notifier] = None,
    *,
    token: Optional[CancelToken] = None,
) -> RunResult:

    state   = prepare(grid, KEY)
    tracker = StatsTracker()
    start, finish = grid.start, grid.finish
    size    = len(grid.nodes)

    visited_nodes_in_order: List[Node] = []
    forward  = _Side(start, size, depth=state.distance)
    backward = _Side(finish, size)

    async def step(side: _Side, other: _Side) -> Optional[Node]:
        node = side.queue.popleft()
        if not node.is_visited:
            await visit(node, visited_nodes_in_order, on_visit, token)

        tracker.track_visit(node, len(side.queue) + len(side.discovered))

        if node.index in other.discovered:
            return node

        for nbr in grid.neighbors(node):
            if nbr.index in side.discovered or nbr.is_wall:
                continue
            side.discovered.add(nbr.index)
            side.parent[nbr.index] = node.index
            side.depth[nbr.index]  = side.depth[node.index] + 1
            side.queue.append(nbr)
        return None

    meeting: Optional[Node] = None
    while forward.queue and backward.queue and meeting is None:
        meeting = await step(forward, backward)
        if meeting is not None:
            break
        meeting = await step(backward, forward)

    if meeting is None:
        return finish_run(KEY, grid, state, visited_nodes_in_order, [], tracker)

    junction = _best_junction(grid, forward, backward, meeting)
    _stitch(grid, state.previous, forward.parent, backward.parent, junction)
    path = reconstruct_path(grid, state, reached=True)
    return finish_run(KEY, grid, state, visited_nodes_in_order, path, tracker)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------
def _best_junction(grid: Grid, forward: _Side, backward: _Side, meeting: Node) -> Node:
    best     = meeting
    best_len = forward.depth[meeting.index] + backward.depth[meeting.index]
    small, large = sorted((forward.discovered, backward.discovered), key=len)
    for idx in small:
        if idx not in large:
            continue
        total = forward.depth[idx] + backward.depth[idx]
        if total < best_len:
            best, best_len = grid.nodes[idx], total
    return best


def _stitch(
    grid: Grid,
    previous: List[int],
    parent_f: List[int],
    parent_b: List[int],
    junction: Node,
) -> None:
    start, finish = grid.start, grid.finish

    # start → junction
    from_start: List[Node] = []
    cur: Optional[Node] = junction
    while cur is not None and cur is not start:
        from_start.append(cur)
        idx = parent_f[cur.index]
        cur = grid.nodes[idx] if idx != -1 else None
    from_start.append(start)
    from_start.reverse()

    # junction → finish, junction itself only once
    to_finish: List[Node] = []
    cur = junction
    while cur is not None and cur is not finish:
        if cur is not junction:
            to_finish.append(cur)
        idx = parent_b[cur.index]
        cur = grid.nodes[idx] if idx != -1 else None
    to_finish.append(finish)

    chain = from_start + to_finish
    for i in range(len(chain) - 1, 0, -1):
        previous[chain[i].index] = chain[i - 1].index
    previous[chain[0].index] = -1
