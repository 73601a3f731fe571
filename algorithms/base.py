"""
base.py — Shared Search Contract
=================================
Every strategy is an async function

    async def strategy(grid, on_visit=None, *, token=None) -> RunResult

that borrows the grid for one run, awaits `on_visit(node)` exactly once
per node the instant it is marked visited (before its neighbours are
relaxed), and returns a RunResult built fresh for that run.

Design decisions:
  - RunResult is a plain dataclass.  `visited_nodes_in_order` is append-only
    and never reordered; `path` runs start → finish inclusive and is empty
    when the finish was never reached.
  - The per-run SearchState travels with the result so hosts can walk
    `state.previous` after the run without touching the nodes.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from grid import Grid, Node, SearchState, ensure_grid
from engine import CancelToken, RunStats, notify
from engine.notifier import Notifier

logger = logging.getLogger(__name__)


@dataclass
class RunResult:
    """
    Attributes:
        algorithm              : Registry key of the strategy that produced this.
        visited_nodes_in_order : Nodes in the exact order they were visited.
        path                   : start → finish inclusive, empty if unreachable.
        stats                  : RunStats card for the run.
        state                  : The run's scratch arrays (distances, back-pointers).
        negative_cycle         : Bellman-Ford only — the detector pass fired.
    """

    algorithm:              str
    visited_nodes_in_order: List[Node]            = field(default_factory=list)
    path:                   List[Node]            = field(default_factory=list)
    stats:                  RunStats              = field(default_factory=RunStats)
    state:                  Optional[SearchState] = None
    negative_cycle:         bool                  = False

    @property
    def found(self) -> bool:
        return bool(self.path)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "algorithm":              self.algorithm,
            "visited_nodes_in_order": [n.coord for n in self.visited_nodes_in_order],
            "path":                   [n.coord for n in self.path],
            "stats":                  self.stats.to_dict(),
            "found":                  self.found,
            "negative_cycle":         self.negative_cycle,
        }


# ---------------------------------------------------------------------------
# Helpers shared by the strategies
# ---------------------------------------------------------------------------
def prepare(grid: Grid, algorithm: str) -> SearchState:
    """Validate the grid and hand back fresh scratch for this run."""
    ensure_grid(grid)
    logger.debug(
        "%s: start=(%d,%d) finish=(%d,%d) on %dx%d grid",
        algorithm, grid.start.row, grid.start.col,
        grid.finish.row, grid.finish.col, grid.rows, grid.cols,
    )
    return grid.reset_search_state()


async def visit(
    node: Node,
    visited_nodes_in_order: List[Node],
    on_visit: Optional[Notifier],
    token: Optional[CancelToken],
) -> None:
    """Mark a node visited, record it, and suspend on the notifier."""
    node.is_visited = True
    visited_nodes_in_order.append(node)
    await notify(on_visit, node, token)


def reconstruct_path(grid: Grid, state: SearchState, reached: bool) -> List[Node]:
    """Walk `previous` from the finish back to the start, prepending each node."""
    if not reached:
        return []
    path: List[Node] = []
    idx = grid.finish.index
    while idx != -1:
        path.append(grid.nodes[idx])
        idx = state.previous[idx]
    path.reverse()
    return path


def finish_run(
    algorithm: str,
    grid: Grid,
    state: SearchState,
    visited_nodes_in_order: List[Node],
    path: List[Node],
    tracker,
    negative_cycle: bool = False,
) -> RunResult:
    for node in path:
        node.is_path = True
    stats = tracker.get_final_stats(path, grid.start, grid.finish)
    logger.debug(
        "%s: visited=%d path_length=%d time=%dms",
        algorithm, len(visited_nodes_in_order), stats.path_length, stats.execution_time,
    )
    return RunResult(
        algorithm=algorithm,
        visited_nodes_in_order=visited_nodes_in_order,
        path=path,
        stats=stats,
        state=state,
        negative_cycle=negative_cycle,
    )
