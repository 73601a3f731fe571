"""
algorithms/__init__.py — Algorithm Registry
=============================================
Single source of truth for every search strategy the core knows about.

    from algorithms import REGISTRY, get_algorithm, run

REGISTRY is a dict:
    {
        "bfs": AlgoInfo(key, label, fn, tags, guarantees_shortest, …),
        …
    }

Every `fn` shares one contract:

    await fn(grid, on_visit=None, *, token=None) -> RunResult

so adding a strategy is: write the coroutine, add one entry here.
"""

from dataclasses import dataclass, field
from typing import Callable, List, Dict, Optional, Any

from grid import Grid, ValidationError
from engine import CancelToken
from engine.notifier import Notifier

# ---------------------------------------------------------------------------
# Import all strategy modules
# ---------------------------------------------------------------------------
from algorithms.base              import RunResult, reconstruct_path
from algorithms.dijkstra          import dijkstra
from algorithms.astar             import astar, manhattan
from algorithms.bfs               import bfs
from algorithms.dfs               import dfs
from algorithms.bellman_ford      import bellman_ford
from algorithms.bidirectional_bfs import bidirectional_bfs


# ---------------------------------------------------------------------------
# AlgoInfo: metadata card for each strategy
# ---------------------------------------------------------------------------
@dataclass
class AlgoInfo:
    key:                 str                    # registry key, e.g. "bfs"
    label:               str                    # human label, e.g. "Breadth-First Search"
    fn:                  Callable               # the search coroutine
    tags:                List[str] = field(default_factory=list)
    guarantees_shortest: bool      = True
    has_heuristic:       bool      = False
    complexity_time:     str       = ""
    complexity_space:    str       = ""
    description:         str       = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "key":                 self.key,
            "label":               self.label,
            "tags":                list(self.tags),
            "guarantees_shortest": self.guarantees_shortest,
            "has_heuristic":       self.has_heuristic,
            "complexity_time":     self.complexity_time,
            "complexity_space":    self.complexity_space,
            "description":         self.description,
        }


# ---------------------------------------------------------------------------
# THE REGISTRY
# ---------------------------------------------------------------------------
REGISTRY: Dict[str, AlgoInfo] = {

    "dijkstra": AlgoInfo(
        key="dijkstra", label="Dijkstra's Algorithm", fn=dijkstra,
        tags=["shortest-path"],
        complexity_time="O((V + E) log V)", complexity_space="O(V)",
        description="Greedily expands the closest node. Optimal on the unit-cost grid.",
    ),

    "astar": AlgoInfo(
        key="astar", label="A* Search", fn=astar,
        tags=["shortest-path", "heuristic"],
        has_heuristic=True,
        complexity_time="O((V + E) log V)", complexity_space="O(V)",
        description="Dijkstra + Manhattan heuristic guidance. Optimal because h is admissible.",
    ),

    "bfs": AlgoInfo(
        key="bfs", label="Breadth-First Search", fn=bfs,
        tags=["unweighted", "shortest-path", "traversal"],
        complexity_time="O(V + E)", complexity_space="O(V)",
        description="Explores layer-by-layer. Finds shortest path by edge count.",
    ),

    "dfs": AlgoInfo(
        key="dfs", label="Depth-First Search", fn=dfs,
        tags=["unweighted", "traversal"],
        guarantees_shortest=False,
        complexity_time="O(V + E)", complexity_space="O(V)",
        description="Dives deep before backtracking. Does NOT guarantee shortest path.",
    ),

    "bellman_ford": AlgoInfo(
        key="bellman_ford", label="Bellman–Ford", fn=bellman_ford,
        tags=["shortest-path", "negative-edges"],
        complexity_time="O(V · E)", complexity_space="O(V)",
        description="Relaxes every edge pass after pass. Detects negative cycles.",
    ),

    "bidirectional": AlgoInfo(
        key="bidirectional", label="Bidirectional BFS", fn=bidirectional_bfs,
        tags=["unweighted", "shortest-path", "bidirectional"],
        complexity_time="O(b^(d/2))", complexity_space="O(b^(d/2))",
        description="Two frontiers from start & finish. Meets in the middle.",
    ),
}


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------
def get_algorithm(key: str) -> Optional[AlgoInfo]:
    """Return AlgoInfo by key, or None."""
    return REGISTRY.get(key)


def list_algorithms() -> List[AlgoInfo]:
    """Return all registered strategies in insertion order."""
    return list(REGISTRY.values())


def algorithms_by_tag(tag: str) -> List[AlgoInfo]:
    """Filter registry by tag."""
    return [a for a in REGISTRY.values() if tag in a.tags]


async def run(
    key: str,
    grid: Grid,
    on_visit: Optional[Notifier] = None,
    *,
    token: Optional[CancelToken] = None,
) -> RunResult:
    """Run the strategy registered under `key` on `grid`."""
    info = get_algorithm(key)
    if info is None:
        raise ValidationError(f"Unknown algorithm: {key}")
    return await info.fn(grid, on_visit, token=token)


__all__ = [
    "AlgoInfo",
    "REGISTRY",
    "RunResult",
    "get_algorithm",
    "list_algorithms",
    "algorithms_by_tag",
    "reconstruct_path",
    "manhattan",
    "run",
    "dijkstra",
    "astar",
    "bfs",
    "dfs",
    "bellman_ford",
    "bidirectional_bfs",
]
