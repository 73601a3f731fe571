"""
stats.py — Run Statistics
==========================
Counts visits and records the peak frontier size for a single algorithm
run, then produces the analytics card the host renders.

Usage inside a strategy:
    tracker = StatsTracker()
    tracker.track_visit(node, len(queue))
    ...
    stats = tracker.get_final_stats(path, grid.start, grid.finish)

`memory_used` is a proxy for memory pressure: the peak of whatever
frontier size the calling algorithm reports (open set + closed set,
queue length, …).  `manhattan_distance` is the straight-line lower bound
between start and finish; callers use it to gauge path efficiency, it is
never validated against the result.
"""

import time
from dataclasses import dataclass, asdict
from typing import Dict, List, Optional, Any, Set

from grid import Node


@dataclass
class RunStats:
    nodes_visited:      int   = 0
    path_length:        int   = 0      # number of edges on the final path
    execution_time:     int   = 0      # wall-clock milliseconds since tracker creation
    memory_used:        int   = 0      # peak reported frontier size
    manhattan_distance: int   = 0

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def manhattan_distance(a: Optional[Node], b: Optional[Node]) -> int:
    if a is None or b is None:
        return 0
    return abs(a.row - b.row) + abs(a.col - b.col)


class StatsTracker:
    """
    Attributes:
        visited_keys : "row,col" keys of every node tracked so far (idempotent).
        memory_peak  : Largest frontier size reported so far.
    """

    def __init__(self):
        self._start_time:  float    = time.perf_counter()
        self.visited_keys: Set[str] = set()
        self.memory_peak:  int      = 0

    def track_visit(self, node: Node, current_frontier_size: int) -> None:
        self.visited_keys.add(node.key)
        self.memory_peak = max(self.memory_peak, current_frontier_size)

    def elapsed_ms(self) -> float:
        return (time.perf_counter() - self._start_time) * 1000

    def get_final_stats(self, path_nodes: List[Node], start_node: Node, finish_node: Node) -> RunStats:
        return RunStats(
            nodes_visited=len(self.visited_keys),
            path_length=max(0, len(path_nodes) - 1),
            execution_time=round(self.elapsed_ms()),
            memory_used=self.memory_peak,
            manhattan_distance=manhattan_distance(start_node, finish_node),
        )
