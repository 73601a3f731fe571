"""
scratch.py — Per-Run Search Scratch
====================================
Side arrays keyed by node index, allocated fresh for every run so no
distance / score / back-pointer survives from one run into the next and
two grids searched concurrently never alias each other's state.
"""

from typing import List

from grid.node import INF


class SearchState:
    """
    Attributes:
        distance : Dijkstra / BFS / Bellman-Ford tentative distance.
        g, h, f  : A* scores.
        previous : Index of the predecessor on the best known path, -1 for none.
    """

    __slots__ = ("distance", "g", "h", "f", "previous")

    def __init__(self, size: int):
        self.distance: List[float] = [INF] * size
        self.g:        List[float] = [INF] * size
        self.h:        List[float] = [INF] * size
        self.f:        List[float] = [INF] * size
        self.previous: List[int]   = [-1] * size

    def __len__(self) -> int:
        return len(self.previous)
