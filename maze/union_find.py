"""
union_find.py — Disjoint-Set Forest
====================================
Array-backed union-find with path compression and union by rank.
Kruskal's generator uses it to decide whether knocking down a wall would
join two separate regions or close a loop.
"""

from typing import List


class UnionFind:
    """
    Attributes:
        parent     : parent[i] is i's representative candidate; roots point at themselves.
        rank       : Upper bound on each root's tree height.
        components : Number of disjoint sets remaining.
    """

    def __init__(self, size: int):
        if size < 0:
            raise ValueError(f"UnionFind size must be >= 0, got {size}")
        self.parent:     List[int] = list(range(size))
        self.rank:       List[int] = [0] * size
        self.components: int       = size

    def __len__(self) -> int:
        return len(self.parent)

    def find(self, x: int) -> int:
        root = x
        while self.parent[root] != root:
            root = self.parent[root]
        # compress
        while self.parent[x] != root:
            nxt = self.parent[x]
            self.parent[x] = root
            x = nxt
        return root

    def union(self, a: int, b: int) -> bool:
        """Merge the sets holding a and b.  False when they were already one set."""
        root_a, root_b = self.find(a), self.find(b)
        if root_a == root_b:
            return False
        if self.rank[root_a] < self.rank[root_b]:
            root_a, root_b = root_b, root_a
        self.parent[root_b] = root_a
        if self.rank[root_a] == self.rank[root_b]:
            self.rank[root_a] += 1
        self.components -= 1
        return True

    def connected(self, a: int, b: int) -> bool:
        return self.find(a) == self.find(b)
