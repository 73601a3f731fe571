"""
kruskal.py — Randomised Kruskal's
==================================
  1. Wall every node, then open every odd-coordinate cell.
  2. List each wall sitting between two horizontally or vertically
     adjacent cells, and shuffle the list.
  3. Walk the list; remove a wall only when its two cells are in different
     union-find sets, then merge them.

The result is a spanning tree over the cells, so exactly (cells - 1)
walls come down.  `walls_removed` reports that count after each run.
"""

from typing import Dict, List, Tuple

from grid import Grid
from maze.base import Cell, MazeGenerator, lattice_cells
from maze.union_find import UnionFind

KEY = "kruskal"


class KruskalMaze(MazeGenerator):
    key     = KEY
    label   = "Kruskal's Algorithm"
    perfect = True

    def __init__(self, seed=None):
        super().__init__(seed)
        self.walls_removed: int = 0

    async def build(self, grid: Grid) -> None:
        self.walls_removed = 0
        grid.fill_walls()

        cells = lattice_cells(grid)
        ids: Dict[Cell, int] = {cell: i for i, cell in enumerate(cells)}
        await self.open_cells(grid, cells)

        walls: List[Tuple[Cell, Cell, Cell]] = []
        for row, col in cells:
            for d_row, d_col in ((0, 2), (2, 0)):
                other = (row + d_row, col + d_col)
                if other in ids:
                    walls.append(((row + d_row // 2, col + d_col // 2), (row, col), other))
        self.rng.shuffle(walls)

        sets = UnionFind(len(cells))
        for wall, a, b in walls:
            if sets.union(ids[a], ids[b]):
                self.walls_removed += 1
                await self.open_cells(grid, [wall])
