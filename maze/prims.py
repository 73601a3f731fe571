"""
prims.py — Randomised Prim's
=============================
Grows a single region outward from cell (1, 1).  The frontier holds
(wall, far-cell) pairs; each step removes a random entry and, if its far
cell is still outside the region, opens both.

Compared with the backtracker: many short dead ends, branching that
radiates out from the seed cell.
"""

from typing import List, Set, Tuple

from grid import Grid
from maze.base import Cell, MazeGenerator, lattice_neighbors, between

KEY = "prims"


class PrimsMaze(MazeGenerator):
    key     = KEY
    label   = "Prim's Algorithm"
    perfect = True

    async def build(self, grid: Grid) -> None:
        grid.fill_walls()
        if grid.rows < 2 or grid.cols < 2:
            return

        first: Cell = (1, 1)
        region: Set[Cell] = {first}
        await self.open_cells(grid, [first])

        frontier: List[Tuple[Cell, Cell]] = [
            (between(first, far), far) for far in lattice_neighbors(grid, first)
        ]

        while frontier:
            # swap-pop a random entry
            i = self.rng.randrange(len(frontier))
            frontier[i], frontier[-1] = frontier[-1], frontier[i]
            wall, far = frontier.pop()
            if far in region:
                continue

            region.add(far)
            await self.open_cells(grid, [wall, far])

            for nxt in lattice_neighbors(grid, far):
                if nxt not in region:
                    frontier.append((between(far, nxt), nxt))
