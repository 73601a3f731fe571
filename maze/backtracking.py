"""
backtracking.py — Recursive Backtracker
========================================
Depth-first carving over the odd-coordinate cell lattice:

  1. Wall every node (start / finish stay open).
  2. Open cell (1, 1) and push it.
  3. Look at the top of the stack: pick a random unvisited cell two steps
     away, open it and the wall between, push it.  No unvisited neighbour
     → pop.

The "recursion" lives on an explicit stack, so large grids cannot hit the
interpreter's recursion limit.  Produces long, winding corridors.
"""

from typing import List, Set

from grid import Grid
from maze.base import Cell, MazeGenerator, lattice_neighbors, between

KEY = "backtracking"


class RecursiveBacktrackerMaze(MazeGenerator):
    key     = KEY
    label   = "Recursive Backtracking"
    perfect = True

    async def build(self, grid: Grid) -> None:
        grid.fill_walls()
        if grid.rows < 2 or grid.cols < 2:
            return

        first: Cell = (1, 1)
        visited: Set[Cell] = {first}
        stack:   List[Cell] = [first]
        await self.open_cells(grid, [first])

        while stack:
            cell = stack[-1]
            options = [n for n in lattice_neighbors(grid, cell) if n not in visited]
            if not options:
                stack.pop()
                continue

            nxt = self.rng.choice(options)
            visited.add(nxt)
            await self.open_cells(grid, [between(cell, nxt), nxt])
            stack.append(nxt)
