"""
ellers.py — Eller's Algorithm
==============================
Builds the maze one cell row at a time, remembering only which set each
cell of the current row belongs to.

Per cell row:
  1. Cells without a set get a fresh one.
  2. Adjacent cells in different sets are joined at random (always on the
     last row, so everything ends up in one set).
  3. Every set sends at least one passage down to the next cell row; a
     random number of extra cells in the set go down as well.  Cells below
     that receive a passage inherit the set; the rest start fresh.
"""

from collections import OrderedDict
from itertools import count
from typing import Dict, List

from grid import Grid
from maze.base import MazeGenerator

KEY = "ellers"

JOIN_CHANCE = 0.5


class EllersMaze(MazeGenerator):
    key     = KEY
    label   = "Eller's Algorithm"
    perfect = True

    async def build(self, grid: Grid) -> None:
        grid.fill_walls()
        cell_rows = list(range(1, grid.rows, 2))
        cell_cols = list(range(1, grid.cols, 2))
        if not cell_rows or not cell_cols:
            return

        fresh = count()
        row_sets: Dict[int, int] = {}

        for i, row in enumerate(cell_rows):
            last = i == len(cell_rows) - 1

            for col in cell_cols:
                if col not in row_sets:
                    row_sets[col] = next(fresh)
            await self.open_cells(grid, [(row, col) for col in cell_cols])

            # horizontal joins
            for left, right in zip(cell_cols, cell_cols[1:]):
                if row_sets[left] == row_sets[right]:
                    continue
                if last or self.rng.random() < JOIN_CHANCE:
                    merged, kept = row_sets[right], row_sets[left]
                    for col in cell_cols:
                        if row_sets[col] == merged:
                            row_sets[col] = kept
                    await self.open_cells(grid, [(row, left + 1)])

            if last:
                break

            # vertical passages
            members: "OrderedDict[int, List[int]]" = OrderedDict()
            for col in cell_cols:
                members.setdefault(row_sets[col], []).append(col)

            next_sets: Dict[int, int] = {}
            for set_id, cols in members.items():
                cols = list(cols)
                self.rng.shuffle(cols)
                going_down = 1 + self.rng.randrange(len(cols))
                for col in cols[:going_down]:
                    next_sets[col] = set_id
                    await self.open_cells(grid, [(row + 1, col), (row + 2, col)])
            row_sets = next_sets
