"""
division.py — Recursive Division
=================================
The only "wall adder": starts from an open grid and subdivides.

  1. Clear every wall, then wall the outer border.
  2. Pop a chamber (inclusive interior bounds) off the stack.  Pick an
     orientation, draw a wall along a random even row / column inside it,
     leave one gap on a random odd coordinate, push both halves.
  3. Chambers with no even row or column strictly inside are done.

Walls always land on even coordinates and gaps on odd ones, so a later
wall can never seal an earlier gap.

Orientation:
  skew=None        : cut across the longer side, coin flip on squares.
  skew="vertical"  : prefer vertical walls (tall, narrow corridors).
  skew="horizontal": prefer horizontal walls.
"""

from typing import List, Optional, Tuple

from grid import Grid, ValidationError
from maze.base import MazeGenerator

KEY = "recursive_division"

HORIZONTAL = "horizontal"
VERTICAL   = "vertical"

Chamber = Tuple[int, int, int, int]     # top, bottom, left, right (inclusive)


class RecursiveDivisionMaze(MazeGenerator):
    key   = KEY
    label = "Recursive Division"

    def __init__(self, seed: Optional[int] = None, skew: Optional[str] = None):
        if skew not in (None, HORIZONTAL, VERTICAL):
            raise ValidationError(f"Unknown division skew: {skew!r}")
        super().__init__(seed)
        self.skew = skew
        if skew is not None:
            self.key   = f"{KEY}_{skew}"
            self.label = f"Recursive Division ({skew.capitalize()} Skew)"

    async def build(self, grid: Grid) -> None:
        grid.clear_walls()
        await self.wall_cells(grid, [
            (r, c) for r in range(grid.rows) for c in range(grid.cols)
            if r in (0, grid.rows - 1) or c in (0, grid.cols - 1)
        ])

        stack: List[Chamber] = [(1, grid.rows - 2, 1, grid.cols - 2)]
        while stack:
            top, bottom, left, right = stack.pop()
            if bottom < top or right < left:
                continue

            wall_rows = [r for r in range(top + 1, bottom) if r % 2 == 0]
            wall_cols = [c for c in range(left + 1, right) if c % 2 == 0]
            orientation = self._orientation(bottom - top + 1, right - left + 1, wall_rows, wall_cols)
            if orientation is None:
                continue

            if orientation == HORIZONTAL:
                wall_row = self.rng.choice(wall_rows)
                gap = self.rng.choice([c for c in range(left, right + 1) if c % 2 == 1])
                await self.wall_cells(grid, [(wall_row, c) for c in range(left, right + 1) if c != gap])
                stack.append((top, wall_row - 1, left, right))
                stack.append((wall_row + 1, bottom, left, right))
            else:
                wall_col = self.rng.choice(wall_cols)
                gap = self.rng.choice([r for r in range(top, bottom + 1) if r % 2 == 1])
                await self.wall_cells(grid, [(r, wall_col) for r in range(top, bottom + 1) if r != gap])
                stack.append((top, bottom, left, wall_col - 1))
                stack.append((top, bottom, wall_col + 1, right))

    def _orientation(self, height: int, width: int, wall_rows: List[int], wall_cols: List[int]) -> Optional[str]:
        if not wall_rows and not wall_cols:
            return None
        if not wall_cols:
            return HORIZONTAL
        if not wall_rows:
            return VERTICAL
        if self.skew is not None:
            return self.skew
        if height > width:
            return HORIZONTAL
        if width > height:
            return VERTICAL
        return self.rng.choice((HORIZONTAL, VERTICAL))
