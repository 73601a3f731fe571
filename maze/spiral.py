"""
spiral.py — Spiral Rings
=========================
Concentric rectangular wall rings at odd offsets from the border (1, 3,
5, …) with corridors between them.  Each ring gets one gap, rotating
top → right → bottom → left from the outside in, so reaching the centre
means circling the whole board.

Deterministic: the seed is accepted for a uniform interface but unused.
"""

from typing import List

from grid import Grid
from maze.base import Cell, MazeGenerator

KEY = "spiral"


def ring(top: int, bottom: int, left: int, right: int) -> List[Cell]:
    """Perimeter of the rectangle, clockwise from the top-left corner."""
    cells = [(top, c) for c in range(left, right + 1)]
    cells += [(r, right) for r in range(top + 1, bottom + 1)]
    cells += [(bottom, c) for c in range(right - 1, left - 1, -1)]
    cells += [(r, left) for r in range(bottom - 1, top, -1)]
    return cells


class SpiralMaze(MazeGenerator):
    key   = KEY
    label = "Spiral"

    async def build(self, grid: Grid) -> None:
        grid.clear_walls()

        depth = 0
        while True:
            offset = 2 * depth + 1
            top, bottom = offset, grid.rows - 1 - offset
            left, right = offset, grid.cols - 1 - offset
            if bottom <= top or right <= left:
                break

            mid_row, mid_col = (top + bottom) // 2, (left + right) // 2
            gap = [
                (top, mid_col),
                (mid_row, right),
                (bottom, mid_col),
                (mid_row, left),
            ][depth % 4]

            await self.wall_cells(grid, [cell for cell in ring(top, bottom, left, right) if cell != gap])
            depth += 1
