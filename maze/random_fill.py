"""
random_fill.py — Random Scatter
================================
Not a maze in the strict sense: every node except start and finish
becomes a wall independently with probability `density`.  Often leaves
the finish cut off, in which case the shared repair path reconnects it.
"""

from typing import Optional

from grid import Grid, ValidationError
from maze.base import MazeGenerator

KEY = "random"

DEFAULT_DENSITY = 0.3


class RandomMaze(MazeGenerator):
    key   = KEY
    label = "Random Walls"

    def __init__(self, seed: Optional[int] = None, density: float = DEFAULT_DENSITY):
        if isinstance(density, bool) or not isinstance(density, (int, float)) or not 0 <= density <= 1:
            raise ValidationError(f"density must be a number in [0, 1], got {density!r}")
        super().__init__(seed)
        self.density = float(density)

    async def build(self, grid: Grid) -> None:
        grid.clear_walls()
        for row in range(grid.rows):
            await self.wall_cells(grid, [
                (row, col) for col in range(grid.cols)
                if self.rng.random() < self.density
            ])
