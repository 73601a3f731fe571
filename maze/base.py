"""
base.py — Maze Generator Contract
==================================
Every generator mutates a grid's walls in place and hands the same grid
back:

    grid = await generator.generate(grid, on_carve=None, token=None)

`on_carve(cells)` is awaited once per batch of (row, col) cells whose wall
state changed: newly opened for carving generators, newly walled for
the division / spiral / random ones.

State machine:
    EMPTY  →  generate()  →  GENERATING  →  DONE
    any failure during GENERATING  →  EMPTY (the exception propagates)

Connectivity:
    Start and finish are configurable, so no generator can promise they
    end up joined for every configuration.  After the strategy finishes,
    a breadth-first reachability check runs from the start; if the finish
    is cut off, a Manhattan-style repair path (rows first, then columns)
    is carved straight from start to finish.

Cell lattice (carving generators):
    Cells sit on odd (row, col) coordinates; the node between two cells
    two steps apart is the wall that gets carved to join them.
"""

import logging
import random
from enum import Enum
from typing import Iterable, List, Optional, Tuple

from grid import Grid, Node, ensure_grid
from engine import CancelToken, notify
from engine.notifier import Notifier

logger = logging.getLogger(__name__)

Cell = Tuple[int, int]


class MazeState(Enum):
    EMPTY      = "empty"
    GENERATING = "generating"
    DONE       = "done"


# ---------------------------------------------------------------------------
# Cell-lattice helpers
# ---------------------------------------------------------------------------
def lattice_cells(grid: Grid) -> List[Cell]:
    return [(r, c) for r in range(1, grid.rows, 2) for c in range(1, grid.cols, 2)]


def lattice_neighbors(grid: Grid, cell: Cell) -> List[Cell]:
    """Cells two steps away (up, down, left, right) that lie inside the grid."""
    row, col = cell
    result = []
    for d_row, d_col in ((-2, 0), (2, 0), (0, -2), (0, 2)):
        r, c = row + d_row, col + d_col
        if 0 <= r < grid.rows and 0 <= c < grid.cols:
            result.append((r, c))
    return result


def between(a: Cell, b: Cell) -> Cell:
    return (a[0] + b[0]) // 2, (a[1] + b[1]) // 2


# ---------------------------------------------------------------------------
# Base class
# ---------------------------------------------------------------------------
class MazeGenerator:
    """
    Attributes:
        key      : Registry key.
        label    : Human label.
        perfect  : Produces a spanning tree over its cells when nothing interferes.
        seed     : Seed for the private RNG re-created on every generate() call.
        state    : Current MazeState.
        repaired : True when the last run needed the repair path.
    """

    key:     str  = ""
    label:   str  = ""
    perfect: bool = False

    def __init__(self, seed: Optional[int] = None):
        self.seed:     Optional[int]          = seed
        self.state:    MazeState              = MazeState.EMPTY
        self.repaired: bool                   = False
        self.rng:      random.Random          = random.Random(seed)
        self._on_carve: Optional[Notifier]    = None
        self._token:    Optional[CancelToken] = None

    @property
    def is_generating(self) -> bool:
        return self.state is MazeState.GENERATING

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    async def generate(
        self,
        grid: Grid,
        on_carve: Optional[Notifier] = None,
        *,
        token: Optional[CancelToken] = None,
    ) -> Grid:
        ensure_grid(grid)
        if self.is_generating:
            raise RuntimeError(f"{self.label or type(self).__name__} is already generating")

        self.state     = MazeState.GENERATING
        self.repaired  = False
        self.rng       = random.Random(self.seed)
        self._on_carve = on_carve
        self._token    = token
        logger.debug("%s: generating on %dx%d grid (seed=%s)", self.key, grid.rows, grid.cols, self.seed)

        try:
            grid.reset_search_state()
            await self.build(grid)
            await self.ensure_connected(grid)
        except BaseException:
            self.state = MazeState.EMPTY
            raise
        finally:
            self._on_carve = None
            self._token    = None

        self.state = MazeState.DONE
        return grid

    async def build(self, grid: Grid) -> None:
        raise NotImplementedError

    # ------------------------------------------------------------------
    # Notification
    # ------------------------------------------------------------------
    async def emit(self, nodes: Iterable[Node]) -> None:
        cells = [(n.row, n.col) for n in nodes]
        if cells:
            await notify(self._on_carve, cells, self._token)

    async def open_cells(self, grid: Grid, cells: Iterable[Cell]) -> None:
        """Open every cell in the batch and report the ones that changed."""
        changed = []
        for row, col in cells:
            node = grid.node(row, col)
            if node.is_wall:
                node.is_wall = False
                changed.append(node)
        await self.emit(changed)

    async def wall_cells(self, grid: Grid, cells: Iterable[Cell]) -> None:
        changed = []
        for row, col in cells:
            node = grid.node(row, col)
            if not node.is_wall and not (node.is_start or node.is_finish):
                node.is_wall = True
                changed.append(node)
        await self.emit(changed)

    # ------------------------------------------------------------------
    # Connectivity check & repair
    # ------------------------------------------------------------------
    async def ensure_connected(self, grid: Grid) -> None:
        if grid.is_reachable():
            return
        logger.info(
            "%s: finish unreachable from start after generation, carving repair path",
            self.key,
        )
        self.repaired = True
        await self.open_cells(grid, repair_path(grid))


def repair_path(grid: Grid) -> List[Cell]:
    """Manhattan route from start to finish: down/up to the finish row, then across."""
    row, col = grid.start.row, grid.start.col
    cells: List[Cell] = [(row, col)]
    step = 1 if grid.finish.row > row else -1
    while row != grid.finish.row:
        row += step
        cells.append((row, col))
    step = 1 if grid.finish.col > col else -1
    while col != grid.finish.col:
        col += step
        cells.append((row, col))
    return cells
