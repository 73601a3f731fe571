"""
grid.py — Grid Container & Configuration
=========================================
Single source of truth for the grid.  Search strategies and maze
generators both borrow this object for the duration of one run.

Responsibilities:
  1. Configuration + validation             (GridConfig, create_grid)
  2. Node arena & coordinate lookup         (nodes, node(row, col))
  3. Adjacency queries                      (neighbors: up, down, left, right)
  4. Wall editing                           (toggle_wall, set_walls, copy_walls_from)
  5. Reset helpers                          (wipe search state, keep walls)
  6. Serialisation round-trip               (to_dict / from_dict)

Design decisions:
  - Nodes live in one flat list; node.index = row * cols + col.  Anything a
    run needs per node goes in a SearchState side array keyed by that index.
  - Edges are implicit: every orthogonal pair of in-bounds nodes is joined
    by a unit-weight edge.  Walls make a node non-traversable.
"""

from collections import deque
from dataclasses import dataclass, asdict
from typing import Dict, List, Optional, Tuple, Any, Iterable, Sequence

from grid.errors import ValidationError
from grid.node import Node
from grid.scratch import SearchState


# up, down, left, right: DFS relies on this order
DIRECTIONS: Tuple[Tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))

_CAMEL_KEYS = {
    "startRow":  "start_row",
    "startCol":  "start_col",
    "finishRow": "finish_row",
    "finishCol": "finish_col",
}


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class GridConfig:
    rows:       int
    cols:       int
    start_row:  int
    start_col:  int
    finish_row: int
    finish_col: int

    def validate(self) -> "GridConfig":
        for name, value in asdict(self).items():
            if not _is_int(value):
                raise ValidationError(f"{name} must be an integer, got {value!r}")
        if self.rows < 1 or self.cols < 1:
            raise ValidationError(f"Invalid grid dimensions: {self.rows}x{self.cols}")
        if not self.in_bounds(self.start_row, self.start_col):
            raise ValidationError(f"Invalid start position: row={self.start_row}, col={self.start_col}")
        if not self.in_bounds(self.finish_row, self.finish_col):
            raise ValidationError(f"Invalid finish position: row={self.finish_row}, col={self.finish_col}")
        if (self.start_row, self.start_col) == (self.finish_row, self.finish_col):
            raise ValidationError("Start and finish must be different nodes")
        return self

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def to_dict(self) -> Dict[str, int]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GridConfig":
        """Accepts snake_case or camelCase keys.  Every key is required."""
        if not isinstance(data, dict):
            raise ValidationError("Grid configuration must be an object")
        normalised = {_CAMEL_KEYS.get(k, k): v for k, v in data.items()}
        fields = ("rows", "cols", "start_row", "start_col", "finish_row", "finish_col")
        missing = [f for f in fields if f not in normalised]
        if missing:
            raise ValidationError(f"Missing grid configuration keys: {', '.join(missing)}")
        return cls(**{f: normalised[f] for f in fields}).validate()


DEFAULT_CONFIG = GridConfig(
    rows=20,
    cols=30,
    start_row=10,
    start_col=5,
    finish_row=10,
    finish_col=25,
)


# ---------------------------------------------------------------------------
# Grid
# ---------------------------------------------------------------------------
class Grid:
    """
    Attributes:
        config : The validated GridConfig this grid was built from.
        rows   : Number of rows.
        cols   : Number of columns.
        nodes  : Flat node arena, row-major.
        start  : The single start node.
        finish : The single finish node.
    """

    def __init__(self, config: GridConfig = DEFAULT_CONFIG):
        if not isinstance(config, GridConfig):
            raise ValidationError("Grid requires a GridConfig")
        config.validate()

        self.config: GridConfig = config
        self.rows:   int        = config.rows
        self.cols:   int        = config.cols
        self.nodes:  List[Node] = []

        for row in range(self.rows):
            for col in range(self.cols):
                self.nodes.append(Node(
                    row,
                    col,
                    index=row * self.cols + col,
                    is_start=(row, col) == (config.start_row, config.start_col),
                    is_finish=(row, col) == (config.finish_row, config.finish_col),
                ))

        self.start:  Node = self.nodes[config.start_row * self.cols + config.start_col]
        self.finish: Node = self.nodes[config.finish_row * self.cols + config.finish_col]

    # ==================================================================
    # LOOKUP
    # ==================================================================
    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def node(self, row: int, col: int) -> Node:
        if not (_is_int(row) and _is_int(col)) or not self.in_bounds(row, col):
            raise ValidationError(f"Invalid position: row={row}, col={col}")
        return self.nodes[row * self.cols + col]

    def get(self, row: int, col: int) -> Optional[Node]:
        """Like node(), but None when out of bounds."""
        if not (_is_int(row) and _is_int(col)) or not self.in_bounds(row, col):
            return None
        return self.nodes[row * self.cols + col]

    def __iter__(self):
        return iter(self.nodes)

    def __len__(self) -> int:
        return len(self.nodes)

    # ==================================================================
    # ADJACENCY
    # ==================================================================
    def neighbors(self, node: Node) -> List[Node]:
        """Up to four orthogonal neighbours inside the grid: up, down, left, right."""
        result = []
        for d_row, d_col in DIRECTIONS:
            row, col = node.row + d_row, node.col + d_col
            if 0 <= row < self.rows and 0 <= col < self.cols:
                result.append(self.nodes[row * self.cols + col])
        return result

    def open_neighbors(self, node: Node) -> List[Node]:
        return [n for n in self.neighbors(node) if not n.is_wall]

    def is_reachable(self, source: Optional[Node] = None, target: Optional[Node] = None) -> bool:
        """Breadth-first reachability over open nodes (start → finish by default)."""
        source = source or self.start
        target = target or self.finish
        if source.is_wall or target.is_wall:
            return False
        seen  = {source.index}
        queue = deque([source])
        while queue:
            node = queue.popleft()
            if node is target:
                return True
            for nbr in self.open_neighbors(node):
                if nbr.index not in seen:
                    seen.add(nbr.index)
                    queue.append(nbr)
        return False

    # ==================================================================
    # WALLS
    # ==================================================================
    def toggle_wall(self, node: Node) -> None:
        """Flip a node's wall flag.  No-op on start / finish."""
        if node.is_start or node.is_finish:
            return
        node.is_wall = not node.is_wall

    def toggle_wall_at(self, row: int, col: int) -> Node:
        node = self.node(row, col)
        self.toggle_wall(node)
        return node

    def set_walls(self, coords: Iterable[Sequence[int]]) -> None:
        if isinstance(coords, (str, bytes)) or not isinstance(coords, Iterable):
            raise ValidationError(f"Walls must be a list of [row, col] pairs, got {coords!r}")
        for coord in coords:
            if isinstance(coord, (str, bytes)) or not isinstance(coord, Sequence) or len(coord) != 2:
                raise ValidationError(f"Wall coordinate must be [row, col], got {coord!r}")
            self.node(coord[0], coord[1]).is_wall = True

    def clear_walls(self) -> None:
        for node in self.nodes:
            node.is_wall = False

    def fill_walls(self) -> None:
        """Wall every node except start / finish."""
        for node in self.nodes:
            node.is_wall = True

    def walls(self) -> List[List[int]]:
        return [node.coord for node in self.nodes if node.is_wall]

    def wall_count(self) -> int:
        return sum(1 for node in self.nodes if node.is_wall)

    def copy_walls_from(self, other: "Grid") -> None:
        if (other.rows, other.cols) != (self.rows, self.cols):
            raise ValidationError(
                f"Cannot copy walls from a {other.rows}x{other.cols} grid "
                f"into a {self.rows}x{self.cols} grid"
            )
        for mine, theirs in zip(self.nodes, other.nodes):
            mine.is_wall = theirs.is_wall

    # ==================================================================
    # RESET (keep walls, wipe search state)
    # ==================================================================
    def reset_search_state(self) -> SearchState:
        """Clear visit / path flags and hand back fresh per-run scratch arrays."""
        for node in self.nodes:
            node.reset_search_state()
        return SearchState(len(self.nodes))

    # ==================================================================
    # SERIALISATION
    # ==================================================================
    def to_dict(self) -> Dict[str, Any]:
        return {
            "config": self.config.to_dict(),
            "walls":  self.walls(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Grid":
        if not isinstance(data, dict):
            raise ValidationError("Grid data must be an object")
        grid = create_grid(data.get("config", DEFAULT_CONFIG.to_dict()))
        grid.set_walls(data.get("walls", []))
        return grid

    def __repr__(self) -> str:
        return (
            f"Grid({self.rows}x{self.cols}, start=({self.start.row},{self.start.col}), "
            f"finish=({self.finish.row},{self.finish.col}), walls={self.wall_count()})"
        )


# ---------------------------------------------------------------------------
# Factory
# ---------------------------------------------------------------------------
def create_grid(config: Any = None) -> Grid:
    """Build a grid from a GridConfig or a plain dict.  None → DEFAULT_CONFIG."""
    if config is None:
        return Grid(DEFAULT_CONFIG)
    if isinstance(config, GridConfig):
        return Grid(config)
    return Grid(GridConfig.from_dict(config))


def ensure_grid(grid: Any) -> Grid:
    """Reject anything that is not a well-formed Grid before a run begins."""
    if not isinstance(grid, Grid):
        raise ValidationError(f"Expected a Grid, got {type(grid).__name__}")
    if len(grid.nodes) != grid.rows * grid.cols:
        raise ValidationError("Invalid grid structure")
    return grid
