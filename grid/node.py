from enum import Enum
from typing import List, Dict, Any


# ---------------------------------------------------------------------------
# Node State Enum: maps 1-to-1 with the visual encoding palette
# ---------------------------------------------------------------------------
class NodeState(Enum):
    UNVISITED  = "unvisited"   # default grey
    VISITED    = "visited"     # explored by the current run
    PATH       = "path"        # on the final reconstructed path
    WALL       = "wall"        # non-traversable
    START      = "start"
    FINISH     = "finish"


INF = float("inf")


# ---------------------------------------------------------------------------
# Node
# ---------------------------------------------------------------------------
class Node:
    """
    Immutable coordinates (row, col, index), mutable wall / visit flags.

    Attributes:
        row, col   : Position in the grid.
        index      : Slot in the grid's flat node arena (row * cols + col).
                     Per-run scratch data (distance, g/h/f, previous) lives in
                     a SearchState keyed by this index, never on the node.
        is_start   : Set once at grid construction.
        is_finish  : Set once at grid construction.
        is_wall    : Obstacle flag.  Start and finish can never become walls.
        is_visited : Marked by a search run the instant it visits the node.
        is_path    : Marked when the node lies on the reconstructed path.
    """

    __slots__ = ("row", "col", "index", "is_start", "is_finish", "_wall", "is_visited", "is_path")

    def __init__(
        self,
        row: int,
        col: int,
        index: int,
        is_start: bool = False,
        is_finish: bool = False,
    ):
        self.row: int         = row
        self.col: int         = col
        self.index: int       = index
        self.is_start: bool   = is_start
        self.is_finish: bool  = is_finish
        self._wall: bool      = False
        self.is_visited: bool = False
        self.is_path: bool    = False

    # ------------------------------------------------------------------
    # Wall flag: start / finish stay open whatever the caller asks
    # ------------------------------------------------------------------
    @property
    def is_wall(self) -> bool:
        return self._wall

    @is_wall.setter
    def is_wall(self, value: bool) -> None:
        if value and (self.is_start or self.is_finish):
            return
        self._wall = bool(value)

    # ------------------------------------------------------------------
    # State helpers
    # ------------------------------------------------------------------
    def reset_search_state(self) -> None:
        """Wipe visit flags — called between runs.  Walls are kept."""
        self.is_visited = False
        self.is_path    = False

    @property
    def state(self) -> NodeState:
        if self.is_start:
            return NodeState.START
        if self.is_finish:
            return NodeState.FINISH
        if self._wall:
            return NodeState.WALL
        if self.is_path:
            return NodeState.PATH
        if self.is_visited:
            return NodeState.VISITED
        return NodeState.UNVISITED

    @property
    def key(self) -> str:
        return f"{self.row},{self.col}"

    @property
    def coord(self) -> List[int]:
        return [self.row, self.col]

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    def to_dict(self) -> Dict[str, Any]:
        return {
            "row":   self.row,
            "col":   self.col,
            "state": self.state.value,
        }

    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------
    def __repr__(self) -> str:
        return f"Node(row={self.row}, col={self.col}, state={self.state.value})"
