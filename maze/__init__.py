"""
maze/__init__.py — Maze Generator Registry
===========================================
    from maze import MAZE_REGISTRY, get_maze_generator, generate

    grid = await generate("kruskal", grid, on_carve=None, seed=7)

Every entry builds a fresh MazeGenerator; extra keyword options
(e.g. `density` for "random") go straight to the factory.
"""

from dataclasses import dataclass, field
from functools import partial
from typing import Any, Callable, Dict, List, Optional

from grid import Grid, ValidationError
from engine import CancelToken
from engine.notifier import Notifier

from maze.base         import MazeGenerator, MazeState, repair_path
from maze.union_find   import UnionFind
from maze.backtracking import RecursiveBacktrackerMaze
from maze.prims        import PrimsMaze
from maze.kruskal      import KruskalMaze
from maze.ellers       import EllersMaze
from maze.division     import RecursiveDivisionMaze
from maze.spiral       import SpiralMaze
from maze.random_fill  import RandomMaze


@dataclass
class MazeInfo:
    key:         str
    label:       str
    factory:     Callable[..., MazeGenerator]
    perfect:     bool      = False
    options:     List[str] = field(default_factory=list)
    description: str       = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "key":         self.key,
            "label":       self.label,
            "perfect":     self.perfect,
            "options":     list(self.options),
            "description": self.description,
        }


MAZE_REGISTRY: Dict[str, MazeInfo] = {

    "backtracking": MazeInfo(
        key="backtracking", label="Recursive Backtracking", factory=RecursiveBacktrackerMaze,
        perfect=True,
        description="Depth-first carving. Long, winding corridors.",
    ),

    "prims": MazeInfo(
        key="prims", label="Prim's Algorithm", factory=PrimsMaze,
        perfect=True,
        description="Grows from one cell via a random frontier. Many short dead ends.",
    ),

    "kruskal": MazeInfo(
        key="kruskal", label="Kruskal's Algorithm", factory=KruskalMaze,
        perfect=True,
        description="Removes shuffled walls between disjoint regions (union-find).",
    ),

    "ellers": MazeInfo(
        key="ellers", label="Eller's Algorithm", factory=EllersMaze,
        perfect=True,
        description="Row-by-row set merging. Needs only one row of memory.",
    ),

    "recursive_division": MazeInfo(
        key="recursive_division", label="Recursive Division", factory=RecursiveDivisionMaze,
        description="Splits chambers with walls, leaving one gap in each.",
    ),

    "recursive_division_vertical": MazeInfo(
        key="recursive_division_vertical", label="Recursive Division (Vertical Skew)",
        factory=partial(RecursiveDivisionMaze, skew="vertical"),
        description="Division that prefers vertical walls.",
    ),

    "recursive_division_horizontal": MazeInfo(
        key="recursive_division_horizontal", label="Recursive Division (Horizontal Skew)",
        factory=partial(RecursiveDivisionMaze, skew="horizontal"),
        description="Division that prefers horizontal walls.",
    ),

    "spiral": MazeInfo(
        key="spiral", label="Spiral", factory=SpiralMaze,
        description="Concentric rings with rotating gaps.",
    ),

    "random": MazeInfo(
        key="random", label="Random Walls", factory=RandomMaze,
        options=["density"],
        description="Independent random walls (density 0.3 by default).",
    ),
}


def get_maze_generator(key: str, seed: Optional[int] = None, **options: Any) -> MazeGenerator:
    info = MAZE_REGISTRY.get(key)
    if info is None:
        raise ValidationError(f"Unknown maze generator: {key}")
    unknown = set(options) - set(info.options)
    if unknown:
        raise ValidationError(f"{key} does not accept option(s): {', '.join(sorted(unknown))}")
    return info.factory(seed=seed, **options)


def list_maze_generators() -> List[MazeInfo]:
    return list(MAZE_REGISTRY.values())


async def generate(
    key: str,
    grid: Grid,
    on_carve: Optional[Notifier] = None,
    *,
    seed: Optional[int] = None,
    token: Optional[CancelToken] = None,
    **options: Any,
) -> Grid:
    """Build a one-off generator for `key` and run it on `grid`."""
    generator = get_maze_generator(key, seed=seed, **options)
    return await generator.generate(grid, on_carve, token=token)


__all__ = [
    "MazeInfo",
    "MAZE_REGISTRY",
    "MazeGenerator",
    "MazeState",
    "UnionFind",
    "RecursiveBacktrackerMaze",
    "PrimsMaze",
    "KruskalMaze",
    "EllersMaze",
    "RecursiveDivisionMaze",
    "SpiralMaze",
    "RandomMaze",
    "get_maze_generator",
    "list_maze_generators",
    "generate",
    "repair_path",
]
