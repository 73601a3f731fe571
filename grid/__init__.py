"""
grid/
-----
Core data layer.  Public API:

    from grid import Grid, GridConfig, create_grid, DEFAULT_CONFIG
    from grid import Node, NodeState, SearchState, ValidationError
"""

from grid.errors  import ValidationError
from grid.node    import Node, NodeState, INF
from grid.scratch import SearchState
from grid.grid    import Grid, GridConfig, DEFAULT_CONFIG, DIRECTIONS, create_grid, ensure_grid

__all__ = [
    "Node",        "NodeState",   "INF",
    "SearchState",
    "Grid",        "GridConfig",  "DEFAULT_CONFIG", "DIRECTIONS",
    "create_grid", "ensure_grid",
    "ValidationError",
]
