"""
competition.py — Dual-Grid Comparison Mode
===========================================
Races two search strategies against each other, each on its own grid,
as concurrent asyncio tasks.

    result = await race(
        Contender(left_grid,  "astar"),
        Contender(right_grid, "dijkstra"),
        speed="fast",
    )
    result.winner      # "left" | "right" | "tie" | "none"

Isolation:
    Each run owns its grid for the duration of the race, so the two
    grids must be distinct objects.  If either task fails, the sibling is
    cancelled and the first failure propagates to the caller.

Winner rule:
    both found a path → fewer path edges wins, then lower execution time,
                        otherwise "tie"
    only one found    → that side
    neither found     → "none"

Mazes:
    generate_pair() builds the same maze on both grids concurrently.  Both
    generators share one seed (drawn at random when none is given), so two
    grids with the same config end up with identical walls.
"""

import asyncio
import logging
import random
from dataclasses import dataclass
from typing import Any, Awaitable, Dict, List, Optional, Tuple, Union

from grid import Grid, ValidationError, ensure_grid
from engine import CancelToken, paced
from engine.notifier import Notifier
from algorithms import RunResult, get_algorithm, run
from maze import get_maze_generator

logger = logging.getLogger(__name__)

LEFT  = "left"
RIGHT = "right"
TIE   = "tie"
NONE  = "none"


# ---------------------------------------------------------------------------
# Data
# ---------------------------------------------------------------------------
@dataclass
class Contender:
    grid:      Grid
    algorithm: str
    on_visit:  Optional[Notifier] = None


@dataclass
class ComparisonResult:
    left:   RunResult
    right:  RunResult
    winner: str = NONE

    def to_dict(self) -> Dict[str, Any]:
        return {
            "left":   self.left.to_dict(),
            "right":  self.right.to_dict(),
            "winner": self.winner,
        }


# ---------------------------------------------------------------------------
# Winner
# ---------------------------------------------------------------------------
def pick_winner(left: RunResult, right: RunResult) -> str:
    if left.found and right.found:
        l_key = (left.stats.path_length,  left.stats.execution_time)
        r_key = (right.stats.path_length, right.stats.execution_time)
        if l_key == r_key:
            return TIE
        return LEFT if l_key < r_key else RIGHT
    if left.found:
        return LEFT
    if right.found:
        return RIGHT
    return NONE


# ---------------------------------------------------------------------------
# Concurrency
# ---------------------------------------------------------------------------
async def _gather_or_cancel(*coros: Awaitable[Any]) -> List[Any]:
    """Run coroutines as tasks; on the first failure cancel the rest and re-raise."""
    tasks = [asyncio.ensure_future(c) for c in coros]
    try:
        return list(await asyncio.gather(*tasks))
    except BaseException:
        for task in tasks:
            if not task.done():
                task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        raise


def _check_disjoint(left: Grid, right: Grid) -> None:
    ensure_grid(left)
    ensure_grid(right)
    if left is right:
        raise ValidationError("Comparison needs two separate grids")


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------
async def race(
    left: Contender,
    right: Contender,
    *,
    speed: Union[str, float, None] = None,
    token: Optional[CancelToken] = None,
) -> ComparisonResult:
    _check_disjoint(left.grid, right.grid)
    for contender in (left, right):
        if get_algorithm(contender.algorithm) is None:
            raise ValidationError(f"Unknown algorithm: {contender.algorithm}")

    def notifier(contender: Contender) -> Optional[Notifier]:
        if speed is None:
            return contender.on_visit
        return paced(contender.on_visit, speed)

    logger.debug("race: %s (left) vs %s (right)", left.algorithm, right.algorithm)
    l_result, r_result = await _gather_or_cancel(
        run(left.algorithm,  left.grid,  notifier(left),  token=token),
        run(right.algorithm, right.grid, notifier(right), token=token),
    )

    result = ComparisonResult(left=l_result, right=r_result, winner=pick_winner(l_result, r_result))
    logger.debug("race: winner=%s", result.winner)
    return result


async def generate_pair(
    left_grid: Grid,
    right_grid: Grid,
    maze_key: str,
    seed: Optional[int] = None,
    *,
    on_carve: Tuple[Optional[Notifier], Optional[Notifier]] = (None, None),
    token: Optional[CancelToken] = None,
    **options: Any,
) -> Tuple[Grid, Grid]:
    _check_disjoint(left_grid, right_grid)
    if seed is None:
        seed = random.randrange(2 ** 32)

    left_gen  = get_maze_generator(maze_key, seed=seed, **options)
    right_gen = get_maze_generator(maze_key, seed=seed, **options)

    l_grid, r_grid = await _gather_or_cancel(
        left_gen.generate(left_grid,  on_carve[0], token=token),
        right_gen.generate(right_grid, on_carve[1], token=token),
    )
    return l_grid, r_grid


def copy_maze(source: Grid, target: Grid) -> Grid:
    """Copy the wall layout left → right (same dimensions required)."""
    _check_disjoint(source, target)
    target.copy_walls_from(source)
    target.reset_search_state()
    return target


__all__ = [
    "Contender",
    "ComparisonResult",
    "pick_winner",
    "race",
    "generate_pair",
    "copy_maze",
    "LEFT",
    "RIGHT",
    "TIE",
    "NONE",
]
