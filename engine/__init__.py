"""
engine/
-------
Run machinery shared by search strategies and maze generators.

    from engine import StatsTracker, RunStats
    from engine import notify, paced, CancelToken, RunCancelled
"""

from engine.stats    import StatsTracker, RunStats, manhattan_distance
from engine.notifier import (
    SPEED_PRESETS,
    CancelToken,
    RunCancelled,
    notify,
    paced,
    step_delay,
)

__all__ = [
    "StatsTracker",
    "RunStats",
    "manhattan_distance",
    "SPEED_PRESETS",
    "CancelToken",
    "RunCancelled",
    "notify",
    "paced",
    "step_delay",
]
