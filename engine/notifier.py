"""
notifier.py — Step Notification, Pacing & Cancellation
=======================================================
The step notifier is the ONLY suspension point of every search strategy
and maze generator.  The core awaits it once per visited node (or carved
batch) and never reads back anything the notifier might mutate.

    await notify(on_visit, node, token)

Cancellation is cooperative: a CancelToken is checked right before and
right after each notification, so a cancelled (or expired) run stops at
its next suspension point with RunCancelled.  Nothing is rolled back:
the grid keeps whatever the run had already marked.

Pacing:
    SPEED_PRESETS mirror the host's animation delays.  paced() wraps any
    notifier with an asyncio.sleep so two concurrent runs interleave the
    way the comparison view expects.
"""

import asyncio
import inspect
import time
from typing import Any, Awaitable, Callable, Optional, Union

from grid import ValidationError


# ---------------------------------------------------------------------------
# Speed presets (seconds per step)
# ---------------------------------------------------------------------------
SPEED_PRESETS = {
    "instant":  0.0,
    "veryfast": 0.005,
    "fast":     0.010,
    "normal":   0.030,
    "slow":     0.050,
}

Notifier = Callable[[Any], Union[None, Awaitable[None]]]


# ---------------------------------------------------------------------------
# Cancellation
# ---------------------------------------------------------------------------
class RunCancelled(Exception):
    """Raised at a suspension point once the run's CancelToken has fired."""

    def __init__(self, reason: str = "cancelled"):
        super().__init__(f"Run aborted: {reason}")
        self.reason = reason


class CancelToken:
    """
    Attributes:
        timeout : Optional seconds after creation at which the token expires.
    """

    def __init__(self, timeout: Optional[float] = None):
        self.timeout:    Optional[float] = timeout
        self._deadline:  Optional[float] = None if timeout is None else time.monotonic() + timeout
        self._cancelled: bool            = False

    def cancel(self) -> None:
        self._cancelled = True

    @property
    def expired(self) -> bool:
        return self._deadline is not None and time.monotonic() >= self._deadline

    @property
    def cancelled(self) -> bool:
        return self._cancelled or self.expired

    def raise_if_cancelled(self) -> None:
        if self._cancelled:
            raise RunCancelled("cancelled")
        if self.expired:
            raise RunCancelled("timeout")


# ---------------------------------------------------------------------------
# Notification
# ---------------------------------------------------------------------------
async def notify(callback: Optional[Notifier], payload: Any, token: Optional[CancelToken] = None) -> None:
    """Invoke a sync or async notifier and wait for it to finish."""
    if token is not None:
        token.raise_if_cancelled()
    if callback is not None:
        result = callback(payload)
        if inspect.isawaitable(result):
            await result
    if token is not None:
        token.raise_if_cancelled()


def step_delay(speed: Union[str, float, None]) -> float:
    if speed is None:
        return 0.0
    if isinstance(speed, str):
        if speed not in SPEED_PRESETS:
            raise ValidationError(f"Unknown speed preset: {speed}")
        return SPEED_PRESETS[speed]
    return max(0.0, float(speed))


def paced(callback: Optional[Notifier] = None, speed: Union[str, float, None] = "normal") -> Notifier:
    """Wrap a notifier so every step also sleeps for the preset delay."""
    delay = step_delay(speed)

    async def _paced(payload: Any) -> None:
        await notify(callback, payload)
        await asyncio.sleep(delay)

    return _paced
