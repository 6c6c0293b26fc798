"""
Countdown timer with an injectable one-second interval source.

The countdown only keeps state; the interval source decides when a second
has passed. Tests tick it by hand, an asyncio application uses
AsyncioScheduler.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Callable, Optional, Protocol


logger = logging.getLogger(__name__)

TICK_SECONDS = 1.0


class IntervalHandle(Protocol):
    def cancel(self) -> None: ...


class IntervalScheduler(Protocol):
    def every(self, seconds: float, callback: Callable[[], None]) -> IntervalHandle: ...


class AsyncioHandle:
    def __init__(self, task: asyncio.Task):
        self._task = task

    def cancel(self) -> None:
        self._task.cancel()

    @property
    def cancelled(self) -> bool:
        return self._task.cancelled() or self._task.done()


class AsyncioScheduler:
    """Runs a callback every `seconds` on the running event loop."""

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None):
        self._loop = loop

    def every(self, seconds: float, callback: Callable[[], None]) -> AsyncioHandle:
        loop = self._loop or asyncio.get_running_loop()
        return AsyncioHandle(loop.create_task(self._run(seconds, callback)))

    async def _run(self, seconds: float, callback: Callable[[], None]) -> None:
        try:
            while True:
                await asyncio.sleep(seconds)
                callback()
        except asyncio.CancelledError:
            return


class Countdown:
    """
    Counts elapsed seconds and, for timed rounds, the seconds remaining.

    Expires exactly once when remaining reaches zero. Ticks after stop() or
    expiry are ignored, so a late callback from a cancelled interval cannot
    change anything.
    """

    def __init__(self, time_limit: Optional[int] = None, scheduler: Optional[IntervalScheduler] = None):
        self.time_limit = time_limit or 0
        self.scheduler = scheduler
        self.elapsed = 0
        self.running = False
        self.expired = False
        self._handle: Optional[IntervalHandle] = None

    @property
    def timed(self) -> bool:
        return self.time_limit > 0

    @property
    def remaining(self) -> int:
        return max(0, self.time_limit - self.elapsed) if self.timed else 0

    def start(self, on_second: Optional[Callable[[], None]] = None) -> None:
        """Start counting. `on_second` is what the scheduler calls each second."""
        if self.running:
            return
        self.running = True
        if self.scheduler is not None:
            self._handle = self.scheduler.every(TICK_SECONDS, on_second or self.tick)

    def tick(self) -> bool:
        """
        Advance one second.

        Returns:
            True if this tick expired the countdown
        """
        if not self.running:
            return False

        self.elapsed += 1
        if self.timed and self.remaining == 0:
            self.expired = True
            self.stop()
            return True
        return False

    def stop(self) -> None:
        """Stop counting and release the interval handle. Safe to call repeatedly."""
        self.running = False
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
            logger.debug("Countdown interval released after %ds", self.elapsed)
