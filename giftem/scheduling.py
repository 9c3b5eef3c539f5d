"""
Delayed callbacks for simulated backend behaviour.

'Scheduler' is the seam between services and time. 'LoopScheduler' runs
callbacks on the running asyncio event loop, so a callback never interleaves
with another mutation. 'ManualScheduler' keeps a virtual clock that tests move
forward with 'advance', firing due callbacks in due-time order.
"""

import asyncio
import heapq
import itertools
import logging
from abc import ABC, abstractmethod
from datetime import datetime, timedelta, timezone
from typing import Callable, List, Optional, Tuple

logger = logging.getLogger(__name__)

Callback = Callable[[], None]


class ScheduledTask:
    """Handle to a pending callback."""

    def __init__(self, callback: Callback, due_at: datetime):
        self.callback = callback
        self.due_at = due_at
        self.cancelled = False
        self._handle: Optional[asyncio.TimerHandle] = None

    def attach(self, handle: asyncio.TimerHandle) -> None:
        """Bind the event-loop timer that runs this task."""
        self._handle = handle
        if self.cancelled:
            handle.cancel()

    def cancel(self) -> None:
        self.cancelled = True
        if self._handle is not None:
            self._handle.cancel()

    def _run(self) -> None:
        if self.cancelled:
            return
        self.callback()


class Scheduler(ABC):
    """Abstract source of time and delayed execution."""

    @abstractmethod
    def now(self) -> datetime:
        """Return the current time (timezone-aware, UTC)."""

    @abstractmethod
    def call_later(self, delay: float, callback: Callback) -> ScheduledTask:
        """Run 'callback' once after 'delay' seconds; never blocks the caller."""


class LoopScheduler(Scheduler):
    """Scheduler backed by the running asyncio event loop."""

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None):
        self._loop = loop

    def now(self) -> datetime:
        return datetime.now(timezone.utc)

    def call_later(self, delay: float, callback: Callback) -> ScheduledTask:
        loop = self._loop or asyncio.get_running_loop()
        task = ScheduledTask(callback, self.now() + timedelta(seconds=delay))
        task.attach(loop.call_later(delay, task._run))
        return task


class ManualScheduler(Scheduler):
    """Virtual-clock scheduler; nothing fires until 'advance' is called."""

    def __init__(self, start: Optional[datetime] = None):
        self._now = start or datetime(2025, 1, 1, tzinfo=timezone.utc)
        self._queue: List[Tuple[datetime, int, ScheduledTask]] = []
        self._counter = itertools.count()

    def now(self) -> datetime:
        return self._now

    def call_later(self, delay: float, callback: Callback) -> ScheduledTask:
        task = ScheduledTask(callback, self._now + timedelta(seconds=delay))
        heapq.heappush(self._queue, (task.due_at, next(self._counter), task))
        return task

    @property
    def pending(self) -> int:
        """Number of callbacks that are neither fired nor cancelled."""
        return sum(1 for _, _, task in self._queue if not task.cancelled)

    def advance(self, seconds: float) -> int:
        """Move the clock forward, firing every callback that comes due.

        Returns the number of callbacks that ran.
        """
        target = self._now + timedelta(seconds=seconds)
        fired = 0
        while self._queue and self._queue[0][0] <= target:
            due_at, _, task = heapq.heappop(self._queue)
            self._now = due_at
            if task.cancelled:
                continue
            task._run()
            fired += 1
        self._now = target
        logger.debug("Virtual clock advanced to %s, %d callbacks fired", target, fired)
        return fired
