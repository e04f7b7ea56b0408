"""
Timer Scheduling for Deferred Session Transitions.

The session controller never sleeps; it asks a scheduler to call it back
later and keeps the returned handle so the callback can be cancelled.

Schedulers:
- AsyncioTimers: real delays on the running asyncio event loop
- ManualTimers: virtual clock advanced explicitly (tests, CLI)
"""

from __future__ import annotations

import asyncio
import heapq
import itertools
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Protocol


class TimerHandle(Protocol):
    """A scheduled callback that can be cancelled."""

    def cancel(self) -> None: ...


class TimerScheduler(Protocol):
    """Anything that can run a callback after a delay."""

    def call_later(self, delay: float, callback: Callable[[], None]) -> TimerHandle: ...


# =============================================================================
# Asyncio
# =============================================================================


class AsyncioTimers:
    """Schedules callbacks with loop.call_later on an asyncio event loop."""

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None):
        """
        Args:
            loop: Event loop to use (default: the running loop at call time)
        """
        self._loop = loop

    def call_later(self, delay: float, callback: Callable[[], None]) -> asyncio.TimerHandle:
        loop = self._loop or asyncio.get_running_loop()
        return loop.call_later(delay, callback)


# =============================================================================
# Manual Clock
# =============================================================================


@dataclass(order=True)
class ManualTimer:
    """A pending callback on a ManualTimers clock."""

    due: float
    seq: int
    callback: Callable[[], None] = field(compare=False)
    cancelled: bool = field(default=False, compare=False)

    def cancel(self) -> None:
        self.cancelled = True


class ManualTimers:
    """
    Deterministic virtual clock.

    Nothing fires until advance() or run_all() is called. Callbacks fire in
    deadline order; callbacks with the same deadline fire in the order they
    were scheduled. A callback may schedule further timers, which fire in the
    same advance() if they fall due within it.
    """

    def __init__(self) -> None:
        self.now = 0.0
        self._queue: list[ManualTimer] = []
        self._seq = itertools.count()

    def call_later(self, delay: float, callback: Callable[[], None]) -> ManualTimer:
        timer = ManualTimer(due=self.now + max(delay, 0.0), seq=next(self._seq), callback=callback)
        heapq.heappush(self._queue, timer)
        return timer

    @property
    def pending(self) -> int:
        """Number of scheduled, uncancelled callbacks."""
        return sum(1 for timer in self._queue if not timer.cancelled)

    def advance(self, seconds: float) -> int:
        """
        Move the clock forward, firing everything that falls due.

        Args:
            seconds: How far to move the clock

        Returns:
            Number of callbacks fired
        """
        target = self.now + seconds
        fired = 0
        while self._queue and self._queue[0].due <= target:
            timer = heapq.heappop(self._queue)
            if timer.cancelled:
                continue
            self.now = timer.due
            timer.callback()
            fired += 1
        self.now = target
        return fired

    def run_all(self) -> int:
        """Fire every pending callback, advancing the clock as needed."""
        fired = 0
        while self._queue:
            timer = heapq.heappop(self._queue)
            if timer.cancelled:
                continue
            self.now = max(self.now, timer.due)
            timer.callback()
            fired += 1
        return fired
