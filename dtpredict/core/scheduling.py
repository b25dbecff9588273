"""
Delayed completions for the prediction cycle.

The engine never sleeps itself; it hands a callback and a delay to a
scheduler and gets a future back. ``AsyncioScheduler`` runs on the serving
event loop. ``ManualScheduler`` keeps a virtual clock that only moves when
``advance`` is called, for offline replay and tests.
"""

import asyncio
import heapq
import itertools
from concurrent.futures import Future
from typing import Any, Callable, Protocol


class Scheduler(Protocol):
    def schedule(self, delay: float, callback: Callable[[], Any]) -> Any:
        ...


def _resolve(fut, callback: Callable[[], Any]):
    try:
        result = callback()
    except Exception as exc:
        fut.set_exception(exc)
    else:
        fut.set_result(result)


class AsyncioScheduler:
    """Schedules on the running event loop; must be called from a coroutine."""

    def schedule(self, delay: float, callback: Callable[[], Any]) -> asyncio.Future:
        loop = asyncio.get_running_loop()
        fut = loop.create_future()
        loop.call_later(max(delay, 0.0), _resolve, fut, callback)
        return fut


class ManualScheduler:
    def __init__(self):
        self.now = 0.0
        self._queue: list[tuple[float, int, Callable[[], Any], Future]] = []
        self._seq = itertools.count()

    def schedule(self, delay: float, callback: Callable[[], Any]) -> Future:
        fut: Future = Future()
        heapq.heappush(self._queue, (self.now + max(delay, 0.0), next(self._seq), callback, fut))
        return fut

    @property
    def pending(self) -> int:
        return len(self._queue)

    def advance(self, seconds: float | None = None) -> int:
        """Move the clock forward and fire what became due; returns how many fired.

        With no argument, jumps to the last pending deadline.
        """
        if seconds is None:
            target = max((due for due, *_ in self._queue), default=self.now)
        else:
            target = self.now + seconds
        fired = 0
        while self._queue and self._queue[0][0] <= target:
            due, _, callback, fut = heapq.heappop(self._queue)
            self.now = due
            _resolve(fut, callback)
            fired += 1
        self.now = max(self.now, target)
        return fired
