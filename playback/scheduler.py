"""
scheduler.py — Single-Shot Timers for Auto-Advance
====================================================
The PlaybackController never sleeps or loops; it asks a Scheduler for a
cancellable single-shot callback and lets the host decide what "later"
means.

    handle = scheduler.call_later(500, callback)
    handle.cancel()

Two hosts are supported:

  TickScheduler      – cooperative.  The host calls
                       tick() from its own loop (a web page polling
                       /api/tick, a game loop, a test with a fake clock)
                       and every callback whose deadline has passed runs
                       right there, on the caller's thread.
  ThreadingScheduler – threading.Timer under the hood, for hosts that
                       have no loop of their own.
"""

import itertools
import threading
import time
from typing import Callable, List, Protocol


class Handle(Protocol):
    def cancel(self) -> None: ...


class Scheduler(Protocol):
    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> Handle: ...


# ---------------------------------------------------------------------------
# TickScheduler
# ---------------------------------------------------------------------------
class _TickHandle:
    __slots__ = ("due", "seq", "callback", "cancelled")

    def __init__(self, due: float, seq: int, callback: Callable[[], None]):
        self.due       = due
        self.seq       = seq
        self.callback  = callback
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


def monotonic_ms() -> float:
    return time.monotonic() * 1000.0


class TickScheduler:
    """
    Attributes:
        clock : Zero-argument callable returning milliseconds (monotonic_ms by default).

    call_later, tick and pending are safe to call from different threads.
    The handle list is guarded by a lock; callbacks run outside it.
    """

    def __init__(self, clock: Callable[[], float] = monotonic_ms):
        self.clock = clock
        self._pending: List[_TickHandle] = []
        self._seq = itertools.count()
        self._lock = threading.Lock()

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> _TickHandle:
        with self._lock:
            handle = _TickHandle(self.clock() + delay_ms, next(self._seq), callback)
            self._pending.append(handle)
        return handle

    def tick(self) -> int:
        """
        Run every callback that is due, oldest deadline first.  Callbacks
        scheduled while ticking wait for a later tick.  Returns the number
        of callbacks run.
        """
        with self._lock:
            now = self.clock()
            due: List[_TickHandle] = []
            keep: List[_TickHandle] = []
            for h in self._pending:
                if h.cancelled:
                    continue
                (due if h.due <= now else keep).append(h)
            self._pending = keep
        if not due:
            return 0

        fired = 0
        for handle in sorted(due, key=lambda h: (h.due, h.seq)):
            # an earlier callback in this batch may have cancelled it
            if handle.cancelled:
                continue
            handle.cancelled = True
            handle.callback()
            fired += 1
        return fired

    @property
    def pending(self) -> int:
        with self._lock:
            return sum(1 for h in self._pending if not h.cancelled)


# ---------------------------------------------------------------------------
# ThreadingScheduler
# ---------------------------------------------------------------------------
class ThreadingScheduler:
    """Each call_later starts a daemon threading.Timer."""

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> threading.Timer:
        timer = threading.Timer(delay_ms / 1000.0, callback)
        timer.daemon = True
        timer.start()
        return timer
