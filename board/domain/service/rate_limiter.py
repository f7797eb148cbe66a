"""Per-client submission rate limiting."""

import time
from abc import ABC, abstractmethod
from collections import OrderedDict, deque
from typing import Callable


class RateLimiter(ABC):
    """Decides whether a client may submit again.

    ``check`` never changes the recorded history; callers ``record`` only
    once a submission has been accepted, so rejected submissions do not
    consume budget.
    """

    @abstractmethod
    def check(self, key: str) -> bool:
        """Return True if ``key`` is below its limit in the current window."""
        pass

    @abstractmethod
    def record(self, key: str) -> None:
        """Record one accepted submission for ``key``."""
        pass


class SlidingWindowRateLimiter(RateLimiter):
    """In-process limiter keeping a timestamp log per key.

    A key is allowed while fewer than ``limit`` of its events fall inside the
    trailing ``window_seconds``. Logs are pruned lazily on every check; keys
    whose log becomes empty are forgotten, and when more than
    ``max_tracked_keys`` keys are held the least recently used one is evicted.

    All methods are synchronous and never await, so within a single event
    loop no two requests can interleave inside them.
    """

    def __init__(
        self,
        limit: int,
        window_seconds: float,
        max_tracked_keys: int = 10_000,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize rate limiter.

        Args:
            limit: Maximum events per key inside the window
            window_seconds: Length of the trailing window
            max_tracked_keys: Capacity of the key table
            clock: Source of monotonic time in seconds
        """
        if limit < 1:
            raise ValueError("limit must be at least 1")
        if window_seconds <= 0:
            raise ValueError("window_seconds must be positive")
        if max_tracked_keys < 1:
            raise ValueError("max_tracked_keys must be at least 1")

        self.limit = limit
        self.window_seconds = window_seconds
        self.max_tracked_keys = max_tracked_keys
        self._clock = clock
        self._events: OrderedDict[str, deque[float]] = OrderedDict()

    def check(self, key: str) -> bool:
        """Prune expired events for ``key`` and compare the rest to the limit."""
        events = self._prune(key, self._clock())
        return events is None or len(events) < self.limit

    def record(self, key: str) -> None:
        """Append the current time to the log for ``key``."""
        now = self._clock()
        events = self._prune(key, now)
        if events is None:
            events = deque()
            self._events[key] = events
        events.append(now)
        self._events.move_to_end(key)

        while len(self._events) > self.max_tracked_keys:
            self._events.popitem(last=False)

    def tracked_keys(self) -> int:
        """Number of keys currently held in memory."""
        return len(self._events)

    def _prune(self, key: str, now: float) -> deque[float] | None:
        events = self._events.get(key)
        if events is None:
            return None

        while events and now - events[0] >= self.window_seconds:
            events.popleft()

        if not events:
            del self._events[key]
            return None
        return events
