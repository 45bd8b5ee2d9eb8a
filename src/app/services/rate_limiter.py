"""
Sliding-window rate limiter.

NOTE:
- State is per process. With several workers or pods each instance
  enforces its own limit; swap in a shared store for global limits.
"""

import math
import threading
import time
from collections import deque
from dataclasses import dataclass
from typing import Callable, Deque, Dict, Optional


@dataclass(frozen=True)
class RateLimitDecision:
    allowed: bool
    count: int
    limit: int
    retry_after: int


class SlidingWindowRateLimiter:
    """
    Per-key request timestamps inside a sliding window.

    Thread-safe: the read-evict-compare-append sequence runs under one lock.
    The instance is owned by whoever creates it (the app keeps one on
    `app.state`), so tests get a fresh one per app.
    """

    def __init__(self, clock: Callable[[], float] = time.time):
        self._clock = clock
        self._lock = threading.Lock()
        self._hits: Dict[str, Deque[float]] = {}

    def _now_ms(self) -> float:
        return self._clock() * 1000

    def hit(self, key: str, window_ms: int, max_requests: int) -> RateLimitDecision:
        """
        Count one request for `key`.

        A rejected request is not recorded, so a client that keeps retrying
        regains access as soon as its oldest accepted request leaves the window.
        """
        now = self._now_ms()
        window_start = now - window_ms
        retry_after = math.ceil(window_ms / 1000)

        with self._lock:
            q = self._hits.setdefault(key, deque())
            while q and q[0] <= window_start:
                q.popleft()

            if len(q) >= max_requests:
                return RateLimitDecision(
                    allowed=False, count=len(q), limit=max_requests, retry_after=retry_after
                )

            q.append(now)
            return RateLimitDecision(
                allowed=True, count=len(q), limit=max_requests, retry_after=retry_after
            )

    def release(self, key: str) -> None:
        """Take back the most recent hit for `key`, e.g. once a login succeeds."""
        with self._lock:
            q = self._hits.get(key)
            if q:
                q.pop()

    def count(self, key: str, window_ms: int) -> int:
        """Requests currently inside the window for `key`."""
        window_start = self._now_ms() - window_ms
        with self._lock:
            q = self._hits.get(key)
            if not q:
                return 0
            return sum(1 for ts in q if ts > window_start)

    def reset(self, key: Optional[str] = None) -> None:
        """Forget one key, or everything."""
        with self._lock:
            if key is None:
                self._hits.clear()
            else:
                self._hits.pop(key, None)
