"""Fixed-window request counters keyed by client address."""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass
from typing import Callable, Dict, Tuple

FIFTEEN_MINUTES = 15 * 60


@dataclass
class RateLimitResult:
    allowed: bool
    limit: int
    remaining: int
    reset_in: float


class FixedWindowLimiter:
    """Allow ``limit`` hits per ``window`` seconds per key.

    The window for a key starts at its first hit and is replaced by a new
    one once it expires. Expired windows are swept out at most once per
    ``window`` so one-time visitors do not accumulate. ``hit`` is safe to
    call from concurrent requests.
    """

    def __init__(
        self,
        limit: int,
        window: float = FIFTEEN_MINUTES,
        message: str = "Too many requests from this IP, please try again later.",
        clock: Callable[[], float] = time.monotonic,
    ):
        if limit < 1:
            raise ValueError("limit must be >= 1")
        self.limit = limit
        self.window = window
        self.message = message
        self._clock = clock
        self._lock = threading.Lock()
        self._windows: Dict[str, Tuple[float, int]] = {}
        self._last_sweep = clock()

    def tracked(self) -> int:
        """Number of addresses with a tracked window."""
        with self._lock:
            return len(self._windows)

    def _sweep(self, now: float) -> None:
        expired = [k for k, (started, _) in self._windows.items() if now - started >= self.window]
        for key in expired:
            del self._windows[key]
        self._last_sweep = now

    def hit(self, key: str) -> RateLimitResult:
        now = self._clock()
        with self._lock:
            if now - self._last_sweep >= self.window:
                self._sweep(now)
            started, count = self._windows.get(key, (now, 0))
            if now - started >= self.window:
                started, count = now, 0
            count += 1
            self._windows[key] = (started, count)
        reset_in = max(0.0, started + self.window - now)
        return RateLimitResult(
            allowed=count <= self.limit,
            limit=self.limit,
            remaining=max(0, self.limit - count),
            reset_in=reset_in,
        )

    def reset(self, key: str | None = None) -> None:
        with self._lock:
            if key is None:
                self._windows.clear()
            else:
                self._windows.pop(key, None)
