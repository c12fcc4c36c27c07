"""
Pacing policies that throttle outbound search queries.

The aggregator consults a policy after every query; swapping the policy changes
how requests are spaced without touching aggregation logic.
"""
from __future__ import annotations

import threading
import time
from typing import Callable, List, Optional, Protocol, Sequence


class PacingPolicy(Protocol):
    def queries_for(self, queries: Sequence[str]) -> List[str]:
        ...

    def after_call(self) -> None:
        ...


def _limit_queries(queries: Sequence[str], queries_per_platform: Optional[int]) -> List[str]:
    if queries_per_platform is None:
        return list(queries)
    return list(queries[:queries_per_platform])


class FixedDelayPacing:
    """Sleep a fixed amount after every query."""

    def __init__(
        self,
        delay_seconds: float = 1.0,
        queries_per_platform: Optional[int] = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        if delay_seconds < 0:
            raise ValueError("delay_seconds must be >= 0")
        self.delay_seconds = delay_seconds
        self.queries_per_platform = queries_per_platform
        self._sleep = sleep

    def queries_for(self, queries: Sequence[str]) -> List[str]:
        return _limit_queries(queries, self.queries_per_platform)

    def after_call(self) -> None:
        if self.delay_seconds > 0:
            self._sleep(self.delay_seconds)


class MinIntervalPacing:
    """Keep at least ``min_interval`` seconds between consecutive queries."""

    def __init__(
        self,
        min_interval: float = 1.0,
        queries_per_platform: Optional[int] = None,
        sleep: Callable[[float], None] = time.sleep,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.min_interval = min_interval
        self.queries_per_platform = queries_per_platform
        self._sleep = sleep
        self._clock = clock
        self._last_hit: Optional[float] = None
        self._lock = threading.Lock()

    def queries_for(self, queries: Sequence[str]) -> List[str]:
        return _limit_queries(queries, self.queries_per_platform)

    def after_call(self) -> None:
        with self._lock:
            now = self._clock()
            if self._last_hit is not None and now - self._last_hit < self.min_interval:
                self._sleep(self.min_interval - (now - self._last_hit))
            self._last_hit = self._clock()
