#!/usr/bin/env python3
"""
In-memory per-client rate limiting (token bucket)
"""

import threading
import time
from dataclasses import dataclass
from typing import Callable, Dict, Optional

from .config import config


@dataclass
class TokenBucket:
    """Tokens left for one client and when they were last refilled"""
    tokens: float
    last_refill: float
    last_seen: float


class MemoryRateLimiter:
    """Token-bucket limiter keyed by client identifier"""

    def __init__(self, rate: Optional[float] = None, burst: Optional[int] = None,
                 expires_in: float = config.RATE_LIMIT['expires_in_seconds'],
                 clock: Callable[[], float] = time.monotonic):
        self.rate = rate if rate is not None else config.get_rate_limit()
        self.burst = burst if burst is not None else config.get_rate_burst()
        if self.rate <= 0 or self.burst < 1:
            raise ValueError("Rate and burst must be positive")
        self.expires_in = expires_in
        self._clock = clock
        self._buckets: Dict[str, TokenBucket] = {}
        self._lock = threading.Lock()
        self._last_cleanup = clock()

    def allow(self, identifier: str) -> bool:
        """Consume one token for ``identifier``; False when the client is over its limit"""
        now = self._clock()
        with self._lock:
            self._cleanup(now)

            bucket = self._buckets.get(identifier)
            if bucket is None:
                bucket = TokenBucket(tokens=float(self.burst), last_refill=now, last_seen=now)
                self._buckets[identifier] = bucket
            else:
                elapsed = now - bucket.last_refill
                bucket.tokens = min(float(self.burst), bucket.tokens + elapsed * self.rate)
                bucket.last_refill = now
            bucket.last_seen = now

            if bucket.tokens < 1.0:
                return False
            bucket.tokens -= 1.0
            return True

    def _cleanup(self, now: float):
        if now - self._last_cleanup < self.expires_in:
            return
        self._last_cleanup = now
        stale = [key for key, bucket in self._buckets.items() if now - bucket.last_seen > self.expires_in]
        for key in stale:
            del self._buckets[key]

    def __len__(self) -> int:
        return len(self._buckets)
