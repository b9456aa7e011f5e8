from __future__ import annotations

import math
import threading
import time
from dataclasses import dataclass
from typing import Callable

from fridge_friend.settings import settings


@dataclass(frozen=True)
class RateLimitResult:
    allowed: bool
    retry_after: int


@dataclass
class _WindowRecord:
    count: int
    reset_at: float


class InMemoryRateLimiter:
    """Fixed-window request counter keyed by client identifier.

    State lives in this process only. Several app instances behind a load
    balancer each keep their own counts, so the effective quota grows with the
    number of instances; enforcing one quota across them needs a shared store.
    """

    def __init__(
        self,
        limit: int | None = None,
        window_sec: int | None = None,
        *,
        max_keys: int | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.limit = settings.RATE_LIMIT_MAX_REQUESTS if limit is None else limit
        self.window_sec = settings.RATE_LIMIT_WINDOW_SEC if window_sec is None else window_sec
        self.max_keys = settings.RATE_LIMIT_MAX_KEYS if max_keys is None else max_keys
        self._clock = clock
        self._records: dict[str, _WindowRecord] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._records)

    def _purge_expired(self, now: float) -> None:
        expired = [key for key, rec in self._records.items() if now > rec.reset_at]
        for key in expired:
            del self._records[key]

    def allow(self, key: str) -> RateLimitResult:
        now = self._clock()
        with self._lock:
            record = self._records.get(key)
            if record is None or now > record.reset_at:
                if record is None and len(self._records) >= self.max_keys:
                    self._purge_expired(now)
                self._records[key] = _WindowRecord(count=1, reset_at=now + self.window_sec)
                return RateLimitResult(True, 0)

            if record.count >= self.limit:
                retry_after = max(1, math.ceil(record.reset_at - now))
                return RateLimitResult(False, retry_after)

            record.count += 1
        return RateLimitResult(True, 0)

    def reset(self) -> None:
        with self._lock:
            self._records.clear()
