from __future__ import annotations

from collections.abc import Callable
from threading import Lock
import time
from typing import Any


class ExpiringCache:
    """Key/value store whose entries read as misses once ``ttl_ms`` has elapsed.

    Stale entries are dropped when they are read and, once the store holds
    ``max_entries`` keys, on the next write.
    """

    def __init__(
        self,
        ttl_ms: int,
        *,
        max_entries: int = 256,
        clock: Callable[[], float] = time.monotonic,
    ):
        if ttl_ms <= 0:
            raise ValueError("ttl_ms must be positive.")
        self.ttl_ms = ttl_ms
        self.max_entries = max_entries
        self._clock = clock
        self._entries: dict[str, tuple[float, Any]] = {}
        self._lock = Lock()

    def _is_fresh(self, stored_at: float, now: float) -> bool:
        return (now - stored_at) * 1000.0 < self.ttl_ms

    def get(self, key: str) -> Any | None:
        now = self._clock()
        with self._lock:
            cached = self._entries.get(key)
            if cached is None:
                return None
            stored_at, value = cached
            if not self._is_fresh(stored_at, now):
                self._entries.pop(key, None)
                return None
            return value

    def set(self, key: str, value: Any) -> None:
        now = self._clock()
        with self._lock:
            if len(self._entries) >= self.max_entries and key not in self._entries:
                self._evict_stale(now)
            self._entries[key] = (now, value)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def _evict_stale(self, now: float) -> None:
        stale = [key for key, (stored_at, _) in self._entries.items() if not self._is_fresh(stored_at, now)]
        for key in stale:
            del self._entries[key]
