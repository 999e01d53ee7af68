import threading
import time
from collections.abc import Callable
from dataclasses import dataclass
from datetime import timedelta
from typing import Any

from infrastructure.cache.base import CacheService


@dataclass(frozen=True)
class CacheEntry:
    key: str
    value: Any
    expires_at: float

    def is_expired(self, now: float) -> bool:
        return now >= self.expires_at


class InMemoryCacheService(CacheService):
    """
    Process-wide in-memory cache.

    Created once by the dependency container and shared by every request.
    Expired entries are evicted lazily when read. List values are copied on the
    way in and out so callers never share a mutable list with the cache.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self._clock = clock
        self._entries: dict[str, CacheEntry] = {}
        self._lock = threading.Lock()

    async def get(self, key: str, default: Any = None) -> Any:
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return default
            if entry.is_expired(self._clock()):
                del self._entries[key]
                return default
            return _copy(entry.value)

    async def set(self, key: str, value: Any, ttl: timedelta) -> None:
        entry = CacheEntry(
            key=key,
            value=_copy(value),
            expires_at=self._clock() + ttl.total_seconds(),
        )
        with self._lock:
            self._entries[key] = entry

    async def delete(self, key: str) -> None:
        with self._lock:
            self._entries.pop(key, None)

    async def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


def _copy(value: Any) -> Any:
    return list(value) if isinstance(value, list) else value
