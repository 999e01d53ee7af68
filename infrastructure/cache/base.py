import logging
from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable
from datetime import timedelta
from typing import Any, TypeVar

T = TypeVar('T')

logger = logging.getLogger(__name__)


class CacheService(ABC):
    """
    Key/value cache with per-entry expiration.

    The cache is best-effort: backends report any retrieval problem as a miss
    rather than raising to the caller.
    """

    @abstractmethod
    async def get(self, key: str, default: Any = None) -> Any:
        ...

    @abstractmethod
    async def set(self, key: str, value: Any, ttl: timedelta) -> None:
        ...

    @abstractmethod
    async def delete(self, key: str) -> None:
        ...

    @abstractmethod
    async def clear(self) -> None:
        ...

    async def get_or_compute(
        self, key: str, compute: Callable[[], Awaitable[list[T]]], ttl: timedelta
    ) -> list[T]:
        """
        Return the cached list for `key`, or compute, store and return it.

        Empty results are returned but never stored, so the next call fetches
        again instead of serving an empty list for a whole TTL window.
        """
        cached = await self.get(key)
        if cached:
            logger.debug(f'Cache hit for {key}')
            return cached

        logger.debug(f'Cache miss for {key}')
        data = await compute()
        if data:
            await self.set(key, data, ttl)
        return list(data or [])
