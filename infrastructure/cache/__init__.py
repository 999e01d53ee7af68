from .base import CacheService
from .memory_cache import CacheEntry, InMemoryCacheService
from .redis_cache import RedisCacheService

__all__ = ['CacheEntry', 'CacheService', 'InMemoryCacheService', 'RedisCacheService']
