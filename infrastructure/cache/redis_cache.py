import json
import logging
from datetime import timedelta
from typing import Any

from redis import asyncio as redis
from redis.exceptions import RedisError

from domain.exceptions.currency import CacheError, InvalidArgumentError
from domain.models.currency import CurrencyCode, ExchangeEdge
from infrastructure.cache.base import CacheService

logger = logging.getLogger(__name__)


class RedisCacheService(CacheService):
    def __init__(self, redis_client: redis.Redis, key_prefix: str = 'currency-graph'):
        self.redis = redis_client
        self.key_prefix = key_prefix

    def _make_key(self, key: str) -> str:
        return f'{self.key_prefix}:{key}'

    async def get(self, key: str, default: Any = None) -> Any:
        redis_key = self._make_key(key)
        try:
            data = await self.redis.get(redis_key)
        except RedisError as e:
            logger.warning(f'Redis read failed for {redis_key}: {e}')
            return default

        if not data:
            return default

        try:
            return deserialize(data)
        except CacheError as e:
            logger.warning(f'Discarding cached value for {redis_key}: {e}')
            return default

    async def set(self, key: str, value: Any, ttl: timedelta) -> None:
        redis_key = self._make_key(key)
        try:
            await self.redis.setex(redis_key, ttl, serialize(value))
        except RedisError as e:
            logger.warning(f'Redis write failed for {redis_key}: {e}')

    async def delete(self, key: str) -> None:
        try:
            await self.redis.delete(self._make_key(key))
        except RedisError as e:
            logger.warning(f'Redis delete failed for {key}: {e}')

    async def clear(self) -> None:
        try:
            keys = [k async for k in self.redis.scan_iter(match=self._make_key('*'))]
            if keys:
                await self.redis.delete(*keys)
        except RedisError as e:
            logger.warning(f'Redis clear failed: {e}')


def _encode(value: Any) -> Any:
    if isinstance(value, ExchangeEdge):
        return {
            'type': 'exchange',
            'from_currency': value.from_currency.code,
            'to_currency': value.to_currency.code,
            'rate': str(value.rate),
        }
    if isinstance(value, CurrencyCode):
        return {'type': 'currency', 'code': value.code}
    if isinstance(value, (list, tuple)):
        return [_encode(v) for v in value]
    return value


def _decode(value: Any) -> Any:
    if isinstance(value, list):
        return [_decode(v) for v in value]
    if isinstance(value, dict):
        kind = value.get('type')
        if kind == 'exchange':
            return ExchangeEdge(
                from_currency=value['from_currency'],
                to_currency=value['to_currency'],
                rate=value['rate'],
            )
        if kind == 'currency':
            return CurrencyCode(value['code'])
    return value


def serialize(value: Any) -> str:
    return json.dumps(_encode(value))


def deserialize(data: str) -> Any:
    try:
        return _decode(json.loads(data))
    except json.JSONDecodeError as e:
        raise CacheError(f'Invalid json data: {e}') from e
    except (KeyError, InvalidArgumentError) as e:
        raise CacheError(f'Invalid cached entry: {e}') from e
