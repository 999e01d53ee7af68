import logging
from typing import Annotated

from fastapi import Depends
from redis.asyncio import Redis

from application.services import ConversionService, ExchangeGraphService
from config.settings import Settings, get_settings
from domain.services.validation import ConnectionValidator, get_connection_validator
from infrastructure.cache import CacheService, InMemoryCacheService, RedisCacheService
from infrastructure.persistence.database import Database
from infrastructure.persistence.repositories import (
	ExchangeRepository,
	JsonExchangeRepository,
	SqlExchangeRepository,
)

logger = logging.getLogger(__name__)


class AppDependencies:
	"""Container for application-wide singleton dependencies."""

	db: Database | None = None
	redis_client: Redis | None = None
	cache: CacheService | None = None
	repository: ExchangeRepository | None = None
	validator: ConnectionValidator | None = None


deps = AppDependencies()


def init_dependencies(settings: Settings | None = None) -> None:
	"""Initialize all singleton dependencies. Called at app startup."""
	logger.info('Initializing dependencies...')
	settings = settings or get_settings()

	if settings.CACHE_BACKEND == 'redis':
		deps.redis_client = Redis.from_url(settings.REDIS_URL, decode_responses=True)
		deps.cache = RedisCacheService(deps.redis_client)
	else:
		deps.cache = InMemoryCacheService()

	if settings.EXCHANGE_STORE == 'sql':
		deps.db = Database(settings.DATABASE_URL, echo=settings.LOG_LEVEL.upper() == 'DEBUG')
		deps.repository = SqlExchangeRepository(deps.db)
	else:
		deps.repository = JsonExchangeRepository(settings.EXCHANGE_FILE_PATH)

	deps.validator = get_connection_validator(settings.CONNECTION_POLICY)
	logger.info(
		f'Dependencies initialized (cache={settings.CACHE_BACKEND}, '
		f'store={settings.EXCHANGE_STORE}, policy={deps.validator.policy.value})'
	)


async def bootstrap() -> None:
	"""Prepare the exchange store. Called after init_dependencies() at startup."""
	logger.info('Bootstrapping application...')

	if deps.repository is None:
		raise RuntimeError('Dependencies not initialized. Call init_dependencies() first.')

	if deps.db is not None:
		await deps.db.create_tables()
		logger.info('Database tables created')
	elif isinstance(deps.repository, JsonExchangeRepository):
		await deps.repository.ensure_store()

	logger.info('Bootstrap complete')


async def cleanup_dependencies() -> None:
	logger.info('Cleaning up dependencies...')

	if deps.cache:
		await deps.cache.clear()
	if deps.redis_client:
		await deps.redis_client.aclose()
	if deps.db:
		await deps.db.close()

	deps.db = None
	deps.redis_client = None
	deps.cache = None
	deps.repository = None
	deps.validator = None

	logger.info('Cleanup complete')


def get_cache() -> CacheService:
	if deps.cache is None:
		raise RuntimeError('Cache not initialized')
	return deps.cache


def get_repository() -> ExchangeRepository:
	if deps.repository is None:
		raise RuntimeError('Exchange repository not initialized')
	return deps.repository


def get_validator() -> ConnectionValidator:
	if deps.validator is None:
		raise RuntimeError('Connection validator not initialized')
	return deps.validator


async def get_exchange_service(
	repository: Annotated[ExchangeRepository, Depends(get_repository)],
	cache: Annotated[CacheService, Depends(get_cache)],
	validator: Annotated[ConnectionValidator, Depends(get_validator)],
	settings: Annotated[Settings, Depends(get_settings)],
) -> ExchangeGraphService:
	return ExchangeGraphService(
		repository=repository,
		cache=cache,
		validator=validator,
		exchanges_ttl=settings.exchanges_cache_ttl,
		currencies_ttl=settings.currencies_cache_ttl,
	)


async def get_conversion_service(
	graph_service: Annotated[ExchangeGraphService, Depends(get_exchange_service)],
) -> ConversionService:
	return ConversionService(graph_service=graph_service)
