import logging
from datetime import timedelta
from decimal import Decimal

from domain.exceptions.currency import NoPathFoundError
from domain.models.currency import ConversionStep, CurrencyCode, ExchangeEdge
from domain.services.graph import (
	build_graph,
	compose_conversion,
	distinct_currencies,
	find_shortest_path,
	neighbors_of,
)
from domain.services.validation import ConnectionValidator
from infrastructure.cache.base import CacheService
from infrastructure.persistence.repositories.base import ExchangeRepository

logger = logging.getLogger(__name__)

EXCHANGES_CACHE_KEY = 'exchanges'
CURRENCIES_CACHE_KEY = 'currencies'


class ExchangeGraphService:
	"""
	Resolves conversions over the known exchange edges.

	Reads go through the cache: the edge list under one key, the derived
	currency set under another with a shorter TTL. Graphs are rebuilt from the
	current edge snapshot on every resolution and never shared.
	"""

	def __init__(
		self,
		repository: ExchangeRepository,
		cache: CacheService,
		validator: ConnectionValidator,
		exchanges_ttl: timedelta = timedelta(seconds=60),
		currencies_ttl: timedelta = timedelta(seconds=30),
	):
		self.repository = repository
		self.cache = cache
		self.validator = validator
		self.exchanges_ttl = exchanges_ttl
		self.currencies_ttl = currencies_ttl

	async def list_exchanges(self) -> list[ExchangeEdge]:
		return await self.cache.get_or_compute(
			EXCHANGES_CACHE_KEY, self.repository.load_all, self.exchanges_ttl
		)

	async def list_currencies(self) -> list[CurrencyCode]:
		return await self.cache.get_or_compute(
			CURRENCIES_CACHE_KEY, self._build_currency_list, self.currencies_ttl
		)

	async def neighbors(self, code: CurrencyCode) -> list[CurrencyCode]:
		exchanges = await self.list_exchanges()
		return neighbors_of(exchanges, code)

	async def shortest_path(
		self, from_currency: CurrencyCode, to_currency: CurrencyCode, amount: Decimal
	) -> list[ConversionStep]:
		if from_currency == to_currency:
			raise NoPathFoundError(from_currency.code, to_currency.code)

		exchanges = await self.list_exchanges()
		graph = build_graph(exchanges)

		path = find_shortest_path(graph, from_currency, to_currency)
		if path is None or len(path) < 2:
			raise NoPathFoundError(from_currency.code, to_currency.code)

		logger.debug(f'Resolved {from_currency} -> {to_currency} via {" -> ".join(map(str, path))}')
		return compose_conversion(path, amount, exchanges)

	async def create_connections(self, proposed: list[ExchangeEdge]) -> list[ExchangeEdge]:
		"""
		Validate, append and persist new edges; returns the accepted edges.

		The whole read-validate-write runs under the repository write lock and
		validates against the stored edges, not the cached copy, so concurrent
		callers each see the previous caller's edges. The exchanges cache is
		refreshed before the lock is released.
		"""
		async with self.repository.writing():
			exchanges = await self.repository.load_all()

			accepted = self.validator.validate(list(proposed), exchanges)
			updated = [*exchanges, *accepted]

			await self.repository.store(updated)
			await self.cache.set(EXCHANGES_CACHE_KEY, updated, self.exchanges_ttl)

		logger.info(
			f'Added {len(accepted)} exchange connection(s) under {self.validator.policy.value} policy'
		)
		return accepted

	async def _build_currency_list(self) -> list[CurrencyCode]:
		exchanges = await self.list_exchanges()
		return distinct_currencies(exchanges)
