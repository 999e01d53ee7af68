from domain.exceptions.currency import ExchangeStoreNotFoundError
from domain.models.currency import ExchangeEdge
from infrastructure.persistence.repositories.base import ExchangeRepository


class InMemoryExchangeRepository(ExchangeRepository):
	def __init__(self, edges: list[ExchangeEdge] | None = None, available: bool = True):
		super().__init__()
		self._edges = list(edges or [])
		self.available = available

	async def load_all(self) -> list[ExchangeEdge]:
		if not self.available:
			raise ExchangeStoreNotFoundError('In-memory exchange store is not available')
		return list(self._edges)

	async def _write_all(self, edges: list[ExchangeEdge]) -> None:
		if not self.available:
			raise ExchangeStoreNotFoundError('In-memory exchange store is not available')
		self._edges = list(edges)
