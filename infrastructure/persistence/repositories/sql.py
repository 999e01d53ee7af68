from sqlalchemy import delete
from sqlalchemy.future import select

from domain.exceptions.currency import (
	ExchangeStoreCorruptedError,
	ExchangeStoreNotFoundError,
	InvalidArgumentError,
)
from domain.models.currency import ExchangeEdge
from infrastructure.persistence.database import Database
from infrastructure.persistence.models.exchange import ExchangeEdgeDB
from infrastructure.persistence.repositories.base import ExchangeRepository


class SqlExchangeRepository(ExchangeRepository):
	def __init__(self, database: Database):
		super().__init__()
		self.db = database

	async def _ensure_table(self) -> None:
		if not await self.db.has_exchange_table():
			raise ExchangeStoreNotFoundError(
				f'Table {ExchangeEdgeDB.__tablename__} not found.'
			)

	async def load_all(self) -> list[ExchangeEdge]:
		await self._ensure_table()

		async with self.db.session() as session:
			result = await session.execute(
				select(ExchangeEdgeDB).order_by(ExchangeEdgeDB.position, ExchangeEdgeDB.id)
			)
			db_edges = result.scalars().all()

		try:
			return [
				ExchangeEdge(from_currency=e.from_currency, to_currency=e.to_currency, rate=e.rate)
				for e in db_edges
			]
		except InvalidArgumentError as e:
			raise ExchangeStoreCorruptedError(
				f'Table {ExchangeEdgeDB.__tablename__} holds an invalid edge: {e}'
			) from e

	async def _write_all(self, edges: list[ExchangeEdge]) -> None:
		await self._ensure_table()

		async with self.db.session() as session:
			await session.execute(delete(ExchangeEdgeDB))
			session.add_all(
				[
					ExchangeEdgeDB(
						position=position,
						from_currency=edge.from_currency.code,
						to_currency=edge.to_currency.code,
						rate=edge.rate,
					)
					for position, edge in enumerate(edges)
				]
			)
