import asyncio
import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable
from contextlib import asynccontextmanager

from domain.models.currency import ExchangeEdge

logger = logging.getLogger(__name__)


class ExchangeRepository(ABC):
	"""
	Durable, ordered list of exchange edges.

	The whole list is read at once and replaced at once. Writes go through a
	per-instance lock so two replacements never interleave; repositories are
	expected to be process singletons for that lock to cover every writer.
	"""

	def __init__(self):
		self._write_lock = asyncio.Lock()

	@abstractmethod
	async def load_all(self) -> list[ExchangeEdge]:
		...

	@abstractmethod
	async def _write_all(self, edges: list[ExchangeEdge]) -> None:
		...

	async def replace_all(self, edges: Iterable[ExchangeEdge]) -> None:
		async with self.writing():
			await self.store(edges)

	@asynccontextmanager
	async def writing(self):
		"""
		Hold the write lock across a read-validate-write sequence.

		Inside the block, read with load_all() and persist with store();
		replace_all() must not be called there since the lock is not reentrant.
		"""
		async with self._write_lock:
			yield self

	async def store(self, edges: Iterable[ExchangeEdge]) -> None:
		"""Persist a full snapshot. Callers must be inside writing()."""
		snapshot = list(edges)
		await self._write_all(snapshot)
		logger.info(f'{type(self).__name__} stored {len(snapshot)} exchange edges')
