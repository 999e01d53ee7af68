import json
import logging
from decimal import Decimal
from pathlib import Path

import aiofiles
import aiofiles.os

from domain.exceptions.currency import (
	ExchangeStoreCorruptedError,
	ExchangeStoreNotFoundError,
	InvalidArgumentError,
)
from domain.models.currency import ExchangeEdge
from infrastructure.persistence.repositories.base import ExchangeRepository

logger = logging.getLogger(__name__)


class JsonExchangeRepository(ExchangeRepository):
	"""
	Exchange edges kept in a JSON array of {"from", "to", "value"} records.

	Rates are written as strings so Decimal precision survives; numeric values
	written by other tools are read as Decimal too. Replacement writes a
	sibling temp file and renames it over the store.
	"""

	def __init__(self, file_path: str | Path):
		super().__init__()
		self.file_path = Path(file_path)

	async def exists(self) -> bool:
		return await aiofiles.os.path.exists(self.file_path)

	async def ensure_store(self) -> None:
		"""Create an empty store if none exists yet."""
		if await self.exists():
			return
		await aiofiles.os.makedirs(self.file_path.parent, exist_ok=True)
		async with self.writing():
			await self._write_file([])
		logger.info(f'Created empty exchange store at {self.file_path}')

	async def load_all(self) -> list[ExchangeEdge]:
		if not await self.exists():
			raise ExchangeStoreNotFoundError(f'{self.file_path.name} not found.')

		async with aiofiles.open(self.file_path, 'r', encoding='utf-8') as f:
			content = await f.read()

		if not content.strip():
			return []

		try:
			records = json.loads(content, parse_float=Decimal)
		except json.JSONDecodeError as e:
			raise ExchangeStoreCorruptedError(f'{self.file_path.name} is not valid JSON: {e}') from e

		if records is None:
			return []
		if not isinstance(records, list):
			raise ExchangeStoreCorruptedError(
				f'{self.file_path.name} must hold a JSON array, got {type(records).__name__}'
			)

		edges = []
		for index, record in enumerate(records):
			try:
				edges.append(_record_to_edge(record))
			except (AttributeError, KeyError, InvalidArgumentError) as e:
				raise ExchangeStoreCorruptedError(
					f'{self.file_path.name} record {index} is malformed: {e!r}'
				) from e
		return edges

	async def _write_all(self, edges: list[ExchangeEdge]) -> None:
		if not await self.exists():
			raise ExchangeStoreNotFoundError(f'{self.file_path.name} not found.')
		await self._write_file([_edge_to_record(e) for e in edges])

	async def _write_file(self, records: list[dict]) -> None:
		payload = json.dumps(records, indent=2, ensure_ascii=False)
		tmp_path = self.file_path.with_name(f'{self.file_path.name}.tmp')
		async with aiofiles.open(tmp_path, 'w', encoding='utf-8') as f:
			await f.write(payload)
		await aiofiles.os.replace(tmp_path, self.file_path)


def _record_to_edge(record: dict) -> ExchangeEdge:
	fields = {k.lower(): v for k, v in record.items()}
	return ExchangeEdge(
		from_currency=fields['from'],
		to_currency=fields['to'],
		rate=fields['value'],
	)


def _edge_to_record(edge: ExchangeEdge) -> dict:
	return {
		'from': edge.from_currency.code,
		'to': edge.to_currency.code,
		'value': str(edge.rate),
	}
