from decimal import Decimal

from application.services.exchange_service import ExchangeGraphService
from domain.models.currency import CurrencyCode, quantize_rate


class ConversionService:
	def __init__(self, graph_service: ExchangeGraphService):
		self.graph_service = graph_service

	async def convert(
		self, amount: Decimal, from_currency: CurrencyCode, to_currency: CurrencyCode
	) -> dict:
		path = await self.graph_service.shortest_path(from_currency, to_currency, amount)

		effective_rate = Decimal(1)
		for step in path:
			effective_rate *= step.rate

		return {
			'from_currency': from_currency.code,
			'to_currency': to_currency.code,
			'original_amount': amount,
			'converted_amount': path[-1].amount,
			'effective_rate': quantize_rate(effective_rate),
			'path': path,
		}
