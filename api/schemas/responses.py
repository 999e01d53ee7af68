from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from domain.models.currency import ConversionStep, ExchangeEdge


class ExchangeResponse(BaseModel):
	from_currency: str = Field(..., description='Source currency code')
	to_currency: str = Field(..., description='Target currency code')
	rate: Decimal = Field(..., description='Direct exchange rate')

	@classmethod
	def from_edge(cls, edge: ExchangeEdge) -> 'ExchangeResponse':
		return cls(
			from_currency=edge.from_currency.code,
			to_currency=edge.to_currency.code,
			rate=edge.rate,
		)


class ExchangeListResponse(BaseModel):
	exchanges: list[ExchangeResponse] = Field(description='Known direct exchanges')


class SupportedCurrenciesResponse(BaseModel):
	currencies: list[str] = Field(description='List of currency codes')

	model_config = ConfigDict(
		json_schema_extra={'examples': [{'currencies': ['USD', 'EUR', 'GBP', 'JPY']}]}
	)


class NeighborsResponse(BaseModel):
	currency: str = Field(..., description='Currency whose outgoing exchanges were listed')
	neighbors: list[str] = Field(description='Directly reachable currency codes, in edge order')


class ConversionStepResponse(BaseModel):
	from_currency: str
	to_currency: str
	rate: Decimal = Field(..., description='Rate applied on this hop')
	amount: Decimal = Field(..., description='Converted amount after this hop')

	@classmethod
	def from_step(cls, step: ConversionStep) -> 'ConversionStepResponse':
		return cls(
			from_currency=step.from_currency.code,
			to_currency=step.to_currency.code,
			rate=step.rate,
			amount=step.amount,
		)


class ShortestPathResponse(BaseModel):
	from_currency: str = Field(..., description='Source currency code')
	to_currency: str = Field(..., description='Target currency code')
	original_amount: Decimal = Field(..., description='Original amount requested')
	converted_amount: Decimal = Field(..., description='Amount after the last hop')
	effective_rate: Decimal = Field(..., description='Product of the rates along the path')
	path: list[ConversionStepResponse] = Field(description='Conversion chain, fewest hops first found')

	model_config = ConfigDict(
		json_schema_extra={
			'example': {
				'from_currency': 'USD',
				'to_currency': 'GBP',
				'original_amount': 100.00,
				'converted_amount': 76.50,
				'effective_rate': 0.765,
				'path': [
					{'from_currency': 'USD', 'to_currency': 'EUR', 'rate': 0.85, 'amount': 85.00},
					{'from_currency': 'EUR', 'to_currency': 'GBP', 'rate': 0.9, 'amount': 76.50},
				],
			}
		}
	)


class ConnectionsCreatedResponse(BaseModel):
	created: list[ExchangeResponse] = Field(description='Exchanges accepted and stored')
