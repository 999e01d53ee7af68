from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ShortestPathRequest(BaseModel):
	from_currency: str = Field(..., min_length=1, max_length=10)
	to_currency: str = Field(..., min_length=1, max_length=10)
	amount: Decimal = Field(..., ge=0)

	@field_validator('from_currency', 'to_currency')
	@classmethod
	def uppercase_currency(cls, v: str):
		return v.strip().upper()

	model_config = ConfigDict(
		json_schema_extra={
			'example': {'from_currency': 'USD', 'to_currency': 'GBP', 'amount': 100.00}
		}
	)


class ExchangeEdgeRequest(BaseModel):
	from_currency: str = Field(..., min_length=1, max_length=10)
	to_currency: str = Field(..., min_length=1, max_length=10)
	rate: Decimal = Field(..., gt=0)

	@field_validator('from_currency', 'to_currency')
	@classmethod
	def uppercase_currency(cls, v: str):
		return v.strip().upper()

	model_config = ConfigDict(
		json_schema_extra={'example': {'from_currency': 'USD', 'to_currency': 'RUB', 'rate': 1.2}}
	)
