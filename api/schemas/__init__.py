from .requests import ExchangeEdgeRequest, ShortestPathRequest
from .responses import (
	ConnectionsCreatedResponse,
	ConversionStepResponse,
	ExchangeListResponse,
	ExchangeResponse,
	NeighborsResponse,
	ShortestPathResponse,
	SupportedCurrenciesResponse,
)

__all__ = [
	'ConnectionsCreatedResponse',
	'ConversionStepResponse',
	'ExchangeEdgeRequest',
	'ExchangeListResponse',
	'ExchangeResponse',
	'NeighborsResponse',
	'ShortestPathRequest',
	'ShortestPathResponse',
	'SupportedCurrenciesResponse',
]
