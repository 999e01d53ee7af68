from typing import Annotated

from fastapi import APIRouter, Body, Depends, Path, status

from api.dependencies import get_conversion_service, get_exchange_service
from api.schemas import (
	ConnectionsCreatedResponse,
	ConversionStepResponse,
	ExchangeEdgeRequest,
	ExchangeListResponse,
	ExchangeResponse,
	NeighborsResponse,
	ShortestPathRequest,
	ShortestPathResponse,
	SupportedCurrenciesResponse,
)
from application.services import ConversionService, ExchangeGraphService
from domain.models.currency import CurrencyCode, ExchangeEdge

router = APIRouter(prefix='/api', tags=['currency'])


@router.get(
	'/currencies',
	response_model=SupportedCurrenciesResponse,
	status_code=status.HTTP_200_OK,
	summary='List currencies present in the exchange graph',
)
async def get_currencies(
	service: Annotated[ExchangeGraphService, Depends(get_exchange_service)],
) -> SupportedCurrenciesResponse:
	currencies = await service.list_currencies()
	return SupportedCurrenciesResponse(currencies=[c.code for c in currencies])


@router.get(
	'/exchanges',
	response_model=ExchangeListResponse,
	status_code=status.HTTP_200_OK,
	summary='List known direct exchanges',
)
async def get_exchanges(
	service: Annotated[ExchangeGraphService, Depends(get_exchange_service)],
) -> ExchangeListResponse:
	exchanges = await service.list_exchanges()
	return ExchangeListResponse(exchanges=[ExchangeResponse.from_edge(e) for e in exchanges])


@router.get(
	'/currencies/{code}/neighbors',
	response_model=NeighborsResponse,
	status_code=status.HTTP_200_OK,
	summary='List currencies directly reachable from a currency',
)
async def get_neighbors(
	code: Annotated[str, Path(min_length=1, max_length=10)],
	service: Annotated[ExchangeGraphService, Depends(get_exchange_service)],
) -> NeighborsResponse:
	currency = CurrencyCode(code)
	neighbors = await service.neighbors(currency)
	return NeighborsResponse(currency=currency.code, neighbors=[n.code for n in neighbors])


@router.post(
	'/shortest-path',
	response_model=ShortestPathResponse,
	status_code=status.HTTP_200_OK,
	summary='Resolve the fewest-hop conversion chain for an amount',
)
async def get_shortest_path(
	request: ShortestPathRequest,
	service: Annotated[ConversionService, Depends(get_conversion_service)],
) -> ShortestPathResponse:
	result = await service.convert(
		request.amount, CurrencyCode(request.from_currency), CurrencyCode(request.to_currency)
	)
	return ShortestPathResponse(
		from_currency=result['from_currency'],
		to_currency=result['to_currency'],
		original_amount=result['original_amount'],
		converted_amount=result['converted_amount'],
		effective_rate=result['effective_rate'],
		path=[ConversionStepResponse.from_step(step) for step in result['path']],
	)


@router.post(
	'/connections',
	response_model=ConnectionsCreatedResponse,
	status_code=status.HTTP_201_CREATED,
	summary='Add new exchange connections',
)
async def create_connections(
	request: Annotated[list[ExchangeEdgeRequest], Body(min_length=1)],
	service: Annotated[ExchangeGraphService, Depends(get_exchange_service)],
) -> ConnectionsCreatedResponse:
	proposed = [
		ExchangeEdge(from_currency=e.from_currency, to_currency=e.to_currency, rate=e.rate)
		for e in request
	]
	created = await service.create_connections(proposed)
	return ConnectionsCreatedResponse(created=[ExchangeResponse.from_edge(e) for e in created])
