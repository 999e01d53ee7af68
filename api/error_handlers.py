import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from domain.exceptions.currency import (
	ExchangeStoreCorruptedError,
	ExchangeStoreNotFoundError,
	GraphInconsistencyError,
	InvalidArgumentError,
	NoNewConnectionsError,
	NoPathFoundError,
)

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
	@app.exception_handler(InvalidArgumentError)
	async def invalid_argument_handler(request: Request, exc: InvalidArgumentError):
		return JSONResponse(status_code=400, content={'detail': str(exc)})

	@app.exception_handler(NoPathFoundError)
	async def no_path_handler(request: Request, exc: NoPathFoundError):
		return JSONResponse(status_code=400, content={'detail': str(exc)})

	@app.exception_handler(NoNewConnectionsError)
	async def no_new_connections_handler(request: Request, exc: NoNewConnectionsError):
		return JSONResponse(status_code=400, content={'detail': str(exc)})

	@app.exception_handler(ExchangeStoreNotFoundError)
	async def store_not_found_handler(request: Request, exc: ExchangeStoreNotFoundError):
		logger.error(f'Exchange store unavailable: {exc}')
		return JSONResponse(status_code=500, content={'detail': 'Exchange data unavailable'})

	@app.exception_handler(GraphInconsistencyError)
	async def inconsistency_handler(request: Request, exc: GraphInconsistencyError):
		logger.error(f'Graph inconsistency: {exc}', exc_info=exc)
		return JSONResponse(status_code=500, content={'detail': 'Internal server error'})

	@app.exception_handler(ExchangeStoreCorruptedError)
	async def store_corrupted_handler(request: Request, exc: ExchangeStoreCorruptedError):
		logger.error(f'Exchange store unreadable: {exc}')
		return JSONResponse(status_code=500, content={'detail': 'Exchange data unavailable'})
