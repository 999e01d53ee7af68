from .base import ExchangeRepository
from .json_file import JsonExchangeRepository
from .memory import InMemoryExchangeRepository
from .sql import SqlExchangeRepository

__all__ = [
	'ExchangeRepository',
	'InMemoryExchangeRepository',
	'JsonExchangeRepository',
	'SqlExchangeRepository',
]
