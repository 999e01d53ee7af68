from .conversion_service import ConversionService
from .exchange_service import ExchangeGraphService

__all__ = ['ConversionService', 'ExchangeGraphService']
