class CurrencyException(Exception):
    pass


class InvalidArgumentError(CurrencyException, ValueError):
    pass


class InvalidCurrencyError(InvalidArgumentError):
    pass


class InvalidExchangeError(InvalidArgumentError):
    pass


class ExchangeStoreNotFoundError(CurrencyException):
    pass


class NoPathFoundError(CurrencyException):
    def __init__(self, from_currency: str, to_currency: str):
        self.from_currency = from_currency
        self.to_currency = to_currency
        super().__init__(f'No conversion path found from {from_currency} to {to_currency}')


class NoNewConnectionsError(CurrencyException):
    pass


class GraphInconsistencyError(CurrencyException):
    pass


class CacheError(CurrencyException):
    pass


class ExchangeStoreCorruptedError(CurrencyException):
    pass
