from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from domain.exceptions.currency import InvalidCurrencyError, InvalidExchangeError

RATE_DECIMAL_PLACES = 6
AMOUNT_DECIMAL_PLACES = 2

RATE_QUANTUM = Decimal(1).scaleb(-RATE_DECIMAL_PLACES)
AMOUNT_QUANTUM = Decimal(1).scaleb(-AMOUNT_DECIMAL_PLACES)


def normalize_currency_code(value: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise InvalidCurrencyError('Currency code cannot be empty')
    return value.strip().upper()


def to_decimal(value: Decimal | int | float | str) -> Decimal:
    """Convert a numeric value to Decimal, going through str for floats."""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        raise InvalidExchangeError(f'Invalid numeric value: {value!r}')
    try:
        return Decimal(str(value).strip())
    except (InvalidOperation, ValueError) as e:
        raise InvalidExchangeError(f'Invalid numeric value: {value!r}') from e


def quantize_rate(rate: Decimal) -> Decimal:
    return rate.quantize(RATE_QUANTUM, rounding=ROUND_HALF_UP)


def quantize_amount(amount: Decimal) -> Decimal:
    return amount.quantize(AMOUNT_QUANTUM, rounding=ROUND_HALF_UP)


@dataclass(frozen=True)
class CurrencyCode:
    code: str

    def __post_init__(self):
        object.__setattr__(self, 'code', normalize_currency_code(self.code))

    @classmethod
    def of(cls, value: 'CurrencyCode | str') -> 'CurrencyCode':
        return value if isinstance(value, CurrencyCode) else cls(value)

    def __str__(self) -> str:
        return self.code


@dataclass(frozen=True)
class ExchangeEdge:
    """A directed, rated connection between two currencies.

    Endpoints may be given as raw strings and are normalized into CurrencyCode.
    The rate is quantized to RATE_DECIMAL_PLACES and must stay positive after
    rounding.
    """

    from_currency: CurrencyCode
    to_currency: CurrencyCode
    rate: Decimal

    def __post_init__(self):
        from_currency = CurrencyCode.of(self.from_currency)
        to_currency = CurrencyCode.of(self.to_currency)
        if from_currency == to_currency:
            raise InvalidExchangeError(
                f'An exchange must connect two different currencies, got {from_currency} twice'
            )

        raw_rate = to_decimal(self.rate)
        if not raw_rate.is_finite() or raw_rate <= 0:
            raise InvalidExchangeError(f'Exchange rate must be positive, got {self.rate}')
        rate = quantize_rate(raw_rate)
        if rate <= 0:
            raise InvalidExchangeError(
                f'Exchange rate {self.rate} is below the supported precision of '
                f'{RATE_DECIMAL_PLACES} decimal places'
            )

        object.__setattr__(self, 'from_currency', from_currency)
        object.__setattr__(self, 'to_currency', to_currency)
        object.__setattr__(self, 'rate', rate)

    @property
    def pair(self) -> tuple[CurrencyCode, CurrencyCode]:
        return self.from_currency, self.to_currency

    def inverse(self) -> 'ExchangeEdge':
        return ExchangeEdge(
            from_currency=self.to_currency,
            to_currency=self.from_currency,
            rate=Decimal(1) / self.rate,
        )


@dataclass(frozen=True)
class ConversionStep:
    from_currency: CurrencyCode
    to_currency: CurrencyCode
    rate: Decimal
    amount: Decimal  # Running converted amount after this hop
