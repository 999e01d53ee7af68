from decimal import Decimal

import pytest

from domain.exceptions.currency import (
    InvalidArgumentError,
    InvalidCurrencyError,
    InvalidExchangeError,
)
from domain.models.currency import (
    CurrencyCode,
    ExchangeEdge,
    normalize_currency_code,
    quantize_amount,
)


# ============================================================================
# TEST: CurrencyCode
# ============================================================================

def test_currency_code_is_trimmed_and_uppercased():
    assert CurrencyCode('  usd ').code == 'USD'


@pytest.mark.parametrize('raw', ['', '   ', '\t\n'])
def test_currency_code_rejects_blank_input(raw):
    with pytest.raises(InvalidCurrencyError):
        CurrencyCode(raw)


def test_currency_code_rejects_non_string():
    with pytest.raises(InvalidArgumentError):
        CurrencyCode(None)


def test_currency_codes_compare_by_normalized_value():
    assert CurrencyCode('eur') == CurrencyCode('EUR ')
    assert hash(CurrencyCode('eur')) == hash(CurrencyCode('EUR'))
    assert CurrencyCode('EUR') != CurrencyCode('GBP')


@pytest.mark.parametrize('raw', ['usd', ' Eur ', 'gBp', 'BTC'])
def test_normalization_is_idempotent(raw):
    once = normalize_currency_code(raw)
    assert normalize_currency_code(once) == once
    assert CurrencyCode(CurrencyCode(raw).code) == CurrencyCode(raw)


def test_currency_code_str_is_code():
    assert str(CurrencyCode('jpy')) == 'JPY'


def test_invalid_argument_errors_are_value_errors():
    with pytest.raises(ValueError):
        CurrencyCode('')


# ============================================================================
# TEST: ExchangeEdge
# ============================================================================

def test_exchange_edge_coerces_currency_strings():
    edge = ExchangeEdge('usd', 'eur', Decimal('0.85'))

    assert edge.from_currency == CurrencyCode('USD')
    assert edge.to_currency == CurrencyCode('EUR')
    assert edge.rate == Decimal('0.85')
    assert isinstance(edge.rate, Decimal)


@pytest.mark.parametrize('rate', [Decimal('0'), Decimal('-1'), '-0.5', 0])
def test_exchange_edge_rejects_non_positive_rate(rate):
    with pytest.raises(InvalidArgumentError):
        ExchangeEdge('USD', 'EUR', rate)


def test_exchange_edge_rejects_rate_rounding_to_zero():
    with pytest.raises(InvalidExchangeError):
        ExchangeEdge('USD', 'EUR', Decimal('0.0000001'))


def test_exchange_edge_rejects_unparseable_rate():
    with pytest.raises(InvalidExchangeError):
        ExchangeEdge('USD', 'EUR', 'abc')


def test_exchange_edge_rejects_same_endpoints():
    with pytest.raises(InvalidExchangeError):
        ExchangeEdge('usd', ' USD', Decimal('1'))


def test_exchange_edge_rate_is_quantized_to_six_places():
    edge = ExchangeEdge('USD', 'EUR', Decimal('0.12345678'))
    assert edge.rate == Decimal('0.123457')


def test_exchange_edge_accepts_float_without_binary_noise():
    edge = ExchangeEdge('USD', 'EUR', 0.1)
    assert edge.rate == Decimal('0.1')


def test_exchange_edges_have_structural_equality():
    assert ExchangeEdge('USD', 'EUR', '0.85') == ExchangeEdge('usd', 'eur', Decimal('0.850'))
    assert ExchangeEdge('USD', 'EUR', '0.85') != ExchangeEdge('USD', 'EUR', '0.86')
    assert len({ExchangeEdge('USD', 'EUR', '0.85'), ExchangeEdge('USD', 'EUR', '0.85')}) == 1


def test_exchange_edge_is_immutable():
    edge = ExchangeEdge('USD', 'EUR', '0.85')
    with pytest.raises(AttributeError):
        edge.rate = Decimal('1')


def test_exchange_edge_inverse():
    inverse = ExchangeEdge('USD', 'RUB', Decimal('1.2')).inverse()

    assert inverse.pair == (CurrencyCode('RUB'), CurrencyCode('USD'))
    assert inverse.rate == Decimal('0.833333')


def test_quantize_amount_rounds_half_up():
    assert quantize_amount(Decimal('43.1375')) == Decimal('43.14')
    assert quantize_amount(Decimal('76.5')) == Decimal('76.50')
