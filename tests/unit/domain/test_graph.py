from decimal import Decimal

import pytest

from domain.exceptions.currency import GraphInconsistencyError
from domain.models.currency import ConversionStep, CurrencyCode, ExchangeEdge
from domain.services.graph import (
    build_graph,
    compose_conversion,
    distinct_currencies,
    find_edge,
    find_shortest_path,
    neighbors_of,
)

USD, EUR, GBP, JPY, CHF, RUB = (CurrencyCode(c) for c in ('USD', 'EUR', 'GBP', 'JPY', 'CHF', 'RUB'))


@pytest.fixture
def chain_edges():
    return [
        ExchangeEdge('USD', 'EUR', Decimal('0.85')),
        ExchangeEdge('EUR', 'GBP', Decimal('0.9')),
    ]


# ============================================================================
# TEST: build_graph()
# ============================================================================

def test_build_graph_keeps_edge_order_per_source():
    edges = [
        ExchangeEdge('USD', 'EUR', '0.85'),
        ExchangeEdge('EUR', 'GBP', '0.9'),
        ExchangeEdge('USD', 'JPY', '154.44'),
    ]

    graph = build_graph(edges)

    assert graph[USD] == [(EUR, Decimal('0.85')), (JPY, Decimal('154.44'))]
    assert graph[EUR] == [(GBP, Decimal('0.9'))]
    assert GBP not in graph


def test_build_graph_empty():
    assert build_graph([]) == {}


# ============================================================================
# TEST: find_shortest_path()
# ============================================================================

def test_find_shortest_path_direct(chain_edges):
    assert find_shortest_path(build_graph(chain_edges), USD, EUR) == [USD, EUR]


def test_find_shortest_path_two_hops(chain_edges):
    assert find_shortest_path(build_graph(chain_edges), USD, GBP) == [USD, EUR, GBP]


def test_find_shortest_path_unreachable_returns_none(chain_edges):
    assert find_shortest_path(build_graph(chain_edges), GBP, USD) is None
    assert find_shortest_path(build_graph(chain_edges), USD, RUB) is None


def test_find_shortest_path_prefers_fewer_hops_over_better_rate():
    edges = [
        ExchangeEdge('USD', 'EUR', '0.85'),
        ExchangeEdge('EUR', 'GBP', '100'),
        ExchangeEdge('USD', 'GBP', '0.01'),
    ]

    assert find_shortest_path(build_graph(edges), USD, GBP) == [USD, GBP]


def test_find_shortest_path_breaks_ties_by_edge_order():
    edges = [
        ExchangeEdge('USD', 'CHF', '0.9'),
        ExchangeEdge('USD', 'EUR', '0.85'),
        ExchangeEdge('EUR', 'GBP', '0.9'),
        ExchangeEdge('CHF', 'GBP', '0.88'),
    ]

    assert find_shortest_path(build_graph(edges), USD, GBP) == [USD, CHF, GBP]


def test_find_shortest_path_terminates_on_cycles():
    edges = [
        ExchangeEdge('USD', 'EUR', '0.85'),
        ExchangeEdge('EUR', 'USD', '1.17'),
        ExchangeEdge('EUR', 'CHF', '0.95'),
        ExchangeEdge('CHF', 'EUR', '1.05'),
    ]

    assert find_shortest_path(build_graph(edges), USD, GBP) is None


def test_find_shortest_path_start_equals_end_is_single_node(chain_edges):
    assert find_shortest_path(build_graph(chain_edges), USD, USD) == [USD]


# ============================================================================
# TEST: compose_conversion()
# ============================================================================

def test_compose_conversion_single_hop(chain_edges):
    steps = compose_conversion([USD, EUR], Decimal('100'), chain_edges)

    assert steps == [ConversionStep(USD, EUR, Decimal('0.85'), Decimal('85'))]


def test_compose_conversion_accumulates_value(chain_edges):
    steps = compose_conversion([USD, EUR, GBP], Decimal('100'), chain_edges)

    assert [s.amount for s in steps] == [Decimal('85.00'), Decimal('76.50')]
    assert [(s.from_currency, s.to_currency) for s in steps] == [(USD, EUR), (EUR, GBP)]


def test_compose_conversion_rounds_reported_amount_only():
    edges = [
        ExchangeEdge('USD', 'EUR', '0.333333'),
        ExchangeEdge('EUR', 'GBP', '3'),
    ]

    steps = compose_conversion([USD, EUR, GBP], Decimal('1'), edges)

    assert steps[0].amount == Decimal('0.33')
    assert steps[1].amount == Decimal('1.00')


def test_compose_conversion_uses_first_matching_edge():
    edges = [
        ExchangeEdge('USD', 'EUR', '0.85'),
        ExchangeEdge('USD', 'EUR', '0.5'),
    ]

    steps = compose_conversion([USD, EUR], Decimal('10'), edges)

    assert steps[0].rate == Decimal('0.85')
    assert steps[0].amount == Decimal('8.50')


def test_compose_conversion_zero_amount(chain_edges):
    steps = compose_conversion([USD, EUR, GBP], Decimal('0'), chain_edges)
    assert [s.amount for s in steps] == [Decimal('0'), Decimal('0')]


def test_compose_conversion_missing_edge_raises(chain_edges):
    with pytest.raises(GraphInconsistencyError) as exc_info:
        compose_conversion([USD, GBP], Decimal('100'), chain_edges)

    assert 'USD -> GBP' in str(exc_info.value)


# ============================================================================
# TEST: helpers
# ============================================================================

def test_find_edge(chain_edges):
    assert find_edge(chain_edges, EUR, GBP) == chain_edges[1]
    assert find_edge(chain_edges, GBP, EUR) is None


def test_distinct_currencies_first_seen_order(chain_edges):
    assert distinct_currencies(chain_edges) == [USD, EUR, GBP]


def test_distinct_currencies_ignores_repeats():
    edges = [
        ExchangeEdge('USD', 'EUR', '0.85'),
        ExchangeEdge('EUR', 'USD', '1.17'),
        ExchangeEdge('usd', 'eur', '0.86'),
    ]
    assert distinct_currencies(edges) == [USD, EUR]


def test_neighbors_of_keeps_order_and_duplicates():
    edges = [
        ExchangeEdge('USD', 'EUR', '0.85'),
        ExchangeEdge('EUR', 'GBP', '0.9'),
        ExchangeEdge('USD', 'JPY', '154.44'),
        ExchangeEdge('USD', 'EUR', '0.86'),
    ]

    assert neighbors_of(edges, USD) == [EUR, JPY, EUR]
    assert neighbors_of(edges, GBP) == []
