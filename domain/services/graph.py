"""
Pure graph operations over a snapshot of exchange edges.

Nothing here touches the cache or the repository: every function takes the
edge snapshot it needs and returns new objects, so each step of a resolution
can be exercised on its own.
"""
from collections import deque
from collections.abc import Iterable, Sequence
from decimal import Decimal

from domain.exceptions.currency import GraphInconsistencyError
from domain.models.currency import ConversionStep, CurrencyCode, ExchangeEdge, quantize_amount

ExchangeGraph = dict[CurrencyCode, list[tuple[CurrencyCode, Decimal]]]


def build_graph(edges: Iterable[ExchangeEdge]) -> ExchangeGraph:
    """Adjacency map in edge order: from -> [(to, rate), ...]."""
    graph: ExchangeGraph = {}
    for edge in edges:
        graph.setdefault(edge.from_currency, []).append((edge.to_currency, edge.rate))
    return graph


def find_shortest_path(
    graph: ExchangeGraph, start: CurrencyCode, end: CurrencyCode
) -> list[CurrencyCode] | None:
    """
    Breadth-first search by hop count.

    The first path whose last node is `end` wins, so ties between equally short
    paths go to the one enqueued first, i.e. edge insertion order at each node.
    Returns None when `end` is unreachable.
    """
    queue: deque[list[CurrencyCode]] = deque([[start]])
    visited: set[CurrencyCode] = set()

    while queue:
        path = queue.popleft()
        current = path[-1]

        if current == end:
            return path

        if current in visited:
            continue
        visited.add(current)

        for neighbor, _rate in graph.get(current, []):
            queue.append([*path, neighbor])

    return None


def find_edge(
    edges: Sequence[ExchangeEdge], from_currency: CurrencyCode, to_currency: CurrencyCode
) -> ExchangeEdge | None:
    return next(
        (e for e in edges if e.from_currency == from_currency and e.to_currency == to_currency),
        None,
    )


def compose_conversion(
    path: Sequence[CurrencyCode], amount: Decimal, edges: Sequence[ExchangeEdge]
) -> list[ConversionStep]:
    """
    Walk `path` pairwise and multiply `amount` by each hop's rate.

    The running value keeps full precision; only the amount reported on each
    step is rounded.
    """
    steps: list[ConversionStep] = []
    value = amount

    for from_currency, to_currency in zip(path, path[1:]):
        edge = find_edge(edges, from_currency, to_currency)
        if edge is None:
            raise GraphInconsistencyError(
                f'No exchange edge {from_currency} -> {to_currency} for a hop on the resolved path'
            )

        value *= edge.rate
        steps.append(
            ConversionStep(
                from_currency=from_currency,
                to_currency=to_currency,
                rate=edge.rate,
                amount=quantize_amount(value),
            )
        )

    return steps


def distinct_currencies(edges: Iterable[ExchangeEdge]) -> list[CurrencyCode]:
    seen: dict[CurrencyCode, None] = {}
    for edge in edges:
        seen.setdefault(edge.from_currency)
        seen.setdefault(edge.to_currency)
    return list(seen)


def neighbors_of(edges: Iterable[ExchangeEdge], code: CurrencyCode) -> list[CurrencyCode]:
    return [e.to_currency for e in edges if e.from_currency == code]
