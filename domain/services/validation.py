import logging
from abc import ABC, abstractmethod
from enum import Enum

from domain.exceptions.currency import NoNewConnectionsError
from domain.models.currency import ExchangeEdge

logger = logging.getLogger(__name__)


class ValidationPolicy(str, Enum):
    DIRECT = 'direct'
    WITH_INVERSES = 'with_inverses'


class ConnectionValidator(ABC):
    """Decides which proposed edges may be added to an existing edge set."""

    policy: ValidationPolicy

    @abstractmethod
    def validate(
        self, incoming: list[ExchangeEdge], existing: list[ExchangeEdge]
    ) -> list[ExchangeEdge]:
        ...

    def _ensure_not_empty(self, accepted: list[ExchangeEdge], incoming: list[ExchangeEdge]) -> None:
        if not accepted:
            logger.warning(
                f'Rejected {len(incoming)} proposed connection(s) under {self.policy.value} policy'
            )
            raise NoNewConnectionsError('New connections between nodes already exist')


class DirectConnectionValidator(ConnectionValidator):
    """Drops proposals identical (from, to, rate) to an existing edge."""

    policy = ValidationPolicy.DIRECT

    def validate(
        self, incoming: list[ExchangeEdge], existing: list[ExchangeEdge]
    ) -> list[ExchangeEdge]:
        existing_edges = set(existing)
        accepted = list(dict.fromkeys(e for e in incoming if e not in existing_edges))

        self._ensure_not_empty(accepted, incoming)
        return accepted


class InverseConnectionValidator(ConnectionValidator):
    """
    Adds the reciprocal of every proposal and rejects any currency pair that is
    already connected, whatever its rate. Among the remaining candidates the
    first edge for a given pair wins.
    """

    policy = ValidationPolicy.WITH_INVERSES

    def validate(
        self, incoming: list[ExchangeEdge], existing: list[ExchangeEdge]
    ) -> list[ExchangeEdge]:
        candidates = [*incoming, *(e.inverse() for e in incoming)]
        existing_pairs = {e.pair for e in existing}

        accepted: dict[tuple, ExchangeEdge] = {}
        for edge in candidates:
            if edge.pair in existing_pairs:
                continue
            accepted.setdefault(edge.pair, edge)

        result = list(accepted.values())
        self._ensure_not_empty(result, incoming)
        return result


def get_connection_validator(policy: ValidationPolicy | str) -> ConnectionValidator:
    validators: dict[ValidationPolicy, type[ConnectionValidator]] = {
        ValidationPolicy.DIRECT: DirectConnectionValidator,
        ValidationPolicy.WITH_INVERSES: InverseConnectionValidator,
    }
    return validators[ValidationPolicy(policy)]()
