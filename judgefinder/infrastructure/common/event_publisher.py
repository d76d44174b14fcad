"""Domain event publisher that logs events and keeps them in memory."""

from collections.abc import Sequence

import structlog

from judgefinder.domain.common.domain_event import DomainEvent

logger = structlog.get_logger(__name__)


class InMemoryEventPublisher:
    """
    Records published events and writes one log line per event.

    Stands in for a message bus; downstream consumers (notifications,
    read models) live outside this service.
    """

    def __init__(self) -> None:
        self.published: list[DomainEvent] = []

    def publish(self, events: Sequence[DomainEvent]) -> None:
        for domain_event in events:
            self.published.append(domain_event)
            logger.info(
                "domain_event_published",
                event_type=domain_event.event_type,
                aggregate_type=domain_event.aggregate_type,
                aggregate_id=domain_event.aggregate_id,
                event_id=str(domain_event.event_id),
            )

    def clear(self) -> None:
        self.published.clear()
