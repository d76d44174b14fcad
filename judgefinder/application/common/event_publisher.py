"""Protocol for dispatching domain events after a use case completes."""

from collections.abc import Sequence
from typing import Protocol

from judgefinder.domain.common.domain_event import DomainEvent


class EventPublisherProtocol(Protocol):
    """Protocol defining the interface for domain event publishing."""

    def publish(self, events: Sequence[DomainEvent]) -> None: ...
