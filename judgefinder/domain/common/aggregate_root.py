"""
Aggregate root base.

Commands on an aggregate record events as they succeed. Use cases save the
aggregate, then drain the events with ``collect_domain_events`` and hand
them to the event publisher. Events recorded by a failed command (for
example a conflict notice) are drained the same way.
"""

from dataclasses import dataclass, field
from typing import Generic

from .domain_event import DomainEvent
from .entity import Entity, IdType


@dataclass(eq=False)
class AggregateRoot(Entity[IdType], Generic[IdType]):
    """Entity that owns a consistency boundary and buffers its domain events."""

    _recorded_events: list[DomainEvent] = field(
        default_factory=list, repr=False, compare=False, kw_only=True
    )

    def _record_event(self, event: DomainEvent) -> None:
        self._recorded_events.append(event)

    def collect_domain_events(self) -> list[DomainEvent]:
        """Return buffered events in recording order and empty the buffer."""
        drained, self._recorded_events = self._recorded_events, []
        return drained

    @property
    def pending_events(self) -> list[DomainEvent]:
        return list(self._recorded_events)
