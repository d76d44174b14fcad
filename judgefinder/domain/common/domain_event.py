"""
Domain events recorded by aggregates.

An event is a frozen, past-tense fact such as "judge assigned to court".
Use cases publish them after saving; `to_dict` flattens dates, enums and
value objects so a publisher can ship them as JSON.

Example:
    @dataclass(frozen=True, kw_only=True)
    class JudgeRetired(DomainEvent):
        aggregate_type: ClassVar[str] = "Judge"

        judge_id: str
        court_id: str
"""

from dataclasses import dataclass, field, fields
from datetime import UTC, date, datetime
from enum import Enum
from typing import ClassVar
from uuid import UUID, uuid4


@dataclass(frozen=True, kw_only=True)
class DomainEvent:
    """
    Immutable record of something that happened to an aggregate.

    Subclasses use ``@dataclass(frozen=True, kw_only=True)``, set
    ``aggregate_type`` and carry every value a consumer needs without
    reloading the aggregate.
    """

    aggregate_type: ClassVar[str] = "Aggregate"

    event_id: UUID = field(default_factory=uuid4)
    occurred_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    version: int = 1

    @property
    def event_type(self) -> str:
        """Return the event type name for serialization."""
        return self.__class__.__name__

    @property
    def aggregate_id(self) -> str:
        """Identifier of the aggregate that produced the event."""
        raise NotImplementedError

    def to_dict(self) -> dict[str, object]:
        """Convert event to dictionary for serialization."""
        result: dict[str, object] = {}
        for event_field in fields(self):
            result[event_field.name] = _to_primitive(getattr(self, event_field.name))
        result["event_type"] = self.event_type
        result["aggregate_type"] = self.aggregate_type
        result["aggregate_id"] = self.aggregate_id
        return result


def _to_primitive(value: object) -> object:
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, UUID):
        return str(value)
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, tuple | list):
        return [_to_primitive(item) for item in value]
    if isinstance(value, dict):
        return {key: _to_primitive(item) for key, item in value.items()}
    if hasattr(value, "to_primitive"):
        return value.to_primitive()
    return value
