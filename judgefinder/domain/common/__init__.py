"""Building blocks shared by the judge and advertising domains."""

from .aggregate_root import AggregateRoot
from .domain_event import DomainEvent
from .entity import Entity, EntityId
from .exceptions import (
    BusinessRuleViolationError,
    DomainError,
    EntityNotFoundError,
    InvariantViolationError,
    ValidationError,
)
from .result import Err, Ok, Result, UnwrapError, combine, from_awaitable, from_callable
from .specification import Specification
from .value_object import ValueObject

__all__ = [
    "AggregateRoot",
    "BusinessRuleViolationError",
    "DomainError",
    "DomainEvent",
    "Entity",
    "EntityId",
    "EntityNotFoundError",
    "Err",
    "InvariantViolationError",
    "Ok",
    "Result",
    "Specification",
    "UnwrapError",
    "ValidationError",
    "ValueObject",
    "combine",
    "from_awaitable",
    "from_callable",
]
