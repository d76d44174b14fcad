"""
Base class for value objects.

Money, BarNumber, Jurisdiction and the entity ids are frozen dataclasses:
equality, hashing and ``repr`` come from ``@dataclass(frozen=True)``.
Validation lives in classmethod factories (``create``, ``parse``,
``from_dict``) that return a Result, so an instance that exists is valid.
"""

from abc import ABC, abstractmethod


class ValueObject(ABC):
    """
    Immutable domain value compared by its fields.

    Subclasses must be ``@dataclass(frozen=True)`` and say how they are
    written out in events and API payloads.
    """

    @abstractmethod
    def to_primitive(self) -> object:
        """JSON-friendly form used when serializing events and records."""
