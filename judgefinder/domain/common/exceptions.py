"""
Domain layer errors.

These errors describe domain-level failures: malformed input, broken
business rules or broken aggregate invariants. Domain operations return
them inside an ``Err`` rather than raising them; the HTTP layer maps
their ``code`` to a response status.
"""

from typing import ClassVar


class DomainError(Exception):
    """
    Base error for all domain failures.

    Carries a machine-readable ``code`` (one per subclass) and a metadata
    bag with the values that explain the failure.
    """

    code: ClassVar[str] = "DOMAIN_ERROR"

    def __init__(self, message: str, metadata: dict[str, object] | None = None) -> None:
        self.message = message
        self.metadata = metadata or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.metadata:
            return f"{self.message} - {self.metadata}"
        return self.message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r})"

    def to_dict(self) -> dict[str, object]:
        """Convert error to dictionary for serialization."""
        return {"code": self.code, "message": self.message, "metadata": dict(self.metadata)}


class ValidationError(DomainError):
    """
    Malformed or out-of-range input.

    Example: bundle size 0, negative money amount, unknown state code.
    """

    code: ClassVar[str] = "VALIDATION_ERROR"

    def __init__(
        self,
        message: str,
        metadata: dict[str, object] | None = None,
        *,
        field: str | None = None,
    ) -> None:
        metadata = dict(metadata or {})
        if field:
            metadata.setdefault("field", field)
        super().__init__(message, metadata)
        self.field = field


class BusinessRuleViolationError(DomainError):
    """
    Well-formed input that violates a business rule.

    Example: a second active primary position, too few cases for bias analysis.
    """

    code: ClassVar[str] = "BUSINESS_RULE_VIOLATION"

    def __init__(
        self,
        message: str,
        metadata: dict[str, object] | None = None,
        *,
        rule: str | None = None,
    ) -> None:
        metadata = dict(metadata or {})
        if rule:
            metadata.setdefault("rule", rule)
        super().__init__(message, metadata)
        self.rule = rule


class InvariantViolationError(DomainError):
    """
    An aggregate invariant would be broken.

    Invariants are rules that must always be true for an aggregate
    to be in a valid state.

    Example: a judge without a name, a case count going down.
    """

    code: ClassVar[str] = "INVARIANT_VIOLATION"

    def __init__(
        self,
        message: str,
        metadata: dict[str, object] | None = None,
        *,
        aggregate: str | None = None,
    ) -> None:
        metadata = dict(metadata or {})
        if aggregate:
            metadata.setdefault("aggregate", aggregate)
        super().__init__(message, metadata)
        self.aggregate = aggregate


class EntityNotFoundError(DomainError):
    """
    Raised when an entity cannot be found.

    Example: Looking up a judge by ID that doesn't exist.
    """

    code: ClassVar[str] = "ENTITY_NOT_FOUND"

    def __init__(self, entity_type: str, entity_id: object) -> None:
        message = f"{entity_type} with id {entity_id} not found"
        super().__init__(message, {"entity_type": entity_type, "entity_id": str(entity_id)})
        self.entity_type = entity_type
        self.entity_id = entity_id
