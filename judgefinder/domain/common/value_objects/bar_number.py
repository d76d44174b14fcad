"""
Bar number value object.

A bar number identifies an attorney's admission to a state bar. It is
validated once, at construction; a BarNumber instance is always valid.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Final

from ..exceptions import ValidationError
from ..result import Err, Ok, Result
from ..value_object import ValueObject

VALID_STATE_CODES: Final[frozenset[str]] = frozenset(
    {
        "AL", "AK", "AZ", "AR", "CA", "CO", "CT", "DE", "FL", "GA",
        "HI", "ID", "IL", "IN", "IA", "KS", "KY", "LA", "ME", "MD",
        "MA", "MI", "MN", "MS", "MO", "MT", "NE", "NV", "NH", "NJ",
        "NM", "NY", "NC", "ND", "OH", "OK", "OR", "PA", "RI", "SC",
        "SD", "TN", "TX", "UT", "VT", "VA", "WA", "WV", "WI", "WY",
        "DC",
    }
)  # fmt: skip

_ALLOWED_CHARACTERS = re.compile(r"^[A-Za-z0-9\- ]+$")
_SEPARATORS = re.compile(r"[\s\-]+")
_PARSE_PATTERN = re.compile(r"^([A-Za-z]{2})[\s\-]+(.+)$")


@dataclass(frozen=True)
class BarNumberFormat:
    """Length and character rules for one state's bar numbers."""

    min_length: int = 4
    max_length: int = 12
    digits_only: bool = False


_DEFAULT_FORMAT = BarNumberFormat()

# Lengths are measured without separators.
STATE_FORMATS: Final[dict[str, BarNumberFormat]] = {
    "CA": BarNumberFormat(digits_only=True),
    "TX": BarNumberFormat(min_length=8, max_length=8, digits_only=True),
    "FL": BarNumberFormat(min_length=4, max_length=7, digits_only=True),
}


def format_for_state(state: str) -> BarNumberFormat:
    return STATE_FORMATS.get(state, _DEFAULT_FORMAT)


@dataclass(frozen=True)
class BarNumber(ValueObject):
    state: str
    number: str

    @classmethod
    def create(cls, state: str, number: str) -> Result[BarNumber, ValidationError]:
        """
        Validate a state code and number.

        The state is upper-cased; the number keeps its separators so the
        attorney's own formatting survives until ``normalize`` is called.
        """
        state_code = state.strip().upper()
        if state_code not in VALID_STATE_CODES:
            return Err(
                ValidationError(
                    f"Invalid state code: {state.strip()}",
                    {"state": state},
                    field="state",
                )
            )

        cleaned = number.strip()
        if not cleaned:
            return Err(ValidationError("Bar number cannot be empty", field="number"))

        if not _ALLOWED_CHARACTERS.match(cleaned):
            return Err(
                ValidationError(
                    "Bar number may contain only letters, numbers, hyphens, and spaces",
                    {"number": cleaned},
                    field="number",
                )
            )

        compact = _SEPARATORS.sub("", cleaned)
        rules = format_for_state(state_code)

        if rules.digits_only and not compact.isdigit():
            return Err(
                ValidationError(
                    f"{state_code} bar numbers must contain digits only",
                    {"state": state_code, "number": cleaned},
                    field="number",
                )
            )

        if not rules.min_length <= len(compact) <= rules.max_length:
            if rules.min_length == rules.max_length:
                message = f"Bar number must be exactly {rules.min_length} characters"
            else:
                message = (
                    f"Bar number must be between {rules.min_length} "
                    f"and {rules.max_length} characters"
                )
            return Err(
                ValidationError(
                    message,
                    {"state": state_code, "length": len(compact)},
                    field="number",
                )
            )

        return Ok(cls(state_code, cleaned))

    @classmethod
    def parse(cls, value: str) -> Result[BarNumber, ValidationError]:
        """Parse ``"CA-123456"`` or ``"NY 987654"``."""
        match = _PARSE_PATTERN.match(value.strip())
        if not match:
            return Err(
                ValidationError(
                    "Invalid bar number format. Expected STATE-NUMBER (e.g. CA-123456)",
                    {"value": value},
                )
            )
        return cls.create(match.group(1), match.group(2))

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Result[BarNumber, ValidationError]:
        state = data.get("state")
        number = data.get("number")
        if not isinstance(state, str) or not isinstance(number, str):
            return Err(ValidationError("Bar number record requires state and number"))
        return cls.create(state, number)

    def normalize(self) -> BarNumber:
        """Return the same bar number with separators removed."""
        return BarNumber(self.state, _SEPARATORS.sub("", self.number))

    def __str__(self) -> str:
        return f"{self.state}-{self.number}"

    def to_dict(self) -> dict[str, str]:
        return {"state": self.state, "number": self.number, "full": str(self)}

    def to_primitive(self) -> str:
        return str(self)
