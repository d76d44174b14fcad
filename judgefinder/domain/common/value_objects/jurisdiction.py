"""Hierarchical legal jurisdiction: federal, state or county."""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum

from ..exceptions import ValidationError
from ..result import Err, Ok, Result
from ..value_object import ValueObject

_FEDERAL_DISTRICT = re.compile(r"^federal\s*-\s*(.+)$", re.IGNORECASE)
_COUNTY_PATTERN = re.compile(r"^(.+?)\s+County,\s*(.+)$", re.IGNORECASE)


class JurisdictionLevel(StrEnum):
    FEDERAL = "federal"
    STATE = "state"
    COUNTY = "county"


@dataclass(frozen=True)
class Jurisdiction(ValueObject):
    """
    A jurisdiction with structural equality.

    Federal jurisdictions carry only an optional district; county
    jurisdictions always carry their state.
    """

    level: JurisdictionLevel
    state_name: str | None = None
    county_name: str | None = None
    district: str | None = None

    @classmethod
    def federal(cls, district: str | None = None) -> Result[Jurisdiction, ValidationError]:
        normalized = district.strip() if district else None
        return Ok(cls(JurisdictionLevel.FEDERAL, district=normalized or None))

    @classmethod
    def state(cls, name: str) -> Result[Jurisdiction, ValidationError]:
        normalized = name.strip()
        if not normalized:
            return Err(ValidationError("State cannot be empty", field="state"))
        return Ok(cls(JurisdictionLevel.STATE, state_name=normalized))

    @classmethod
    def county(cls, state: str, county: str) -> Result[Jurisdiction, ValidationError]:
        normalized_state = state.strip()
        normalized_county = county.strip()
        if not normalized_state:
            return Err(ValidationError("State cannot be empty", field="state"))
        if not normalized_county:
            return Err(ValidationError("County cannot be empty", field="county"))
        return Ok(
            cls(
                JurisdictionLevel.COUNTY,
                state_name=normalized_state,
                county_name=normalized_county,
            )
        )

    @classmethod
    def parse(cls, value: str) -> Result[Jurisdiction, ValidationError]:
        """
        Parse a display string.

        Examples:
            "Federal" -> federal
            "Federal - Northern District of California" -> federal with district
            "Los Angeles County, California" -> county
            "California" -> state
        """
        text = value.strip()
        if text.lower().startswith("federal"):
            district = _FEDERAL_DISTRICT.match(text)
            return cls.federal(district.group(1) if district else None)

        county = _COUNTY_PATTERN.match(text)
        if county:
            return cls.county(county.group(2), county.group(1))

        return cls.state(text)

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Result[Jurisdiction, ValidationError]:
        level = data.get("level")
        state = data.get("state")
        county = data.get("county")
        district = data.get("district")

        if level == JurisdictionLevel.FEDERAL:
            return cls.federal(district if isinstance(district, str) else None)
        if level == JurisdictionLevel.STATE and isinstance(state, str):
            return cls.state(state)
        if level == JurisdictionLevel.COUNTY and isinstance(state, str) and isinstance(county, str):
            return cls.county(state, county)

        return Err(ValidationError("Invalid jurisdiction record", {"record": dict(data)}))

    def is_federal(self) -> bool:
        return self.level == JurisdictionLevel.FEDERAL

    def is_state(self) -> bool:
        return self.level == JurisdictionLevel.STATE

    def is_county(self) -> bool:
        return self.level == JurisdictionLevel.COUNTY

    def is_within(self, other: Jurisdiction) -> bool:
        """Containment: everything is within federal, a county is within its state."""
        if other.is_federal():
            return True
        if other.is_state() and self.is_county():
            return self.state_name == other.state_name
        if self.level == other.level:
            return self == other
        return False

    def __str__(self) -> str:
        if self.is_federal():
            return f"Federal - {self.district}" if self.district else "Federal"
        if self.is_county():
            return f"{self.county_name} County, {self.state_name}"
        return self.state_name or "Unknown"

    def to_short_string(self) -> str:
        if self.is_federal():
            return "Federal"
        if self.is_county():
            return f"{self.county_name} County"
        return self.state_name or "Unknown"

    def to_dict(self) -> dict[str, str | None]:
        return {
            "level": self.level.value,
            "state": self.state_name,
            "county": self.county_name,
            "district": self.district,
            "display": str(self),
        }

    def to_primitive(self) -> dict[str, str | None]:
        return self.to_dict()
