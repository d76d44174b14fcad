"""
Court positions and bias metrics held by the Judge aggregate.

A CourtPosition is one assignment of a judge to a court. Positions are
never removed from a judge; they are ended (end_date set, is_active
cleared) or superseded, so the history stays available for conflict
detection.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date, datetime
from enum import StrEnum
from typing import Final

from judgefinder.domain.common.entity import EntityId

# Stand-in end date for open-ended positions.
OPEN_ENDED_DATE: Final = date(2099, 12, 31)


class AssignmentType(StrEnum):
    PRIMARY = "primary"
    VISITING = "visiting"
    TEMPORARY = "temporary"
    RETIRED = "retired"


class RetirementType(StrEnum):
    FULL = "full"
    SENIOR_STATUS = "senior_status"
    TEMPORARY = "temporary"


@dataclass(frozen=True)
class JudgeId(EntityId):
    value: str


@dataclass
class CourtPosition:
    """One assignment of a judge to a court."""

    court_id: str
    court_name: str
    assignment_type: AssignmentType
    start_date: date
    end_date: date | None = None
    is_active: bool = True
    jurisdiction: str | None = None
    position_title: str | None = None

    @property
    def effective_end_date(self) -> date:
        """End date with open-ended positions pushed to the far-future sentinel."""
        return self.end_date or OPEN_ENDED_DATE

    def is_retired_record(self) -> bool:
        return self.assignment_type == AssignmentType.RETIRED

    def end(self, end_date: date) -> None:
        self.end_date = end_date
        self.is_active = False

    def to_dict(self) -> dict[str, object]:
        return {
            "court_id": self.court_id,
            "court_name": self.court_name,
            "assignment_type": self.assignment_type.value,
            "start_date": self.start_date.isoformat(),
            "end_date": self.end_date.isoformat() if self.end_date else None,
            "is_active": self.is_active,
            "jurisdiction": self.jurisdiction,
            "position_title": self.position_title,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> CourtPosition:
        """
        Rebuild a position from its persisted form.

        Raises:
            KeyError: If a required key is missing
            ValueError: If a date or assignment type is malformed
        """
        end_date = data.get("end_date")
        return cls(
            court_id=str(data["court_id"]),
            court_name=str(data["court_name"]),
            assignment_type=AssignmentType(data["assignment_type"]),
            start_date=_parse_date(data["start_date"]),
            end_date=_parse_date(end_date) if end_date else None,
            is_active=bool(data.get("is_active", True)),
            jurisdiction=_optional_str(data.get("jurisdiction")),
            position_title=_optional_str(data.get("position_title")),
        )


@dataclass(frozen=True)
class BiasScores:
    """Raw scores produced by the analytics pipeline."""

    consistency_score: float
    speed_score: float
    settlement_preference: float
    risk_tolerance: float
    predictability_score: float

    def to_dict(self) -> dict[str, float]:
        return {
            "consistency_score": self.consistency_score,
            "speed_score": self.speed_score,
            "settlement_preference": self.settlement_preference,
            "risk_tolerance": self.risk_tolerance,
            "predictability_score": self.predictability_score,
        }


@dataclass(frozen=True)
class BiasMetrics:
    scores: BiasScores
    calculated_at: datetime
    cases_analyzed: int

    def to_dict(self) -> dict[str, object]:
        return {
            **self.scores.to_dict(),
            "calculated_at": self.calculated_at.isoformat(),
            "cases_analyzed": self.cases_analyzed,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> BiasMetrics:
        scores = BiasScores(
            consistency_score=float(data["consistency_score"]),  # type: ignore[arg-type]
            speed_score=float(data["speed_score"]),  # type: ignore[arg-type]
            settlement_preference=float(data["settlement_preference"]),  # type: ignore[arg-type]
            risk_tolerance=float(data["risk_tolerance"]),  # type: ignore[arg-type]
            predictability_score=float(data["predictability_score"]),  # type: ignore[arg-type]
        )
        calculated_at = data["calculated_at"]
        return cls(
            scores=scores,
            calculated_at=(
                calculated_at
                if isinstance(calculated_at, datetime)
                else datetime.fromisoformat(str(calculated_at))
            ),
            cases_analyzed=int(data["cases_analyzed"]),  # type: ignore[call-overload]
        )


def years_of_service(start_date: date, end_date: date) -> float:
    """Fractional years between two dates, using 365.25-day years."""
    return (end_date - start_date).days / 365.25


def _parse_date(value: object) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value))


def _optional_str(value: object) -> str | None:
    return None if value is None else str(value)
