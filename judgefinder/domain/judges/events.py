"""Domain events recorded by the Judge aggregate."""

from dataclasses import dataclass, field
from datetime import date
from typing import ClassVar

from judgefinder.domain.common.domain_event import DomainEvent
from judgefinder.domain.judges.entities.court_position import AssignmentType, RetirementType


@dataclass(frozen=True, kw_only=True)
class JudgeEvent(DomainEvent):
    aggregate_type: ClassVar[str] = "Judge"

    judge_id: str

    @property
    def aggregate_id(self) -> str:
        return self.judge_id


@dataclass(frozen=True, kw_only=True)
class JudgeAssignedToCourt(JudgeEvent):
    court_id: str
    court_name: str
    assignment_type: AssignmentType
    start_date: date
    end_date: date | None = None
    position_title: str | None = None
    warnings: tuple[str, ...] = ()


@dataclass(frozen=True, kw_only=True)
class JudgeRetired(JudgeEvent):
    court_id: str
    retirement_date: date
    retirement_type: RetirementType
    years_of_service: int


@dataclass(frozen=True, kw_only=True)
class JudgeEligibleForBiasAnalysis(JudgeEvent):
    total_cases: int
    minimum_required: int


@dataclass(frozen=True, kw_only=True)
class BiasMetricsCalculated(JudgeEvent):
    metrics: dict[str, float] = field(default_factory=dict)
    cases_analyzed: int


@dataclass(frozen=True, kw_only=True)
class CourtAssignmentConflictDetected(JudgeEvent):
    """Emitted for every blocking conflict found while assigning a judge."""

    existing_court_id: str | None
    new_court_id: str
    conflict_type: str
