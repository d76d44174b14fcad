"""
Judge aggregate root.

Encapsulates all business rules for a judge's court positions and bias
analysis. Every mutation goes through a method here and records a domain
event on success.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from datetime import UTC, date, datetime
from typing import Final

from judgefinder.domain.common.aggregate_root import AggregateRoot
from judgefinder.domain.common.exceptions import (
    BusinessRuleViolationError,
    DomainError,
    InvariantViolationError,
    ValidationError,
)
from judgefinder.domain.common.result import Err, Ok, Result
from judgefinder.domain.judges.assignment_rules import (
    TransitionRule,
    current_states,
    positions_overlap,
    strictest_rule,
)
from judgefinder.domain.judges.entities.court_position import (
    AssignmentType,
    BiasMetrics,
    BiasScores,
    CourtPosition,
    JudgeId,
    RetirementType,
    years_of_service,
)
from judgefinder.domain.judges.events import (
    BiasMetricsCalculated,
    CourtAssignmentConflictDetected,
    JudgeAssignedToCourt,
    JudgeEligibleForBiasAnalysis,
    JudgeRetired,
)
from judgefinder.domain.judges.services.court_assignment_service import CourtAssignmentService
from judgefinder.domain.judges.specifications.judge_eligibility import (
    BiasAnalysisEligibilitySpec,
)

# Statistical-confidence floor for bias analysis. Not configurable per call.
MINIMUM_CASES_FOR_BIAS: Final = 500


@dataclass(eq=False)
class JudgeAggregate(AggregateRoot[JudgeId]):
    """
    Judge aggregate root.

    Business Rules:
    - At most one active primary position at a time
    - No two positions at the same court with overlapping dates
    - Bias metrics need at least 500 cases and an active position
    - A retired judge cannot take a new non-retired position
    - Case counts never go down
    """

    id: JudgeId
    name: str
    jurisdiction: str
    total_cases: int = 0
    positions: list[CourtPosition] = field(default_factory=list)
    bias_metrics: BiasMetrics | None = None

    @classmethod
    def create(
        cls,
        judge_id: str | JudgeId,
        name: str,
        jurisdiction: str,
        total_cases: int = 0,
        positions: Iterable[CourtPosition] = (),
        bias_metrics: BiasMetrics | None = None,
    ) -> Result[JudgeAggregate, InvariantViolationError]:
        """
        Create a judge, checking the aggregate's required fields.

        Positions given here must already satisfy the rules that
        ``assign_to_court`` and ``retire_from_position`` keep: one active
        primary at most, no overlapping dates at a court (retired records
        aside), no position starting after a retirement and no end date
        before its start.

        Returns:
            Ok with the judge, or Err(InvariantViolationError) naming the
            first broken rule
        """
        raw_id = str(judge_id).strip()
        if not raw_id:
            return Err(InvariantViolationError("Judge ID is required", aggregate="Judge"))
        if not name or not name.strip():
            return Err(InvariantViolationError("Judge name is required", aggregate="Judge"))
        if total_cases < 0:
            return Err(
                InvariantViolationError(
                    "Total cases cannot be negative",
                    {"total_cases": total_cases},
                    aggregate="Judge",
                )
            )
        if not jurisdiction or not jurisdiction.strip():
            return Err(InvariantViolationError("Jurisdiction is required", aggregate="Judge"))

        position_list = list(positions)
        position_error = _check_positions(position_list)
        if position_error is not None:
            return Err(position_error)

        return Ok(
            cls(
                id=JudgeId(raw_id),
                name=name.strip(),
                jurisdiction=jurisdiction.strip(),
                total_cases=total_cases,
                positions=position_list,
                bias_metrics=bias_metrics,
            )
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Result[JudgeAggregate, DomainError]:
        """Rebuild a judge from its persisted record."""
        try:
            judge_id = _require_str(data, "id")
            name = _require_str(data, "name")
            jurisdiction = _require_str(data, "jurisdiction")
            total_cases = data.get("total_cases", 0)
            if isinstance(total_cases, bool) or not isinstance(total_cases, int):
                raise TypeError("total_cases must be an integer")
            raw_positions = data.get("positions") or []
            if not isinstance(raw_positions, list):
                raise TypeError("positions must be a list")
            positions = [CourtPosition.from_dict(raw) for raw in raw_positions]
            raw_metrics = data.get("bias_metrics")
            if raw_metrics is not None and not isinstance(raw_metrics, Mapping):
                raise TypeError("bias_metrics must be an object")
            bias_metrics = BiasMetrics.from_dict(raw_metrics) if raw_metrics else None
        except (KeyError, TypeError, ValueError) as exc:
            return Err(
                ValidationError(
                    f"Malformed judge record: {exc}",
                    {"judge_id": str(data.get("id"))},
                )
            )

        return cls.create(judge_id, name, jurisdiction, total_cases, positions, bias_metrics)

    def to_dict(self) -> dict[str, object]:
        return {
            "id": str(self.id),
            "name": self.name,
            "jurisdiction": self.jurisdiction,
            "total_cases": self.total_cases,
            "positions": [position.to_dict() for position in self.positions],
            "bias_metrics": self.bias_metrics.to_dict() if self.bias_metrics else None,
        }

    # Query methods

    def is_active(self) -> bool:
        """True when the judge holds any active non-retired position."""
        return any(
            position.is_active and position.assignment_type != AssignmentType.RETIRED
            for position in self.positions
        )

    def can_calculate_bias_metrics(self) -> bool:
        return self.total_cases >= MINIMUM_CASES_FOR_BIAS and self.is_active()

    def get_primary_court(self) -> CourtPosition | None:
        return next(
            (
                position
                for position in self.positions
                if position.assignment_type == AssignmentType.PRIMARY and position.is_active
            ),
            None,
        )

    def get_active_positions(self) -> list[CourtPosition]:
        return [position for position in self.positions if position.is_active]

    def get_position_history(self) -> list[CourtPosition]:
        """All positions, newest start date first."""
        return sorted(self.positions, key=lambda position: position.start_date, reverse=True)

    # Command methods (state changes)

    def assign_to_court(
        self,
        court_id: str,
        court_name: str,
        assignment_type: AssignmentType,
        start_date: date,
        jurisdiction: str,
        end_date: date | None = None,
        position_title: str | None = None,
    ) -> Result[None, DomainError]:
        """
        Assign the judge to a court.

        Blocks forbidden transitions, a second active primary position, a
        jurisdiction mismatch and overlapping dates at the same court.
        Earlier positions at the same court that ended before ``start_date``
        are marked inactive.
        """
        if end_date is not None and end_date < start_date:
            return Err(
                ValidationError(
                    "End date cannot be before start date",
                    {"start_date": start_date.isoformat(), "end_date": end_date.isoformat()},
                    field="end_date",
                )
            )

        if strictest_rule(self.positions, assignment_type) == TransitionRule.FORBIDDEN:
            if AssignmentType.RETIRED in current_states(self.positions):
                message = f"Retired judges cannot take a new {assignment_type} position"
            else:
                message = "Judge must hold a court position before retiring"
            return Err(
                BusinessRuleViolationError(
                    message,
                    {"judge_id": str(self.id), "assignment_type": assignment_type.value},
                    rule="assignment_transition",
                )
            )

        service = CourtAssignmentService()
        validation = service.validate_assignment(
            self, court_id, court_name, assignment_type, start_date, jurisdiction, end_date
        ).unwrap()

        if not validation.is_valid:
            conflicts = service.detect_conflicts(
                self, court_id, assignment_type, start_date, end_date, jurisdiction
            )
            for conflict in conflicts:
                self._record_event(
                    CourtAssignmentConflictDetected(
                        judge_id=str(self.id),
                        existing_court_id=(
                            conflict.existing_position.court_id
                            if conflict.existing_position
                            else None
                        ),
                        new_court_id=court_id,
                        conflict_type=conflict.type.value,
                    )
                )
            return Err(
                BusinessRuleViolationError(
                    "; ".join(validation.errors),
                    {
                        "judge_id": str(self.id),
                        "court_id": court_id,
                        "errors": validation.errors,
                        "warnings": validation.warnings,
                    },
                    rule="court_assignment",
                )
            )

        for position in self.positions:
            if (
                position.court_id == court_id
                and position.is_active
                and position.end_date is not None
                and position.end_date < start_date
            ):
                position.is_active = False

        self.positions.append(
            CourtPosition(
                court_id=court_id,
                court_name=court_name,
                assignment_type=assignment_type,
                start_date=start_date,
                end_date=end_date,
                jurisdiction=jurisdiction.strip(),
                position_title=position_title,
            )
        )

        self._record_event(
            JudgeAssignedToCourt(
                judge_id=str(self.id),
                court_id=court_id,
                court_name=court_name,
                assignment_type=assignment_type,
                start_date=start_date,
                end_date=end_date,
                position_title=position_title,
                warnings=tuple(validation.warnings),
            )
        )
        return Ok(None)

    def retire_from_position(
        self,
        court_id: str,
        retirement_date: date,
        retirement_type: RetirementType = RetirementType.FULL,
    ) -> Result[None, BusinessRuleViolationError]:
        """
        Retire from the active position at a court.

        The position is ended on ``retirement_date`` and an active retired
        record is added at the same court.
        """
        position = next(
            (
                p
                for p in self.positions
                if p.court_id == court_id
                and p.is_active
                and p.assignment_type != AssignmentType.RETIRED
            ),
            None,
        )
        if position is None:
            return Err(
                BusinessRuleViolationError(
                    "No active position found at specified court",
                    {"judge_id": str(self.id), "court_id": court_id},
                    rule="retirement",
                )
            )

        if retirement_date < position.start_date:
            return Err(
                BusinessRuleViolationError(
                    "Retirement date cannot be before position start date",
                    {
                        "judge_id": str(self.id),
                        "court_id": court_id,
                        "start_date": position.start_date.isoformat(),
                        "retirement_date": retirement_date.isoformat(),
                    },
                    rule="retirement",
                )
            )

        service_years = int(years_of_service(position.start_date, retirement_date))

        position.end(retirement_date)
        self.positions.append(
            CourtPosition(
                court_id=court_id,
                court_name=position.court_name,
                assignment_type=AssignmentType.RETIRED,
                start_date=retirement_date,
                jurisdiction=position.jurisdiction,
                position_title=position.position_title,
            )
        )

        self._record_event(
            JudgeRetired(
                judge_id=str(self.id),
                court_id=court_id,
                retirement_date=retirement_date,
                retirement_type=retirement_type,
                years_of_service=service_years,
            )
        )
        return Ok(None)

    def calculate_bias_metrics(
        self, scores: BiasScores, calculated_at: datetime | None = None
    ) -> Result[None, BusinessRuleViolationError]:
        """
        Store bias metrics for the judge.

        Fails with a reason for each unmet condition when the judge has
        fewer than 500 cases or no active position.
        """
        status = BiasAnalysisEligibilitySpec(MINIMUM_CASES_FOR_BIAS).get_eligibility_status(self)
        if not status.eligible:
            return Err(
                BusinessRuleViolationError(
                    "Judge is not eligible for bias analysis: " + "; ".join(status.reasons),
                    {
                        "judge_id": str(self.id),
                        "total_cases": self.total_cases,
                        "minimum_required": MINIMUM_CASES_FOR_BIAS,
                        "reasons": status.reasons,
                    },
                    rule="bias_analysis_eligibility",
                )
            )

        if self.bias_metrics is None:
            self._record_event(
                JudgeEligibleForBiasAnalysis(
                    judge_id=str(self.id),
                    total_cases=self.total_cases,
                    minimum_required=MINIMUM_CASES_FOR_BIAS,
                )
            )

        self.bias_metrics = BiasMetrics(
            scores=scores,
            calculated_at=calculated_at or datetime.now(UTC),
            cases_analyzed=self.total_cases,
        )

        self._record_event(
            BiasMetricsCalculated(
                judge_id=str(self.id),
                metrics=scores.to_dict(),
                cases_analyzed=self.total_cases,
            )
        )
        return Ok(None)

    def update_case_count(self, new_count: int) -> Result[None, InvariantViolationError]:
        if new_count < 0:
            return Err(
                InvariantViolationError(
                    "Case count cannot be negative", {"new_count": new_count}, aggregate="Judge"
                )
            )
        if new_count < self.total_cases:
            return Err(
                InvariantViolationError(
                    "Case count cannot decrease",
                    {"current_count": self.total_cases, "new_count": new_count},
                    aggregate="Judge",
                )
            )
        self.total_cases = new_count
        return Ok(None)


def _require_str(data: Mapping[str, object], key: str) -> str:
    value = data[key]
    if not isinstance(value, str):
        raise TypeError(f"{key} must be a string")
    return value


def _check_positions(positions: list[CourtPosition]) -> InvariantViolationError | None:
    """First broken position rule, or None when the history is consistent."""
    for position in positions:
        if position.end_date is not None and position.end_date < position.start_date:
            return InvariantViolationError(
                f"Position at court {position.court_id} ends before it starts",
                {
                    "court_id": position.court_id,
                    "start_date": position.start_date.isoformat(),
                    "end_date": position.end_date.isoformat(),
                },
                aggregate="Judge",
            )

    active_primaries = [
        position
        for position in positions
        if position.assignment_type == AssignmentType.PRIMARY and position.is_active
    ]
    if len(active_primaries) > 1:
        return InvariantViolationError(
            "Judge cannot hold more than one active primary position",
            {"court_ids": [position.court_id for position in active_primaries]},
            aggregate="Judge",
        )

    # Retirement closes a position on the day its retired record starts.
    serving = [position for position in positions if not position.is_retired_record()]
    for index, position in enumerate(serving):
        for other in serving[index + 1 :]:
            if other.court_id == position.court_id and positions_overlap(
                position.start_date, position.end_date, other
            ):
                return InvariantViolationError(
                    f"Positions at court {position.court_id} have overlapping dates",
                    {
                        "court_id": position.court_id,
                        "start_dates": [
                            position.start_date.isoformat(),
                            other.start_date.isoformat(),
                        ],
                    },
                    aggregate="Judge",
                )

    retired_on = min(
        (position.start_date for position in positions if position.is_retired_record()),
        default=None,
    )
    if retired_on is not None:
        late = next((p for p in serving if p.start_date > retired_on), None)
        if late is not None:
            return InvariantViolationError(
                f"Position at court {late.court_id} starts after the judge retired",
                {"court_id": late.court_id, "retired_on": retired_on.isoformat()},
                aggregate="Judge",
            )
    return None
