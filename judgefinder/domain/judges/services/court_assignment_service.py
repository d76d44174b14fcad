"""
Domain service for court assignment validation.

This is a pure domain service with no infrastructure dependencies. It
answers questions about a proposed assignment without changing the judge.
"""

from __future__ import annotations

import calendar
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import date
from enum import StrEnum
from typing import TYPE_CHECKING, Final

from judgefinder.domain.common.exceptions import BusinessRuleViolationError
from judgefinder.domain.common.result import Err, Ok, Result
from judgefinder.domain.judges.assignment_rules import (
    TransitionRule,
    positions_overlap,
    strictest_rule,
    transition_rule,
)
from judgefinder.domain.judges.entities.court_position import AssignmentType, CourtPosition

if TYPE_CHECKING:
    from judgefinder.domain.judges.entities.judge import JudgeAggregate

# Share of a full caseload carried by each kind of position.
WORKLOAD_BY_TYPE: Final[dict[AssignmentType, int]] = {
    AssignmentType.PRIMARY: 100,
    AssignmentType.TEMPORARY: 50,
    AssignmentType.VISITING: 25,
    AssignmentType.RETIRED: 0,
}

MAX_WORKLOAD: Final = 100


class ConflictType(StrEnum):
    MULTIPLE_PRIMARY = "multiple_primary"
    TEMPORAL_OVERLAP = "temporal_overlap"
    JURISDICTION_MISMATCH = "jurisdiction_mismatch"


class ConflictSeverity(StrEnum):
    BLOCKING = "blocking"
    WARNING = "warning"


@dataclass(frozen=True)
class AssignmentValidation:
    is_valid: bool
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class AssignmentConflict:
    """A specific existing record that blocks a proposed assignment."""

    type: ConflictType
    existing_position: CourtPosition | None
    proposed_position: dict[str, object]
    severity: ConflictSeverity
    message: str


def jurisdictions_match(left: str, right: str) -> bool:
    return left.strip().casefold() == right.strip().casefold()


class CourtAssignmentService:
    """
    Validates proposed court assignments against a judge's history.

    Blocking problems are reported as errors, advisory ones as warnings.
    Nothing here mutates the judge.
    """

    def validate_assignment(
        self,
        judge: JudgeAggregate,
        court_id: str,
        court_name: str,
        assignment_type: AssignmentType,
        start_date: date,
        jurisdiction: str,
        end_date: date | None = None,
    ) -> Result[AssignmentValidation, BusinessRuleViolationError]:
        """
        Check every assignment rule and collect the findings.

        Always returns Ok; the validation payload says whether the
        assignment may proceed.
        """
        errors: list[str] = []
        warnings: list[str] = []

        if not jurisdictions_match(judge.jurisdiction, jurisdiction):
            errors.append(
                f"Jurisdiction mismatch: Judge is in {judge.jurisdiction}, "
                f"court is in {jurisdiction}"
            )

        if assignment_type == AssignmentType.PRIMARY:
            existing_primary = judge.get_primary_court()
            if existing_primary is not None:
                errors.append(
                    f"Judge already has primary position at {existing_primary.court_name}"
                )

        overlapping = self._find_temporal_overlap(judge.positions, court_id, start_date, end_date)
        if overlapping is not None:
            errors.append(
                f"Temporal overlap with existing position at {overlapping.court_name} "
                f"({overlapping.start_date.isoformat()})"
            )

        rule = strictest_rule(judge.positions, assignment_type)
        if rule == TransitionRule.FORBIDDEN:
            errors.append(f"Transition to {assignment_type} position is not allowed")
        elif rule in (TransitionRule.ADVISORY, TransitionRule.DISCOURAGED):
            warnings.append(
                f"Transition to {assignment_type} position is discouraged - verify this is correct"
            )

        has_active_retirement = any(
            position.assignment_type == AssignmentType.RETIRED and position.is_active
            for position in judge.positions
        )
        if has_active_retirement and assignment_type != AssignmentType.RETIRED:
            warnings.append("Assigning new position to retired judge - verify this is correct")

        previous_at_court = next(
            (p for p in judge.positions if p.court_id == court_id and not p.is_active), None
        )
        if previous_at_court is not None:
            ended = (
                previous_at_court.end_date.isoformat() if previous_at_court.end_date else "present"
            )
            warnings.append(
                "Judge previously served at this court "
                f"({previous_at_court.start_date.isoformat()} - {ended})"
            )

        return Ok(AssignmentValidation(is_valid=not errors, errors=errors, warnings=warnings))

    def detect_conflicts(
        self,
        judge: JudgeAggregate,
        court_id: str,
        assignment_type: AssignmentType,
        start_date: date,
        end_date: date | None = None,
        jurisdiction: str | None = None,
    ) -> list[AssignmentConflict]:
        """
        List the existing records that conflict with a proposed assignment.

        Args:
            judge: Judge being assigned
            court_id: Target court
            assignment_type: Requested kind of position
            start_date: Proposed start
            end_date: Proposed end, open-ended when None
            jurisdiction: Court jurisdiction; mismatch is only checked when given

        Returns:
            Conflicts in the order primary, overlap, jurisdiction
        """
        proposed: dict[str, object] = {
            "court_id": court_id,
            "assignment_type": assignment_type,
            "start_date": start_date,
            "end_date": end_date,
        }
        conflicts: list[AssignmentConflict] = []

        if assignment_type == AssignmentType.PRIMARY:
            existing_primary = judge.get_primary_court()
            if existing_primary is not None:
                conflicts.append(
                    AssignmentConflict(
                        type=ConflictType.MULTIPLE_PRIMARY,
                        existing_position=existing_primary,
                        proposed_position=proposed,
                        severity=ConflictSeverity.BLOCKING,
                        message="Cannot have multiple active primary positions",
                    )
                )

        overlapping = self._find_temporal_overlap(judge.positions, court_id, start_date, end_date)
        if overlapping is not None:
            conflicts.append(
                AssignmentConflict(
                    type=ConflictType.TEMPORAL_OVERLAP,
                    existing_position=overlapping,
                    proposed_position=proposed,
                    severity=ConflictSeverity.BLOCKING,
                    message="Position dates overlap with existing assignment",
                )
            )

        if jurisdiction is not None and not jurisdictions_match(judge.jurisdiction, jurisdiction):
            conflicts.append(
                AssignmentConflict(
                    type=ConflictType.JURISDICTION_MISMATCH,
                    existing_position=None,
                    proposed_position={**proposed, "jurisdiction": jurisdiction},
                    severity=ConflictSeverity.BLOCKING,
                    message=(
                        f"Court jurisdiction {jurisdiction} does not match "
                        f"judge jurisdiction {judge.jurisdiction}"
                    ),
                )
            )

        return conflicts

    def validate_transition(
        self, from_type: AssignmentType, to_type: AssignmentType
    ) -> Result[None, BusinessRuleViolationError]:
        """Strict transition check: discouraged moves are rejected as well."""
        rule = transition_rule(from_type, to_type)
        if rule == TransitionRule.FORBIDDEN:
            return Err(
                BusinessRuleViolationError(
                    f"Cannot transition from {from_type} to {to_type} position",
                    {"from_type": from_type.value, "to_type": to_type.value},
                    rule="assignment_transition",
                )
            )
        if rule == TransitionRule.DISCOURAGED:
            return Err(
                BusinessRuleViolationError(
                    f"{from_type.capitalize()} positions typically should not become {to_type}",
                    {"from_type": from_type.value, "to_type": to_type.value},
                    rule="assignment_transition",
                )
            )
        return Ok(None)

    def calculate_workload_distribution(
        self, positions: Iterable[CourtPosition]
    ) -> dict[str, int]:
        """Map each court with an active position to its workload percentage."""
        return {
            position.court_id: WORKLOAD_BY_TYPE[position.assignment_type]
            for position in positions
            if position.is_active
        }

    def validate_workload_capacity(
        self, positions: Iterable[CourtPosition]
    ) -> Result[None, BusinessRuleViolationError]:
        workload = self.calculate_workload_distribution(positions)
        total = sum(workload.values())
        if total > MAX_WORKLOAD:
            return Err(
                BusinessRuleViolationError(
                    f"Total workload exceeds {MAX_WORKLOAD}%",
                    {
                        "total_workload": total,
                        "positions": [
                            {"court_id": court_id, "workload": share}
                            for court_id, share in workload.items()
                        ],
                    },
                    rule="workload_capacity",
                )
            )
        return Ok(None)

    def recommend_end_date(self, assignment_type: AssignmentType, start_date: date) -> date | None:
        """Visiting posts run six months, temporary posts a year, the rest are open-ended."""
        if assignment_type == AssignmentType.VISITING:
            return _add_months(start_date, 6)
        if assignment_type == AssignmentType.TEMPORARY:
            return _add_months(start_date, 12)
        return None

    def requires_approval(self, assignment_type: AssignmentType) -> bool:
        # Primary appointments go through confirmation.
        return assignment_type == AssignmentType.PRIMARY

    def _find_temporal_overlap(
        self,
        positions: Iterable[CourtPosition],
        court_id: str,
        start_date: date,
        end_date: date | None,
    ) -> CourtPosition | None:
        for position in positions:
            if position.court_id == court_id and positions_overlap(start_date, end_date, position):
                return position
        return None


def _add_months(start: date, months: int) -> date:
    """Add calendar months, clamping the day to the target month's last day."""
    month_index = start.month - 1 + months
    year = start.year + month_index // 12
    month = month_index % 12 + 1
    day = min(start.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)
