"""
Judge eligibility specifications.

Each class wraps one eligibility rule for a JudgeAggregate. Rules compose
with ``&``, ``|`` and ``~``:

    premium_candidate = PrimaryPositionRequiredSpec() & MinimumCaseRequirementSpec(1000)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import TYPE_CHECKING

from judgefinder.domain.common.specification import Specification
from judgefinder.domain.judges.entities.court_position import years_of_service

if TYPE_CHECKING:
    from judgefinder.domain.judges.entities.judge import JudgeAggregate


@dataclass(frozen=True)
class EligibilityStatus:
    eligible: bool
    reasons: list[str] = field(default_factory=list)


class MinimumCaseRequirementSpec(Specification["JudgeAggregate"]):
    def __init__(self, minimum_cases: int) -> None:
        self.minimum_cases = minimum_cases

    def is_satisfied_by(self, candidate: JudgeAggregate) -> bool:
        return candidate.total_cases >= self.minimum_cases


class ActivePositionRequiredSpec(Specification["JudgeAggregate"]):
    def is_satisfied_by(self, candidate: JudgeAggregate) -> bool:
        return candidate.is_active()


class PrimaryPositionRequiredSpec(Specification["JudgeAggregate"]):
    def is_satisfied_by(self, candidate: JudgeAggregate) -> bool:
        return candidate.get_primary_court() is not None


class JurisdictionMatchSpec(Specification["JudgeAggregate"]):
    """Case-insensitive match on the judge's jurisdiction."""

    def __init__(self, target_jurisdiction: str) -> None:
        self.target_jurisdiction = target_jurisdiction

    def is_satisfied_by(self, candidate: JudgeAggregate) -> bool:
        return (
            candidate.jurisdiction.strip().casefold()
            == self.target_jurisdiction.strip().casefold()
        )


class BiasMetricsAvailableSpec(Specification["JudgeAggregate"]):
    def is_satisfied_by(self, candidate: JudgeAggregate) -> bool:
        return candidate.bias_metrics is not None


class CourtAssignmentSpec(Specification["JudgeAggregate"]):
    """Judge holds an active position at the given court."""

    def __init__(self, court_id: str) -> None:
        self.court_id = court_id

    def is_satisfied_by(self, candidate: JudgeAggregate) -> bool:
        return any(
            position.court_id == self.court_id and position.is_active
            for position in candidate.positions
        )


class _CaseVolumeEligibilitySpec(Specification["JudgeAggregate"]):
    """Minimum case volume plus an active position, with readable reasons."""

    def __init__(self, minimum_cases: int) -> None:
        self.minimum_case_spec = MinimumCaseRequirementSpec(minimum_cases)
        self.active_position_spec = ActivePositionRequiredSpec()

    def is_satisfied_by(self, candidate: JudgeAggregate) -> bool:
        return self.get_eligibility_status(candidate).eligible

    def get_eligibility_status(self, judge: JudgeAggregate) -> EligibilityStatus:
        reasons: list[str] = []

        if not self.minimum_case_spec.is_satisfied_by(judge):
            reasons.append(
                f"Requires minimum {self.minimum_case_spec.minimum_cases} cases "
                f"(current: {judge.total_cases})"
            )

        if not self.active_position_spec.is_satisfied_by(judge):
            reasons.append("Requires at least one active court position")

        return EligibilityStatus(eligible=not reasons, reasons=reasons)


class BiasAnalysisEligibilitySpec(_CaseVolumeEligibilitySpec):
    """Bias analysis needs enough cases for statistical confidence."""

    def __init__(self, minimum_cases: int = 500) -> None:
        super().__init__(minimum_cases)


class AdvertisingEligibilitySpec(_CaseVolumeEligibilitySpec):
    def __init__(self, minimum_cases: int = 100) -> None:
        super().__init__(minimum_cases)


class SeniorStatusEligibilitySpec(Specification["JudgeAggregate"]):
    """
    Years of service in the current primary position.

    ``minimum_age`` is kept for the usual "age 65 with 15 years" rule, but
    judge ages are not part of the model, so only service time is checked.
    """

    def __init__(
        self,
        minimum_years_of_service: int = 15,
        minimum_age: int = 65,
        as_of: date | None = None,
    ) -> None:
        self.minimum_years_of_service = minimum_years_of_service
        self.minimum_age = minimum_age
        self.as_of = as_of

    def is_satisfied_by(self, candidate: JudgeAggregate) -> bool:
        primary = candidate.get_primary_court()
        if primary is None:
            return False
        as_of = self.as_of or date.today()
        return years_of_service(primary.start_date, as_of) >= self.minimum_years_of_service


class HighProfileJudgeSpec(Specification["JudgeAggregate"]):
    """Judges with large case volumes, used for premium placements."""

    def __init__(self, minimum_cases: int = 1000, require_bias_metrics: bool = True) -> None:
        self.minimum_cases = minimum_cases
        self.require_bias_metrics = require_bias_metrics

    def is_satisfied_by(self, candidate: JudgeAggregate) -> bool:
        has_metrics = candidate.bias_metrics is not None or not self.require_bias_metrics
        return (
            candidate.total_cases >= self.minimum_cases
            and candidate.get_primary_court() is not None
            and has_metrics
        )
