"""Use cases for assigning judges to courts and retiring them."""

from dataclasses import dataclass
from datetime import date

import structlog

from judgefinder.application.common.event_publisher import EventPublisherProtocol
from judgefinder.application.judges.protocols.judge_repository import JudgeRepositoryProtocol
from judgefinder.application.judges.use_cases.judge_lookup import (
    load_judge,
    publish_recorded_events,
)
from judgefinder.domain.common.exceptions import DomainError
from judgefinder.domain.common.result import Err, Ok, Result
from judgefinder.domain.judges.entities.court_position import AssignmentType, RetirementType
from judgefinder.domain.judges.entities.judge import JudgeAggregate
from judgefinder.domain.judges.services.court_assignment_service import (
    AssignmentConflict,
    AssignmentValidation,
    CourtAssignmentService,
)

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class AssignmentReview:
    """Everything an operator needs to decide on a proposed assignment."""

    validation: AssignmentValidation
    conflicts: list[AssignmentConflict]
    recommended_end_date: date | None
    requires_approval: bool
    current_workload: dict[str, int]


class CourtAssignmentUseCase:
    def __init__(
        self,
        judge_repository: JudgeRepositoryProtocol,
        event_publisher: EventPublisherProtocol,
        assignment_service: CourtAssignmentService,
    ) -> None:
        self.judge_repository = judge_repository
        self.event_publisher = event_publisher
        self.assignment_service = assignment_service

    def assign_to_court(
        self,
        judge_id: str,
        court_id: str,
        court_name: str,
        assignment_type: AssignmentType,
        start_date: date,
        jurisdiction: str,
        end_date: date | None = None,
        position_title: str | None = None,
    ) -> Result[JudgeAggregate, DomainError]:
        """
        Assign a judge to a court and persist the new position.

        The judge is saved only when the assignment succeeds. Conflict
        events recorded by a rejected attempt are still published.
        """
        loaded = load_judge(self.judge_repository, judge_id)
        if isinstance(loaded, Err):
            return loaded
        judge = loaded.value

        assigned = judge.assign_to_court(
            court_id=court_id,
            court_name=court_name,
            assignment_type=assignment_type,
            start_date=start_date,
            jurisdiction=jurisdiction,
            end_date=end_date,
            position_title=position_title,
        )

        if isinstance(assigned, Err):
            logger.info(
                "court_assignment_rejected",
                judge_id=judge_id,
                court_id=court_id,
                assignment_type=assignment_type.value,
                code=assigned.error.code,
                reason=assigned.error.message,
            )
            publish_recorded_events(judge, self.event_publisher)
            return assigned

        self.judge_repository.save(judge)
        publish_recorded_events(judge, self.event_publisher)
        logger.info(
            "judge_assigned_to_court",
            judge_id=judge_id,
            court_id=court_id,
            assignment_type=assignment_type.value,
            start_date=start_date.isoformat(),
        )
        return Ok(judge)

    def review_assignment(
        self,
        judge_id: str,
        court_id: str,
        court_name: str,
        assignment_type: AssignmentType,
        start_date: date,
        jurisdiction: str,
        end_date: date | None = None,
    ) -> Result[AssignmentReview, DomainError]:
        """Dry-run an assignment without changing the judge."""
        loaded = load_judge(self.judge_repository, judge_id)
        if isinstance(loaded, Err):
            return loaded
        judge = loaded.value

        service = self.assignment_service
        return service.validate_assignment(
            judge, court_id, court_name, assignment_type, start_date, jurisdiction, end_date
        ).map(
            lambda validation: AssignmentReview(
                validation=validation,
                conflicts=service.detect_conflicts(
                    judge, court_id, assignment_type, start_date, end_date, jurisdiction
                ),
                recommended_end_date=service.recommend_end_date(assignment_type, start_date),
                requires_approval=service.requires_approval(assignment_type),
                current_workload=service.calculate_workload_distribution(judge.positions),
            )
        )

    def retire_from_position(
        self,
        judge_id: str,
        court_id: str,
        retirement_date: date,
        retirement_type: RetirementType = RetirementType.FULL,
    ) -> Result[JudgeAggregate, DomainError]:
        loaded = load_judge(self.judge_repository, judge_id)
        if isinstance(loaded, Err):
            return loaded
        judge = loaded.value

        retired = judge.retire_from_position(court_id, retirement_date, retirement_type)
        if isinstance(retired, Err):
            logger.info(
                "retirement_rejected",
                judge_id=judge_id,
                court_id=court_id,
                reason=retired.error.message,
            )
            return retired

        self.judge_repository.save(judge)
        publish_recorded_events(judge, self.event_publisher)
        logger.info(
            "judge_retired",
            judge_id=judge_id,
            court_id=court_id,
            retirement_type=retirement_type.value,
        )
        return Ok(judge)
