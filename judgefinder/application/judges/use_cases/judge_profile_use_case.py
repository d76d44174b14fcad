"""Use cases for registering and reading judge profiles."""

from collections.abc import Mapping

import structlog

from judgefinder.application.common.event_publisher import EventPublisherProtocol
from judgefinder.application.judges.protocols.judge_repository import JudgeRepositoryProtocol
from judgefinder.application.judges.use_cases.judge_lookup import (
    load_judge,
    publish_recorded_events,
)
from judgefinder.domain.common.exceptions import (
    BusinessRuleViolationError,
    DomainError,
    EntityNotFoundError,
)
from judgefinder.domain.common.result import Err, Ok, Result
from judgefinder.domain.judges.entities.judge import JudgeAggregate

logger = structlog.get_logger(__name__)


class JudgeProfileUseCase:
    """Use case for judge profile operations."""

    def __init__(
        self,
        judge_repository: JudgeRepositoryProtocol,
        event_publisher: EventPublisherProtocol,
    ) -> None:
        self.judge_repository = judge_repository
        self.event_publisher = event_publisher

    def register_judge(self, record: Mapping[str, object]) -> Result[JudgeAggregate, DomainError]:
        """
        Register a judge from a persisted-style record.

        Args:
            record: Judge fields as stored (id, name, jurisdiction, total_cases,
                positions, bias_metrics)

        Returns:
            Ok with the saved judge, or Err when the record is malformed, breaks
            an aggregate invariant or reuses an existing id
        """
        created = JudgeAggregate.from_dict(record)
        if isinstance(created, Err):
            logger.info(
                "judge_registration_rejected",
                judge_id=record.get("id"),
                code=created.error.code,
                reason=created.error.message,
            )
            return created

        judge = created.value
        if self.judge_repository.find_by_id(judge.id) is not None:
            return Err(
                BusinessRuleViolationError(
                    f"Judge {judge.id} already exists",
                    {"judge_id": str(judge.id)},
                    rule="unique_judge_id",
                )
            )

        saved = self.judge_repository.save(judge)
        logger.info(
            "judge_registered",
            judge_id=str(saved.id),
            jurisdiction=saved.jurisdiction,
            positions=len(saved.positions),
        )
        return Ok(saved)

    def get_judge(self, judge_id: str) -> Result[JudgeAggregate, EntityNotFoundError]:
        return load_judge(self.judge_repository, judge_id)

    def list_judges(self) -> list[JudgeAggregate]:
        return self.judge_repository.list_all()

    def update_case_count(
        self, judge_id: str, total_cases: int
    ) -> Result[JudgeAggregate, DomainError]:
        """Raise a judge's case count. Counts never go down."""
        loaded = load_judge(self.judge_repository, judge_id)
        if isinstance(loaded, Err):
            return loaded
        judge = loaded.value

        updated = judge.update_case_count(total_cases)
        if isinstance(updated, Err):
            logger.info(
                "case_count_update_rejected",
                judge_id=judge_id,
                current=judge.total_cases,
                requested=total_cases,
            )
            return updated

        saved = self.judge_repository.save(judge)
        publish_recorded_events(judge, self.event_publisher)
        logger.info("case_count_updated", judge_id=judge_id, total_cases=total_cases)
        return Ok(saved)
