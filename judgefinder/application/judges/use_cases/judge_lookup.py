"""Shared loading step for judge use cases."""

from judgefinder.application.common.event_publisher import EventPublisherProtocol
from judgefinder.application.judges.protocols.judge_repository import JudgeRepositoryProtocol
from judgefinder.domain.common.exceptions import EntityNotFoundError
from judgefinder.domain.common.result import Err, Ok, Result
from judgefinder.domain.judges.entities.court_position import JudgeId
from judgefinder.domain.judges.entities.judge import JudgeAggregate


def load_judge(
    repository: JudgeRepositoryProtocol, judge_id: str
) -> Result[JudgeAggregate, EntityNotFoundError]:
    if not judge_id.strip():
        return Err(EntityNotFoundError("Judge", judge_id))
    judge = repository.find_by_id(JudgeId(judge_id.strip()))
    if judge is None:
        return Err(EntityNotFoundError("Judge", judge_id))
    return Ok(judge)


def publish_recorded_events(judge: JudgeAggregate, publisher: EventPublisherProtocol) -> None:
    """Drain the judge's recorded events into the publisher."""
    events = judge.collect_domain_events()
    if events:
        publisher.publish(events)
