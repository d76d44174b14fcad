"""Protocol for Judge repository operations."""

from typing import Protocol

from judgefinder.domain.judges.entities.court_position import JudgeId
from judgefinder.domain.judges.entities.judge import JudgeAggregate


class JudgeRepositoryProtocol(Protocol):
    """Protocol defining the interface for Judge repository operations."""

    def find_by_id(self, judge_id: JudgeId) -> JudgeAggregate | None: ...

    def list_all(self) -> list[JudgeAggregate]: ...

    def save(self, judge: JudgeAggregate) -> JudgeAggregate: ...
