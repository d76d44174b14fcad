"""Use cases for bias metrics and judge eligibility checks."""

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
from judgefinder.domain.judges.entities.court_position import BiasScores
from judgefinder.domain.judges.entities.judge import MINIMUM_CASES_FOR_BIAS, JudgeAggregate
from judgefinder.domain.judges.specifications.judge_eligibility import (
    AdvertisingEligibilitySpec,
    BiasAnalysisEligibilitySpec,
    BiasMetricsAvailableSpec,
    EligibilityStatus,
    HighProfileJudgeSpec,
    SeniorStatusEligibilitySpec,
)

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class EligibilityReport:
    judge_id: str
    bias_analysis: EligibilityStatus
    advertising: EligibilityStatus
    senior_status_eligible: bool
    high_profile: bool
    has_bias_metrics: bool


class BiasAnalysisUseCase:
    def __init__(
        self,
        judge_repository: JudgeRepositoryProtocol,
        event_publisher: EventPublisherProtocol,
    ) -> None:
        self.judge_repository = judge_repository
        self.event_publisher = event_publisher

    def calculate_bias_metrics(
        self, judge_id: str, scores: BiasScores
    ) -> Result[JudgeAggregate, DomainError]:
        """
        Store freshly computed bias scores for a judge.

        The aggregate enforces the 500-case floor; this use case never
        bypasses it.
        """
        loaded = load_judge(self.judge_repository, judge_id)
        if isinstance(loaded, Err):
            return loaded
        judge = loaded.value

        calculated = judge.calculate_bias_metrics(scores)
        if isinstance(calculated, Err):
            logger.info(
                "bias_metrics_rejected",
                judge_id=judge_id,
                total_cases=judge.total_cases,
                reason=calculated.error.message,
            )
            return calculated

        self.judge_repository.save(judge)
        publish_recorded_events(judge, self.event_publisher)
        logger.info("bias_metrics_calculated", judge_id=judge_id, cases=judge.total_cases)
        return Ok(judge)

    def get_eligibility(
        self, judge_id: str, as_of: date | None = None
    ) -> Result[EligibilityReport, DomainError]:
        loaded = load_judge(self.judge_repository, judge_id)
        if isinstance(loaded, Err):
            return loaded
        judge = loaded.value

        return Ok(
            EligibilityReport(
                judge_id=str(judge.id),
                bias_analysis=BiasAnalysisEligibilitySpec(
                    MINIMUM_CASES_FOR_BIAS
                ).get_eligibility_status(judge),
                advertising=AdvertisingEligibilitySpec().get_eligibility_status(judge),
                senior_status_eligible=SeniorStatusEligibilitySpec(as_of=as_of).is_satisfied_by(
                    judge
                ),
                high_profile=HighProfileJudgeSpec().is_satisfied_by(judge),
                has_bias_metrics=BiasMetricsAvailableSpec().is_satisfied_by(judge),
            )
        )
