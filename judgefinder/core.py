from dependency_injector import containers, providers

from judgefinder.application.advertising.use_cases.ad_pricing_use_case import AdPricingUseCase
from judgefinder.application.judges.use_cases.bias_analysis_use_case import BiasAnalysisUseCase
from judgefinder.application.judges.use_cases.court_assignment_use_case import (
    CourtAssignmentUseCase,
)
from judgefinder.application.judges.use_cases.judge_profile_use_case import JudgeProfileUseCase
from judgefinder.domain.advertising.services.ad_pricing_service import AdPricingService
from judgefinder.domain.judges.services.court_assignment_service import CourtAssignmentService
from judgefinder.infrastructure.common.event_publisher import InMemoryEventPublisher
from judgefinder.infrastructure.judges.repositories.judge_repository import (
    InMemoryJudgeRepository,
)


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    # Repositories and adapters
    judge_repository = providers.Singleton(InMemoryJudgeRepository)
    event_publisher = providers.Singleton(InMemoryEventPublisher)

    # Domain services (pure domain logic, no state)
    court_assignment_service = providers.Factory(CourtAssignmentService)
    ad_pricing_service = providers.Factory(AdPricingService)

    # Judges module, application use cases
    judge_profile_use_case = providers.Factory(
        JudgeProfileUseCase,
        judge_repository=judge_repository,
        event_publisher=event_publisher,
    )
    court_assignment_use_case = providers.Factory(
        CourtAssignmentUseCase,
        judge_repository=judge_repository,
        event_publisher=event_publisher,
        assignment_service=court_assignment_service,
    )
    bias_analysis_use_case = providers.Factory(
        BiasAnalysisUseCase,
        judge_repository=judge_repository,
        event_publisher=event_publisher,
    )

    # Advertising module, application use cases
    ad_pricing_use_case = providers.Factory(
        AdPricingUseCase,
        pricing_service=ad_pricing_service,
    )


# Initialize container
container = Container()
