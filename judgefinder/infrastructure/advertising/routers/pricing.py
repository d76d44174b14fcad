import logging

from fastapi import APIRouter, Depends, HTTPException, Query
from starlette import status

from judgefinder.application.advertising.use_cases.ad_pricing_use_case import AdPricingUseCase
from judgefinder.core import container
from judgefinder.domain.advertising.services.ad_pricing_service import CourtLevel, PricingTier
from judgefinder.domain.common.exceptions import DomainError
from judgefinder.infrastructure.advertising.schemas import (
    BarNumberResponse,
    BarNumberVerifyRequest,
    MoneySchema,
    PricingBreakdownResponse,
    QuoteRequest,
    RoiThresholdRequest,
    RoiThresholdResponse,
    TierComparisonResponse,
)
from judgefinder.infrastructure.common.di import inject_use_case
from judgefinder.infrastructure.common.errors import unwrap_or_raise

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/advertising", tags=["advertising"])


@router.post(
    "/pricing/quote",
    response_model=PricingBreakdownResponse,
    status_code=status.HTTP_200_OK,
)
def quote_price(
    request: QuoteRequest,
    use_case: AdPricingUseCase = Depends(inject_use_case(container.ad_pricing_use_case)),
) -> PricingBreakdownResponse:
    """
    Price an advertising package.

    Args:
        request: Bundle size, duration and exclusivity of the package
        use_case: AdPricingUseCase injected via dependency container

    Returns:
        Full pricing breakdown

    Raises:
        DomainError: If bundle size or duration is out of range
    """
    try:
        breakdown = unwrap_or_raise(use_case.quote(request.to_factors()))
        return PricingBreakdownResponse.from_domain(breakdown)
    except DomainError:
        # Re-raise domain errors - handled by exception handlers
        raise
    except Exception as e:
        logger.error(f"Failed to quote pricing: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.get(
    "/pricing/annual-savings",
    response_model=MoneySchema,
    status_code=status.HTTP_200_OK,
)
def annual_savings(
    tier: PricingTier = Query(PricingTier.STANDARD),
    court_level: CourtLevel = Query(CourtLevel.STATE),
    use_case: AdPricingUseCase = Depends(inject_use_case(container.ad_pricing_use_case)),
) -> MoneySchema:
    """Savings of one annual plan over twelve monthly plans for a single spot."""
    return MoneySchema.from_domain(unwrap_or_raise(use_case.annual_savings(tier, court_level)))


@router.post(
    "/pricing/roi-threshold",
    response_model=RoiThresholdResponse,
    status_code=status.HTTP_200_OK,
)
def roi_threshold(
    request: RoiThresholdRequest,
    use_case: AdPricingUseCase = Depends(inject_use_case(container.ad_pricing_use_case)),
) -> RoiThresholdResponse:
    estimate = unwrap_or_raise(
        use_case.roi_threshold(request.to_factors(), request.average_client_value)
    )
    return RoiThresholdResponse(
        pricing=PricingBreakdownResponse.from_domain(estimate.pricing),
        clients_to_break_even=estimate.clients_to_break_even,
    )


@router.get(
    "/pricing/tiers",
    response_model=TierComparisonResponse,
    status_code=status.HTTP_200_OK,
)
def compare_tiers(
    court_level: CourtLevel = Query(CourtLevel.STATE),
    duration_months: int = Query(1),
    monthly_budget: float | None = Query(None, description="Budget used to recommend a tier"),
    use_case: AdPricingUseCase = Depends(inject_use_case(container.ad_pricing_use_case)),
) -> TierComparisonResponse:
    """
    Compare pricing across tiers.

    The flat-rate model only has the standard tier, so the comparison holds
    a single entry.
    """
    tiers = unwrap_or_raise(use_case.compare_tiers(court_level, duration_months))
    return TierComparisonResponse(
        tiers={
            tier: PricingBreakdownResponse.from_domain(breakdown)
            for tier, breakdown in tiers.items()
        },
        recommended_tier=(
            use_case.recommend_tier(monthly_budget, court_level)
            if monthly_budget is not None
            else None
        ),
    )


@router.post(
    "/bar-numbers/verify",
    response_model=BarNumberResponse,
    status_code=status.HTTP_200_OK,
)
def verify_bar_number(
    request: BarNumberVerifyRequest,
    use_case: AdPricingUseCase = Depends(inject_use_case(container.ad_pricing_use_case)),
) -> BarNumberResponse:
    """
    Check the format of an advertiser's bar number.

    Invalid numbers are answered with 400 and the reason in ``detail``.
    """
    bar_number = unwrap_or_raise(
        use_case.verify_bar_number(state=request.state, number=request.number, full=request.full)
    )
    return BarNumberResponse.from_domain(bar_number)
