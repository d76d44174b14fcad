"""Use cases for advertising quotes and advertiser bar number checks."""

from dataclasses import dataclass
from decimal import Decimal

import structlog

from judgefinder.domain.advertising.services.ad_pricing_service import (
    AdPricingService,
    CourtLevel,
    PricingBreakdown,
    PricingFactors,
    PricingTier,
)
from judgefinder.domain.common.exceptions import ValidationError
from judgefinder.domain.common.result import Err, Result
from judgefinder.domain.common.value_objects.bar_number import BarNumber
from judgefinder.domain.common.value_objects.money import Money

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class RoiEstimate:
    pricing: PricingBreakdown
    clients_to_break_even: int


class AdPricingUseCase:
    """Use case for pricing quotes and related advertiser checks."""

    def __init__(self, pricing_service: AdPricingService) -> None:
        self.pricing_service = pricing_service

    def quote(self, factors: PricingFactors) -> Result[PricingBreakdown, ValidationError]:
        result = self.pricing_service.calculate_pricing(factors)
        if isinstance(result, Err):
            logger.info(
                "pricing_quote_rejected",
                bundle_size=factors.bundle_size,
                duration_months=factors.duration_months,
                reason=result.error.message,
            )
            return result

        logger.info(
            "pricing_quoted",
            bundle_size=factors.bundle_size,
            duration_months=factors.duration_months,
            is_exclusive=factors.is_exclusive,
            final_price_cents=result.value.final_price.cents,
        )
        return result

    def annual_savings(
        self,
        tier: PricingTier = PricingTier.STANDARD,
        court_level: CourtLevel = CourtLevel.STATE,
    ) -> Result[Money, ValidationError]:
        return self.pricing_service.estimate_annual_savings(tier, court_level)

    def roi_threshold(
        self, factors: PricingFactors, average_client_value: float | Decimal
    ) -> Result[RoiEstimate, ValidationError]:
        """Quote the factors, then work out how many clients cover the cost."""
        return self.pricing_service.calculate_pricing(factors).flat_map(
            lambda pricing: self.pricing_service.calculate_roi_threshold(
                pricing, average_client_value
            ).map(lambda clients: RoiEstimate(pricing=pricing, clients_to_break_even=clients))
        )

    def compare_tiers(
        self, court_level: CourtLevel = CourtLevel.STATE, duration_months: int = 1
    ) -> Result[dict[PricingTier, PricingBreakdown], ValidationError]:
        return self.pricing_service.compare_tiers(court_level, duration_months)

    def recommend_tier(
        self, monthly_budget: float | Decimal, court_level: CourtLevel = CourtLevel.STATE
    ) -> PricingTier:
        return self.pricing_service.recommend_tier(monthly_budget, court_level)

    def verify_bar_number(
        self,
        state: str | None = None,
        number: str | None = None,
        full: str | None = None,
    ) -> Result[BarNumber, ValidationError]:
        """
        Validate an advertiser's bar number.

        Accepts either ``full`` ("CA-123456") or a separate state and number.
        Only the format is checked; state bar registries are not contacted.
        """
        if full is not None:
            result = BarNumber.parse(full)
        elif state is not None and number is not None:
            result = BarNumber.create(state, number)
        else:
            return Err(ValidationError("Bar number and state are required", field="number"))

        if isinstance(result, Err):
            logger.info("bar_number_rejected", reason=result.error.message)
        else:
            logger.info("bar_number_verified", state=result.value.state)
        return result
