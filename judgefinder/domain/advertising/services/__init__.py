from .ad_pricing_service import (
    AdPricingService,
    CourtLevel,
    PricingBreakdown,
    PricingFactors,
    PricingTier,
)

__all__ = [
    "AdPricingService",
    "CourtLevel",
    "PricingBreakdown",
    "PricingFactors",
    "PricingTier",
]
