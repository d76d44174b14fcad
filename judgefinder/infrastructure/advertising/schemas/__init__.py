from .pricing_schemas import (
    BarNumberResponse,
    BarNumberVerifyRequest,
    MoneySchema,
    PricingBreakdownResponse,
    QuoteRequest,
    RoiThresholdRequest,
    RoiThresholdResponse,
    TierComparisonResponse,
)

__all__ = [
    "BarNumberResponse",
    "BarNumberVerifyRequest",
    "MoneySchema",
    "PricingBreakdownResponse",
    "QuoteRequest",
    "RoiThresholdRequest",
    "RoiThresholdResponse",
    "TierComparisonResponse",
]
