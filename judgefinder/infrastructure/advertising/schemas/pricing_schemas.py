"""Pydantic schemas for advertising pricing and bar number checks."""

from pydantic import BaseModel, Field

from judgefinder.domain.advertising.services.ad_pricing_service import (
    CourtLevel,
    PricingBreakdown,
    PricingFactors,
    PricingTier,
)
from judgefinder.domain.common.value_objects.bar_number import BarNumber
from judgefinder.domain.common.value_objects.money import Money


class MoneySchema(BaseModel):
    amount: float = Field(..., description="Amount in major units, e.g. dollars")
    cents: int = Field(..., description="Amount in minor units")
    currency: str
    formatted: str = Field(..., description="Display form, e.g. '$20,500.00'")

    @classmethod
    def from_domain(cls, money: Money) -> "MoneySchema":
        return cls(**money.to_dict())


class QuoteRequest(BaseModel):
    """Inputs for a price quote. Range checks happen in the pricing service."""

    tier: PricingTier = PricingTier.STANDARD
    court_level: CourtLevel = CourtLevel.STATE
    is_exclusive: bool = Field(False, description="Exclusive spot on the judge's page")
    is_premium_judge: bool = False
    bundle_size: int = Field(1, description="Number of spots bought together")
    duration_months: int = Field(1, description="Contract length in months")

    def to_factors(self) -> PricingFactors:
        return PricingFactors(
            tier=self.tier,
            court_level=self.court_level,
            is_exclusive=self.is_exclusive,
            is_premium_judge=self.is_premium_judge,
            bundle_size=self.bundle_size,
            duration_months=self.duration_months,
        )


class PricingBreakdownResponse(BaseModel):
    """Every step of a price calculation."""

    base_price: MoneySchema
    court_level_multiplier: float
    premium_multiplier: float
    exclusive_multiplier: float
    volume_discount: float
    annual_discount: float
    total_discount_rate: float
    subtotal: MoneySchema
    total_discount: MoneySchema
    final_price: MoneySchema
    price_per_month: MoneySchema
    savings: MoneySchema

    @classmethod
    def from_domain(cls, breakdown: PricingBreakdown) -> "PricingBreakdownResponse":
        return cls(
            base_price=MoneySchema.from_domain(breakdown.base_price),
            court_level_multiplier=float(breakdown.court_level_multiplier),
            premium_multiplier=float(breakdown.premium_multiplier),
            exclusive_multiplier=float(breakdown.exclusive_multiplier),
            volume_discount=float(breakdown.volume_discount),
            annual_discount=float(breakdown.annual_discount),
            total_discount_rate=float(breakdown.total_discount_rate),
            subtotal=MoneySchema.from_domain(breakdown.subtotal),
            total_discount=MoneySchema.from_domain(breakdown.total_discount),
            final_price=MoneySchema.from_domain(breakdown.final_price),
            price_per_month=MoneySchema.from_domain(breakdown.price_per_month),
            savings=MoneySchema.from_domain(breakdown.savings),
        )


class RoiThresholdRequest(QuoteRequest):
    average_client_value: float = Field(..., description="Average fee earned per new client")


class RoiThresholdResponse(BaseModel):
    pricing: PricingBreakdownResponse
    clients_to_break_even: int


class TierComparisonResponse(BaseModel):
    tiers: dict[PricingTier, PricingBreakdownResponse]
    recommended_tier: PricingTier | None = None


class BarNumberVerifyRequest(BaseModel):
    """Either ``full`` ("CA-123456") or ``state`` with ``number``."""

    state: str | None = Field(None, description="Two-letter state code")
    number: str | None = Field(None, description="Bar number issued by the state")
    full: str | None = Field(None, description="STATE-NUMBER form")


class BarNumberResponse(BaseModel):
    state: str
    number: str
    full: str
    is_valid: bool = True

    @classmethod
    def from_domain(cls, bar_number: BarNumber) -> "BarNumberResponse":
        return cls(**bar_number.to_dict())
