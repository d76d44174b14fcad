"""
Domain service for advertising spot pricing.

Flat-rate model: every spot costs the same base monthly price, with
multipliers for exclusivity and discounts for volume and annual terms.
Tier and court level are still accepted so older callers keep working,
but they no longer change the price.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import Decimal
from enum import StrEnum
from typing import Final

from judgefinder.domain.common.exceptions import ValidationError
from judgefinder.domain.common.result import Err, Ok, Result, combine
from judgefinder.domain.common.value_objects.money import Money


class PricingTier(StrEnum):
    BASIC = "basic"
    STANDARD = "standard"
    PREMIUM = "premium"
    ENTERPRISE = "enterprise"


class CourtLevel(StrEnum):
    FEDERAL = "federal"
    STATE = "state"


BASE_MONTHLY_PRICE: Final = Decimal(500)
EXCLUSIVE_MULTIPLIER: Final = Decimal("1.5")
COURT_LEVEL_MULTIPLIER: Final = Decimal(1)
PREMIUM_JUDGE_MULTIPLIER: Final = Decimal(1)

# Largest threshold first; the first match wins, no stacking.
VOLUME_DISCOUNTS: Final[tuple[tuple[int, Decimal], ...]] = (
    (10, Decimal("0.20")),
    (5, Decimal("0.15")),
    (3, Decimal("0.10")),
)

# Two months free on annual terms.
ANNUAL_DISCOUNT: Final = Decimal(2) / Decimal(12)
ANNUAL_TERM_MONTHS: Final = 12
MAX_COMBINED_DISCOUNT: Final = Decimal("0.35")

MIN_BUNDLE_SIZE: Final = 1
MAX_BUNDLE_SIZE: Final = 50
MIN_DURATION_MONTHS: Final = 1
MAX_DURATION_MONTHS: Final = 36


@dataclass(frozen=True)
class PricingFactors:
    tier: PricingTier = PricingTier.STANDARD
    court_level: CourtLevel = CourtLevel.STATE
    is_exclusive: bool = False
    is_premium_judge: bool = False
    bundle_size: int = 1
    duration_months: int = 1


@dataclass(frozen=True)
class PricingBreakdown:
    """Every intermediate value of a price calculation."""

    base_price: Money
    court_level_multiplier: Decimal
    premium_multiplier: Decimal
    exclusive_multiplier: Decimal
    volume_discount: Decimal
    annual_discount: Decimal
    total_discount_rate: Decimal
    subtotal: Money
    total_discount: Money
    final_price: Money
    price_per_month: Money
    savings: Money


class AdPricingService:
    """
    Calculates advertising prices.

    Pricing steps:
    - subtotal = base x exclusive multiplier x bundle size x months
    - volume discount by bundle size, annual discount for 12+ months
    - combined discount capped at 35%
    """

    def calculate_pricing(
        self, factors: PricingFactors
    ) -> Result[PricingBreakdown, ValidationError]:
        validation = self._validate_factors(factors)
        if isinstance(validation, Err):
            return validation

        exclusive_multiplier = EXCLUSIVE_MULTIPLIER if factors.is_exclusive else Decimal(1)
        volume_discount = self._volume_discount(factors.bundle_size)
        annual_discount = (
            ANNUAL_DISCOUNT if factors.duration_months >= ANNUAL_TERM_MONTHS else Decimal(0)
        )
        combined_discount = min(volume_discount + annual_discount, MAX_COMBINED_DISCOUNT)

        base_result = Money.from_dollars(BASE_MONTHLY_PRICE)
        if isinstance(base_result, Err):
            return base_result
        base_price = base_result.value

        subtotal_result = (
            base_price.multiply(COURT_LEVEL_MULTIPLIER * PREMIUM_JUDGE_MULTIPLIER)
            .flat_map(lambda price: price.multiply(exclusive_multiplier))
            .flat_map(lambda price: price.multiply(factors.bundle_size))
            .flat_map(lambda price: price.multiply(factors.duration_months))
        )
        if isinstance(subtotal_result, Err):
            return subtotal_result
        subtotal = subtotal_result.value

        final_result = subtotal.apply_discount(combined_discount * 100)
        if isinstance(final_result, Err):
            return final_result
        final_price = final_result.value

        if final_price.is_negative():
            return Err(
                ValidationError(
                    "Final price cannot be negative",
                    {"final_price_cents": final_price.cents},
                )
            )

        savings_result = subtotal.subtract(final_price)
        per_month_result = final_price.divide(factors.duration_months)
        return combine([savings_result, per_month_result]).map(
            lambda values: PricingBreakdown(
                base_price=base_price,
                court_level_multiplier=COURT_LEVEL_MULTIPLIER,
                premium_multiplier=PREMIUM_JUDGE_MULTIPLIER,
                exclusive_multiplier=exclusive_multiplier,
                volume_discount=volume_discount,
                annual_discount=annual_discount,
                total_discount_rate=combined_discount,
                subtotal=subtotal,
                total_discount=values[0],
                final_price=final_price,
                price_per_month=values[1],
                savings=values[0],
            )
        )

    def calculate_monthly_price(self, factors: PricingFactors) -> Result[Money, ValidationError]:
        return self.calculate_pricing(factors).map(lambda breakdown: breakdown.price_per_month)

    def estimate_annual_savings(
        self,
        tier: PricingTier = PricingTier.STANDARD,
        court_level: CourtLevel = CourtLevel.STATE,
    ) -> Result[Money, ValidationError]:
        """
        Savings of one annual plan over twelve one-month plans for a single spot.

        Compares against the annual plan's final price rather than its
        rounded monthly price, so the result is exact to the cent.
        """
        monthly = PricingFactors(tier=tier, court_level=court_level, duration_months=1)
        annual = PricingFactors(
            tier=tier, court_level=court_level, duration_months=ANNUAL_TERM_MONTHS
        )

        yearly_at_monthly_rate = self.calculate_pricing(monthly).flat_map(
            lambda breakdown: breakdown.final_price.multiply(ANNUAL_TERM_MONTHS)
        )
        annual_cost = self.calculate_pricing(annual).map(lambda breakdown: breakdown.final_price)

        return combine([yearly_at_monthly_rate, annual_cost]).flat_map(
            lambda values: values[0].subtract(values[1])
        )

    def calculate_roi_threshold(
        self, pricing: PricingBreakdown, average_client_value: float | Decimal
    ) -> Result[int, ValidationError]:
        """Number of converted clients needed to cover the final price."""
        if (
            isinstance(average_client_value, bool)
            or not isinstance(average_client_value, int | float | Decimal)
            or not math.isfinite(average_client_value)
            or average_client_value <= 0
        ):
            return Err(
                ValidationError(
                    "Average client value must be a positive number",
                    {"average_client_value": str(average_client_value)},
                    field="average_client_value",
                )
            )
        client_value = Decimal(str(average_client_value))
        return Ok(math.ceil(pricing.final_price.dollars / client_value))

    def compare_tiers(
        self, court_level: CourtLevel = CourtLevel.STATE, duration_months: int = 1
    ) -> Result[dict[PricingTier, PricingBreakdown], ValidationError]:
        """Only the standard tier exists in the flat-rate model."""
        factors = PricingFactors(
            tier=PricingTier.STANDARD, court_level=court_level, duration_months=duration_months
        )
        return self.calculate_pricing(factors).map(
            lambda breakdown: {PricingTier.STANDARD: breakdown}
        )

    def recommend_tier(
        self, monthly_budget: float | Decimal, court_level: CourtLevel = CourtLevel.STATE
    ) -> PricingTier:
        return PricingTier.STANDARD

    def _volume_discount(self, bundle_size: int) -> Decimal:
        for threshold, discount in VOLUME_DISCOUNTS:
            if bundle_size >= threshold:
                return discount
        return Decimal(0)

    def _validate_factors(self, factors: PricingFactors) -> Result[None, ValidationError]:
        bundle_size = factors.bundle_size
        duration = factors.duration_months

        if isinstance(bundle_size, bool) or not isinstance(bundle_size, int):
            return Err(
                ValidationError(
                    "Bundle size must be a whole number",
                    {"value": str(bundle_size)},
                    field="bundle_size",
                )
            )
        if bundle_size < MIN_BUNDLE_SIZE:
            return Err(
                ValidationError(
                    f"Bundle size must be at least {MIN_BUNDLE_SIZE}",
                    {"value": bundle_size},
                    field="bundle_size",
                )
            )
        if bundle_size > MAX_BUNDLE_SIZE:
            return Err(
                ValidationError(
                    f"Bundle size cannot exceed {MAX_BUNDLE_SIZE}",
                    {"value": bundle_size},
                    field="bundle_size",
                )
            )

        if isinstance(duration, bool) or not isinstance(duration, int):
            return Err(
                ValidationError(
                    "Duration must be a whole number of months",
                    {"value": str(duration)},
                    field="duration_months",
                )
            )
        if duration < MIN_DURATION_MONTHS:
            return Err(
                ValidationError(
                    f"Duration must be at least {MIN_DURATION_MONTHS} month",
                    {"value": duration},
                    field="duration_months",
                )
            )
        if duration > MAX_DURATION_MONTHS:
            return Err(
                ValidationError(
                    f"Duration cannot exceed {MAX_DURATION_MONTHS} months",
                    {"value": duration},
                    field="duration_months",
                )
            )

        return Ok(None)
