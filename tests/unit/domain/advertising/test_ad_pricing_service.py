"""Tests for AdPricingService domain service."""

from decimal import Decimal

import pytest

from judgefinder.domain.advertising.services.ad_pricing_service import (
    MAX_COMBINED_DISCOUNT,
    AdPricingService,
    CourtLevel,
    PricingFactors,
    PricingTier,
)
from judgefinder.domain.common.exceptions import ValidationError
from judgefinder.domain.common.value_objects.money import Money


def dollars(amount: str) -> Money:
    return Money.from_dollars(Decimal(amount)).unwrap()


class TestCalculatePricing:
    def test_single_spot_one_month(self) -> None:
        breakdown = AdPricingService().calculate_pricing(PricingFactors()).unwrap()
        assert breakdown.base_price == dollars("500")
        assert breakdown.final_price == dollars("500")
        assert breakdown.total_discount_rate == 0
        assert breakdown.savings.is_zero()

    def test_bundle_of_five_for_a_year(self) -> None:
        factors = PricingFactors(bundle_size=5, duration_months=12)

        breakdown = AdPricingService().calculate_pricing(factors).unwrap()

        assert breakdown.subtotal == dollars("30000")
        assert breakdown.volume_discount == Decimal("0.15")
        assert breakdown.total_discount_rate < MAX_COMBINED_DISCOUNT
        assert breakdown.final_price.to_formatted_string() == "$20,500.00"
        assert breakdown.savings == dollars("9500")
        assert breakdown.total_discount == breakdown.savings
        assert breakdown.price_per_month == dollars("1708.33")

    @pytest.mark.parametrize("bundle_size", [10, 25, 50])
    def test_combined_discount_capped(self, bundle_size: int) -> None:
        factors = PricingFactors(bundle_size=bundle_size, duration_months=12)

        breakdown = AdPricingService().calculate_pricing(factors).unwrap()

        assert breakdown.volume_discount + breakdown.annual_discount > MAX_COMBINED_DISCOUNT
        assert breakdown.total_discount_rate == MAX_COMBINED_DISCOUNT
        expected = breakdown.subtotal.apply_discount(35).unwrap()
        assert breakdown.final_price == expected

    def test_exclusive_multiplier(self) -> None:
        factors = PricingFactors(is_exclusive=True, bundle_size=3, duration_months=2)
        breakdown = AdPricingService().calculate_pricing(factors).unwrap()
        assert breakdown.exclusive_multiplier == Decimal("1.5")
        assert breakdown.subtotal == dollars("4500")
        assert breakdown.final_price == dollars("4050")

    def test_tier_and_court_level_do_not_change_price(self) -> None:
        service = AdPricingService()
        standard = service.calculate_pricing(PricingFactors()).unwrap()
        other = service.calculate_pricing(
            PricingFactors(
                tier=PricingTier.ENTERPRISE, court_level=CourtLevel.FEDERAL, is_premium_judge=True
            )
        ).unwrap()
        assert other.final_price == standard.final_price

    @pytest.mark.parametrize(
        ("factors", "message", "field"),
        [
            (PricingFactors(bundle_size=0), "Bundle size must be at least 1", "bundle_size"),
            (PricingFactors(bundle_size=51), "Bundle size cannot exceed 50", "bundle_size"),
            (
                PricingFactors(duration_months=0),
                "Duration must be at least 1 month",
                "duration_months",
            ),
            (
                PricingFactors(duration_months=37),
                "Duration cannot exceed 36 months",
                "duration_months",
            ),
        ],
    )
    def test_out_of_range_factors(self, factors: PricingFactors, message: str, field: str) -> None:
        error = AdPricingService().calculate_pricing(factors).unwrap_err()
        assert isinstance(error, ValidationError)
        assert error.message == message
        assert error.metadata["field"] == field


class TestPricingHelpers:
    def test_monthly_price(self) -> None:
        monthly = AdPricingService().calculate_monthly_price(PricingFactors(duration_months=12))
        assert monthly.unwrap() == dollars("416.67")

    def test_annual_savings(self) -> None:
        assert AdPricingService().estimate_annual_savings().unwrap() == dollars("1000")

    def test_roi_threshold(self) -> None:
        service = AdPricingService()
        pricing = service.calculate_pricing(PricingFactors(bundle_size=5, duration_months=12))
        assert service.calculate_roi_threshold(pricing.unwrap(), 3000).unwrap() == 7
        assert service.calculate_roi_threshold(pricing.unwrap(), 20500).unwrap() == 1

    @pytest.mark.parametrize("value", [0, -10, float("nan"), True])
    def test_roi_threshold_rejects_bad_client_value(self, value: float) -> None:
        service = AdPricingService()
        pricing = service.calculate_pricing(PricingFactors()).unwrap()
        error = service.calculate_roi_threshold(pricing, value).unwrap_err()
        assert error.message == "Average client value must be a positive number"

    def test_compare_tiers_has_only_standard(self) -> None:
        tiers = AdPricingService().compare_tiers().unwrap()
        assert list(tiers) == [PricingTier.STANDARD]

    def test_recommend_tier(self) -> None:
        assert AdPricingService().recommend_tier(10_000) == PricingTier.STANDARD
