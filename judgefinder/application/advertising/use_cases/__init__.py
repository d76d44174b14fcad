from .ad_pricing_use_case import AdPricingUseCase, RoiEstimate

__all__ = ["AdPricingUseCase", "RoiEstimate"]
