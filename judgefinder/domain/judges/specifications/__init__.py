from .judge_eligibility import (
    ActivePositionRequiredSpec,
    AdvertisingEligibilitySpec,
    BiasAnalysisEligibilitySpec,
    BiasMetricsAvailableSpec,
    CourtAssignmentSpec,
    EligibilityStatus,
    HighProfileJudgeSpec,
    JurisdictionMatchSpec,
    MinimumCaseRequirementSpec,
    PrimaryPositionRequiredSpec,
    SeniorStatusEligibilitySpec,
)

__all__ = [
    "ActivePositionRequiredSpec",
    "AdvertisingEligibilitySpec",
    "BiasAnalysisEligibilitySpec",
    "BiasMetricsAvailableSpec",
    "CourtAssignmentSpec",
    "EligibilityStatus",
    "HighProfileJudgeSpec",
    "JurisdictionMatchSpec",
    "MinimumCaseRequirementSpec",
    "PrimaryPositionRequiredSpec",
    "SeniorStatusEligibilitySpec",
]
