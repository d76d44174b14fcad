from .judge_schemas import (
    AssignmentConflictSchema,
    AssignmentRequest,
    AssignmentReviewResponse,
    AssignmentValidationSchema,
    BiasMetricsSchema,
    BiasScoresSchema,
    CaseCountUpdateRequest,
    CourtPositionSchema,
    EligibilityResponse,
    EligibilityStatusSchema,
    JudgeCreateRequest,
    JudgeResponse,
    JudgesListResponse,
    RetirementRequest,
)

__all__ = [
    "AssignmentConflictSchema",
    "AssignmentRequest",
    "AssignmentReviewResponse",
    "AssignmentValidationSchema",
    "BiasMetricsSchema",
    "BiasScoresSchema",
    "CaseCountUpdateRequest",
    "CourtPositionSchema",
    "EligibilityResponse",
    "EligibilityStatusSchema",
    "JudgeCreateRequest",
    "JudgeResponse",
    "JudgesListResponse",
    "RetirementRequest",
]
