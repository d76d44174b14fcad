from .bias_analysis_use_case import BiasAnalysisUseCase, EligibilityReport
from .court_assignment_use_case import AssignmentReview, CourtAssignmentUseCase
from .judge_profile_use_case import JudgeProfileUseCase

__all__ = [
    "AssignmentReview",
    "BiasAnalysisUseCase",
    "CourtAssignmentUseCase",
    "EligibilityReport",
    "JudgeProfileUseCase",
]
