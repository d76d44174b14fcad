from .court_position import (
    OPEN_ENDED_DATE,
    AssignmentType,
    BiasMetrics,
    BiasScores,
    CourtPosition,
    JudgeId,
    RetirementType,
)
from .judge import MINIMUM_CASES_FOR_BIAS, JudgeAggregate

__all__ = [
    "MINIMUM_CASES_FOR_BIAS",
    "OPEN_ENDED_DATE",
    "AssignmentType",
    "BiasMetrics",
    "BiasScores",
    "CourtPosition",
    "JudgeAggregate",
    "JudgeId",
    "RetirementType",
]
