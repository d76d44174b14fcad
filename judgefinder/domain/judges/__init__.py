"""Judges module domain layer."""

from .entities import AssignmentType, CourtPosition, JudgeAggregate, JudgeId
from .services import CourtAssignmentService

__all__ = [
    "AssignmentType",
    "CourtAssignmentService",
    "CourtPosition",
    "JudgeAggregate",
    "JudgeId",
]
