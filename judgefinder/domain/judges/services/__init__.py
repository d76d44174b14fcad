from .court_assignment_service import (
    AssignmentConflict,
    AssignmentValidation,
    ConflictSeverity,
    ConflictType,
    CourtAssignmentService,
)

__all__ = [
    "AssignmentConflict",
    "AssignmentValidation",
    "ConflictSeverity",
    "ConflictType",
    "CourtAssignmentService",
]
