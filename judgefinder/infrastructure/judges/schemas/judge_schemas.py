"""Pydantic schemas for Judge API request/response validation."""

from datetime import date, datetime

from pydantic import BaseModel, Field

from judgefinder.domain.judges.entities.court_position import (
    AssignmentType,
    BiasMetrics,
    BiasScores,
    CourtPosition,
    RetirementType,
)
from judgefinder.domain.judges.entities.judge import JudgeAggregate


class CourtPositionSchema(BaseModel):
    """A judge's assignment to one court."""

    court_id: str = Field(..., min_length=1, description="Court identifier")
    court_name: str = Field(..., min_length=1, description="Court display name")
    assignment_type: AssignmentType = Field(..., description="Kind of assignment")
    start_date: date = Field(..., description="First day of the assignment")
    end_date: date | None = Field(None, description="Last day, or null when open-ended")
    is_active: bool = Field(True, description="Whether the position is current")
    jurisdiction: str | None = Field(None, description="Jurisdiction of the court")
    position_title: str | None = Field(None, description="Title held at the court")

    model_config = {"from_attributes": True}


class BiasScoresSchema(BaseModel):
    """Scores produced by the analytics pipeline."""

    consistency_score: float = Field(..., description="Consistency of rulings")
    speed_score: float = Field(..., description="Speed of case resolution")
    settlement_preference: float = Field(..., description="Tendency to push settlement")
    risk_tolerance: float = Field(..., description="Tolerance for novel arguments")
    predictability_score: float = Field(..., description="Predictability of outcomes")

    def to_domain(self) -> BiasScores:
        return BiasScores(**self.model_dump())


class BiasMetricsSchema(BiasScoresSchema):
    calculated_at: datetime
    cases_analyzed: int = Field(..., ge=0)

    @classmethod
    def from_domain(cls, metrics: BiasMetrics) -> "BiasMetricsSchema":
        return cls(
            **metrics.scores.to_dict(),
            calculated_at=metrics.calculated_at,
            cases_analyzed=metrics.cases_analyzed,
        )


class JudgeCreateRequest(BaseModel):
    """Schema for registering a judge."""

    id: str = Field(..., description="Judge identifier")
    name: str = Field(..., description="Full name")
    jurisdiction: str = Field(..., description="Home jurisdiction, e.g. 'CA'")
    total_cases: int = Field(0, ge=0, description="Cases decided so far")
    positions: list[CourtPositionSchema] = Field(
        default_factory=list, description="Existing court positions"
    )

    def to_record(self) -> dict[str, object]:
        """Persisted-style record understood by ``JudgeAggregate.from_dict``."""
        return {
            "id": self.id,
            "name": self.name,
            "jurisdiction": self.jurisdiction,
            "total_cases": self.total_cases,
            "positions": [
                CourtPosition(**position.model_dump()).to_dict() for position in self.positions
            ],
            "bias_metrics": None,
        }


class JudgeResponse(BaseModel):
    """Schema for a judge with derived state."""

    id: str
    name: str
    jurisdiction: str
    total_cases: int
    is_active: bool = Field(..., description="Holds an active non-retired position")
    can_calculate_bias_metrics: bool
    primary_court: CourtPositionSchema | None = None
    positions: list[CourtPositionSchema]
    bias_metrics: BiasMetricsSchema | None = None

    @classmethod
    def from_domain(cls, judge: JudgeAggregate) -> "JudgeResponse":
        primary = judge.get_primary_court()
        return cls(
            id=str(judge.id),
            name=judge.name,
            jurisdiction=judge.jurisdiction,
            total_cases=judge.total_cases,
            is_active=judge.is_active(),
            can_calculate_bias_metrics=judge.can_calculate_bias_metrics(),
            primary_court=CourtPositionSchema.model_validate(primary) if primary else None,
            positions=[
                CourtPositionSchema.model_validate(position)
                for position in judge.get_position_history()
            ],
            bias_metrics=(
                BiasMetricsSchema.from_domain(judge.bias_metrics) if judge.bias_metrics else None
            ),
        )


class JudgesListResponse(BaseModel):
    judges: list[JudgeResponse]
    total: int


class CaseCountUpdateRequest(BaseModel):
    total_cases: int = Field(..., ge=0, description="New total case count")


class AssignmentRequest(BaseModel):
    """Schema for assigning a judge to a court."""

    court_id: str = Field(..., min_length=1)
    court_name: str = Field(..., min_length=1)
    assignment_type: AssignmentType
    start_date: date
    jurisdiction: str = Field(..., min_length=1, description="Jurisdiction of the court")
    end_date: date | None = None
    position_title: str | None = None


class AssignmentValidationSchema(BaseModel):
    is_valid: bool
    errors: list[str]
    warnings: list[str]

    model_config = {"from_attributes": True}


class AssignmentConflictSchema(BaseModel):
    type: str
    severity: str
    message: str
    existing_court_id: str | None = None


class AssignmentReviewResponse(BaseModel):
    """Dry-run result for a proposed assignment."""

    validation: AssignmentValidationSchema
    conflicts: list[AssignmentConflictSchema]
    recommended_end_date: date | None
    requires_approval: bool
    current_workload: dict[str, int]


class RetirementRequest(BaseModel):
    court_id: str = Field(..., min_length=1)
    retirement_date: date
    retirement_type: RetirementType = RetirementType.FULL


class EligibilityStatusSchema(BaseModel):
    eligible: bool
    reasons: list[str]

    model_config = {"from_attributes": True}


class EligibilityResponse(BaseModel):
    """Every eligibility rule evaluated for one judge."""

    judge_id: str
    bias_analysis: EligibilityStatusSchema
    advertising: EligibilityStatusSchema
    senior_status_eligible: bool
    high_profile: bool
    has_bias_metrics: bool

    model_config = {"from_attributes": True}
