import logging
from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Query
from starlette import status

from judgefinder.application.judges.use_cases.bias_analysis_use_case import BiasAnalysisUseCase
from judgefinder.application.judges.use_cases.court_assignment_use_case import (
    CourtAssignmentUseCase,
)
from judgefinder.application.judges.use_cases.judge_profile_use_case import JudgeProfileUseCase
from judgefinder.core import container
from judgefinder.domain.common.exceptions import DomainError
from judgefinder.infrastructure.common.di import inject_use_case
from judgefinder.infrastructure.common.errors import unwrap_or_raise
from judgefinder.infrastructure.judges.schemas import (
    AssignmentConflictSchema,
    AssignmentRequest,
    AssignmentReviewResponse,
    AssignmentValidationSchema,
    BiasScoresSchema,
    CaseCountUpdateRequest,
    EligibilityResponse,
    JudgeCreateRequest,
    JudgeResponse,
    JudgesListResponse,
    RetirementRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/judges", tags=["judges"])

UNEXPECTED_ERROR_DETAIL = "An unexpected error occurred. Please try again later."


@router.post("", response_model=JudgeResponse, status_code=status.HTTP_201_CREATED)
def register_judge(
    request: JudgeCreateRequest,
    use_case: JudgeProfileUseCase = Depends(inject_use_case(container.judge_profile_use_case)),
) -> JudgeResponse:
    """
    Register a judge with any existing court positions.

    Args:
        request: Judge fields and existing positions
        use_case: JudgeProfileUseCase injected via dependency container

    Returns:
        The registered judge

    Raises:
        DomainError: If the record breaks a judge invariant or the id is taken
    """
    try:
        judge = unwrap_or_raise(use_case.register_judge(request.to_record()))
        return JudgeResponse.from_domain(judge)
    except DomainError:
        # Re-raise domain errors - handled by exception handlers
        raise
    except Exception as e:
        logger.error(f"Failed to register judge {request.id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=UNEXPECTED_ERROR_DETAIL
        ) from e


@router.get("", response_model=JudgesListResponse, status_code=status.HTTP_200_OK)
def list_judges(
    use_case: JudgeProfileUseCase = Depends(inject_use_case(container.judge_profile_use_case)),
) -> JudgesListResponse:
    """List all judges ordered by name."""
    judges = [JudgeResponse.from_domain(judge) for judge in use_case.list_judges()]
    return JudgesListResponse(judges=judges, total=len(judges))


@router.get("/{judge_id}", response_model=JudgeResponse, status_code=status.HTTP_200_OK)
def get_judge(
    judge_id: str,
    use_case: JudgeProfileUseCase = Depends(inject_use_case(container.judge_profile_use_case)),
) -> JudgeResponse:
    judge = unwrap_or_raise(use_case.get_judge(judge_id))
    return JudgeResponse.from_domain(judge)


@router.put("/{judge_id}/case-count", response_model=JudgeResponse, status_code=status.HTTP_200_OK)
def update_case_count(
    judge_id: str,
    request: CaseCountUpdateRequest,
    use_case: JudgeProfileUseCase = Depends(inject_use_case(container.judge_profile_use_case)),
) -> JudgeResponse:
    """
    Raise a judge's total case count.

    Raises:
        DomainError: If the judge is missing or the count would decrease
    """
    try:
        judge = unwrap_or_raise(use_case.update_case_count(judge_id, request.total_cases))
        return JudgeResponse.from_domain(judge)
    except DomainError:
        raise
    except Exception as e:
        logger.error(f"Failed to update case count for judge {judge_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=UNEXPECTED_ERROR_DETAIL
        ) from e


@router.post(
    "/{judge_id}/assignments",
    response_model=JudgeResponse,
    status_code=status.HTTP_201_CREATED,
)
def assign_to_court(
    judge_id: str,
    request: AssignmentRequest,
    use_case: CourtAssignmentUseCase = Depends(
        inject_use_case(container.court_assignment_use_case)
    ),
) -> JudgeResponse:
    """
    Assign a judge to a court.

    A second primary position, a jurisdiction mismatch, overlapping dates at
    the same court and forbidden transitions are rejected with 409 and the
    full list of problems in ``metadata.errors``.

    Args:
        judge_id: ID of the judge
        request: Court and dates of the new position
        use_case: CourtAssignmentUseCase injected via dependency container

    Returns:
        The judge with the new position

    Raises:
        DomainError: If the judge is missing or the assignment is rejected
    """
    try:
        judge = unwrap_or_raise(
            use_case.assign_to_court(
                judge_id=judge_id,
                court_id=request.court_id,
                court_name=request.court_name,
                assignment_type=request.assignment_type,
                start_date=request.start_date,
                jurisdiction=request.jurisdiction,
                end_date=request.end_date,
                position_title=request.position_title,
            )
        )
        return JudgeResponse.from_domain(judge)
    except DomainError:
        raise
    except Exception as e:
        logger.error(
            f"Failed to assign judge {judge_id} to court {request.court_id}: {e!s}",
            exc_info=True,
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=UNEXPECTED_ERROR_DETAIL
        ) from e


@router.post(
    "/{judge_id}/assignments/review",
    response_model=AssignmentReviewResponse,
    status_code=status.HTTP_200_OK,
)
def review_assignment(
    judge_id: str,
    request: AssignmentRequest,
    use_case: CourtAssignmentUseCase = Depends(
        inject_use_case(container.court_assignment_use_case)
    ),
) -> AssignmentReviewResponse:
    """
    Check a proposed assignment without saving it.

    Returns the validation result, blocking conflicts, a recommended end
    date for visiting and temporary positions, whether approval is needed,
    and the judge's current workload by assignment type.
    """
    review = unwrap_or_raise(
        use_case.review_assignment(
            judge_id=judge_id,
            court_id=request.court_id,
            court_name=request.court_name,
            assignment_type=request.assignment_type,
            start_date=request.start_date,
            jurisdiction=request.jurisdiction,
            end_date=request.end_date,
        )
    )
    return AssignmentReviewResponse(
        validation=AssignmentValidationSchema.model_validate(review.validation),
        conflicts=[
            AssignmentConflictSchema(
                type=conflict.type.value,
                severity=conflict.severity.value,
                message=conflict.message,
                existing_court_id=(
                    conflict.existing_position.court_id if conflict.existing_position else None
                ),
            )
            for conflict in review.conflicts
        ],
        recommended_end_date=review.recommended_end_date,
        requires_approval=review.requires_approval,
        current_workload=review.current_workload,
    )


@router.post(
    "/{judge_id}/retirements",
    response_model=JudgeResponse,
    status_code=status.HTTP_200_OK,
)
def retire_from_position(
    judge_id: str,
    request: RetirementRequest,
    use_case: CourtAssignmentUseCase = Depends(
        inject_use_case(container.court_assignment_use_case)
    ),
) -> JudgeResponse:
    try:
        judge = unwrap_or_raise(
            use_case.retire_from_position(
                judge_id, request.court_id, request.retirement_date, request.retirement_type
            )
        )
        return JudgeResponse.from_domain(judge)
    except DomainError:
        raise
    except Exception as e:
        logger.error(f"Failed to retire judge {judge_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=UNEXPECTED_ERROR_DETAIL
        ) from e


@router.post(
    "/{judge_id}/bias-metrics",
    response_model=JudgeResponse,
    status_code=status.HTTP_200_OK,
)
def calculate_bias_metrics(
    judge_id: str,
    request: BiasScoresSchema,
    use_case: BiasAnalysisUseCase = Depends(inject_use_case(container.bias_analysis_use_case)),
) -> JudgeResponse:
    """
    Store bias metrics for a judge.

    Judges with fewer than 500 cases or no active position are rejected
    with 409 and the unmet conditions in ``metadata.reasons``.
    """
    try:
        judge = unwrap_or_raise(use_case.calculate_bias_metrics(judge_id, request.to_domain()))
        return JudgeResponse.from_domain(judge)
    except DomainError:
        raise
    except Exception as e:
        logger.error(f"Failed to calculate bias metrics for judge {judge_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=UNEXPECTED_ERROR_DETAIL
        ) from e


@router.get(
    "/{judge_id}/eligibility",
    response_model=EligibilityResponse,
    status_code=status.HTTP_200_OK,
)
def get_eligibility(
    judge_id: str,
    as_of: date | None = Query(None, description="Date used for years-of-service checks"),
    use_case: BiasAnalysisUseCase = Depends(inject_use_case(container.bias_analysis_use_case)),
) -> EligibilityResponse:
    report = unwrap_or_raise(use_case.get_eligibility(judge_id, as_of))
    return EligibilityResponse.model_validate(report)
