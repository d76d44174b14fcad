"""
Assignment transition rules shared by the Judge aggregate and the
CourtAssignmentService.

The table answers one question: given the kinds of positions a judge
currently holds, may a position of the requested kind be added?

The aggregate blocks only FORBIDDEN moves and reports ADVISORY and
DISCOURAGED ones as warnings. ``CourtAssignmentService.validate_transition``
is the stricter check and rejects DISCOURAGED moves too.
"""

from collections.abc import Iterable
from datetime import date
from enum import IntEnum
from typing import Final

from judgefinder.domain.judges.entities.court_position import (
    OPEN_ENDED_DATE,
    AssignmentType,
    CourtPosition,
)


class TransitionRule(IntEnum):
    """Ordered by strictness so ``max`` yields the strictest rule."""

    ALLOWED = 0
    ADVISORY = 1
    DISCOURAGED = 2
    FORBIDDEN = 3


_A = AssignmentType
_R = TransitionRule

# (current state, requested type) -> rule. None means "no positions yet".
TRANSITIONS: Final[dict[tuple[AssignmentType | None, AssignmentType], TransitionRule]] = {
    (None, _A.PRIMARY): _R.ALLOWED,
    (None, _A.VISITING): _R.ALLOWED,
    (None, _A.TEMPORARY): _R.ALLOWED,
    (None, _A.RETIRED): _R.FORBIDDEN,
    (_A.PRIMARY, _A.PRIMARY): _R.ALLOWED,
    (_A.PRIMARY, _A.VISITING): _R.ALLOWED,
    (_A.PRIMARY, _A.TEMPORARY): _R.ALLOWED,
    (_A.PRIMARY, _A.RETIRED): _R.ALLOWED,
    (_A.VISITING, _A.PRIMARY): _R.ADVISORY,
    (_A.VISITING, _A.VISITING): _R.ALLOWED,
    (_A.VISITING, _A.TEMPORARY): _R.ALLOWED,
    (_A.VISITING, _A.RETIRED): _R.ALLOWED,
    (_A.TEMPORARY, _A.PRIMARY): _R.DISCOURAGED,
    (_A.TEMPORARY, _A.VISITING): _R.ALLOWED,
    (_A.TEMPORARY, _A.TEMPORARY): _R.ALLOWED,
    (_A.TEMPORARY, _A.RETIRED): _R.ALLOWED,
    (_A.RETIRED, _A.PRIMARY): _R.FORBIDDEN,
    (_A.RETIRED, _A.VISITING): _R.FORBIDDEN,
    (_A.RETIRED, _A.TEMPORARY): _R.FORBIDDEN,
    (_A.RETIRED, _A.RETIRED): _R.ALLOWED,
}


def transition_rule(current: AssignmentType | None, requested: AssignmentType) -> TransitionRule:
    return TRANSITIONS[(current, requested)]


def current_states(positions: Iterable[CourtPosition]) -> set[AssignmentType | None]:
    """
    States a judge is in, derived from its positions.

    Every active position contributes its type. A retired record counts
    even once ended, since retirement is terminal. A judge without any
    state is in ``None``.
    """
    states: set[AssignmentType | None] = set()
    for position in positions:
        if position.is_active:
            states.add(position.assignment_type)
        if position.assignment_type == AssignmentType.RETIRED:
            states.add(AssignmentType.RETIRED)
    return states or {None}


def strictest_rule(positions: Iterable[CourtPosition], requested: AssignmentType) -> TransitionRule:
    return max(transition_rule(state, requested) for state in current_states(positions))


def positions_overlap(
    start_date: date, end_date: date | None, existing: CourtPosition
) -> bool:
    """Closed-interval overlap with open ends replaced by the far-future sentinel."""
    proposed_end = end_date or OPEN_ENDED_DATE
    return start_date <= existing.effective_end_date and proposed_end >= existing.start_date
