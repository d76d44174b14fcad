"""Tests for the Judge aggregate."""

from datetime import UTC, date, datetime

import pytest

from judgefinder.domain.common.exceptions import (
    BusinessRuleViolationError,
    InvariantViolationError,
    ValidationError,
)
from judgefinder.domain.judges.entities.court_position import (
    AssignmentType,
    BiasScores,
    CourtPosition,
    JudgeId,
    RetirementType,
)
from judgefinder.domain.judges.entities.judge import JudgeAggregate
from judgefinder.domain.judges.events import (
    BiasMetricsCalculated,
    CourtAssignmentConflictDetected,
    JudgeAssignedToCourt,
    JudgeEligibleForBiasAnalysis,
    JudgeRetired,
)

SCORES = BiasScores(
    consistency_score=0.8,
    speed_score=0.6,
    settlement_preference=0.4,
    risk_tolerance=0.5,
    predictability_score=0.7,
)


def make_judge(
    total_cases: int = 600, positions: list[CourtPosition] | None = None
) -> JudgeAggregate:
    return JudgeAggregate.create(
        "judge-1", "Jane Roe", "CA", total_cases=total_cases, positions=positions or []
    ).unwrap()


def primary_at(court_id: str = "sc-1", start: date = date(2010, 1, 1)) -> CourtPosition:
    return CourtPosition(
        court_id=court_id,
        court_name=f"Court {court_id}",
        assignment_type=AssignmentType.PRIMARY,
        start_date=start,
        jurisdiction="CA",
    )


class TestJudgeCreate:
    def test_create(self) -> None:
        judge = make_judge()
        assert judge.id == JudgeId("judge-1")
        assert judge.name == "Jane Roe"
        assert judge.positions == []
        assert judge.pending_events == []

    @pytest.mark.parametrize(
        ("kwargs", "message"),
        [
            ({"judge_id": " ", "name": "A", "jurisdiction": "CA"}, "Judge ID is required"),
            ({"judge_id": "j", "name": "", "jurisdiction": "CA"}, "Judge name is required"),
            (
                {"judge_id": "j", "name": "A", "jurisdiction": "CA", "total_cases": -1},
                "Total cases cannot be negative",
            ),
            ({"judge_id": "j", "name": "A", "jurisdiction": " "}, "Jurisdiction is required"),
        ],
    )
    def test_create_invariants(self, kwargs: dict[str, object], message: str) -> None:
        error = JudgeAggregate.create(**kwargs).unwrap_err()  # type: ignore[arg-type]
        assert isinstance(error, InvariantViolationError)
        assert error.message == message

    def test_dict_round_trip(self) -> None:
        judge = make_judge(positions=[primary_at()])
        rebuilt = JudgeAggregate.from_dict(judge.to_dict()).unwrap()
        assert rebuilt == judge
        assert rebuilt.positions == judge.positions

    def test_from_dict_rejects_malformed_record(self) -> None:
        error = JudgeAggregate.from_dict({"id": "j", "name": "A"}).unwrap_err()
        assert isinstance(error, ValidationError)
        assert error.message.startswith("Malformed judge record")


class TestJudgeCreatePositions:
    def test_two_active_primaries_rejected(self) -> None:
        result = JudgeAggregate.create(
            "j", "n", "CA", 0, [primary_at("a"), primary_at("b")]
        )
        error = result.unwrap_err()
        assert isinstance(error, InvariantViolationError)
        assert error.message == "Judge cannot hold more than one active primary position"
        assert error.metadata == {"court_ids": ["a", "b"], "aggregate": "Judge"}

    def test_overlap_at_same_court_rejected(self) -> None:
        visiting = CourtPosition(
            court_id="a",
            court_name="Court a",
            assignment_type=AssignmentType.VISITING,
            start_date=date(2010, 1, 1),
        )
        error = JudgeAggregate.create(
            "j", "n", "CA", 0, [primary_at("a"), visiting]
        ).unwrap_err()
        assert error.message == "Positions at court a have overlapping dates"

    def test_back_to_back_positions_at_same_court_allowed(self) -> None:
        ended = CourtPosition(
            court_id="a",
            court_name="Court a",
            assignment_type=AssignmentType.VISITING,
            start_date=date(2005, 1, 1),
            end_date=date(2009, 12, 31),
            is_active=False,
        )
        assert JudgeAggregate.create("j", "n", "CA", 0, [ended, primary_at("a")]).is_ok

    def test_position_after_retirement_rejected(self) -> None:
        retired = CourtPosition(
            court_id="a",
            court_name="Court a",
            assignment_type=AssignmentType.RETIRED,
            start_date=date(2005, 1, 1),
        )
        error = JudgeAggregate.create("j", "n", "CA", 0, [retired, primary_at("b")]).unwrap_err()
        assert error.message == "Position at court b starts after the judge retired"

    def test_end_before_start_rejected(self) -> None:
        backwards = primary_at("a", date(2010, 1, 1))
        backwards.end_date = date(2009, 1, 1)
        error = JudgeAggregate.create("j", "n", "CA", 0, [backwards]).unwrap_err()
        assert error.message == "Position at court a ends before it starts"

    def test_retired_judge_round_trips(self) -> None:
        judge = make_judge(positions=[primary_at()])
        assert judge.retire_from_position("sc-1", date(2020, 6, 30)).is_ok

        rebuilt = JudgeAggregate.from_dict(judge.to_dict()).unwrap()

        assert rebuilt.positions == judge.positions
        assert not rebuilt.is_active()


class TestJudgeQueries:
    def test_is_active_ignores_retired_records(self) -> None:
        retired = CourtPosition(
            court_id="sc-1",
            court_name="Court sc-1",
            assignment_type=AssignmentType.RETIRED,
            start_date=date(2020, 1, 1),
        )
        assert not make_judge(positions=[retired]).is_active()
        assert make_judge(positions=[primary_at()]).is_active()

    def test_position_history_newest_first(self) -> None:
        old = primary_at("a", date(2000, 1, 1))
        old.end(date(2014, 12, 31))
        new = primary_at("b", date(2015, 1, 1))
        assert make_judge(positions=[old, new]).get_position_history() == [new, old]

    def test_can_calculate_bias_metrics(self) -> None:
        assert make_judge(600, [primary_at()]).can_calculate_bias_metrics()
        assert not make_judge(499, [primary_at()]).can_calculate_bias_metrics()
        assert not make_judge(600).can_calculate_bias_metrics()


class TestAssignToCourt:
    def test_first_primary_assignment(self) -> None:
        judge = make_judge()
        result = judge.assign_to_court(
            "sc-1", "Superior Court", AssignmentType.PRIMARY, date(2010, 1, 1), "ca"
        )

        assert result.is_ok
        assert judge.get_primary_court() is not None
        assert judge.get_primary_court().court_id == "sc-1"  # type: ignore[union-attr]
        events = judge.collect_domain_events()
        assert len(events) == 1
        assert isinstance(events[0], JudgeAssignedToCourt)
        assert events[0].aggregate_id == "judge-1"
        assert judge.pending_events == []

    def test_second_primary_rejected_with_conflict_event(self) -> None:
        judge = make_judge(positions=[primary_at()])

        result = judge.assign_to_court(
            "sc-2", "Appeals Court", AssignmentType.PRIMARY, date(2020, 1, 1), "CA"
        )

        error = result.unwrap_err()
        assert isinstance(error, BusinessRuleViolationError)
        assert error.message == "Judge already has primary position at Court sc-1"
        assert len(judge.positions) == 1
        events = judge.collect_domain_events()
        assert [type(event) for event in events] == [CourtAssignmentConflictDetected]
        assert events[0].conflict_type == "multiple_primary"  # type: ignore[attr-defined]
        assert events[0].existing_court_id == "sc-1"  # type: ignore[attr-defined]

    def test_jurisdiction_mismatch(self) -> None:
        judge = make_judge()
        error = judge.assign_to_court(
            "ny-1", "NY Court", AssignmentType.VISITING, date(2020, 1, 1), "NY"
        ).unwrap_err()
        assert error.message == "Jurisdiction mismatch: Judge is in CA, court is in NY"
        assert judge.positions == []

    def test_overlap_at_same_court(self) -> None:
        judge = make_judge(positions=[primary_at()])
        error = judge.assign_to_court(
            "sc-1", "Court sc-1", AssignmentType.VISITING, date(2012, 1, 1), "CA"
        ).unwrap_err()
        assert "Temporal overlap with existing position at Court sc-1" in error.message

    def test_collects_every_error(self) -> None:
        judge = make_judge(positions=[primary_at()])
        error = judge.assign_to_court(
            "sc-1", "Court sc-1", AssignmentType.PRIMARY, date(2012, 1, 1), "NY"
        ).unwrap_err()
        assert len(error.metadata["errors"]) == 3  # type: ignore[arg-type]
        conflict_types = [
            event.conflict_type  # type: ignore[attr-defined]
            for event in judge.collect_domain_events()
        ]
        assert conflict_types == ["multiple_primary", "temporal_overlap", "jurisdiction_mismatch"]

    def test_end_before_start(self) -> None:
        error = make_judge().assign_to_court(
            "sc-1",
            "Court",
            AssignmentType.TEMPORARY,
            date(2020, 6, 1),
            "CA",
            end_date=date(2020, 1, 1),
        ).unwrap_err()
        assert isinstance(error, ValidationError)

    def test_visiting_to_primary_allowed_with_warning(self) -> None:
        visiting = CourtPosition(
            court_id="v-1",
            court_name="Visiting Court",
            assignment_type=AssignmentType.VISITING,
            start_date=date(2019, 1, 1),
        )
        judge = make_judge(positions=[visiting])

        assert judge.assign_to_court(
            "sc-1", "Court sc-1", AssignmentType.PRIMARY, date(2020, 1, 1), "CA"
        ).is_ok
        event = judge.collect_domain_events()[0]
        assert isinstance(event, JudgeAssignedToCourt)
        assert any("discouraged" in warning for warning in event.warnings)

    def test_retirement_without_position_forbidden(self) -> None:
        error = make_judge().assign_to_court(
            "sc-1", "Court", AssignmentType.RETIRED, date(2020, 1, 1), "CA"
        ).unwrap_err()
        assert error.message == "Judge must hold a court position before retiring"

    def test_ended_positions_at_same_court_deactivated(self) -> None:
        ended = CourtPosition(
            court_id="sc-1",
            court_name="Court sc-1",
            assignment_type=AssignmentType.VISITING,
            start_date=date(2015, 1, 1),
            end_date=date(2015, 12, 31),
        )
        judge = make_judge(positions=[ended])

        assert judge.assign_to_court(
            "sc-1", "Court sc-1", AssignmentType.TEMPORARY, date(2016, 1, 1), "CA"
        ).is_ok
        assert not ended.is_active
        assert [p.assignment_type for p in judge.get_active_positions()] == [
            AssignmentType.TEMPORARY
        ]


class TestRetirement:
    def test_retire_from_position(self) -> None:
        judge = make_judge(positions=[primary_at()])

        result = judge.retire_from_position(
            "sc-1", date(2025, 1, 1), RetirementType.SENIOR_STATUS
        )

        assert result.is_ok
        assert not judge.is_active()
        ended, retired = judge.positions
        assert ended.end_date == date(2025, 1, 1)
        assert not ended.is_active
        assert retired.assignment_type == AssignmentType.RETIRED
        assert retired.is_active
        event = judge.collect_domain_events()[0]
        assert isinstance(event, JudgeRetired)
        assert event.years_of_service == 15
        assert event.retirement_type == RetirementType.SENIOR_STATUS

    def test_no_active_position(self) -> None:
        error = make_judge().retire_from_position("sc-1", date(2025, 1, 1)).unwrap_err()
        assert error.message == "No active position found at specified court"

    def test_retirement_before_start(self) -> None:
        error = (
            make_judge(positions=[primary_at()])
            .retire_from_position("sc-1", date(2009, 1, 1))
            .unwrap_err()
        )
        assert error.message == "Retirement date cannot be before position start date"

    def test_retired_judge_cannot_take_new_position(self) -> None:
        judge = make_judge(positions=[primary_at()])
        judge.retire_from_position("sc-1", date(2025, 1, 1)).unwrap()

        error = judge.assign_to_court(
            "sc-2", "Court sc-2", AssignmentType.VISITING, date(2026, 1, 1), "CA"
        ).unwrap_err()

        assert error.message == "Retired judges cannot take a new visiting position"
        assert error.metadata["rule"] == "assignment_transition"


class TestBiasMetrics:
    def test_calculate_records_eligibility_once(self) -> None:
        judge = make_judge(600, [primary_at()])
        calculated_at = datetime(2025, 3, 1, tzinfo=UTC)

        assert judge.calculate_bias_metrics(SCORES, calculated_at).is_ok
        first = judge.collect_domain_events()
        assert [type(event) for event in first] == [
            JudgeEligibleForBiasAnalysis,
            BiasMetricsCalculated,
        ]
        assert judge.bias_metrics is not None
        assert judge.bias_metrics.cases_analyzed == 600
        assert judge.bias_metrics.calculated_at == calculated_at

        assert judge.calculate_bias_metrics(SCORES).is_ok
        assert [type(event) for event in judge.collect_domain_events()] == [BiasMetricsCalculated]

    def test_too_few_cases(self) -> None:
        judge = make_judge(499, [primary_at()])
        error = judge.calculate_bias_metrics(SCORES).unwrap_err()
        assert error.message == (
            "Judge is not eligible for bias analysis: Requires minimum 500 cases (current: 499)"
        )
        assert judge.bias_metrics is None
        assert judge.pending_events == []

    def test_exactly_minimum_cases_with_active_position(self) -> None:
        judge = make_judge(500, [primary_at()])
        assert judge.can_calculate_bias_metrics()
        assert judge.calculate_bias_metrics(SCORES).is_ok
        assert judge.bias_metrics is not None
        assert judge.bias_metrics.cases_analyzed == 500

    def test_exactly_minimum_cases_without_active_position(self) -> None:
        judge = make_judge(500)
        assert not judge.can_calculate_bias_metrics()
        error = judge.calculate_bias_metrics(SCORES).unwrap_err()
        assert error.metadata["reasons"] == ["Requires at least one active court position"]
        assert judge.bias_metrics is None

    def test_reports_every_reason(self) -> None:
        error = make_judge(10).calculate_bias_metrics(SCORES).unwrap_err()
        assert error.metadata["reasons"] == [
            "Requires minimum 500 cases (current: 10)",
            "Requires at least one active court position",
        ]


class TestCaseCount:
    def test_increase(self) -> None:
        judge = make_judge(100)
        assert judge.update_case_count(150).is_ok
        assert judge.total_cases == 150

    def test_decrease_rejected(self) -> None:
        judge = make_judge(100)
        error = judge.update_case_count(99).unwrap_err()
        assert isinstance(error, InvariantViolationError)
        assert error.message == "Case count cannot decrease"
        assert judge.total_cases == 100

    def test_negative_rejected(self) -> None:
        assert make_judge(0).update_case_count(-5).unwrap_err().message == (
            "Case count cannot be negative"
        )
