"""Tests for the in-memory judge repository and event publisher."""

import json
from datetime import date
from pathlib import Path

import pytest

from judgefinder.domain.judges.entities.court_position import JudgeId
from judgefinder.domain.judges.entities.judge import JudgeAggregate
from judgefinder.domain.judges.events import JudgeEligibleForBiasAnalysis
from judgefinder.infrastructure.common.event_publisher import InMemoryEventPublisher
from judgefinder.infrastructure.judges.repositories.judge_repository import (
    InMemoryJudgeRepository,
)

SEED = [
    {
        "id": "j-2",
        "name": "Zed Adams",
        "jurisdiction": "NY",
        "total_cases": 1200,
        "positions": [
            {
                "court_id": "ny-sup",
                "court_name": "NY Supreme Court",
                "assignment_type": "primary",
                "start_date": "2001-09-01",
            }
        ],
    },
    {"id": "j-1", "name": "Amy Baker", "jurisdiction": "CA"},
]


class TestInMemoryJudgeRepository:
    def test_reads_return_independent_copies(self) -> None:
        repository = InMemoryJudgeRepository()
        judge = JudgeAggregate.create("j-1", "Amy Baker", "CA").unwrap()
        repository.save(judge)

        first = repository.find_by_id(JudgeId("j-1"))
        assert first is not None
        first.total_cases = 999

        second = repository.find_by_id(JudgeId("j-1"))
        assert second is not None
        assert second.total_cases == 0

    def test_find_missing(self) -> None:
        assert InMemoryJudgeRepository().find_by_id(JudgeId("none")) is None

    def test_load_seed_sorts_by_name(self, tmp_path: Path) -> None:
        seed_file = tmp_path / "judges.json"
        seed_file.write_text(json.dumps(SEED), encoding="utf-8")
        repository = InMemoryJudgeRepository()

        assert repository.load_seed(seed_file) == 2

        judges = repository.list_all()
        assert [judge.name for judge in judges] == ["Amy Baker", "Zed Adams"]
        primary = judges[1].get_primary_court()
        assert primary is not None
        assert primary.start_date == date(2001, 9, 1)

    def test_load_seed_rejects_invalid_record(self, tmp_path: Path) -> None:
        seed_file = tmp_path / "judges.json"
        seed_file.write_text(json.dumps([{"id": "j-1", "name": "", "jurisdiction": "CA"}]))
        repository = InMemoryJudgeRepository()

        with pytest.raises(ValueError, match="Judge name is required"):
            repository.load_seed(seed_file)
        assert repository.list_all() == []

    def test_load_seed_requires_list(self, tmp_path: Path) -> None:
        seed_file = tmp_path / "judges.json"
        seed_file.write_text(json.dumps({"id": "j-1"}))
        with pytest.raises(ValueError, match="JSON list"):
            InMemoryJudgeRepository().load_seed(seed_file)


class TestInMemoryEventPublisher:
    def test_publish_and_clear(self) -> None:
        publisher = InMemoryEventPublisher()
        event = JudgeEligibleForBiasAnalysis(judge_id="j-1", total_cases=600, minimum_required=500)

        publisher.publish([event])

        assert publisher.published == [event]
        assert event.to_dict()["aggregate_id"] == "j-1"
        assert event.to_dict()["event_type"] == "JudgeEligibleForBiasAnalysis"
        publisher.clear()
        assert publisher.published == []
