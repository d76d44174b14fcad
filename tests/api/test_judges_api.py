"""Tests for Judges API endpoints."""

from typing import Any

from fastapi.testclient import TestClient

from judgefinder.infrastructure.common.event_publisher import InMemoryEventPublisher

API = "/api/v1"


def create_judge(client: TestClient, **overrides: Any) -> dict[str, Any]:
    payload = {"id": "j-1", "name": "Maria Lopez", "jurisdiction": "CA", "total_cases": 600}
    payload.update(overrides)
    response = client.post(f"{API}/judges", json=payload)
    assert response.status_code == 201, response.text
    return response.json()


def assign(client: TestClient, judge_id: str = "j-1", **overrides: Any) -> Any:
    payload = {
        "court_id": "court-a",
        "court_name": "Court A",
        "assignment_type": "primary",
        "start_date": "2020-01-01",
        "jurisdiction": "CA",
    }
    payload.update(overrides)
    return client.post(f"{API}/judges/{judge_id}/assignments", json=payload)


BIAS_SCORES = {
    "consistency_score": 0.8,
    "speed_score": 0.6,
    "settlement_preference": 0.4,
    "risk_tolerance": 0.5,
    "predictability_score": 0.7,
}


class TestMainEndpoints:
    def test_health(self, client: TestClient) -> None:
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_health_under_api_prefix(self, client: TestClient) -> None:
        assert client.get(f"{API}/health").status_code == 200

    def test_api_root(self, client: TestClient) -> None:
        data = client.get(f"{API}/").json()
        assert data["version"] == "0.1.0"
        assert data["docs"] == "/api/v1/docs"


class TestJudgeProfiles:
    def test_register_judge(self, client: TestClient) -> None:
        data = create_judge(
            client,
            positions=[
                {
                    "court_id": "court-a",
                    "court_name": "Court A",
                    "assignment_type": "primary",
                    "start_date": "2015-03-01",
                }
            ],
        )
        assert data["id"] == "j-1"
        assert data["is_active"] is True
        assert data["can_calculate_bias_metrics"] is True
        assert data["primary_court"]["court_id"] == "court-a"

    def test_duplicate_judge_conflicts(self, client: TestClient) -> None:
        create_judge(client)
        response = client.post(
            f"{API}/judges", json={"id": "j-1", "name": "Other", "jurisdiction": "CA"}
        )
        assert response.status_code == 409
        assert response.json()["code"] == "BUSINESS_RULE_VIOLATION"

    def test_blank_name_is_invariant_violation(self, client: TestClient) -> None:
        response = client.post(
            f"{API}/judges", json={"id": "j-1", "name": " ", "jurisdiction": "CA"}
        )
        assert response.status_code == 500
        body = response.json()
        assert body["code"] == "INVARIANT_VIOLATION"
        assert body["detail"] == "Judge name is required"

    def test_conflicting_positions_rejected(self, client: TestClient) -> None:
        def position(court_id: str, kind: str) -> dict[str, str]:
            return {
                "court_id": court_id,
                "court_name": f"Court {court_id}",
                "assignment_type": kind,
                "start_date": "2010-01-01",
            }

        response = client.post(
            f"{API}/judges",
            json={
                "id": "j-1",
                "name": "Maria Lopez",
                "jurisdiction": "CA",
                "positions": [
                    position("court-a", "primary"),
                    position("court-b", "primary"),
                    position("court-a", "visiting"),
                ],
            },
        )

        assert response.status_code == 500
        body = response.json()
        assert body["code"] == "INVARIANT_VIOLATION"
        assert body["detail"] == "Judge cannot hold more than one active primary position"
        assert client.get(f"{API}/judges").json()["total"] == 0

    def test_request_validation(self, client: TestClient) -> None:
        response = client.post(f"{API}/judges", json={"id": "j-1"})
        assert response.status_code == 422
        assert response.json()["code"] == "REQUEST_VALIDATION_ERROR"

    def test_get_and_list(self, client: TestClient) -> None:
        create_judge(client, id="j-2", name="Zoe Young")
        create_judge(client, id="j-1", name="Adam Brown")

        listing = client.get(f"{API}/judges").json()
        assert listing["total"] == 2
        assert [judge["name"] for judge in listing["judges"]] == ["Adam Brown", "Zoe Young"]
        assert client.get(f"{API}/judges/j-2").json()["name"] == "Zoe Young"

    def test_missing_judge(self, client: TestClient) -> None:
        response = client.get(f"{API}/judges/ghost")
        assert response.status_code == 404
        assert response.json() == {
            "detail": "Judge with id ghost not found",
            "code": "ENTITY_NOT_FOUND",
            "metadata": {"entity_type": "Judge", "entity_id": "ghost"},
        }

    def test_update_case_count(self, client: TestClient) -> None:
        create_judge(client, total_cases=10)
        response = client.put(f"{API}/judges/j-1/case-count", json={"total_cases": 25})
        assert response.status_code == 200
        assert response.json()["total_cases"] == 25

        response = client.put(f"{API}/judges/j-1/case-count", json={"total_cases": 5})
        assert response.status_code == 500
        assert response.json()["detail"] == "Case count cannot decrease"


class TestAssignments:
    def test_assign_and_reject_second_primary(
        self, client: TestClient, event_publisher: InMemoryEventPublisher
    ) -> None:
        create_judge(client)

        first = assign(client)
        assert first.status_code == 201
        assert first.json()["primary_court"]["court_id"] == "court-a"

        second = assign(client, court_id="court-b", court_name="Court B", start_date="2021-01-01")
        assert second.status_code == 409
        body = second.json()
        assert body["code"] == "BUSINESS_RULE_VIOLATION"
        assert body["metadata"]["errors"] == ["Judge already has primary position at Court A"]
        assert [event.event_type for event in event_publisher.published] == [
            "JudgeAssignedToCourt",
            "CourtAssignmentConflictDetected",
        ]

    def test_end_date_before_start(self, client: TestClient) -> None:
        create_judge(client)
        response = assign(client, start_date="2021-01-01", end_date="2020-01-01")
        assert response.status_code == 400
        assert response.json()["code"] == "VALIDATION_ERROR"

    def test_review(self, client: TestClient) -> None:
        create_judge(client)
        assign(client)

        response = client.post(
            f"{API}/judges/j-1/assignments/review",
            json={
                "court_id": "court-b",
                "court_name": "Court B",
                "assignment_type": "primary",
                "start_date": "2022-01-01",
                "jurisdiction": "NY",
            },
        )

        assert response.status_code == 200
        data = response.json()
        assert data["validation"]["is_valid"] is False
        assert [c["type"] for c in data["conflicts"]] == [
            "multiple_primary",
            "jurisdiction_mismatch",
        ]
        assert data["conflicts"][0]["existing_court_id"] == "court-a"
        assert data["requires_approval"] is True
        assert data["current_workload"] == {"court-a": 100}
        assert client.get(f"{API}/judges/j-1").json()["positions"][0]["court_id"] == "court-a"

    def test_retirement(self, client: TestClient) -> None:
        create_judge(client)
        assign(client, start_date="2000-01-01")

        response = client.post(
            f"{API}/judges/j-1/retirements",
            json={
                "court_id": "court-a",
                "retirement_date": "2020-06-30",
                "retirement_type": "senior_status",
            },
        )

        assert response.status_code == 200
        data = response.json()
        assert data["is_active"] is False
        assert data["positions"][0]["assignment_type"] == "retired"

        again = assign(
            client, court_id="court-z", assignment_type="visiting", start_date="2021-01-01"
        )
        assert again.status_code == 409
        assert again.json()["detail"] == "Retired judges cannot take a new visiting position"


class TestBiasMetrics:
    def test_calculate_bias_metrics(self, client: TestClient) -> None:
        create_judge(client)
        assign(client)

        response = client.post(f"{API}/judges/j-1/bias-metrics", json=BIAS_SCORES)

        assert response.status_code == 200
        metrics = response.json()["bias_metrics"]
        assert metrics["consistency_score"] == 0.8
        assert metrics["cases_analyzed"] == 600

    def test_ineligible_judge(self, client: TestClient) -> None:
        create_judge(client, total_cases=499)
        assign(client)

        response = client.post(f"{API}/judges/j-1/bias-metrics", json=BIAS_SCORES)

        assert response.status_code == 409
        assert response.json()["metadata"]["reasons"] == [
            "Requires minimum 500 cases (current: 499)"
        ]

    def test_eligibility(self, client: TestClient) -> None:
        create_judge(client, total_cases=1500)
        assign(client, start_date="2000-01-01")
        client.post(f"{API}/judges/j-1/bias-metrics", json=BIAS_SCORES)

        response = client.get(f"{API}/judges/j-1/eligibility", params={"as_of": "2020-01-01"})

        assert response.status_code == 200
        data = response.json()
        assert data["bias_analysis"] == {"eligible": True, "reasons": []}
        assert data["advertising"]["eligible"] is True
        assert data["senior_status_eligible"] is True
        assert data["high_profile"] is True
        assert data["has_bias_metrics"] is True
