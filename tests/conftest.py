"""Pytest configuration and fixtures."""

from collections.abc import Generator
from typing import Any

import pytest
from dependency_injector import providers
from fastapi.testclient import TestClient

from judgefinder.core import container
from judgefinder.infrastructure.common.event_publisher import InMemoryEventPublisher
from judgefinder.infrastructure.judges.repositories.judge_repository import (
    InMemoryJudgeRepository,
)
from judgefinder.main import app


@pytest.fixture
def judge_repository() -> InMemoryJudgeRepository:
    """Create a fresh repository for each test."""
    return InMemoryJudgeRepository()


@pytest.fixture
def event_publisher() -> InMemoryEventPublisher:
    return InMemoryEventPublisher()


@pytest.fixture
def client(
    judge_repository: InMemoryJudgeRepository, event_publisher: InMemoryEventPublisher
) -> Generator[TestClient, Any, None]:
    """Create a test client whose container hands out the test adapters."""
    container.judge_repository.override(providers.Object(judge_repository))
    container.event_publisher.override(providers.Object(event_publisher))

    with TestClient(app) as test_client:
        yield test_client

    container.judge_repository.reset_override()
    container.event_publisher.reset_override()
