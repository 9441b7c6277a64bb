"""Pytest fixtures and configuration for tasksense tests."""

import pytest
import uuid
from typing import List, Optional
from fastapi.testclient import TestClient

from tasksense.config import Settings
from tasksense.store.task_store import TaskStore
from tasksense.models.task import Task, Priority
from tasksense.models.enrichment import EnrichmentResult


class FakeEnrichmentClient:
    """Enrichment client returning a canned result (or raising a canned error)."""

    def __init__(self, result: Optional[EnrichmentResult] = None, error: Optional[Exception] = None):
        self.result = result or EnrichmentResult()
        self.error = error
        self.titles: List[str] = []

    def analyze(self, title: str) -> EnrichmentResult:
        self.titles.append(title)
        if self.error is not None:
            raise self.error
        return self.result


@pytest.fixture
def test_settings():
    """Settings with a dummy API key and a local endpoint."""
    return Settings(
        claude_api_key="test-api-key",
        claude_api_url="https://completions.test/v1/completions",
        claude_model="claude-2",
        claude_max_tokens=150,
        claude_timeout_sec=5,
    )


@pytest.fixture
def task_store():
    """Create an empty TaskStore for testing."""
    return TaskStore()


@pytest.fixture
def sample_task_base():
    """Base task data for creating test tasks.

    Returns a dict with default task attributes that can be overridden.
    """
    return {
        "id": str(uuid.uuid4()),
        "title": "Test Task",
        "completed": False,
        "priority": None,
        "estimated_time": None,
    }


@pytest.fixture
def sample_task(sample_task_base):
    """Create a sample Task object for testing."""
    return Task(**sample_task_base)


@pytest.fixture
def enriched_result():
    """A typical successful enrichment."""
    return EnrichmentResult(priority=Priority.MEDIUM, estimated_time="3 hours")


@pytest.fixture
def make_enrichment_client():
    """Factory for FakeEnrichmentClient instances."""
    return FakeEnrichmentClient


@pytest.fixture
def fake_enrichment_client(enriched_result):
    """Enrichment client that always succeeds."""
    return FakeEnrichmentClient(result=enriched_result)


@pytest.fixture
def test_client(test_settings, task_store, fake_enrichment_client):
    """Create a FastAPI test client with an injected store and enrichment client."""
    from tasksense.api.app import create_app

    app = create_app(
        settings=test_settings,
        store=task_store,
        enrichment_client=fake_enrichment_client,
    )
    with TestClient(app) as client:
        yield client
