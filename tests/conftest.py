"""
Pytest fixtures for schedule-api tests.
"""

import sys
from pathlib import Path
from typing import Generator

import pytest
from fastapi.testclient import TestClient

# Ensure repository root is on sys.path
ROOT = Path(__file__).resolve().parents[1]
root_str = str(ROOT)
if root_str not in sys.path:
    sys.path.insert(0, root_str)

from backend.main import create_app
from backend.settings import Settings
from api.deps import (
    get_current_user,
    get_settings,
    get_template_repo,
    get_workout_store,
)
from tests.fakes import FakeTemplateRepository, FakeWorkoutStore, create_template_repo


# ---------------------------------------------------------------------------
# Auth Mock
# ---------------------------------------------------------------------------

TEST_USER_ID = "test-user-123"
OTHER_USER_ID = "other-user-456"


async def mock_get_current_user() -> str:
    """Mock auth dependency that returns a test user."""
    return TEST_USER_ID


# ---------------------------------------------------------------------------
# Test App and Client
# ---------------------------------------------------------------------------


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    """Test settings with minimal configuration."""
    return Settings(
        environment="test",
        supabase_url="https://test.supabase.co",
        supabase_service_role_key="test-key",
        _env_file=None,
    )


@pytest.fixture(scope="session")
def app(test_settings):
    """Create test application instance."""
    return create_app(settings=test_settings)


@pytest.fixture
def workout_store() -> FakeWorkoutStore:
    """Fresh in-memory workout store."""
    return FakeWorkoutStore()


@pytest.fixture
def template_repo() -> FakeTemplateRepository:
    """Template repository holding the ``tpl-legs`` template."""
    return create_template_repo()


@pytest.fixture
def client(
    app, test_settings, workout_store, template_repo
) -> Generator[TestClient, None, None]:
    """
    Per-test FastAPI TestClient wired to the fakes.
    Properly cleans up dependency overrides after each test.
    """
    app.dependency_overrides[get_current_user] = mock_get_current_user
    app.dependency_overrides[get_settings] = lambda: test_settings
    app.dependency_overrides[get_workout_store] = lambda: workout_store
    app.dependency_overrides[get_template_repo] = lambda: template_repo
    yield TestClient(app)
    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# Mock Environment Variables
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def mock_env_vars(monkeypatch):
    """Set mock environment variables for tests."""
    monkeypatch.setenv("SUPABASE_URL", "https://test.supabase.co")
    monkeypatch.setenv("SUPABASE_SERVICE_ROLE_KEY", "test-supabase-key")
    monkeypatch.setenv("ENVIRONMENT", "test")
