"""Shared pytest fixtures."""

import pytest

from talentmatch.logging.context import clear_log_context
from talentmatch.persistence import close_database, init_database


@pytest.fixture
def temp_database():
    """Create a temporary in-memory database for testing."""
    init_database("sqlite:///:memory:")
    yield
    close_database()


@pytest.fixture
def mock_env_vars(monkeypatch):
    """Provide the environment variables required by load_config()."""
    monkeypatch.setenv("GEMINI_API_KEY", "test-gemini-key")
    monkeypatch.setenv("DATABASE_URL", "sqlite:///:memory:")
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.delenv("DOCUMENT_ROOT", raising=False)
    monkeypatch.delenv("ENVIRONMENT", raising=False)


@pytest.fixture(autouse=True)
def clean_log_context():
    """Keep log_context() fields from leaking between tests."""
    clear_log_context()
    yield
    clear_log_context()
