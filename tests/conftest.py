import pytest
from fastapi.testclient import TestClient

from contactform.core.config import Settings, get_settings
from contactform.main import app


@pytest.fixture
def settings():
    return Settings()


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def override_settings():
    """Swap the settings dependency for the duration of a test."""
    def _override(**values):
        custom = Settings(**values)
        app.dependency_overrides[get_settings] = lambda: custom
        return custom
    yield _override
    app.dependency_overrides.clear()


@pytest.fixture
def valid_form():
    return {
        "name": "Jane Doe",
        "email": "jane@example.com",
        "message": "Hello, I'd like to talk about a new website.",
    }
