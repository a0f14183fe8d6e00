# tests/conftest.py
import os
import sys

from fastapi.testclient import TestClient
import pytest

# add the project root (one level up) onto sys.path
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from shape_api.config import Settings, get_settings
from shape_api.main import app

TEST_TOKEN = "test-token"
TEST_USER = "user_123"


@pytest.fixture
def settings():
    return Settings(
        gemini_api_key="fake-key",
        api_tokens={TEST_TOKEN: TEST_USER},
    )


@pytest.fixture
def client(settings):
    """FastAPI test client running against the ``settings`` fixture."""
    app.dependency_overrides[get_settings] = lambda: settings
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers():
    return {"Authorization": f"Bearer {TEST_TOKEN}"}
