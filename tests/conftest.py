"""
Pytest fixtures for AuraShield tests. The API client runs against a fixed
test key so results never depend on the local .env.
"""

import pytest

TEST_API_KEY = "sk-aura-test-key"


@pytest.fixture
def api_keys(monkeypatch):
    from aurashield.config import Config

    monkeypatch.setattr(Config, "API_KEYS", [TEST_API_KEY])
    return [TEST_API_KEY]


@pytest.fixture
def client(api_keys):
    """FastAPI TestClient with the test key configured."""
    from fastapi.testclient import TestClient

    from aurashield.main import app

    return TestClient(app)


@pytest.fixture
def auth_headers():
    return {"x-api-key": TEST_API_KEY}
