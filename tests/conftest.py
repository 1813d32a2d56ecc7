"""
Shared test configuration and fixtures.
"""

import os
from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

# Keep a developer's .env and real credentials out of the test run
with patch.dict(
    os.environ,
    {
        "CLIENT_ID": "",
        "CLIENT_SECRET": "",
        "REDIRECT_URI": "",
    },
):
    from goto_oauth.main import app

from goto_oauth.oauth.config import OAuthConfig, get_oauth_config
from goto_oauth.tokens.store import InMemoryTokenStore, get_token_store


@pytest.fixture
def oauth_config():
    """OAuth config with test credentials."""
    return OAuthConfig(
        client_id="test-client-id",
        client_secret="test-client-secret",
        redirect_uri="http://localhost:5000/callback",
    )


@pytest.fixture
def token_store():
    """Fresh, empty token store for each test."""
    return InMemoryTokenStore()


@pytest.fixture
def client(oauth_config, token_store):
    """Test client wired to the test config and an isolated store."""
    app.dependency_overrides[get_oauth_config] = lambda: oauth_config
    app.dependency_overrides[get_token_store] = lambda: token_store

    test_client = TestClient(app)
    yield test_client

    app.dependency_overrides.pop(get_oauth_config, None)
    app.dependency_overrides.pop(get_token_store, None)


@pytest.fixture
def sample_token_response():
    """Token endpoint response as GoTo returns it."""
    return {
        "access_token": "A",
        "refresh_token": "B",
        "expires_in": 3600,
        "token_type": "Bearer",
        "scope": "collab:",
        "principal": "user@example.com",
    }
