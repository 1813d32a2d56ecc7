"""
Tests for OAuth configuration.
"""

import os
from unittest.mock import patch

import pytest

from goto_oauth.oauth.config import (
    DEFAULT_PORT,
    GOTO_AUTH_BASE_URL,
    OAuthConfig,
    get_oauth_config,
)


class TestOAuthConfig:
    """Tests for OAuthConfig."""

    def test_from_env_loads_variables(self):
        """Test loading config from environment variables."""
        env = {
            "CLIENT_ID": "client-id",
            "CLIENT_SECRET": "client-secret",
            "REDIRECT_URI": "https://example.com/callback",
            "OAUTH_SCOPE": "collab:",
            "PORT": "8081",
        }

        with patch.dict(os.environ, env, clear=True):
            config = OAuthConfig.from_env()

        assert config.client_id == "client-id"
        assert config.client_secret == "client-secret"
        assert config.redirect_uri == "https://example.com/callback"
        assert config.scope == "collab:"
        assert config.port == 8081

    def test_from_env_defaults(self):
        """Test defaults when only credentials are missing."""
        with patch.dict(os.environ, {}, clear=True):
            config = OAuthConfig.from_env()

        assert config.client_id is None
        assert config.client_secret is None
        assert config.redirect_uri is None
        assert config.scope == ""
        assert config.base_url == GOTO_AUTH_BASE_URL
        assert config.port == DEFAULT_PORT == 5000

    def test_base_url_override_strips_trailing_slash(self):
        """Test OAUTH_BASE_URL override is normalised."""
        with patch.dict(
            os.environ, {"OAUTH_BASE_URL": "http://localhost:9000/"}, clear=True
        ):
            config = OAuthConfig.from_env()

        assert config.authorize_url == "http://localhost:9000/oauth/authorize"
        assert config.token_url == "http://localhost:9000/oauth/token"

    def test_provider_endpoints(self):
        """Test the default GoTo endpoints."""
        config = OAuthConfig(client_id=None, client_secret=None, redirect_uri=None)

        assert (
            config.authorize_url
            == "https://authentication.logmeininc.com/oauth/authorize"
        )
        assert config.token_url == "https://authentication.logmeininc.com/oauth/token"

    @pytest.mark.parametrize(
        "client_id,client_secret,redirect_uri,missing",
        [
            ("id", "secret", "https://x/cb", []),
            (None, "secret", "https://x/cb", ["CLIENT_ID"]),
            ("id", "", "https://x/cb", ["CLIENT_SECRET"]),
            (None, None, None, ["CLIENT_ID", "CLIENT_SECRET", "REDIRECT_URI"]),
        ],
    )
    def test_is_configured(self, client_id, client_secret, redirect_uri, missing):
        """Test configuration completeness checks."""
        config = OAuthConfig(
            client_id=client_id,
            client_secret=client_secret,
            redirect_uri=redirect_uri,
        )

        assert config.is_configured() is (missing == [])
        assert config.missing_settings() == missing

    def test_get_oauth_config_is_cached(self):
        """Test the config singleton is built once."""
        get_oauth_config.cache_clear()
        try:
            with patch.dict(os.environ, {"CLIENT_ID": "first"}, clear=True):
                first = get_oauth_config()
            with patch.dict(os.environ, {"CLIENT_ID": "second"}, clear=True):
                second = get_oauth_config()

            assert first is second
            assert second.client_id == "first"
        finally:
            get_oauth_config.cache_clear()
