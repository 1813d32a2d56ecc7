"""
OAuth2 client configuration for the GoTo identity provider.

Settings come from environment variables (a local .env file is loaded at
startup by goto_oauth.main).
"""

import logging
import os
from dataclasses import dataclass
from functools import lru_cache


logger = logging.getLogger(__name__)

# GoTo (LogMeIn) authentication service
GOTO_AUTH_BASE_URL = "https://authentication.logmeininc.com"
AUTHORIZE_PATH = "/oauth/authorize"
TOKEN_PATH = "/oauth/token"

DEFAULT_PORT = 5000


@dataclass
class OAuthConfig:
    """
    OAuth client settings.

    Missing credentials are allowed: the provider rejects the resulting
    requests, so the service still starts and logs a warning.
    """

    client_id: str | None
    client_secret: str | None
    redirect_uri: str | None
    # Empty scope asks GoTo for every scope assigned to the client
    scope: str = ""
    base_url: str = GOTO_AUTH_BASE_URL
    port: int = DEFAULT_PORT

    @classmethod
    def from_env(cls) -> "OAuthConfig":
        """Load configuration from environment variables."""
        return cls(
            client_id=os.getenv("CLIENT_ID"),
            client_secret=os.getenv("CLIENT_SECRET"),
            redirect_uri=os.getenv("REDIRECT_URI"),
            scope=os.getenv("OAUTH_SCOPE", ""),
            base_url=os.getenv("OAUTH_BASE_URL", GOTO_AUTH_BASE_URL).rstrip("/"),
            port=int(os.getenv("PORT", str(DEFAULT_PORT))),
        )

    @property
    def authorize_url(self) -> str:
        return f"{self.base_url}{AUTHORIZE_PATH}"

    @property
    def token_url(self) -> str:
        return f"{self.base_url}{TOKEN_PATH}"

    def is_configured(self) -> bool:
        """Check that client credentials and redirect URI are all present."""
        return bool(self.client_id and self.client_secret and self.redirect_uri)

    def missing_settings(self) -> list[str]:
        """Names of the required environment variables that are unset."""
        missing = []
        if not self.client_id:
            missing.append("CLIENT_ID")
        if not self.client_secret:
            missing.append("CLIENT_SECRET")
        if not self.redirect_uri:
            missing.append("REDIRECT_URI")
        return missing


@lru_cache()
def get_oauth_config() -> OAuthConfig:
    """Get OAuth configuration singleton."""
    return OAuthConfig.from_env()
