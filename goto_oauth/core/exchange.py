"""
Authorization code exchange against the provider's token endpoint.

The exchange never raises for provider or transport problems. It returns
one of three result types and the HTTP layer decides how to render each.
"""

import base64
import logging
from dataclasses import dataclass
from typing import Any

import httpx
from pydantic import ValidationError

from goto_oauth.oauth.config import OAuthConfig
from goto_oauth.tokens.models import TokenPayload, TokenRecord
from goto_oauth.tokens.store import TokenStore


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TokenExchangeSuccess:
    """Provider issued tokens; `raw` is the response body as decoded JSON."""

    payload: TokenPayload
    raw: dict[str, Any]


@dataclass(frozen=True)
class TokenExchangeRejected:
    """Provider answered with a non-2xx status."""

    status_code: int
    body: str


@dataclass(frozen=True)
class TokenExchangeFailed:
    """Network failure or unusable response body."""

    error: str


ExchangeResult = TokenExchangeSuccess | TokenExchangeRejected | TokenExchangeFailed


def basic_auth_credential(client_id: str | None, client_secret: str | None) -> str:
    """Return base64("client_id:client_secret") for the Authorization header."""
    pair = f"{client_id or ''}:{client_secret or ''}"
    return base64.b64encode(pair.encode("utf-8")).decode("ascii")


class TokenExchangeService:
    """
    Exchanges authorization codes for tokens and records them in the store.

    One POST per call, no retries, default httpx timeouts.
    """

    def __init__(self, config: OAuthConfig, store: TokenStore):
        self._config = config
        self._store = store

    def _build_request(self, code: str) -> tuple[dict[str, str], dict[str, str]]:
        headers = {
            "Authorization": "Basic "
            + basic_auth_credential(self._config.client_id, self._config.client_secret),
            "Content-Type": "application/x-www-form-urlencoded",
        }
        data = {
            "grant_type": "authorization_code",
            "redirect_uri": self._config.redirect_uri or "",
            "client_id": self._config.client_id or "",
            "code": code,
        }
        return headers, data

    async def exchange(self, code: str) -> ExchangeResult:
        """
        Exchange an authorization code for tokens.

        On success the store's record is replaced with the new token triple.
        On any other outcome the store is left as it was.

        Args:
            code: Authorization code from the provider callback

        Returns:
            TokenExchangeSuccess, TokenExchangeRejected or TokenExchangeFailed
        """
        headers, data = self._build_request(code)

        try:
            async with httpx.AsyncClient() as client:
                response = await client.post(
                    self._config.token_url, headers=headers, data=data
                )

            if not response.is_success:
                logger.warning(
                    f"Token endpoint rejected code exchange: "
                    f"{response.status_code} {response.text}"
                )
                return TokenExchangeRejected(
                    status_code=response.status_code, body=response.text
                )

            raw = response.json()
            if not isinstance(raw, dict):
                raise ValueError(
                    f"Expected a JSON object from token endpoint, got {type(raw).__name__}"
                )
            payload = TokenPayload.model_validate(raw)

        except httpx.HTTPError as e:
            logger.error(f"Network error exchanging code for token: {e}", exc_info=True)
            return TokenExchangeFailed(error=f"Network error: {e}")
        except (ValueError, ValidationError) as e:
            # json.JSONDecodeError is a ValueError
            logger.error(f"Invalid token endpoint response: {e}", exc_info=True)
            return TokenExchangeFailed(error=f"Invalid token response: {e}")
        except Exception as e:
            logger.error(f"Unexpected error exchanging code for token: {e}", exc_info=True)
            return TokenExchangeFailed(error=f"Unexpected error: {e}")

        self._store.replace(TokenRecord.from_payload(payload))
        logger.info(
            "Received tokens from token endpoint",
            extra={
                "extra_fields": {
                    "has_access_token": payload.access_token is not None,
                    "has_refresh_token": payload.refresh_token is not None,
                    "expires_in": payload.expires_in,
                }
            },
        )
        return TokenExchangeSuccess(payload=payload, raw=raw)
