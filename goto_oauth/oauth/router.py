"""
OAuth2 authorization code flow endpoints.

- GET /authorize - Redirect the browser to the GoTo authorize page
- GET /callback  - Exchange the returned code for tokens
- GET /token     - Return the tokens currently held in memory

None of these endpoints are authenticated. /token in particular hands the
current tokens to any caller.
"""

import html
import json
import logging

from fastapi import APIRouter, status
from fastapi.responses import HTMLResponse, PlainTextResponse, RedirectResponse

from goto_oauth.core.exchange import (
    TokenExchangeRejected,
    TokenExchangeSuccess,
)
from goto_oauth.oauth.authorize import build_authorize_url
from goto_oauth.oauth.dependencies import Config, ExchangeService, Store
from goto_oauth.tokens.models import TokenRecord


logger = logging.getLogger(__name__)

router = APIRouter(tags=["oauth"])

MISSING_CODE_MESSAGE = "No authorization code provided or user denied the request."
EXCHANGE_FAILED_MESSAGE = (
    "An error occurred while exchanging the authorization code for a token."
)

SUCCESS_PAGE = """<h1>Authorization successful!</h1>
<p>We received your tokens from GoTo.</p>
<pre>{token_json}</pre>
<p>Check /token to see stored tokens.</p>
"""


def render_success_page(raw_token: dict) -> str:
    """Render the success page with the pretty-printed token payload."""
    token_json = html.escape(json.dumps(raw_token, indent=2), quote=False)
    return SUCCESS_PAGE.format(token_json=token_json)


@router.get("/authorize")
async def authorize(config: Config):
    """
    Start the authorization code flow.

    Takes no input from the request; the URL is built from configuration.

    Returns:
        302 redirect to the provider's authorize endpoint
    """
    if not config.is_configured():
        logger.warning(
            f"Authorize redirect with incomplete configuration, "
            f"missing: {', '.join(config.missing_settings())}"
        )

    url = build_authorize_url(config)
    logger.info("Redirecting to provider authorize endpoint")
    return RedirectResponse(url=url, status_code=status.HTTP_302_FOUND)


@router.get("/callback")
async def callback(
    service: ExchangeService,
    code: str | None = None,
    error: str | None = None,
    error_description: str | None = None,
):
    """
    Handle the provider redirect after user consent.

    Args:
        service: Token exchange service
        code: Authorization code (absent when the user denied access)
        error: OAuth error code sent by the provider, if any
        error_description: Human readable error sent by the provider, if any

    Returns:
        HTML success page, or a plain-text message describing the failure
    """
    if not code:
        logger.info(
            "Callback without authorization code",
            extra={
                "extra_fields": {
                    "error": error,
                    "error_description": error_description,
                }
            },
        )
        return PlainTextResponse(MISSING_CODE_MESSAGE)

    result = await service.exchange(code)

    if isinstance(result, TokenExchangeSuccess):
        return HTMLResponse(render_success_page(result.raw))

    if isinstance(result, TokenExchangeRejected):
        return PlainTextResponse(f"Error from GoTo token endpoint: {result.body}")

    return PlainTextResponse(EXCHANGE_FAILED_MESSAGE)


@router.get("/token", response_model=TokenRecord)
async def token(store: Store):
    """Return the stored token record as-is, unset fields as null."""
    return store.get()
