"""
Authorization URL construction for the GoTo authorize endpoint.
"""

from urllib.parse import quote, urlencode

from goto_oauth.oauth.config import OAuthConfig


def build_authorize_url(config: OAuthConfig) -> str:
    """
    Build the provider authorization URL for the code flow.

    Parameters are emitted in a fixed order and percent-encoded, so the
    query decodes back to exactly the configured values. Unset values are
    sent empty; the provider rejects such requests.

    Args:
        config: OAuth client configuration

    Returns:
        Absolute URL of the authorize endpoint with query string
    """
    params = [
        ("response_type", "code"),
        ("client_id", config.client_id or ""),
        ("redirect_uri", config.redirect_uri or ""),
        ("scope", config.scope),
    ]
    return f"{config.authorize_url}?{urlencode(params, quote_via=quote)}"
