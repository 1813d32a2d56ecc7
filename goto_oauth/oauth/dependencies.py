"""
FastAPI dependencies for the OAuth endpoints.
"""

from typing import Annotated

from fastapi import Depends

from goto_oauth.core.exchange import TokenExchangeService
from goto_oauth.oauth.config import OAuthConfig, get_oauth_config
from goto_oauth.tokens.store import TokenStore, get_token_store


def get_exchange_service(
    config: Annotated[OAuthConfig, Depends(get_oauth_config)],
    store: Annotated[TokenStore, Depends(get_token_store)],
) -> TokenExchangeService:
    """Wire the exchange service with the current config and store."""
    return TokenExchangeService(config=config, store=store)


# Type aliases for cleaner dependency injection
Config = Annotated[OAuthConfig, Depends(get_oauth_config)]
Store = Annotated[TokenStore, Depends(get_token_store)]
ExchangeService = Annotated[TokenExchangeService, Depends(get_exchange_service)]
