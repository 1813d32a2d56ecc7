"""
FastAPI application for the GoTo OAuth authorization code flow.

This module wires dependencies and configures the application.
Flow logic lives in goto_oauth.core, endpoints in goto_oauth.oauth.
"""

import logging
from contextlib import asynccontextmanager

from dotenv import load_dotenv

# Configure logging FIRST, before other local imports
from goto_oauth.logging_config import setup_global_logging

load_dotenv()
setup_global_logging()

from fastapi import FastAPI  # noqa: E402
from fastapi.responses import PlainTextResponse  # noqa: E402

from goto_oauth.oauth import router as oauth_router  # noqa: E402
from goto_oauth.oauth.config import get_oauth_config  # noqa: E402
from goto_oauth.tokens.store import get_token_store  # noqa: E402

logger = logging.getLogger(__name__)


# ============================================================================
# Application Lifecycle
# ============================================================================


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Log startup configuration and shutdown."""
    config = get_oauth_config()
    logger.info(
        "Application starting up...",
        extra={
            "extra_fields": {
                "redirect_uri": config.redirect_uri,
                "token_url": config.token_url,
            }
        },
    )
    if not config.is_configured():
        logger.warning(
            f"OAuth client not fully configured, missing: "
            f"{', '.join(config.missing_settings())}"
        )
    yield
    # Tokens are held in memory only and are lost here
    store = app.dependency_overrides.get(get_token_store, get_token_store)()
    if store.get().is_empty():
        logger.info("Shutting down application...")
    else:
        logger.info("Shutting down application, discarding stored tokens...")


app = FastAPI(
    title="GoTo OAuth Connector",
    description="Authorization code flow against GoTo with in-memory token storage",
    version="1.0.0",
    lifespan=lifespan,
)


# ============================================================================
# Health Check Endpoints
# ============================================================================


@app.get("/", response_class=PlainTextResponse)
async def root():
    """Static greeting."""
    return "Hello World from the GoTo OAuth server!"


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}


# ============================================================================
# Include Routers
# ============================================================================

app.include_router(oauth_router.router)


# ============================================================================
# Main Entry Point
# ============================================================================


def run() -> None:
    """Serve the app on all interfaces, port from $PORT (default 5000)."""
    import uvicorn

    port = get_oauth_config().port
    logger.info(f"Server running at http://localhost:{port}")
    uvicorn.run(app, host="0.0.0.0", port=port)


if __name__ == "__main__":
    run()
