"""
Token store interface and the in-memory implementation.

The store holds exactly one TokenRecord for the lifetime of the process.
Writes replace the whole record; there is no locking, so when callbacks
overlap the exchange that finishes last wins.
"""

import logging
from functools import lru_cache
from typing import Protocol

from goto_oauth.tokens.models import TokenRecord


logger = logging.getLogger(__name__)


class TokenStore(Protocol):
    """
    Port for the token slot.

    Handlers depend on this protocol and receive the concrete store through
    FastAPI dependency injection.
    """

    def get(self) -> TokenRecord:
        """Return the current record (all fields None before any exchange)."""
        ...

    def replace(self, record: TokenRecord) -> None:
        """Overwrite the current record."""
        ...


class InMemoryTokenStore:
    """Single-slot, process-lifetime token store. Not persisted."""

    def __init__(self, initial: TokenRecord | None = None):
        self._record = initial if initial is not None else TokenRecord()

    def get(self) -> TokenRecord:
        return self._record

    def replace(self, record: TokenRecord) -> None:
        self._record = record.model_copy()
        logger.debug("Token store overwritten")


@lru_cache()
def get_token_store() -> TokenStore:
    """Get the process-wide token store singleton."""
    return InMemoryTokenStore()
