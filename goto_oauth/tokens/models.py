"""
Token domain models.

TokenPayload is what the provider returns from the token endpoint;
TokenRecord is the slice of it the service keeps in memory.
"""

from pydantic import BaseModel, ConfigDict, Field


class TokenPayload(BaseModel):
    """
    Token endpoint response.

    Only the fields the service stores are declared; anything else the
    provider sends (token_type, scope, principal, ...) is kept as extra.
    """

    access_token: str | None = Field(default=None, description="OAuth2 access token")
    refresh_token: str | None = Field(
        default=None, description="OAuth2 refresh token"
    )
    expires_in: int | None = Field(
        default=None, description="Access token lifetime in seconds"
    )

    model_config = ConfigDict(extra="allow")


class TokenRecord(BaseModel):
    """The single token triple held by the process."""

    access_token: str | None = None
    refresh_token: str | None = None
    expires_in: int | None = None

    @classmethod
    def from_payload(cls, payload: TokenPayload) -> "TokenRecord":
        """Take the three stored fields; fields the provider omitted become None."""
        return cls(
            access_token=payload.access_token,
            refresh_token=payload.refresh_token,
            expires_in=payload.expires_in,
        )

    def is_empty(self) -> bool:
        return (
            self.access_token is None
            and self.refresh_token is None
            and self.expires_in is None
        )
