"""Auth-related data models."""

from __future__ import annotations

from datetime import datetime, timedelta

from pydantic import BaseModel


class TokenResponse(BaseModel):
    """Response from the /v1/oauth2/token endpoint."""
    access_token: str
    token_type: str = "Bearer"
    expires_in: int
    refresh_token: str | None = None


class Token(BaseModel):
    """An access token together with the instant it was acquired."""
    access_token: str
    token_type: str
    expires_in: int
    acquired_at: datetime
    refresh_token: str | None = None

    model_config = {"frozen": True}

    @classmethod
    def from_response(cls, response: TokenResponse, acquired_at: datetime) -> Token:
        return cls(
            access_token=response.access_token,
            token_type=response.token_type,
            expires_in=response.expires_in,
            refresh_token=response.refresh_token,
            acquired_at=acquired_at,
        )

    @property
    def expires_at(self) -> datetime:
        return self.acquired_at + timedelta(seconds=self.expires_in)

    @property
    def authorization(self) -> str:
        """Value for the Authorization header."""
        return f"{self.token_type} {self.access_token}"


class TokenStatus(BaseModel):
    """Current state of the cached access token."""
    has_token: bool
    is_expired: bool
    expires_at: datetime | None = None
    seconds_remaining: int | None = None
