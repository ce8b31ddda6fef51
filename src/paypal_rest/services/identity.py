"""Identity service."""

from __future__ import annotations

from paypal_rest.client import PayPalClient
from paypal_rest.models.identity import UserInfo


class IdentityService:
    """Read the OpenID Connect profile of the account behind a token."""

    def __init__(self, client: PayPalClient) -> None:
        self._client = client

    def get_user_info(self, schema: str = "openid") -> UserInfo:
        """Get profile attributes of the account the token belongs to."""
        return self._client.get(
            "/v1/identity/openidconnect/userinfo/",
            params={"schema": schema},
            result_type=UserInfo,
        )
