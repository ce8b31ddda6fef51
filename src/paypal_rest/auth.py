"""OAuth2 client-credentials authentication for the PayPal REST API.

Handles token acquisition, caching, and expiry tracking.
"""

from __future__ import annotations

import logging
import threading
from datetime import datetime, timedelta

import httpx
from pydantic import ValidationError

from paypal_rest.config import Config
from paypal_rest.exceptions import AuthenticationError
from paypal_rest.models.auth import Token, TokenResponse, TokenStatus

logger = logging.getLogger(__name__)

TOKEN_PATH = "/v1/oauth2/token"

# Buffer before expiry to trigger refresh; covers latency between check and use
EXPIRY_BUFFER = timedelta(seconds=60)


class TokenManager:
    """Owns the access token for one set of client credentials."""

    def __init__(self, config: Config, http: httpx.Client | None = None) -> None:
        self._config = config
        self._token: Token | None = None
        self._lock = threading.Lock()
        self._http = http or httpx.Client(timeout=config.settings.timeout)

    @property
    def api_base(self) -> str:
        """Base URL the token endpoint is called on."""
        return self._config.api_base

    @property
    def token(self) -> Token | None:
        """The cached token, if any. Read-only; use ensure_valid_token() before a call."""
        return self._token

    def ensure_valid_token(self, force_refresh: bool = False) -> Token:
        """Get a token valid for at least EXPIRY_BUFFER, refreshing if needed.

        The lock is held across the exchange, so concurrent callers wait for
        one refresh instead of each issuing their own.

        Args:
            force_refresh: Exchange credentials even if the cached token is valid.

        Returns:
            The cached or freshly acquired Token.

        Raises:
            AuthenticationError: If the credential exchange fails.
        """
        with self._lock:
            token = self._token
            if not force_refresh and token is not None and self._is_usable(token):
                return token

            try:
                self._token = self._exchange()
            except AuthenticationError:
                # Keep a previous token only while it is still unexpired
                if self._token is not None and datetime.now() >= self._token.expires_at:
                    self._token = None
                raise
            return self._token

    def get_status(self) -> TokenStatus:
        """Get the current token status."""
        token = self._token
        if token is None:
            return TokenStatus(has_token=False, is_expired=True)

        now = datetime.now()
        is_expired = now > token.expires_at
        seconds_remaining = None
        if not is_expired:
            seconds_remaining = int((token.expires_at - now).total_seconds())

        return TokenStatus(
            has_token=True,
            is_expired=is_expired,
            expires_at=token.expires_at,
            seconds_remaining=seconds_remaining,
        )

    @staticmethod
    def _is_usable(token: Token) -> bool:
        """Check if a token stays valid for the safety buffer."""
        return datetime.now() + EXPIRY_BUFFER < token.expires_at

    def _exchange(self) -> Token:
        """Exchange client credentials for a new token."""
        settings = self._config.settings
        url = self._config.api_base + TOKEN_PATH

        try:
            response = self._http.post(
                url,
                auth=(settings.client_id, settings.client_secret),
                data={"grant_type": "client_credentials"},
                headers={"Accept": "application/json"},
            )
        except httpx.RequestError as e:
            logger.warning("Token request to %s failed: %s", url, e)
            raise AuthenticationError(f"Token request failed: {e}") from e

        acquired_at = datetime.now()

        if not 200 <= response.status_code < 300:
            error_detail = response.text
            try:
                error_json = response.json()
                error_detail = error_json.get("error_description", error_json.get("error", response.text))
            except (ValueError, AttributeError):
                pass
            logger.warning("Token request rejected (HTTP %s)", response.status_code)
            raise AuthenticationError(
                f"Token request failed (HTTP {response.status_code}): {error_detail}",
                status_code=response.status_code,
                response_body=response.text,
            )

        try:
            token_data = TokenResponse.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            raise AuthenticationError(
                f"Token response could not be parsed: {e}",
                status_code=response.status_code,
                response_body=response.text,
            ) from e

        token = Token.from_response(token_data, acquired_at)
        if not self._is_usable(token):
            raise AuthenticationError(
                f"Token endpoint returned a token expiring in {token.expires_in}s",
                status_code=response.status_code,
            )

        logger.debug("Fetched new access token (expires in %ss).", token.expires_in)
        return token

    def close(self) -> None:
        """Close the underlying HTTP client."""
        self._http.close()
