"""Base API client for the PayPal REST API.

Handles token injection, JSON encoding, and uniform response decoding.
"""

from __future__ import annotations

import logging
from typing import Any, TypeVar

import httpx
from pydantic import TypeAdapter, ValidationError

from paypal_rest.auth import TokenManager
from paypal_rest.config import Config
from paypal_rest.exceptions import (
    APIError,
    DecodeError,
    PayPalError,
    Result,
    TransportError,
)
from paypal_rest.models.errors import ErrorResponse
from paypal_rest.models.request import APIRequest

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Card data sent to the vault and payment endpoints
REDACTED_KEYS = frozenset({"number", "cvv2"})


class PayPalClient:
    """HTTP client for the PayPal REST API.

    Every call is a single request; the only extra round trip is a token
    refresh from the TokenManager when the cached token is near expiry.
    Nothing is retried.
    """

    def __init__(
        self,
        config: Config,
        auth: TokenManager | None = None,
        verbose: bool = False,
        http: httpx.Client | None = None,
    ) -> None:
        self._config = config
        self._verbose = verbose
        self._http = http or httpx.Client(timeout=config.settings.timeout)
        if auth is None:
            auth = TokenManager(config, http=self._http)
        elif auth.api_base != config.api_base:
            raise ValueError(
                f"Token manager targets {auth.api_base} but the client targets {config.api_base}"
            )
        self._auth = auth

    @property
    def api_base(self) -> str:
        return self._config.api_base

    def send(self, request: APIRequest, result_type: type[T] | Any = None) -> T | Any:
        """Execute one API call and decode the response.

        Args:
            request: What to call. A token is attached when request.authenticated.
            result_type: Type to validate a 2xx JSON body into (a pydantic model,
                list[Model], ...). None returns the decoded JSON as-is.

        Returns:
            The decoded result, or None for a 2xx response with an empty body.

        Raises:
            AuthenticationError: If a token was needed and could not be obtained.
            TransportError: If no response was received.
            APIError: On any non-2xx status.
            DecodeError: If a 2xx body is not valid JSON or not of result_type.
        """
        url = self._config.api_base + request.path
        headers = {"Accept": "application/json"}

        if request.authenticated:
            token = self._auth.ensure_valid_token()
            headers["Authorization"] = token.authorization

        body = request.json_body()
        if body is not None:
            headers["Content-Type"] = "application/json"

        if self._verbose:
            logger.info(f"{request.method} {url}")
            if body is not None:
                logger.info(f"Body: {_redact(body)}")

        try:
            response = self._http.request(
                method=request.method,
                url=url,
                headers=headers,
                json=body,
                params=request.params,
            )
        except httpx.RequestError as e:
            raise TransportError(request.method, url, e) from e

        if self._verbose:
            logger.info(f"Response: {response.status_code}")

        if not 200 <= response.status_code < 300:
            raise APIError(request.method, url, response, parse_error(response))

        return self._decode(response, result_type)

    def send_with_auth(self, request: APIRequest, result_type: type[T] | Any = None) -> T | Any:
        """Like send(), but always attaches a bearer token."""
        if not request.authenticated:
            request = request.model_copy(update={"authenticated": True})
        return self.send(request, result_type)

    def try_send(self, request: APIRequest, result_type: type[T] | Any = None) -> Result[T]:
        """Like send(), but return a Result instead of raising PayPalError."""
        try:
            return Result(value=self.send(request, result_type))
        except PayPalError as e:
            return Result(error=e)

    def get(self, path: str, **kwargs: Any) -> Any:
        """Convenience method for GET requests."""
        return self._call("GET", path, **kwargs)

    def post(self, path: str, **kwargs: Any) -> Any:
        """Convenience method for POST requests."""
        return self._call("POST", path, **kwargs)

    def put(self, path: str, **kwargs: Any) -> Any:
        """Convenience method for PUT requests."""
        return self._call("PUT", path, **kwargs)

    def patch(self, path: str, **kwargs: Any) -> Any:
        """Convenience method for PATCH requests."""
        return self._call("PATCH", path, **kwargs)

    def delete(self, path: str, **kwargs: Any) -> Any:
        """Convenience method for DELETE requests."""
        return self._call("DELETE", path, **kwargs)

    def _call(
        self,
        method: str,
        path: str,
        *,
        body: Any = None,
        params: dict[str, str] | None = None,
        result_type: Any = None,
        authenticated: bool = True,
    ) -> Any:
        request = APIRequest(
            method=method,
            path=path,
            body=body,
            params=params,
            authenticated=authenticated,
        )
        return self.send(request, result_type)

    @staticmethod
    def _decode(response: httpx.Response, result_type: Any) -> Any:
        """Decode a 2xx body; an empty body is a success with no content."""
        if not response.content.strip():
            return None

        try:
            data = response.json()
        except ValueError as e:
            raise DecodeError(
                f"Response body is not valid JSON: {e}",
                status_code=response.status_code,
                body=response.text,
            ) from e

        if result_type is None:
            return data

        try:
            return TypeAdapter(result_type).validate_python(data)
        except ValidationError as e:
            raise DecodeError(
                f"Response body does not match {getattr(result_type, '__name__', result_type)}: {e}",
                status_code=response.status_code,
                body=response.text,
            ) from e

    def close(self) -> None:
        """Close the underlying HTTP client."""
        self._http.close()
        self._auth.close()


def parse_error(response: httpx.Response) -> ErrorResponse:
    """Build an ErrorResponse from a non-2xx response.

    Bodies that are empty, not JSON, or carry neither name nor message are
    replaced by one synthesized from the status line and raw text.
    """
    try:
        data = response.json()
        if isinstance(data, dict):
            error = ErrorResponse.model_validate(data)
            if not error.is_empty:
                return error
            # Identity endpoints answer in OAuth2 style
            if isinstance(data.get("error"), str):
                return ErrorResponse(
                    name=data["error"],
                    message=str(data.get("error_description", "")),
                    details=response.text,
                )
    except (ValueError, ValidationError):
        pass

    return ErrorResponse(
        name=f"HTTP_{response.status_code}",
        message=response.reason_phrase or f"HTTP {response.status_code}",
        details=response.text,
    )


def _redact(body: Any) -> Any:
    """Copy of a JSON body with card numbers and security codes masked."""
    if isinstance(body, dict):
        return {k: "***" if k in REDACTED_KEYS else _redact(v) for k, v in body.items()}
    if isinstance(body, list):
        return [_redact(item) for item in body]
    return body
