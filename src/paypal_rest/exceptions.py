"""Exception hierarchy for the PayPal client."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

import httpx

from paypal_rest.models.errors import ErrorResponse

T = TypeVar("T")


class PayPalError(Exception):
    """Base exception for all PayPal client errors."""


class AuthenticationError(PayPalError):
    """The client-credentials exchange failed."""

    def __init__(self, message: str, status_code: int | None = None, response_body: str | None = None):
        self.status_code = status_code
        self.response_body = response_body
        super().__init__(message)


class TransportError(PayPalError):
    """The request failed before any response arrived (connection, timeout)."""

    def __init__(self, method: str, url: str, cause: Exception):
        self.method = method
        self.url = url
        super().__init__(f"{method} {url}: {cause}")


class APIError(PayPalError):
    """The API answered with a non-2xx status."""

    def __init__(self, method: str, url: str, response: httpx.Response, error: ErrorResponse):
        self.method = method
        self.url = url
        self.response = response
        self.status_code = response.status_code
        self.error = error
        super().__init__(f"{method} {url}: {response.status_code} {error.message}")

    @property
    def name(self) -> str:
        return self.error.name

    @property
    def debug_id(self) -> str:
        return self.error.debug_id

    @property
    def message(self) -> str:
        return self.error.message

    @property
    def information_link(self) -> str:
        return self.error.information_link

    @property
    def details(self):
        return self.error.details


class DecodeError(PayPalError):
    """A 2xx body did not match the expected result type."""

    def __init__(self, message: str, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(message)


@dataclass(frozen=True)
class Result(Generic[T]):
    """Outcome of a call: either a decoded value or one of the errors above."""
    value: T | None = None
    error: PayPalError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T | None:
        """Return the value, raising the stored error if there is one."""
        if self.error is not None:
            raise self.error
        return self.value
