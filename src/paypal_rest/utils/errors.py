"""Structured error handling for agent-friendly output."""

from __future__ import annotations

import json
import sys

from rich.console import Console

from paypal_rest.exceptions import (
    APIError,
    AuthenticationError,
    DecodeError,
    TransportError,
)

console = Console(stderr=True)

# Actionable hints keyed by error substring (PayPal error names included)
_ERROR_HINTS: list[tuple[str, str]] = [
    ("invalid_client", "Client credentials rejected — check PAYPAL_CLIENT_ID / PAYPAL_CLIENT_SECRET and PAYPAL_MODE"),
    ("AUTHENTICATION_FAILURE", "Token rejected — run `paypal auth refresh`"),
    ("401", "Token may be expired — run `paypal auth refresh`"),
    ("PERMISSION_DENIED", "The REST app lacks permission for this operation"),
    ("RESOURCE_NOT_FOUND", "The specified resource does not exist — verify the ID"),
    ("INVALID_RESOURCE_ID", "The specified resource does not exist — verify the ID"),
    ("VALIDATION_ERROR", "Request failed validation — see details for the offending fields"),
    ("MALFORMED_REQUEST", "Malformed request — verify JSON structure"),
    ("INTERNAL_SERVICE_ERROR", "PayPal had an internal error — retry later and quote the debug_id"),
    ("timeout", "Request timed out — try again or check network connectivity"),
    ("connect", "Connection error — check network connectivity"),
]


def _get_hint(error_message: str) -> str | None:
    """Match an error message to an actionable hint."""
    lower = error_message.lower()
    for pattern, hint in _ERROR_HINTS:
        if pattern.lower() in lower:
            return hint
    return None


def _error_code(error: Exception) -> str:
    if isinstance(error, AuthenticationError):
        return "AUTH_ERROR"
    if isinstance(error, TransportError):
        return "TRANSPORT_ERROR"
    if isinstance(error, DecodeError):
        return "DECODE_ERROR"
    if isinstance(error, APIError):
        if error.status_code == 401:
            return "AUTH_ERROR"
        if error.status_code == 404:
            return "NOT_FOUND"
        return "API_ERROR"
    return "RUNTIME_ERROR"


def handle_error(error: Exception) -> None:
    """Handle an error with structured output to stdout and human-readable output to stderr.

    Outputs a JSON error object to stdout for agent consumption:
    {"error": true, "code": "API_ERROR", "message": "...", "name": "...", "debug_id": "...", "hint": "..."}

    Also prints a human-readable error to stderr.
    """
    message = str(error)
    hint_source = message
    if isinstance(error, APIError):
        hint_source = f"{error.name} {message}"
    hint = _get_hint(hint_source)

    # Structured JSON to stdout for agents
    error_obj: dict[str, object] = {
        "error": True,
        "code": _error_code(error),
        "message": message,
    }
    if isinstance(error, APIError):
        error_obj["status"] = error.status_code
        error_obj["name"] = error.name
        error_obj["debug_id"] = error.debug_id
    if hint:
        error_obj["hint"] = hint

    json.dump(error_obj, sys.stdout)
    sys.stdout.write("\n")

    # Human-readable to stderr
    console.print(f"[red]Error:[/red] {message}")
    if hint:
        console.print(f"[dim]Hint: {hint}[/dim]")
