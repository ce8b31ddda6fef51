"""Shared fixtures for the paypal-rest test suite."""
from __future__ import annotations

from datetime import datetime
from unittest.mock import MagicMock

import httpx
import pytest

from paypal_rest.config import Config, Settings
from paypal_rest.models.auth import Token


@pytest.fixture
def fake_settings() -> Settings:
    return Settings(
        client_id="test-client-id",
        client_secret="test-client-secret",
        mode="sandbox",
        timeout=5.0,
    )


@pytest.fixture
def fake_config(fake_settings) -> Config:
    return Config(settings=fake_settings)


@pytest.fixture
def live_config() -> Config:
    return Config(settings=Settings(client_id="live-id", client_secret="live-secret", mode="live"))


@pytest.fixture
def fresh_token() -> Token:
    return Token(
        access_token="A21AAtest",
        token_type="Bearer",
        expires_in=600,
        acquired_at=datetime.now(),
    )


@pytest.fixture
def mock_client():
    """MagicMock standing in for PayPalClient."""
    client = MagicMock()
    client.get = MagicMock()
    client.post = MagicMock()
    client.put = MagicMock()
    client.patch = MagicMock()
    client.delete = MagicMock()
    client.close = MagicMock()
    return client


def make_response(
    status_code: int = 200,
    json_data=None,
    text: str | None = None,
    method: str = "GET",
    url: str = "https://api.sandbox.paypal.com/v1/test",
) -> httpx.Response:
    """Build a real httpx.Response bound to a request."""
    request = httpx.Request(method, url)
    if json_data is not None:
        return httpx.Response(status_code, json=json_data, request=request)
    return httpx.Response(status_code, text=text or "", request=request)


@pytest.fixture
def response():
    """Factory fixture for real httpx.Response objects."""
    return make_response
