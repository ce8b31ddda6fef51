"""Configuration management for the PayPal REST client.

Loads credentials from .env and optional defaults from config/settings.yaml.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Literal

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field

# API base URLs; a client talks to exactly one of them
API_BASE_SANDBOX = "https://api.sandbox.paypal.com"
API_BASE_LIVE = "https://api.paypal.com"

API_BASES = {
    "sandbox": API_BASE_SANDBOX,
    "live": API_BASE_LIVE,
}


class Settings(BaseModel):
    """Application settings loaded from environment variables."""
    client_id: str = Field(description="PayPal REST app client ID")
    client_secret: str = Field(description="PayPal REST app secret")
    mode: Literal["sandbox", "live"] = Field(default="sandbox", description="API environment")
    timeout: float = Field(default=30.0, description="HTTP timeout in seconds")

    model_config = {"frozen": True}


class Config(BaseModel):
    """Full application configuration."""
    settings: Settings

    model_config = {"frozen": True}

    @property
    def api_base(self) -> str:
        """Base URL for the configured environment."""
        return API_BASES[self.settings.mode]


def _find_project_root() -> Path:
    """Walk up from this file to find the project root (where config/ lives)."""
    current = Path(__file__).resolve().parent
    for parent in [current, *current.parents]:
        if (parent / "config" / "settings.yaml").exists():
            return parent
    # Fallback: cwd
    return Path.cwd()


def _load_file_settings(project_root: Path) -> dict[str, Any]:
    """Load optional defaults from settings.yaml."""
    settings_path = project_root / "config" / "settings.yaml"
    if not settings_path.exists():
        return {}

    with open(settings_path) as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError(f"Expected a mapping in {settings_path}")
    return data


def _env(*keys: str, default: str = "") -> str:
    """Try multiple env var names, return the first one found."""
    for key in keys:
        val = os.environ.get(key, "")
        if val:
            return val.strip().strip('"')
    return default


def _load_settings(file_settings: dict[str, Any] | None = None) -> Settings:
    """Build settings from environment variables, falling back to file values."""
    file_settings = file_settings or {}
    return Settings(
        client_id=_env("PAYPAL_CLIENT_ID"),
        client_secret=_env("PAYPAL_CLIENT_SECRET", "PAYPAL_SECRET"),
        mode=_env("PAYPAL_MODE", default=str(file_settings.get("mode", "sandbox"))).lower(),
        timeout=float(_env("PAYPAL_TIMEOUT", default=str(file_settings.get("timeout", 30.0)))),
    )


@lru_cache(maxsize=1)
def get_config() -> Config:
    """Load and cache the full application configuration."""
    project_root = _find_project_root()

    # Load .env from project root if it exists
    env_path = project_root / ".env"
    if env_path.exists():
        load_dotenv(env_path)

    settings = _load_settings(_load_file_settings(project_root))
    return Config(settings=settings)
