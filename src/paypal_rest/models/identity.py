"""OpenID Connect user info (/v1/identity/openidconnect/userinfo)."""

from __future__ import annotations

from pydantic import BaseModel, Field


class UserAddress(BaseModel):
    """OpenID address claim."""
    street_address: str | None = None
    locality: str | None = None
    region: str | None = None
    postal_code: str | None = None
    country: str | None = None


class UserInfo(BaseModel):
    id: str = Field(alias="user_id")
    name: str | None = None
    given_name: str | None = None
    family_name: str | None = None
    email: str | None = None
    verified: bool | None = None
    gender: str | None = None
    birthdate: str | None = None
    zoneinfo: str | None = None
    locale: str | None = None
    phone: str | None = Field(default=None, alias="phone_number")
    address: UserAddress | None = None
    verified_account: bool | None = None
    account_type: str | None = None
    age_range: str | None = None
    payer_id: str | None = None

    model_config = {"populate_by_name": True}
