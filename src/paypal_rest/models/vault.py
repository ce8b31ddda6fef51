"""Vaulted credit card models (/v1/vault/credit-cards)."""

from __future__ import annotations

from pydantic import BaseModel

from paypal_rest.models.common import Address, Link


class CreditCard(BaseModel):
    id: str | None = None
    payer_id: str | None = None
    number: str
    type: str
    expire_month: str
    expire_year: str
    cvv2: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    billing_address: Address | None = None
    state: str | None = None
    valid_until: str | None = None
    links: list[Link] = []


class CreditCardToken(BaseModel):
    credit_card_id: str
    payer_id: str | None = None
    last4: str | None = None
    expire_year: str | None = None
    expire_month: str | None = None


class CreditCards(BaseModel):
    """One page of GET /v1/vault/credit-cards."""
    items: list[CreditCard] = []
    links: list[Link] = []
    total_items: int = 0
    total_pages: int = 0


class CreditCardField(BaseModel):
    """A single JSON-patch operation for PATCH /v1/vault/credit-cards/{id}."""
    op: str
    path: str
    value: str
