"""Shapes shared across PayPal resources."""

from __future__ import annotations

from pydantic import BaseModel


class Link(BaseModel):
    """HATEOAS link attached to most responses."""
    href: str
    rel: str | None = None
    method: str | None = None
    enctype: str | None = None


class Amount(BaseModel):
    currency: str
    total: str


class AmountPayout(BaseModel):
    """Currency/value pair used by payouts and billing."""
    currency: str
    value: str


class Address(BaseModel):
    line1: str
    line2: str | None = None
    city: str
    country_code: str
    postal_code: str | None = None
    state: str | None = None
    phone: str | None = None


class ShippingAddress(BaseModel):
    recipient_name: str | None = None
    type: str | None = None
    line1: str
    line2: str | None = None
    city: str
    country_code: str
    postal_code: str | None = None
    state: str | None = None
    phone: str | None = None
