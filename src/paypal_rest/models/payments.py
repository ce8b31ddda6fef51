"""Payment models (/v1/payments)."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from paypal_rest.models.common import Amount, Link, ShippingAddress
from paypal_rest.models.vault import CreditCard, CreditCardToken


class Item(BaseModel):
    quantity: int
    name: str
    price: str
    currency: str
    sku: str | None = None
    description: str | None = None
    tax: str | None = None


class ItemList(BaseModel):
    items: list[Item] = []
    shipping_address: ShippingAddress | None = None


class FundingInstrument(BaseModel):
    credit_card: CreditCard | None = None
    credit_card_token: CreditCardToken | None = None


class PayerInfo(BaseModel):
    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    payer_id: str | None = None
    phone: str | None = None
    shipping_address: ShippingAddress | None = None
    tax_id_type: str | None = None
    tax_id: str | None = None


class Payer(BaseModel):
    payment_method: str
    funding_instruments: list[FundingInstrument] | None = None
    payer_info: PayerInfo | None = None
    status: str | None = Field(default=None, alias="payer_status")

    model_config = {"populate_by_name": True}


class RedirectURLs(BaseModel):
    return_url: str | None = None
    cancel_url: str | None = None


class Sale(BaseModel):
    id: str | None = None
    amount: Amount | None = None
    description: str | None = None
    create_time: datetime | None = None
    state: str | None = None
    parent_payment: str | None = None
    update_time: datetime | None = None
    payment_mode: str | None = None
    pending_reason: str | None = None
    reason_code: str | None = None
    clearing_time: str | None = None
    protection_eligibility: str | None = None
    protection_eligibility_type: str | None = None
    links: list[Link] = []


class Authorization(BaseModel):
    id: str | None = None
    amount: Amount | None = None
    create_time: datetime | None = None
    update_time: datetime | None = None
    state: str | None = None
    parent_payment: str | None = None
    valid_until: datetime | None = None
    clearing_time: str | None = None
    protection_eligibility: str | None = None
    protection_eligibility_type: str | None = None
    links: list[Link] = []


class Capture(BaseModel):
    id: str | None = None
    amount: Amount | None = None
    is_final_capture: bool = False
    create_time: datetime | None = None
    update_time: datetime | None = None
    state: str | None = None
    parent_payment: str | None = None
    links: list[Link] = []


class Order(BaseModel):
    id: str | None = None
    create_time: datetime | None = None
    update_time: datetime | None = None
    state: str | None = None
    amount: Amount | None = None
    pending_reason: str | None = None
    parent_payment: str | None = None
    links: list[Link] = []


class Refund(BaseModel):
    id: str | None = None
    amount: Amount | None = None
    create_time: datetime | None = None
    state: str | None = None
    sale_id: str | None = None
    capture_id: str | None = None
    parent_payment: str | None = None
    update_time: datetime | None = None
    links: list[Link] = []


class Related(BaseModel):
    """One entry of transactions[].related_resources."""
    sale: Sale | None = None
    authorization: Authorization | None = None
    order: Order | None = None
    capture: Capture | None = None
    refund: Refund | None = None


class Transaction(BaseModel):
    amount: Amount
    description: str | None = None
    item_list: ItemList | None = None
    invoice_number: str | None = None
    custom: str | None = None
    soft_descriptor: str | None = None
    related_resources: list[Related] = []


class Payment(BaseModel):
    intent: str
    payer: Payer
    transactions: list[Transaction]
    redirect_urls: RedirectURLs | None = None
    id: str | None = None
    create_time: datetime | None = None
    state: str | None = None
    update_time: datetime | None = None
    experience_profile_id: str | None = None
    links: list[Link] = []


class PaymentList(BaseModel):
    """Response of GET /v1/payments/payment."""
    payments: list[Payment] = []
    count: int = 0
    next_id: str | None = None


class ExecuteResponse(BaseModel):
    id: str
    state: str
    transactions: list[Transaction] = []
    links: list[Link] = []
