"""Payout models (/v1/payments/payouts)."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel

from paypal_rest.models.common import AmountPayout, Link


class SenderBatchHeader(BaseModel):
    email_subject: str
    sender_batch_id: str | None = None


class PayoutItem(BaseModel):
    recipient_type: str
    receiver: str
    amount: AmountPayout
    note: str | None = None
    sender_item_id: str | None = None


class Payout(BaseModel):
    sender_batch_header: SenderBatchHeader
    items: list[PayoutItem]


class BatchHeader(BaseModel):
    payout_batch_id: str
    batch_status: str
    amount: AmountPayout | None = None
    fees: AmountPayout | None = None
    time_created: datetime | None = None
    time_completed: datetime | None = None
    sender_batch_header: SenderBatchHeader | None = None


class PayoutItemResponse(BaseModel):
    payout_item_id: str
    transaction_id: str | None = None
    transaction_status: str
    payout_batch_id: str | None = None
    payout_item_fee: AmountPayout | None = None
    payout_item: PayoutItem | None = None
    time_processed: datetime | None = None
    links: list[Link] = []


class PayoutResponse(BaseModel):
    batch_header: BatchHeader
    items: list[PayoutItemResponse] = []
    links: list[Link] = []
