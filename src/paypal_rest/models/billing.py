"""Billing plan and agreement models.

https://developer.paypal.com/docs/api/payments.billing-plans/
https://developer.paypal.com/docs/api/payments.billing-agreements/
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from paypal_rest.models.common import Address, Amount, AmountPayout, Link
from paypal_rest.models.payments import Payer


class ChargeModel(BaseModel):
    id: str | None = None
    type: str  # SHIPPING or TAX
    amount: AmountPayout


class PaymentDefinition(BaseModel):
    id: str | None = None
    name: str
    type: str  # TRIAL or REGULAR
    frequency_interval: str
    frequency: str  # DAY, WEEK, MONTH, YEAR
    cycles: str
    amount: AmountPayout
    charge_models: list[ChargeModel] = []


class Terms(BaseModel):
    id: str | None = None
    type: str  # MONTHLY, WEEKLY, YEARLY
    max_billing_amount: Amount | None = None
    occurrences: str | None = None
    amount_range: AmountPayout | None = None
    buyer_editable: str | None = None


class MerchantPreferences(BaseModel):
    id: str | None = None
    setup_fee: AmountPayout | None = None
    cancel_url: str | None = None
    return_url: str | None = None
    notify_url: str | None = None
    max_fail_attempts: str | None = None
    auto_bill_amount: str | None = None  # YES or NO
    initial_fail_amount_action: str | None = None  # CONTINUE or CANCEL
    accepted_payment_type: str | None = None
    char_set: str | None = Field(default=None, alias="charset")

    model_config = {"populate_by_name": True}


class Plan(BaseModel):
    id: str | None = None
    name: str
    description: str
    type: str  # FIXED or INFINITE
    state: str | None = None
    create_time: str | None = None
    update_time: str | None = None
    payment_definitions: list[PaymentDefinition] = []
    terms: list[Terms] = []
    merchant_preferences: MerchantPreferences | None = None
    links: list[Link] = []


class PlanReference(BaseModel):
    """Plan referenced by id when creating an agreement."""
    id: str


class AgreementDetails(BaseModel):
    outstanding_balance: AmountPayout | None = None
    cycles_remaining: str | None = None
    cycles_completed: str | None = None
    next_billing_date: str | None = None
    last_payment_date: str | None = None
    last_payment_amount: AmountPayout | None = None
    final_payment_date: str | None = None
    failed_payment_count: str | None = None


class OverrideChargeModel(BaseModel):
    charge_id: str
    amount: AmountPayout


class Agreement(BaseModel):
    id: str | None = None
    state: str | None = None
    name: str
    description: str
    start_date: str
    agreement_details: AgreementDetails | None = None
    payer: Payer | None = None
    shipping_address: Address | None = None
    override_merchant_preferences: MerchantPreferences | None = None
    override_charge_models: list[OverrideChargeModel] = []
    plan: Plan | PlanReference | None = None
    create_time: str | None = None
    update_time: str | None = None
    token: str | None = None
    links: list[Link] = []
