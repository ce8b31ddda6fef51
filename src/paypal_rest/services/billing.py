"""Billing plan and agreement service."""

from __future__ import annotations

from paypal_rest.client import PayPalClient
from paypal_rest.models.billing import Agreement, Plan

PLAN_PATH = "/v1/payments/billing-plans"
AGREEMENT_PATH = "/v1/payments/billing-agreements"


class BillingService:
    """Create billing plans and subscribe buyers to them."""

    def __init__(self, client: PayPalClient) -> None:
        self._client = client

    def create_plan(self, plan: Plan) -> Plan:
        return self._client.post(PLAN_PATH, body=plan, result_type=Plan)

    def activate_plan(self, plan_id: str) -> None:
        """Move a CREATED plan to ACTIVE so agreements can use it."""
        body = [{"op": "replace", "path": "/", "value": {"state": "ACTIVE"}}]
        self._client.patch(f"{PLAN_PATH}/{plan_id}", body=body)

    def create_agreement(self, agreement: Agreement) -> Agreement:
        """Create an agreement; the buyer approves it via the approval_url link."""
        return self._client.post(AGREEMENT_PATH, body=agreement, result_type=Agreement)

    def execute_agreement(self, token: str) -> Agreement:
        """Execute an agreement after buyer approval, using the token from the return URL."""
        return self._client.post(f"{AGREEMENT_PATH}/{token}/agreement-execute", result_type=Agreement)
