"""Payment service (/v1/payments/payment)."""

from __future__ import annotations

from paypal_rest.client import PayPalClient
from paypal_rest.models.common import Amount
from paypal_rest.models.payments import (
    ExecuteResponse,
    Payer,
    Payment,
    PaymentList,
    RedirectURLs,
    Transaction,
)

PAYMENT_PATH = "/v1/payments/payment"


class PaymentService:
    """Create, look up, and execute payments."""

    def __init__(self, client: PayPalClient) -> None:
        self._client = client

    def create(self, payment: Payment) -> Payment:
        """Create a payment. PayPal payments come back with an approval_url link."""
        return self._client.post(PAYMENT_PATH, body=payment, result_type=Payment)

    def create_direct_paypal_payment(
        self,
        amount: Amount,
        redirect_url: str,
        cancel_url: str,
        description: str,
    ) -> Payment:
        """Create a sale paid through the buyer's PayPal account."""
        payment = Payment(
            intent="sale",
            payer=Payer(payment_method="paypal"),
            transactions=[Transaction(amount=amount, description=description)],
            redirect_urls=RedirectURLs(return_url=redirect_url, cancel_url=cancel_url),
        )
        return self.create(payment)

    def get(self, payment_id: str) -> Payment:
        return self._client.get(f"{PAYMENT_PATH}/{payment_id}", result_type=Payment)

    def list(self, count: int | None = None, start_id: str | None = None) -> PaymentList:
        """List recent payments, newest first."""
        params: dict[str, str] = {}
        if count is not None:
            params["count"] = str(count)
        if start_id:
            params["start_id"] = start_id
        return self._client.get(PAYMENT_PATH, params=params or None, result_type=PaymentList)

    def execute(self, payment_id: str, payer_id: str) -> ExecuteResponse:
        """Execute a payment the buyer approved."""
        return self._client.post(
            f"{PAYMENT_PATH}/{payment_id}/execute",
            body={"payer_id": payer_id},
            result_type=ExecuteResponse,
        )
