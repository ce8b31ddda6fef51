"""Sale and refund service."""

from __future__ import annotations

from typing import Any

from paypal_rest.client import PayPalClient
from paypal_rest.models.common import Amount
from paypal_rest.models.payments import Refund, Sale


class SaleService:
    """Look up sales and refund them."""

    def __init__(self, client: PayPalClient) -> None:
        self._client = client

    def get(self, sale_id: str) -> Sale:
        return self._client.get(f"/v1/payments/sale/{sale_id}", result_type=Sale)

    def refund(self, sale_id: str, amount: Amount | None = None) -> Refund:
        """Refund a completed sale. Without an amount the full sale is refunded."""
        body: dict[str, Any] = {}
        if amount is not None:
            body["amount"] = amount.model_dump()
        return self._client.post(f"/v1/payments/sale/{sale_id}/refund", body=body, result_type=Refund)

    def get_refund(self, refund_id: str) -> Refund:
        return self._client.get(f"/v1/payments/refund/{refund_id}", result_type=Refund)
