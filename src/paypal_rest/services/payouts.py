"""Payout service (/v1/payments/payouts)."""

from __future__ import annotations

from paypal_rest.client import PayPalClient
from paypal_rest.models.payouts import Payout, PayoutItemResponse, PayoutResponse


class PayoutService:
    """Send payout batches and track their items."""

    def __init__(self, client: PayPalClient) -> None:
        self._client = client

    def create(self, payout: Payout, sync_mode: bool = True) -> PayoutResponse:
        """Send a payout batch.

        With sync_mode the response carries the final item statuses; otherwise
        the batch is queued and only the batch header comes back.
        """
        return self._client.post(
            "/v1/payments/payouts",
            body=payout,
            params={"sync_mode": str(sync_mode).lower()},
            result_type=PayoutResponse,
        )

    def get(self, payout_batch_id: str) -> PayoutResponse:
        return self._client.get(f"/v1/payments/payouts/{payout_batch_id}", result_type=PayoutResponse)

    def get_item(self, payout_item_id: str) -> PayoutItemResponse:
        return self._client.get(f"/v1/payments/payouts-item/{payout_item_id}", result_type=PayoutItemResponse)

    def cancel_item(self, payout_item_id: str) -> PayoutItemResponse:
        """Cancel an unclaimed payout item."""
        return self._client.post(
            f"/v1/payments/payouts-item/{payout_item_id}/cancel",
            result_type=PayoutItemResponse,
        )
