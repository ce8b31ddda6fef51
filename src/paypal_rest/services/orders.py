"""Order service (/v1/payments/orders)."""

from __future__ import annotations

from paypal_rest.client import PayPalClient
from paypal_rest.models.common import Amount
from paypal_rest.models.payments import Authorization, Capture, Order

ORDER_PATH = "/v1/payments/orders"


class OrderService:
    """Authorize, capture, and void payment orders."""

    def __init__(self, client: PayPalClient) -> None:
        self._client = client

    def get(self, order_id: str) -> Order:
        return self._client.get(f"{ORDER_PATH}/{order_id}", result_type=Order)

    def authorize(self, order_id: str, amount: Amount) -> Authorization:
        return self._client.post(
            f"{ORDER_PATH}/{order_id}/authorize",
            body={"amount": amount.model_dump()},
            result_type=Authorization,
        )

    def capture(self, order_id: str, amount: Amount, is_final_capture: bool = False) -> Capture:
        body = {"amount": amount.model_dump(), "is_final_capture": is_final_capture}
        return self._client.post(f"{ORDER_PATH}/{order_id}/capture", body=body, result_type=Capture)

    def void(self, order_id: str) -> Order:
        return self._client.post(f"{ORDER_PATH}/{order_id}/do-void", result_type=Order)
