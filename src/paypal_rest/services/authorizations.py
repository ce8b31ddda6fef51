"""Authorization service (/v1/payments/authorization)."""

from __future__ import annotations

from paypal_rest.client import PayPalClient
from paypal_rest.models.common import Amount
from paypal_rest.models.payments import Authorization, Capture

AUTHORIZATION_PATH = "/v1/payments/authorization"


class AuthorizationService:
    """Look up, capture, void, and reauthorize authorized payments."""

    def __init__(self, client: PayPalClient) -> None:
        self._client = client

    def get(self, authorization_id: str) -> Authorization:
        return self._client.get(f"{AUTHORIZATION_PATH}/{authorization_id}", result_type=Authorization)

    def capture(self, authorization_id: str, amount: Amount, is_final_capture: bool = False) -> Capture:
        """Capture all or part of an authorized payment."""
        body = {"amount": amount.model_dump(), "is_final_capture": is_final_capture}
        return self._client.post(
            f"{AUTHORIZATION_PATH}/{authorization_id}/capture",
            body=body,
            result_type=Capture,
        )

    def void(self, authorization_id: str) -> Authorization:
        return self._client.post(f"{AUTHORIZATION_PATH}/{authorization_id}/void", result_type=Authorization)

    def reauthorize(self, authorization_id: str, amount: Amount) -> Authorization:
        """Reauthorize a PayPal payment once its honor period has passed."""
        return self._client.post(
            f"{AUTHORIZATION_PATH}/{authorization_id}/reauthorize",
            body={"amount": amount.model_dump()},
            result_type=Authorization,
        )
