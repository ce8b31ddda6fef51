"""Credit card vault service (/v1/vault/credit-cards)."""

from __future__ import annotations

from paypal_rest.client import PayPalClient
from paypal_rest.models.vault import CreditCard, CreditCardField, CreditCards

VAULT_PATH = "/v1/vault/credit-cards"


class VaultService:
    """Store and manage credit cards in the PayPal vault."""

    def __init__(self, client: PayPalClient) -> None:
        self._client = client

    def store(self, card: CreditCard) -> CreditCard:
        return self._client.post(VAULT_PATH, body=card, result_type=CreditCard)

    def get(self, card_id: str) -> CreditCard:
        return self._client.get(f"{VAULT_PATH}/{card_id}", result_type=CreditCard)

    def list(self, page: int | None = None, page_size: int | None = None) -> CreditCards:
        """List one page of stored cards."""
        params: dict[str, str] = {}
        if page is not None:
            params["page"] = str(page)
        if page_size is not None:
            params["page_size"] = str(page_size)
        return self._client.get(VAULT_PATH, params=params or None, result_type=CreditCards)

    def update(self, card_id: str, fields: list[CreditCardField]) -> CreditCard:
        """Apply JSON-patch operations to a stored card."""
        return self._client.patch(f"{VAULT_PATH}/{card_id}", body=fields, result_type=CreditCard)

    def delete(self, card_id: str) -> None:
        self._client.delete(f"{VAULT_PATH}/{card_id}")
