"""Tests for vault, payout, billing, web profile, and identity services."""
import pytest

from paypal_rest.models.billing import Agreement, Plan
from paypal_rest.models.common import AmountPayout
from paypal_rest.models.identity import UserInfo
from paypal_rest.models.payouts import Payout, PayoutItem, PayoutItemResponse, PayoutResponse, SenderBatchHeader
from paypal_rest.models.vault import CreditCard, CreditCardField, CreditCards
from paypal_rest.models.web_profiles import CreateProfileResponse, WebProfile
from paypal_rest.services.billing import BillingService
from paypal_rest.services.identity import IdentityService
from paypal_rest.services.payouts import PayoutService
from paypal_rest.services.vault import VaultService
from paypal_rest.services.web_profiles import WebProfileService


# ── VaultService ─────────────────────────────────────────────────────

def test_store_card(mock_client):
    card = CreditCard(number="4417119669820331", type="visa", expire_month="11", expire_year="2030")
    VaultService(mock_client).store(card)
    mock_client.post.assert_called_once_with("/v1/vault/credit-cards", body=card, result_type=CreditCard)


def test_list_cards_paging(mock_client):
    VaultService(mock_client).list(page=2, page_size=10)
    kwargs = mock_client.get.call_args[1]
    assert kwargs["params"] == {"page": "2", "page_size": "10"}
    assert kwargs["result_type"] is CreditCards


def test_update_card_patch(mock_client):
    fields = [CreditCardField(op="replace", path="/expire_year", value="2031")]
    VaultService(mock_client).update("CARD-1", fields)
    mock_client.patch.assert_called_once_with("/v1/vault/credit-cards/CARD-1", body=fields, result_type=CreditCard)


def test_delete_card(mock_client):
    assert VaultService(mock_client).delete("CARD-1") is None
    mock_client.delete.assert_called_once_with("/v1/vault/credit-cards/CARD-1")


# ── PayoutService ────────────────────────────────────────────────────

def test_create_payout_sync_mode(mock_client):
    payout = Payout(
        sender_batch_header=SenderBatchHeader(email_subject="You got paid"),
        items=[PayoutItem(recipient_type="EMAIL", receiver="a@b.c", amount=AmountPayout(currency="USD", value="3.00"))],
    )
    PayoutService(mock_client).create(payout)
    args, kwargs = mock_client.post.call_args
    assert args[0] == "/v1/payments/payouts"
    assert kwargs["params"] == {"sync_mode": "true"}
    assert kwargs["result_type"] is PayoutResponse


def test_create_payout_async(mock_client):
    payout = Payout(sender_batch_header=SenderBatchHeader(email_subject="s"), items=[])
    PayoutService(mock_client).create(payout, sync_mode=False)
    assert mock_client.post.call_args[1]["params"] == {"sync_mode": "false"}


def test_get_payout_item(mock_client):
    PayoutService(mock_client).get_item("ITEM-1")
    mock_client.get.assert_called_once_with("/v1/payments/payouts-item/ITEM-1", result_type=PayoutItemResponse)


def test_cancel_payout_item(mock_client):
    PayoutService(mock_client).cancel_item("ITEM-1")
    mock_client.post.assert_called_once_with("/v1/payments/payouts-item/ITEM-1/cancel", result_type=PayoutItemResponse)


# ── BillingService ───────────────────────────────────────────────────

def test_create_plan(mock_client):
    plan = Plan(name="Gold", description="Gold plan", type="INFINITE")
    BillingService(mock_client).create_plan(plan)
    mock_client.post.assert_called_once_with("/v1/payments/billing-plans", body=plan, result_type=Plan)


def test_activate_plan_patch(mock_client):
    BillingService(mock_client).activate_plan("P-1")
    args, kwargs = mock_client.patch.call_args
    assert args[0] == "/v1/payments/billing-plans/P-1"
    assert kwargs["body"] == [{"op": "replace", "path": "/", "value": {"state": "ACTIVE"}}]


def test_execute_agreement(mock_client):
    BillingService(mock_client).execute_agreement("EC-123")
    mock_client.post.assert_called_once_with(
        "/v1/payments/billing-agreements/EC-123/agreement-execute", result_type=Agreement,
    )


# ── WebProfileService ────────────────────────────────────────────────

def test_create_profile(mock_client):
    profile = WebProfile(name="store")
    WebProfileService(mock_client).create(profile)
    kwargs = mock_client.post.call_args[1]
    assert kwargs["result_type"] is CreateProfileResponse


def test_list_profiles_typed_list(mock_client):
    WebProfileService(mock_client).list()
    assert mock_client.get.call_args[1]["result_type"] == list[WebProfile]


def test_update_profile_requires_id(mock_client):
    with pytest.raises(ValueError, match="without an id"):
        WebProfileService(mock_client).update(WebProfile(name="store"))
    mock_client.put.assert_not_called()


def test_update_profile_put(mock_client):
    profile = WebProfile(id="XP-1", name="store")
    WebProfileService(mock_client).update(profile)
    mock_client.put.assert_called_once_with("/v1/payment-experience/web-profiles/XP-1", body=profile)


# ── IdentityService ──────────────────────────────────────────────────

def test_get_user_info(mock_client):
    IdentityService(mock_client).get_user_info()
    mock_client.get.assert_called_once_with(
        "/v1/identity/openidconnect/userinfo/", params={"schema": "openid"}, result_type=UserInfo,
    )
