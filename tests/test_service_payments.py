"""Tests for payment, authorization, sale, and order services."""
from paypal_rest.models.common import Amount
from paypal_rest.models.payments import (
    Authorization,
    Capture,
    ExecuteResponse,
    Order,
    Payment,
    PaymentList,
    Refund,
    Sale,
)
from paypal_rest.services.authorizations import AuthorizationService
from paypal_rest.services.orders import OrderService
from paypal_rest.services.payments import PaymentService
from paypal_rest.services.sales import SaleService

USD_5 = Amount(currency="USD", total="5.00")


# ── PaymentService ───────────────────────────────────────────────────

def test_create_direct_paypal_payment_body(mock_client):
    PaymentService(mock_client).create_direct_paypal_payment(
        USD_5, "https://shop/return", "https://shop/cancel", "Order #1",
    )

    args, kwargs = mock_client.post.call_args
    assert args[0] == "/v1/payments/payment"
    payment = kwargs["body"]
    assert payment.intent == "sale"
    assert payment.payer.payment_method == "paypal"
    assert payment.transactions[0].amount == USD_5
    assert payment.transactions[0].description == "Order #1"
    assert payment.redirect_urls.return_url == "https://shop/return"
    assert kwargs["result_type"] is Payment


def test_get_payment(mock_client):
    PaymentService(mock_client).get("PAY-1")
    mock_client.get.assert_called_once_with("/v1/payments/payment/PAY-1", result_type=Payment)


def test_list_payments_params(mock_client):
    PaymentService(mock_client).list(count=5, start_id="PAY-9")
    kwargs = mock_client.get.call_args[1]
    assert kwargs["params"] == {"count": "5", "start_id": "PAY-9"}
    assert kwargs["result_type"] is PaymentList


def test_list_payments_no_params(mock_client):
    PaymentService(mock_client).list()
    assert mock_client.get.call_args[1]["params"] is None


def test_execute_payment(mock_client):
    PaymentService(mock_client).execute("PAY-1", "PAYER-7")
    args, kwargs = mock_client.post.call_args
    assert args[0] == "/v1/payments/payment/PAY-1/execute"
    assert kwargs["body"] == {"payer_id": "PAYER-7"}
    assert kwargs["result_type"] is ExecuteResponse


# ── AuthorizationService ─────────────────────────────────────────────

def test_capture_authorization(mock_client):
    AuthorizationService(mock_client).capture("AUTH-1", USD_5, is_final_capture=True)
    args, kwargs = mock_client.post.call_args
    assert args[0] == "/v1/payments/authorization/AUTH-1/capture"
    assert kwargs["body"] == {"amount": {"currency": "USD", "total": "5.00"}, "is_final_capture": True}
    assert kwargs["result_type"] is Capture


def test_void_authorization(mock_client):
    AuthorizationService(mock_client).void("AUTH-1")
    mock_client.post.assert_called_once_with("/v1/payments/authorization/AUTH-1/void", result_type=Authorization)


def test_reauthorize(mock_client):
    AuthorizationService(mock_client).reauthorize("AUTH-1", USD_5)
    args, kwargs = mock_client.post.call_args
    assert args[0] == "/v1/payments/authorization/AUTH-1/reauthorize"
    assert kwargs["body"]["amount"]["total"] == "5.00"


# ── SaleService ──────────────────────────────────────────────────────

def test_get_sale(mock_client):
    SaleService(mock_client).get("SALE-1")
    mock_client.get.assert_called_once_with("/v1/payments/sale/SALE-1", result_type=Sale)


def test_full_refund_sends_empty_body(mock_client):
    SaleService(mock_client).refund("SALE-1")
    args, kwargs = mock_client.post.call_args
    assert args[0] == "/v1/payments/sale/SALE-1/refund"
    assert kwargs["body"] == {}
    assert kwargs["result_type"] is Refund


def test_partial_refund_sends_amount(mock_client):
    SaleService(mock_client).refund("SALE-1", Amount(currency="EUR", total="1.50"))
    assert mock_client.post.call_args[1]["body"] == {"amount": {"currency": "EUR", "total": "1.50"}}


def test_get_refund(mock_client):
    SaleService(mock_client).get_refund("REF-1")
    mock_client.get.assert_called_once_with("/v1/payments/refund/REF-1", result_type=Refund)


# ── OrderService ─────────────────────────────────────────────────────

def test_authorize_order(mock_client):
    OrderService(mock_client).authorize("O-1", USD_5)
    args, kwargs = mock_client.post.call_args
    assert args[0] == "/v1/payments/orders/O-1/authorize"
    assert kwargs["result_type"] is Authorization


def test_capture_order(mock_client):
    OrderService(mock_client).capture("O-1", USD_5)
    args, kwargs = mock_client.post.call_args
    assert args[0] == "/v1/payments/orders/O-1/capture"
    assert kwargs["body"]["is_final_capture"] is False


def test_void_order(mock_client):
    OrderService(mock_client).void("O-1")
    mock_client.post.assert_called_once_with("/v1/payments/orders/O-1/do-void", result_type=Order)
