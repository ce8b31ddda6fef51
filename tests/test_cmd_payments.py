"""CLI tests for payments command group."""
from unittest.mock import MagicMock, patch

import httpx
from typer.testing import CliRunner

from paypal_rest.commands.payments_cmd import app
from paypal_rest.exceptions import APIError
from paypal_rest.models.errors import ErrorResponse
from paypal_rest.models.payments import ExecuteResponse, Payment, PaymentList, Refund

runner = CliRunner()

PAYMENT = Payment.model_validate({
    "id": "PAY-123",
    "intent": "sale",
    "state": "created",
    "payer": {"payment_method": "paypal"},
    "transactions": [{"amount": {"currency": "USD", "total": "9.99"}}],
})


def _mock_build(payments=None, sales=None):
    return MagicMock(), payments or MagicMock(), sales or MagicMock()


def _not_found() -> APIError:
    url = "https://api.sandbox.paypal.com/v1/payments/payment/PAY-X"
    response = httpx.Response(404, request=httpx.Request("GET", url))
    return APIError("GET", url, response, ErrorResponse(name="INVALID_RESOURCE_ID", message="Resource not found"))


# ── get ──────────────────────────────────────────────────────────────

def test_get_payment():
    payments = MagicMock()
    payments.get.return_value = PAYMENT

    with patch("paypal_rest.commands.payments_cmd._build_client", return_value=_mock_build(payments)):
        result = runner.invoke(app, ["get", "PAY-123", "--output", "json"])
    assert result.exit_code == 0
    assert "PAY-123" in result.stdout
    payments.get.assert_called_once_with("PAY-123")


def test_get_payment_not_found():
    payments = MagicMock()
    payments.get.side_effect = _not_found()
    client, _, sales = _mock_build()

    with patch("paypal_rest.commands.payments_cmd._build_client", return_value=(client, payments, sales)):
        result = runner.invoke(app, ["get", "PAY-X"])
    assert result.exit_code == 1
    assert "NOT_FOUND" in result.stdout
    client.close.assert_called_once()


# ── list ─────────────────────────────────────────────────────────────

def test_list_payments():
    payments = MagicMock()
    payments.list.return_value = PaymentList(payments=[PAYMENT], count=1)

    with patch("paypal_rest.commands.payments_cmd._build_client", return_value=_mock_build(payments)):
        result = runner.invoke(app, ["list", "--count", "5", "--output", "json"])
    assert result.exit_code == 0
    assert "PAY-123" in result.stdout
    payments.list.assert_called_once_with(count=5, start_id=None)


def test_list_payments_empty():
    payments = MagicMock()
    payments.list.return_value = PaymentList()

    with patch("paypal_rest.commands.payments_cmd._build_client", return_value=_mock_build(payments)):
        result = runner.invoke(app, ["list"])
    assert result.exit_code == 0


# ── execute ──────────────────────────────────────────────────────────

def test_execute_payment():
    payments = MagicMock()
    payments.execute.return_value = ExecuteResponse(id="PAY-123", state="approved")

    with patch("paypal_rest.commands.payments_cmd._build_client", return_value=_mock_build(payments)):
        result = runner.invoke(app, ["execute", "PAY-123", "--payer-id", "PAYER-1", "--output", "json"])
    assert result.exit_code == 0
    assert "approved" in result.stdout
    payments.execute.assert_called_once_with("PAY-123", "PAYER-1")


# ── refund-sale ──────────────────────────────────────────────────────

def test_refund_dry_run():
    sales = MagicMock()

    with patch("paypal_rest.commands.payments_cmd._build_client", return_value=_mock_build(sales=sales)):
        result = runner.invoke(app, ["refund-sale", "SALE-1", "--total", "2.50", "--dry-run", "--output", "json"])
    assert result.exit_code == 0
    assert "2.50" in result.stdout
    sales.refund.assert_not_called()


def test_refund_partial():
    sales = MagicMock()
    sales.refund.return_value = Refund(id="REF-1", state="completed", sale_id="SALE-1")

    with patch("paypal_rest.commands.payments_cmd._build_client", return_value=_mock_build(sales=sales)):
        result = runner.invoke(app, ["refund-sale", "SALE-1", "--total", "2.50", "--currency", "EUR", "--output", "json"])
    assert result.exit_code == 0
    sale_id, amount = sales.refund.call_args[0]
    assert sale_id == "SALE-1"
    assert amount.total == "2.50"
    assert amount.currency == "EUR"


def test_refund_full():
    sales = MagicMock()
    sales.refund.return_value = Refund(id="REF-2", state="completed")

    with patch("paypal_rest.commands.payments_cmd._build_client", return_value=_mock_build(sales=sales)):
        result = runner.invoke(app, ["refund-sale", "SALE-1", "--output", "json"])
    assert result.exit_code == 0
    sales.refund.assert_called_once_with("SALE-1", None)
