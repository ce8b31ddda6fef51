"""CLI commands for payments and sales."""

from __future__ import annotations

from typing import Annotated

import typer
from rich.console import Console

from paypal_rest.client import PayPalClient
from paypal_rest.config import get_config
from paypal_rest.exceptions import PayPalError
from paypal_rest.models.common import Amount
from paypal_rest.services.payments import PaymentService
from paypal_rest.services.sales import SaleService
from paypal_rest.utils.errors import handle_error
from paypal_rest.utils.output import OutputFormat, print_output

console = Console(stderr=True)
app = typer.Typer(name="payments", help="Look up, execute, and refund payments.")


def _build_client(verbose: bool = False) -> tuple[PayPalClient, PaymentService, SaleService]:
    config = get_config()
    client = PayPalClient(config, verbose=verbose)
    return client, PaymentService(client), SaleService(client)


@app.command("get")
def get_payment(
    payment_id: Annotated[str, typer.Argument(help="Payment ID (PAY-...)")],
    output: Annotated[OutputFormat, typer.Option("--output", "-o", help="Output format")] = OutputFormat.TABLE,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Show request details")] = False,
) -> None:
    """Show a single payment."""
    client, payments, _ = _build_client(verbose)
    try:
        payment = payments.get(payment_id)
        print_output(payment, output, columns=["id", "intent", "state", "create_time"], title="Payment")
    except PayPalError as e:
        handle_error(e)
        raise typer.Exit(1)
    finally:
        client.close()


@app.command("list")
def list_payments(
    count: Annotated[int, typer.Option("--count", "-n", help="Number of payments to return")] = 10,
    start_id: Annotated[str | None, typer.Option("--start-id", help="Resume after this payment ID")] = None,
    output: Annotated[OutputFormat, typer.Option("--output", "-o", help="Output format")] = OutputFormat.TABLE,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Show request details")] = False,
) -> None:
    """List recent payments."""
    client, payments, _ = _build_client(verbose)
    try:
        result = payments.list(count=count, start_id=start_id)
        if not result.payments:
            console.print("[dim]No payments found.[/dim]")
            raise typer.Exit(0)

        console.print(f"[dim]Found {result.count} payments[/dim]")
        if result.next_id:
            console.print(f"[dim]Next page: --start-id {result.next_id}[/dim]")
        columns = ["id", "intent", "state", "create_time"]
        print_output(result.payments, output, columns=columns, title="Payments")
    except PayPalError as e:
        handle_error(e)
        raise typer.Exit(1)
    finally:
        client.close()


@app.command("execute")
def execute_payment(
    payment_id: Annotated[str, typer.Argument(help="Payment ID approved by the buyer")],
    payer_id: Annotated[str, typer.Option("--payer-id", help="PayerID from the return URL")] = ...,
    output: Annotated[OutputFormat, typer.Option("--output", "-o", help="Output format")] = OutputFormat.TABLE,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Show request details")] = False,
) -> None:
    """Execute a payment after buyer approval."""
    client, payments, _ = _build_client(verbose)
    try:
        result = payments.execute(payment_id, payer_id)
        print_output(result, output, columns=["id", "state"], title="Executed Payment")
    except PayPalError as e:
        handle_error(e)
        raise typer.Exit(1)
    finally:
        client.close()


@app.command("refund-sale")
def refund_sale(
    sale_id: Annotated[str, typer.Argument(help="Sale ID to refund")],
    total: Annotated[str | None, typer.Option("--total", help="Partial refund amount, e.g. 2.50")] = None,
    currency: Annotated[str, typer.Option("--currency", help="Currency of --total")] = "USD",
    dry_run: Annotated[bool, typer.Option("--dry-run", help="Show what would be sent without executing")] = False,
    output: Annotated[OutputFormat, typer.Option("--output", "-o", help="Output format")] = OutputFormat.TABLE,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Show request details")] = False,
) -> None:
    """Refund a completed sale, fully or partially."""
    amount = Amount(currency=currency, total=total) if total else None

    if dry_run:
        console.print("[yellow]DRY RUN — would refund:[/yellow]")
        print_output(
            {"sale_id": sale_id, "amount": amount.model_dump() if amount else "full"},
            output,
        )
        return

    client, _, sales = _build_client(verbose)
    try:
        refund = sales.refund(sale_id, amount)
        print_output(refund, output, columns=["id", "state", "amount", "sale_id"], title="Refund")
    except PayPalError as e:
        handle_error(e)
        raise typer.Exit(1)
    finally:
        client.close()
