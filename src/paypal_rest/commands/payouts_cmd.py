"""CLI commands for payouts."""

from __future__ import annotations

from typing import Annotated

import typer
from rich.console import Console

from paypal_rest.client import PayPalClient
from paypal_rest.config import get_config
from paypal_rest.exceptions import PayPalError
from paypal_rest.services.payouts import PayoutService
from paypal_rest.utils.errors import handle_error
from paypal_rest.utils.output import OutputFormat, print_output

console = Console(stderr=True)
app = typer.Typer(name="payouts", help="Inspect payout batches and items.")

ITEM_COLUMNS = ["payout_item_id", "transaction_id", "transaction_status", "payout_batch_id", "time_processed"]


def _build_client(verbose: bool = False) -> tuple[PayPalClient, PayoutService]:
    config = get_config()
    client = PayPalClient(config, verbose=verbose)
    return client, PayoutService(client)


@app.command("get")
def get_payout(
    batch_id: Annotated[str, typer.Argument(help="Payout batch ID")],
    output: Annotated[OutputFormat, typer.Option("--output", "-o", help="Output format")] = OutputFormat.TABLE,
    verbose: Annotated[bool, typer.Option("--verbose", "-v")] = False,
) -> None:
    """Show a payout batch and its items."""
    client, service = _build_client(verbose)
    try:
        payout = service.get(batch_id)
        header = payout.batch_header
        console.print(f"[bold]{header.payout_batch_id}[/bold] {header.batch_status}")
        print_output(payout.items, output, columns=ITEM_COLUMNS, title="Payout Items")
    except PayPalError as e:
        handle_error(e)
        raise typer.Exit(1)
    finally:
        client.close()


@app.command("item")
def get_item(
    item_id: Annotated[str, typer.Argument(help="Payout item ID")],
    output: Annotated[OutputFormat, typer.Option("--output", "-o", help="Output format")] = OutputFormat.TABLE,
    verbose: Annotated[bool, typer.Option("--verbose", "-v")] = False,
) -> None:
    """Show a single payout item."""
    client, service = _build_client(verbose)
    try:
        print_output(service.get_item(item_id), output, columns=ITEM_COLUMNS, title="Payout Item")
    except PayPalError as e:
        handle_error(e)
        raise typer.Exit(1)
    finally:
        client.close()


@app.command("cancel-item")
def cancel_item(
    item_id: Annotated[str, typer.Argument(help="Unclaimed payout item ID")],
    output: Annotated[OutputFormat, typer.Option("--output", "-o", help="Output format")] = OutputFormat.TABLE,
    verbose: Annotated[bool, typer.Option("--verbose", "-v")] = False,
) -> None:
    """Cancel an unclaimed payout item and return the funds."""
    client, service = _build_client(verbose)
    try:
        print_output(service.cancel_item(item_id), output, columns=ITEM_COLUMNS, title="Cancelled Item")
    except PayPalError as e:
        handle_error(e)
        raise typer.Exit(1)
    finally:
        client.close()
