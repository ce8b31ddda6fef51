"""CLI commands for vaulted credit cards."""

from __future__ import annotations

from typing import Annotated

import typer
from rich.console import Console

from paypal_rest.client import PayPalClient
from paypal_rest.config import get_config
from paypal_rest.exceptions import PayPalError
from paypal_rest.services.vault import VaultService
from paypal_rest.utils.errors import handle_error
from paypal_rest.utils.output import OutputFormat, print_output

console = Console(stderr=True)
app = typer.Typer(name="vault", help="Manage credit cards stored in the vault.")

CARD_COLUMNS = ["id", "type", "number", "expire_month", "expire_year", "state", "valid_until"]


def _build_client(verbose: bool = False) -> tuple[PayPalClient, VaultService]:
    config = get_config()
    client = PayPalClient(config, verbose=verbose)
    return client, VaultService(client)


@app.command("list")
def list_cards(
    page: Annotated[int | None, typer.Option("--page", help="Page number (1-based)")] = None,
    page_size: Annotated[int | None, typer.Option("--page-size", help="Cards per page")] = None,
    output: Annotated[OutputFormat, typer.Option("--output", "-o", help="Output format")] = OutputFormat.TABLE,
    verbose: Annotated[bool, typer.Option("--verbose", "-v")] = False,
) -> None:
    """List stored credit cards."""
    client, service = _build_client(verbose)
    try:
        cards = service.list(page=page, page_size=page_size)
        console.print(f"[dim]{cards.total_items} cards across {cards.total_pages} pages[/dim]")
        print_output(cards.items, output, columns=CARD_COLUMNS, title="Stored Cards")
    except PayPalError as e:
        handle_error(e)
        raise typer.Exit(1)
    finally:
        client.close()


@app.command("get")
def get_card(
    card_id: Annotated[str, typer.Argument(help="Card ID (CARD-...)")],
    output: Annotated[OutputFormat, typer.Option("--output", "-o", help="Output format")] = OutputFormat.TABLE,
    verbose: Annotated[bool, typer.Option("--verbose", "-v")] = False,
) -> None:
    """Show a stored credit card."""
    client, service = _build_client(verbose)
    try:
        print_output(service.get(card_id), output, columns=CARD_COLUMNS, title="Stored Card")
    except PayPalError as e:
        handle_error(e)
        raise typer.Exit(1)
    finally:
        client.close()


@app.command("delete")
def delete_card(
    card_id: Annotated[str, typer.Argument(help="Card ID (CARD-...)")],
    dry_run: Annotated[bool, typer.Option("--dry-run", help="Show what would be deleted without executing")] = False,
    verbose: Annotated[bool, typer.Option("--verbose", "-v")] = False,
) -> None:
    """Delete a stored credit card."""
    if dry_run:
        console.print(f"[yellow]DRY RUN — would delete card {card_id}[/yellow]")
        return

    client, service = _build_client(verbose)
    try:
        service.delete(card_id)
        console.print(f"[green]Deleted card {card_id}[/green]")
    except PayPalError as e:
        handle_error(e)
        raise typer.Exit(1)
    finally:
        client.close()
