"""CLI commands for payment experience web profiles."""

from __future__ import annotations

from typing import Annotated

import typer
from rich.console import Console

from paypal_rest.client import PayPalClient
from paypal_rest.config import get_config
from paypal_rest.exceptions import PayPalError
from paypal_rest.services.web_profiles import WebProfileService
from paypal_rest.utils.errors import handle_error
from paypal_rest.utils.output import OutputFormat, print_output

console = Console(stderr=True)
app = typer.Typer(name="web-profiles", help="Manage payment experience web profiles.")


def _build_client(verbose: bool = False) -> tuple[PayPalClient, WebProfileService]:
    config = get_config()
    client = PayPalClient(config, verbose=verbose)
    return client, WebProfileService(client)


@app.command("list")
def list_profiles(
    output: Annotated[OutputFormat, typer.Option("--output", "-o", help="Output format")] = OutputFormat.TABLE,
    verbose: Annotated[bool, typer.Option("--verbose", "-v")] = False,
) -> None:
    """List web profiles."""
    client, service = _build_client(verbose)
    try:
        profiles = service.list()
        if not profiles:
            console.print("[dim]No web profiles found.[/dim]")
            raise typer.Exit(0)
        print_output(profiles, output, columns=["id", "name", "temporary", "presentation"], title="Web Profiles")
    except PayPalError as e:
        handle_error(e)
        raise typer.Exit(1)
    finally:
        client.close()


@app.command("get")
def get_profile(
    profile_id: Annotated[str, typer.Argument(help="Web profile ID")],
    output: Annotated[OutputFormat, typer.Option("--output", "-o", help="Output format")] = OutputFormat.TABLE,
    verbose: Annotated[bool, typer.Option("--verbose", "-v")] = False,
) -> None:
    """Show a web profile."""
    client, service = _build_client(verbose)
    try:
        print_output(service.get(profile_id), output, title="Web Profile")
    except PayPalError as e:
        handle_error(e)
        raise typer.Exit(1)
    finally:
        client.close()


@app.command("delete")
def delete_profile(
    profile_id: Annotated[str, typer.Argument(help="Web profile ID")],
    dry_run: Annotated[bool, typer.Option("--dry-run", help="Show what would be deleted without executing")] = False,
    verbose: Annotated[bool, typer.Option("--verbose", "-v")] = False,
) -> None:
    """Delete a web profile."""
    if dry_run:
        console.print(f"[yellow]DRY RUN — would delete web profile {profile_id}[/yellow]")
        return

    client, service = _build_client(verbose)
    try:
        service.delete(profile_id)
        console.print(f"[green]Deleted web profile {profile_id}[/green]")
    except PayPalError as e:
        handle_error(e)
        raise typer.Exit(1)
    finally:
        client.close()
