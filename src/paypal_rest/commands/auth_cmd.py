"""CLI commands for authentication management."""

from __future__ import annotations

from typing import Annotated

import typer
from rich.console import Console

from paypal_rest.auth import TokenManager
from paypal_rest.config import get_config
from paypal_rest.exceptions import AuthenticationError
from paypal_rest.utils.errors import handle_error
from paypal_rest.utils.output import OutputFormat, print_output

console = Console(stderr=True)
app = typer.Typer(name="auth", help="Manage access tokens.")


def _token_result(auth: TokenManager, status_label: str) -> dict[str, object]:
    status = auth.get_status()
    token = auth.token
    return {
        "status": status_label,
        "token_type": token.token_type if token else "",
            "expires_at": str(status.expires_at),
            "seconds_remaining": status.seconds_remaining,
    }


@app.command()
def login(
    output: Annotated[OutputFormat, typer.Option("--output", "-o", help="Output format")] = OutputFormat.TABLE,
) -> None:
    """Exchange client credentials for a token and display its status."""
    config = get_config()
    auth = TokenManager(config)

    try:
        console.print(f"Authenticating against [bold]{config.settings.mode}[/bold]...", style="yellow")
        auth.ensure_valid_token()
        print_output(_token_result(auth, "authenticated"), output, title="Authentication")
    except AuthenticationError as e:
        handle_error(e)
        raise typer.Exit(1)
    finally:
        auth.close()


@app.command()
def status(
    output: Annotated[OutputFormat, typer.Option("--output", "-o", help="Output format")] = OutputFormat.TABLE,
) -> None:
    """Obtain a token if needed and show its status."""
    config = get_config()
    auth = TokenManager(config)

    try:
        auth.ensure_valid_token()
        token_status = auth.get_status()
        result = {
            "mode": config.settings.mode,
            "has_token": token_status.has_token,
            "is_expired": token_status.is_expired,
            "expires_at": str(token_status.expires_at) if token_status.expires_at else "N/A",
            "seconds_remaining": token_status.seconds_remaining or 0,
        }
        print_output(result, output, title="Token Status")
    except AuthenticationError as e:
        handle_error(e)
        raise typer.Exit(1)
    finally:
        auth.close()


@app.command()
def refresh(
    output: Annotated[OutputFormat, typer.Option("--output", "-o", help="Output format")] = OutputFormat.TABLE,
) -> None:
    """Force a new credential exchange."""
    config = get_config()
    auth = TokenManager(config)

    try:
        console.print("Force refreshing token...", style="yellow")
        auth.ensure_valid_token(force_refresh=True)
        print_output(_token_result(auth, "refreshed"), output, title="Token Refreshed")
    except AuthenticationError as e:
        handle_error(e)
        raise typer.Exit(1)
    finally:
        auth.close()
