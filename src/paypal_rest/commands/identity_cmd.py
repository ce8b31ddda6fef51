"""CLI command for account identity."""

from __future__ import annotations

from typing import Annotated

import typer

from paypal_rest.client import PayPalClient
from paypal_rest.config import get_config
from paypal_rest.exceptions import PayPalError
from paypal_rest.services.identity import IdentityService
from paypal_rest.utils.errors import handle_error
from paypal_rest.utils.output import OutputFormat, print_output

app = typer.Typer(name="identity", help="Show account identity details.")


@app.command("userinfo")
def userinfo(
    schema: Annotated[str, typer.Option("--schema", help="Userinfo schema")] = "openid",
    output: Annotated[OutputFormat, typer.Option("--output", "-o", help="Output format")] = OutputFormat.TABLE,
    verbose: Annotated[bool, typer.Option("--verbose", "-v")] = False,
) -> None:
    """Show the user info attached to the current credentials."""
    config = get_config()
    client = PayPalClient(config, verbose=verbose)
    service = IdentityService(client)

    try:
        print_output(service.get_user_info(schema), output, title="User Info")
    except PayPalError as e:
        handle_error(e)
        raise typer.Exit(1)
    finally:
        client.close()
