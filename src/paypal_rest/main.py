"""PayPal CLI — entry point.

Agent-friendly CLI over the PayPal REST API.
"""

from __future__ import annotations

import logging

import typer

from paypal_rest.commands.auth_cmd import app as auth_app
from paypal_rest.commands.identity_cmd import app as identity_app
from paypal_rest.commands.payments_cmd import app as payments_app
from paypal_rest.commands.payouts_cmd import app as payouts_app
from paypal_rest.commands.vault_cmd import app as vault_app
from paypal_rest.commands.web_profiles_cmd import app as web_profiles_app

app = typer.Typer(
    name="paypal",
    help="CLI tool for the PayPal REST API (sandbox or live).",
    no_args_is_help=True,
)

# Register command groups
app.add_typer(auth_app, name="auth")
app.add_typer(payments_app, name="payments")
app.add_typer(vault_app, name="vault")
app.add_typer(payouts_app, name="payouts")
app.add_typer(web_profiles_app, name="web-profiles")
app.add_typer(identity_app, name="identity")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging"),
) -> None:
    """PayPal CLI — tokens, payments, vault, payouts, and web profiles."""
    if verbose:
        logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")


if __name__ == "__main__":
    app()
