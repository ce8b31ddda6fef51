"""Typer command groups for the paypal CLI."""
