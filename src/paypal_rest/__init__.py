"""Typed client and CLI for the PayPal REST API."""

__version__ = "0.1.0"
