"""Pydantic records for PayPal API resources."""
