"""CLI output and error helpers."""
