"""ASGI dispatcher and response sending."""
