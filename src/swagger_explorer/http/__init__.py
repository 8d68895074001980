"""Immutable HTTP primitives: Request and Response."""
