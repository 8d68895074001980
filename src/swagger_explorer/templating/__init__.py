"""Entry-page rendering with kida."""
