"""HTTP response with a chainable ``.with_header()`` API.

Each transformation returns a new Response.
"""

from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True, slots=True)
class Response:
    """An HTTP response built through immutable transformations.

    ``content_type`` may be ``None``: the explorer only labels the paths it
    recognizes and leaves everything else unlabelled.
    """

    body: str | bytes = ""
    status: int = 200
    content_type: str | None = None
    headers: tuple[tuple[str, str], ...] = ()

    # -- Chainable transformations --

    def with_header(self, name: str, value: str) -> Response:
        """Return a new Response with an additional header."""
        return replace(self, headers=(*self.headers, (name, value)))

    # -- Lookups --

    def header(self, name: str, default: str | None = None) -> str | None:
        """First value of header *name* (case-insensitive), or *default*."""
        name_lower = name.lower()
        for key, value in self.headers:
            if key.lower() == name_lower:
                return value
        return default

    # -- Body helpers --

    @property
    def body_bytes(self) -> bytes:
        """Body as bytes."""
        if isinstance(self.body, str):
            return self.body.encode("utf-8")
        return self.body

    @property
    def text(self) -> str:
        """Body as string."""
        if isinstance(self.body, bytes):
            return self.body.decode("utf-8")
        return self.body


def redirect(url: str, *, status: int = 301) -> Response:
    """A bodiless redirect to *url*."""
    return Response(status=status).with_header("Location", url)
