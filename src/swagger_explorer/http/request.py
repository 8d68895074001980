"""Immutable HTTP request.

Frozen metadata only. The explorer routes on the request target alone,
so headers and bodies are not carried here.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from swagger_explorer._internal.asgi import Scope


@dataclass(frozen=True, slots=True)
class Request:
    """An immutable HTTP request as seen by the explorer."""

    method: str
    path: str
    raw_path: bytes = b""
    query_string: bytes = b""

    @property
    def uri(self) -> str:
        """The raw request URI: undecoded path plus query string.

        Falls back to the decoded path when the server did not supply
        ``raw_path`` (it is optional in ASGI).
        """
        path = self.raw_path.decode("latin-1") if self.raw_path else self.path
        if self.query_string:
            return f"{path}?{self.query_string.decode('latin-1')}"
        return path

    # -- Factory --

    @classmethod
    def from_asgi(cls, scope: Scope | dict[str, Any]) -> Request:
        """Create a Request from an ASGI HTTP scope."""
        return cls(
            method=scope["method"],
            path=scope["path"],
            raw_path=scope.get("raw_path") or b"",
            query_string=scope.get("query_string", b""),
        )
