"""swagger-explorer exception hierarchy.

Shared across the registry, asset server, and dispatcher so every module
raises and catches the same types.
"""

from dataclasses import dataclass


class ExplorerError(Exception):
    """Base for all swagger-explorer errors."""


class ConfigurationError(ExplorerError):
    """Raised when the explorer is wired up incorrectly.

    Typically raised at setup time, e.g. registering two documents
    under the same instance name.
    """


class DocumentNotFound(ExplorerError, LookupError):  # noqa: N818 — mirrors LookupError
    """No description document is registered under the requested name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"no document registered under {name!r}")
        self.name = name


@dataclass(frozen=True, slots=True)
class HTTPError(ExplorerError):
    """An error that maps directly to an HTTP status code.

    Raised inside the dispatcher and converted to a response in one place
    (``swagger_explorer.server.errors``).
    """

    status: int
    detail: str = ""
    headers: tuple[tuple[str, str], ...] = ()

    def __str__(self) -> str:
        if self.detail:
            return f"{self.status}: {self.detail}"
        return str(self.status)


class NotFound(HTTPError):  # noqa: N818 — conventional name in web frameworks
    """404 — no asset matched the request path."""

    def __init__(self, detail: str = "Not Found") -> None:
        super().__init__(status=404, detail=detail)


class MethodNotAllowed(HTTPError):  # noqa: N818 — conventional name in web frameworks
    """405 — the explorer only answers GET.

    Carries an ``Allow`` header listing the accepted methods.
    """

    def __init__(self, allowed: frozenset[str] = frozenset({"GET"})) -> None:
        allow_value = ", ".join(sorted(allowed))
        super().__init__(
            status=405,
            detail="Method not allowed",
            headers=(("Allow", allow_value),),
        )
