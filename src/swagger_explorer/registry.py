"""Description document registry.

Maps an instance name to something that can produce the API description
document. Generators register at import time; the explorer reads by name
on every ``doc.json`` request.

Thread safety:
    Registration and lookup share one lock, so documents can be registered
    while requests are being served.
"""

import logging
import threading
from collections.abc import Callable
from typing import Protocol, runtime_checkable

from swagger_explorer.errors import ConfigurationError, DocumentNotFound

logger = logging.getLogger("swagger_explorer.registry")

DEFAULT_INSTANCE_NAME = "swagger"


@runtime_checkable
class DocumentSource(Protocol):
    """Anything that can produce a description document on demand."""

    def read_doc(self) -> str | bytes: ...


class DocumentFetcher(Protocol):
    """What the dispatcher needs from a registry."""

    def read_doc(self, name: str = DEFAULT_INSTANCE_NAME) -> str | bytes: ...


class _StaticDocument:
    __slots__ = ("_doc",)

    def __init__(self, doc: str | bytes) -> None:
        self._doc = doc

    def read_doc(self) -> str | bytes:
        return self._doc


class _CallableDocument:
    __slots__ = ("_func",)

    def __init__(self, func: Callable[[], str | bytes]) -> None:
        self._func = func

    def read_doc(self) -> str | bytes:
        return self._func()


type Source = DocumentSource | Callable[[], str | bytes] | str | bytes


def _as_source(source: Source) -> DocumentSource:
    if isinstance(source, (str, bytes)):
        return _StaticDocument(source)
    if isinstance(source, DocumentSource):
        return source
    if callable(source):
        return _CallableDocument(source)
    msg = f"Cannot register {type(source).__name__!r} as a document source"
    raise ConfigurationError(msg)


class DocumentRegistry:
    """A thread-safe name -> document source map.

    Usage::

        registry = DocumentRegistry()
        registry.register("swagger", '{"swagger": "2.0"}')
        registry.register("admin", build_admin_spec)  # called per read
        registry.read_doc("admin")
    """

    __slots__ = ("_lock", "_sources")

    def __init__(self) -> None:
        self._sources: dict[str, DocumentSource] = {}
        self._lock = threading.Lock()

    def register(self, name: str, source: Source) -> None:
        """Register *source* under *name*.

        Raises:
            ConfigurationError: If *name* is already registered.
        """
        resolved = _as_source(source)
        with self._lock:
            if name in self._sources:
                msg = f"Document registered twice for name {name!r}"
                raise ConfigurationError(msg)
            self._sources[name] = resolved
        logger.debug("registered description document %r", name)

    def unregister(self, name: str) -> None:
        """Remove *name* from the registry. Missing names are ignored."""
        with self._lock:
            self._sources.pop(name, None)

    def read_doc(self, name: str = DEFAULT_INSTANCE_NAME) -> str | bytes:
        """Produce the document registered under *name*.

        Raises:
            DocumentNotFound: If nothing is registered under *name*.

        Errors raised by the source itself propagate unchanged.
        """
        with self._lock:
            source = self._sources.get(name)
        if source is None:
            raise DocumentNotFound(name)
        return source.read_doc()

    def names(self) -> list[str]:
        with self._lock:
            return sorted(self._sources)

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._sources

    def __len__(self) -> int:
        with self._lock:
            return len(self._sources)


# Process-wide default registry, used when a handler is not given one.
default_registry = DocumentRegistry()


def register(name: str, source: Source) -> None:
    """Register *source* with the default registry."""
    default_registry.register(name, source)


def read_doc(name: str = DEFAULT_INSTANCE_NAME) -> str | bytes:
    """Read a document from the default registry."""
    return default_registry.read_doc(name)
