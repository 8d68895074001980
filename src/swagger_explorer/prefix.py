"""One-time prefix binding.

The mount prefix is chosen by the embedding application when it registers
the route, so it cannot be passed in at construction time. It is constant
afterwards, so the first request's prefix is latched into the asset server
and reused for the lifetime of the handler.
"""

import logging
import threading
from typing import Protocol

logger = logging.getLogger("swagger_explorer.server")


class HasPrefix(Protocol):
    prefix: str


class PrefixLatch:
    """Write a prefix into *target* exactly once.

    Thread safety:
        Uses a Lock + double-check, so under free-threading, where several
        worker threads can race on the first request, exactly one thread
        performs the write and every caller sees the finished value.
    """

    __slots__ = ("_bound", "_lock", "_prefix", "_target")

    def __init__(self, target: HasPrefix) -> None:
        self._target = target
        self._lock = threading.Lock()
        self._bound = False
        self._prefix = ""

    @property
    def bound(self) -> bool:
        return self._bound

    @property
    def prefix(self) -> str:
        """The latched prefix (``""`` until the first bind)."""
        return self._prefix

    def bind(self, prefix: str) -> str:
        """Latch *prefix* if nothing is latched yet; return the latched value."""
        if self._bound:
            return self._prefix
        with self._lock:
            if self._bound:
                return self._prefix
            self._target.prefix = prefix
            self._prefix = prefix
            # Publish last: readers that skip the lock must see a complete write.
            self._bound = True
        logger.debug("explorer mounted at prefix %r", prefix)
        return prefix
