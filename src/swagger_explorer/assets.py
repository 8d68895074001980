"""Static asset serving for the Swagger UI bundle.

Serves the UI's scripts, stylesheets, and images from a directory. The
explorer claims ``index.html`` and ``doc.json`` itself and hands every
other path under its prefix to an asset server.

The prefix is not configured here: the explorer writes it into
``AssetServer.prefix`` once, on its first request. It is latched from the
undecoded request target, so it is matched against ``raw_path`` and only
the remainder is percent-decoded.
"""

import logging
import mimetypes
import threading
from importlib.resources import files
from pathlib import Path
from typing import Protocol
from urllib.parse import unquote_to_bytes

from swagger_ui_bundle import swagger_ui_path

from swagger_explorer.errors import HTTPError, NotFound
from swagger_explorer.http.request import Request
from swagger_explorer.http.response import Response

logger = logging.getLogger("swagger_explorer.assets")


class AssetServer(Protocol):
    """What the explorer needs from a static asset server.

    ``prefix`` is written once by the explorer; ``serve`` owns the whole
    response for the paths it is given, 404s included.
    """

    prefix: str

    async def serve(self, request: Request, *, content_type: str | None = None) -> Response: ...


class StaticAssets:
    """Serve files below one or more directories for request paths under ``prefix``.

    Directories are searched in order; the first that holds the file wins.

    Security: resolves symlinks and verifies the final path is within the
    directory it was found in to prevent path traversal.

    Usage::

        assets = StaticAssets("./node_modules/swagger-ui-dist")
        explorer = handler(config.asset_server(assets))
    """

    __slots__ = ("_cache_control", "_directories", "prefix")

    def __init__(
        self,
        directory: str | Path,
        *overlays: str | Path,
        prefix: str = "",
        cache_control: str = "public, max-age=3600",
    ) -> None:
        self._directories = tuple(Path(d).resolve() for d in (directory, *overlays))
        self._cache_control = cache_control
        self.prefix = prefix

    @property
    def directory(self) -> Path:
        return self._directories[0]

    @property
    def directories(self) -> tuple[Path, ...]:
        return self._directories

    async def serve(self, request: Request, *, content_type: str | None = None) -> Response:
        """Serve the file named by the request path.

        *content_type*, when given, wins over the type guessed from the
        file name.
        """
        try:
            file_path = self._locate(self._relative_path(request))
        except HTTPError as exc:
            logger.debug("%d %s: %s", exc.status, request.path, exc.detail)
            return Response(
                body=exc.detail,
                status=exc.status,
                content_type="text/plain; charset=utf-8",
            )
        return self._serve_file(file_path, content_type)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _relative_path(self, request: Request) -> str:
        """The decoded part of the request path below ``prefix``."""
        if not request.raw_path:
            if not request.path.startswith(self.prefix):
                raise NotFound
            return request.path[len(self.prefix) :]

        try:
            prefix = self.prefix.encode("latin-1")
        except UnicodeEncodeError:
            raise NotFound from None
        if not request.raw_path.startswith(prefix):
            raise NotFound
        try:
            return unquote_to_bytes(request.raw_path[len(prefix) :]).decode("utf-8")
        except UnicodeDecodeError:
            raise NotFound from None

    def _locate(self, relative: str) -> Path:
        """Map a path below the prefix onto a file inside a directory."""
        relative = relative.lstrip("/")
        if not relative:
            raise NotFound

        for directory in self._directories:
            file_path = (directory / relative).resolve()
            if not file_path.is_relative_to(directory):
                raise HTTPError(status=403, detail="Forbidden")
            if file_path.is_file():
                return file_path
        raise NotFound

    def _serve_file(self, file_path: Path, content_type: str | None) -> Response:
        """Read a file and build a response."""
        if content_type is None:
            content_type, _ = mimetypes.guess_type(str(file_path))
        if content_type is None:
            content_type = "application/octet-stream"

        body = file_path.read_bytes()

        return (
            Response(body=body, content_type=content_type)
            .with_header("Content-Length", str(len(body)))
            .with_header("Cache-Control", self._cache_control)
        )


_default: StaticAssets | None = None
_default_lock = threading.Lock()


def bundled_directory() -> Path:
    """Extra UI files shipped inside this package (``index.css``)."""
    return Path(str(files("swagger_explorer") / "dist"))


def default_asset_server() -> StaticAssets:
    """The process-wide asset server over the Swagger UI distribution.

    Serves the ``swagger-ui-bundle`` package's files, then this package's
    own ``dist/``. Created on first use; every explorer that is not given
    its own asset server shares this instance.
    """
    global _default
    if _default is not None:
        return _default
    with _default_lock:
        if _default is None:
            _default = StaticAssets(swagger_ui_path, bundled_directory())
        return _default
