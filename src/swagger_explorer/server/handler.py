"""The explorer request dispatcher.

One ASGI application per mounted explorer. Every GET under the mount
prefix is answered in one of four ways, chosen purely by the final path
segment:

- ``index.html`` — the rendered entry page
- ``doc.json`` — the description document from the registry
- empty — a 301 to ``<prefix>index.html``
- anything else — delegated to the asset server

The two well-known names are checked first, so they are always served
here even if the asset bundle ships files with the same names.
"""

import logging

from kida import Environment

from swagger_explorer._internal.asgi import Receive, Scope, Send
from swagger_explorer.assets import AssetServer, default_asset_server
from swagger_explorer.config import ExplorerConfig, Option, new_config
from swagger_explorer.errors import HTTPError, MethodNotAllowed
from swagger_explorer.http.request import Request
from swagger_explorer.http.response import Response, redirect
from swagger_explorer.paths import content_type_for, resolve_path
from swagger_explorer.prefix import PrefixLatch
from swagger_explorer.registry import DocumentFetcher, default_registry
from swagger_explorer.server.errors import (
    handle_http_error,
    handle_internal_error,
    internal_error_response,
)
from swagger_explorer.server.sender import send_response
from swagger_explorer.templating.integration import create_environment, render_index

logger = logging.getLogger("swagger_explorer.server")

INDEX_PATH = "index.html"
DOC_PATH = "doc.json"


class ExplorerHandler:
    """ASGI handler serving Swagger UI for one description document.

    Configuration is read-only for the handler's lifetime. The only state
    written after construction is the mount prefix, latched from the first
    request.

    Usage::

        explorer = ExplorerHandler(new_config(doc_expansion("none")))

        # As an ASGI app mounted at /api/docs/ by the host server, or
        # from inside another framework's route:
        response = await explorer.handle(request)
    """

    __slots__ = ("_asset_server", "_env", "_latch", "_registry", "config")

    def __init__(
        self,
        config: ExplorerConfig | None = None,
        *,
        registry: DocumentFetcher | None = None,
        env: Environment | None = None,
    ) -> None:
        self.config: ExplorerConfig = config or new_config()
        self._registry: DocumentFetcher = registry if registry is not None else default_registry
        assets = self.config.asset_server
        self._asset_server: AssetServer = assets if assets is not None else default_asset_server()
        self._env: Environment = env if env is not None else create_environment()
        self._latch = PrefixLatch(self._asset_server)

    @property
    def asset_server(self) -> AssetServer:
        return self._asset_server

    @property
    def prefix(self) -> str:
        """The mount prefix, or ``""`` before the first request."""
        return self._latch.prefix

    # -- ASGI --

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI 3.0 entry point."""
        if scope["type"] == "lifespan":
            await self._handle_lifespan(receive, send)
            return
        if scope["type"] != "http":
            return

        request = Request.from_asgi(scope)
        response = await self.handle(request)
        await send_response(response, send)

    async def _handle_lifespan(self, receive: Receive, send: Send) -> None:
        """Acknowledge lifespan events; the explorer has nothing to start."""
        while True:
            message = await receive()
            if message["type"] == "lifespan.startup":
                await send({"type": "lifespan.startup.complete"})
            elif message["type"] == "lifespan.shutdown":
                await send({"type": "lifespan.shutdown.complete"})
                return

    # -- Dispatch --

    async def handle(self, request: Request) -> Response:
        """Answer one request. Never raises for a single request's failure."""
        try:
            return await self._dispatch(request)
        except HTTPError as exc:
            return handle_http_error(exc, request)
        except Exception as exc:
            return handle_internal_error(exc, request)

    async def _dispatch(self, request: Request) -> Response:
        if request.method != "GET":
            raise MethodNotAllowed

        resolved = resolve_path(request.uri)
        prefix = self._latch.bind(resolved.prefix)
        content_type = content_type_for(resolved.relative)

        relative = resolved.relative
        if relative == INDEX_PATH:
            body = render_index(self._env, self.config)
            return Response(body=body, content_type=content_type)
        if relative == DOC_PATH:
            return self._read_doc(content_type)
        if not relative:
            return redirect(prefix + INDEX_PATH)
        return await self._asset_server.serve(request, content_type=content_type)

    def _read_doc(self, content_type: str | None) -> Response:
        name = self.config.instance_name
        try:
            doc = self._registry.read_doc(name)
        except Exception:
            logger.warning("description document %r unavailable", name, exc_info=True)
            return internal_error_response()
        return Response(body=doc, content_type=content_type)


def handler(*options: Option, registry: DocumentFetcher | None = None) -> ExplorerHandler:
    """Build an explorer from config options.

    Usage::

        app = handler(
            doc_expansion("none"),
            ui_config({"defaultModelsExpandDepth": "-1"}),
        )
    """
    return ExplorerHandler(new_config(*options), registry=registry)
