"""Error responses for explorer requests.

Maps HTTPError exceptions and unexpected failures to plain-text responses.
The client only ever sees the status text; details go to the log.
"""

import logging

from swagger_explorer.errors import HTTPError
from swagger_explorer.http.request import Request
from swagger_explorer.http.response import Response

logger = logging.getLogger("swagger_explorer.server")

_TEXT = "text/plain; charset=utf-8"


def handle_http_error(exc: HTTPError, request: Request) -> Response:
    """Map an HTTPError to a Response."""
    logger.debug("%d %s %s — %s", exc.status, request.method, request.path, exc.detail)

    resp = (
        Response(body=exc.detail or f"Error {exc.status}", status=exc.status, content_type=_TEXT)
        .with_header("X-Content-Type-Options", "nosniff")
    )
    for name, value in exc.headers:
        resp = resp.with_header(name, value)
    return resp


def internal_error_response() -> Response:
    """The generic 500 — never includes the underlying error."""
    return (
        Response(body="Internal Server Error", status=500, content_type=_TEXT)
        .with_header("X-Content-Type-Options", "nosniff")
    )


def handle_internal_error(exc: Exception, request: Request) -> Response:
    """Handle unexpected exceptions as 500 errors."""
    logger.error(
        "500 %s %s — %s: %s",
        request.method,
        request.path,
        type(exc).__name__,
        exc,
        exc_info=exc,
    )
    return internal_error_response()
