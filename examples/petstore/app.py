"""Petstore — a tiny JSON API with its docs mounted at /api/docs/.

Demonstrates registering a generated description document, configuring
the explorer with options, and mounting it under a prefix of the host
application's choosing.

Run with any ASGI server pointed at ``app:app``.
"""

import json

from swagger_explorer import DocumentRegistry, handler
from swagger_explorer.config import deep_linking, doc_expansion, instance_name, ui_config

PETS = [
    {"id": 1, "name": "Biscuit", "tag": "dog"},
    {"id": 2, "name": "Mochi", "tag": "cat"},
]


def build_spec() -> str:
    return json.dumps(
        {
            "openapi": "3.1.0",
            "info": {"title": "Petstore", "version": "1.0.0"},
            "paths": {
                "/api/pets": {
                    "get": {
                        "summary": "List pets",
                        "responses": {"200": {"description": "All pets"}},
                    }
                }
            },
        }
    )


registry = DocumentRegistry()
registry.register("petstore", build_spec)

docs = handler(
    doc_expansion("none"),
    deep_linking(False),
    ui_config({"displayRequestDuration": "true"}),
    instance_name("petstore"),
    registry=registry,
)

DOCS_PREFIX = "/api/docs"


async def _send_json(send, status: int, payload: object) -> None:
    body = json.dumps(payload).encode("utf-8")
    await send(
        {
            "type": "http.response.start",
            "status": status,
            "headers": [
                (b"content-type", b"application/json"),
                (b"content-length", str(len(body)).encode("latin-1")),
            ],
        }
    )
    await send({"type": "http.response.body", "body": body})


async def _send_redirect(send, location: str) -> None:
    await send(
        {
            "type": "http.response.start",
            "status": 301,
            "headers": [
                (b"location", location.encode("latin-1")),
                (b"content-length", b"0"),
            ],
        }
    )
    await send({"type": "http.response.body", "body": b""})


async def app(scope, receive, send) -> None:
    if scope["type"] == "lifespan":
        await docs(scope, receive, send)
        return

    path = scope["path"]
    # The explorer latches its prefix from the first request it sees, so it
    # must only ever be handed paths below "/api/docs/".
    if path == DOCS_PREFIX:
        await _send_redirect(send, DOCS_PREFIX + "/")
    elif path.startswith(DOCS_PREFIX + "/"):
        await docs(scope, receive, send)
    elif path == "/api/pets":
        await _send_json(send, 200, PETS)
    else:
        await _send_json(send, 404, {"error": "not found"})
