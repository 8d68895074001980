"""swagger-explorer — Swagger UI as an embeddable ASGI handler.

Serves the Swagger UI entry page, the API description document, and the
UI's static bundle from whatever prefix the host application mounts it at.

Basic usage::

    from swagger_explorer import handler, register
    from swagger_explorer.config import doc_expansion

    register("swagger", openapi_json)
    app = handler(doc_expansion("none"))

Any ASGI server or framework that can mount an ASGI app can host ``app``.
"""

__version__ = "0.1.0"
__all__ = [
    "DEFAULT_INSTANCE_NAME",
    "ConfigurationError",
    "DocumentNotFound",
    "DocumentRegistry",
    "ExplorerConfig",
    "ExplorerError",
    "ExplorerHandler",
    "StaticAssets",
    "handler",
    "new_config",
    "read_doc",
    "register",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import swagger_explorer`` fast; kida is only imported when a
    handler is actually used.
    """
    if name in ("ExplorerHandler", "handler"):
        from swagger_explorer.server import handler as _handler

        return getattr(_handler, name)

    if name in ("ExplorerConfig", "new_config"):
        from swagger_explorer import config

        return getattr(config, name)

    if name in ("DEFAULT_INSTANCE_NAME", "DocumentRegistry", "read_doc", "register"):
        from swagger_explorer import registry

        return getattr(registry, name)

    if name == "StaticAssets":
        from swagger_explorer.assets import StaticAssets

        return StaticAssets

    if name in ("ConfigurationError", "DocumentNotFound", "ExplorerError"):
        from swagger_explorer import errors

        return getattr(errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
