"""Explorer configuration.

ExplorerConfig is a frozen dataclass — immutable after creation,
IDE-autocompletable, no string-key dict lookups.

Options are small functions that return a new config, so a handler can be
built from an ordered list of overrides::

    config = new_config(doc_expansion("full"), deep_linking(False))
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from swagger_explorer.registry import DEFAULT_INSTANCE_NAME

if TYPE_CHECKING:
    from swagger_explorer.assets import AssetServer


@dataclass(frozen=True, slots=True)
class ExplorerConfig:
    """Explorer configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = ExplorerConfig(doc_expansion="none", persist_authorization=True)
    """

    # Location of the description document, as advertised to the browser
    url: str = "doc.json"

    # Swagger UI display
    doc_expansion: str = "list"  # list, full, none — passed through as-is
    dom_id: str = "swagger-ui"
    deep_linking: bool = True
    persist_authorization: bool = False

    # Registry key used to fetch the description document
    instance_name: str = DEFAULT_INSTANCE_NAME

    # Script fragments injected verbatim into the entry page
    before_script: str = ""
    after_script: str = ""
    plugins: tuple[str, ...] = ()
    ui_config: tuple[tuple[str, str], ...] = ()  # Extra SwaggerUIBundle properties

    # Static assets — None means the process-wide default bundle
    asset_server: AssetServer | None = None


type Option = Callable[[ExplorerConfig], ExplorerConfig]


def url(value: str) -> Option:
    """The url pointing to the API definition (normally doc.json or swagger.yaml)."""
    return lambda config: replace(config, url=value)


def doc_expansion(value: str) -> Option:
    """Default expansion of operations: ``list``, ``full``, or ``none``."""
    return lambda config: replace(config, doc_expansion=value)


def dom_id(value: str) -> Option:
    """DOM id the UI mounts into (without the leading ``#``)."""
    return lambda config: replace(config, dom_id=value)


def instance_name(value: str) -> Option:
    """Registry name the description document was registered under.

    An empty name falls back to ``DEFAULT_INSTANCE_NAME``.
    """
    return lambda config: replace(config, instance_name=value)


def deep_linking(value: bool) -> Option:
    return lambda config: replace(config, deep_linking=value)


def persist_authorization(value: bool) -> Option:
    """Keep authorization data across browser close/refresh."""
    return lambda config: replace(config, persist_authorization=value)


def plugins(values: Iterable[str]) -> Option:
    """Additional plugins to load into Swagger UI, in order."""
    frozen = tuple(values)
    return lambda config: replace(config, plugins=frozen)


def ui_config(props: Mapping[str, str]) -> Option:
    """Additional SwaggerUIBundle config object properties.

    Values are JavaScript expressions and are rendered verbatim.
    Stored sorted by key so the rendered page is deterministic.
    """
    frozen = tuple(sorted(props.items()))
    return lambda config: replace(config, ui_config=frozen)


def before_script(js: str) -> Option:
    """JavaScript run right before the Swagger UI object is created."""
    return lambda config: replace(config, before_script=js)


def after_script(js: str) -> Option:
    """JavaScript run right after the Swagger UI object is created and set on the window."""
    return lambda config: replace(config, after_script=js)


def asset_server(server: AssetServer) -> Option:
    """Serve the UI bundle from *server* instead of the bundled default."""
    return lambda config: replace(config, asset_server=server)


def new_config(*options: Option) -> ExplorerConfig:
    """Apply *options* in order over the defaults and return the result."""
    config = ExplorerConfig()
    for option in options:
        config = option(config)

    if not config.instance_name:
        config = replace(config, instance_name=DEFAULT_INSTANCE_NAME)

    return config
