"""Kida environment setup and entry-page rendering.

The environment is created once per explorer and reused for every
``index.html`` request. The entry page is a plain template; everything
it needs comes from ``ExplorerConfig`` via ``index_context``.
"""

import json
from typing import Any

from kida import Environment, PackageLoader
from kida.template import Markup

from swagger_explorer.config import ExplorerConfig

INDEX_TEMPLATE = "swagger_index.html"


def create_environment() -> Environment:
    """Create a kida Environment over the bundled templates."""
    return Environment(
        loader=PackageLoader("swagger_explorer.templating", "templates"),
        autoescape=True,
        trim_blocks=True,
        lstrip_blocks=True,
    )


def _js_bool(value: bool) -> str:
    return "true" if value else "false"


# HTML-significant characters, so a literal can never close the <script> element.
_SCRIPT_UNSAFE = str.maketrans({"<": "\\u003c", ">": "\\u003e", "&": "\\u0026", "'": "\\u0027"})


def js_string(value: str) -> Markup:
    """*value* as a quoted JavaScript string literal, safe inside <script>."""
    return Markup(json.dumps(value).translate(_SCRIPT_UNSAFE))


def index_context(config: ExplorerConfig) -> dict[str, Any]:
    """Template variables for the entry page.

    Script fragments, plugins, and extra UI properties are JavaScript
    supplied by the application and are marked safe so they render
    verbatim. Strings placed inside the script are JavaScript literals;
    everything else is HTML-escaped.
    """
    return {
        "url": js_string(config.url),
        "dom_id": config.dom_id,
        "dom_selector": js_string("#" + config.dom_id),
        "doc_expansion": js_string(config.doc_expansion),
        "deep_linking": _js_bool(config.deep_linking),
        "persist_authorization": _js_bool(config.persist_authorization),
        "before_script": Markup(config.before_script),
        "after_script": Markup(config.after_script),
        "plugins": [Markup(plugin) for plugin in config.plugins],
        "ui_config": [Markup(f"{key}: {value}") for key, value in config.ui_config],
    }


def render_index(env: Environment, config: ExplorerConfig) -> str:
    """Render the entry page for *config* to a string."""
    template = env.get_template(INDEX_TEMPLATE)
    return template.render(index_context(config))
