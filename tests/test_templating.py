"""Tests for swagger_explorer.templating — entry-page rendering."""

import pytest

from swagger_explorer import config as opts
from swagger_explorer.config import new_config
from swagger_explorer.templating.integration import (
    create_environment,
    index_context,
    js_string,
    render_index,
)


@pytest.fixture(scope="module")
def env():
    return create_environment()


class TestIndexContext:
    def test_booleans_become_js_literals(self) -> None:
        ctx = index_context(new_config(opts.deep_linking(False), opts.persist_authorization(True)))
        assert ctx["deep_linking"] == "false"
        assert ctx["persist_authorization"] == "true"

    def test_ui_config_rendered_as_properties(self) -> None:
        ctx = index_context(new_config(opts.ui_config({"showExtensions": "true"})))
        assert ctx["ui_config"] == ["showExtensions: true"]


class TestRenderIndex:
    def test_defaults(self, env) -> None:
        html = render_index(env, new_config())

        assert 'url: "doc.json"' in html
        assert "deepLinking: true" in html
        assert 'docExpansion: "list"' in html
        assert 'dom_id: "#swagger-ui"' in html
        assert 'id="swagger-ui"' in html
        assert "persistAuthorization: false" in html
        assert 'layout: "StandaloneLayout"' in html

    def test_reflects_config(self, env) -> None:
        html = render_index(env, new_config(opts.doc_expansion("full"), opts.deep_linking(False)))

        assert 'docExpansion: "full"' in html
        assert "deepLinking: false" in html

    def test_scripts_injected_verbatim(self, env) -> None:
        html = render_index(
            env,
            new_config(
                opts.before_script('const greeting = "<hi>";'),
                opts.after_script("window.ui.initOAuth({clientId: 'abc'});"),
            ),
        )

        assert 'const greeting = "<hi>";' in html
        assert "window.ui.initOAuth({clientId: 'abc'});" in html
        assert html.index('const greeting = "<hi>";') < html.index("SwaggerUIBundle({")
        assert html.index("window.ui = ui") < html.index("initOAuth")

    def test_plugins_follow_download_url(self, env) -> None:
        html = render_index(env, new_config(opts.plugins(["FirstPlugin", "SecondPlugin"])))

        download = html.index("SwaggerUIBundle.plugins.DownloadUrl")
        first = html.index("FirstPlugin")
        second = html.index("SecondPlugin")
        assert download < first < second

    def test_ui_config_properties(self, env) -> None:
        props = {"defaultModelsExpandDepth": "-1", "showExtensions": "true"}
        html = render_index(env, new_config(opts.ui_config(props)))

        assert "defaultModelsExpandDepth: -1," in html
        assert "showExtensions: true," in html

    def test_plain_values_are_escaped(self, env) -> None:
        html = render_index(env, new_config(opts.dom_id('x"><script>')))
        assert '<script>"' not in html
        assert 'id="x"><script>"' not in html

    def test_no_scripts_when_empty(self, env) -> None:
        html = render_index(env, new_config())
        assert "undefined" not in html
        assert "None" not in html

    def test_deterministic(self, env) -> None:
        cfg = new_config(opts.ui_config({"b": "1", "a": "2"}), opts.plugins(["P"]))
        assert render_index(env, cfg) == render_index(env, cfg)


class TestScriptLiterals:
    def test_js_string_quotes_and_escapes(self) -> None:
        assert js_string('say "hi"') == '"say \\"hi\\""'
        assert js_string("</script>") == '"\\u003c/script\\u003e"'
        assert js_string("a & b") == '"a \\u0026 b"'

    def test_url_with_quote_stays_one_literal(self, env) -> None:
        html = render_index(env, new_config(opts.url('/specs/a"b.json')))
        assert 'url: "/specs/a\\"b.json",' in html
        assert "&#34;" not in html

    def test_values_cannot_close_script(self, env) -> None:
        html = render_index(env, new_config(opts.doc_expansion("</script><script>alert(1)")))
        assert html.count("</script>") == 3
        assert 'docExpansion: "\\u003c/script\\u003e\\u003cscript\\u003ealert(1)",' in html

    def test_dom_id_selector_literal(self, env) -> None:
        html = render_index(env, new_config(opts.dom_id("explorer")))
        assert 'dom_id: "#explorer",' in html
        assert 'id="explorer"' in html
