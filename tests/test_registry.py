"""Tests for swagger_explorer.registry — document registry."""

import pytest

from swagger_explorer.errors import ConfigurationError, DocumentNotFound
from swagger_explorer.registry import DEFAULT_INSTANCE_NAME, DocumentRegistry


class _Spec:
    def __init__(self) -> None:
        self.reads = 0

    def read_doc(self) -> str:
        self.reads += 1
        return '{"openapi": "3.1.0"}'


class TestDocumentRegistry:
    def test_literal_document(self) -> None:
        registry = DocumentRegistry()
        registry.register("swagger", '{"swagger":"2.0"}')
        assert registry.read_doc("swagger") == '{"swagger":"2.0"}'

    def test_bytes_document(self) -> None:
        registry = DocumentRegistry()
        registry.register("swagger", b"{}")
        assert registry.read_doc("swagger") == b"{}"

    def test_source_read_on_every_call(self) -> None:
        registry = DocumentRegistry()
        spec = _Spec()
        registry.register("api", spec)

        registry.read_doc("api")
        registry.read_doc("api")

        assert spec.reads == 2

    def test_callable_source(self) -> None:
        registry = DocumentRegistry()
        registry.register("api", lambda: "generated")
        assert registry.read_doc("api") == "generated"

    def test_default_name(self) -> None:
        registry = DocumentRegistry()
        registry.register(DEFAULT_INSTANCE_NAME, "doc")
        assert registry.read_doc() == "doc"

    def test_missing_name_raises(self) -> None:
        registry = DocumentRegistry()
        with pytest.raises(DocumentNotFound) as exc_info:
            registry.read_doc("swagger")
        assert exc_info.value.name == "swagger"

    def test_duplicate_registration_raises(self) -> None:
        registry = DocumentRegistry()
        registry.register("swagger", "one")
        with pytest.raises(ConfigurationError, match="registered twice"):
            registry.register("swagger", "two")
        assert registry.read_doc("swagger") == "one"

    def test_invalid_source_raises(self) -> None:
        registry = DocumentRegistry()
        with pytest.raises(ConfigurationError):
            registry.register("swagger", 42)  # type: ignore[arg-type]

    def test_source_errors_propagate(self) -> None:
        def broken() -> str:
            raise RuntimeError("generator exploded")

        registry = DocumentRegistry()
        registry.register("swagger", broken)
        with pytest.raises(RuntimeError, match="generator exploded"):
            registry.read_doc("swagger")

    def test_unregister_and_introspection(self) -> None:
        registry = DocumentRegistry()
        registry.register("b", "2")
        registry.register("a", "1")

        assert registry.names() == ["a", "b"]
        assert "a" in registry
        assert len(registry) == 2

        registry.unregister("a")
        registry.unregister("missing")

        assert "a" not in registry
        assert len(registry) == 1
