"""Tests for the Capability Registry and handler variants."""

import pytest

from capabilities import CapabilityRegistry, StaticText, TemplateCatalog, TemplateLookup, TemplateText
from models import (
    AnalyserError,
    CapabilityDescriptor,
    CapabilityNotFound,
    ConfigurationError,
    ErrorKind,
)
from templates import TemplateStore


def _tool(name: str, text: str = "x") -> CapabilityDescriptor:
    return CapabilityDescriptor(name=name, title=name.title(), description=f"{name} tool",
                                handler=StaticText(text))


class TestRegister:
    """Registration happens once per name at startup."""

    def test_duplicate_name_fails_fast(self) -> None:
        registry = CapabilityRegistry([_tool("ping")])
        with pytest.raises(ConfigurationError, match="Duplicate"):
            registry.register(_tool("ping"))

    def test_duplicate_in_constructor_fails(self) -> None:
        with pytest.raises(ConfigurationError):
            CapabilityRegistry([_tool("ping"), _tool("ping")])

    def test_invalid_name_rejected(self) -> None:
        with pytest.raises(ConfigurationError, match="Invalid tool name"):
            CapabilityRegistry([_tool("Bad Name")])

    def test_handler_without_invoke_rejected(self) -> None:
        descriptor = CapabilityDescriptor(name="broken", title="Broken", description="",
                                          handler=object())  # type: ignore[arg-type]
        with pytest.raises(ConfigurationError, match="invoke"):
            CapabilityRegistry([descriptor])

    def test_non_object_schema_rejected(self) -> None:
        descriptor = CapabilityDescriptor(name="arr", title="Arr", description="",
                                          handler=StaticText("x"), input_schema={"type": "array"})
        with pytest.raises(ConfigurationError, match="object schema"):
            CapabilityRegistry([descriptor])


class TestList:
    """list_capabilities() exposes public metadata in registration order."""

    def test_registration_order(self) -> None:
        registry = CapabilityRegistry([_tool("zeta"), _tool("alpha")])
        assert [c["name"] for c in registry.list_capabilities()] == ["zeta", "alpha"]

    def test_listing_shape(self, ping_registry: CapabilityRegistry) -> None:
        assert ping_registry.list_capabilities() == [{
            "name": "ping",
            "title": "Ping",
            "description": "Replies pong",
            "inputSchema": {"type": "object", "properties": {}, "required": []},
        }]

    def test_each_name_listed_once(self) -> None:
        registry = CapabilityRegistry([_tool("a"), _tool("b"), _tool("c")])
        names = [c["name"] for c in registry.list_capabilities()]
        assert sorted(names) == sorted(set(names)) == ["a", "b", "c"]

    def test_listing_schemas_are_independent(self) -> None:
        registry = CapabilityRegistry([_tool("a"), _tool("b")])
        first, second = registry.list_capabilities()
        assert first["inputSchema"] is not second["inputSchema"]

    def test_editing_listing_leaves_registry_unchanged(self, store: TemplateStore) -> None:
        schema = {
            "type": "object",
            "properties": {"templateName": {"type": "string"}},
            "required": ["templateName"],
        }
        registry = CapabilityRegistry([CapabilityDescriptor(
            name="get_template", title="Get", description="Fetch a template",
            handler=TemplateLookup(store), input_schema=schema,
        )])
        listed = registry.list_capabilities()[0]["inputSchema"]
        listed["properties"]["extra"] = {"type": "number"}
        listed["required"].append("extra")

        fresh = registry.list_capabilities()[0]["inputSchema"]
        assert fresh == {
            "type": "object",
            "properties": {"templateName": {"type": "string"}},
            "required": ["templateName"],
        }


class TestInvoke:
    """invoke() runs handlers and signals unknown names."""

    def test_ping_returns_pong(self, ping_registry: CapabilityRegistry) -> None:
        assert ping_registry.invoke("ping", {}) == "pong"

    def test_none_arguments_treated_as_empty(self, ping_registry: CapabilityRegistry) -> None:
        assert ping_registry.invoke("ping", None) == "pong"

    def test_unknown_name_raises_capability_not_found(self, ping_registry: CapabilityRegistry) -> None:
        with pytest.raises(CapabilityNotFound) as exc_info:
            ping_registry.invoke("missing", {})
        assert exc_info.value.kind == ErrorKind.CAPABILITY_NOT_FOUND
        assert exc_info.value.available == ["ping"]
        assert "missing" in exc_info.value.message

    def test_non_mapping_arguments_rejected(self, ping_registry: CapabilityRegistry) -> None:
        with pytest.raises(AnalyserError) as exc_info:
            ping_registry.invoke("ping", ["not", "a", "dict"])
        assert exc_info.value.kind == ErrorKind.INVALID_INPUT

    def test_invoke_is_idempotent(self, ping_registry: CapabilityRegistry) -> None:
        assert ping_registry.invoke("ping", {}) == ping_registry.invoke("ping", {})


class TestHandlers:
    """Handler variants bound to a template store."""

    def test_template_text_resolves_fixed_template(self, store: TemplateStore) -> None:
        assert TemplateText(store, "alpha").invoke({}) == "hello"

    def test_template_text_ignores_arguments(self, store: TemplateStore) -> None:
        assert TemplateText(store, "alpha").invoke({"templateName": "summary"}) == "hello"

    def test_lookup_resolves_argument(self, store: TemplateStore) -> None:
        assert TemplateLookup(store).invoke({"templateName": "alpha"}) == "hello"

    def test_lookup_matches_name_exactly(self, store: TemplateStore) -> None:
        text = TemplateLookup(store).invoke({"templateName": "  alpha "})
        assert text.startswith("❌ Template not found: '  alpha '")
        assert "• alpha" in text

    def test_lookup_unknown_name_is_soft(self, store: TemplateStore) -> None:
        text = TemplateLookup(store).invoke({"templateName": "beta"})
        assert "beta" in text
        assert "alpha" in text

    @pytest.mark.parametrize("arguments", [{}, {"templateName": None}, {"templateName": 3}, {"templateName": " "}])
    def test_lookup_requires_string_argument(self, store: TemplateStore, arguments: dict) -> None:
        with pytest.raises(AnalyserError) as exc_info:
            TemplateLookup(store).invoke(arguments)
        assert exc_info.value.kind == ErrorKind.INVALID_INPUT
        assert "templateName" in exc_info.value.message
        assert "alpha" in exc_info.value.message

    def test_catalog_lists_all_templates(self, store: TemplateStore) -> None:
        text = TemplateCatalog(store).invoke({})
        assert "`alpha`" in text
        assert "`summary`" in text
        assert "Summary skeleton" in text

    def test_catalog_of_empty_store(self) -> None:
        assert "No templates" in TemplateCatalog(TemplateStore([])).invoke({})
