"""
MCP Resources — templates and tool documentation.

- eds://docs/overview: what the server offers and how to use it
- eds://templates/{name}: each template, resolved through the TemplateStore
- eds://capabilities/{name}: markdown generated from each tool's metadata

Tool docs are generated from the registry, so descriptions and input schemas
stay the single source of truth. They never change after startup and are
cached on first read. Templates are not cached.
"""

from typing import Any

from mcp.types import Resource

from capabilities import CapabilityRegistry
from models import CapabilityDescriptor
from templates import TemplateStore

SCHEME = "eds"
OVERVIEW_URI = f"{SCHEME}://docs/overview"
TEMPLATE_PREFIX = f"{SCHEME}://templates/"
CAPABILITY_PREFIX = f"{SCHEME}://capabilities/"


def capability_to_markdown(descriptor: CapabilityDescriptor) -> str:
    """
    Render a tool's public metadata as markdown.

    Parameters come from the JSON input schema; tools without properties
    are documented as taking no arguments.
    """
    lines = [f"# {descriptor.name}()", "", f"**{descriptor.title}**", "", descriptor.description, ""]

    properties: dict[str, Any] = descriptor.input_schema.get("properties", {})
    required = set(descriptor.input_schema.get("required", []))
    if not properties:
        lines.append("Takes no arguments.")
    else:
        lines += [
            "## Parameters",
            "",
            "| Param | Type | Required | Description |",
            "|-------|------|----------|-------------|",
        ]
        for param, schema in properties.items():
            lines.append(
                f"| `{param}` | {schema.get('type', 'any')} | "
                f"{'yes' if param in required else 'no'} | {schema.get('description', '')} |"
            )
    lines.append("")
    return "\n".join(lines)


class ResourceCatalog:
    """Read-only view of the store and registry as MCP resources."""

    def __init__(self, store: TemplateStore, registry: CapabilityRegistry) -> None:
        self._store = store
        self._registry = registry
        self._cache: dict[str, str] = {}

    def list_resources(self) -> list[Resource]:
        resources = [
            Resource(
                uri=OVERVIEW_URI,
                name="overview",
                description="Overview of the eds-block-analyser tools and templates",
                mimeType="text/markdown",
            )
        ]
        for d in self._store.descriptors():
            resources.append(Resource(
                uri=f"{TEMPLATE_PREFIX}{d.name}",
                name=d.name,
                description=d.description or None,
                mimeType=d.media_type,
            ))
        for name in self._registry.names():
            descriptor = self._registry.get(name)
            resources.append(Resource(
                uri=f"{CAPABILITY_PREFIX}{name}",
                name=f"tool:{name}",
                description=descriptor.title,
                mimeType="text/markdown",
            ))
        return resources

    def read(self, uri: str) -> str:
        """
        Read a resource by URI.

        Raises:
            KeyError: If the URI is not one of ours
        """
        if uri == OVERVIEW_URI:
            return self._overview()

        if uri.startswith(TEMPLATE_PREFIX):
            name = uri[len(TEMPLATE_PREFIX):]
            if name not in self._store:
                raise KeyError(f"Unknown template resource: {uri}")
            return self._store.resolve(name)

        if uri.startswith(CAPABILITY_PREFIX):
            if uri in self._cache:
                return self._cache[uri]
            descriptor = self._registry.get(uri[len(CAPABILITY_PREFIX):])
            if descriptor is None:
                raise KeyError(f"Unknown tool resource: {uri}")
            self._cache[uri] = capability_to_markdown(descriptor)
            return self._cache[uri]

        raise KeyError(f"Unknown resource: {uri}")

    def mime_type(self, uri: str) -> str:
        if uri.startswith(TEMPLATE_PREFIX):
            descriptor = self._store.get(uri[len(TEMPLATE_PREFIX):])
            if descriptor is not None:
                return descriptor.media_type
        return "text/markdown"

    def _overview(self) -> str:
        tool_rows = "\n".join(
            f"| `{entry['name']}` | {entry['description']} |"
            for entry in self._registry.list_capabilities()
        )
        template_rows = "\n".join(
            f"| `{d.name}` | {d.media_type} | {d.description} |"
            for d in self._store.descriptors()
        )
        return f"""# eds-block-analyser

Prompts and templates for estimating the effort of converting web pages or
Figma designs into Edge Delivery Services (EDS) blocks. This server does no
crawling or scoring itself: the returned prompts tell you which steps to run
with your own web-scraping and documentation tools.

## Tools

| Tool | Purpose |
|------|---------|
{tool_rows}

## Templates

| Name | Format | Description |
|------|--------|-------------|
{template_rows}

## Workflow

1. Call `eds_block_analyser` and follow the prompt
2. Fetch `ui_blocks_analysis`, `analysis_summary` and `evaluation_log` with `get_template`
3. Score each iteration with `self_evaluation_framework` (max 3 iterations)

## Resources

- `{OVERVIEW_URI}`: this overview
- `{TEMPLATE_PREFIX}{{name}}`: template content
- `{CAPABILITY_PREFIX}{{name}}`: tool documentation
"""
