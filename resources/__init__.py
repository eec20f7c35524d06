"""Resources — templates and tool docs exposed as MCP resources."""

from .catalog import ResourceCatalog, capability_to_markdown

__all__ = ["ResourceCatalog", "capability_to_markdown"]
