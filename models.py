"""
Type definitions for eds-block-analyser.

Dataclasses defining the contracts between layers:
- config.py produces descriptors (the fixed tool/template contract)
- templates/ resolves TemplateDescriptors into ResolvedTemplate | TemplateFailure
- capabilities/ invokes CapabilityDescriptors and returns text
- dispatcher.py turns text and errors into MCP responses

These types make the config→store→registry contract explicit and IDE-checkable.
"""

import copy
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Protocol, Mapping


# ============================================================================
# ERROR TYPES
# ============================================================================

class ErrorKind(Enum):
    """Categories of errors for consistent handling."""
    TEMPLATE_NOT_FOUND = "template_not_found"      # Soft: descriptive payload
    TEMPLATE_UNREADABLE = "template_unreadable"    # Soft: descriptive payload, logged
    CAPABILITY_NOT_FOUND = "capability_not_found"  # Hard: error response
    INVALID_INPUT = "invalid_input"                # Hard: error response
    CONFIGURATION = "configuration"                # Fatal at startup


class AnalyserError(Exception):
    """
    Structured error for consistent handling across layers.

    Registry and handlers raise these.
    The dispatcher catches and formats them for the MCP response.
    """

    def __init__(
        self,
        kind: ErrorKind,
        message: str,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for CLI/JSON output."""
        return {
            "error": True,
            "kind": self.kind.value,
            "message": self.message,
            **self.details,
        }


class CapabilityNotFound(AnalyserError):
    """Requested tool name is not registered."""

    def __init__(self, name: str, available: list[str]):
        super().__init__(
            ErrorKind.CAPABILITY_NOT_FOUND,
            f"Unknown tool: {name}. Available: {', '.join(available)}",
            {"name": name, "available": available},
        )
        self.name = name
        self.available = available


class ConfigurationError(AnalyserError):
    """Malformed or inconsistent startup configuration. Never reachable by callers."""

    def __init__(self, message: str):
        super().__init__(ErrorKind.CONFIGURATION, message)


# ============================================================================
# TEMPLATE TYPES
# ============================================================================

@dataclass(frozen=True)
class TemplateDescriptor:
    """
    A named template source.

    Exactly one of `inline` / `path` is set. Validation happens in the
    TemplateStore constructor so a bad descriptor stops the process at startup.
    """
    name: str
    inline: str | None = None
    path: Path | None = None
    description: str = ""
    media_type: str = "text/markdown"

    @classmethod
    def text(cls, name: str, text: str, description: str = "",
             media_type: str = "text/markdown") -> "TemplateDescriptor":
        return cls(name=name, inline=text, description=description, media_type=media_type)

    @classmethod
    def file(cls, name: str, path: Path, description: str = "",
             media_type: str | None = None) -> "TemplateDescriptor":
        if media_type is None:
            media_type = "text/csv" if path.suffix == ".csv" else "text/markdown"
        return cls(name=name, path=path, description=description, media_type=media_type)


@dataclass(frozen=True)
class ResolvedTemplate:
    """Successful template resolution."""
    name: str
    text: str
    media_type: str = "text/markdown"


@dataclass(frozen=True)
class TemplateFailure:
    """
    Failed template resolution.

    Kept as data rather than raised: callers get describe() as their payload
    so an agent can retry with a valid name.
    """
    kind: ErrorKind
    name: str
    available: tuple[str, ...] = ()

    def describe(self) -> str:
        """Agent-readable payload. Never includes file-system details."""
        if self.kind == ErrorKind.TEMPLATE_UNREADABLE:
            headline = (
                f"❌ Template '{self.name}' is registered but could not be read right now.\n"
                "The problem has been logged for the server operator."
            )
        elif self.name:
            headline = f"❌ Template not found: '{self.name}'"
        else:
            headline = "❌ Template not found: no template name was given"

        listing = "\n".join(f"• {n}" for n in self.available) or "• (no templates registered)"
        example = self.available[0] if self.available else "name"
        return (
            f"{headline}\n\n"
            f"Available templates:\n{listing}\n\n"
            f"Usage: get_template(templateName='{example}')\n"
        )


TemplateResult = ResolvedTemplate | TemplateFailure


# ============================================================================
# CAPABILITY TYPES
# ============================================================================

class CapabilityHandler(Protocol):
    """Uniform handler contract: arguments in, text out."""

    def invoke(self, arguments: Mapping[str, Any]) -> str: ...


def empty_input_schema() -> dict[str, Any]:
    """Schema advertised by tools that take no arguments."""
    return {"type": "object", "properties": {}, "required": []}


@dataclass(frozen=True)
class CapabilityDescriptor:
    """A named tool exposed to callers. title/description are metadata only."""
    name: str
    title: str
    description: str
    handler: CapabilityHandler
    input_schema: dict[str, Any] = field(default_factory=empty_input_schema)

    def to_listing(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "title": self.title,
            "description": self.description,
            "inputSchema": copy.deepcopy(self.input_schema),
        }
