"""
Dispatcher — the MCP boundary for tools.

Translates list/call requests into CapabilityRegistry calls and maps results
and errors back into MCP types. Every per-request failure becomes a
CallToolResult with isError=True; nothing raised here reaches the transport.
"""

from mcp.types import CallToolResult, TextContent, Tool

from capabilities import CapabilityRegistry
from logging_config import logger
from models import AnalyserError, CapabilityNotFound


def text_result(text: str, is_error: bool = False) -> CallToolResult:
    """Wrap a payload in the single-text-block response shape."""
    return CallToolResult(
        content=[TextContent(type="text", text=text)],
        isError=is_error,
    )


class Dispatcher:
    """Stateless: each request is independent of the previous one."""

    def __init__(self, registry: CapabilityRegistry) -> None:
        self._registry = registry

    def list_tools(self) -> list[Tool]:
        return [
            Tool(
                name=entry["name"],
                title=entry["title"],
                description=entry["description"],
                inputSchema=entry["inputSchema"],
            )
            for entry in self._registry.list_capabilities()
        ]

    def call_tool(self, name: str, arguments: object = None) -> CallToolResult:
        """
        Invoke a tool by name.

        Returns:
            Payload as text content, or an error result for unknown tools,
            bad arguments and unexpected handler failures
        """
        try:
            return text_result(self._registry.invoke(name, arguments))
        except CapabilityNotFound as e:
            logger.warning(f"Unknown tool requested: {e.name!r}")
            return text_result(e.message, is_error=True)
        except AnalyserError as e:
            logger.info(f"Rejected call to {name!r}: {e.message}")
            return text_result(f"Error: {e.message}", is_error=True)
        except Exception as e:
            # Log the full exception for debugging, don't expose it to the caller
            logger.exception(f"Unexpected error in tool {name!r}: {e}")
            return text_result(
                f"Error: tool '{name}' failed unexpectedly. The error has been logged.",
                is_error=True,
            )
