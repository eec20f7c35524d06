"""
Capability Registry — tool name → handler.

Populated once at startup from config.py and read-only afterwards, so no
locking is needed even if the transport overlaps requests.
"""

from typing import Any, Iterable

from logging_config import log_tool_call
from models import CapabilityDescriptor, CapabilityNotFound, ConfigurationError
from validation import is_valid_name, normalize_arguments


class CapabilityRegistry:
    """
    Named tools and their handlers.

    Registration order is listing order. Re-registering a name is a
    programmer error and raises ConfigurationError.
    """

    def __init__(self, descriptors: Iterable[CapabilityDescriptor] = ()) -> None:
        self._capabilities: dict[str, CapabilityDescriptor] = {}
        for descriptor in descriptors:
            self.register(descriptor)

    def register(self, descriptor: CapabilityDescriptor) -> None:
        """Add a tool. Fails fast on duplicates and malformed descriptors."""
        if not is_valid_name(descriptor.name):
            raise ConfigurationError(f"Invalid tool name: {descriptor.name!r}")
        if descriptor.name in self._capabilities:
            raise ConfigurationError(f"Duplicate tool name: {descriptor.name!r}")
        if not callable(getattr(descriptor.handler, "invoke", None)):
            raise ConfigurationError(f"Tool {descriptor.name!r} has no invoke() handler")
        if descriptor.input_schema.get("type") != "object":
            raise ConfigurationError(f"Tool {descriptor.name!r} input schema must be an object schema")
        self._capabilities[descriptor.name] = descriptor

    def __contains__(self, name: object) -> bool:
        return name in self._capabilities

    def __len__(self) -> int:
        return len(self._capabilities)

    def names(self) -> list[str]:
        return list(self._capabilities)

    def get(self, name: str) -> CapabilityDescriptor | None:
        return self._capabilities.get(name)

    def list_capabilities(self) -> list[dict[str, Any]]:
        """Public metadata of every tool, in registration order."""
        return [d.to_listing() for d in self._capabilities.values()]

    def invoke(self, name: str, arguments: object = None) -> str:
        """
        Run a tool's handler.

        Args:
            name: Tool name (exact match)
            arguments: Argument object from the caller; None means {}

        Returns:
            Text payload from the handler

        Raises:
            CapabilityNotFound: If name is not registered
            AnalyserError(INVALID_INPUT): If arguments are malformed
        """
        descriptor = self._capabilities.get(name)
        if descriptor is None:
            raise CapabilityNotFound(str(name), self.names())

        args = normalize_arguments(arguments)
        log_tool_call(name, args)
        return descriptor.handler.invoke(args)
