#!/usr/bin/env python3
"""
EDS Block Analyser MCP Server

Prompts and templates for estimating how web pages or Figma designs convert
into reusable EDS blocks. All analysis happens in the calling agent; this
server only hands out text.

Tools (fixed contract, see config.py):
- eds_block_analyser: the UI architect prompt
- self_evaluation_framework: quality metrics and iteration protocol
- csv_output_format: required CSV header row
- list_templates / get_template: markdown and CSV artifact templates

Architecture:
- templates/: Template Store (name → inline text or file)
- capabilities/: Capability Registry (name → handler)
- dispatcher.py: registry results/errors → MCP tool responses
- resources/: templates and tool docs as MCP resources
- server.py: Thin MCP wiring (this file)
"""

import asyncio
import os
import signal
import sys
from pathlib import Path
from typing import Any, Iterable

from mcp.server.lowlevel import Server
from mcp.server.lowlevel.helper_types import ReadResourceContents
from mcp.server.stdio import stdio_server
from mcp.shared.exceptions import McpError
from mcp.types import INVALID_PARAMS, CallToolResult, ErrorData, Resource, Tool
from pydantic import AnyUrl

from config import ServerConfig, build_components, load_config
from dispatcher import Dispatcher
from logging_config import configure_logging, logger
from models import ConfigurationError
from resources import ResourceCatalog

INSTRUCTIONS = (
    "Start with eds_block_analyser and follow the prompt it returns. "
    "Use get_template for the CSV, summary and evaluation log artifacts."
)


def build_server(config: ServerConfig) -> Server:
    """
    Wire store, registry, dispatcher and resources into an MCP server.

    Raises:
        ConfigurationError: If the configuration is inconsistent
    """
    store, registry = build_components(config)
    dispatcher = Dispatcher(registry)
    catalog = ResourceCatalog(store, registry)

    server: Server = Server(config.name, version=config.version, instructions=INSTRUCTIONS)

    # ========================================================================
    # TOOLS
    # ========================================================================

    @server.list_tools()
    async def list_tools() -> list[Tool]:
        return dispatcher.list_tools()

    @server.call_tool(validate_input=False)
    async def call_tool(name: str, arguments: dict[str, Any]) -> CallToolResult:
        return dispatcher.call_tool(name, arguments)

    # ========================================================================
    # RESOURCES
    # ========================================================================

    @server.list_resources()
    async def list_resources() -> list[Resource]:
        return catalog.list_resources()

    @server.read_resource()
    async def read_resource(uri: AnyUrl) -> Iterable[ReadResourceContents]:
        uri_str = str(uri)
        try:
            text = catalog.read(uri_str)
        except KeyError:
            raise McpError(ErrorData(code=INVALID_PARAMS, message=f"Unknown resource: {uri_str}"))
        return [ReadResourceContents(content=text, mime_type=catalog.mime_type(uri_str))]

    logger.info(
        f"{config.name} {config.version}: {len(registry)} tools, {len(store)} templates"
    )
    return server


async def serve(server: Server) -> None:
    """Run the server over stdio until the client disconnects."""
    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, server.create_initialization_options())


# ============================================================================
# SERVER ENTRY POINT
# ============================================================================

def _shutdown_handler(signum: int, frame: object) -> None:
    """Handle termination signals by exiting immediately.

    os._exit() is required because sys.exit() raises SystemExit,
    which asyncio's event loop catches and ignores. The server
    would survive SIGTERM until stdin closes.
    """
    os._exit(0)


def main() -> None:
    configure_logging(os.environ.get("EDS_LOG_LEVEL", "INFO"))

    assets_dir = os.environ.get("EDS_ASSETS_DIR")
    try:
        server = build_server(load_config(Path(assets_dir) if assets_dir else None))
    except ConfigurationError as e:
        logger.error(f"Refusing to start: {e.message}")
        sys.exit(1)

    signal.signal(signal.SIGTERM, _shutdown_handler)
    signal.signal(signal.SIGINT, _shutdown_handler)
    logger.info("EDS Block Analyser MCP server running on stdio")
    asyncio.run(serve(server))


if __name__ == "__main__":
    main()
