"""
Shopify MCP Server — structured-protocol front end (MCP SDK).

Publishes every registry entry as its own MCP tool, with the entry's
inputSchema. The SDK validates each call against that schema before the
handler runs; the handler then dispatches through the same registry the
HTTP front end uses, so defaults and constraints are identical.
"""

from typing import Any, Dict, List, Optional

import mcp.types as types
from mcp.server import Server
from mcp.server.stdio import stdio_server

from .config import Config
from .logger import get_logger
from .protocol import serialize_result
from .registry import ToolRegistry

log = get_logger("mcp")


def create_mcp_server(registry: ToolRegistry) -> Server:
    """Build an MCP server whose tool set mirrors ``registry`` exactly."""
    server = Server(Config.SERVER_NAME, version=Config.SERVER_VERSION)

    @server.list_tools()
    async def list_tools() -> List[types.Tool]:
        return [
            types.Tool(
                name=entry.name,
                description=entry.description or entry.summary(),
                inputSchema=dict(entry.input_schema),
            )
            for entry in registry
        ]

    @server.call_tool()
    async def call_tool(name: str, arguments: Optional[Dict[str, Any]]) -> List[types.TextContent]:
        # Registry errors propagate; the SDK turns them into isError results
        result = await registry.dispatch(name, arguments or {})
        return [types.TextContent(type="text", text=serialize_result(result))]

    return server


async def run_stdio(registry: ToolRegistry):
    """Serve the registry over stdio until the client disconnects."""
    server = create_mcp_server(registry)
    log.info(f"Starting {Config.SERVER_NAME} MCP server v{Config.SERVER_VERSION} (stdio)")
    async with stdio_server() as (read_stream, write_stream):
        await server.run(
            read_stream,
            write_stream,
            server.create_initialization_options(),
        )
