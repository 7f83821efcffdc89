"""MCP stdio server for the demo tools.

This server exposes the built-in tools over the Model Context Protocol on
stdin/stdout. Tool listing and calls go through the shared Dispatcher, so
results match the HTTP transport exactly.
"""

import asyncio
import logging
import sys
from typing import Any, Dict, List, Optional

import mcp.types as types
from mcp.server import Server
from mcp.server.stdio import stdio_server

from config.settings import settings
from tools.builtin import build_default_registry
from tools.dispatcher import Dispatcher
from tools.errors import ToolError

logger = logging.getLogger(__name__)


def create_server(dispatcher: Optional[Dispatcher] = None) -> Server:
    """Build an MCP server backed by a dispatcher.

    Args:
        dispatcher: Dispatcher to serve. Defaults to one over the built-in tools.

    Returns:
        MCP low-level server with tools/list and tools/call registered
    """
    if dispatcher is None:
        dispatcher = Dispatcher(build_default_registry())

    app = Server(settings.server_name, version=settings.server_version)

    @app.list_tools()
    async def list_tools() -> List[types.Tool]:
        """Register available tools."""
        return [
            types.Tool(
                name=descriptor.name,
                description=descriptor.description,
                inputSchema=descriptor.to_dict()["inputSchema"],
            )
            for descriptor in dispatcher.list_tools()
        ]

    @app.call_tool()
    async def call_tool(name: str, arguments: Dict[str, Any]) -> List[types.TextContent]:
        """Execute tool calls.

        ToolErrors propagate so the SDK reports them as error results
        (isError=true) carrying the error message.
        """
        try:
            result = dispatcher.dispatch(name, arguments)
        except ToolError as e:
            logger.warning(f"Tool call failed: {e}")
            raise

        return [types.TextContent(type="text", text=item.text) for item in result.content]

    return app


async def run_stdio(dispatcher: Optional[Dispatcher] = None):
    """Serve MCP on stdin/stdout until the client disconnects."""
    app = create_server(dispatcher)

    async with stdio_server() as (read_stream, write_stream):
        logger.info("MCP Server running on stdio")
        await app.run(read_stream, write_stream, app.create_initialization_options())


def main():
    """Run the stdio transport with logging on stderr."""
    logging.basicConfig(level=getattr(logging, settings.log_level), stream=sys.stderr)
    asyncio.run(run_stdio())


if __name__ == "__main__":
    main()
