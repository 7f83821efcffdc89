"""MCP client wrapper for communicating with the demo MCP server over stdio."""

import sys
from contextlib import AsyncExitStack
from pathlib import Path
from typing import Any, Dict, List, Optional

from mcp import ClientSession, StdioServerParameters
from mcp.client.stdio import stdio_client

PROJECT_ROOT = Path(__file__).resolve().parent.parent


class DemoMCPClient:
    """Client that launches the stdio server as a subprocess and calls its tools."""

    def __init__(self, command: Optional[str] = None, env: Optional[Dict[str, str]] = None):
        """Initialize MCP client.

        Args:
            command: Python interpreter used to launch the server. Defaults to
                the current interpreter.
            env: Extra environment for the server process.
        """
        self.session: Optional[ClientSession] = None
        self._exit_stack: Optional[AsyncExitStack] = None

        self.server_params = StdioServerParameters(
            command=command or sys.executable,
            args=["-m", "mcp_server.server"],
            env=env,
            cwd=str(PROJECT_ROOT),
        )

    async def connect(self):
        """Start the server process and initialize the MCP session."""
        if self.session is not None:
            raise RuntimeError("Client is already connected")

        stack = AsyncExitStack()
        try:
            read_stream, write_stream = await stack.enter_async_context(
                stdio_client(self.server_params)
            )
            session = await stack.enter_async_context(ClientSession(read_stream, write_stream))
            await session.initialize()
        except BaseException:
            await stack.aclose()
            raise

        self._exit_stack = stack
        self.session = session

    def _require_session(self) -> ClientSession:
        if self.session is None:
            raise RuntimeError("Client is not connected. Call connect() first.")
        return self.session

    async def list_tools(self) -> List[Dict[str, Any]]:
        """List the server's tools.

        Returns:
            Tool dictionaries with name, description and inputSchema keys
        """
        result = await self._require_session().list_tools()
        return [
            {"name": tool.name, "description": tool.description, "inputSchema": tool.inputSchema}
            for tool in result.tools
        ]

    async def call_tool(self, tool_name: str, arguments: Dict[str, Any]) -> str:
        """Call an MCP tool and return its text output.

        Args:
            tool_name: Name of the tool to call
            arguments: Tool arguments as a dictionary

        Returns:
            Text of the first content item

        Raises:
            RuntimeError: If client is not connected
            ValueError: If the tool reports an error
        """
        result = await self._require_session().call_tool(tool_name, arguments)

        text = result.content[0].text if result.content else ""
        if result.isError:
            raise ValueError(f"Tool '{tool_name}' returned error: {text}")
        return text

    async def echo(self, message: str) -> str:
        return await self.call_tool("echo", {"message": message})

    async def add(self, a: float, b: float) -> str:
        return await self.call_tool("add", {"a": a, "b": b})

    async def get_time(self) -> str:
        return await self.call_tool("get_time", {})

    async def close(self):
        """Close the MCP session and stop the server process."""
        if self._exit_stack is not None:
            await self._exit_stack.aclose()
        self._exit_stack = None
        self.session = None

    async def __aenter__(self):
        """Async context manager entry."""
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()
