"""Entry point: serve the demo tools over HTTP (default) or MCP stdio.

MCP_TRANSPORT=stdio runs the MCP server on stdin/stdout and starts no HTTP
listener. Otherwise the FastAPI app is served by uvicorn on PORT (default 3000).
"""

import asyncio
import logging
import sys

import uvicorn

from config.settings import settings
from api.app import create_app
from mcp_server.server import run_stdio
from tools.builtin import build_default_registry
from tools.dispatcher import Dispatcher

logger = logging.getLogger(__name__)


def main():
    # stderr keeps stdout free for protocol frames in stdio mode
    logging.basicConfig(level=getattr(logging, settings.log_level), stream=sys.stderr)

    dispatcher = Dispatcher(build_default_registry())
    logger.info(f"Transport: {settings.mcp_transport.upper()}")

    if settings.use_stdio:
        asyncio.run(run_stdio(dispatcher))
        return

    logger.info(f"MCP Server running on port {settings.port}")
    uvicorn.run(
        create_app(dispatcher),
        host=settings.api_host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
