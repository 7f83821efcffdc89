"""
FastAPI server exposing the demo tools over HTTP/JSON.

ENDPOINTS:
----------
- GET  /            Server identity and the list of tools
- GET  /health      Liveness check with the current server time
- POST /tools/list  Descriptors of every registered tool
- POST /tools/call  Run a tool: {"name": ..., "arguments": {...}}

Tool calls go through the same Dispatcher as the stdio transport, so both
transports return identical results and errors. Any dispatch failure is
answered with HTTP 400 and {"error": message}.
"""

import logging
from typing import List, Optional

from fastapi import Depends, FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from config.settings import settings
from api.models import (
    ToolCallRequest,
    ToolCallResponse,
    ToolDescriptorModel,
    ToolSummary,
    ServerInfoResponse,
    HealthCheckResponse,
    ErrorResponse,
)
from models.data_models import utc_timestamp
from tools.builtin import build_default_registry
from tools.dispatcher import Dispatcher
from tools.errors import ToolError


logger = logging.getLogger(__name__)


def get_dispatcher(request: Request) -> Dispatcher:
    """Dispatcher injected into the app at construction time."""
    return request.app.state.dispatcher


def _describe_validation_error(exc: RequestValidationError) -> str:
    """Collapse pydantic's error list into a single message."""
    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        message = error.get("msg", "Invalid request")
        messages.append(f"{location}: {message}" if location else message)
    return "; ".join(messages) or "Invalid request body"


def create_app(dispatcher: Optional[Dispatcher] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        dispatcher: Dispatcher to serve. Defaults to one over the built-in tools.

    Returns:
        Configured FastAPI app
    """
    if dispatcher is None:
        dispatcher = Dispatcher(build_default_registry())

    app = FastAPI(
        title="MCP Server",
        description="Demo tools (echo, add, get_time) over HTTP and MCP stdio",
        version=settings.server_version,
        docs_url="/docs",
        redoc_url="/redoc",
    )
    app.state.dispatcher = dispatcher

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.on_event("startup")
    async def startup_event():
        """Log the tools being served."""
        logger.info(f"Starting HTTP transport with tools: {', '.join(dispatcher.registry.names())}")

    @app.on_event("shutdown")
    async def shutdown_event():
        """Cleanup on shutdown."""
        logger.info("Shutting down HTTP transport...")

    @app.get("/", response_model=ServerInfoResponse)
    async def server_info(dispatcher: Dispatcher = Depends(get_dispatcher)) -> ServerInfoResponse:
        """Describe the server and its tools."""
        return ServerInfoResponse(
            version=settings.server_version,
            tools=[
                ToolSummary(name=tool.name, description=tool.description)
                for tool in dispatcher.list_tools()
            ],
        )

    @app.get("/health", response_model=HealthCheckResponse)
    async def health_check() -> HealthCheckResponse:
        """
        Health check endpoint.

        The server has no external dependencies, so it is always healthy
        while it is able to answer.
        """
        return HealthCheckResponse(status="healthy", timestamp=utc_timestamp())

    @app.post("/tools/list", response_model=List[ToolDescriptorModel])
    async def list_tools(
        dispatcher: Dispatcher = Depends(get_dispatcher),
    ) -> List[ToolDescriptorModel]:
        """List every registered tool with its input schema."""
        return [ToolDescriptorModel.from_descriptor(tool) for tool in dispatcher.list_tools()]

    @app.post(
        "/tools/call",
        response_model=ToolCallResponse,
        responses={status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}},
    )
    async def call_tool(
        request: ToolCallRequest,
        dispatcher: Dispatcher = Depends(get_dispatcher),
    ) -> ToolCallResponse:
        """
        Run a tool.

        Args:
            request: Tool name and arguments

        Returns:
            The tool result envelope

        Raises:
            ToolError: Turned into a 400 response by the handler below
        """
        logger.info(f"Calling tool {request.name}")
        result = dispatcher.dispatch(request.name, request.arguments)
        return ToolCallResponse.from_result(result)

    @app.exception_handler(ToolError)
    async def tool_error_handler(request: Request, exc: ToolError):
        """Dispatch failures are client errors."""
        logger.warning(f"Tool call failed: {exc}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": str(exc)},
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        """Malformed request bodies use the same error envelope as tool failures."""
        message = _describe_validation_error(exc)
        logger.warning(f"Rejected request to {request.url.path}: {message}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": message},
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        """Framework errors such as unparseable bodies use the same envelope."""
        logger.warning(f"Rejected request to {request.url.path}: {exc.detail}")
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Global exception handler for unhandled errors."""
        logger.error(f"Unhandled exception: {exc}", exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Internal server error"},
        )

    return app


app = create_app()
