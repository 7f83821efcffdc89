"""Shared test fixtures and configuration for pytest."""

import os
import pytest
from typing import Any, Dict, Generator

# Set test environment variables before importing app modules
os.environ["MCP_TRANSPORT"] = "http"
os.environ["LOG_LEVEL"] = "ERROR"

from fastapi.testclient import TestClient

from api.app import create_app
from models.data_models import ToolDescriptor, ToolResult
from tools.builtin import build_default_registry
from tools.dispatcher import Dispatcher
from tools.registry import RegisteredTool, ToolRegistry


# ==================== Core Fixtures ====================


@pytest.fixture
def registry() -> ToolRegistry:
    """Registry holding the built-in tools."""
    return build_default_registry()


@pytest.fixture
def dispatcher(registry) -> Dispatcher:
    """Dispatcher over the built-in tools."""
    return Dispatcher(registry)


@pytest.fixture
def make_tool():
    """Factory fixture for creating registry entries."""
    def _make(
        name: str = "sample",
        description: str = "Sample tool",
        input_schema: Dict[str, Any] = None,
        handler=None,
    ) -> RegisteredTool:
        if input_schema is None:
            input_schema = {"type": "object", "properties": {}}
        if handler is None:
            handler = lambda arguments: ToolResult.from_text(f"{name} called")
        return RegisteredTool(ToolDescriptor(name, description, input_schema), handler)

    return _make


# ==================== FastAPI Test Client ====================


@pytest.fixture
def test_client(dispatcher) -> Generator[TestClient, None, None]:
    """FastAPI test client over the built-in tools."""
    app = create_app(dispatcher)

    with TestClient(app, raise_server_exceptions=False) as client:
        yield client


# ==================== Environment Fixtures ====================


@pytest.fixture(autouse=True)
def test_env():
    """Ensure test environment variables are set for all tests."""
    original_env = os.environ.copy()

    os.environ.update({
        "MCP_TRANSPORT": "http",
        "LOG_LEVEL": "ERROR",  # Reduce noise in tests
    })

    yield

    # Restore original environment
    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture
def temp_env(monkeypatch):
    """Fixture for temporarily modifying environment variables."""
    def set_env(**kwargs):
        for key, value in kwargs.items():
            monkeypatch.setenv(key, value)

    return set_env
