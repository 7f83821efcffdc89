"""Exceptions raised while resolving and running tools."""

from typing import Optional


class ToolError(Exception):
    """Base class for every per-request dispatch failure."""


class UnknownTool(ToolError):
    """No tool is registered under the requested name."""

    def __init__(self, name: Optional[str]):
        self.name = name
        super().__init__(f"Unknown tool: {name}")


class InvalidArguments(ToolError):
    """A required argument is missing or has the wrong type."""

    def __init__(self, tool: str, message: str, field: Optional[str] = None):
        self.tool = tool
        self.field = field
        super().__init__(f"Invalid arguments for tool '{tool}': {message}")


class ToolExecutionError(ToolError):
    """A handler failed for a reason other than its arguments."""

    def __init__(self, tool: str, cause: Exception):
        self.tool = tool
        self.cause = cause
        super().__init__(f"Tool '{tool}' failed: {cause}")
