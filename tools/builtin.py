"""Built-in demo tools: echo, add and get_time."""

from typing import Any, Dict

from models.data_models import ToolDescriptor, ToolResult, utc_timestamp
from tools.number_format import format_number, to_double
from tools.registry import RegisteredTool, ToolRegistry


ECHO = ToolDescriptor(
    name="echo",
    description="Echoes back the input message",
    input_schema={
        "type": "object",
        "properties": {
            "message": {
                "type": "string",
                "description": "The message to echo back",
            },
        },
        "required": ["message"],
    },
)

ADD = ToolDescriptor(
    name="add",
    description="Adds two numbers together",
    input_schema={
        "type": "object",
        "properties": {
            "a": {
                "type": "number",
                "description": "First number",
            },
            "b": {
                "type": "number",
                "description": "Second number",
            },
        },
        "required": ["a", "b"],
    },
)

GET_TIME = ToolDescriptor(
    name="get_time",
    description="Returns the current server time",
    input_schema={
        "type": "object",
        "properties": {},
    },
)


def echo(arguments: Dict[str, Any]) -> ToolResult:
    return ToolResult.from_text(f"Echo: {arguments['message']}")


def add(arguments: Dict[str, Any]) -> ToolResult:
    a = to_double(arguments["a"])
    b = to_double(arguments["b"])
    total = a + b
    return ToolResult.from_text(
        f"The sum of {format_number(a)} and {format_number(b)} is {format_number(total)}"
    )


def get_time(arguments: Dict[str, Any]) -> ToolResult:
    """Report the wall clock. The only handler with a side effect."""
    return ToolResult.from_text(f"Current server time: {utc_timestamp()}")


def build_default_registry() -> ToolRegistry:
    """Registry holding the built-in tools in their published order."""
    return ToolRegistry(
        [
            RegisteredTool(ECHO, echo),
            RegisteredTool(ADD, add),
            RegisteredTool(GET_TIME, get_time),
        ]
    )
