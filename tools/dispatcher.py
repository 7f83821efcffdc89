"""Single dispatch path shared by the HTTP and stdio transports."""

import logging
from collections.abc import Mapping
from typing import Any, Dict, Optional

from models.data_models import ToolDescriptor, ToolResult
from tools.errors import InvalidArguments, ToolError, ToolExecutionError
from tools.registry import ToolRegistry

logger = logging.getLogger(__name__)


def _is_number(value: Any) -> bool:
    # bool is a subclass of int but is not a JSON number
    return isinstance(value, (int, float)) and not isinstance(value, bool)


_TYPE_CHECKS = {
    "string": lambda value: isinstance(value, str),
    "number": _is_number,
    "integer": lambda value: isinstance(value, int) and not isinstance(value, bool),
    "boolean": lambda value: isinstance(value, bool),
    "object": lambda value: isinstance(value, Mapping),
    "array": lambda value: isinstance(value, list),
}


def validate_arguments(descriptor: ToolDescriptor, arguments: Any) -> Dict[str, Any]:
    """Check arguments against a tool's declared fields.

    Args:
        descriptor: Tool whose schema defines the accepted arguments
        arguments: Raw arguments as received from a transport

    Returns:
        The arguments as a plain dict

    Raises:
        InvalidArguments: If arguments is not a mapping, a required field is
            missing, or a declared field has the wrong type
    """
    if arguments is None:
        arguments = {}
    if not isinstance(arguments, Mapping):
        raise InvalidArguments(descriptor.name, "arguments must be an object")

    for field_name in descriptor.required_fields:
        if field_name not in arguments:
            raise InvalidArguments(
                descriptor.name, f"missing required field '{field_name}'", field=field_name
            )

    for field_name, value in arguments.items():
        expected = descriptor.field_type(field_name)
        check = _TYPE_CHECKS.get(expected)
        if check is not None and not check(value):
            raise InvalidArguments(
                descriptor.name, f"field '{field_name}' must be of type {expected}", field=field_name
            )

    return dict(arguments)


class Dispatcher:
    """Resolves tool names against a registry and runs their handlers."""

    def __init__(self, registry: ToolRegistry):
        self.registry = registry

    def list_tools(self):
        return self.registry.list_tools()

    def dispatch(self, name: str, arguments: Optional[Dict[str, Any]] = None) -> ToolResult:
        """Run a tool synchronously.

        Args:
            name: Registered tool name
            arguments: Tool arguments. None is treated as no arguments.

        Returns:
            The handler's ToolResult

        Raises:
            UnknownTool: If no tool is registered under name
            InvalidArguments: If arguments do not satisfy the tool's schema
            ToolExecutionError: If the handler fails for any other reason
        """
        entry = self.registry.get(name)
        validated = validate_arguments(entry.descriptor, arguments)

        try:
            result = entry.handler(validated)
        except ToolError:
            raise
        except Exception as e:
            logger.error(f"Tool '{name}' raised an unexpected error: {e}", exc_info=True)
            raise ToolExecutionError(name, e) from e

        logger.debug(f"Dispatched {name} -> {result}")
        return result
