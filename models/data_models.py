"""Core data models shared by the tool registry, dispatcher and transports."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime, timezone
from types import MappingProxyType
from typing import Any, Callable, Dict, List, Optional


def _freeze(value: Any) -> Any:
    """Read-only deep copy of a JSON-like value."""
    if isinstance(value, Mapping):
        return MappingProxyType({key: _freeze(item) for key, item in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(item) for item in value)
    return value


def _thaw(value: Any) -> Any:
    """Plain dict/list deep copy of a value built by _freeze."""
    if isinstance(value, Mapping):
        return {key: _thaw(item) for key, item in value.items()}
    if isinstance(value, tuple):
        return [_thaw(item) for item in value]
    return value


@dataclass(frozen=True)
class ContentItem:
    """A single piece of tool output. Only text content is produced."""

    text: str
    type: str = "text"

    def to_dict(self) -> Dict[str, str]:
        return {"type": self.type, "text": self.text}


@dataclass(frozen=True)
class ToolResult:
    """Envelope returned by every successful dispatch."""

    content: List[ContentItem] = field(default_factory=list)

    @classmethod
    def from_text(cls, text: str) -> "ToolResult":
        """Build a result holding exactly one text item."""
        return cls(content=[ContentItem(text=text)])

    def to_dict(self) -> Dict[str, Any]:
        return {"content": [item.to_dict() for item in self.content]}

    def __str__(self) -> str:
        return " ".join(item.text for item in self.content)


@dataclass(frozen=True)
class ToolDescriptor:
    """Name, description and argument schema of a registered tool."""

    name: str
    description: str
    input_schema: Mapping[str, Any]

    def __post_init__(self):
        """Validate the schema subset understood by the dispatcher."""
        if not self.name:
            raise ValueError("Tool name is required")
        if not isinstance(self.input_schema, Mapping):
            raise ValueError(f"Tool '{self.name}': inputSchema must be an object")

        schema_type = self.input_schema.get("type")
        if not schema_type:
            raise ValueError(f"Tool '{self.name}': inputSchema must declare a type")

        if schema_type == "object":
            properties = self.input_schema.get("properties", {})
            if not isinstance(properties, Mapping):
                raise ValueError(f"Tool '{self.name}': properties must be an object")
            for required_field in self.required_fields:
                if required_field not in properties:
                    raise ValueError(
                        f"Tool '{self.name}': required field '{required_field}' "
                        "is not declared in properties"
                    )

        # descriptors are shared by every caller of list_tools()
        object.__setattr__(self, "input_schema", _freeze(self.input_schema))

    @property
    def properties(self) -> Mapping[str, Mapping[str, Any]]:
        return self.input_schema.get("properties", {})

    @property
    def required_fields(self) -> List[str]:
        return list(self.input_schema.get("required", []))

    def field_type(self, field_name: str) -> Optional[str]:
        """Declared JSON type of a property, or None when undeclared."""
        return self.properties.get(field_name, {}).get("type")

    def to_dict(self) -> Dict[str, Any]:
        """Wire representation, using the camelCase key clients expect."""
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": _thaw(self.input_schema),
        }

    def __str__(self) -> str:
        return f"{self.name}: {self.description}"


ToolHandler = Callable[[Dict[str, Any]], ToolResult]


def utc_timestamp(now: Optional[datetime] = None) -> str:
    """Format a UTC instant as ISO-8601 with millisecond precision and 'Z'.

    Args:
        now: Instant to format. Defaults to the current time.

    Returns:
        Timestamp such as ``2026-10-19T12:00:00.123Z``
    """
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    else:
        now = now.astimezone(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")
