"""Static, ordered registry of tools available to the dispatcher."""

from dataclasses import dataclass
from typing import Dict, Iterable, List

from models.data_models import ToolDescriptor, ToolHandler
from tools.errors import UnknownTool


@dataclass(frozen=True)
class RegisteredTool:
    """A tool descriptor paired with the callable that implements it."""

    descriptor: ToolDescriptor
    handler: ToolHandler

    @property
    def name(self) -> str:
        return self.descriptor.name


class ToolRegistry:
    """Read-only mapping from tool name to descriptor and handler.

    Built once at startup. Registration order is preserved and is the order
    reported by ``list_tools``.
    """

    def __init__(self, tools: Iterable[RegisteredTool]):
        entries: Dict[str, RegisteredTool] = {}
        for tool in tools:
            if tool.name in entries:
                raise ValueError(f"Duplicate tool name: {tool.name}")
            if not callable(tool.handler):
                raise ValueError(f"Tool '{tool.name}': handler is not callable")
            entries[tool.name] = tool
        self._entries = entries

    def list_tools(self) -> List[ToolDescriptor]:
        """Descriptors in registration order. A new list on every call."""
        return [entry.descriptor for entry in self._entries.values()]

    def names(self) -> List[str]:
        return list(self._entries)

    def get(self, name: str) -> RegisteredTool:
        try:
            return self._entries[name]
        except (KeyError, TypeError):
            raise UnknownTool(name) from None

    def get_handler(self, name: str) -> ToolHandler:
        return self.get(name).handler

    def get_descriptor(self, name: str) -> ToolDescriptor:
        return self.get(name).descriptor

    def __contains__(self, name: object) -> bool:
        try:
            return name in self._entries
        except TypeError:
            return False

    def __len__(self) -> int:
        return len(self._entries)
