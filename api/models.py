"""API request and response models for the FastAPI server."""

from pydantic import BaseModel, Field
from typing import Any, Dict, List, Optional

from models.data_models import ToolDescriptor, ToolResult


class ToolCallRequest(BaseModel):
    """POST /tools/call request body."""

    name: str = Field(..., description="Name of the tool to call")
    arguments: Optional[Dict[str, Any]] = Field(
        None, description="Tool arguments (omitted or null means no arguments)"
    )

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"name": "add", "arguments": {"a": 2, "b": 3}},
                {"name": "echo", "arguments": {"message": "hi"}},
            ]
        }
    }


class ContentItemModel(BaseModel):
    """One text item of a tool result."""

    type: str = Field("text", description="Content type (always 'text')")
    text: str = Field(..., description="Text payload")


class ToolCallResponse(BaseModel):
    """POST /tools/call success response."""

    content: List[ContentItemModel] = Field(..., description="Tool output items")

    @classmethod
    def from_result(cls, result: ToolResult) -> "ToolCallResponse":
        return cls(
            content=[ContentItemModel(type=item.type, text=item.text) for item in result.content]
        )

    model_config = {
        "json_schema_extra": {
            "examples": [{"content": [{"type": "text", "text": "The sum of 2 and 3 is 5"}]}]
        }
    }


class ToolDescriptorModel(BaseModel):
    """A tool as listed by POST /tools/list."""

    name: str = Field(..., description="Unique tool name")
    description: str = Field(..., description="Human-readable description")
    input_schema: Dict[str, Any] = Field(
        ..., alias="inputSchema", description="JSON schema of the arguments"
    )

    @classmethod
    def from_descriptor(cls, descriptor: ToolDescriptor) -> "ToolDescriptorModel":
        return cls(**descriptor.to_dict())

    model_config = {"populate_by_name": True}


class ToolSummary(BaseModel):
    """Name and description of a tool, as shown on the index page."""

    name: str
    description: str


class ServerInfoResponse(BaseModel):
    """GET / response."""

    name: str = Field("MCP Server", description="Server display name")
    version: str = Field(..., description="Server version")
    status: str = Field("running", description="Server status")
    capabilities: List[str] = Field(default_factory=lambda: ["tools"])
    tools: List[ToolSummary] = Field(..., description="Available tools")


class HealthCheckResponse(BaseModel):
    """GET /health response."""

    status: str = Field(..., description="Service health status")
    timestamp: str = Field(..., description="Current server time (ISO-8601, UTC)")


class ErrorResponse(BaseModel):
    """Error body for failed requests."""

    error: str = Field(..., description="Error message")
