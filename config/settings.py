"""Application configuration management using Pydantic Settings."""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Literal


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Transport selection
    # MCP_TRANSPORT: "http" serves the FastAPI app on PORT.
    # "stdio" runs the MCP server on stdin/stdout only; no HTTP listener is started.
    mcp_transport: Literal["http", "stdio"] = "http"

    # HTTP Server Configuration
    api_host: str = "0.0.0.0"
    port: int = 3000

    # Server identity reported to MCP clients
    server_name: str = "example-mcp-server"
    server_version: str = "1.0.0"

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("mcp_transport", mode="before")
    @classmethod
    def normalize_transport(cls, v):
        """Accept MCP_TRANSPORT in any case."""
        return v.strip().lower() if isinstance(v, str) else v

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        return v.strip().upper() if isinstance(v, str) else v

    @property
    def use_stdio(self) -> bool:
        """Check if the stdio transport is selected."""
        return self.mcp_transport == "stdio"


# Global settings instance
settings = Settings()
