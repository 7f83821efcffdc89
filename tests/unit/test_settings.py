"""Unit tests for configuration settings."""

import pytest
from pydantic import ValidationError
from config.settings import Settings


class TestSettings:
    """Tests for Settings configuration."""

    def test_default_values(self, monkeypatch):
        """Test default configuration values."""
        for key in ("MCP_TRANSPORT", "PORT", "API_HOST", "LOG_LEVEL", "SERVER_NAME", "SERVER_VERSION"):
            monkeypatch.delenv(key, raising=False)

        settings = Settings(_env_file=None)

        assert settings.mcp_transport == "http"
        assert settings.use_stdio is False
        assert settings.port == 3000
        assert settings.api_host == "0.0.0.0"
        assert settings.server_name == "example-mcp-server"
        assert settings.server_version == "1.0.0"
        assert settings.log_level == "INFO"

    def test_custom_values(self, temp_env):
        """Test setting custom configuration values."""
        temp_env(
            MCP_TRANSPORT="stdio",
            PORT="8080",
            API_HOST="127.0.0.1",
            LOG_LEVEL="DEBUG",
            SERVER_NAME="custom-server",
        )

        settings = Settings(_env_file=None)

        assert settings.mcp_transport == "stdio"
        assert settings.use_stdio is True
        assert settings.port == 8080
        assert settings.api_host == "127.0.0.1"
        assert settings.log_level == "DEBUG"
        assert settings.server_name == "custom-server"

    def test_case_insensitive_env_vars(self, temp_env, monkeypatch):
        """Test that environment variable names and enum values ignore case."""
        monkeypatch.delenv("MCP_TRANSPORT", raising=False)
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        temp_env(mcp_transport="STDIO", Log_Level="warning")

        settings = Settings(_env_file=None)

        assert settings.use_stdio is True
        assert settings.log_level == "WARNING"

    def test_invalid_port(self, temp_env):
        """Test that a non-integer port is rejected."""
        temp_env(PORT="not-a-port")

        with pytest.raises(ValidationError) as exc_info:
            Settings(_env_file=None)

        error_fields = {err["loc"][0] for err in exc_info.value.errors()}
        assert "port" in error_fields

    def test_unknown_transport_rejected(self, temp_env):
        """Test that only http and stdio transports are accepted."""
        temp_env(MCP_TRANSPORT="websocket")

        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_init_arguments_override_env(self, temp_env):
        """Test that explicit keyword arguments win over the environment."""
        temp_env(PORT="9000")

        settings = Settings(_env_file=None, port=4000)

        assert settings.port == 4000
