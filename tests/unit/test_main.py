"""Unit tests for transport selection in the entry point."""

import pytest

import main
from config.settings import Settings
from tools.dispatcher import Dispatcher


@pytest.fixture
def started(monkeypatch):
    """Replace both transports with recorders."""
    calls = {"http": [], "stdio": []}

    def fake_uvicorn_run(app, **kwargs):
        calls["http"].append((app, kwargs))

    async def fake_run_stdio(dispatcher):
        calls["stdio"].append(dispatcher)

    monkeypatch.setattr(main.uvicorn, "run", fake_uvicorn_run)
    monkeypatch.setattr(main, "run_stdio", fake_run_stdio)
    return calls


class TestTransportSelection:
    """Tests for main() choosing exactly one transport."""

    def test_http_is_default(self, monkeypatch, started):
        monkeypatch.delenv("MCP_TRANSPORT", raising=False)
        monkeypatch.setattr(main, "settings", Settings(_env_file=None))

        main.main()

        assert started["stdio"] == []
        assert len(started["http"]) == 1

        app, kwargs = started["http"][0]
        assert kwargs["port"] == 3000
        assert kwargs["host"] == "0.0.0.0"
        assert [tool.name for tool in app.state.dispatcher.list_tools()] == ["echo", "add", "get_time"]

    def test_http_uses_configured_port(self, monkeypatch, started):
        monkeypatch.setattr(main, "settings", Settings(_env_file=None, mcp_transport="http", port=4321))

        main.main()

        assert started["stdio"] == []
        assert started["http"][0][1]["port"] == 4321

    def test_port_from_environment(self, monkeypatch, temp_env, started):
        temp_env(PORT="8081", MCP_TRANSPORT="http")
        monkeypatch.setattr(main, "settings", Settings(_env_file=None))

        main.main()

        assert started["http"][0][1]["port"] == 8081

    def test_stdio_starts_no_http_listener(self, monkeypatch, started):
        monkeypatch.setattr(main, "settings", Settings(_env_file=None, mcp_transport="stdio"))

        main.main()

        assert started["http"] == []
        assert len(started["stdio"]) == 1
        assert isinstance(started["stdio"][0], Dispatcher)
