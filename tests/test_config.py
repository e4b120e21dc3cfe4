"""Tests for environment-driven configuration."""

from mcp_mock.config import ServerConfig


def test_defaults(monkeypatch) -> None:
    for name in ("PORT", "MCP_MOCK_HOST", "MCP_MOCK_REQUEST_LOG", "MCP_MOCK_RESPONSE_LOG",
                 "MCP_MOCK_MAX_BODY_BYTES", "MCP_MOCK_KEEPALIVE_SECONDS", "MCP_MOCK_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    config = ServerConfig.from_env()
    assert config.host == "0.0.0.0"
    assert config.port == 4000
    assert config.request_log == "/tmp/mcp-mock-requests.log"
    assert config.response_log == "/tmp/mcp-mock-responses.log"
    assert config.max_body_bytes == 1_000_000
    assert config.keepalive_seconds == 15.0
    assert config.log_level == "info"


def test_env_overrides(monkeypatch) -> None:
    monkeypatch.setenv("PORT", "4100")
    monkeypatch.setenv("MCP_MOCK_REQUEST_LOG", "/var/log/req.log")
    monkeypatch.setenv("MCP_MOCK_KEEPALIVE_SECONDS", "2.5")
    monkeypatch.setenv("MCP_MOCK_LOG_LEVEL", "DEBUG")

    config = ServerConfig.from_env()
    assert config.port == 4100
    assert config.request_log == "/var/log/req.log"
    assert config.keepalive_seconds == 2.5
    assert config.log_level == "debug"
