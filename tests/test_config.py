"""Tests for Settings.from_env."""

import pytest

from autorag_mcp.config import DEFAULT_API_BASE_URL, Settings

ENV_VARS = (
    "CLOUDFLARE_ACCOUNT_ID",
    "CLOUDFLARE_API_TOKEN",
    "AUTORAG_NAME",
    "CLOUDFLARE_API_BASE_URL",
    "AUTORAG_TIMEOUT",
    "MCP_HOST",
    "MCP_PORT",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


class TestFromEnv:
    def test_defaults(self) -> None:
        settings = Settings.from_env()

        assert settings.account_id is None
        assert settings.api_base_url == DEFAULT_API_BASE_URL
        assert settings.request_timeout is None
        assert settings.port == 8000

    def test_reads_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CLOUDFLARE_ACCOUNT_ID", "acct")
        monkeypatch.setenv("CLOUDFLARE_API_TOKEN", "token")
        monkeypatch.setenv("AUTORAG_NAME", "my-rag")
        monkeypatch.setenv("AUTORAG_TIMEOUT", "12.5")
        monkeypatch.setenv("MCP_PORT", "9000")

        settings = Settings.from_env()

        assert settings.account_id == "acct"
        assert settings.api_token == "token"
        assert settings.rag_name == "my-rag"
        assert settings.request_timeout == 12.5
        assert settings.port == 9000

    def test_empty_values_are_ignored(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MCP_HOST", "")

        assert Settings.from_env().host == "0.0.0.0"
