"""Tests for environment-driven settings and the command-line entry point."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from wayback_mcp import __main__ as cli
from wayback_mcp import __version__
from wayback_mcp.archive.client import WaybackClient
from wayback_mcp.config.settings import Settings, get_settings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("WAYBACK_MCP_LOG_LEVEL", "WAYBACK_MCP_HTTP_TIMEOUT", "WAYBACK_MCP_USER_AGENT"):
        monkeypatch.delenv(name, raising=False)


class TestSettings:
    def test_defaults(self) -> None:
        settings = Settings(_env_file=None)

        assert settings.log_level == "INFO"
        assert settings.http_timeout == 30.0
        assert settings.user_agent.startswith(f"wayback-mcp/{__version__}")

    def test_env_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("WAYBACK_MCP_LOG_LEVEL", "debug")
        monkeypatch.setenv("WAYBACK_MCP_HTTP_TIMEOUT", "5.5")
        monkeypatch.setenv("WAYBACK_MCP_USER_AGENT", "research-bot/1.0")

        settings = Settings(_env_file=None)

        assert settings.log_level == "DEBUG"
        assert settings.http_timeout == 5.5
        assert settings.user_agent == "research-bot/1.0"

    def test_empty_timeout_disables_timeout(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("WAYBACK_MCP_HTTP_TIMEOUT", "")

        assert Settings(_env_file=None).http_timeout is None

    def test_invalid_log_level_rejected(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("WAYBACK_MCP_LOG_LEVEL", "chatty")

        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_get_settings_is_cached(self) -> None:
        assert get_settings() is get_settings()


@pytest.mark.asyncio
class TestClientUsesSettings:
    async def test_user_agent_and_timeout_applied(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("WAYBACK_MCP_HTTP_TIMEOUT", "7")
        monkeypatch.setenv("WAYBACK_MCP_USER_AGENT", "research-bot/1.0")
        get_settings.cache_clear()

        async with WaybackClient() as client:
            assert client._http.headers["User-Agent"] == "research-bot/1.0"
            assert client._http.timeout.read == 7.0
            assert client._http.follow_redirects is True


class TestCommandLine:
    def test_log_level_upper_cased(self) -> None:
        assert cli._parse_args(["--log-level", "debug"]).log_level == "DEBUG"

    def test_log_level_defaults_to_none(self) -> None:
        assert cli._parse_args([]).log_level is None

    def test_invalid_log_level_exits(self) -> None:
        with pytest.raises(SystemExit):
            cli._parse_args(["--log-level", "chatty"])

    def test_version(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as excinfo:
            cli._parse_args(["--version"])

        assert excinfo.value.code == 0
        assert __version__ in capsys.readouterr().out

    def test_main_runs_server(self, monkeypatch: pytest.MonkeyPatch) -> None:
        calls: list[str] = []

        class _FakeServer:
            async def run(self) -> None:
                calls.append("run")

        monkeypatch.setattr(cli, "WaybackMachineServer", _FakeServer)
        monkeypatch.setattr(cli, "configure_logging", calls.append)

        cli.main(["--log-level", "warning"])

        assert calls == ["WARNING", "run"]

    def test_main_handles_interrupt(self, monkeypatch: pytest.MonkeyPatch) -> None:
        class _InterruptedServer:
            async def run(self) -> None:
                raise KeyboardInterrupt

        monkeypatch.setattr(cli, "WaybackMachineServer", _InterruptedServer)
        monkeypatch.setattr(cli, "configure_logging", lambda level: None)

        cli.main([])
