from __future__ import annotations

from pathlib import Path

import pytest

from docker_mcp.settings import DockerSettings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("DOCKER_MCP_DOCKER_BIN", "DOCKER_MCP_TIMEOUT", "DOCKER_MCP_AUDIT_LOG", "DOCKER_MCP_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


def test_defaults() -> None:
    settings = DockerSettings.from_environment()

    assert settings.docker_bin == "docker"
    assert settings.timeout is None
    assert settings.audit_log == Path.home() / ".docker-mcp-audit.log"
    assert settings.log_level == "INFO"


def test_values_from_environment(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    monkeypatch.setenv("DOCKER_MCP_DOCKER_BIN", "/usr/local/bin/podman")
    monkeypatch.setenv("DOCKER_MCP_TIMEOUT", "12.5")
    monkeypatch.setenv("DOCKER_MCP_AUDIT_LOG", str(tmp_path / "audit.log"))
    monkeypatch.setenv("DOCKER_MCP_LOG_LEVEL", "debug")

    settings = DockerSettings.from_environment()

    assert settings.docker_bin == "/usr/local/bin/podman"
    assert settings.timeout == 12.5
    assert settings.audit_log == tmp_path / "audit.log"
    assert settings.log_level == "DEBUG"


@pytest.mark.parametrize("raw", ["soon", "0", "-3"])
def test_invalid_timeout_is_ignored(monkeypatch: pytest.MonkeyPatch, raw: str) -> None:
    monkeypatch.setenv("DOCKER_MCP_TIMEOUT", raw)

    assert DockerSettings.from_environment().timeout is None


@pytest.mark.parametrize("raw", ["verbose", "loud", "5"])
def test_unknown_log_level_is_ignored(monkeypatch: pytest.MonkeyPatch, raw: str) -> None:
    monkeypatch.setenv("DOCKER_MCP_LOG_LEVEL", raw)

    assert DockerSettings.from_environment().log_level == "INFO"
