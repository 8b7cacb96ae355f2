from __future__ import annotations

from typing import Sequence

import pytest

from docker_mcp.docker_client import DockerCLI, DockerResult
from docker_mcp.security import AuditLogger
from docker_mcp.server import build_tool_handlers


class FakeDockerCLI(DockerCLI):
    """Test double that records argument vectors instead of spawning docker."""

    def __init__(self) -> None:
        super().__init__("docker")
        self.calls: list[list[str]] = []
        self.results: dict[str, DockerResult] = {}

    def respond(self, subcommand: str, stdout: str = "", stderr: str = "", returncode: int = 0) -> None:
        self.results[subcommand] = DockerResult(returncode=returncode, stdout=stdout, stderr=stderr)

    async def run(self, args: Sequence[str], timeout: float | None = None) -> DockerResult:
        args = list(args)
        self.calls.append(args)
        return self.results.get(args[0], DockerResult(returncode=0))


@pytest.fixture
def fake_docker() -> FakeDockerCLI:
    return FakeDockerCLI()


@pytest.fixture
def audit_log(tmp_path):
    return tmp_path / "audit.log"


@pytest.fixture
def handlers(fake_docker: FakeDockerCLI, audit_log):
    return build_tool_handlers(fake_docker, AuditLogger(audit_log))
