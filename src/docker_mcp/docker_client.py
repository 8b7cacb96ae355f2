"""Subprocess client for the docker command-line tool."""

import asyncio
import logging
import os
import signal
from dataclasses import dataclass
from typing import Optional, Sequence

from .errors import ExecutionFailure

logger = logging.getLogger(__name__)


@dataclass
class DockerResult:
    """Captured outcome of a single docker CLI invocation."""
    returncode: int
    stdout: str = ""
    stderr: str = ""
    timed_out: bool = False

    @property
    def success(self) -> bool:
        return self.returncode == 0 and not self.timed_out

    @property
    def error_text(self) -> str:
        """Best available error message from the runtime."""
        return (self.stderr or self.stdout).strip()


class DockerCLI:
    """Runs docker commands as subprocesses, one process per call."""

    def __init__(self, docker_bin: str = "docker", timeout: Optional[float] = None):
        """
        Initialize docker CLI client.

        Args:
            docker_bin: docker executable name or path
            timeout: Default upper bound in seconds for a single command (None for no limit)
        """
        self.docker_bin = docker_bin
        self.timeout = timeout

    async def run(self, args: Sequence[str], timeout: Optional[float] = None) -> DockerResult:
        """
        Run `docker <args>` and capture its output.

        The process runs in its own session so that a timeout or a cancelled
        caller can kill the whole process group.

        Args:
            args: Arguments passed to the docker executable, never through a shell
            timeout: Override for the default timeout

        Returns:
            DockerResult with exit code and decoded output

        Raises:
            ExecutionFailure: if the executable cannot be started
        """
        timeout = timeout if timeout is not None else self.timeout
        cmd = [self.docker_bin, *args]
        logger.debug("Running %s", cmd)

        try:
            proc = await asyncio.create_subprocess_exec(
                *cmd,
                stdin=asyncio.subprocess.DEVNULL,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
                start_new_session=True,
            )
        except FileNotFoundError:
            raise ExecutionFailure(
                f"docker executable not found: {self.docker_bin}. "
                "Install Docker or set DOCKER_MCP_DOCKER_BIN."
            )
        except OSError as e:
            raise ExecutionFailure(f"Could not start {self.docker_bin}: {e}")

        try:
            stdout_bytes, stderr_bytes = await asyncio.wait_for(
                proc.communicate(), timeout=timeout
            )
        except asyncio.TimeoutError:
            await self._kill(proc)
            logger.warning("docker %s timed out after %ss", " ".join(args), timeout)
            return DockerResult(
                returncode=-1,
                stderr=f"Command timed out after {timeout} seconds",
                timed_out=True,
            )
        except asyncio.CancelledError:
            await self._kill(proc)
            logger.info("docker %s cancelled, process group killed", " ".join(args))
            raise

        return DockerResult(
            returncode=proc.returncode,
            stdout=stdout_bytes.decode("utf-8", errors="replace"),
            stderr=stderr_bytes.decode("utf-8", errors="replace"),
        )

    @staticmethod
    async def _kill(proc: asyncio.subprocess.Process) -> None:
        if proc.returncode is None:
            try:
                os.killpg(proc.pid, signal.SIGKILL)
            except ProcessLookupError:
                pass
            except PermissionError:
                proc.kill()
        await proc.wait()
