"""Server configuration loaded from environment variables."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)


@dataclass
class DockerSettings:
    """Runtime settings for the Docker MCP server."""

    docker_bin: str = "docker"
    timeout: Optional[float] = None  # seconds, None means no limit
    audit_log: Path = Path.home() / ".docker-mcp-audit.log"
    log_level: str = "INFO"

    @classmethod
    def from_environment(cls) -> "DockerSettings":
        """
        Load settings from environment variables.

        Recognized variables:
            DOCKER_MCP_DOCKER_BIN: docker executable (default: docker)
            DOCKER_MCP_TIMEOUT: max seconds per docker invocation (default: unlimited)
            DOCKER_MCP_AUDIT_LOG: audit log path for destructive operations
            DOCKER_MCP_LOG_LEVEL: log level for stderr logging (default: INFO)

        Returns:
            DockerSettings populated from the environment
        """
        settings = cls()

        docker_bin = os.getenv("DOCKER_MCP_DOCKER_BIN")
        if docker_bin:
            settings.docker_bin = docker_bin

        raw_timeout = os.getenv("DOCKER_MCP_TIMEOUT")
        if raw_timeout:
            try:
                timeout = float(raw_timeout)
            except ValueError:
                logger.warning("Ignoring invalid DOCKER_MCP_TIMEOUT=%r", raw_timeout)
            else:
                if timeout > 0:
                    settings.timeout = timeout
                else:
                    logger.warning("Ignoring non-positive DOCKER_MCP_TIMEOUT=%r", raw_timeout)

        audit_log = os.getenv("DOCKER_MCP_AUDIT_LOG")
        if audit_log:
            settings.audit_log = Path(audit_log).expanduser()

        log_level = os.getenv("DOCKER_MCP_LOG_LEVEL")
        if log_level:
            # getLevelName returns an int only for registered level names
            if isinstance(logging.getLevelName(log_level.upper()), int):
                settings.log_level = log_level.upper()
            else:
                logger.warning("Ignoring unknown DOCKER_MCP_LOG_LEVEL=%r", log_level)

        return settings
