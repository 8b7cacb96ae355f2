"""Read-only container tools: docker_ps, docker_ps_all, docker_port, docker_logs, docker_inspect, docker_stats."""

import json
from typing import Sequence

from mcp.types import TextContent

from ..docker_client import DockerCLI
from ..errors import ExecutionFailure
from ..params import ContainerParams, EmptyParams, LogsParams, StatsParams
from ..tools import ToolHandler, text_result

# Passed verbatim to docker, which expands the \t escapes itself
PS_FORMAT = r"table {{.ID}}\t{{.Names}}\t{{.Image}}\t{{.Status}}\t{{.Ports}}"

NO_PORTS_MESSAGE = "No ports mapped"


class DockerPsTool(ToolHandler):
    """Tool for listing running containers."""

    description = "List running Docker containers"
    params_model = EmptyParams

    def __init__(self, client: DockerCLI):
        super().__init__("docker_ps", client)

    async def run_tool(self, params: EmptyParams) -> Sequence[TextContent]:
        result = await self._docker("ps", "--format", PS_FORMAT)
        return text_result(result.stdout)


class DockerPsAllTool(ToolHandler):
    """Tool for listing all containers, including stopped ones."""

    description = "List all Docker containers (running and stopped)"
    params_model = EmptyParams

    def __init__(self, client: DockerCLI):
        super().__init__("docker_ps_all", client)

    async def run_tool(self, params: EmptyParams) -> Sequence[TextContent]:
        result = await self._docker("ps", "-a", "--format", PS_FORMAT)
        return text_result(result.stdout)


class DockerPortTool(ToolHandler):
    """Tool for showing port mappings of a container."""

    description = "Show mapped ports for a container"
    params_model = ContainerParams

    def __init__(self, client: DockerCLI):
        super().__init__("docker_port", client)

    async def run_tool(self, params: ContainerParams) -> Sequence[TextContent]:
        result = await self._docker("port", params.container)
        return text_result(result.stdout or NO_PORTS_MESSAGE)


class DockerLogsTool(ToolHandler):
    """Tool for tailing container logs."""

    description = "Get logs from a container"
    params_model = LogsParams

    def __init__(self, client: DockerCLI):
        super().__init__("docker_logs", client)

    async def run_tool(self, params: LogsParams) -> Sequence[TextContent]:
        result = await self._docker("logs", "--tail", str(params.tail), params.container)
        return text_result(result.stdout)


class DockerInspectTool(ToolHandler):
    """Tool for dumping container metadata as JSON."""

    description = "Show detailed information about a container"
    params_model = ContainerParams

    def __init__(self, client: DockerCLI):
        super().__init__("docker_inspect", client)

    async def run_tool(self, params: ContainerParams) -> Sequence[TextContent]:
        result = await self._docker("inspect", params.container)

        try:
            data = json.loads(result.stdout)
        except json.JSONDecodeError as e:
            raise ExecutionFailure(
                f"docker inspect returned invalid JSON for '{params.container}': {e}"
            )

        return text_result(json.dumps(data, indent=2))


class DockerStatsTool(ToolHandler):
    """
    Tool for container resource usage.

    With no_stream=false docker keeps streaming until the process is killed,
    so the call only ends on timeout or when the caller cancels it.
    """

    description = "Show container resource usage statistics"
    params_model = StatsParams

    def __init__(self, client: DockerCLI):
        super().__init__("docker_stats", client)

    async def run_tool(self, params: StatsParams) -> Sequence[TextContent]:
        if params.no_stream:
            result = await self._docker("stats", "--no-stream")
        else:
            result = await self._docker("stats")
        return text_result(result.stdout)
