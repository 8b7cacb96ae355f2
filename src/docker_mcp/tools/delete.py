"""Destructive tool: docker_delete with audit logging."""

from typing import Optional, Sequence

from mcp.types import TextContent

from ..docker_client import DockerCLI
from ..errors import ExecutionFailure
from ..params import DeleteParams
from ..security import AuditLogger
from ..tools import ToolHandler, text_result


class DockerDeleteTool(ToolHandler):
    """Tool for removing a container."""

    description = """Remove a Docker container.

⚠️ WARNING: Removal is irreversible. A running container is only removed when
force=true; otherwise the call fails and the container is left untouched.
Every attempt is recorded in the audit log."""
    params_model = DeleteParams

    def __init__(self, client: DockerCLI, audit_logger: Optional[AuditLogger] = None):
        super().__init__("docker_delete", client)
        self.audit_logger = audit_logger or AuditLogger()

    async def run_tool(self, params: DeleteParams) -> Sequence[TextContent]:
        args = ["rm"]
        if params.force:
            args.append("--force")
        args.append(params.container)

        try:
            await self._docker(*args)
        except ExecutionFailure as e:
            self.audit_logger.log("FAILED", params.container, f"force={params.force} error={e}")
            raise

        self.audit_logger.log("SUCCESS", params.container, f"force={params.force}")
        return text_result(f"✅ Container '{params.container}' removed successfully")
