"""Image tools: docker_images."""

from typing import Sequence

from mcp.types import TextContent

from ..docker_client import DockerCLI
from ..params import EmptyParams
from ..tools import ToolHandler, text_result

IMAGES_FORMAT = r"table {{.Repository}}\t{{.Tag}}\t{{.ID}}\t{{.CreatedAt}}\t{{.Size}}"


class DockerImagesTool(ToolHandler):
    """Tool for listing local images."""

    description = "List available Docker images"
    params_model = EmptyParams

    def __init__(self, client: DockerCLI):
        super().__init__("docker_images", client)

    async def run_tool(self, params: EmptyParams) -> Sequence[TextContent]:
        result = await self._docker("images", "--format", IMAGES_FORMAT)
        return text_result(result.stdout)
