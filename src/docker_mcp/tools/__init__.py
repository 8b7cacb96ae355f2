"""Tool registry and base classes for MCP tools."""

from typing import List, Sequence, Type

from mcp.types import TextContent, Tool

from ..docker_client import DockerCLI, DockerResult
from ..errors import ExecutionFailure
from ..params import EmptyParams, ToolParams


class ToolHandler:
    """Base class for MCP tool handlers backed by the docker CLI."""

    description: str = ""
    params_model: Type[ToolParams] = EmptyParams

    def __init__(self, name: str, client: DockerCLI):
        """Initialize tool handler with name and docker client."""
        self.name = name
        self.client = client

    def get_tool_description(self) -> Tool:
        """
        Get MCP tool description with input schema.

        The schema is generated from the handler's parameter model so the
        advertised contract and the validation rules cannot drift apart.

        Returns:
            Tool description for MCP
        """
        return Tool(
            name=self.name,
            description=self.description,
            inputSchema=self.params_model.model_json_schema(),
        )

    async def run_tool(self, params: ToolParams) -> Sequence[TextContent]:
        """
        Execute the tool with validated parameters.

        Must be implemented by subclasses.

        Args:
            params: Instance of the handler's params_model

        Returns:
            Sequence of TextContent responses

        Raises:
            ExecutionFailure: if the docker command fails
        """
        raise NotImplementedError

    async def _docker(self, *args: str) -> DockerResult:
        """Run a docker command and raise ExecutionFailure on any failure."""
        result = await self.client.run(args)
        if not result.success:
            detail = result.error_text or f"exit code {result.returncode}"
            raise ExecutionFailure(f"docker {args[0]} failed: {detail}")
        return result


def text_result(text: str) -> List[TextContent]:
    """Wrap a text payload as an MCP tool response."""
    return [TextContent(type="text", text=text)]
