"""MCP server setup and tool registration for docker-mcp-server."""

import logging
from typing import Any, Dict, List, Optional, Sequence

from mcp.server import Server
from mcp.shared.exceptions import McpError
from mcp.types import (
    INTERNAL_ERROR,
    CallToolRequest,
    CallToolResult,
    ErrorData,
    ServerResult,
    TextContent,
    Tool,
)

from .docker_client import DockerCLI
from .errors import DockerToolError, ExecutionFailure, UnknownOperation
from .params import parse_params
from .security import AuditLogger
from .settings import DockerSettings
from .tools import ToolHandler
from .tools.containers import (
    DockerInspectTool,
    DockerLogsTool,
    DockerPortTool,
    DockerPsAllTool,
    DockerPsTool,
    DockerStatsTool,
)
from .tools.delete import DockerDeleteTool
from .tools.images import DockerImagesTool

logger = logging.getLogger(__name__)


def build_tool_handlers(
    client: DockerCLI, audit_logger: Optional[AuditLogger] = None
) -> Dict[str, ToolHandler]:
    """
    Build the registration table of all Docker tools.

    The order of the table is the order tools are advertised in.

    Args:
        client: docker CLI client shared by all handlers
        audit_logger: Audit logger for destructive tools

    Returns:
        Mapping of tool name to handler
    """
    handlers = [
        DockerPsTool(client),
        DockerPsAllTool(client),
        DockerPortTool(client),
        DockerLogsTool(client),
        DockerInspectTool(client),
        DockerStatsTool(client),
        DockerImagesTool(client),
        DockerDeleteTool(client, audit_logger),
    ]
    return {handler.name: handler for handler in handlers}


settings = DockerSettings.from_environment()

# Create MCP server
app = Server("docker-mcp-server")

# Initialize all tool handlers
TOOL_HANDLERS = build_tool_handlers(
    DockerCLI(settings.docker_bin, settings.timeout),
    AuditLogger(settings.audit_log),
)


def list_operations(handlers: Optional[Dict[str, ToolHandler]] = None) -> List[Tool]:
    """Return the descriptors of all registered tools, in registration order."""
    handlers = TOOL_HANDLERS if handlers is None else handlers
    return [handler.get_tool_description() for handler in handlers.values()]


async def dispatch(
    name: str,
    arguments: Optional[Dict[str, Any]],
    handlers: Optional[Dict[str, ToolHandler]] = None,
) -> Sequence[TextContent]:
    """
    Validate arguments and run the named tool.

    Args:
        name: Tool name
        arguments: Raw tool arguments from the caller
        handlers: Registration table (default: TOOL_HANDLERS)

    Returns:
        Sequence of TextContent responses

    Raises:
        UnknownOperation: if no tool is registered under name
        InvalidParameters: if arguments fail validation
        ExecutionFailure: if the docker command fails
    """
    handlers = TOOL_HANDLERS if handlers is None else handlers
    handler = handlers.get(name)

    if not handler:
        raise UnknownOperation(
            "Unknown tool: {}. Available tools: {}".format(name, ", ".join(handlers.keys()))
        )

    params = parse_params(handler.params_model, arguments)
    logger.info("Running %s", name)
    return await handler.run_tool(params)


@app.list_tools()
async def list_tools() -> list[Tool]:
    """
    List all available Docker tools.

    Returns:
        List of Tool descriptions for MCP
    """
    return list_operations()


async def call_tool(name: str, arguments: Optional[dict]) -> Sequence[TextContent]:
    """
    Execute a Docker tool with given arguments.

    Args:
        name: Tool name to execute
        arguments: Tool arguments from MCP

    Returns:
        Sequence of TextContent responses

    Raises:
        McpError: carrying the JSON-RPC error code, message and error category
    """
    try:
        return await dispatch(name, arguments)
    except DockerToolError as e:
        logger.warning("%s failed (%s): %s", name, e.category, e.message)
        message = e.message
        if isinstance(e, ExecutionFailure):
            message = f"Error executing {name}: {message}"
        raise McpError(ErrorData(code=e.code, message=message, data={"category": e.category}))
    except Exception as e:
        logger.exception("Unexpected error executing %s", name)
        raise McpError(ErrorData(
            code=INTERNAL_ERROR,
            message=f"Error executing {name}: {type(e).__name__}: {e}",
            data={"category": DockerToolError.category},
        ))


async def handle_call_tool(req: CallToolRequest) -> ServerResult:
    """
    tools/call request handler.

    Registered without app.call_tool() so that params.py is the only argument
    validator and McpError reaches the client as a JSON-RPC error response.
    """
    content = await call_tool(req.params.name, req.params.arguments)
    return ServerResult(CallToolResult(content=list(content), isError=False))


app.request_handlers[CallToolRequest] = handle_call_tool
