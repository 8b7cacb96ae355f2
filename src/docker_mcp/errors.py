"""Error taxonomy for Docker tool dispatch."""

from mcp.types import INTERNAL_ERROR, INVALID_PARAMS, METHOD_NOT_FOUND


class DockerToolError(Exception):
    """Base class for errors surfaced to MCP callers."""

    category = "internal_error"
    code = INTERNAL_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class UnknownOperation(DockerToolError):
    """Raised when a tool name is not registered."""

    category = "unknown_operation"
    code = METHOD_NOT_FOUND


class InvalidParameters(DockerToolError):
    """Raised when tool arguments fail validation."""

    category = "invalid_parameters"
    code = INVALID_PARAMS


class ExecutionFailure(DockerToolError):
    """Raised when the docker CLI fails, times out, or returns unusable output."""

    category = "execution_failure"
    code = INTERNAL_ERROR
